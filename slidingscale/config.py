"""
Configuration constants for the sliding-scale tuition system.

This module contains all configuration values and constants used throughout
the tuition calculator. Centralizing these makes it easy to adjust
policy from one school year to the next.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.environ.get("SLIDINGSCALE_DATA_DIR", BASE_DIR / "data"))

YEARS_FILE = "years.json"
FAMILIES_FILE = "families.json"
CONTRACTS_FILE = "contracts.json"


# =============================================================================
# SLIDING SCALE DEFAULTS
# =============================================================================
# Used whenever a year document leaves a bound unset (or zero).

DEFAULT_MINIMUM_INCOME = 28000
DEFAULT_MAXIMUM_INCOME = 120000

DEFAULT_MINIMUM_TUITION = 1000
DEFAULT_MAXIMUM_TUITION = 12500

# Steepness of 1 would be a straight line; higher values push the tuition
# increases toward the top of the income band.
DEFAULT_STEEPNESS = 1.56

# Added to steepness before the exponent transform so it never equals 1.
STEEPNESS_EPSILON = 0.01


# =============================================================================
# COMPOSITION FACTORS
# =============================================================================
# The first full-time student pays the whole base rate. Every additional
# full-time student is a "sibling"; part-time students pay a fraction.

FULL_TIME_FACTOR = 1.0
SIBLING_DISCOUNT_FACTOR = 0.5
PART_TIME_DISCOUNT_FACTOR = 0.625


# =============================================================================
# YEAR-OVER-YEAR POLICY
# =============================================================================

# Returning families with unchanged attendance move at most 10% either way
MAX_YEAR_OVER_YEAR_CHANGE = 0.1

# Flat amount added to the base rate per inflation period (never applied
# at or below the minimum income)
INFLATION_INCREASE = 250


# =============================================================================
# CONTRACT EDITING
# =============================================================================

# The +/- buttons in the contract editor move tuition on a $50 grid
TUITION_STEP = 50

MONTHS_PER_YEAR = 12


# =============================================================================
# SLIDING SCALE DESIGNER / YEAR CHART
# =============================================================================

DESIGNER_INCOME_STEPS = [
    0, 5000, 10000, 15000, 20000, 30000, 40000, 50000, 60000, 70000, 80000,
    90000, 100000, 120000, 140000, 160000, 180000, 200000, 250000, 300000,
    400000, 500000,
]

# Simulated prior-year tuition for the "returning family" scenario
RETURNING_PRIOR_RATIO = 0.9

CURVE_POINT_COUNT = 100
CURVE_MIN_INCOME_FLOOR = 10000
CURVE_INCOME_PADDING_BELOW = 10000
CURVE_INCOME_PADDING_ABOVE = 50000

CHART_START_INCOME = 10000
CHART_INCOME_INCREMENT = 5000
