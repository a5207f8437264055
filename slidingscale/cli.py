"""
Command-Line Interface for the sliding-scale tuition system.

This module provides the interactive CLI. It handles user input and
hands everything else to the TuitionAdvisor.

MODES:
------
1. SCALE DESIGNER: Try out income/tuition bounds and steepness
2. YEAR CHART: Show a saved year's published sliding scale
3. CONTRACT QUOTE: Quote tuition for a family's contract
4. QUICK CALCULATION: Tuition for a single income

Run with:
    python -m slidingscale
"""

import logging
import os

from .advisor import TuitionAdvisor
from .config import (
    DEFAULT_MINIMUM_INCOME,
    DEFAULT_MAXIMUM_INCOME,
    DEFAULT_MINIMUM_TUITION,
    DEFAULT_MAXIMUM_TUITION,
    DEFAULT_STEEPNESS,
)
from .engines import SCENARIOS
from .formatting import parse_currency
from .models import YearConfig, AttendanceDecision
from .ui import TerminalDisplay


def _ask_amount(prompt: str, default: float) -> float:
    """Prompt for a currency amount; blank or invalid input keeps the default."""
    try:
        raw = input(f"  {prompt} [{default:,.0f}]: ").strip()
    except EOFError:
        return default
    value = parse_currency(raw)
    return value if value else default


def _ask_count(prompt: str, default: int) -> int:
    """Prompt for a student count; blank, invalid or negative input keeps the default."""
    try:
        raw = input(f"  {prompt} [{default}]: ").strip()
        value = int(raw) if raw else default
    except (ValueError, EOFError):
        return default
    return value if value >= 0 else default


def _ask_choice(prompt: str, options: list, default_index: int = 0):
    """Prompt for one of a numbered list of options."""
    for i, option in enumerate(options, 1):
        print(f"    {i}. {option}")
    try:
        choice = input(f"\n  {prompt} (1-{len(options)}): ").strip()
        return options[int(choice) - 1]
    except (ValueError, IndexError, EOFError):
        print(f"  → Using default: {options[default_index]}")
        return options[default_index]


def _run_designer(advisor: TuitionAdvisor) -> list:
    """
    Run the Scale Designer mode.

    Blank answers keep the default bounds, so pressing Enter through every
    prompt shows the standard scale.
    """
    print(f"\n{TerminalDisplay.BOLD}Sliding scale parameters:{TerminalDisplay.RESET}")
    min_income = _ask_amount("Minimum income", DEFAULT_MINIMUM_INCOME)
    max_income = _ask_amount("Maximum income", DEFAULT_MAXIMUM_INCOME)
    min_tuition = _ask_amount("Minimum tuition", DEFAULT_MINIMUM_TUITION)
    max_tuition = _ask_amount("Maximum tuition", DEFAULT_MAXIMUM_TUITION)

    try:
        raw = input(f"  Curve steepness [{DEFAULT_STEEPNESS}]: ").strip()
        steepness = float(raw) if raw else DEFAULT_STEEPNESS
    except (ValueError, EOFError):
        steepness = DEFAULT_STEEPNESS

    # Same recovery as the designer form: an inverted bound snaps back
    if max_income <= min_income:
        max_income = DEFAULT_MAXIMUM_INCOME
    if max_tuition <= min_tuition:
        max_tuition = DEFAULT_MAXIMUM_TUITION

    print(f"\n{TerminalDisplay.BOLD}Family type:{TerminalDisplay.RESET}")
    scenario = _ask_choice("Select", list(SCENARIOS))

    year = YearConfig(
        min_income=min_income,
        max_income=max_income,
        min_tuition=min_tuition,
        max_tuition=max_tuition,
        steepness=steepness,
        name="Designer",
    )
    return advisor.run_designer(year, scenario)


def _select_year(advisor: TuitionAdvisor):
    year_ids = advisor.list_years()
    if not year_ids:
        print(f"  {TerminalDisplay.YELLOW}No years found.{TerminalDisplay.RESET}")
        return None
    print(f"\n{TerminalDisplay.BOLD}Select school year:{TerminalDisplay.RESET}")
    return _ask_choice("Enter number", year_ids, default_index=len(year_ids) - 1)


def _select_family(advisor: TuitionAdvisor):
    families = advisor.list_families()
    if not families:
        print(f"  {TerminalDisplay.YELLOW}No families found.{TerminalDisplay.RESET}")
        return None
    print(f"\n{TerminalDisplay.BOLD}Select family:{TerminalDisplay.RESET}")
    labels = [name for _, name in families]
    name = _ask_choice("Enter number", labels)
    return families[labels.index(name)][0]


def _run_quick_calculation(advisor: TuitionAdvisor) -> int:
    """Tuition for one income, using the defaults or a saved year."""
    try:
        raw = input("\n  Gross family income (blank = not entered): ").strip()
    except EOFError:
        raw = ""
    income = parse_currency(raw) if raw else None

    full_time = _ask_count("Full-time students", 1)
    part_time = _ask_count("Part-time students", 0)

    decisions = {}
    for i in range(full_time):
        decisions[f"ft{i}"] = AttendanceDecision.FULL_TIME
    for i in range(part_time):
        decisions[f"pt{i}"] = AttendanceDecision.PART_TIME

    return advisor.quick_calculation(income, advisor.get_year(None), decisions)


def _configure_logging():
    level = logging.DEBUG if os.environ.get("SLIDINGSCALE_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main():
    """
    Command-line interface for the tuition calculator.

    ═══════════════════════════════════════════════════════════════════════════
    AVAILABLE MODES
    ═══════════════════════════════════════════════════════════════════════════

    1. SCALE DESIGNER: interactive what-if table over fixed income steps.
    2. YEAR CHART: the sliding scale families see for a saved year.
    3. CONTRACT QUOTE: minimum and suggested tuition for one family.
    4. QUICK CALCULATION: one income, one composition.

    ═══════════════════════════════════════════════════════════════════════════
    """
    _configure_logging()
    advisor = TuitionAdvisor()

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         SLIDING SCALE TUITION                                    ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 📐 SCALE DESIGNER    - Try out a sliding scale               ║")
    print("║  2. 📊 YEAR CHART        - Published scale for a year            ║")
    print("║  3. 📝 CONTRACT QUOTE    - Tuition for a family                  ║")
    print("║  4. 🧮 QUICK CALCULATION - Tuition for one income                ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    try:
        mode = input(f"{TerminalDisplay.BOLD}Select mode (1-4): {TerminalDisplay.RESET}").strip()
    except EOFError:
        mode = "1"

    if mode == "4":
        _run_quick_calculation(advisor)
        return
    if mode not in ("2", "3"):
        _run_designer(advisor)
        return

    try:
        year_id = _select_year(advisor)
        if year_id is None:
            return
        if mode == "2":
            advisor.run_year_chart(year_id)
            return
        family_id = _select_family(advisor)
        if family_id is not None:
            advisor.run_contract_quote(year_id, family_id)
    except (FileNotFoundError, LookupError) as e:
        TerminalDisplay.print_error(str(e))


if __name__ == "__main__":
    main()
