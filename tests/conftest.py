import json

import pytest

from slidingscale.models import YearConfig


YEARS = {
    "2024-2025": {
        "name": "2024-2025",
        "minimumIncome": 28000,
        "maximumIncome": 115000,
        "minimumTuition": 1000,
        "maximumTuition": 12000,
    },
    "2025-2026": {
        "name": "2025-2026",
        "minimumIncome": 28000,
        "maximumIncome": 120000,
        "minimumTuition": 1000,
        "maximumTuition": 12500,
        "steepness": 1.56,
        "isAcceptingRegistrations": True,
    },
}

FAMILIES = {
    "garcia": {
        "name": "Garcia",
        "grossFamilyIncome": 74000,
        "students": [{"id": "garcia-ana"}, {"id": "garcia-luis"}],
    },
    "nguyen": {
        "name": "Nguyen",
        "grossFamilyIncome": None,
        "slidingScaleOptOut": True,
        "students": [{"id": "nguyen-minh"}],
    },
    "okafor": {
        "name": "Okafor",
        "grossFamilyIncome": 250000,
        "students": [{"id": "okafor-ada"}, {"id": "okafor-obi"}],
    },
}

CONTRACTS = {
    "2024-2025": {
        "garcia": {
            "studentDecisions": {"garcia-ana": "Full Time", "garcia-luis": "Full Time"},
            "tuition": 8000,
            "isSigned": True,
        },
    },
    "2025-2026": {
        "garcia": {
            "studentDecisions": {"garcia-ana": "Full Time", "garcia-luis": "Full Time"},
            "tuition": 8800,
            "isSigned": False,
        },
        "okafor": {
            "studentDecisions": {"okafor-ada": "Full Time", "okafor-obi": "Part Time"},
            "tuition": 20313,
            "isSigned": True,
        },
        "nguyen": {
            "studentDecisions": {"nguyen-minh": ""},
        },
    },
}


@pytest.fixture
def example_year():
    """The reference configuration used throughout the docs."""
    return YearConfig(
        min_income=28000,
        max_income=120000,
        min_tuition=1000,
        max_tuition=12500,
        steepness=1.56,
    )


@pytest.fixture
def data_dir(tmp_path):
    for filename, payload in (
        ("years.json", YEARS),
        ("families.json", FAMILIES),
        ("contracts.json", CONTRACTS),
    ):
        (tmp_path / filename).write_text(json.dumps(payload), encoding="utf-8")
    return tmp_path
