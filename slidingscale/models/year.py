"""
School year data model.

Contains the YearConfig dataclass holding a year's sliding-scale bounds.
"""

from dataclasses import dataclass

from ..config import (
    DEFAULT_MINIMUM_INCOME,
    DEFAULT_MAXIMUM_INCOME,
    DEFAULT_MINIMUM_TUITION,
    DEFAULT_MAXIMUM_TUITION,
    DEFAULT_STEEPNESS,
)
from ..formatting import coerce_amount


def _bound(doc: dict, key: str, default: float) -> float:
    # A zero or missing bound means "not configured", use the default
    value = coerce_amount(doc.get(key), 0.0)
    return value if value else float(default)


@dataclass(frozen=True)
class YearConfig:
    """
    Sliding-scale configuration for a single school year.

    The calculator trusts these values: it does NOT check that the ranges
    are well ordered. Call `problems()` before relying on the output of an
    admin-entered configuration.

    Attributes:
        min_income: Incomes at or below this pay `min_tuition`
        max_income: Incomes at or above this pay `max_tuition`
        min_tuition: Per-student floor of the scale
        max_tuition: Per-student ceiling of the scale
        steepness: Curve shape; larger values delay tuition increases
        id: Year document id (e.g., "2025-2026")
        name: Display name
        is_accepting_registrations: Whether families can currently enroll
    """
    min_income: float = DEFAULT_MINIMUM_INCOME
    max_income: float = DEFAULT_MAXIMUM_INCOME
    min_tuition: float = DEFAULT_MINIMUM_TUITION
    max_tuition: float = DEFAULT_MAXIMUM_TUITION
    steepness: float = DEFAULT_STEEPNESS
    id: str = ""
    name: str = ""
    is_accepting_registrations: bool = False

    @classmethod
    def from_document(cls, doc: dict, year_id: str = "") -> "YearConfig":
        """Build a YearConfig from a camelCase year document."""
        doc = doc or {}
        return cls(
            min_income=_bound(doc, "minimumIncome", DEFAULT_MINIMUM_INCOME),
            max_income=_bound(doc, "maximumIncome", DEFAULT_MAXIMUM_INCOME),
            min_tuition=_bound(doc, "minimumTuition", DEFAULT_MINIMUM_TUITION),
            max_tuition=_bound(doc, "maximumTuition", DEFAULT_MAXIMUM_TUITION),
            steepness=_bound(doc, "steepness", DEFAULT_STEEPNESS),
            id=str(doc.get("id") or year_id),
            name=str(doc.get("name") or doc.get("id") or year_id),
            is_accepting_registrations=bool(doc.get("isAcceptingRegistrations", False)),
        )

    def problems(self) -> list:
        """
        List the precondition violations of this configuration.

        Returns:
            Human-readable messages; empty when the year is well ordered.
        """
        issues = []
        if self.min_income >= self.max_income:
            issues.append(
                f"minimum income ({self.min_income:g}) must be below "
                f"maximum income ({self.max_income:g})"
            )
        if self.min_tuition >= self.max_tuition:
            issues.append(
                f"minimum tuition ({self.min_tuition:g}) must be below "
                f"maximum tuition ({self.max_tuition:g})"
            )
        if self.steepness <= 0:
            issues.append(f"steepness ({self.steepness:g}) must be positive")
        return issues
