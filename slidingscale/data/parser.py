"""
Document parsing.

Converts raw camelCase documents into the model dataclasses the engines
work with.
"""

from typing import Optional

from ..formatting import coerce_amount
from ..models import (
    YearConfig,
    AttendanceDecision,
    FamilyRecord,
    ContractRecord,
)
from .loader import DataLoader


class RecordParser:
    """
    Parses year, family and contract documents into models.

    DOCUMENT QUIRKS:
    ----------------
    - grossFamilyIncome is null when the family opted out or never answered
    - studentDecisions values are the stored decision strings; anything
      unrecognised becomes None (no decision yet)
    - contract ids are the family id, the year comes from the collection
    """

    def __init__(self, data_loader: DataLoader):
        self.loader = data_loader

    @staticmethod
    def parse_year(doc: dict, year_id: str = "") -> YearConfig:
        return YearConfig.from_document(doc, year_id)

    @staticmethod
    def parse_family(doc: dict, family_id: str = "") -> FamilyRecord:
        """Parse a family document; only tuition-relevant fields are kept."""
        income = doc.get("grossFamilyIncome")
        students = doc.get("students") or []
        return FamilyRecord(
            id=str(doc.get("id") or family_id),
            name=doc.get("name", ""),
            gross_income=None if income is None else coerce_amount(income),
            sliding_scale_opt_out=bool(doc.get("slidingScaleOptOut", False)),
            student_ids=[s["id"] for s in students if s.get("id")],
        )

    @staticmethod
    def parse_contract(doc: dict, year_id: str, family_id: str) -> ContractRecord:
        decisions = {
            student_id: AttendanceDecision.parse(value)
            for student_id, value in (doc.get("studentDecisions") or {}).items()
        }
        tuition = doc.get("tuition")
        return ContractRecord(
            id=str(doc.get("id") or family_id),
            year_id=year_id,
            family_id=family_id,
            student_decisions=decisions,
            tuition=None if tuition is None else coerce_amount(tuition),
            is_signed=bool(doc.get("isSigned", False)),
        )

    def year(self, year_id: str) -> YearConfig:
        return self.parse_year(self.loader.get_year_document(year_id), year_id)

    def family(self, family_id: str) -> FamilyRecord:
        return self.parse_family(self.loader.get_family_document(family_id), family_id)

    def contract(self, year_id: str, family_id: str) -> Optional[ContractRecord]:
        doc = self.loader.find_contract_document(year_id, family_id)
        if doc is None:
            return None
        return self.parse_contract(doc, year_id, family_id)

    def previous_year_contract(self, year_id: str, family_id: str) -> Optional[ContractRecord]:
        """Last year's contract for the family, used for the year-over-year band."""
        previous_year_id = self.loader.previous_year_id(year_id)
        if previous_year_id is None:
            return None
        return self.contract(previous_year_id, family_id)

    def contracts_for_year(self, year_id: str) -> list:
        return [
            self.parse_contract(doc, year_id, family_id)
            for family_id, doc in self.loader.list_contract_documents(year_id).items()
        ]
