"""
Data loading and caching.

This module reads the exported year, family and contract documents with
caching so repeated lookups during a session never touch the disk twice.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import DATA_DIR, YEARS_FILE, FAMILIES_FILE, CONTRACTS_FILE

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches the portal's exported documents.

    WHY LAZY LOADING: Properties only load files when first accessed.
    The sliding-scale designer never needs families or contracts, so those
    files aren't read unless asked for.

    DATA SOURCES (all JSON objects keyed by document id):
    - years.json: year id -> year document (sliding-scale bounds)
    - families.json: family id -> family document (income, students)
    - contracts.json: year id -> {family id -> contract document}
      (a family has at most one contract per year, keyed by family id)

    Usage:
        loader = DataLoader()
        year_doc = loader.get_year_document("2025-2026")
        previous = loader.previous_year_id("2025-2026")   # "2024-2025"
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir else DATA_DIR
        # Private cache variables - None means "not loaded yet"
        self._years = None
        self._families = None
        self._contracts = None

    def _load(self, filename: str) -> dict:
        filepath = self.data_dir / filename
        if not filepath.exists():
            raise FileNotFoundError(f"Data file not found: {filepath}")
        logger.debug("Loading %s", filepath)
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)

    @property
    def years(self) -> dict:
        """Year documents keyed by year id."""
        if self._years is None:
            self._years = self._load(YEARS_FILE)
        return self._years

    @property
    def families(self) -> dict:
        """Family documents keyed by family id."""
        if self._families is None:
            self._families = self._load(FAMILIES_FILE)
        return self._families

    @property
    def contracts(self) -> dict:
        """Contract documents keyed by year id, then family id."""
        if self._contracts is None:
            self._contracts = self._load(CONTRACTS_FILE)
        return self._contracts

    def list_year_ids(self) -> list:
        """Year ids in chronological order ("2024-2025" sorts before "2025-2026")."""
        return sorted(self.years.keys())

    def list_family_ids(self) -> list:
        """Family ids sorted by family name."""
        return sorted(self.families.keys(), key=lambda fid: self.families[fid].get("name") or fid)

    def get_year_document(self, year_id: str) -> dict:
        if year_id not in self.years:
            raise LookupError(f"No year found for: {year_id}")
        return self.years[year_id]

    def get_family_document(self, family_id: str) -> dict:
        if family_id not in self.families:
            raise LookupError(f"No family found for: {family_id}")
        return self.families[family_id]

    def find_contract_document(self, year_id: str, family_id: str) -> Optional[dict]:
        """Contract for a family in a year, or None if they never registered."""
        return self.contracts.get(year_id, {}).get(family_id)

    def list_contract_documents(self, year_id: str) -> dict:
        """All contracts for a year keyed by family id."""
        return self.contracts.get(year_id, {})

    def previous_year_id(self, year_id: str) -> Optional[str]:
        """The year immediately before `year_id`, or None for the first year."""
        year_ids = self.list_year_ids()
        if year_id not in year_ids:
            return None
        index = year_ids.index(year_id)
        return year_ids[index - 1] if index > 0 else None
