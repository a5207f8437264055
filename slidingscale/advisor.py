"""
Tuition Advisor - Main Orchestrator.

This module contains the TuitionAdvisor class that connects the
calculation layer to the presentation layer.
"""

import logging
from typing import Optional

from .data import DataLoader, RecordParser
from .engines import (
    ContractTuitionEngine,
    designer_rows,
    chart_rows,
    tuition_for_income,
    calculate_tuition_options,
    assistance_amount,
    all_decisions_made,
    resolve_tuition,
    tuition_totals,
)
from .formatting import round_currency
from .models import YearConfig
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class TuitionAdvisor:
    """
    Main interface for the sliding-scale tuition system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the calculation layer to the presentation layer:

    1. Receives a request (year, family, scenario)
    2. Loads documents and calls the engines to get results (pure data)
    3. Passes that data to the presentation layer for display

    TO CHANGE THE UI:
    -----------------
    Replace `self.display = TerminalDisplay()` with your custom display class.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = TuitionAdvisor()

        # Preview a candidate scale before saving it to a year
        advisor.run_designer(YearConfig(max_income=130000), scenario="returning")

        # Quote a family's contract
        result = advisor.run_contract_quote("2025-2026", "garcia")
    """

    def __init__(self, data_dir=None):
        self.loader = DataLoader(data_dir)
        self.parser = RecordParser(self.loader)
        self.display = TerminalDisplay()

    def list_years(self) -> list:
        """All year ids, oldest first."""
        return self.loader.list_year_ids()

    def list_families(self) -> list:
        """(family id, family name) pairs sorted by name."""
        return [
            (family_id, self.loader.families[family_id].get("name") or family_id)
            for family_id in self.loader.list_family_ids()
        ]

    def get_year(self, year_id: Optional[str]) -> YearConfig:
        """Year configuration by id; None means the built-in defaults."""
        if year_id is None:
            return YearConfig(name="Defaults")
        return self.parser.year(year_id)

    def run_designer(self, year: YearConfig, scenario: str = "new") -> list:
        """
        Show the sliding-scale designer table for a (possibly unsaved) scale.

        Returns:
            List of ScaleRow
        """
        self.display.print_year(year)
        rows = designer_rows(year, scenario)
        self.display.print_designer_table(rows, scenario)
        return rows

    def run_year_chart(self, year_id: str) -> list:
        """
        Show the published sliding scale and committed totals for a year.

        Returns:
            List of ChartRow
        """
        year = self.get_year(year_id)
        self.display.print_year(year)

        rows = chart_rows(year)
        self.display.print_chart(rows)

        contracts = self.parser.contracts_for_year(year_id)
        if contracts:
            self.display.print_totals(tuition_totals(contracts))
        return rows

    def run_contract_quote(self, year_id: str, family_id: str) -> dict:
        """
        Quote tuition for a family's contract in a year.

        STEPS:
        1. Load the year, family, this year's contract and last year's
        2. Run the contract engine (sliding scale, minimum, suggested)
        3. Work out the tuition to show and any assistance needed
        4. Display everything

        Returns:
            Dict with family, contract, quote, tuition and assistance
        """
        year = self.get_year(year_id)
        family = self.parser.family(family_id)
        contract = self.parser.contract(year_id, family_id)
        prior_contract = self.parser.previous_year_contract(year_id, family_id)

        decisions = contract.student_decisions if contract else {}
        engine = ContractTuitionEngine(year)
        quote = engine.quote(family, decisions, prior_contract)

        tuition = None
        assistance = 0
        if all_decisions_made(family.student_ids, decisions):
            # Decisions come from the saved contract, so only a missing contract
            # counts as a change
            tuition = resolve_tuition(quote, contract is None, contract.tuition if contract else None)
            assistance = assistance_amount(tuition, quote.minimum_tuition)
        else:
            logger.info("Family %s has students without an attendance decision", family_id)

        self.display.print_quote(family, quote, tuition, assistance)

        return {
            "family": family,
            "contract": contract,
            "quote": quote,
            "tuition": tuition,
            "assistance": assistance,
        }

    def quick_calculation(self, income: Optional[float], year: YearConfig,
                          student_decisions: Optional[dict] = None) -> int:
        """
        One-off calculation for an income and a set of attendance decisions.

        With no decisions, a single full-time student is assumed. An empty
        mapping means no students attend, which costs nothing.
        """
        if student_decisions is not None:
            options = calculate_tuition_options(student_decisions).as_options()
        else:
            options = {"full_time": 1}
        tuition = round_currency(tuition_for_income(income, year, **options))
        self.display.print_calculation(income, tuition)
        return tuition
