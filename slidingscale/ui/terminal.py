"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the slidingscale package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import MAX_YEAR_OVER_YEAR_CHANGE
from ..formatting import format_currency
from ..models import (
    YearConfig,
    FamilyRecord,
    TuitionQuote,
    ScaleRow,
    ChartRow,
)


class TerminalDisplay:
    """
    Pretty terminal output for sliding-scale tables and contract quotes.

    Every method takes plain dataclasses from the engines and prints them.
    None of them compute tuition.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    WIDTH = 70

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_warnings(cls, messages: list):
        for message in messages:
            print(f"  {cls.YELLOW}⚠ {message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}Error: {message}{cls.RESET}")

    @classmethod
    def print_year(cls, year: YearConfig):
        """Print a year's sliding-scale parameters."""
        cls.print_header(f"SLIDING SCALE: {(year.name or 'DEFAULT YEAR').upper()}")
        print(f"  {cls.BOLD}Income Range:{cls.RESET} "
              f"{format_currency(year.min_income)} – {format_currency(year.max_income)}")
        print(f"  {cls.BOLD}Tuition Range:{cls.RESET} "
              f"{format_currency(year.min_tuition)} – {format_currency(year.max_tuition)}")
        print(f"  {cls.BOLD}Curve Steepness:{cls.RESET} {year.steepness:.2f}")
        cls.print_warnings(year.problems())

    @classmethod
    def print_designer_table(cls, rows: list, scenario: str = "new"):
        """Print the sliding-scale designer table."""
        returning = scenario == "returning"
        cls.print_subheader("New Families" if not returning else "Returning Families")

        header = f"  {cls.BOLD}{'INCOME':>12} {'NEW FAMILY':>12}"
        if returning:
            header += f" {'RETURNING':>12}"
        header += f" {'MONTHLY':>10} {'PART TIME':>12}{cls.RESET}"
        print(header)
        print(f"  {cls.DIM}{'-' * (62 if returning else 50)}{cls.RESET}")

        for row in rows:
            print(cls._designer_line(row, returning))

    @classmethod
    def _designer_line(cls, row: ScaleRow, returning: bool) -> str:
        line = f"  {format_currency(row.income):>12} {format_currency(row.new_family_tuition):>12}"
        if returning:
            line += f" {format_currency(row.returning_family_tuition):>12}"
        line += f" {format_currency(row.monthly_tuition):>10} {format_currency(row.part_time_tuition):>12}"
        return line

    @classmethod
    def print_chart(cls, rows: list):
        """Print the published per-year sliding scale."""
        cls.print_subheader("Sliding Scale")
        print(f"  {cls.BOLD}{'INCOME':>12} {'FULL TIME':>12} {'PART TIME':>12} "
              f"{'2 SIBLINGS':>12} {'3 SIBLINGS':>12}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 64}{cls.RESET}")
        for row in rows:
            print(cls._chart_line(row))

    @classmethod
    def _chart_line(cls, row: ChartRow) -> str:
        return (f"  {format_currency(row.income):>12} {format_currency(row.full_time):>12} "
                f"{format_currency(row.part_time):>12} {format_currency(row.two_siblings):>12} "
                f"{format_currency(row.three_siblings):>12}")

    @classmethod
    def print_quote(cls, family: FamilyRecord, quote: TuitionQuote,
                    tuition: float = None, assistance: float = 0):
        """
        Print a contract tuition quote.

        Mirrors the contract editor: income, composition, per-role rates,
        then the minimum and suggested tuition with any assistance needed.
        """
        cls.print_header(f"CONTRACT: {family.name.upper() or family.id}")

        if family.sliding_scale_opt_out or family.gross_income is None:
            income_str = f"{cls.YELLOW}Opted out (full tuition rate){cls.RESET}"
        else:
            income_str = format_currency(family.gross_income)
        print(f"  {cls.BOLD}Gross Income:{cls.RESET} {income_str}")

        comp = quote.composition
        print(f"  {cls.BOLD}Students:{cls.RESET} {comp.full_time} full time, "
              f"{comp.siblings} sibling(s), {comp.part_time} part time")

        cls.print_subheader("Rates")
        print(f"  Full Time:  {format_currency(quote.full_time_rate)}")
        print(f"  Sibling:    {format_currency(quote.sibling_rate)}")
        print(f"  Part Time:  {format_currency(quote.part_time_rate)}")

        cls.print_subheader("Tuition")
        print(f"  {cls.BOLD}Sliding Scale:{cls.RESET} {format_currency(quote.sliding_scale_tuition)}")
        print(f"  {cls.BOLD}Minimum:{cls.RESET}       {format_currency(quote.minimum_tuition)}")
        if quote.year_over_year_applied:
            print(f"  {cls.DIM}  └─ held within {MAX_YEAR_OVER_YEAR_CHANGE:.0%} of last year's "
                  f"{format_currency(quote.prior_tuition)}{cls.RESET}")
        print(f"  {cls.BOLD}Suggested:{cls.RESET}     {cls.GREEN}{format_currency(quote.suggested_tuition)}{cls.RESET}")

        if tuition is not None:
            print(f"  {cls.BOLD}Contract:{cls.RESET}      {format_currency(tuition)}")
            if assistance:
                print(f"  {cls.YELLOW}Tuition assistance needed: {format_currency(assistance)}{cls.RESET}")

    @classmethod
    def print_totals(cls, totals: dict):
        """Print the committed tuition summary for a year."""
        cls.print_subheader("Year Totals")
        print(f"  {cls.BOLD}Students:{cls.RESET} {totals['students']}")
        print(f"  {cls.BOLD}Total Tuition:{cls.RESET} {format_currency(totals['total'])}")
        print(f"  {cls.GREEN}Signed:{cls.RESET}   {format_currency(totals['signed'])}")
        print(f"  {cls.YELLOW}Unsigned:{cls.RESET} {format_currency(totals['unsigned'])}")

    @classmethod
    def print_calculation(cls, income, tuition: float):
        """Print the result of a quick one-off calculation."""
        income_str = "not entered (maximum rate)" if income is None else format_currency(income)
        print(f"\n  {cls.BOLD}Income:{cls.RESET} {income_str}")
        print(f"  {cls.BOLD}Tuition:{cls.RESET} {cls.GREEN}{format_currency(tuition)}{cls.RESET}")
