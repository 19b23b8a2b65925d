"""Australian mortgage repayment, stamp duty, LMI and borrowing power calculator."""

from homeloan.frequency import Frequency, convert_frequency
from homeloan.jurisdictions import Jurisdiction
from homeloan.model import MortgageResults, calculate
from homeloan.params import AffordabilityScenario, LoanScenario

__all__ = [
    "AffordabilityScenario",
    "Frequency",
    "Jurisdiction",
    "LoanScenario",
    "MortgageResults",
    "calculate",
    "convert_frequency",
]
