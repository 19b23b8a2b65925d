"""Input parameters for mortgage and affordability calculations."""

from dataclasses import dataclass

from homeloan.jurisdictions import Jurisdiction


@dataclass(frozen=True)
class AffordabilityScenario:
    """Inputs for the maximum borrowing estimate."""

    annual_income: float = 150_000
    monthly_expenses: float = 2_500  # $/month living expenses
    annual_rate_percent: float = 6.2
    term_years: int = 30
    deposit_fraction: float = 0.20


@dataclass(frozen=True)
class LoanScenario:
    """A property purchase and the loan that funds it."""

    property_price: float = 850_000
    deposit_fraction: float = 0.20  # 20% deposit
    annual_rate_percent: float = 6.2  # 6.2% p.a.
    term_years: int = 30
    extra_monthly_payment: float = 0
    offset_balance: float = 0
    jurisdiction: Jurisdiction = Jurisdiction.NSW
    is_first_home_buyer: bool = False

    # Borrower finances, used for the affordability estimate
    annual_income: float = 150_000
    monthly_expenses: float = 2_500

    @property
    def deposit(self) -> float:
        return round(self.property_price * self.deposit_fraction)

    @property
    def loan_amount(self) -> float:
        return self.property_price - self.deposit

    @property
    def lvr(self) -> float:
        """Loan-to-value ratio as a percentage."""
        if self.property_price <= 0:
            return 0.0
        return self.loan_amount / self.property_price * 100

    def affordability(self) -> AffordabilityScenario:
        return AffordabilityScenario(
            annual_income=self.annual_income,
            monthly_expenses=self.monthly_expenses,
            annual_rate_percent=self.annual_rate_percent,
            term_years=self.term_years,
            deposit_fraction=self.deposit_fraction,
        )
