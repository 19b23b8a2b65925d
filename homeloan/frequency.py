"""Re-express a monthly repayment at another payment cadence."""

from enum import Enum


class Frequency(str, Enum):
    MONTHLY = "monthly"
    FORTNIGHTLY = "fortnightly"
    WEEKLY = "weekly"

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_PERIODS_PER_YEAR = {
    Frequency.MONTHLY: 12,
    Frequency.FORTNIGHTLY: 26,
    Frequency.WEEKLY: 52,
}

_LABELS = {
    Frequency.MONTHLY: "Month",
    Frequency.FORTNIGHTLY: "Fortnight",
    Frequency.WEEKLY: "Week",
}


def _as_frequency(frequency: "Frequency | str") -> Frequency:
    if isinstance(frequency, Frequency):
        return frequency
    try:
        return Frequency(str(frequency).strip().lower())
    except ValueError:
        return Frequency.MONTHLY


def convert_frequency(monthly_amount: float, frequency: "Frequency | str") -> float:
    """Convert a monthly amount to the same annual total paid at ``frequency``.

    Unrecognised frequencies leave the amount monthly.
    """
    freq = _as_frequency(frequency)
    if freq is Frequency.MONTHLY:
        return monthly_amount
    return monthly_amount * 12 / freq.periods_per_year


def frequency_label(frequency: "Frequency | str") -> str:
    return _as_frequency(frequency).label
