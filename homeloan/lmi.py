"""Lenders Mortgage Insurance (LMI) estimation.

Based on approximate Australian LMI rate tables. Actual premiums vary by
insurer and lender.
"""

import math

from homeloan.jurisdictions import LMI_BANDS, LMI_MAX_BAND

LMI_THRESHOLD_LVR = 80
DEFAULT_BAND_RATE = 0.062

# (loan amount above, loading). Highest matching tier wins.
_LOADING_TIERS: list[tuple[float, float]] = [
    (1_000_000, 1.3),
    (750_000, 1.15),
]


def loading_factor(loan_amount: float) -> float:
    """Premium loading for larger loans."""
    for floor, loading in _LOADING_TIERS:
        if loan_amount > floor:
            return loading
    return 1.0


def estimate_lmi(loan_amount: float, lvr: float) -> float:
    """Estimate LMI premium in dollars.

    Parameters
    ----------
    loan_amount : float
        The loan amount in dollars.
    lvr : float
        Loan-to-Value Ratio as a percentage (e.g. 90 for 90%).

    Returns
    -------
    float
        Estimated LMI premium in dollars, rounded to nearest dollar.
        Returns 0 if LVR <= 80%.
    """
    if lvr <= LMI_THRESHOLD_LVR or loan_amount <= 0:
        return 0

    band = min(math.ceil(lvr), LMI_MAX_BAND)
    rate = LMI_BANDS.get(band, DEFAULT_BAND_RATE)
    return round(loan_amount * rate * loading_factor(loan_amount))
