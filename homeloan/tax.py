"""Australian stamp duty (transfer duty) calculations."""

import logging
from collections.abc import Sequence

from homeloan.jurisdictions import (
    DUTY_BRACKETS,
    FORMULA_JURISDICTIONS,
    FIRST_HOME_CONCESSIONS,
    NO_CONCESSION,
    DutyBracket,
    FirstHomeConcession,
    Jurisdiction,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Full duty liability
# ---------------------------------------------------------------------------

NT_FORMULA_CEILING = 525_000
NT_FLAT_RATE = 0.0495


def progressive_duty(price: float, brackets: Sequence[DutyBracket]) -> float:
    """Duty from the highest bracket whose threshold does not exceed price."""
    for bracket in reversed(brackets):
        if price >= bracket.threshold_from:
            return round(
                bracket.base_amount + (price - bracket.threshold_from) * bracket.marginal_rate
            )
    return 0


def nt_duty(price: float) -> float:
    """NT duty: quadratic in V = price/1000 up to $525k, flat 4.95% of total above.

    The two regimes are not reconciled at the $525k boundary.
    """
    if price <= NT_FORMULA_CEILING:
        v = price / 1000
        return round(0.06571441 * v * v + 15 * v)
    return round(price * NT_FLAT_RATE)


def full_duty(price: float, jurisdiction: Jurisdiction) -> float:
    """Duty before any first home concession."""
    if jurisdiction in FORMULA_JURISDICTIONS:
        return nt_duty(price)
    brackets = DUTY_BRACKETS.get(jurisdiction)
    if not brackets:
        return 0
    return progressive_duty(price, brackets)


# ---------------------------------------------------------------------------
# First home buyer concession
# ---------------------------------------------------------------------------


def apply_first_home_concession(
    price: float,
    duty: float,
    concession: FirstHomeConcession,
    first_home_buyer: bool = False,
) -> float:
    """Reduce a full duty liability for a first home buyer.

    Exempt up to ``full_exemption_ceiling``; between the two ceilings the
    liability phases back in linearly; above ``sliding_concession_ceiling``
    full duty applies.
    """
    if not first_home_buyer or not concession.offered:
        return duty

    exempt = concession.full_exemption_ceiling
    ceiling = concession.sliding_concession_ceiling
    if price <= exempt:
        return 0
    if price <= ceiling:
        width = ceiling - exempt
        if width <= 0:
            return duty
        return round(duty * (price - exempt) / width)
    return duty


# ---------------------------------------------------------------------------
# Stamp duty dispatcher
# ---------------------------------------------------------------------------


def calc_stamp_duty(
    price: float,
    jurisdiction: "Jurisdiction | str" = Jurisdiction.NSW,
    first_home_buyer: bool = False,
) -> float:
    """Calculate stamp duty payable for a given state or territory.

    An unrecognised code string yields 0 rather than an error.
    """
    if not isinstance(jurisdiction, Jurisdiction):
        try:
            jurisdiction = Jurisdiction.from_code(jurisdiction)
        except ValueError:
            logger.warning("No duty schedule for jurisdiction %r; using 0", jurisdiction)
            return 0

    duty = full_duty(price, jurisdiction)
    concession = FIRST_HOME_CONCESSIONS.get(jurisdiction, NO_CONCESSION)
    return apply_first_home_concession(price, duty, concession, first_home_buyer)
