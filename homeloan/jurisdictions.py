"""Australian jurisdiction tables: duty brackets, first home concessions, LMI bands.

Rates are approximate 2024 schedules. The tables are static and are
validated once at import time.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ConfigurationError(ValueError):
    """Raised when the static jurisdiction tables are inconsistent."""


class Jurisdiction(str, Enum):
    NSW = "NSW"
    VIC = "VIC"
    QLD = "QLD"
    SA = "SA"
    WA = "WA"
    TAS = "TAS"
    ACT = "ACT"
    NT = "NT"

    @property
    def full_name(self) -> str:
        return JURISDICTION_NAMES[self]

    @classmethod
    def from_code(cls, code: "str | Jurisdiction") -> "Jurisdiction":
        """Parse a state/territory code, case-insensitive."""
        if isinstance(code, cls):
            return code
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown jurisdiction '{code}'. Supported: {[j.value for j in cls]}"
            ) from None


JURISDICTION_NAMES = {
    Jurisdiction.NSW: "New South Wales",
    Jurisdiction.VIC: "Victoria",
    Jurisdiction.QLD: "Queensland",
    Jurisdiction.SA: "South Australia",
    Jurisdiction.WA: "Western Australia",
    Jurisdiction.TAS: "Tasmania",
    Jurisdiction.ACT: "ACT",
    Jurisdiction.NT: "Northern Territory",
}


@dataclass(frozen=True)
class DutyBracket:
    """duty = base_amount + (price - threshold_from) * marginal_rate"""

    threshold_from: float
    base_amount: float
    marginal_rate: float


@dataclass(frozen=True)
class FirstHomeConcession:
    """Fully exempt up to the first ceiling, sliding concession up to the second."""

    full_exemption_ceiling: float = 0
    sliding_concession_ceiling: float = 0

    @property
    def offered(self) -> bool:
        return self.full_exemption_ceiling > 0


# ---------------------------------------------------------------------------
# Transfer duty brackets
# ---------------------------------------------------------------------------

B = DutyBracket

DUTY_BRACKETS: "MappingProxyType[Jurisdiction, tuple[DutyBracket, ...]]" = MappingProxyType({
    Jurisdiction.NSW: (
        B(0, 0, 0.0125),
        B(16_000, 200, 0.015),
        B(35_000, 485, 0.0175),
        B(93_000, 1_500, 0.035),
        B(351_000, 10_530, 0.045),
        B(1_168_000, 47_295, 0.055),
    ),
    Jurisdiction.VIC: (
        B(0, 0, 0.014),
        B(25_000, 350, 0.024),
        B(130_000, 2_870, 0.06),
        B(960_000, 52_670, 0.055),
    ),
    Jurisdiction.QLD: (
        B(0, 0, 0),
        B(5_000, 0, 0.015),
        B(75_000, 1_050, 0.035),
        B(540_000, 17_325, 0.045),
        B(1_000_000, 38_025, 0.0575),
    ),
    Jurisdiction.SA: (
        B(0, 0, 0.01),
        B(12_000, 120, 0.02),
        B(30_000, 480, 0.03),
        B(50_000, 1_080, 0.035),
        B(100_000, 2_830, 0.04),
        B(200_000, 6_830, 0.0425),
        B(250_000, 8_955, 0.0475),
        B(300_000, 11_330, 0.05),
        B(500_000, 21_330, 0.055),
    ),
    Jurisdiction.WA: (
        B(0, 0, 0.019),
        B(80_000, 1_520, 0.0285),
        B(100_000, 2_090, 0.038),
        B(250_000, 7_790, 0.0475),
        B(500_000, 19_665, 0.0515),
    ),
    Jurisdiction.TAS: (
        B(0, 20, 0),
        B(3_000, 75, 0.03),
        B(25_000, 735, 0.035),
        B(75_000, 2_485, 0.04),
        B(200_000, 7_485, 0.045),
        B(375_000, 15_360, 0.045),
    ),
    Jurisdiction.ACT: (
        B(0, 0, 0.0032),
        B(200_000, 640, 0.022),
        B(300_000, 2_840, 0.034),
        B(500_000, 9_640, 0.0432),
        B(750_000, 20_440, 0.059),
        B(1_000_000, 35_190, 0.064),
    ),
})

del B

# NT duty is a closed-form formula, not brackets (see tax.nt_duty)
FORMULA_JURISDICTIONS = frozenset({Jurisdiction.NT})


# ---------------------------------------------------------------------------
# First home buyer duty concessions
# ---------------------------------------------------------------------------

FIRST_HOME_CONCESSIONS: "MappingProxyType[Jurisdiction, FirstHomeConcession]" = MappingProxyType({
    Jurisdiction.NSW: FirstHomeConcession(800_000, 1_000_000),
    Jurisdiction.VIC: FirstHomeConcession(600_000, 750_000),
    Jurisdiction.QLD: FirstHomeConcession(550_000, 700_000),
    Jurisdiction.SA: FirstHomeConcession(650_000, 700_000),
    Jurisdiction.WA: FirstHomeConcession(430_000, 530_000),
    Jurisdiction.TAS: FirstHomeConcession(),  # grant instead of a duty concession
    Jurisdiction.ACT: FirstHomeConcession(),  # income-tested, simplified away
    Jurisdiction.NT: FirstHomeConcession(),
})

NO_CONCESSION = FirstHomeConcession()


# ---------------------------------------------------------------------------
# LMI premium rates by LVR band (as a fraction of the loan amount)
# ---------------------------------------------------------------------------

LMI_BANDS: "MappingProxyType[int, float]" = MappingProxyType({
    81: 0.008,
    82: 0.0095,
    83: 0.011,
    84: 0.0125,
    85: 0.0155,
    86: 0.018,
    87: 0.021,
    88: 0.0245,
    89: 0.028,
    90: 0.032,
    91: 0.038,
    92: 0.042,
    93: 0.048,
    94: 0.054,
    95: 0.062,
})

LMI_MIN_BAND = 81
LMI_MAX_BAND = 95


def validate_tables(
    brackets=DUTY_BRACKETS,
    concessions=FIRST_HOME_CONCESSIONS,
    lmi_bands=LMI_BANDS,
) -> None:
    """Check the static tables for completeness and ordering.

    Raises ConfigurationError describing the first problem found.
    """
    for jurisdiction in Jurisdiction:
        if jurisdiction not in concessions:
            raise ConfigurationError(f"{jurisdiction.value}: no first home concession entry")
        if jurisdiction in FORMULA_JURISDICTIONS:
            continue

        table = brackets.get(jurisdiction)
        if not table:
            raise ConfigurationError(f"{jurisdiction.value}: no duty brackets configured")
        if table[0].threshold_from != 0:
            raise ConfigurationError(f"{jurisdiction.value}: first bracket must start at 0")
        for prev, curr in zip(table, table[1:]):
            if curr.threshold_from <= prev.threshold_from:
                raise ConfigurationError(
                    f"{jurisdiction.value}: bracket thresholds must be strictly increasing "
                    f"({prev.threshold_from} then {curr.threshold_from})"
                )

    for jurisdiction, concession in concessions.items():
        if concession.full_exemption_ceiling > concession.sliding_concession_ceiling:
            raise ConfigurationError(
                f"{jurisdiction.value}: full exemption ceiling exceeds sliding concession ceiling"
            )

    missing = [b for b in range(LMI_MIN_BAND, LMI_MAX_BAND + 1) if b not in lmi_bands]
    if missing:
        raise ConfigurationError(f"LMI bands missing for LVR {missing}")


validate_tables()
