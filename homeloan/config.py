"""YAML/JSON scenario loading and validation."""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path

import yaml

from homeloan.jurisdictions import Jurisdiction
from homeloan.params import LoanScenario

logger = logging.getLogger(__name__)

# Shorthand keys accepted in scenario files
_ALIASES = {
    "price": "property_price",
    "deposit_pct": "deposit_fraction",
    "rate": "annual_rate_percent",
    "term": "term_years",
    "extra_repayment": "extra_monthly_payment",
    "offset": "offset_balance",
    "state": "jurisdiction",
    "first_home_buyer": "is_first_home_buyer",
    "income": "annual_income",
    "expenses": "monthly_expenses",
}

_FIELD_NAMES = {f.name for f in fields(LoanScenario)}
_NUMERIC_FIELDS = _FIELD_NAMES - {"jurisdiction", "is_first_home_buyer"}


def load_config(path: "str | Path") -> LoanScenario:
    """Load a loan scenario from a YAML or JSON file."""
    path = Path(path)
    text = path.read_text()
    logger.debug("Loading scenario from %s", path)

    if path.suffix == ".json":
        data = json.loads(text)
    else:
        # YAML is a superset of JSON
        data = yaml.safe_load(text)

    return dict_to_params(data or {})


def dict_to_params(data: dict) -> LoanScenario:
    """Convert a flat dict to a LoanScenario.

    Unknown keys are ignored. An unknown jurisdiction code or a non-numeric
    value for a numeric field raises ValueError.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Scenario must be a mapping, got {type(data).__name__}")

    kwargs = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            logger.debug("Ignoring unknown scenario key %r", key)
            continue
        kwargs[name] = value

    for name, value in kwargs.items():
        if name in _NUMERIC_FIELDS:
            kwargs[name] = _coerce_number(name, value)

    if "jurisdiction" in kwargs:
        kwargs["jurisdiction"] = Jurisdiction.from_code(kwargs["jurisdiction"])

    return LoanScenario(**kwargs)


def _coerce_number(name: str, value) -> float:
    cast = int if name == "term_years" else float
    try:
        if isinstance(value, bool):
            raise TypeError
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value for {name}: {value!r} (expected a number)") from None


def params_to_dict(params: LoanScenario) -> dict:
    """Convert a LoanScenario to a serialisable dict."""
    d = asdict(params)
    d["jurisdiction"] = params.jurisdiction.value
    return d
