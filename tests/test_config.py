"""Tests for scenario file loading."""

import json

import pytest
from homeloan.config import dict_to_params, load_config, params_to_dict
from homeloan.jurisdictions import Jurisdiction
from homeloan.params import LoanScenario


class TestLoadConfig:
    def test_yaml(self, tmp_path):
        path = tmp_path / "scenario.yaml"
        path.write_text(
            "property_price: 900000\n"
            "deposit_pct: 0.1\n"
            "rate: 5.9\n"
            "state: vic\n"
            "first_home_buyer: true\n"
        )
        s = load_config(path)
        assert s.property_price == 900_000
        assert s.deposit_fraction == 0.1
        assert s.annual_rate_percent == 5.9
        assert s.jurisdiction is Jurisdiction.VIC
        assert s.is_first_home_buyer is True
        assert s.term_years == 30

    def test_json(self, tmp_path):
        path = tmp_path / "scenario.json"
        path.write_text(json.dumps({"property_price": 650_000, "jurisdiction": "QLD", "offset": 25_000}))
        s = load_config(path)
        assert s.property_price == 650_000
        assert s.jurisdiction is Jurisdiction.QLD
        assert s.offset_balance == 25_000

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == LoanScenario()

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_config(tmp_path / "nope.yaml")


class TestDictToParams:
    def test_unknown_keys_ignored(self):
        s = dict_to_params({"property_price": 500_000, "colour": "teal"})
        assert s.property_price == 500_000

    def test_unknown_jurisdiction(self):
        with pytest.raises(ValueError, match="Unknown jurisdiction"):
            dict_to_params({"jurisdiction": "XX"})

    def test_not_a_mapping(self):
        with pytest.raises(ValueError, match="mapping"):
            dict_to_params(["price", 500_000])

    def test_non_numeric_value(self):
        with pytest.raises(ValueError, match="property_price"):
            dict_to_params({"property_price": "abc"})

    def test_missing_value(self):
        with pytest.raises(ValueError, match="term_years"):
            dict_to_params({"term": None})

    def test_numeric_strings_coerced(self):
        s = dict_to_params({"price": "650000", "term": "25"})
        assert s.property_price == 650_000
        assert s.term_years == 25
        assert isinstance(s.term_years, int)

    def test_round_trip(self):
        s = LoanScenario(
            property_price=720_000,
            jurisdiction=Jurisdiction.WA,
            is_first_home_buyer=True,
            extra_monthly_payment=150,
        )
        d = params_to_dict(s)
        assert d["jurisdiction"] == "WA"
        assert dict_to_params(d) == s
