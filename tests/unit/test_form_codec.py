from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from foodorder.api.form_codec import parse_form, split_values
from foodorder.api.params import InvalidParameterError, parse_bool, require_int


def test_parse_form_decodes_plus_and_percent_escapes() -> None:
    form = parse_form("name=Pad+Thai&description=rice%20noodles%2C+peanuts&price=3.50")
    assert form == {
        "name": "Pad Thai",
        "description": "rice noodles, peanuts",
        "price": "3.50",
    }


def test_parse_form_decodes_keys_and_utf8() -> None:
    assert parse_form("caf%C3%A9=cr%C3%A8me") == {"café": "crème"}


def test_parse_form_joins_repeated_keys_with_commas() -> None:
    form = parse_form("foodId=1&foodId=3&quantity_1=2&foodId=5")
    assert form["foodId"] == "1,3,5"
    assert form["quantity_1"] == "2"


def test_parse_form_key_without_equals_yields_empty_value() -> None:
    assert parse_form("flag&name=x") == {"flag": "", "name": "x"}


def test_parse_form_falls_back_to_raw_on_malformed_escape() -> None:
    form = parse_form("bad=100%+off&ok=a+b&broken=%E9")
    assert form["bad"] == "100%+off"
    assert form["ok"] == "a b"
    assert form["broken"] == "%E9"


@pytest.mark.parametrize("raw", [None, "", "&&"])
def test_parse_form_empty_input(raw: str | None) -> None:
    assert parse_form(raw) == {}


def test_split_values_ignores_blank_parts() -> None:
    assert split_values("1, 2,,3") == ["1", "2", "3"]
    assert split_values(None) == []


def test_require_int_rejects_missing_and_non_numeric() -> None:
    assert require_int({"id": " 42 "}, "id") == 42
    with pytest.raises(InvalidParameterError):
        require_int({}, "id")
    with pytest.raises(InvalidParameterError) as exc_info:
        require_int({"id": "abc"}, "id")
    assert exc_info.value.details == {"parameter": "id"}


def test_parse_bool_is_true_only_for_true() -> None:
    assert parse_bool("true")
    assert parse_bool("TRUE")
    assert not parse_bool("yes")
    assert not parse_bool(None)
