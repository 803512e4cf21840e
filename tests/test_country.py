from __future__ import annotations

import pytest

from pyaistag.models.country import Country


def test_lookup_by_three_letter_code() -> None:
    country = Country.get_by_code("DNK")
    assert country is not None
    assert country.alpha_2 == "DK"
    assert country.three_letter == "DNK"


def test_lookup_is_case_insensitive_and_accepts_two_letters() -> None:
    assert Country.get_by_code("dnk") == Country.get_by_code("DK")


@pytest.mark.parametrize("code", [None, "", "XXX", "208", "Denmark"])
def test_unresolved_codes_are_none(code: str | None) -> None:
    assert Country.get_by_code(code) is None


def test_str_is_three_letter_code() -> None:
    country = Country.get_by_code("NOR")
    assert str(country) == "NOR"
