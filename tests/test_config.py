from __future__ import annotations

import pytest

from pyaistag.config import TaggingConfig
from pyaistag.exceptions import AisTagConfigError
from pyaistag.models.country import Country
from pyaistag.models.source_type import SourceType
from pyaistag.models.tagging import Tagging
from pyaistag.transform import TaggingPolicy

_ENV_KEYS = (
    "AISTAG_SOURCE_ID",
    "AISTAG_SOURCE_BS",
    "AISTAG_SOURCE_COUNTRY",
    "AISTAG_SOURCE_TYPE",
    "AISTAG_POLICY",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_env() -> None:
    config = TaggingConfig.from_env()
    assert config == TaggingConfig()
    assert config.policy is TaggingPolicy.PREPEND_MISSING
    assert config.to_tagging().is_empty()


def test_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AISTAG_SOURCE_ID", "AISD")
    monkeypatch.setenv("AISTAG_SOURCE_BS", "2190047")
    monkeypatch.setenv("AISTAG_SOURCE_COUNTRY", "DNK")
    monkeypatch.setenv("AISTAG_SOURCE_TYPE", "live")
    monkeypatch.setenv("AISTAG_POLICY", "MERGE_PRESERVE")

    config = TaggingConfig.from_env()

    assert config.source_bs == 2190047
    assert config.policy is TaggingPolicy.MERGE_PRESERVE
    assert config.to_tagging() == Tagging(
        source_id="AISD",
        source_bs=2190047,
        source_country=Country.get_by_code("DNK"),
        source_type=SourceType.TERRESTRIAL,
    )


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AISTAG_SOURCE_ID", "env")
    monkeypatch.setenv("AISTAG_SOURCE_BS", "not-a-number")
    config = TaggingConfig.from_env(source_id="explicit", source_bs=7)
    assert config.source_id == "explicit"
    assert config.source_bs == 7


def test_bad_base_station_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AISTAG_SOURCE_BS", "abc")
    with pytest.raises(AisTagConfigError):
        TaggingConfig.from_env()


def test_bad_policy_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AISTAG_POLICY", "sometimes")
    with pytest.raises(AisTagConfigError):
        TaggingConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [{"source_country": "XXX"}, {"source_type": "RADIO"}],
)
def test_unresolvable_values_raise_on_to_tagging(kwargs: dict) -> None:
    with pytest.raises(AisTagConfigError):
        TaggingConfig(**kwargs).to_tagging()
