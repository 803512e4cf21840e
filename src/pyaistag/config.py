"""Tagging configuration for pyaistag."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyaistag.exceptions import AisTagConfigError, InvalidEnumerationError
from pyaistag.models.country import Country
from pyaistag.models.source_type import SourceType
from pyaistag.models.tagging import Tagging
from pyaistag.transform import TaggingPolicy


@dataclasses.dataclass(frozen=True)
class TaggingConfig:
    """Default tagging applied by an ingest source.

    Parameters
    ----------
    source_id : str or None
        Identifier written as ``si``.
    source_bs : int or None
        Base station MMSI written as ``sb``.
    source_country : str or None
        ISO 3166 three-letter code written as ``sc``.
    source_type : str or None
        ``"LIVE"`` or ``"SAT"`` (any case), written as ``st``.
    policy : TaggingPolicy
        How the tagging is combined with tags already on a sentence.
    """

    source_id: str | None = None
    source_bs: int | None = None
    source_country: str | None = None
    source_type: str | None = None
    policy: TaggingPolicy = TaggingPolicy.PREPEND_MISSING

    @classmethod
    def from_env(cls, **overrides: Any) -> TaggingConfig:
        """Create configuration from environment variables.

        Reads ``AISTAG_SOURCE_ID``, ``AISTAG_SOURCE_BS``,
        ``AISTAG_SOURCE_COUNTRY``, ``AISTAG_SOURCE_TYPE`` and
        ``AISTAG_POLICY``.  Explicit keyword arguments override
        environment values.

        Raises
        ------
        AisTagConfigError
            If ``AISTAG_SOURCE_BS`` is not an integer or ``AISTAG_POLICY``
            names no policy.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "AISTAG_SOURCE_ID": "source_id",
            "AISTAG_SOURCE_COUNTRY": "source_country",
            "AISTAG_SOURCE_TYPE": "source_type",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # source_bs is numeric, handle separately
        bs_env = env.get("AISTAG_SOURCE_BS")
        if bs_env is not None and "source_bs" not in overrides:
            try:
                config_kwargs["source_bs"] = int(bs_env)
            except ValueError as err:
                raise AisTagConfigError(f"AISTAG_SOURCE_BS must be an integer, got {bs_env!r}") from err

        policy_env = env.get("AISTAG_POLICY")
        if policy_env is not None and "policy" not in overrides:
            try:
                config_kwargs["policy"] = TaggingPolicy(policy_env.strip().lower())
            except ValueError as err:
                raise AisTagConfigError(f"Unknown tagging policy: {policy_env!r}") from err

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

    def to_tagging(self) -> Tagging:
        """Build the configured :class:`Tagging`.

        Raises
        ------
        AisTagConfigError
            If the country code or source type cannot be resolved.
        """
        country = None
        if self.source_country is not None:
            country = Country.get_by_code(self.source_country)
            if country is None:
                raise AisTagConfigError(f"Unknown source country: {self.source_country!r}")
        try:
            source_type = SourceType.decode(self.source_type)
        except InvalidEnumerationError as err:
            raise AisTagConfigError(str(err)) from err
        return Tagging(
            source_id=self.source_id,
            source_bs=self.source_bs,
            source_country=country,
            source_type=source_type,
        )
