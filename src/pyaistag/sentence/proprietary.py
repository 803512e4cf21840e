"""Proprietary (vendor-specific) sentence tags.

Some receivers prefix sentences with vendor tags.  Only tags exposing a
base station MMSI and a country are of interest to tagging; those satisfy
the :class:`ProprietarySourceTag` protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pyaistag.models._base import AisBaseModel, AisTimestamp
from pyaistag.models.country import Country


@runtime_checkable
class ProprietarySourceTag(Protocol):
    """A proprietary tag that may identify the receiving station."""

    @property
    def base_mmsi(self) -> int | None: ...

    @property
    def country(self) -> Country | None: ...


class ProprietaryTag(AisBaseModel):
    """A vendor tag without source information.

    Parameters
    ----------
    vendor : str
        Vendor prefix (e.g. ``"PGHP"``).
    sentence : str or None
        The raw tag line, when known.
    """

    vendor: str = ""
    sentence: str | None = None


class SourceTag(ProprietaryTag):
    """A vendor tag carrying the receiving base station and its country."""

    base_mmsi: int | None = None
    country: Country | None = None
    timestamp: AisTimestamp = None
