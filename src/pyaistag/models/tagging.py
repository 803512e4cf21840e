"""Packet tagging model.

A :class:`Tagging` records where and when an AIS packet was received.  It
is carried in the sentence's comment block:

========  ===================  =============================
Key       Field                Value
========  ===================  =============================
``c``     ``timestamp``        seconds since 1970
``si``    ``source_id``        free-form string
``sb``    ``source_bs``        base station MMSI
``sc``    ``source_country``   ISO 3166 three-letter code
``st``    ``source_type``      ``LIVE`` | ``SAT``
========  ===================  =============================

Every field is optional and ``None`` means unknown.  Empty strings and
zero are real values.

``c`` is written by :meth:`Tagging.encode` but never read back by
:meth:`Tagging.parse`, which takes the timestamp from the sentence itself.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import field_validator

from pyaistag._constants import (
    SOURCE_BS_KEY,
    SOURCE_COUNTRY_KEY,
    SOURCE_ID_KEY,
    SOURCE_TYPE_KEY,
    TIMESTAMP_KEY,
)
from pyaistag.exceptions import NullInputError
from pyaistag.models._base import AisBaseModel, AisTimestamp
from pyaistag.models.country import Country
from pyaistag.models.source_type import SourceType
from pyaistag.sentence.comment_block import CommentBlock
from pyaistag.sentence.proprietary import ProprietarySourceTag
from pyaistag.sentence.types import DecodedSentence, PacketLike

_logger = logging.getLogger(__name__)

# Fields taking part in merge and filter; the timestamp never does.
_SOURCE_FIELDS: tuple[str, ...] = ("source_id", "source_bs", "source_country", "source_type")


class Tagging(AisBaseModel):
    """Source tags of an AIS packet.

    Parameters
    ----------
    timestamp : datetime or None
        Reception time (UTC).
    source_id : str or None
        Identifier of the ingest source.
    source_bs : int or None
        MMSI of the receiving base station.
    source_country : Country or None
        Country of the receiving station.
    source_type : SourceType or None
        Terrestrial or satellite reception.
    """

    timestamp: AisTimestamp = None
    source_id: str | None = None
    source_bs: int | None = None
    source_country: Country | None = None
    source_type: SourceType | None = None

    @field_validator("source_country", mode="before")
    @classmethod
    def _coerce_country(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Country.get_by_code(value)
        return value

    @field_validator("source_type", mode="before")
    @classmethod
    def _coerce_source_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return SourceType.decode(value)
        return value

    def is_empty(self) -> bool:
        """Return ``True`` when no tag is set."""
        return (
            self.timestamp is None
            and self.source_id is None
            and self.source_bs is None
            and self.source_country is None
            and self.source_type is None
        )

    def clone(self) -> Tagging:
        """Copy of this tagging.

        ``source_type`` is not carried over and is ``None`` in the copy.
        """
        return Tagging(
            timestamp=self.timestamp,
            source_id=self.source_id,
            source_bs=self.source_bs,
            source_country=self.source_country,
        )

    # ------------------------------------------------------------------
    # Comment block encoding
    # ------------------------------------------------------------------

    def encode(self, block: CommentBlock | None = None) -> CommentBlock:
        """Write the set tags into *block*, replacing existing values.

        A new comment block is created when *block* is ``None``.  The
        block is modified in place and returned.
        """
        if block is None:
            block = CommentBlock()
        if self.timestamp is not None:
            block.add_timestamp(self.timestamp)
        if self.source_id is not None:
            block.add_string(SOURCE_ID_KEY, self.source_id)
        if self.source_bs is not None:
            block.add_int(SOURCE_BS_KEY, self.source_bs)
        if self.source_country is not None:
            block.add_string(SOURCE_COUNTRY_KEY, self.source_country.three_letter)
        if self.source_type is not None:
            block.add_string(SOURCE_TYPE_KEY, self.source_type.encode())
        return block

    def encode_preserve(self, block: CommentBlock) -> CommentBlock:
        """Write the set tags into *block* only where the key is not already present."""
        if self.timestamp is not None and not block.contains(TIMESTAMP_KEY):
            block.add_timestamp(self.timestamp)
        if self.source_id is not None and not block.contains(SOURCE_ID_KEY):
            block.add_string(SOURCE_ID_KEY, self.source_id)
        if self.source_bs is not None and not block.contains(SOURCE_BS_KEY):
            block.add_int(SOURCE_BS_KEY, self.source_bs)
        if self.source_country is not None and not block.contains(SOURCE_COUNTRY_KEY):
            block.add_string(SOURCE_COUNTRY_KEY, self.source_country.three_letter)
        if self.source_type is not None and not block.contains(SOURCE_TYPE_KEY):
            block.add_string(SOURCE_TYPE_KEY, self.source_type.encode())
        return block

    # ------------------------------------------------------------------
    # Merge and filter
    # ------------------------------------------------------------------

    def merge_missing(self, proposed: Tagging) -> Tagging:
        """New tagging with the tags of *proposed* that this tagging lacks.

        Only the additions are returned, not this tagging plus additions.
        The timestamp is never merged.
        """
        added: dict[str, Any] = {}
        for name in _SOURCE_FIELDS:
            if getattr(self, name) is None and getattr(proposed, name) is not None:
                added[name] = getattr(proposed, name)
        return Tagging(**added)

    def filter_match(self, tagging: Tagging) -> bool:
        """Return ``True`` when *tagging* has every tag set in this filter.

        Unset filter fields match anything; a set field requires *tagging*
        to carry the same value.  The timestamp is ignored.
        """
        for name in _SOURCE_FIELDS:
            expected = getattr(self, name)
            if expected is None:
                continue
            actual = getattr(tagging, name)
            if actual is None or actual != expected:
                return False
        return True

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, sentence: DecodedSentence | None) -> Tagging:
        """Parse the tags of *sentence*.

        The comment block takes priority.  Base station and country fall
        back to the first proprietary source tag supplying them, in
        sentence order.  ``None`` yields an empty tagging.

        Raises :class:`~pyaistag.exceptions.InvalidEnumerationError` when
        the comment block holds a malformed source type.
        """
        if sentence is None:
            return cls()

        fields: dict[str, Any] = {"timestamp": sentence.timestamp}

        block = sentence.comment_block
        if block is not None:
            fields["source_id"] = block.get_string(SOURCE_ID_KEY)
            fields["source_bs"] = block.get_int(SOURCE_BS_KEY)
            code = block.get_string(SOURCE_COUNTRY_KEY)
            if code is not None:
                country = Country.get_by_code(code)
                if country is None:
                    _logger.debug("Ignoring unresolved source country %r", code)
                fields["source_country"] = country
            fields["source_type"] = SourceType.decode(block.get_string(SOURCE_TYPE_KEY))

        for tag in sentence.tags or ():
            if not isinstance(tag, ProprietarySourceTag):
                continue
            if fields.get("source_bs") is None and tag.base_mmsi is not None:
                _logger.debug("Source base station %s taken from proprietary tag", tag.base_mmsi)
                fields["source_bs"] = tag.base_mmsi
            if fields.get("source_country") is None and tag.country is not None:
                _logger.debug("Source country %s taken from proprietary tag", tag.country)
                fields["source_country"] = tag.country

        return cls(**fields)

    @classmethod
    def parse_packet(cls, packet: PacketLike) -> Tagging:
        """Parse the tags of *packet*'s sentence.

        Raises :class:`~pyaistag.exceptions.NullInputError` when *packet*
        is ``None``.  A packet without a sentence yields an empty tagging.
        """
        if packet is None:
            raise NullInputError("packet must not be None", argument="packet")
        return cls.parse(packet.sentence)

    def __str__(self) -> str:
        return (
            f"Tagging(timestamp={self.timestamp}, source_id={self.source_id!r}, "
            f"source_bs={self.source_bs}, source_country={self.source_country}, "
            f"source_type={self.source_type})"
        )

    __repr__ = __str__


def merge_missing(current: Tagging, proposed: Tagging) -> Tagging:
    """Module-level form of :meth:`Tagging.merge_missing`."""
    return current.merge_missing(proposed)


def filter_match(filter: Tagging, candidate: Tagging) -> bool:  # noqa: A002
    """Module-level form of :meth:`Tagging.filter_match`."""
    return filter.filter_match(candidate)
