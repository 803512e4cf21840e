"""Apply a tagging to outgoing sentences and filter packets by tagging."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import StrEnum

from pyaistag.exceptions import InvalidEnumerationError
from pyaistag.models.tagging import Tagging
from pyaistag.sentence.comment_block import CommentBlock
from pyaistag.sentence.types import DecodedSentence, PacketLike

_logger = logging.getLogger(__name__)


class TaggingPolicy(StrEnum):
    """How a tagging is combined with the tags already on a sentence."""

    PREPEND_MISSING = "prepend_missing"
    """Emit a new block holding only the tags the sentence lacks."""

    MERGE_OVERRIDE = "merge_override"
    """Write the tagging into the sentence's block, replacing values."""

    MERGE_PRESERVE = "merge_preserve"
    """Write the tagging into the sentence's block, keeping existing values."""

    OVERWRITE = "overwrite"
    """Replace the sentence's block with one holding only the tagging."""


def apply_tagging(
    sentence: DecodedSentence | None,
    tagging: Tagging,
    policy: TaggingPolicy = TaggingPolicy.PREPEND_MISSING,
) -> CommentBlock:
    """Return the comment block to emit in front of *sentence*.

    For the merge policies the sentence's own comment block is modified in
    place (a new block is used when it has none).  ``PREPEND_MISSING``
    compares against the sentence's parsed tagging, so proprietary source
    tags count as present.
    """
    _logger.debug("Applying tagging %s with policy %s", tagging, policy)
    if policy is TaggingPolicy.OVERWRITE:
        return tagging.encode(CommentBlock())
    if policy is TaggingPolicy.PREPEND_MISSING:
        current = Tagging.parse(sentence)
        return current.merge_missing(tagging).encode(CommentBlock())

    existing = sentence.comment_block if sentence is not None else None
    block = existing if existing is not None else CommentBlock()
    if policy is TaggingPolicy.MERGE_OVERRIDE:
        return tagging.encode(block)
    return tagging.encode_preserve(block)


def filter_packets(tag_filter: Tagging, packets: Iterable[PacketLike]) -> Iterator[PacketLike]:
    """Yield the packets whose tagging matches *tag_filter*.

    Packets with a malformed source type cannot be matched and are skipped.
    """
    for packet in packets:
        try:
            tagging = Tagging.parse_packet(packet)
        except InvalidEnumerationError as err:
            _logger.debug("Skipping packet with invalid tagging: %s", err)
            continue
        if tag_filter.filter_match(tagging):
            yield packet
