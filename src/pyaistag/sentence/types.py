"""Decoded sentences and packets.

The tagging core only reads three things from a sentence (timestamp,
comment block and proprietary tags) and one from a packet (its sentence).
:class:`DecodedSentence` and :class:`PacketLike` describe exactly that,
so any decoder whose objects have these attributes can be tagged.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from pyaistag.sentence.comment_block import CommentBlock

if TYPE_CHECKING:
    from pyaistag.models.tagging import Tagging


class DecodedSentence(Protocol):
    @property
    def timestamp(self) -> datetime | None: ...

    @property
    def comment_block(self) -> CommentBlock | None: ...

    @property
    def tags(self) -> Sequence[object]: ...


class PacketLike(Protocol):
    @property
    def sentence(self) -> DecodedSentence | None: ...


@dataclasses.dataclass
class Sentence:
    """A decoded AIS sentence as seen by the tagging layer.

    Parameters
    ----------
    timestamp : datetime or None
        Reception time attached to the sentence by the decoder.
    comment_block : CommentBlock or None
        The sentence's comment block, if it had one.
    tags : tuple
        Proprietary tags in the order they preceded the sentence.
    """

    timestamp: datetime | None = None
    comment_block: CommentBlock | None = None
    tags: tuple[object, ...] = ()


@dataclasses.dataclass
class Packet:
    """A received packet wrapping a decoded sentence."""

    sentence: Sentence | None = None

    def tagging(self) -> Tagging:
        """Parse the tagging of this packet."""
        # Imported lazily; models.tagging depends on this module.
        from pyaistag.models.tagging import Tagging

        return Tagging.parse_packet(self)
