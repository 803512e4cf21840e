"""Sentence-level collaborators consumed by the tagging core."""

from pyaistag.sentence.comment_block import CommentBlock
from pyaistag.sentence.proprietary import ProprietarySourceTag, ProprietaryTag, SourceTag
from pyaistag.sentence.types import DecodedSentence, Packet, PacketLike, Sentence

__all__ = [
    "CommentBlock",
    "DecodedSentence",
    "Packet",
    "PacketLike",
    "ProprietarySourceTag",
    "ProprietaryTag",
    "Sentence",
    "SourceTag",
]
