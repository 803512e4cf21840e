"""pyaistag - Source tagging for AIS packets."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyaistag")
except PackageNotFoundError:
    __version__ = "0+local"
from pyaistag.models import Country, SourceType, Tagging, filter_match, merge_missing
from pyaistag.config import TaggingConfig
from pyaistag.exceptions import (
    AisTagConfigError,
    AisTagError,
    InvalidEnumerationError,
    NullInputError,
)
from pyaistag.sentence import (
    CommentBlock,
    DecodedSentence,
    Packet,
    PacketLike,
    ProprietarySourceTag,
    ProprietaryTag,
    Sentence,
    SourceTag,
)
from pyaistag.transform import TaggingPolicy, apply_tagging, filter_packets

__all__ = [
    "__version__",
    "AisTagConfigError",
    "AisTagError",
    "CommentBlock",
    "Country",
    "DecodedSentence",
    "InvalidEnumerationError",
    "NullInputError",
    "Packet",
    "PacketLike",
    "ProprietarySourceTag",
    "ProprietaryTag",
    "Sentence",
    "SourceTag",
    "SourceType",
    "Tagging",
    "TaggingConfig",
    "TaggingPolicy",
    "apply_tagging",
    "filter_match",
    "filter_packets",
    "merge_missing",
]
