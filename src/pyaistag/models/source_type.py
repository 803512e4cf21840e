"""Source type of a tagged packet."""

from __future__ import annotations

from enum import Enum

from pyaistag.exceptions import InvalidEnumerationError


class SourceType(Enum):
    """How a packet was received.

    Member values are the comment block literals.  :meth:`decode` is the
    only way in from the wire since it is case-insensitive and maps
    ``None`` to ``None``.
    """

    TERRESTRIAL = "LIVE"
    SATELLITE = "SAT"

    @classmethod
    def decode(cls, text: str | None) -> SourceType | None:
        """Decode a wire literal, ``None`` when *text* is ``None``.

        Raises :class:`InvalidEnumerationError` for any other unmatched string.
        """
        if text is None:
            return None
        member = _BY_LITERAL.get(text.upper())
        if member is None:
            raise InvalidEnumerationError(f"Unknown source type: {text}", value=text)
        return member

    def encode(self) -> str:
        return _TO_LITERAL[self]

    def __str__(self) -> str:
        return self.encode()


_TO_LITERAL: dict[SourceType, str] = {
    SourceType.TERRESTRIAL: "LIVE",
    SourceType.SATELLITE: "SAT",
}
_BY_LITERAL: dict[str, SourceType] = {literal: member for member, literal in _TO_LITERAL.items()}
