"""ISO 3166 country values.

Countries travel on the wire as three-letter codes (``"DNK"``).  Lookups
are backed by :mod:`pycountry`.
"""

from __future__ import annotations

import logging

import pycountry

from pyaistag.models._base import AisBaseModel

_logger = logging.getLogger(__name__)


class Country(AisBaseModel):
    """A country identified by its ISO 3166-1 codes."""

    alpha_2: str
    alpha_3: str
    name: str

    @property
    def three_letter(self) -> str:
        return self.alpha_3

    @classmethod
    def get_by_code(cls, code: str | None) -> Country | None:
        """Look up a country by its two- or three-letter code.

        Returns ``None`` for ``None``, blank or unknown codes.
        """
        if code is None:
            return None
        text = code.strip().upper()
        if len(text) == 3:
            record = pycountry.countries.get(alpha_3=text)
        elif len(text) == 2:
            record = pycountry.countries.get(alpha_2=text)
        else:
            record = None
        if record is None:
            _logger.debug("Unknown country code %r", code)
            return None
        return cls(alpha_2=record.alpha_2, alpha_3=record.alpha_3, name=record.name)

    def __str__(self) -> str:
        return self.alpha_3

    def __repr__(self) -> str:
        return self.alpha_3
