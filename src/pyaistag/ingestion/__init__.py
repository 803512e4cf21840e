"""Ingestion helpers.

Defensive parsing of comment block values received off the wire.
"""

__all__: list[str] = []
