"""Base model and shared annotated types.

Every pyaistag value model inherits from :class:`AisBaseModel`, a frozen
pydantic model.  Values are built once and then read, so instances can be
shared freely once constructed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict

from pyaistag.ingestion.normalize import parse_epoch_seconds

AisTimestamp = Annotated[datetime | None, BeforeValidator(parse_epoch_seconds)]
"""Annotated type that coerces epoch ints (seconds or ms) and naive datetimes to UTC."""


class AisBaseModel(BaseModel):
    """Base for pyaistag value models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )
