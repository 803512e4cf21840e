"""Data models for AIS packet tagging."""

from pyaistag.models._base import AisBaseModel, AisTimestamp
from pyaistag.models.country import Country
from pyaistag.models.source_type import SourceType
from pyaistag.models.tagging import Tagging, filter_match, merge_missing

__all__ = [
    "AisBaseModel",
    "AisTimestamp",
    "Country",
    "SourceType",
    "Tagging",
    "filter_match",
    "merge_missing",
]
