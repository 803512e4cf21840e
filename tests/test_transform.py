from __future__ import annotations

import logging

import pytest

from pyaistag.models.country import Country
from pyaistag.models.source_type import SourceType
from pyaistag.models.tagging import Tagging
from pyaistag.sentence.comment_block import CommentBlock
from pyaistag.sentence.proprietary import SourceTag
from pyaistag.sentence.types import Packet, Sentence
from pyaistag.transform import TaggingPolicy, apply_tagging, filter_packets

DNK = Country.get_by_code("DNK")

_TAGGING = Tagging(source_id="new", source_bs=42, source_type=SourceType.TERRESTRIAL)


def _sentence() -> Sentence:
    return Sentence(comment_block=CommentBlock({"c": "1357041600", "si": "orig"}))


# ------------------------------------------------------------------
# apply_tagging
# ------------------------------------------------------------------


class TestApplyTagging:
    def test_overwrite_ignores_existing_block(self) -> None:
        sentence = _sentence()
        block = apply_tagging(sentence, _TAGGING, TaggingPolicy.OVERWRITE)
        assert block.to_dict() == {"si": "new", "sb": "42", "st": "LIVE"}
        assert sentence.comment_block is not None
        assert sentence.comment_block.get_string("si") == "orig"

    def test_merge_override_updates_sentence_block(self) -> None:
        sentence = _sentence()
        block = apply_tagging(sentence, _TAGGING, TaggingPolicy.MERGE_OVERRIDE)
        assert block is sentence.comment_block
        assert block.to_dict() == {"c": "1357041600", "si": "new", "sb": "42", "st": "LIVE"}

    def test_merge_preserve_keeps_existing_values(self) -> None:
        sentence = _sentence()
        block = apply_tagging(sentence, _TAGGING, TaggingPolicy.MERGE_PRESERVE)
        assert block is sentence.comment_block
        assert block.to_dict() == {"c": "1357041600", "si": "orig", "sb": "42", "st": "LIVE"}

    def test_merge_without_block_creates_one(self) -> None:
        block = apply_tagging(Sentence(), _TAGGING, TaggingPolicy.MERGE_PRESERVE)
        assert block.to_dict() == {"si": "new", "sb": "42", "st": "LIVE"}

    def test_prepend_missing_emits_delta(self) -> None:
        block = apply_tagging(_sentence(), _TAGGING, TaggingPolicy.PREPEND_MISSING)
        assert block.to_dict() == {"sb": "42", "st": "LIVE"}

    def test_prepend_missing_counts_proprietary_tags(self) -> None:
        sentence = Sentence(tags=(SourceTag(base_mmsi=7, country=DNK),))
        block = apply_tagging(sentence, _TAGGING)
        assert block.to_dict() == {"si": "new", "st": "LIVE"}

    def test_none_sentence(self) -> None:
        block = apply_tagging(None, _TAGGING, TaggingPolicy.MERGE_OVERRIDE)
        assert block.to_dict() == {"si": "new", "sb": "42", "st": "LIVE"}


# ------------------------------------------------------------------
# filter_packets
# ------------------------------------------------------------------


def test_filter_packets_by_source_type() -> None:
    sat = Packet(Sentence(comment_block=CommentBlock({"st": "SAT"})))
    live = Packet(Sentence(comment_block=CommentBlock({"st": "LIVE"})))
    untagged = Packet()

    result = list(filter_packets(Tagging(source_type=SourceType.SATELLITE), [sat, live, untagged]))

    assert result == [sat]


def test_filter_packets_empty_filter_passes_all() -> None:
    packets = [Packet(), Packet(Sentence(comment_block=CommentBlock({"si": "A"})))]
    assert list(filter_packets(Tagging(), packets)) == packets


def test_filter_packets_skips_invalid(caplog: pytest.LogCaptureFixture) -> None:
    bad = Packet(Sentence(comment_block=CommentBlock({"st": "FOO"})))
    good = Packet(Sentence(comment_block=CommentBlock({"si": "A"})))

    with caplog.at_level(logging.DEBUG, logger="pyaistag.transform"):
        result = list(filter_packets(Tagging(), [bad, good]))

    assert result == [good]
    assert "invalid tagging" in caplog.text
