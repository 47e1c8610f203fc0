"""Tests for vocabulary matching."""

import json
from pathlib import Path

import pytest

from vocabulary import DEFAULT_VOCABULARY, KEYWORD_TERMS, THEME_TERMS, load_vocabulary, match_terms


def test_nested_terms_match_both_vocabularies() -> None:
    text = "今日は理学療法士の話です。"

    assert "理学療法士" in match_terms(text, KEYWORD_TERMS)
    assert "理学療法" in match_terms(text, THEME_TERMS)


def test_substring_inside_longer_word_counts() -> None:
    # "PT" inside "OPTION" still matches; no word boundaries
    assert match_terms("OPTION", ["PT", "OT"]) == ["PT"]


def test_matching_is_case_sensitive() -> None:
    assert match_terms("pt and ebm", ["PT", "EBM"]) == []


def test_result_has_no_duplicates() -> None:
    assert match_terms("教育と教育", ["教育", "研究", "教育"]) == ["教育"]


def test_no_matches_is_empty() -> None:
    assert match_terms("", THEME_TERMS) == []


def test_default_vocabulary_sizes() -> None:
    assert len(DEFAULT_VOCABULARY.themes) == 27
    assert len(DEFAULT_VOCABULARY.keywords) == len(KEYWORD_TERMS)


def test_load_vocabulary_override(tmp_path: Path) -> None:
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps({"themes": ["睡眠"], "keywords": ["枕"]}), encoding="utf-8")

    vocabulary = load_vocabulary(path)

    assert vocabulary.themes == ("睡眠",)
    assert vocabulary.keywords == ("枕",)


def test_load_vocabulary_rejects_invalid_file(tmp_path: Path) -> None:
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps({"themes": ["睡眠", ""]}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_vocabulary(path)
