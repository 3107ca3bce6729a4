from __future__ import annotations

import pytest

from search_terms.errors import UnsupportedOptionError
from search_terms.text_utils import (
    clean_keywords,
    count_words,
    get_ngrams,
    get_stopwords,
    remove_punctuation,
)


def test_get_stopwords_is_case_insensitive_and_returns_a_copy() -> None:
    stops = get_stopwords("English")
    assert "the" in stops
    assert "of" in stops
    stops.add("woodpecker")
    assert "woodpecker" not in get_stopwords("english")


def test_get_stopwords_rejects_unknown_language() -> None:
    with pytest.raises(UnsupportedOptionError) as exc:
        get_stopwords("Klingon")
    assert exc.value.kind == "language"
    assert "English" in str(exc.value)


def test_clean_keywords_splits_on_commas_and_connective() -> None:
    raw = "Fire ecology, Woodpeckers (Picidae); Occupancy and Burned forests"
    assert clean_keywords(raw) == "fire ecology;woodpeckers picidae;occupancy;burned forests"


def test_clean_keywords_collapses_empty_entries() -> None:
    assert clean_keywords(";; Salvage   logging ;  ; ") == "salvage logging"
    assert clean_keywords("") == ""


def test_get_ngrams_skips_stopword_windows_and_dedupes() -> None:
    assert get_ngrams("a b c a b", 2, set()) == ["a b", "b c", "c a"]
    assert get_ngrams("a b c a b", 2, {"c"}) == ["a b"]
    assert get_ngrams("short", 2, set()) == []


def test_get_ngrams_rejects_non_positive_length() -> None:
    with pytest.raises(ValueError):
        get_ngrams("a b", 0, set())


def test_remove_punctuation_preserves_hyphen_and_underscore() -> None:
    assert remove_punctuation("post-fire, high_severity (burns)!") == "post-fire high_severity burns"
    assert remove_punctuation("post-fire", preserve="") == "postfire"


def test_count_words() -> None:
    assert count_words("black-backed woodpecker") == 2
    assert count_words("fire") == 1
