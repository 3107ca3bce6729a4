import re
import string
import unicodedata
from typing import Iterable, List, Set

from . import config
from .constants import (
    KEYWORD_CONNECTIVE,
    KEYWORD_REMOVALS,
    STOPWORDS_BY_LANGUAGE,
)
from .errors import UnsupportedOptionError

_ws_re = re.compile(r"\s+")
_semicolon_re = re.compile(r"\s*;\s*")
_repeat_semicolon_re = re.compile(r";{2,}")
_keyword_removals_re = re.compile("[" + re.escape(KEYWORD_REMOVALS) + "]")


def normalize_space(s: str) -> str:
    return _ws_re.sub(" ", s).strip()


def count_words(term: str) -> int:
    return len(term.split())


def is_punctuation(ch: str) -> bool:
    """ASCII punctuation/symbols plus any Unicode punctuation character."""
    return ch in string.punctuation or unicodedata.category(ch).startswith("P")


def replace_punctuation(text: str, replacement: str, preserve: str = "") -> str:
    """Replace every punctuation character not listed in `preserve` with `replacement`."""
    if not text:
        return ""
    return "".join(
        replacement if (is_punctuation(ch) and ch not in preserve) else ch
        for ch in text
    )


def remove_punctuation(text: str, preserve: str = "-_") -> str:
    """Strip punctuation, keeping the characters in `preserve` (hyphen and underscore by default)."""
    return replace_punctuation(text, "", preserve=preserve)


def get_stopwords(language: str = config.DEFAULT_LANGUAGE) -> Set[str]:
    """
    Return a fresh copy of the curated stopword set for `language` (case-insensitive).
    """
    key = (language or "").strip().lower()
    if key not in STOPWORDS_BY_LANGUAGE:
        raise UnsupportedOptionError(
            "language", language, [k.capitalize() for k in sorted(STOPWORDS_BY_LANGUAGE)]
        )
    return set(STOPWORDS_BY_LANGUAGE[key])


def clean_keywords(keywords: str) -> str:
    """
    Normalize an author/database keyword string into ';'-separated lowercase terms.

    - drops brackets and symbols such as ( ) : = % + < > ? \\ & ! $ * [ ]
    - turns commas and the " and " connective into ';'
    - removes spaces around ';', collapses repeated ';' and whitespace
    """
    if not keywords:
        return ""
    text = _keyword_removals_re.sub("", keywords.lower())
    text = normalize_space(text)
    text = text.replace(",", ";")
    text = text.replace(KEYWORD_CONNECTIVE, ";")
    text = _semicolon_re.sub(";", text)
    text = _repeat_semicolon_re.sub(";", text)
    return text.strip(" ;")


def get_ngrams(text: str, n: int, stopwords: Iterable[str]) -> List[str]:
    """
    Contiguous n-word windows of a whitespace-tokenized text.
    Any window that contains a stopword is skipped; each distinct window is
    returned once, in order of first occurrence.
    """
    if n < 1:
        raise ValueError(f"n-gram length must be at least 1, got {n}")
    tokens = text.split() if text else []
    if len(tokens) < n:
        return []
    stops = stopwords if isinstance(stopwords, (set, frozenset)) else set(stopwords)
    seen: Set[str] = set()
    grams: List[str] = []
    for i in range(0, len(tokens) - n + 1):
        window = tokens[i : i + n]
        if any(t in stops for t in window):
            continue
        gram = " ".join(window)
        if gram not in seen:
            seen.add(gram)
            grams.append(gram)
    return grams
