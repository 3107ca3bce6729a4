"""
Candidate term extraction from free text or author-tagged keywords.
"""
from __future__ import annotations

import re
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Iterable, List, Optional, Sequence, Set, Union

from . import config
from .constants import (
    BOUNDARY_TOKEN,
    KEYWORD_CONNECTIVE,
    MISSING_KEYWORD_VALUES,
    PUNCTUATION_STOPS,
)
from .data_models import ExtractionMethod, coerce_option
from .errors import MissingInputError
from .text_utils import (
    clean_keywords,
    count_words,
    get_ngrams,
    get_stopwords,
    replace_punctuation,
)

TextInput = Union[str, Sequence[str]]

_ws_re = re.compile(r"\s+")
_BOUNDARY = f" {BOUNDARY_TOKEN} "


def _as_list(text: TextInput) -> List[str]:
    if isinstance(text, str):
        return [text]
    return [t or "" for t in text]


def _mark_boundaries(entry: str) -> str:
    # Hyphens and underscores count as punctuation here, so "black-backed" splits.
    entry = replace_punctuation(entry, _BOUNDARY)
    entry = _ws_re.sub(" ", entry)
    return entry.lower()


def _entry_ngrams(entry: str, stops: Set[str], min_n: int, max_n: int) -> List[str]:
    marked = _mark_boundaries(entry)
    grams: List[str] = []
    for n in range(min_n, max_n + 1):
        grams.extend(get_ngrams(marked, n, stops))
    return grams


def fakerake(
    text: TextInput,
    stopwords: Optional[Iterable[str]] = None,
    min_n: int = config.DEFAULT_MIN_N,
    max_n: int = config.DEFAULT_MAX_N,
    workers: Optional[int] = None,
) -> List[str]:
    """
    Quick RAKE-like extraction: n-grams bounded by stopwords and punctuation.

    Every punctuation character (hyphen and underscore included) becomes a
    boundary token, so no n-gram spans it. Returns the n-grams of all lengths
    min_n..max_n for each text entry, entry by entry, as one flat list with
    duplicates across entries kept.
    """
    if min_n < 1 or max_n < min_n:
        raise ValueError(f"invalid n-gram range: min_n={min_n}, max_n={max_n}")
    if stopwords is None:
        stopwords = get_stopwords(config.DEFAULT_LANGUAGE)
    stops = set(stopwords) | PUNCTUATION_STOPS | {BOUNDARY_TOKEN}

    entries = _as_list(text)
    fn = partial(_entry_ngrams, stops=stops, min_n=min_n, max_n=max_n)
    if workers and workers > 1 and len(entries) > 1:
        with ProcessPoolExecutor(max_workers=workers) as ex:
            per_entry = list(ex.map(fn, entries))
    else:
        per_entry = [fn(e) for e in entries]

    terms: List[str] = []
    for grams in per_entry:
        terms.extend(grams)
    return terms


def _tagged_terms(keywords: TextInput) -> List[str]:
    joined = KEYWORD_CONNECTIVE.join(_as_list(keywords)).lower()
    cleaned = clean_keywords(joined)
    terms = [t.strip() for t in cleaned.split(";")]
    terms = [t for t in terms if t not in MISSING_KEYWORD_VALUES]
    return [t for t in terms if len(t) >= config.DEFAULT_TAGGED_MIN_CHARS]


def extract_terms(
    text: Optional[TextInput] = None,
    keywords: Optional[TextInput] = None,
    *,
    method: Union[ExtractionMethod, str],
    min_freq: int = config.DEFAULT_MIN_FREQ,
    ngrams: bool = config.DEFAULT_NGRAMS,
    min_n: int = config.DEFAULT_MIN_N,
    max_n: int = config.DEFAULT_MAX_N,
    stopwords: Optional[Iterable[str]] = None,
    language: str = config.DEFAULT_LANGUAGE,
    workers: Optional[int] = None,
) -> List[str]:
    """
    Extract candidate keyword terms.

    method:
      - "fakerake": n-grams from `text` (titles/abstracts)
      - "tagged": author/database keywords from `keywords`

    Terms pooled over all inputs are kept when they occur at least `min_freq`
    times; with `ngrams` enabled only terms of min_n..max_n words survive.
    Returns the unique qualifying terms, sorted.
    """
    method = coerce_option(ExtractionMethod, method, "extraction method")

    if method is ExtractionMethod.FAKERAKE:
        if not text:
            raise MissingInputError("fakerake extraction needs a body of text to extract terms from")
        if stopwords is None:
            stopwords = get_stopwords(language)
        lowered = [t.lower() for t in _as_list(text)]
        terms = fakerake(lowered, stopwords, min_n=min_n, max_n=max_n, workers=workers)
    elif method is ExtractionMethod.TAGGED:
        if not keywords:
            raise MissingInputError("tagged extraction needs keywords to extract terms from")
        terms = _tagged_terms(keywords)
    else:  # pragma: no cover - every ExtractionMethod member is handled above
        raise AssertionError(method)

    freq = Counter(terms)
    kept = [t for t, c in freq.items() if c >= min_freq]
    if ngrams:
        kept = [t for t in kept if min_n <= count_words(t) <= max_n]
    return sorted(kept)
