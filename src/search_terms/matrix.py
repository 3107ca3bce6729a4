"""
Document-feature matrix construction.
"""
from __future__ import annotations

import re
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import List, Optional, Sequence

import numpy as np

from .data_models import DocumentFeatureMatrix
from .errors import InvalidPatternError


def _compile_term(term: str) -> "re.Pattern[str]":
    try:
        return re.compile(term)
    except re.error as e:
        raise InvalidPatternError(term, str(e)) from None


def _detect(term: str, elements: Sequence[str]) -> List[int]:
    pattern = _compile_term(term)
    return [1 if pattern.search(el) else 0 for el in elements]


def create_dfm(
    elements: Sequence[str],
    features: Sequence[str],
    workers: Optional[int] = None,
) -> DocumentFeatureMatrix:
    """
    Build a binary documents x terms matrix.

    Each lowercased feature is searched as a pattern in each lowercased element.
    Matching is substring-based: "burn" is present in a document that only
    says "burned". Rows follow `elements`, columns follow `features`.
    """
    docs = [(e or "").lower() for e in elements]
    terms = [f.lower() for f in features]

    # Compile everything up front so a bad term fails before any work is scheduled.
    for t in terms:
        _compile_term(t)

    fn = partial(_detect, elements=docs)
    if workers and workers > 1 and len(terms) > 1:
        with ProcessPoolExecutor(max_workers=workers) as ex:
            columns = list(ex.map(fn, terms))
    else:
        columns = [fn(t) for t in terms]

    values = np.zeros((len(docs), len(terms)), dtype=int)
    for j, col in enumerate(columns):
        values[:, j] = col
    return DocumentFeatureMatrix(values=values, terms=terms)
