"""
End-to-end keyword suggestion for one corpus of studies.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

import networkx as nx

from . import config
from .cutoff import find_cutoff
from .data_models import (
    CutoffMethod,
    ExtractionMethod,
    ImportanceMethod,
    ImportanceRow,
    coerce_option,
)
from .matrix import create_dfm
from .network import create_network
from .reduction import get_keywords, reduce_graph
from .scoring import make_importance
from .term_extraction import extract_terms


@dataclass
class KeywordSuggestion:
    keywords: List[str]
    importances: List[ImportanceRow]
    cutoff: Optional[float]
    candidate_cutoffs: List[float]
    graph: nx.Graph
    reduced_graph: nx.Graph


def suggest_keywords(
    documents: Sequence[str],
    *,
    extraction: Union[ExtractionMethod, str],
    importance: Union[ImportanceMethod, str],
    cutoff: Union[CutoffMethod, str],
    keywords: Optional[Sequence[str]] = None,
    min_freq: int = config.DEFAULT_MIN_FREQ,
    ngrams: bool = config.DEFAULT_NGRAMS,
    min_n: int = config.DEFAULT_MIN_N,
    max_n: int = config.DEFAULT_MAX_N,
    stopwords: Optional[Iterable[str]] = None,
    language: str = config.DEFAULT_LANGUAGE,
    min_studies: int = config.DEFAULT_MIN_STUDIES,
    min_occ: int = config.DEFAULT_MIN_OCC,
    percent: float = config.DEFAULT_PERCENT,
    knot_num: int = config.DEFAULT_KNOT_NUM,
    cutoff_index: int = config.DEFAULT_CUTOFF_INDEX,
    workers: Optional[int] = None,
) -> KeywordSuggestion:
    """
    Run extraction -> matrix -> network -> importance -> cutoff -> reduction.

    Terms come from `documents` (fakerake) or from `keywords` (tagged); the
    matrix is always built over `documents`. With changepoint cutoffs,
    `cutoff_index` picks which candidate to apply (0 = lowest); when no
    changepoint is detected nothing is removed and `cutoff` is None.
    """
    cutoff = coerce_option(CutoffMethod, cutoff, "cutoff method")

    terms = extract_terms(
        text=list(documents),
        keywords=keywords,
        method=extraction,
        min_freq=min_freq,
        ngrams=ngrams,
        min_n=min_n,
        max_n=max_n,
        stopwords=stopwords,
        language=language,
        workers=workers,
    )
    dfm = create_dfm(documents, terms, workers=workers)
    graph = create_network(dfm, min_studies=min_studies, min_occ=min_occ)
    importances = make_importance(graph, importance)

    found = find_cutoff(importances, cutoff, percent=percent, knot_num=knot_num)
    if cutoff is CutoffMethod.CHANGEPOINT:
        candidates = list(found)
        if candidates and not 0 <= cutoff_index < len(candidates):
            raise ValueError(f"cutoff_index {cutoff_index} out of range for {len(candidates)} changepoint cutoffs")
        chosen = candidates[cutoff_index] if candidates else None
    else:
        candidates = [found]
        chosen = found

    if chosen is None:
        reduced = graph.copy()
    else:
        reduced = reduce_graph(graph, importances, chosen)

    return KeywordSuggestion(
        keywords=get_keywords(reduced),
        importances=importances,
        cutoff=chosen,
        candidate_cutoffs=candidates,
        graph=graph,
        reduced_graph=reduced,
    )
