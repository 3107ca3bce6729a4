"""
Keyword co-occurrence network from a document-feature matrix.
"""
from __future__ import annotations

from typing import List, Tuple

import networkx as nx
import numpy as np

from . import config
from .data_models import DocumentFeatureMatrix
from .errors import EmptyNetworkError


def trim_dfm(
    dfm: DocumentFeatureMatrix,
    min_studies: int = config.DEFAULT_MIN_STUDIES,
    min_occ: int = config.DEFAULT_MIN_OCC,
) -> Tuple[np.ndarray, List[str]]:
    """
    One pass of rare-term and empty-document removal:

    1) drop terms present in fewer than `min_studies` documents
    2) from what is left, drop terms whose total count is below `min_occ`
    3) drop documents with no remaining occurrences

    Each step sees only the result of the step before it; nothing is re-checked.
    """
    values = np.asarray(dfm.values)
    terms = list(dfm.terms)

    presences = (values > 0).astype(int)
    keep = presences.sum(axis=0) >= min_studies
    values = values[:, keep]
    terms = [t for t, k in zip(terms, keep) if k]

    keep = values.sum(axis=0) >= min_occ
    values = values[:, keep]
    terms = [t for t, k in zip(terms, keep) if k]

    values = values[values.sum(axis=1) >= 1, :]
    return values, terms


def create_network(
    dfm: DocumentFeatureMatrix,
    min_studies: int = config.DEFAULT_MIN_STUDIES,
    min_occ: int = config.DEFAULT_MIN_OCC,
) -> nx.Graph:
    """
    Build an undirected weighted co-occurrence graph of the terms that survive trimming.

    weight(i, j) = sum over surviving documents of count_i * count_j, taken from
    X^T X with the diagonal left out. Terms that survive trimming but share no
    document with another term stay in the graph as isolated nodes.
    """
    values, terms = trim_dfm(dfm, min_studies=min_studies, min_occ=min_occ)
    if values.shape[1] == 0 or values.shape[0] == 0:
        raise EmptyNetworkError(
            f"empty network after trimming with min_studies={min_studies}, min_occ={min_occ} "
            f"({values.shape[1]} of {dfm.n_terms} terms, {values.shape[0]} of {dfm.n_documents} documents left)"
        )

    adjacency = values.T @ values

    graph = nx.Graph()
    graph.add_nodes_from(terms)
    n = len(terms)
    for i in range(n):
        for j in range(i + 1, n):
            w = int(adjacency[i, j])
            if w != 0:
                graph.add_edge(terms[i], terms[j], weight=w)
    return graph
