"""
Node importance ranking for keyword co-occurrence graphs.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Union

import networkx as nx
import numpy as np

from . import config
from .data_models import ImportanceMethod, ImportanceRow, coerce_option
from .text_utils import count_words

Scores = Dict[str, float]


def _scale_to_max(scores: Scores) -> Scores:
    top = max(scores.values(), default=0.0)
    if top <= 0:
        return scores
    return {k: v / top for k, v in scores.items()}


def _strength(graph: nx.Graph, **_opts) -> Scores:
    return {n: float(d) for n, d in graph.degree(weight="weight")}


def _eigencentrality(graph: nx.Graph, **_opts) -> Scores:
    scores = nx.eigenvector_centrality(graph, max_iter=1000, weight="weight")
    return _scale_to_max(scores)


def _alpha(graph: nx.Graph, alpha: float = config.DEFAULT_ALPHA_CENTRALITY, **_opts) -> Scores:
    """
    Alpha (Katz) centrality with beta = 1 on the weighted adjacency.
    Raises ValueError unless alpha is below 1 / spectral radius of that adjacency.
    """
    if graph.number_of_edges():
        adj = nx.to_numpy_array(graph, weight="weight")
        radius = float(np.max(np.abs(np.linalg.eigvalsh(adj))))
        if alpha * radius >= 1 or np.isclose(alpha * radius, 1.0):
            raise ValueError(
                f"alpha centrality is undefined for alpha={alpha}: "
                f"it must be below 1 / {radius:g} (the largest eigenvalue of the weighted adjacency)"
            )
    return nx.katz_centrality_numpy(graph, alpha=alpha, beta=1.0, normalized=False, weight="weight")


def _betweenness(graph: nx.Graph, **_opts) -> Scores:
    # Edge weights are read as distances, so heavily co-occurring pairs are "far apart".
    return nx.betweenness_centrality(graph, normalized=False, weight="weight")


def _hub(graph: nx.Graph, **_opts) -> Scores:
    if graph.number_of_edges() == 0:
        return {n: 0.0 for n in graph.nodes}
    hubs, _authorities = nx.hits(graph)
    return _scale_to_max(hubs)


def _power(graph: nx.Graph, exponent: float = config.DEFAULT_POWER_EXPONENT, **_opts) -> Scores:
    """
    Bonacich power centrality on the unweighted adjacency:
    c = (I - exponent * A)^-1 A 1, rescaled so that sum(c^2) equals the node count.
    """
    nodes = list(graph.nodes)
    n = len(nodes)
    adj = nx.to_numpy_array(graph, nodelist=nodes, weight=None)
    try:
        c = np.linalg.solve(np.eye(n) - exponent * adj, adj @ np.ones(n))
    except np.linalg.LinAlgError:
        raise ValueError(
            f"power centrality is undefined for this graph with exponent={exponent}"
        ) from None
    norm = float(np.sqrt(np.sum(c ** 2)))
    if norm > 0:
        c = c * np.sqrt(n) / norm
    return {node: float(v) for node, v in zip(nodes, c)}


_MEASURES: Dict[ImportanceMethod, Callable[..., Scores]] = {
    ImportanceMethod.STRENGTH: _strength,
    ImportanceMethod.EIGENCENTRALITY: _eigencentrality,
    ImportanceMethod.ALPHA: _alpha,
    ImportanceMethod.BETWEENNESS: _betweenness,
    ImportanceMethod.HUB: _hub,
    ImportanceMethod.POWER: _power,
}


def node_importance(
    graph: nx.Graph,
    method: Union[ImportanceMethod, str],
    *,
    alpha: float = config.DEFAULT_ALPHA_CENTRALITY,
    exponent: float = config.DEFAULT_POWER_EXPONENT,
) -> Scores:
    """Raw importance score per node for the selected measure."""
    method = coerce_option(ImportanceMethod, method, "importance method")
    if graph.number_of_nodes() == 0:
        return {}
    scores = _MEASURES[method](graph, alpha=alpha, exponent=exponent)
    return {n: float(scores[n]) for n in graph.nodes}


def make_importance(
    graph: nx.Graph,
    method: Union[ImportanceMethod, str],
    *,
    alpha: float = config.DEFAULT_ALPHA_CENTRALITY,
    exponent: float = config.DEFAULT_POWER_EXPONENT,
) -> List[ImportanceRow]:
    """
    Rank graph nodes by importance, least important first.

    Nodes are sorted ascending by score; equal scores keep the graph's node
    insertion order. Ranks run 1..N in that order.
    """
    scores = node_importance(graph, method, alpha=alpha, exponent=exponent)
    ordered = sorted(graph.nodes, key=lambda n: scores[n])
    return [
        ImportanceRow(rank=i, importance=scores[name], nodename=name)
        for i, name in enumerate(ordered, start=1)
    ]


def select_ngrams(importances: List[ImportanceRow], n: int = 2) -> List[ImportanceRow]:
    """Rows whose term has at least `n` words."""
    return [row for row in importances if count_words(row.nodename) >= n]


def select_unigrams(importances: List[ImportanceRow]) -> List[ImportanceRow]:
    """Rows whose term is a single word."""
    return [row for row in importances if count_words(row.nodename) == 1]
