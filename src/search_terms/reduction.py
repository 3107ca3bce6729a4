"""
Graph reduction to important nodes and keyword export.
"""
from __future__ import annotations

from typing import List

import networkx as nx

from .data_models import ImportanceRow


def reduce_graph(graph: nx.Graph, importances: List[ImportanceRow], cutoff: float) -> nx.Graph:
    """
    Keep only nodes whose importance is >= cutoff, with the edges among them.

    `importances` must come from make_importance() on this same graph and with
    the measure that produced `cutoff`. The source graph is left untouched.
    """
    keep = {row.nodename for row in importances if row.importance >= cutoff}
    return graph.subgraph(n for n in graph.nodes if n in keep).copy()


def get_keywords(reduced_graph: nx.Graph) -> List[str]:
    """Node names of a (reduced) graph, in the graph's node order."""
    return list(reduced_graph.nodes)
