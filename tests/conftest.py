from __future__ import annotations

import networkx as nx
import pytest

from search_terms.data_models import DocumentFeatureMatrix
from search_terms.matrix import create_dfm

WOODPECKER_TITLES = [
    "Cross-scale occupancy dynamics of a postfire specialist in response to variation across a fire regime",
    "Variation in home-range size of Black-backed Woodpeckers",
    "Black-backed woodpecker occupancy in burned and beetle-killed forests",
]
WOODPECKER_TERMS = ["occupancy", "variation", "black-backed woodpecker", "burn"]

FIRE_ABSTRACTS = [
    "Fire severity and woodpecker occupancy in burned forests",
    "Woodpecker occupancy depends on fire severity",
    "Salvage logging lowers woodpecker occupancy in burned forests",
    "Fire severity drives salvage logging decisions",
]


@pytest.fixture
def woodpecker_dfm() -> DocumentFeatureMatrix:
    return create_dfm(WOODPECKER_TITLES, WOODPECKER_TERMS)


@pytest.fixture
def paw_graph() -> nx.Graph:
    """Triangle a-b-c with a pendant d on c; weights differ per edge."""
    g = nx.Graph()
    g.add_nodes_from(["a", "b", "c", "d"])
    g.add_edge("a", "b", weight=3)
    g.add_edge("b", "c", weight=1)
    g.add_edge("a", "c", weight=1)
    g.add_edge("c", "d", weight=2)
    return g


@pytest.fixture
def woodpecker_titles() -> list[str]:
    return list(WOODPECKER_TITLES)


@pytest.fixture
def woodpecker_terms() -> list[str]:
    return list(WOODPECKER_TERMS)


@pytest.fixture
def fire_abstracts() -> list[str]:
    return list(FIRE_ABSTRACTS)
