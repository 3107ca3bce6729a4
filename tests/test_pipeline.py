from __future__ import annotations

import pytest

from search_terms.errors import EmptyNetworkError, MissingInputError, UnsupportedOptionError
from search_terms.pipeline import suggest_keywords

FIRE_OPTS = dict(min_freq=2, min_n=2, max_n=3, min_studies=2, min_occ=2)


def test_cumulative_pipeline_drops_least_important_term(fire_abstracts: list[str]) -> None:
    result = suggest_keywords(
        fire_abstracts,
        extraction="fakerake",
        importance="strength",
        cutoff="cumulative",
        percent=0.5,
        **FIRE_OPTS,
    )
    assert list(result.graph.nodes) == [
        "burned forests",
        "fire severity",
        "salvage logging",
        "woodpecker occupancy",
    ]
    assert [(r.nodename, r.importance) for r in result.importances] == [
        ("salvage logging", 3.0),
        ("burned forests", 4.0),
        ("fire severity", 4.0),
        ("woodpecker occupancy", 5.0),
    ]
    assert result.cutoff == 4.0
    assert result.candidate_cutoffs == [4.0]
    assert result.keywords == ["burned forests", "fire severity", "woodpecker occupancy"]
    assert "salvage logging" in result.graph
    assert "salvage logging" not in result.reduced_graph


def test_changepoint_pipeline_without_changepoint_keeps_all(fire_abstracts: list[str]) -> None:
    result = suggest_keywords(
        fire_abstracts,
        extraction="fakerake",
        importance="strength",
        cutoff="changepoint",
        **FIRE_OPTS,
    )
    assert result.candidate_cutoffs == []
    assert result.cutoff is None
    assert result.keywords == list(result.graph.nodes)


def test_tagged_pipeline_uses_keywords_for_terms(fire_abstracts: list[str]) -> None:
    keywords = [
        "fire severity; woodpecker occupancy",
        "woodpecker occupancy; salvage logging",
        "fire severity; burned forests",
        "salvage logging",
    ]
    result = suggest_keywords(
        fire_abstracts,
        keywords=keywords,
        extraction="tagged",
        importance="strength",
        cutoff="cumulative",
        percent=1.0,
        **FIRE_OPTS,
    )
    assert set(result.graph.nodes) == {"fire severity", "salvage logging", "woodpecker occupancy"}
    assert set(result.keywords) == set(result.graph.nodes)


def test_pipeline_errors_surface(fire_abstracts: list[str]) -> None:
    with pytest.raises(MissingInputError):
        suggest_keywords(fire_abstracts, extraction="tagged", importance="strength", cutoff="cumulative")
    with pytest.raises(UnsupportedOptionError):
        suggest_keywords(fire_abstracts, extraction="fakerake", importance="strength", cutoff="elbow")
    with pytest.raises(EmptyNetworkError):
        suggest_keywords(
            fire_abstracts,
            extraction="fakerake",
            importance="strength",
            cutoff="cumulative",
            min_freq=2,
            min_n=2,
            max_n=3,
            min_studies=10,
        )


RIVER_DOCS = [f"river {animal}" for animal in ("heron", "otter", "beaver", "salmon", "trout") for _ in range(2)]
RIVER_OPTS = dict(min_freq=2, min_n=1, max_n=1, min_studies=1, min_occ=1)


def test_changepoint_pipeline_applies_selected_candidate() -> None:
    result = suggest_keywords(
        RIVER_DOCS,
        extraction="fakerake",
        importance="strength",
        cutoff="changepoint",
        **RIVER_OPTS,
    )
    assert result.importances[-1].nodename == "river"
    assert result.candidate_cutoffs == [2.0]
    assert result.cutoff == 2.0
    assert len(result.keywords) == 6


def test_cutoff_index_out_of_range_is_rejected() -> None:
    with pytest.raises(ValueError):
        suggest_keywords(
            RIVER_DOCS,
            extraction="fakerake",
            importance="strength",
            cutoff="changepoint",
            cutoff_index=99,
            **RIVER_OPTS,
        )
