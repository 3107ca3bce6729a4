from __future__ import annotations

import json
import os
from pathlib import Path

from search_terms.__main__ import main
from search_terms.file_utils import out_path_for_input
from search_terms.study_data import iter_studies_from_file


def _write_studies(path: Path, titles: list[str]) -> None:
    path.write_text(json.dumps({"studies": [{"title": t, "abstract": ""} for t in titles]}), encoding="utf-8")


def test_iter_studies_reads_jsonl_and_list_keywords(tmp_path: Path) -> None:
    p = tmp_path / "search.jsonl"
    p.write_text(
        json.dumps({"title": "Fire severity", "abstract": "Burned forests", "keywords": ["fire", "burn"]})
        + "\n\n"
        + json.dumps({"title": "Salvage logging", "keywords": None})
        + "\n",
        encoding="utf-8",
    )
    studies = list(iter_studies_from_file(str(p)))
    assert [s.text for s in studies] == ["Fire severity Burned forests", "Salvage logging"]
    assert [s.keywords for s in studies] == ["fire; burn", ""]


def test_iter_studies_reads_plain_json_list(tmp_path: Path) -> None:
    p = tmp_path / "search.json"
    p.write_text(json.dumps([{"title": "A", "abstract": "B", "keywords": "x; y"}]), encoding="utf-8")
    (study,) = iter_studies_from_file(str(p))
    assert study.keywords == "x; y"


def test_out_path_strips_json_suffix() -> None:
    assert out_path_for_input("out", "data/naive.JSON") == os.path.join("out", "naive.keywords.jsonl")


def test_cli_writes_keywords_most_important_first(tmp_path: Path, fire_abstracts: list[str], capsys) -> None:
    inp = tmp_path / "naive.json"
    _write_studies(inp, fire_abstracts)
    out_dir = tmp_path / "out"

    code = main([
        "--input-file", str(inp),
        "--output-dir", str(out_dir),
        "--min-studies", "2",
        "--min-occ", "2",
        "--importance", "strength",
        "--cutoff", "cumulative",
        "--percent", "0.5",
    ])

    assert code == 0
    lines = (out_dir / "naive.keywords.jsonl").read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    assert [r["term"] for r in records] == ["woodpecker occupancy", "fire severity", "burned forests"]
    assert records[0] == {"term": "woodpecker occupancy", "rank": 4, "importance": 5.0}
    err = capsys.readouterr().err
    assert "[network] nodes=4" in err
    assert "[done] wrote 3 keywords" in err


def test_cli_reports_failed_inputs(tmp_path: Path, fire_abstracts: list[str], capsys) -> None:
    inp = tmp_path / "naive.json"
    _write_studies(inp, fire_abstracts)

    code = main([
        "--input-file", str(inp),
        "--output-dir", str(tmp_path / "out"),
        "--min-studies", "10",
        "--importance", "strength",
        "--cutoff", "cumulative",
    ])

    assert code == 1
    assert "[error]" in capsys.readouterr().err
    assert not (tmp_path / "out" / "naive.keywords.jsonl").exists()


def test_cli_continues_after_unreadable_input(tmp_path: Path, fire_abstracts: list[str], capsys) -> None:
    (tmp_path / "a_bad.json").write_text("{not json", encoding="utf-8")
    _write_studies(tmp_path / "b_good.json", fire_abstracts)
    out_dir = tmp_path / "out"

    code = main([
        "--input-glob", str(tmp_path / "*.json"),
        "--output-dir", str(out_dir),
        "--min-studies", "2",
        "--min-occ", "2",
        "--importance", "strength",
        "--cutoff", "cumulative",
        "--percent", "0.5",
    ])

    assert code == 1
    err = capsys.readouterr().err
    assert "[error]" in err and "a_bad.json" in err
    assert not (out_dir / "a_bad.keywords.jsonl").exists()
    assert len((out_dir / "b_good.keywords.jsonl").read_text(encoding="utf-8").splitlines()) == 3
