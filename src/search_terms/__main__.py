#!/usr/bin/env python3
"""
Keyword suggestion for systematic review searches.

- Reads one or many study files (JSON list, {"studies": [...]}, or JSONL)
  with "title", "abstract" and optional "keywords" fields
- Extracts candidate terms, builds the term co-occurrence network, ranks
  terms by importance and keeps those above a data-driven cutoff
- Each input file is processed as its own corpus

Usage examples:
  python3 -m search_terms --input-file naive_search.json --importance strength --cutoff cumulative
  python3 -m search_terms --input-glob "searches/*.jsonl" --importance strength --cutoff changepoint --knot-num 4
  python3 -m search_terms --input-file naive_search.json --method tagged --min-freq 1 \
      --importance eigencentrality --cutoff cumulative --percent 0.5

Output:
  For each input file path/to/name.json, writes:
    output/keywords/name.keywords.jsonl
  Each line is a JSON object:
    { "term": "black-backed woodpecker", "rank": 41, "importance": 118.0 }
  ordered from most to least important.
"""
from __future__ import annotations

import argparse
import sys
from glob import glob
from typing import List, Optional

from . import config
from .data_models import CutoffMethod, ExtractionMethod, ImportanceMethod
from .file_utils import ensure_dir, out_path_for_input, write_keywords
from .pipeline import suggest_keywords
from .study_data import iter_studies_from_file


def process_inputs(
    input_paths: List[str],
    output_dir: str,
    method: str,
    importance: str,
    cutoff: str,
    min_freq: int = config.DEFAULT_MIN_FREQ,
    ngrams: bool = config.DEFAULT_NGRAMS,
    min_n: int = config.DEFAULT_MIN_N,
    max_n: int = config.DEFAULT_MAX_N,
    language: str = config.DEFAULT_LANGUAGE,
    min_studies: int = config.DEFAULT_MIN_STUDIES,
    min_occ: int = config.DEFAULT_MIN_OCC,
    percent: float = config.DEFAULT_PERCENT,
    knot_num: int = config.DEFAULT_KNOT_NUM,
    cutoff_index: int = config.DEFAULT_CUTOFF_INDEX,
    workers: int = config.DEFAULT_WORKERS,
) -> int:
    """
    Run the pipeline over each input file. Returns the number of files that failed.
    """
    if not input_paths:
        print("No input files matched.", file=sys.stderr)
        return 0

    ensure_dir(output_dir)
    failures = 0

    for inp in input_paths:
        outp = out_path_for_input(output_dir, inp)
        try:
            studies = list(iter_studies_from_file(inp))
            documents = [s.text for s in studies]
            keywords = [s.keywords for s in studies if s.keywords]
            print(f"[terms] {inp}: {len(studies):,} studies, {len(keywords):,} with keywords, method={method}", file=sys.stderr)

            result = suggest_keywords(
                documents,
                extraction=method,
                importance=importance,
                cutoff=cutoff,
                keywords=keywords,
                min_freq=min_freq,
                ngrams=ngrams,
                min_n=min_n,
                max_n=max_n,
                language=language,
                min_studies=min_studies,
                min_occ=min_occ,
                percent=percent,
                knot_num=knot_num,
                cutoff_index=cutoff_index,
                workers=workers,
            )
        except (ValueError, OSError) as e:
            print(f"[error] {inp}: {e}", file=sys.stderr)
            failures += 1
            continue

        g = result.graph
        print(f"[network] nodes={g.number_of_nodes():,}, edges={g.number_of_edges():,}", file=sys.stderr)
        print(f"[importance] measure={importance}, top={result.importances[-1].nodename!r}", file=sys.stderr)
        if result.cutoff is None:
            print("[cutoff] no changepoint detected; keeping every node", file=sys.stderr)
        else:
            shown = ", ".join(f"{c:g}" for c in result.candidate_cutoffs)
            print(f"[cutoff] {cutoff}: candidates=[{shown}] applied={result.cutoff:g}", file=sys.stderr)

        count_written = write_keywords(outp, result.keywords, result.importances)
        print(f"[done] wrote {count_written} keywords to {outp}", file=sys.stderr)

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Suggest search keywords from titles, abstracts and author keywords via a term co-occurrence network.")
    g = ap.add_mutually_exclusive_group(required=True)
    g.add_argument("--input-file", type=str, help="Path to one study file (.json or .jsonl)")
    g.add_argument("--input-glob", type=str, help="Glob for many study files, e.g., 'searches/*.json'")
    ap.add_argument("--output-dir", type=str, default=config.DEFAULT_OUTPUT_DIR, help="Directory for output JSONL files")

    # Term extraction
    ap.add_argument("--method", type=str, default=ExtractionMethod.FAKERAKE.value, choices=[m.value for m in ExtractionMethod], help="Extract terms from titles/abstracts (fakerake) or author keywords (tagged)")
    ap.add_argument("--min-freq", type=int, default=config.DEFAULT_MIN_FREQ, help="Minimum pooled occurrences of a candidate term")
    ap.add_argument("--min-n", type=int, default=config.DEFAULT_MIN_N, help="Minimum n-gram length")
    ap.add_argument("--max-n", type=int, default=config.DEFAULT_MAX_N, help="Maximum n-gram length")
    ap.add_argument("--no-ngrams", action="store_true", help="Do not restrict terms to min-n..max-n words")
    ap.add_argument("--language", type=str, default=config.DEFAULT_LANGUAGE, help="Stopword language")

    # Network
    ap.add_argument("--min-studies", type=int, default=config.DEFAULT_MIN_STUDIES, help="Minimum number of studies a term must appear in")
    ap.add_argument("--min-occ", type=int, default=config.DEFAULT_MIN_OCC, help="Minimum total occurrences of a term")

    # Importance and cutoff (no defaults: the choice changes the result)
    ap.add_argument("--importance", type=str, required=True, choices=[m.value for m in ImportanceMethod], help="Node importance measure")
    ap.add_argument("--cutoff", type=str, required=True, choices=[m.value for m in CutoffMethod], help="Cutoff selection method")
    ap.add_argument("--percent", type=float, default=config.DEFAULT_PERCENT, help="Share of total importance to capture (cumulative)")
    ap.add_argument("--knot-num", type=int, default=config.DEFAULT_KNOT_NUM, help="Maximum number of changepoints (changepoint)")
    ap.add_argument("--cutoff-index", type=int, default=config.DEFAULT_CUTOFF_INDEX, help="Which changepoint candidate to apply, 0 = lowest (changepoint)")

    ap.add_argument("--workers", type=int, default=config.DEFAULT_WORKERS, help="Worker processes for n-gram extraction and term matching")

    args = ap.parse_args(argv)

    if args.input_file:
        inputs = [args.input_file]
    else:
        inputs = sorted(glob(args.input_glob))

    failures = process_inputs(
        input_paths=inputs,
        output_dir=args.output_dir,
        method=args.method,
        importance=args.importance,
        cutoff=args.cutoff,
        min_freq=args.min_freq,
        ngrams=(not args.no_ngrams),
        min_n=args.min_n,
        max_n=args.max_n,
        language=args.language,
        min_studies=args.min_studies,
        min_occ=args.min_occ,
        percent=args.percent,
        knot_num=args.knot_num,
        cutoff_index=args.cutoff_index,
        workers=args.workers,
    )
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
