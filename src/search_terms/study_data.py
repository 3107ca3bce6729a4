"""
Study record loading utilities.
"""
import json
from typing import Iterable

from .data_models import StudyDoc


def _keyword_string(value) -> str:
    # Exports give keywords either as one ';'-separated string or as a list.
    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        return "; ".join(str(v) for v in value if v)
    return str(value)


def _to_study(s: dict) -> StudyDoc:
    return StudyDoc(
        title=s.get("title", "") or "",
        abstract=s.get("abstract", "") or "",
        keywords=_keyword_string(s.get("keywords")),
    )


def iter_studies_from_file(path: str) -> Iterable[StudyDoc]:
    """
    Yield studies from a JSON file (a list, or an object with a "studies" list)
    or a JSONL file (one object per line).
    """
    with open(path, "r", encoding="utf-8") as f:
        if path.lower().endswith(".jsonl"):
            for line in f:
                line = line.strip()
                if not line:
                    continue
                yield _to_study(json.loads(line))
            return
        data = json.load(f)
    studies = data.get("studies", []) if isinstance(data, dict) else data
    for s in studies or []:
        yield _to_study(s)

