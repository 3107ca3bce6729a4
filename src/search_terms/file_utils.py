import json
import os
import re
from typing import List

from .data_models import ImportanceRow


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def out_path_for_input(output_dir: str, input_path: str) -> str:
    base = os.path.basename(input_path)
    base = re.sub(r"\.jsonl?$", "", base, flags=re.IGNORECASE)
    return os.path.join(output_dir, f"{base}.keywords.jsonl")


def write_keywords(path: str, keywords: List[str], importances: List[ImportanceRow]) -> int:
    """
    Write one JSON object per keyword, most important first.
    Returns the number of records written.
    """
    rows = {row.nodename: row for row in importances}
    kept = sorted((rows[k] for k in keywords), key=lambda r: r.rank, reverse=True)
    with open(path, "w", encoding="utf-8") as f:
        for row in kept:
            f.write(json.dumps({"term": row.nodename, "rank": row.rank, "importance": row.importance}) + "\n")
    return len(kept)
