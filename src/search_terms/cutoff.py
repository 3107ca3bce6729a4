"""
Selection of the importance cutoff separating key terms from noise.
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Union

import numpy as np

from . import config
from .data_models import CutoffMethod, ImportanceRow, coerce_option


def binseg_mean(
    values: Sequence[float],
    max_cpts: int,
    penalty: Optional[float] = None,
) -> List[int]:
    """
    Binary segmentation for changes in mean (normal cost, unit variance).

    Segment cost is sum(x^2) - sum(x)^2 / m. At each of up to `max_cpts` steps
    the single split with the largest cost reduction over all current segments
    is added. Reductions are clamped to be non-increasing, and the number of
    changepoints kept is the last step whose reduction is >= `penalty`
    (default 2 * log(n)).

    Returns changepoint positions sorted ascending. Position k means the left
    segment holds the first k observations, so the changepoint value is
    values[k - 1].
    """
    x = np.asarray(values, dtype=float)
    n = len(x)
    if n < 2 or max_cpts < 1:
        return []
    if penalty is None:
        penalty = 2.0 * math.log(n)

    y = np.concatenate(([0.0], np.cumsum(x)))
    y2 = np.concatenate(([0.0], np.cumsum(x ** 2)))

    def cost(a, b):
        return (y2[b] - y2[a]) - (y[b] - y[a]) ** 2 / (b - a)

    bounds = [0, n]
    found: List[int] = []
    gains: List[float] = []
    oldmax = math.inf
    for _ in range(min(max_cpts, n - 1)):
        best_gain = -math.inf
        best_k = None
        for a, b in zip(bounds[:-1], bounds[1:]):
            if b - a < 2:
                continue
            ks = np.arange(a + 1, b)
            split = cost(a, ks) + cost(ks, b)
            seg_gains = cost(a, b) - split
            i = int(np.argmax(seg_gains))
            if seg_gains[i] > best_gain:
                best_gain = float(seg_gains[i])
                best_k = int(ks[i])
        if best_k is None:
            break
        oldmax = min(oldmax, best_gain)
        found.append(best_k)
        gains.append(oldmax)
        bounds = sorted(bounds + [best_k])

    passing = [q for q, g in enumerate(gains, start=1) if g >= penalty]
    n_cpts = max(passing) if passing else 0
    return sorted(found[:n_cpts])


def changepoint_cutoffs(values: Sequence[float], knot_num: int = config.DEFAULT_KNOT_NUM) -> List[float]:
    """
    Candidate cutoffs at the mean-shift changepoints of the ascending importance values.
    May be empty when no shift beats the 2 * log(n) penalty.
    """
    ordered = sorted(float(v) for v in values)
    return [ordered[k - 1] for k in binseg_mean(ordered, knot_num)]


def cumulative_cutoff(values: Sequence[float], percent: float = config.DEFAULT_PERCENT) -> float:
    """
    Largest importance value such that keeping every node at or above it
    captures at least `percent` of the total importance.
    """
    if not 0 < percent <= 1:
        raise ValueError(f"percent must be in (0, 1], got {percent}")
    desc = np.sort(np.asarray(values, dtype=float))[::-1]
    if desc.size == 0:
        raise ValueError("cannot pick a cutoff from no importance values")
    running = np.cumsum(desc)
    if running[-1] <= 0:
        raise ValueError(f"cumulative cutoff needs a positive total importance, got {running[-1]:g}")
    reached = np.nonzero(running >= running[-1] * percent)[0]
    return float(desc[reached[0]])


def find_cutoff(
    importances: List[ImportanceRow],
    method: Union[CutoffMethod, str],
    *,
    percent: float = config.DEFAULT_PERCENT,
    knot_num: int = config.DEFAULT_KNOT_NUM,
) -> Union[float, List[float]]:
    """
    Find the minimum importance for a node to count as a key term.

    method:
      - "changepoint": list of candidate cutoffs (possibly empty), ascending
      - "cumulative": a single cutoff capturing `percent` of total importance
    """
    method = coerce_option(CutoffMethod, method, "cutoff method")
    values = [row.importance for row in importances]
    if not values:
        raise ValueError("cannot pick a cutoff from an empty importance table")

    if method is CutoffMethod.CHANGEPOINT:
        return changepoint_cutoffs(values, knot_num)
    if method is CutoffMethod.CUMULATIVE:
        return cumulative_cutoff(values, percent)
    raise AssertionError(method)  # pragma: no cover
