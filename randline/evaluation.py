"""Empirical checks of sampler uniformity.

These helpers depend only on ``numpy`` and ``scipy`` and work with any
:class:`~randline.sampling.base.StreamSampler`.
"""

from __future__ import annotations

import numpy as np
from scipy.stats import chisquare

from randline.sampling.base import StreamSampler


def selection_counts(sampler: StreamSampler, n_items: int, k: int, trials: int) -> np.ndarray:
    """Count how often each of ``range(n_items)`` is selected over *trials* runs.

    Args:
        sampler: Sampler to run; it is reused across trials.
        n_items: Stream length; items are the labels ``0 .. n_items - 1``.
        k: Sample size requested on every trial.
        trials: Number of independent sampling runs.

    Returns:
        Integer array of shape ``(n_items,)``.
    """
    counts = np.zeros(n_items, dtype=np.int64)
    for _ in range(trials):
        selected = sampler.sample(iter(range(n_items)), k)
        counts[np.asarray(selected, dtype=np.int64)] += 1
    return counts


def uniformity_report(counts: np.ndarray, trials: int, k: int) -> dict[str, float]:
    """Summarize how far *counts* are from a uniform selection process.

    Returns:
        Mapping with ``expected`` (per-label count under uniformity),
        ``max_rel_deviation`` (largest ``|count - expected| / expected``),
        ``chi2`` and ``p_value`` from a chi-square goodness-of-fit test.
    """
    counts = np.asarray(counts, dtype=np.float64)
    n_items = counts.size
    if n_items == 0:
        raise ValueError("counts must not be empty")
    expected = trials * min(k, n_items) / n_items
    if expected == 0.0:
        return {"expected": 0.0, "max_rel_deviation": 0.0, "chi2": 0.0, "p_value": 1.0}
    max_rel_deviation = float(np.max(np.abs(counts - expected)) / expected)
    if min(k, n_items) == n_items:
        # Every label is selected on every trial.
        return {
            "expected": expected,
            "max_rel_deviation": max_rel_deviation,
            "chi2": 0.0,
            "p_value": 1.0,
        }
    chi2, p_value = chisquare(counts, f_exp=np.full(n_items, expected))
    return {
        "expected": float(expected),
        "max_rel_deviation": max_rel_deviation,
        "chi2": float(chi2),
        "p_value": float(p_value),
    }
