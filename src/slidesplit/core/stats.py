"""Fragment length statistics."""

from typing import Dict, Sequence
import numpy as np

def length_summary(fragments: Sequence[str]) -> Dict[str, float]:
    """
    Summarize fragment lengths for previews and metrics.

    Args:
        fragments: Slide texts in reading order

    Returns:
        Dict[str, float]: count, mean, min, max, std and balance. Balance is
        1 - std/mean clipped to [0, 1]; 1.0 means every slide has the same length.
    """
    if not fragments:
        return {"count": 0.0, "mean": 0.0, "min": 0.0, "max": 0.0, "std": 0.0, "balance": 0.0}

    lengths = np.array([len(f) for f in fragments], dtype=float)
    mean = float(lengths.mean())
    std = float(lengths.std())
    balance = float(np.clip(1.0 - std / mean, 0.0, 1.0)) if mean > 0 else 0.0

    return {
        "count": float(lengths.size),
        "mean": mean,
        "min": float(lengths.min()),
        "max": float(lengths.max()),
        "std": std,
        "balance": balance,
    }
