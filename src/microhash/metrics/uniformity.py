"""Distribution metrics over per-bucket hash counts."""

from typing import Sequence

import numpy as np


def bucket_counts(hashes: Sequence[int], precision: int) -> np.ndarray:
    """Count hashes per bucket, bucket = hash mod 2^precision.

    Args:
        hashes: Unsigned hash values
        precision: log2 of the number of buckets

    Returns:
        int64 array of shape [2^precision]
    """
    num_buckets = 1 << precision
    buckets = np.fromiter(
        (h & (num_buckets - 1) for h in hashes), dtype=np.int64, count=len(hashes)
    )
    return np.bincount(buckets, minlength=num_buckets).astype(np.int64)


def uniformity_deviation(counts: Sequence[int], iterations: int) -> float:
    """Mean absolute difference between observed and expected bucket counts.

    The expected count is ``iterations // len(counts)``; integer division is
    intentional and no rounding correction is applied. Lower is better.

    Args:
        counts: Per-bucket counts
        iterations: Number of keys generated (including collisions)

    Returns:
        Mean deviation (>= 0)
    """
    counts = np.asarray(counts, dtype=np.float64)
    if counts.size == 0:
        return 0.0
    expected = float(iterations // counts.size)
    return float(np.mean(np.abs(counts - expected)))


def max_load(counts: Sequence[int]) -> int:
    """Largest bucket count."""
    counts = np.asarray(counts)
    if counts.size == 0:
        return 0
    return int(counts.max())


def gini_coefficient(counts: Sequence[int]) -> float:
    """Concentration of stored hashes across buckets.

    0 when every bucket holds the same number of fresh hashes; approaches 1
    as the hashes pile into a single bucket (a constant hash over 4096
    buckets scores 4095/4096). Empty or all-zero counts score 0.
    """
    counts = np.sort(np.asarray(counts, dtype=np.float64))
    total = counts.sum()
    if counts.size == 0 or total == 0:
        return 0.0

    # Sorted-rank form of the mean absolute difference over all bucket pairs
    buckets = counts.size
    rank = np.arange(1, buckets + 1)
    return float(2 * np.dot(rank, counts) / (buckets * total) - (buckets + 1) / buckets)
