"""Metrics module for microhash."""

from microhash.metrics.uniformity import (
    bucket_counts,
    gini_coefficient,
    max_load,
    uniformity_deviation,
)

__all__ = [
    "bucket_counts",
    "uniformity_deviation",
    "max_load",
    "gini_coefficient",
]
