"""Plot per-bucket counts of benchmark runs."""

import matplotlib
# Use Agg backend (non-interactive, PDF-compatible)
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from pathlib import Path
from typing import List

import numpy as np

from microhash.benchmark.collisions import BenchmarkResult


def save_pdf(fig, path: Path) -> None:
    """Save figure as PDF with tight layout.

    Args:
        fig: Matplotlib figure
        path: Output PDF path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight", dpi=150)
    plt.close(fig)


def plot_bucket_counts(results: List[BenchmarkResult], path: Path) -> None:
    """One panel per hash: bucket counts against the expected uniform count.

    Args:
        results: Completed runs (must share iterations and precision)
        path: Output PDF path
    """
    if not results:
        raise ValueError("nothing to plot")

    fig, axes = plt.subplots(
        len(results), 1, figsize=(8, 2.2 * len(results)), sharex=True, squeeze=False
    )
    for ax, result in zip(axes[:, 0], results):
        expected = result.iterations // len(result.counts)
        ax.plot(np.arange(len(result.counts)), result.counts, linewidth=0.5)
        ax.axhline(expected, color="black", linestyle="--", linewidth=1, label="expected")
        ax.set_title(
            f"{result.name}  (collisions={result.collisions}, "
            f"non-uniformity={result.mean_deviation:.3f})",
            fontsize=9,
        )
        ax.set_ylabel("count")
    axes[-1, 0].set_xlabel(f"bucket (hash mod 2^{results[0].precision})")
    axes[0, 0].legend(loc="upper right", fontsize=8)

    save_pdf(fig, path)
