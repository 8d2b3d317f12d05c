"""Report formatting and artifact output for benchmark runs."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from microhash.benchmark.collisions import BenchmarkResult

TABLE_TOP = "/----------------------------------------------------------\\"
TABLE_HEADER = "|      hash function      |  collisions  |  non-uniformity |"
TABLE_RULE = "| ----------------------- | ------------ | --------------- |"
TABLE_BOTTOM = "\\----------------------------------------------------------/"


def format_row(result: BenchmarkResult) -> str:
    """One table row: name truncated/padded to 23, collisions, deviation."""
    return (
        f"| {result.name[:23]:<23} | {result.collisions:<12d} "
        f"| {result.mean_deviation:<12.12f} |"
    )


def format_table(results: List[BenchmarkResult]) -> str:
    lines = [TABLE_TOP, TABLE_HEADER, TABLE_RULE]
    lines.extend(format_row(r) for r in results)
    lines.append(TABLE_BOTTOM)
    return "\n".join(lines)


def format_report(results: List[BenchmarkResult], iterations: int, precision: int) -> str:
    """Full text report: run parameters followed by the framed table."""
    return "\n".join(
        [
            f"Iterating over {iterations} random values...",
            f"Precision set to {precision}",
            format_table(results),
        ]
    )


def get_hardware_info() -> Dict[str, Any]:
    """Get torch version and the device available to the vectorized path."""
    import torch

    info = {
        "torch_version": torch.__version__,
    }
    if torch.cuda.is_available():
        info["cuda_version"] = torch.version.cuda
        info["gpu_name"] = torch.cuda.get_device_name(0)
        info["device"] = "cuda"
    else:
        info["device"] = "cpu"
    return info


def write_metrics_json(
    path: Path,
    config: Dict[str, Any],
    results: List[BenchmarkResult],
) -> None:
    """Write benchmark metrics as JSON.

    Args:
        path: Output JSON path
        config: Benchmark configuration (as a dict)
        results: Completed runs
    """
    metrics = {
        "timestamp": datetime.now().isoformat(),
        "hardware": get_hardware_info(),
        "config": config,
        "results": [r.to_dict() for r in results],
    }

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)
