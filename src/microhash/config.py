"""Configuration loading utilities."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

import yaml

if TYPE_CHECKING:
    import torch


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    return config


@dataclass(frozen=True)
class HashSetConfig:
    """Configuration for OpenAddressingSet.

    Attributes:
        initial_capacity: Slots allocated by init(), must be power of 2
        max_load_factor: Upper bound on size / capacity after an insert
    """

    initial_capacity: int = 16
    max_load_factor: float = 0.7

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        if not (self.initial_capacity & (self.initial_capacity - 1) == 0):
            raise ValueError(
                f"initial_capacity must be power of 2, got {self.initial_capacity}"
            )
        if not (0.0 < self.max_load_factor < 1.0):
            raise ValueError(
                f"max_load_factor must be in (0, 1), got {self.max_load_factor}"
            )


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration for a collision benchmark run.

    Attributes:
        iterations: Number of keys generated per run (N)
        precision: Bucket space is 2^precision for the uniformity estimate
        seed: Generator seed
        chunk_size: Keys hashed per vectorized batch
        device: Device for the vectorized hash path ("cpu" or "cuda")
        hashset: Configuration of the result set
    """

    iterations: int = 10_000_000
    precision: int = 12
    seed: int = 6969
    chunk_size: int = 65536
    device: str = "cpu"
    hashset: HashSetConfig = field(default_factory=HashSetConfig)

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.iterations <= 0:
            raise ValueError("iterations must be positive")
        # Memory for the bucket counters scales as 2^precision
        if not (1 <= self.precision <= 32):
            raise ValueError(f"precision must be in [1, 32], got {self.precision}")
        if self.seed < 0:
            raise ValueError("seed must be non-negative")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if self.device not in ("cpu", "cuda"):
            raise ValueError(f"device must be 'cpu' or 'cuda', got {self.device}")

    @property
    def num_buckets(self) -> int:
        return 1 << self.precision

    def torch_device(self) -> "torch.device":
        """Device the vectorized hash path runs on.

        Raises:
            RuntimeError: If the config asks for CUDA and none is available
        """
        import torch

        if self.device == "cuda" and not torch.cuda.is_available():
            raise RuntimeError("benchmark configured for cuda but CUDA is not available")
        return torch.device(self.device)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "BenchmarkConfig":
        """Build a config from a (YAML-loaded) dictionary.

        Unknown keys are rejected. A nested ``hashset`` mapping becomes a
        HashSetConfig.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown benchmark config keys: {sorted(unknown)}")

        values = dict(config)
        hashset = values.pop("hashset", None) or {}
        if not isinstance(hashset, HashSetConfig):
            hashset = HashSetConfig(**hashset)
        return cls(hashset=hashset, **values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "iterations": self.iterations,
            "precision": self.precision,
            "seed": self.seed,
            "chunk_size": self.chunk_size,
            "device": self.device,
            "hashset": {
                "initial_capacity": self.hashset.initial_capacity,
                "max_load_factor": self.hashset.max_load_factor,
            },
        }
