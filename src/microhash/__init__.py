"""microhash: non-cryptographic hash functions and an open-addressing set."""

from .config import BenchmarkConfig, HashSetConfig, load_config
from .containers import OpenAddressingSet, SlotState, TableFullError
from .hashing import (
    CATALOGUE,
    INTEGER_HASHES,
    HashFunction,
    HashSpec,
    bytes_curl,
    bytes_jenkins,
    get_hash,
    int32_rob,
    int32_wang,
    int32_wang2,
    int64_wang,
    int6432_wang,
    str_djb2,
    str_sdbm,
    str_stb,
)
from .metrics import gini_coefficient, max_load, uniformity_deviation
from .utils import Timer, get_logger

__version__ = "0.1.0"

__all__ = [
    # Container
    "OpenAddressingSet",
    "SlotState",
    "TableFullError",
    # Hashing
    "HashFunction",
    "HashSpec",
    "CATALOGUE",
    "INTEGER_HASHES",
    "get_hash",
    "int32_wang",
    "int32_wang2",
    "int32_rob",
    "int64_wang",
    "int6432_wang",
    "bytes_curl",
    "bytes_jenkins",
    "str_stb",
    "str_djb2",
    "str_sdbm",
    # Metrics
    "uniformity_deviation",
    "max_load",
    "gini_coefficient",
    # Config
    "BenchmarkConfig",
    "HashSetConfig",
    "load_config",
    # Utils
    "get_logger",
    "Timer",
]
