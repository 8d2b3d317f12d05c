"""Collision and uniformity benchmark for hash functions.

A run feeds ``iterations`` pseudo-random keys through one hash function and
inserts every result into an OpenAddressingSet. A failed insert is a
collision (the hash value was produced before). Successful inserts are
tallied per bucket ``hash mod 2^precision`` to estimate how far the output
distribution is from uniform.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from microhash.benchmark.lcg import (
    LCG32,
    LCG64,
    LCG64_NARROW,
    LCGParams,
    LinearCongruentialGenerator,
)
from microhash.config import BenchmarkConfig
from microhash.containers.hashset import OpenAddressingSet
from microhash.hashing.catalogue import get_hash
from microhash.hashing.integer import int32_wang, int64_wang
from microhash.hashing.tensor import TENSOR_HASHES, to_unsigned
from microhash.metrics.uniformity import (
    bucket_counts,
    gini_coefficient,
    max_load,
    uniformity_deviation,
)
from microhash.utils.log import get_logger
from microhash.utils.timing import Timer

logger = get_logger("benchmark")

# Generator driving each integer hash. int6432_wang is fed by the 64-bit
# constants but through a 32-bit state.
BENCHMARK_GENERATORS: Dict[str, LCGParams] = {
    "int32_wang": LCG32,
    "int32_wang2": LCG32,
    "int32_rob": LCG32,
    "int64_wang": LCG64,
    "int6432_wang": LCG64_NARROW,
}


def result_set_hash(result_bits: int) -> Callable[[int], int]:
    """Hash used by the result set for hash values of the given width."""
    return int32_wang if result_bits == 32 else int64_wang


@dataclass
class BenchmarkResult:
    """Outcome of one benchmark run.

    Attributes:
        name: Hash function name
        iterations: Keys generated
        precision: log2 of the bucket count
        collisions: Hash values already seen when produced
        mean_deviation: Uniformity deviation (lower is better)
        max_load: Largest bucket count
        gini: Gini coefficient of the bucket counts
        elapsed: Wall-clock seconds
        counts: Per-bucket counts
    """

    name: str
    iterations: int
    precision: int
    collisions: int
    mean_deviation: float
    max_load: int
    gini: float
    elapsed: float
    counts: np.ndarray = field(repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "iterations": self.iterations,
            "precision": self.precision,
            "collisions": self.collisions,
            "mean_deviation": self.mean_deviation,
            "max_load": self.max_load,
            "gini": self.gini,
            "elapsed_sec": self.elapsed,
        }


class CollisionBenchmark:
    """One collision/uniformity pass over a single hash function."""

    def __init__(
        self,
        name: str,
        hash_fn: Callable[[int], int],
        generator: LCGParams,
        config: Optional[BenchmarkConfig] = None,
        result_bits: int = 64,
        tensor_fn: Optional[Callable] = None,
    ) -> None:
        """Initialize the benchmark.

        Args:
            name: Label used in logs and reports
            hash_fn: Scalar hash under test
            generator: Constants of the key generator
            config: Run parameters (defaults to BenchmarkConfig())
            result_bits: Width of hash_fn's output (selects the set's hash)
            tensor_fn: Optional vectorized equivalent of hash_fn over int64
                tensors; used instead of hash_fn when given
        """
        self.name = name
        self.hash_fn = hash_fn
        self.generator = generator
        self.config = config if config is not None else BenchmarkConfig()
        self.result_bits = result_bits
        self.tensor_fn = tensor_fn

    @classmethod
    def from_catalogue(
        cls,
        name: str,
        config: Optional[BenchmarkConfig] = None,
        vectorized: bool = True,
    ) -> "CollisionBenchmark":
        """Build the benchmark of a catalogued integer hash.

        Raises:
            KeyError: If name is unknown
            ValueError: If the hash does not take integer keys
        """
        spec = get_hash(name)
        if spec.kind != "int":
            raise ValueError(f"{name} takes {spec.kind} keys; only integer hashes are benchmarked")
        return cls(
            name=spec.name,
            hash_fn=spec.fn,
            generator=BENCHMARK_GENERATORS[spec.name],
            config=config,
            result_bits=spec.result_bits,
            tensor_fn=TENSOR_HASHES.get(spec.name) if vectorized else None,
        )

    def _hash_chunks(self, gen: LinearCongruentialGenerator):
        """Yield lists of hash values in key-generation order."""
        cfg = self.config
        remaining = cfg.iterations

        if self.tensor_fn is not None:
            device = cfg.torch_device()
            while remaining > 0:
                n = min(cfg.chunk_size, remaining)
                keys = gen.next_block(n, device)
                yield to_unsigned(self.tensor_fn(keys), self.result_bits)
                remaining -= n
        else:
            hash_fn = self.hash_fn
            while remaining > 0:
                n = min(cfg.chunk_size, remaining)
                yield [hash_fn(gen.next()) for _ in range(n)]
                remaining -= n

    def run(self) -> BenchmarkResult:
        """Execute the pass and compute the metrics."""
        cfg = self.config
        gen = LinearCongruentialGenerator(self.generator, cfg.seed)
        counts = np.zeros(cfg.num_buckets, dtype=np.int64)
        collisions = 0

        logger.info(
            f"{self.name}: {cfg.iterations} keys, {cfg.num_buckets} buckets"
        )

        seen = OpenAddressingSet(
            hash_fn=result_set_hash(self.result_bits), config=cfg.hashset
        )
        with seen, Timer(self.name, device=cfg.device, logger=logger) as timer:
            for hashes in self._hash_chunks(gen):
                fresh = [h for h in hashes if seen.insert(h)]
                collisions += len(hashes) - len(fresh)
                counts += bucket_counts(fresh, cfg.precision)

        result = BenchmarkResult(
            name=self.name,
            iterations=cfg.iterations,
            precision=cfg.precision,
            collisions=collisions,
            mean_deviation=uniformity_deviation(counts, cfg.iterations),
            max_load=max_load(counts),
            gini=gini_coefficient(counts),
            elapsed=timer.elapsed,
            counts=counts,
        )
        logger.info(
            f"{self.name}: collisions={result.collisions} "
            f"non-uniformity={result.mean_deviation:.6f} ({result.elapsed:.2f}s)"
        )
        return result


def run_benchmark(name: str, config: Optional[Dict[str, Any]] = None) -> BenchmarkResult:
    """Run the benchmark of one catalogued hash (process-pool entry point).

    Args:
        name: Catalogue name
        config: BenchmarkConfig as a plain dict

    Returns:
        BenchmarkResult
    """
    cfg = BenchmarkConfig.from_dict(config) if config else BenchmarkConfig()
    return CollisionBenchmark.from_catalogue(name, cfg).run()


def run_benchmarks(
    names: List[str], config: BenchmarkConfig, workers: int = 1
) -> List[BenchmarkResult]:
    """Run several benchmarks, optionally on a process pool.

    Every run owns its own set, generator and counters, so runs share no
    state. Results come back in the order of ``names``.
    """
    if workers <= 1 or len(names) <= 1:
        return [CollisionBenchmark.from_catalogue(n, config).run() for n in names]

    from concurrent.futures import ProcessPoolExecutor

    cfg_dict = config.to_dict()
    with ProcessPoolExecutor(max_workers=min(workers, len(names))) as pool:
        futures = [pool.submit(run_benchmark, n, cfg_dict) for n in names]
        return [f.result() for f in futures]
