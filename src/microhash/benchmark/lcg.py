"""Linear congruential generators for benchmark keys.

``x[n+1] = (a * x[n] + c) mod 2^bits``. The vectorized path uses jump-ahead
coefficients ``x[n+i] = A_i * x[n] + C_i`` with ``A_i = a^i`` and
``C_i = c * (a^(i-1) + ... + 1)``, so a whole block is produced by one
multiply-add over precomputed tensors.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Tuple

from microhash.hashing.mix import MASK32, MASK64, u64_to_i64

if TYPE_CHECKING:
    import torch


@dataclass(frozen=True)
class LCGParams:
    """Generator constants.

    Attributes:
        multiplier: a
        increment: c
        bits: State width; the state is reduced mod 2^bits every step
    """

    multiplier: int
    increment: int
    bits: int

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.bits not in (32, 64):
            raise ValueError(f"bits must be 32 or 64, got {self.bits}")

    @property
    def mask(self) -> int:
        return MASK32 if self.bits == 32 else MASK64


# Numerical Recipes
LCG32 = LCGParams(multiplier=1664525, increment=1013904223, bits=32)

# Newlib / Knuth MMIX
LCG64 = LCGParams(
    multiplier=6364136223846793005, increment=1442695040888963407, bits=64
)

# 64-bit constants driving a 32-bit state: the state is narrowed every step
LCG64_NARROW = LCGParams(
    multiplier=LCG64.multiplier, increment=LCG64.increment, bits=32
)


class LinearCongruentialGenerator:
    """Stateful LCG producing unsigned keys of ``params.bits`` width.

    Example:
        >>> gen = LinearCongruentialGenerator(LCG32, seed=6969)
        >>> first = gen.next()
        >>> first == (1664525 * 6969 + 1013904223) & 0xFFFFFFFF
        True
    """

    def __init__(self, params: LCGParams, seed: int) -> None:
        self.params = params
        self.state = seed & params.mask
        self._coeff_cache: Dict[Tuple[int, str], Tuple["torch.Tensor", "torch.Tensor"]] = {}

    def next(self) -> int:
        """Advance one step and return the new state."""
        p = self.params
        self.state = (p.multiplier * self.state + p.increment) & p.mask
        return self.state

    def _coefficients(
        self, n: int, device: "torch.device"
    ) -> Tuple["torch.Tensor", "torch.Tensor"]:
        import torch

        cache_key = (n, str(device))
        if cache_key not in self._coeff_cache:
            p = self.params
            mult, incr = [], []
            a_i, c_i = p.multiplier & p.mask, p.increment & p.mask
            for _ in range(n):
                mult.append(u64_to_i64(a_i))
                incr.append(u64_to_i64(c_i))
                a_i = (a_i * p.multiplier) & p.mask
                c_i = (c_i * p.multiplier + p.increment) & p.mask
            self._coeff_cache[cache_key] = (
                torch.tensor(mult, dtype=torch.int64, device=device),
                torch.tensor(incr, dtype=torch.int64, device=device),
            )
        return self._coeff_cache[cache_key]

    def next_block(self, n: int, device: "torch.device" = None) -> "torch.Tensor":
        """Return the next n states as an int64 tensor and advance by n.

        Values are bit-identical to n calls of next(); 64-bit states above
        2^63 appear as negative int64.
        """
        import torch

        if n <= 0:
            raise ValueError("n must be positive")
        if device is None:
            device = torch.device("cpu")

        mult, incr = self._coefficients(n, device)
        # int64 multiply/add wrap mod 2^64, which preserves the low bits
        block = mult * u64_to_i64(self.state) + incr
        if self.params.bits == 32:
            block = block & MASK32
        self.state = int(block[-1].item()) & self.params.mask
        return block
