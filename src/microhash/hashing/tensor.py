"""Vectorized integer hashes over torch tensors.

torch has no unsigned 32/64-bit arithmetic, so values are carried in
``torch.int64``:

- 32-bit hashes keep every intermediate in [0, 2^32) by masking after each
  add/multiply (all products fit in 63 bits).
- 64-bit hashes rely on int64 wraparound for add/multiply/shift-left and use
  a masked logical right shift, so the bit pattern matches uint64 exactly.

Results are bit-identical to the scalar functions in ``integer.py``.
"""

from typing import TYPE_CHECKING, Callable, Dict, Iterable, List

from microhash.hashing.mix import MASK32, MASK64, u64_to_i64

if TYPE_CHECKING:
    import torch


def logical_right_shift(x: "torch.Tensor", shift: int) -> "torch.Tensor":
    """Logical (zero-fill) right shift of int64 values treated as uint64.

    Args:
        x: int64 tensor
        shift: Shift amount in [0, 64)

    Returns:
        Logically right-shifted tensor
    """
    if shift == 0:
        return x
    # Arithmetic shift fills the top bits with the sign; mask them out
    return (x >> shift) & ((1 << (64 - shift)) - 1)


def to_tensor(values: Iterable[int], device: "torch.device" = None) -> "torch.Tensor":
    """Pack unsigned 64-bit Python ints into an int64 tensor."""
    import torch

    return torch.tensor(
        [u64_to_i64(v) for v in values], dtype=torch.int64, device=device
    )


def to_unsigned(x: "torch.Tensor", bits: int = 64) -> List[int]:
    """Unpack an int64 tensor into unsigned Python ints of the given width."""
    mask = MASK32 if bits == 32 else MASK64
    return [v & mask for v in x.tolist()]


def int32_wang_tensor(a: "torch.Tensor") -> "torch.Tensor":
    a = a & MASK32
    a = (a ^ 61) ^ (a >> 16)
    a = (a + (a << 3)) & MASK32
    a = a ^ (a >> 4)
    a = (a * 0x27D4EB2D) & MASK32
    return a ^ (a >> 15)


def int32_wang2_tensor(key: "torch.Tensor") -> "torch.Tensor":
    key = key & MASK32
    key = (~key + (key << 15)) & MASK32
    key = key ^ (key >> 12)
    key = (key + (key << 2)) & MASK32
    key = key ^ (key >> 4)
    key = (key * 2057) & MASK32
    return key ^ (key >> 16)


def int32_rob_tensor(a: "torch.Tensor") -> "torch.Tensor":
    a = a & MASK32
    a = ((a + 0x7ED55D16) + (a << 12)) & MASK32
    a = (a ^ 0xC761C23C) ^ (a >> 19)
    a = ((a + 0x165667B1) + (a << 5)) & MASK32
    a = ((a + 0xD3A2646C) ^ (a << 9)) & MASK32
    a = ((a + 0xFD7046C5) + (a << 3)) & MASK32
    return (a ^ 0xB55A4F09) ^ (a >> 16)


def int64_wang_tensor(key: "torch.Tensor") -> "torch.Tensor":
    key = ~key + (key << 21)
    key = key ^ logical_right_shift(key, 24)
    key = (key + (key << 3)) + (key << 8)
    key = key ^ logical_right_shift(key, 14)
    key = (key + (key << 2)) + (key << 4)
    key = key ^ logical_right_shift(key, 28)
    return key + (key << 31)


def int6432_wang_tensor(key: "torch.Tensor") -> "torch.Tensor":
    key = ~key + (key << 18)
    key = key ^ logical_right_shift(key, 31)
    key = key * 21
    key = key ^ logical_right_shift(key, 11)
    key = key + (key << 6)
    key = key ^ logical_right_shift(key, 22)
    return key & MASK32


TENSOR_HASHES: Dict[str, Callable[["torch.Tensor"], "torch.Tensor"]] = {
    "int32_wang": int32_wang_tensor,
    "int32_wang2": int32_wang2_tensor,
    "int32_rob": int32_rob_tensor,
    "int64_wang": int64_wang_tensor,
    "int6432_wang": int6432_wang_tensor,
}
