"""Utility functions for the tests."""

import torch
from torch import Tensor, allclose, bfloat16, cuda, device, float16, isclose

from ringmat.rings.numeric import FloatRing, IntegerRing

DEVICE_IDS = ["cpu", "cuda"] if cuda.is_available() else ["cpu"]
DEVICES = [device(name) for name in DEVICE_IDS]

RINGS = [IntegerRing(), FloatRing()]
RING_IDS = [ring.__class__.__name__ for ring in RINGS]


def is_half_precision(dtype: torch.dtype) -> bool:
    """Check if the given dtype is half precision.

    Args:
        dtype: The dtype to check.

    Returns:
        Whether the given dtype is half precision.
    """
    return dtype in [float16, bfloat16]


def report_nonclose(
    tensor1: Tensor,
    tensor2: Tensor,
    rtol: float = 1e-5,
    atol: float = 1e-8,
    equal_nan: bool = False,
    name: str = "array",
):
    """Compare two tensors, raise exception if nonclose values and print them.

    Args:
        tensor1: First tensor.
        tensor2: Second tensor.
        rtol: Relative tolerance (see ``torch.allclose``). Default: ``1e-5``.
        atol: Absolute tolerance (see ``torch.allclose``). Default: ``1e-8``.
        equal_nan: Whether comparing two NaNs should be considered as ``True``
            (see ``torch.allclose``). Default: ``False``.
        name: Optional name what the compared tensors mean. Default: ``'array'``.

    Raises:
        ValueError: If the two tensors don't match in shape or have nonclose values.
    """
    if tensor1.shape != tensor2.shape:
        raise ValueError(f"{name} shapes don't match.")

    if allclose(tensor1, tensor2, rtol=rtol, atol=atol, equal_nan=equal_nan):
        print(f"{name} values match.")
    else:
        mismatch = 0
        for a1, a2 in zip(tensor1.flatten(), tensor2.flatten()):
            if not isclose(a1, a2, atol=atol, rtol=rtol, equal_nan=equal_nan):
                mismatch += 1
                print(f"{a1} ≠ {a2}")
        print(f"Min entries: {tensor1.min()}, {tensor2.min()}")
        print(f"Max entries: {tensor1.max()}, {tensor2.max()}")
        raise ValueError(f"{name} values don't match ({mismatch} / {tensor1.numel()}).")


def cast(ring, value):
    """Convert a Python number into the element type of a numeric ring.

    Args:
        ring: An `IntegerRing` or `FloatRing`.
        value: A Python number.

    Returns:
        `value` as `int` or `float`, matching the ring's identity.
    """
    return type(ring.identity())(value)
