"""Utility functions for converting between matrices and PyTorch tensors."""

from typing import Any, Sequence

from torch import Tensor, bfloat16, device, eye, float32, get_default_dtype


def supported_eye(n: int, **kwargs: Any) -> Tensor:
    """Same as PyTorch's `eye`, but uses higher precision if unsupported.

    Args:
        n: The number of rows.
        kwargs: Keyword arguments to `torch.eye`.

    Returns:
        A 2-D tensor with ones on the diagonal and zeros elsewhere.
    """
    dtype = kwargs.pop("dtype", None) or get_default_dtype()
    dev = kwargs.get("device", None) or device("cpu")

    # eye not supported on CPU for bfloat16 (float16 is supported)
    if dtype == bfloat16 and str(dev) == "cpu":
        return eye(n, **kwargs, dtype=float32).to(dtype)
    else:
        return eye(n, **kwargs, dtype=dtype)


def check_matrix_tensor(t: Tensor, name: str = "tensor"):
    """Make sure the supplied tensor is a non-empty matrix.

    Args:
        t: The tensor to be checked.
        name: Optional name of the tensor to be printed in the error message.
            Default: `"tensor"`.

    Raises:
        ValueError: If the tensor is not a 2d tensor.
    """
    if t.ndim != 2:
        raise ValueError(f"{name} must be a matrix. Got shape {t.shape}.")


def tensor_to_rows(t: Tensor) -> Sequence[Sequence[Any]]:
    """Convert a 2d tensor into nested lists of Python scalars.

    Args:
        t: A 2d tensor.

    Returns:
        The entries of `t`, row by row.
    """
    check_matrix_tensor(t)
    return t.detach().cpu().tolist()
