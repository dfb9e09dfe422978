"""Reductions of sequences of ring elements."""

from typing import Callable, Iterable, TypeVar

from ringmat.exceptions import require_not_none
from ringmat.rings.base import Ring

T = TypeVar("T")


def reduce(args: Iterable[T], zero: T, accumulator: Callable[[T, T], T]) -> T:
    """Fold a sequence into a single element.

    The first element seeds the accumulation directly, so `accumulator` is never
    called with `zero`.

    Args:
        args: The elements to fold.
        zero: Result for an empty sequence.
        accumulator: Binary operation that combines the running result with the
            next element.

    Returns:
        The folded value, or `zero` if `args` is empty.

    Raises:
        TypeError: If an argument or one of the elements is `None`.
    """
    require_not_none(args, "args")
    require_not_none(zero, "zero")
    require_not_none(accumulator, "accumulator")

    found_any = False
    result = zero
    for element in args:
        require_not_none(element, "element")
        if found_any:
            result = accumulator(result, element)
        else:
            found_any = True
            result = element

    return result


def ring_sum(args: Iterable[T], ring: Ring[T]) -> T:
    """Sum up elements with a ring's addition.

    Args:
        args: The summands.
        ring: The ring whose `sum` is used.

    Returns:
        The sum of all elements, `ring.zero()` if there are none.
    """
    require_not_none(args, "args")
    require_not_none(ring, "ring")
    return reduce(args, ring.zero(), ring.sum)


def ring_product(args: Iterable[T], ring: Ring[T]) -> T:
    """Multiply elements from left to right with a ring's product.

    Args:
        args: The factors.
        ring: The ring whose `product` is used.

    Returns:
        The product of all elements, `ring.zero()` if there are none.
    """
    require_not_none(args, "args")
    require_not_none(ring, "ring")
    return reduce(args, ring.zero(), ring.product)
