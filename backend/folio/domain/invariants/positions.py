from typing import Iterable

from ..exceptions import InvariantViolation


def assert_contiguous(positions: Iterable[int], *, scope: str) -> None:
    orders = list(positions)
    if not orders:
        return

    expected = list(range(len(orders)))
    if sorted(orders) != expected:
        raise InvariantViolation(
            f"{scope} positions are not consecutive starting from 0: {sorted(orders)}",
            details={"positions": sorted(orders)},
        )
