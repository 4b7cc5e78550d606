import math
from typing import Iterable


def american_to_decimal(price: float) -> float:
    """Decimal multiplier (stake included) for an American price."""
    if price > 0:
        return price / 100 + 1
    return 100 / abs(price) + 1


def compound(prices: Iterable[float]) -> float:
    acc = 1.0
    for p in prices:
        acc *= american_to_decimal(p)
    return acc


def round_half_up(x: float) -> int:
    # JavaScript Math.round semantics: .5 always goes toward +inf
    return int(math.floor(x + 0.5))
