import math
import random
from .errors import InvalidConfiguration


def validate_weights(weights, count: int):
    """Check a weight vector against the segment count.

    Returns the weights as a list of floats, or None when no weights were
    given (uniform wheel).
    """
    if count <= 0:
        raise InvalidConfiguration("A wheel needs at least one segment")
    if weights is None:
        return None

    weights = list(weights)
    if len(weights) != count:
        raise InvalidConfiguration(
            f"Got {len(weights)} weights for {count} segments"
        )

    checked = []
    for i, w in enumerate(weights):
        try:
            value = float(w)
        except (TypeError, ValueError):
            raise InvalidConfiguration(f"Weight {i} is not a number: {w!r}")
        if not math.isfinite(value):
            raise InvalidConfiguration(f"Weight {i} is not finite: {w!r}")
        if value < 0:
            raise InvalidConfiguration(f"Weight {i} is negative: {w!r}")
        checked.append(value)

    if sum(checked) == 0:
        print(f"[Wheel] All {count} weights are zero, the last segment will always win")
    return checked


def weighted_random_choice(weights=None, count: int = None, rng=None) -> int:
    """Pick an index with probability weights[i] / sum(weights).

    weights: relative weights, or None for a uniform pick over `count`
    count: number of segments, only needed when weights is None
    rng: zero-argument callable returning a float in [0, 1)

    When the scan runs off the end (all-zero weights) the last index wins.
    """
    if rng is None:
        rng = random.random

    if weights is None:
        if not count:
            raise InvalidConfiguration("A wheel needs at least one segment")
        return min(int(rng() * count), count - 1)

    weights = list(weights)
    if not weights:
        raise InvalidConfiguration("A wheel needs at least one segment")

    total = sum(weights)
    threshold = rng() * total
    cumulative = 0
    for i, w in enumerate(weights):
        cumulative += w
        if threshold < cumulative:
            return i
    return len(weights) - 1
