"""
Weighted Aggregator - Reduces per-factor ratings on one axis to a single value.

Two policies are supported as named strategies:

    mean_biased:      mean + 0.25 × (max − mean), unrounded; empty → 0
    range_sensitive:  round((max + 2×min) / 3) if max − min ≥ 3,
                      else round(mean); empty → 1

Empty-input defaults differ per strategy.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Sequence

from riskmatrix.errors import ValidationError
from riskmatrix.models.rating_models import MAX_RATING, MIN_RATING

logger = logging.getLogger("riskmatrix.core.aggregator")

MAX_PULL = 0.25
SPREAD_THRESHOLD = 3


class AggregationStrategy(str, Enum):
    MEAN_BIASED = "mean_biased"
    RANGE_SENSITIVE = "range_sensitive"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 → 3)."""
    return int(math.floor(value + 0.5))


def validate_ratings(ratings: Sequence[int]) -> list[int]:
    """Reject anything that is not an integer rating in 1..5."""
    checked: list[int] = []
    for rating in ratings:
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValidationError(f"Rating must be an integer, got {rating!r}", field="rating")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating {rating} outside {MIN_RATING}..{MAX_RATING}", field="rating"
            )
        checked.append(rating)
    return checked


def mean_biased_toward_max(ratings: Sequence[int]) -> float:
    """Arithmetic mean pulled a quarter of the way toward the maximum."""
    values = validate_ratings(ratings)
    if not values:
        return 0
    mean = sum(values) / len(values)
    return mean + MAX_PULL * (max(values) - mean)


def range_sensitive_blend(ratings: Sequence[int]) -> int:
    """Rounded mean, or a min-weighted blend when the spread is wide."""
    values = validate_ratings(ratings)
    if not values:
        return 1
    high, low = max(values), min(values)
    if high - low >= SPREAD_THRESHOLD:
        return round_half_up((high + 2 * low) / 3)
    return round_half_up(sum(values) / len(values))


AggregatorFn = Callable[[Sequence[int]], float]

AGGREGATOR_REGISTRY: dict[AggregationStrategy, AggregatorFn] = {
    AggregationStrategy.MEAN_BIASED: mean_biased_toward_max,
    AggregationStrategy.RANGE_SENSITIVE: range_sensitive_blend,
}


def aggregate(
    ratings: Sequence[int],
    strategy: AggregationStrategy | str = AggregationStrategy.MEAN_BIASED,
) -> float:
    """Aggregate ``ratings`` with the named strategy."""
    try:
        fn = AGGREGATOR_REGISTRY[AggregationStrategy(strategy)]
    except ValueError:
        raise ValueError(f"Unknown aggregation strategy: {strategy}") from None
    result = fn(ratings)
    logger.debug(f"aggregate[{AggregationStrategy(strategy).value}] {list(ratings)} -> {result}")
    return result
