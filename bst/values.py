"""
values.py — Random Value Generator
==================================
Draws the raw integers a random tree is built from.  Duplicates are kept
here; the builder drops them on insertion.
"""

import random
from typing import List, Optional


def generate_values(
    count_min: int,
    count_max: int,
    value_min: int,
    value_max: int,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Pick a count uniformly in [count_min, count_max], then that many values
    uniformly in [value_min, value_max].  Both ranges are inclusive.

    Pass a seeded `random.Random` as `rng` for reproducible output.
    """
    if count_min < 0 or count_min > count_max:
        raise ValueError(f"invalid count range: [{count_min}, {count_max}]")
    if value_min > value_max:
        raise ValueError(f"invalid value range: [{value_min}, {value_max}]")

    rng = rng or random.Random()
    count = rng.randint(count_min, count_max)
    return [rng.randint(value_min, value_max) for _ in range(count)]
