"""
Discretization of continuous ball physics into Q-table state keys.

Two resolutions are used:

* coarse: position only, each axis bucketed by floor division
  -> ``(bx, by)``
* extended: position rounded to the nearest bucket plus the sign of each
  velocity component -> ``(bx, by, sign(vx), sign(vy))``

The extended key is the current state of the per-tick update, the coarse key
is its next state and both keys of a collision update. The two key shapes
have different lengths, so they never collide inside one table.
"""

import math
from typing import Tuple

import numpy as np

StateKey = Tuple[int, ...]
Vector = Tuple[float, float]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def coarse_state(position: Vector, bucket_size: float = 100.0) -> StateKey:
    """Bucket a position by floor division."""
    x, y = position
    return (int(math.floor(x / bucket_size)), int(math.floor(y / bucket_size)))


def extended_state(position: Vector, velocity: Vector, bucket_size: float = 100.0) -> StateKey:
    """Bucket a position by rounding and append the velocity direction."""
    x, y = position
    vx, vy = velocity
    return (
        _round_half_up(x / bucket_size),
        _round_half_up(y / bucket_size),
        int(np.sign(vx)),
        int(np.sign(vy)),
    )
