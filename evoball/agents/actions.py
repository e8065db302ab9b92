"""
Discrete action space shared by every ball.
"""

from enum import Enum
from typing import Dict, Tuple


class Action(Enum):
    """Move actions a ball can take."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# Iteration order used whenever all actions are scanned
ACTIONS: Tuple[Action, ...] = (Action.LEFT, Action.RIGHT, Action.UP, Action.DOWN)

# Unit direction per action; y grows downward as in screen coordinates
ACTION_DIRECTIONS: Dict[Action, Tuple[float, float]] = {
    Action.LEFT: (-1.0, 0.0),
    Action.RIGHT: (1.0, 0.0),
    Action.UP: (0.0, -1.0),
    Action.DOWN: (0.0, 1.0),
}


def action_velocity(action: Action, speed: float = 5.0) -> Tuple[float, float]:
    """Velocity a ball is given when it takes ``action``."""
    dx, dy = ACTION_DIRECTIONS[action]
    return (dx * speed, dy * speed)
