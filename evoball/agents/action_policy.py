"""
Epsilon-greedy action selection over the four move actions.
"""

import random
from typing import Optional

from .actions import Action, ACTIONS
from .q_table import LazyQTable
from .state_encoder import StateKey


class EpsilonGreedyPolicy:
    """Epsilon-greedy policy with uniform tie-breaking among the best actions."""

    def __init__(self, epsilon: float = 0.2, rng: Optional[random.Random] = None):
        self.epsilon = epsilon
        self.rng = rng if rng is not None else random

    def choose_action(self, table: LazyQTable, state: StateKey) -> Action:
        """
        Choose an action for ``state``.

        With probability epsilon a uniformly random action is returned.
        Otherwise every action value is read (materializing missing entries)
        and one of the actions sharing the exact maximum is picked uniformly.
        """
        if self.rng.random() < self.epsilon:
            return ACTIONS[self.rng.randrange(len(ACTIONS))]

        values = table.get_action_values(state)
        best_value = max(values)
        best_actions = [action for action, value in zip(ACTIONS, values) if value == best_value]
        return best_actions[self.rng.randrange(len(best_actions))]
