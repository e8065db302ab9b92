"""
Temporal-difference update rule and the two per-tick update pathways.
"""

from typing import Tuple

from .action_policy import EpsilonGreedyPolicy
from .actions import Action
from .q_table import LazyQTable
from .state_encoder import StateKey, coarse_state, extended_state


class QLearningUpdater:
    """
    Applies the Q-learning update rule.

    Q(s,a) = Q(s,a) + α[r + γ * max Q(s',a') - Q(s,a)]
    """

    def __init__(self, policy: EpsilonGreedyPolicy,
                 learning_rate: float = 0.1,
                 discount_factor: float = 0.9,
                 bucket_size: float = 100.0):
        self.policy = policy
        self.learning_rate = learning_rate
        self.discount_factor = discount_factor
        self.bucket_size = bucket_size

    def update(self, table: LazyQTable, state: StateKey, action: Action,
               reward: float, next_state: StateKey) -> float:
        """Update Q(state, action) in place and return the new value."""
        current_q = table.get_q_value(state, action)
        next_best_q = table.max_q_value(next_state)

        new_q = current_q + self.learning_rate * (reward + self.discount_factor * next_best_q - current_q)
        table.set_q_value(state, action, new_q)
        return new_q

    def default_update(self, table: LazyQTable, position: Tuple[float, float],
                       velocity: Tuple[float, float], reward: float) -> Action:
        """
        Per-tick update: extended current state, coarse next state.

        Returns the chosen action so the caller can apply it to the body.
        """
        state = extended_state(position, velocity, self.bucket_size)
        action = self.policy.choose_action(table, state)
        next_state = coarse_state(position, self.bucket_size)
        self.update(table, state, action, reward, next_state)
        return action

    def collision_update(self, table: LazyQTable, position: Tuple[float, float],
                         reward: float) -> Action:
        """
        Collision update: coarse state for both ends of the transition.

        The action is re-selected here, independently of the one chosen by
        the per-tick pathway.
        """
        state = coarse_state(position, self.bucket_size)
        action = self.policy.choose_action(table, state)
        next_state = coarse_state(position, self.bucket_size)
        self.update(table, state, action, reward, next_state)
        return action
