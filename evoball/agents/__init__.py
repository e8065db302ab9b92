"""
Per-ball learning: state encoding, Q-table, policy and update rule.
"""

from .actions import Action, ACTIONS, action_velocity
from .state_encoder import StateKey, coarse_state, extended_state
from .q_table import LazyQTable
from .action_policy import EpsilonGreedyPolicy
from .q_learning_updater import QLearningUpdater
from .ball_agent import BallAgent

__all__ = [
    'Action',
    'ACTIONS',
    'action_velocity',
    'StateKey',
    'coarse_state',
    'extended_state',
    'LazyQTable',
    'EpsilonGreedyPolicy',
    'QLearningUpdater',
    'BallAgent',
]
