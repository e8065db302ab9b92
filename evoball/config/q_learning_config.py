"""
Q-Learning and Evolution Configuration
Centralized learning parameters shared by every ball in the population.
"""

from typing import Dict, Any
from dataclasses import dataclass


@dataclass
class QLearningConfig:
    """Configuration for the tabular Q-learning update and policy."""

    # Learning parameters
    learning_rate: float = 0.1   # ALPHA
    discount_factor: float = 0.9  # GAMMA

    # Exploration parameters
    epsilon: float = 0.2

    # Episode budget: ticks allowed since the last success before a full reset
    max_episodes: int = 2000

    # Rewards
    reward_target: float = 1.0
    reward_collision: float = -1.0
    reward_neutral: float = 0.0
    reward_winner: float = 1.0
    reward_loser: float = -0.5


@dataclass
class EvolutionConfig:
    """Configuration for winner cloning and adaptive mutation."""

    # Mutation magnitude
    initial_mutation_magnitude: float = 0.3
    mutation_decay: float = 0.99
    min_mutation_magnitude: float = 0.01
    max_mutation_magnitude: float = 0.5

    # Relative performance tracking
    performance_window: int = 5
    performance_threshold: float = 0.9


# Global configurations
BASIC_Q_CONFIG = QLearningConfig()
EVOLUTION_CONFIG = EvolutionConfig()


def get_config(approach: str) -> Dict[str, Any]:
    """
    Get configuration for the specified component.

    Args:
        approach: 'q_learning' or 'evolution'

    Returns:
        Configuration dictionary
    """
    configs = {
        'q_learning': BASIC_Q_CONFIG,
        'evolution': EVOLUTION_CONFIG,
    }

    config = configs.get(approach, BASIC_Q_CONFIG)
    return dict(config.__dict__)
