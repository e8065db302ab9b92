"""
Configuration for learning, evolution and arena geometry.
"""

from .q_learning_config import QLearningConfig, EvolutionConfig, get_config
from .settings import ArenaConfig, TrainingConfig, load_config

__all__ = [
    'QLearningConfig',
    'EvolutionConfig',
    'ArenaConfig',
    'TrainingConfig',
    'get_config',
    'load_config',
]
