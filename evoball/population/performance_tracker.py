"""
Adaptive mutation control from the trend of learning speed.
"""

import logging

import numpy as np

from evoball.config.q_learning_config import EvolutionConfig
from evoball.training.training_state import TrainingState

logger = logging.getLogger(__name__)


class AdaptivePerformanceTracker:
    """
    Keeps a rolling window of learning-speed deltas and boosts the mutation
    magnitude when the rolling average drops by the configured threshold.

    The window and the previous average live in TrainingState.
    """

    def __init__(self, config: EvolutionConfig):
        self.config = config

    def record(self, state: TrainingState, delta: float) -> bool:
        """
        Push one learning-speed delta.

        Args:
            state: Training state holding the window and mutation magnitude
            delta: previous_episode_count - episode_count at this success

        Returns:
            True if the mutation magnitude was boosted
        """
        window = state.performance_window
        window.append(float(delta))

        if len(window) < self.config.performance_window:
            return False

        average = float(np.mean(window))

        if state.previous_performance_average is None:
            state.previous_performance_average = average
            logger.debug(f"Performance baseline set to {average:.2f}")
            return False

        boosted = False
        if average <= state.previous_performance_average * self.config.performance_threshold:
            before = state.mutation_magnitude
            state.boost_mutation_magnitude(self.config)
            logger.info(
                f"Apply mutation magnitude correction: average {average:.2f} vs "
                f"{state.previous_performance_average:.2f}, "
                f"magnitude {before:.4f} -> {state.mutation_magnitude:.4f}"
            )
            boosted = True

        state.previous_performance_average = average
        return boosted
