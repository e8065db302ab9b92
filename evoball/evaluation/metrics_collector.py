"""
In-memory metrics collector for the score and iteration charts.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from .observer import StatusReport, TrainingObserver

logger = logging.getLogger(__name__)


@dataclass
class TickRecord:
    """One point of the best/worst score chart."""
    episode: int
    best_score: float
    worst_score: float


@dataclass
class IterationRecord:
    """One point of the episodes-per-success chart."""
    iteration: int
    episodes: int
    mutation_magnitude: float


class MetricsCollector(TrainingObserver):
    """
    Records what the charts and status labels would show.

    The score series covers the current attempt only and is cleared on every
    success; the iteration series covers the whole run.
    """

    def __init__(self, status_log_interval: int = 100):
        """
        Args:
            status_log_interval: Log the status line every N ticks (0 disables)
        """
        self.status_log_interval = status_log_interval
        self.score_history: List[TickRecord] = []
        self.iteration_history: List[IterationRecord] = []
        self.last_status: Optional[StatusReport] = None
        self.exhausted_at: Optional[int] = None
        self.total_ticks = 0

    def on_tick(self, episode_index: int, best_score: float, worst_score: float):
        self.score_history.append(TickRecord(episode_index, best_score, worst_score))
        self.total_ticks += 1

    def on_success(self, iteration_index: int, episodes_taken: int, mutation_magnitude: float):
        self.iteration_history.append(IterationRecord(iteration_index, episodes_taken, mutation_magnitude))

    def on_score_history_cleared(self):
        self.score_history.clear()

    def on_status(self, report: StatusReport):
        self.last_status = report
        if self.status_log_interval and self.total_ticks % self.status_log_interval == 0:
            logger.debug(report.format())

    def on_episodes_exhausted(self, episode_count: int):
        self.exhausted_at = episode_count
        logger.info(f"No success within {episode_count} episodes")

    def score_frame(self) -> pd.DataFrame:
        """Score chart of the current attempt as a DataFrame."""
        return pd.DataFrame(
            [(r.episode, r.best_score, r.worst_score) for r in self.score_history],
            columns=['episode', 'best_score', 'worst_score'],
        )

    def iteration_frame(self) -> pd.DataFrame:
        """Episodes needed per success, with the mutation magnitude at that time."""
        return pd.DataFrame(
            [(r.iteration, r.episodes, r.mutation_magnitude) for r in self.iteration_history],
            columns=['iteration', 'episodes', 'mutation_magnitude'],
        )

    def get_summary(self) -> dict:
        """Aggregate numbers for the end-of-run report."""
        frame = self.iteration_frame()
        return {
            'total_ticks': self.total_ticks,
            'successes': len(frame),
            'mean_episodes_per_success': float(frame['episodes'].mean()) if len(frame) else None,
            'best_episodes_per_success': int(frame['episodes'].min()) if len(frame) else None,
            'final_mutation_magnitude': self.last_status.mutation_magnitude if self.last_status else None,
        }
