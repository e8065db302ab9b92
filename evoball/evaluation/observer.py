"""
Reporting hooks fed by the training core.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class StatusReport:
    """Textual status published after every tick and every success."""
    episode_count: int
    iterations_count: int
    last_successful_agent_id: Optional[str]
    success_streak: int
    mutation_magnitude: float

    def format(self) -> str:
        return (
            f"Episode {self.episode_count} | "
            f"Iteration {self.iterations_count} | "
            f"Last successful ball ID: {self.last_successful_agent_id} | "
            f"Streak (same ball): {self.success_streak} | "
            f"Learning rate: {self.mutation_magnitude:.3g}"
        )


class TrainingObserver:
    """Receives chart and status updates. All hooks default to no-ops."""

    def on_tick(self, episode_index: int, best_score: float, worst_score: float):
        pass

    def on_success(self, iteration_index: int, episodes_taken: int, mutation_magnitude: float):
        pass

    def on_score_history_cleared(self):
        pass

    def on_status(self, report: StatusReport):
        pass

    def on_episodes_exhausted(self, episode_count: int):
        pass
