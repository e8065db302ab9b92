"""
Process-wide training counters, passed explicitly to every component.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from evoball.config.q_learning_config import EvolutionConfig
from evoball.evaluation.observer import StatusReport


@dataclass
class TrainingState:
    """
    Mutable state shared by the episode controller, the evolution manager
    and the performance tracker. Only one component touches it at a time.
    """

    # Ticks since the last success
    episode_count: int = 0
    # Total successes
    iterations_count: int = 0
    # Consecutive successes by the same agent id
    success_streak: int = 0
    # episode_count at the previous success, None before the first one
    previous_episode_count: Optional[int] = None

    # Winner of the current tick, cleared at the end of every after-step
    successful_agent_id: Optional[str] = None
    last_successful_agent_id: Optional[str] = None

    mutation_magnitude: float = 0.3
    performance_window: Deque[float] = field(default_factory=lambda: deque(maxlen=5))
    previous_performance_average: Optional[float] = None

    terminated: bool = False

    @classmethod
    def from_config(cls, config: EvolutionConfig) -> 'TrainingState':
        return cls(
            mutation_magnitude=config.initial_mutation_magnitude,
            performance_window=deque(maxlen=config.performance_window),
        )

    @property
    def has_winner(self) -> bool:
        return self.successful_agent_id is not None

    def decay_mutation_magnitude(self, config: EvolutionConfig) -> float:
        """Multiplicative decay after a mutating success, floored."""
        self.mutation_magnitude = max(
            self.mutation_magnitude * config.mutation_decay,
            config.min_mutation_magnitude,
        )
        return self.mutation_magnitude

    def boost_mutation_magnitude(self, config: EvolutionConfig) -> float:
        """Undo two decay steps after a performance regression, capped."""
        self.mutation_magnitude = min(
            self.mutation_magnitude / config.mutation_decay ** 2,
            config.max_mutation_magnitude,
        )
        return self.mutation_magnitude

    def status_report(self) -> StatusReport:
        return StatusReport(
            episode_count=self.episode_count,
            iterations_count=self.iterations_count,
            last_successful_agent_id=self.last_successful_agent_id,
            success_streak=self.success_streak,
            mutation_magnitude=self.mutation_magnitude,
        )
