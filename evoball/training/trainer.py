"""
Trainer: builds the population and wires the environment hooks to the core.
"""

import logging
import random
from typing import Optional

from evoball.agents.action_policy import EpsilonGreedyPolicy
from evoball.agents.ball_agent import BallAgent
from evoball.agents.q_learning_updater import QLearningUpdater
from evoball.agents.q_table import LazyQTable
from evoball.config.settings import TrainingConfig
from evoball.evaluation.observer import TrainingObserver
from evoball.physics.arena import Arena
from evoball.physics.environment import CollisionEvent, SimulatedEnvironment
from evoball.population.evolution import EvolutionManager, MutationOperator
from evoball.population.performance_tracker import AdaptivePerformanceTracker
from evoball.population.population_controller import PopulationController
from evoball.training.episode_controller import EpisodeController
from evoball.training.training_state import TrainingState

logger = logging.getLogger(__name__)


class Trainer:
    """
    One training run over a fixed-size population.

    Any SimulatedEnvironment can drive the trainer by calling
    ``on_collision`` for each collision start and then ``on_after_step`` once
    per tick. An Arena is wired automatically and can be run with ``run``.
    """

    def __init__(self,
                 config: Optional[TrainingConfig] = None,
                 environment: Optional[SimulatedEnvironment] = None,
                 observer: Optional[TrainingObserver] = None,
                 rng: Optional[random.Random] = None):
        self.config = (config or TrainingConfig()).validate()
        self.rng = rng if rng is not None else random.Random()
        self.environment = environment if environment is not None else Arena(self.config.arena)
        self.observer = observer or TrainingObserver()

        q_config = self.config.q_learning
        arena_config = self.config.arena

        self.state = TrainingState.from_config(self.config.evolution)
        self.policy = EpsilonGreedyPolicy(q_config.epsilon, rng=self.rng)
        self.updater = QLearningUpdater(
            self.policy,
            learning_rate=q_config.learning_rate,
            discount_factor=q_config.discount_factor,
            bucket_size=arena_config.bucket_size,
        )
        self.population = PopulationController(arena_config.population_size)
        self.tracker = AdaptivePerformanceTracker(self.config.evolution)

        self.evolution = EvolutionManager(
            self.population, self.environment, self.updater, self.tracker, self.state,
            q_config=q_config,
            evolution_config=self.config.evolution,
            arena_config=arena_config,
            observer=self.observer,
            mutation_operator=MutationOperator(rng=self.rng),
        )
        self.episode_controller = EpisodeController(
            self.population, self.environment, self.updater, self.state,
            q_config=q_config,
            arena_config=arena_config,
            observer=self.observer,
        )

        self._populate()

        if isinstance(self.environment, Arena):
            self.environment.add_collision_listener(self.on_collision)
            self.environment.add_after_step_listener(self.on_after_step)

    def _populate(self):
        start = self.config.arena.start_position
        for _ in range(self.population.population_size):
            agent_id = self.environment.spawn_agent(start)
            self.population.add_agent(BallAgent(agent_id, LazyQTable(rng=self.rng)))
        self.population.check_invariants()
        logger.info(f"Created population of {len(self.population)} balls at {start}")

    def on_collision(self, event: CollisionEvent):
        self.evolution.handle_collision(event)

    def on_after_step(self) -> bool:
        return self.episode_controller.on_after_step()

    @property
    def terminated(self) -> bool:
        return self.state.terminated

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Step the arena until the episode budget is exhausted or ``max_ticks``
        ticks have run.

        Returns:
            Number of ticks run
        """
        if not isinstance(self.environment, Arena):
            raise TypeError("run() needs an Arena; drive other environments through the hooks")

        ticks = 0
        while not self.state.terminated and (max_ticks is None or ticks < max_ticks):
            self.environment.step()
            ticks += 1
        return ticks
