"""
Evolution Manager for winner-take-all cloning.

Whenever a ball reaches the target, every other ball is replaced by a new
ball carrying a mutated copy of the winner's Q-table. The mutation magnitude
decays after each such generation and is boosted by the
AdaptivePerformanceTracker when successes start arriving more slowly.
"""

import logging
import random
from typing import Optional

from evoball.agents.ball_agent import BallAgent
from evoball.agents.q_learning_updater import QLearningUpdater
from evoball.agents.q_table import LazyQTable
from evoball.config.q_learning_config import QLearningConfig, EvolutionConfig
from evoball.config.settings import ArenaConfig
from evoball.evaluation.observer import TrainingObserver
from evoball.exceptions import MissingTableError
from evoball.physics.environment import BodyKind, CollisionEvent, SimulatedEnvironment
from evoball.population.performance_tracker import AdaptivePerformanceTracker
from evoball.population.population_controller import PopulationController
from evoball.training.training_state import TrainingState

logger = logging.getLogger(__name__)


class MutationOperator:
    """Creates perturbed copies of a Q-table."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random

    def apply(self, source: LazyQTable, magnitude: float) -> LazyQTable:
        """
        Create a mutated copy of ``source``.

        Every entry becomes ``value + magnitude * uniform(-1, 1)``. No entry
        is added or dropped, and the source is left untouched.

        Args:
            source: The table to copy
            magnitude: Perturbation amplitude

        Returns:
            A new, independent table
        """
        mutated = source.copy()
        for key, value in source.items():
            mutated.q_values[key] = value + magnitude * self.rng.uniform(-1.0, 1.0)
        return mutated


class EvolutionManager:
    """
    Handles collision events: success and cloning on the target, penalty and
    a collision Q-update on walls and obstacles.

    At most one success is processed per tick; once a winner is recorded,
    further collisions in the same tick are ignored. Nothing is processed
    once the episode budget is exhausted.
    """

    def __init__(self,
                 population: PopulationController,
                 environment: SimulatedEnvironment,
                 updater: QLearningUpdater,
                 tracker: AdaptivePerformanceTracker,
                 state: TrainingState,
                 q_config: Optional[QLearningConfig] = None,
                 evolution_config: Optional[EvolutionConfig] = None,
                 arena_config: Optional[ArenaConfig] = None,
                 observer: Optional[TrainingObserver] = None,
                 mutation_operator: Optional[MutationOperator] = None):
        self.population = population
        self.environment = environment
        self.updater = updater
        self.tracker = tracker
        self.state = state
        self.q_config = q_config or QLearningConfig()
        self.evolution_config = evolution_config or EvolutionConfig()
        self.arena_config = arena_config or ArenaConfig()
        self.observer = observer or TrainingObserver()
        self.mutation_operator = mutation_operator or MutationOperator()

    def handle_collision(self, event: CollisionEvent):
        """Apply one collision-start event to every agent taking part in it."""
        if self.state.terminated:
            return

        for agent in self.population.agents:
            if self.state.has_winner:
                return

            other = event.other(agent.id)
            if other is None:
                continue

            if other.kind == BodyKind.TARGET:
                self.handle_success(agent)
                return

            reward = self.q_config.reward_neutral
            if other.kind in (BodyKind.OBSTACLE, BodyKind.WALL):
                reward = self.q_config.reward_collision
                agent.add_score(reward)

            try:
                table = self.population.get_table(agent)
            except MissingTableError as e:
                logger.warning(f"{e}; skipping collision update")
                continue

            position = self.environment.get_position(agent.id)
            self.updater.collision_update(table, position, reward)

    def handle_success(self, winner: BallAgent):
        """Record ``winner`` reaching the target and clone it into the population."""
        state = self.state
        winner.add_score(self.q_config.reward_target)

        if state.previous_episode_count is not None:
            self.tracker.record(state, state.previous_episode_count - state.episode_count)
        state.previous_episode_count = state.episode_count

        state.successful_agent_id = winner.id
        state.iterations_count += 1
        if state.last_successful_agent_id == winner.id:
            state.success_streak += 1
        else:
            state.success_streak = 0
        state.last_successful_agent_id = winner.id

        episodes_taken = state.episode_count
        logger.info(
            f"Success with {episodes_taken} episodes by ball {winner.id} "
            f"(iteration {state.iterations_count}, streak {state.success_streak})"
        )

        self.observer.on_score_history_cleared()
        self.observer.on_success(state.iterations_count, episodes_taken, state.mutation_magnitude)
        state.episode_count = 0

        self.environment.reset_agent(winner.id, self.arena_config.start_position, (0.0, 0.0))
        self.clone_winner(winner)

        self.observer.on_status(state.status_report())

    def clone_winner(self, winner: BallAgent) -> int:
        """
        Replace every other agent with a mutated clone of ``winner``.

        Returns:
            Number of agents replaced
        """
        try:
            source = self.population.get_table(winner)
        except MissingTableError as e:
            logger.warning(f"{e}; population not cloned")
            return 0

        replaced = 0
        for slot in self.population.slots:
            if slot.agent.id == winner.id:
                continue

            table = self.mutation_operator.apply(source, self.state.mutation_magnitude)
            new_id = self.environment.spawn_agent(self.arena_config.start_position)
            old_agent = self.population.replace_agent(slot.index, BallAgent(new_id, table))
            self.environment.remove_agent(old_agent.id)
            replaced += 1

        if replaced:
            self.state.decay_mutation_magnitude(self.evolution_config)
            logger.debug(
                f"Cloned ball {winner.id} into {replaced} slots "
                f"({len(source)} entries), mutation magnitude now {self.state.mutation_magnitude:.4f}"
            )
        return replaced
