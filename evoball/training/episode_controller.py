"""
Per-tick learning pass over the whole population.
"""

import logging
import math
from typing import Optional

from evoball.agents.actions import action_velocity
from evoball.agents.q_learning_updater import QLearningUpdater
from evoball.config.q_learning_config import QLearningConfig
from evoball.config.settings import ArenaConfig
from evoball.evaluation.observer import TrainingObserver
from evoball.exceptions import MissingTableError
from evoball.physics.environment import SimulatedEnvironment
from evoball.population.population_controller import PopulationController
from evoball.training.training_state import TrainingState

logger = logging.getLogger(__name__)


class EpisodeController:
    """
    Runs the default Q-update for every agent after each physics step.

    Collision handling for the same tick has already run by the time
    ``on_after_step`` is called, so a winner recorded there is visible here
    and turns the neutral reward into +1 for the winner and -0.5 for
    everybody else.
    """

    def __init__(self,
                 population: PopulationController,
                 environment: SimulatedEnvironment,
                 updater: QLearningUpdater,
                 state: TrainingState,
                 q_config: Optional[QLearningConfig] = None,
                 arena_config: Optional[ArenaConfig] = None,
                 observer: Optional[TrainingObserver] = None):
        self.population = population
        self.environment = environment
        self.updater = updater
        self.state = state
        self.q_config = q_config or QLearningConfig()
        self.arena_config = arena_config or ArenaConfig()
        self.observer = observer or TrainingObserver()

        self.best_score = -math.inf
        self.worst_score = math.inf

    def _reward_for(self, agent_id: str) -> float:
        if not self.state.has_winner:
            return self.q_config.reward_neutral
        if agent_id == self.state.successful_agent_id:
            return self.q_config.reward_winner
        return self.q_config.reward_loser

    def on_after_step(self) -> bool:
        """
        Run one tick.

        Returns:
            False once the episode budget is exhausted, True otherwise
        """
        state = self.state
        if state.terminated:
            return False

        self.best_score = -math.inf
        self.worst_score = math.inf

        for agent in self.population.agents:
            reward = self._reward_for(agent.id)
            try:
                table = self.population.get_table(agent)
            except MissingTableError as e:
                logger.warning(f"{e}; skipping update this tick")
                continue

            position = self.environment.get_position(agent.id)
            velocity = self.environment.get_velocity(agent.id)
            action = self.updater.default_update(table, position, velocity, reward)

            self.best_score = max(self.best_score, agent.score)
            self.worst_score = min(self.worst_score, agent.score)

            self.environment.set_velocity(agent.id, action_velocity(action, self.arena_config.action_speed))

        state.successful_agent_id = None

        self.observer.on_tick(state.episode_count, self.best_score, self.worst_score)
        state.episode_count += 1
        self.observer.on_status(state.status_report())

        if state.episode_count >= self.q_config.max_episodes:
            state.terminated = True
            logger.info(f"Episode budget exhausted after {state.episode_count} episodes; requesting reset")
            self.observer.on_episodes_exhausted(state.episode_count)
            self.environment.request_reset()
            return False

        return True
