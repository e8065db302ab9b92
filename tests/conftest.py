"""
Shared fixtures: a fake environment and a wired population.
"""

import random
from unittest.mock import Mock

import pytest

from evoball.agents.action_policy import EpsilonGreedyPolicy
from evoball.agents.ball_agent import BallAgent
from evoball.agents.q_learning_updater import QLearningUpdater
from evoball.agents.q_table import LazyQTable
from evoball.config.q_learning_config import QLearningConfig, EvolutionConfig
from evoball.config.settings import ArenaConfig
from evoball.evaluation.observer import TrainingObserver
from evoball.physics.environment import BodyRef, CollisionEvent, SimulatedEnvironment
from evoball.population.evolution import EvolutionManager, MutationOperator
from evoball.population.performance_tracker import AdaptivePerformanceTracker
from evoball.population.population_controller import PopulationController
from evoball.training.episode_controller import EpisodeController
from evoball.training.training_state import TrainingState


class FakeEnvironment(SimulatedEnvironment):
    """In-memory environment recording every command it receives."""

    def __init__(self):
        self.positions = {}
        self.velocities = {}
        self.spawned = []
        self.removed = []
        self.resets = []
        self.reset_requests = 0
        self._next_id = 0

    def get_position(self, agent_id):
        return self.positions[agent_id]

    def get_velocity(self, agent_id):
        return self.velocities[agent_id]

    def reset_agent(self, agent_id, position, velocity):
        self.positions[agent_id] = tuple(position)
        self.velocities[agent_id] = tuple(velocity)
        self.resets.append(agent_id)

    def set_velocity(self, agent_id, velocity):
        self.velocities[agent_id] = tuple(velocity)

    def spawn_agent(self, start_position):
        self._next_id += 1
        agent_id = f"ball-{self._next_id}"
        self.positions[agent_id] = tuple(start_position)
        self.velocities[agent_id] = (0.0, 0.0)
        self.spawned.append(agent_id)
        return agent_id

    def remove_agent(self, agent_id):
        del self.positions[agent_id]
        del self.velocities[agent_id]
        self.removed.append(agent_id)

    def request_reset(self):
        self.reset_requests += 1


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fake_env():
    return FakeEnvironment()


class World:
    """A population wired to a fake environment, without a Trainer."""

    def __init__(self, env, rng, size=3, q_config=None, evolution_config=None,
                 observer=None, updater=None, tracker=None):
        self.env = env
        self.q_config = q_config or QLearningConfig()
        self.evolution_config = evolution_config or EvolutionConfig()
        self.arena_config = ArenaConfig(population_size=size)
        self.observer = observer or Mock(spec=TrainingObserver)
        self.state = TrainingState.from_config(self.evolution_config)
        self.updater = updater or QLearningUpdater(EpsilonGreedyPolicy(0.2, rng=rng))
        self.tracker = tracker or AdaptivePerformanceTracker(self.evolution_config)

        self.population = PopulationController(size)
        for _ in range(size):
            agent_id = env.spawn_agent(self.arena_config.start_position)
            self.population.add_agent(BallAgent(agent_id, LazyQTable(rng=rng)))

        self.evolution = EvolutionManager(
            self.population, env, self.updater, self.tracker, self.state,
            q_config=self.q_config,
            evolution_config=self.evolution_config,
            arena_config=self.arena_config,
            observer=self.observer,
            mutation_operator=MutationOperator(rng=rng),
        )
        self.episodes = EpisodeController(
            self.population, env, self.updater, self.state,
            q_config=self.q_config,
            arena_config=self.arena_config,
            observer=self.observer,
        )

    def hit(self, agent, kind):
        self.evolution.handle_collision(CollisionEvent(BodyRef.agent(agent.id), BodyRef(kind)))


@pytest.fixture
def make_world(fake_env, rng):
    def build(**kwargs):
        return World(fake_env, rng, **kwargs)
    return build
