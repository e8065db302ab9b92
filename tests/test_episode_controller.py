"""
Tests for the per-tick episode controller.
"""

import logging
import math
from unittest.mock import Mock

from evoball.agents.actions import Action
from evoball.agents.q_learning_updater import QLearningUpdater
from evoball.config.q_learning_config import QLearningConfig


def _updater_mock(action=Action.RIGHT):
    updater = Mock(spec=QLearningUpdater)
    updater.default_update.return_value = action
    return updater


def test_tick_without_winner_gives_neutral_rewards(make_world, fake_env):
    """Test a tick without a success."""
    world = make_world(size=3)

    assert world.episodes.on_after_step() is True

    assert world.state.episode_count == 1
    for agent in world.population.agents:
        speed = math.hypot(*fake_env.velocities[agent.id])
        assert speed == 5.0
    world.observer.on_tick.assert_called_once_with(0, 0.0, 0.0)
    world.observer.on_status.assert_called_once()


def test_winner_and_losers_are_rewarded(make_world, fake_env):
    """Test winner and loser rewards on a success tick."""
    updater = _updater_mock(Action.UP)
    world = make_world(size=3, updater=updater)
    winner = world.population.agents[1]
    world.state.successful_agent_id = winner.id

    world.episodes.on_after_step()

    rewards = {c.args[0]: c.args[3] for c in updater.default_update.call_args_list}
    expected = {agent.q_table: -0.5 for agent in world.population.agents}
    expected[winner.q_table] = 1.0
    assert rewards == expected
    assert world.state.successful_agent_id is None
    assert fake_env.velocities[winner.id] == (0.0, -5.0)


def test_best_and_worst_scores_are_reported(make_world):
    """Test the best and worst scores sent to the observer."""
    world = make_world(size=3)
    a, b, c = world.population.agents
    a.add_score(2.0)
    c.add_score(-1.0)

    world.episodes.on_after_step()

    world.observer.on_tick.assert_called_once_with(0, 2.0, -1.0)


def test_exhaustion_fires_exactly_once(make_world, fake_env):
    """Test that the episode budget ends the run once."""
    updater = _updater_mock()
    world = make_world(size=2, updater=updater, q_config=QLearningConfig(max_episodes=3))

    results = [world.episodes.on_after_step() for _ in range(3)]
    assert results == [True, True, False]
    assert world.state.terminated
    assert fake_env.reset_requests == 1
    world.observer.on_episodes_exhausted.assert_called_once_with(3)

    calls = updater.default_update.call_count
    assert world.episodes.on_after_step() is False
    assert updater.default_update.call_count == calls
    assert world.state.episode_count == 3
    assert fake_env.reset_requests == 1


def test_agent_without_table_is_skipped(make_world, caplog):
    """Test that a missing table skips only that agent."""
    updater = _updater_mock()
    world = make_world(size=3, updater=updater)
    broken = world.population.agents[0]
    broken.q_table = None

    with caplog.at_level(logging.WARNING):
        assert world.episodes.on_after_step() is True

    assert updater.default_update.call_count == 2
    assert f"No Q-table found for agent {broken.id}" in caplog.text
    assert world.state.episode_count == 1
