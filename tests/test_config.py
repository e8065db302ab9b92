"""
Tests for configuration defaults and JSON loading.
"""

import json

import pytest

from evoball.config.q_learning_config import get_config
from evoball.config.settings import TrainingConfig, load_config
from evoball.exceptions import ConfigError


def _write(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return str(path)


def test_defaults():
    """Test default configuration values."""
    config = load_config()
    assert config.q_learning.learning_rate == 0.1
    assert config.q_learning.discount_factor == 0.9
    assert config.q_learning.epsilon == 0.2
    assert config.q_learning.max_episodes == 2000
    assert config.evolution.initial_mutation_magnitude == 0.3
    assert config.arena.population_size == 10
    assert config.arena.start_position == (100.0, 200.0)


def test_json_overlay(tmp_path):
    """Test overriding defaults from a JSON file."""
    path = _write(tmp_path, {
        "q_learning": {"epsilon": 0.05},
        "arena": {"population_size": 4, "start_position": [50, 60]},
    })
    config = load_config(path)

    assert config.q_learning.epsilon == 0.05
    assert config.q_learning.learning_rate == 0.1
    assert config.arena.population_size == 4
    assert config.arena.start_position == (50, 60)


@pytest.mark.parametrize("data, message", [
    ({"physics": {}}, "Unknown config section"),
    ({"q_learning": {"alpha": 0.5}}, "Unknown key 'q_learning.alpha'"),
    ({"q_learning": {"epsilon": 1.5}}, "epsilon"),
    ({"evolution": {"mutation_decay": 1.0}}, "mutation_decay"),
    ({"arena": []}, "must be an object"),
    ([1, 2], "must be an object"),
    ("{not json", "Invalid JSON"),
])
def test_invalid_config_is_rejected(tmp_path, data, message):
    """Test rejection of invalid config files."""
    with pytest.raises(ConfigError, match=message):
        load_config(_write(tmp_path, data))


def test_missing_file(tmp_path):
    """Test loading a config file that does not exist."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(str(tmp_path / "missing.json"))


def test_validate_rejects_out_of_range_mutation_bounds():
    """Test an initial magnitude outside its bounds."""
    config = TrainingConfig()
    config.evolution.initial_mutation_magnitude = 0.9
    with pytest.raises(ConfigError, match="outside"):
        config.validate()


def test_get_config_returns_copies():
    """Test that get_config returns independent dictionaries."""
    evolution = get_config('evolution')
    assert evolution['mutation_decay'] == 0.99
    evolution['mutation_decay'] = 0.5
    assert get_config('evolution')['mutation_decay'] == 0.99
    assert get_config('q_learning')['learning_rate'] == 0.1
