"""
Arena settings and configuration loading.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from evoball.config.q_learning_config import QLearningConfig, EvolutionConfig
from evoball.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class ArenaConfig:
    """Geometry of the arena and of the ball population."""

    width: float = 800.0
    height: float = 600.0
    wall_thickness: float = 200.0

    population_size: int = 10
    start_position: Tuple[float, float] = (100.0, 200.0)
    ball_radius: float = 20.0

    target_position: Tuple[float, float] = (700.0, 100.0)
    target_radius: float = 60.0

    # State discretization
    bucket_size: float = 100.0

    # Speed applied by a move action, in units per tick
    action_speed: float = 5.0

    # Simulated time advanced by one tick; 1.0 keeps velocities in units per tick
    time_step: float = 1.0


@dataclass
class TrainingConfig:
    """Complete configuration of a training run."""

    q_learning: QLearningConfig = field(default_factory=QLearningConfig)
    evolution: EvolutionConfig = field(default_factory=EvolutionConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)

    def validate(self):
        """Raise ConfigError if any value is out of range."""
        q = self.q_learning
        if not 0.0 < q.learning_rate <= 1.0:
            raise ConfigError(f"learning_rate must be in (0, 1], got {q.learning_rate}")
        if not 0.0 <= q.discount_factor <= 1.0:
            raise ConfigError(f"discount_factor must be in [0, 1], got {q.discount_factor}")
        if not 0.0 <= q.epsilon <= 1.0:
            raise ConfigError(f"epsilon must be in [0, 1], got {q.epsilon}")
        if q.max_episodes < 1:
            raise ConfigError(f"max_episodes must be positive, got {q.max_episodes}")

        e = self.evolution
        if not 0.0 < e.mutation_decay < 1.0:
            raise ConfigError(f"mutation_decay must be in (0, 1), got {e.mutation_decay}")
        if not 0.0 < e.min_mutation_magnitude <= e.max_mutation_magnitude:
            raise ConfigError(
                f"mutation bounds must satisfy 0 < min <= max, got "
                f"[{e.min_mutation_magnitude}, {e.max_mutation_magnitude}]"
            )
        if not e.min_mutation_magnitude <= e.initial_mutation_magnitude <= e.max_mutation_magnitude:
            raise ConfigError(
                f"initial_mutation_magnitude {e.initial_mutation_magnitude} is outside "
                f"[{e.min_mutation_magnitude}, {e.max_mutation_magnitude}]"
            )
        if e.performance_window < 1:
            raise ConfigError(f"performance_window must be positive, got {e.performance_window}")

        a = self.arena
        if a.population_size < 1:
            raise ConfigError(f"population_size must be positive, got {a.population_size}")
        if a.bucket_size <= 0:
            raise ConfigError(f"bucket_size must be positive, got {a.bucket_size}")
        if a.time_step <= 0:
            raise ConfigError(f"time_step must be positive, got {a.time_step}")
        return self


def _apply_section(section: Any, name: str, values: Dict[str, Any]):
    if not isinstance(values, dict):
        raise ConfigError(f"Section '{name}' must be an object")
    for key, value in values.items():
        if not hasattr(section, key):
            raise ConfigError(f"Unknown key '{name}.{key}'")
        current = getattr(section, key)
        if isinstance(current, tuple):
            value = tuple(value)
        setattr(section, key, value)


def load_config(path: Optional[str] = None) -> TrainingConfig:
    """
    Build a TrainingConfig from defaults, overlaid with a JSON file.

    The file holds up to three objects, ``q_learning``, ``evolution`` and
    ``arena``, each mapping field names to values.

    Args:
        path: JSON file to load, or None for defaults only

    Returns:
        Validated configuration
    """
    config = TrainingConfig()
    if path is None:
        return config.validate()

    if not os.path.exists(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config root in {path} must be an object")

    for name, values in data.items():
        if not hasattr(config, name):
            raise ConfigError(f"Unknown config section '{name}'")
        _apply_section(getattr(config, name), name, values)

    logger.info(f"Loaded configuration from {path}")
    return config.validate()
