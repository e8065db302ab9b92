"""
Exception types raised by the training core.
"""


class EvoballError(Exception):
    """Base class for all evoball errors."""


class MissingTableError(EvoballError):
    """An agent has no Q-table attached.

    Recoverable: the agent's update is skipped for the current tick.
    """

    def __init__(self, agent_id: str):
        super().__init__(f"No Q-table found for agent {agent_id}")
        self.agent_id = agent_id


class InvariantViolation(EvoballError):
    """The population is corrupted (size changed, duplicate ids).

    Not recoverable: the run must stop.
    """


class ConfigError(EvoballError):
    """Invalid configuration value or unknown configuration key."""
