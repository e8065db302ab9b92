"""
Interface of the simulated environment that owns the ball bodies.

The training core only reads positions and velocities and issues the few
explicit commands below. Everything else (stepping, collision detection)
belongs to the environment.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Vector = Tuple[float, float]


class BodyKind(Enum):
    """Tag of a body taking part in a collision."""
    AGENT = "agent"
    WALL = "wall"
    OBSTACLE = "obstacle"
    TARGET = "target"


@dataclass(frozen=True)
class BodyRef:
    """A tagged body; ``agent_id`` is set only for agents."""
    kind: BodyKind
    agent_id: Optional[str] = None

    @classmethod
    def agent(cls, agent_id: str) -> 'BodyRef':
        return cls(BodyKind.AGENT, agent_id)


@dataclass(frozen=True)
class CollisionEvent:
    """Two bodies that started touching during the last step."""
    body_a: BodyRef
    body_b: BodyRef

    def other(self, agent_id: str) -> Optional[BodyRef]:
        """The body ``agent_id`` collided with, or None if it is not part of this pair."""
        if self.body_a.kind == BodyKind.AGENT and self.body_a.agent_id == agent_id:
            return self.body_b
        if self.body_b.kind == BodyKind.AGENT and self.body_b.agent_id == agent_id:
            return self.body_a
        return None


class SimulatedEnvironment(ABC):
    """Physics collaborator driven by the trainer."""

    @abstractmethod
    def get_position(self, agent_id: str) -> Vector:
        pass

    @abstractmethod
    def get_velocity(self, agent_id: str) -> Vector:
        pass

    @abstractmethod
    def reset_agent(self, agent_id: str, position: Vector, velocity: Vector):
        """Force-set a body's position and velocity."""
        pass

    @abstractmethod
    def set_velocity(self, agent_id: str, velocity: Vector):
        pass

    @abstractmethod
    def spawn_agent(self, start_position: Vector) -> str:
        """Create a body at ``start_position`` and return its new unique id."""
        pass

    @abstractmethod
    def remove_agent(self, agent_id: str):
        pass

    @abstractmethod
    def request_reset(self):
        """Ask for a full world reset; the episode budget is exhausted."""
        pass
