"""
Physics side of the arena: the environment interface and its pymunk implementation.
"""

from .environment import BodyKind, BodyRef, CollisionEvent, SimulatedEnvironment
from .body_factory import BodyFactory
from .contact_handler import ContactHandler
from .arena_layout import ObstacleSpec, default_obstacles
from .arena import Arena

__all__ = [
    'BodyKind',
    'BodyRef',
    'CollisionEvent',
    'SimulatedEnvironment',
    'BodyFactory',
    'ContactHandler',
    'ObstacleSpec',
    'default_obstacles',
    'Arena',
]
