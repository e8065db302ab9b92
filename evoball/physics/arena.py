"""
Headless pymunk arena: walls, obstacles, target and the ball bodies.

One call to ``step`` is one tick: the space is advanced, collision-start
events are dispatched to the collision listeners, then the after-step
listeners run. Listeners never run inside the physics solver, so they may
add, remove and teleport bodies freely.
"""

import logging
import uuid
from typing import Callable, Dict, List, Optional

import pymunk

from evoball.config.settings import ArenaConfig
from .arena_layout import ObstacleSpec, default_obstacles
from .body_factory import BodyFactory, WALL_CATEGORY, OBSTACLE_CATEGORY, TARGET_CATEGORY
from .contact_handler import ContactHandler
from .environment import BodyKind, BodyRef, CollisionEvent, SimulatedEnvironment, Vector

logger = logging.getLogger(__name__)


class Arena(SimulatedEnvironment):
    """pymunk implementation of the simulated environment."""

    def __init__(self, config: Optional[ArenaConfig] = None,
                 obstacles: Optional[List[ObstacleSpec]] = None):
        self.config = config or ArenaConfig()

        self.space = pymunk.Space()
        self.space.gravity = (0, 0)

        self.contact_handler = ContactHandler()
        self.tags: Dict[pymunk.Shape, BodyRef] = {}
        self.balls: Dict[str, pymunk.Body] = {}
        self.ball_shapes: Dict[str, pymunk.Shape] = {}

        self._collision_listeners: List[Callable[[CollisionEvent], None]] = []
        self._after_step_listeners: List[Callable[[], object]] = []

        self.tick = 0
        self.reset_requested = False

        self._create_walls()
        self._create_obstacles(default_obstacles() if obstacles is None else obstacles)
        self._create_target()

    def _create_walls(self):
        """Four thick walls just outside the visible area."""
        w, h, t = self.config.width, self.config.height, self.config.wall_thickness
        walls = [
            ((w / 2, -t / 2), (w, t)),
            ((w / 2, h + t / 2), (w, t)),
            ((-t / 2, h / 2), (t, h)),
            ((w + t / 2, h / 2), (t, h)),
        ]
        for position, size in walls:
            shape = BodyFactory.create_static_box(self.space, position, size, WALL_CATEGORY)
            self.tags[shape] = BodyRef(BodyKind.WALL)

    def _create_obstacles(self, obstacles: List[ObstacleSpec]):
        for obstacle in obstacles:
            if obstacle.shape == 'box':
                shape = BodyFactory.create_static_box(self.space, obstacle.position, obstacle.size, OBSTACLE_CATEGORY)
            elif obstacle.shape == 'circle':
                shape = BodyFactory.create_static_circle(self.space, obstacle.position, obstacle.radius, OBSTACLE_CATEGORY)
            elif obstacle.shape == 'polygon':
                shape = BodyFactory.create_static_polygon(
                    self.space, obstacle.position, list(obstacle.vertices), OBSTACLE_CATEGORY
                )
            else:
                raise ValueError(f"Unknown obstacle shape '{obstacle.shape}'")
            self.tags[shape] = BodyRef(BodyKind.OBSTACLE)

    def _create_target(self):
        shape = BodyFactory.create_static_circle(
            self.space, self.config.target_position, self.config.target_radius, TARGET_CATEGORY
        )
        self.tags[shape] = BodyRef(BodyKind.TARGET)

    # Listener registration

    def add_collision_listener(self, callback: Callable[[CollisionEvent], None]):
        self._collision_listeners.append(callback)

    def add_after_step_listener(self, callback: Callable[[], object]):
        self._after_step_listeners.append(callback)

    # Simulation

    def step(self):
        """Advance one tick and dispatch its events."""
        self.space.step(self.config.time_step)
        self.contact_handler.detect(self.space, self.ball_shapes, self.tags)

        for event in self.contact_handler.get_events():
            for callback in self._collision_listeners:
                callback(event)

        for callback in self._after_step_listeners:
            callback()

        self.tick += 1

    # SimulatedEnvironment

    def _body(self, agent_id: str) -> pymunk.Body:
        try:
            return self.balls[agent_id]
        except KeyError:
            raise KeyError(f"No ball with id {agent_id}") from None

    def get_position(self, agent_id: str) -> Vector:
        position = self._body(agent_id).position
        return (float(position.x), float(position.y))

    def get_velocity(self, agent_id: str) -> Vector:
        velocity = self._body(agent_id).velocity
        return (float(velocity.x), float(velocity.y))

    def reset_agent(self, agent_id: str, position: Vector, velocity: Vector):
        body = self._body(agent_id)
        body.position = position
        body.velocity = velocity
        self.space.reindex_shapes_for_body(body)
        self.contact_handler.forget_agent(agent_id)

    def set_velocity(self, agent_id: str, velocity: Vector):
        self._body(agent_id).velocity = velocity

    def spawn_agent(self, start_position: Vector) -> str:
        agent_id = str(uuid.uuid4())
        body, shape = BodyFactory.create_ball(self.space, start_position, self.config.ball_radius)
        self.balls[agent_id] = body
        self.ball_shapes[agent_id] = shape
        self.tags[shape] = BodyRef.agent(agent_id)
        return agent_id

    def remove_agent(self, agent_id: str):
        body = self.balls.pop(agent_id)
        shape = self.ball_shapes.pop(agent_id)
        self.tags.pop(shape, None)
        self.contact_handler.forget_agent(agent_id)
        BodyFactory.destroy_body(self.space, body)

    def request_reset(self):
        logger.info(f"World reset requested at tick {self.tick}")
        self.reset_requested = True
