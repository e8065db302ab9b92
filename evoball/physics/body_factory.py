"""
Body factory for creating the arena's physics bodies.
"""

import math
from typing import List, Tuple

import pymunk

# Collision categories
BALL_CATEGORY = 0x0001
WALL_CATEGORY = 0x0002
OBSTACLE_CATEGORY = 0x0004
TARGET_CATEGORY = 0x0008

# Balls collide with walls, obstacles and the target, never with each other
BALL_MASK = WALL_CATEGORY | OBSTACLE_CATEGORY | TARGET_CATEGORY


class BodyFactory:
    """Factory for creating physics bodies and shapes."""

    @staticmethod
    def create_static_body(space: pymunk.Space, position: Tuple[float, float] = (0, 0)) -> pymunk.Body:
        """Create a static body."""
        body = pymunk.Body(body_type=pymunk.Body.STATIC)
        body.position = position
        space.add(body)
        return body

    @staticmethod
    def _finish_static_shape(space: pymunk.Space, shape: pymunk.Shape, category: int) -> pymunk.Shape:
        shape.friction = 0.0
        shape.elasticity = 0.0
        shape.filter = pymunk.ShapeFilter(categories=category, mask=BALL_CATEGORY)
        space.add(shape)
        return shape

    @staticmethod
    def create_ball(space: pymunk.Space, position: Tuple[float, float], radius: float,
                    mass: float = 1.0) -> Tuple[pymunk.Body, pymunk.Shape]:
        """Create a ball (dynamic circle) that only collides with static scenery."""
        moment = pymunk.moment_for_circle(mass, 0, radius)
        body = pymunk.Body(mass, moment, body_type=pymunk.Body.DYNAMIC)
        body.position = position
        shape = pymunk.Circle(body, radius)
        shape.friction = 0.0
        shape.elasticity = 0.0
        shape.filter = pymunk.ShapeFilter(categories=BALL_CATEGORY, mask=BALL_MASK)
        space.add(body, shape)
        return body, shape

    @staticmethod
    def create_static_box(space: pymunk.Space, position: Tuple[float, float],
                          size: Tuple[float, float], category: int) -> pymunk.Shape:
        """Create a static box centred on ``position``."""
        body = BodyFactory.create_static_body(space, position)
        shape = pymunk.Poly.create_box(body, size)
        return BodyFactory._finish_static_shape(space, shape, category)

    @staticmethod
    def create_static_circle(space: pymunk.Space, position: Tuple[float, float],
                             radius: float, category: int) -> pymunk.Shape:
        """Create a static circle centred on ``position``."""
        body = BodyFactory.create_static_body(space, position)
        shape = pymunk.Circle(body, radius)
        return BodyFactory._finish_static_shape(space, shape, category)

    @staticmethod
    def create_static_polygon(space: pymunk.Space, position: Tuple[float, float],
                              vertices: List[Tuple[float, float]], category: int) -> pymunk.Shape:
        """Create a static convex polygon; vertices are relative to ``position``."""
        body = BodyFactory.create_static_body(space, position)
        shape = pymunk.Poly(body, vertices)
        return BodyFactory._finish_static_shape(space, shape, category)

    @staticmethod
    def trapezoid_vertices(width: float, height: float, slope: float) -> List[Tuple[float, float]]:
        """Vertices of a trapezoid with its roof narrowed by ``slope``, centred on the origin."""
        slope *= 0.5
        roof = (1 - slope * 2) * width
        x1 = width * slope
        x2 = x1 + roof
        x3 = x2 + x1
        return [
            (0 - x3 / 2, height / 2),
            (x1 - x3 / 2, -height / 2),
            (x2 - x3 / 2, -height / 2),
            (x3 - x3 / 2, height / 2),
        ]

    @staticmethod
    def regular_polygon_vertices(sides: int, radius: float) -> List[Tuple[float, float]]:
        """Vertices of a regular polygon centred on the origin."""
        theta = 2 * math.pi / sides
        offset = theta * 0.5
        return [
            (radius * math.cos(offset + i * theta), radius * math.sin(offset + i * theta))
            for i in range(sides)
        ]

    @staticmethod
    def centred_vertices(vertices: List[Tuple[float, float]]) -> List[Tuple[float, float]]:
        """Shift vertices so their centroid sits on the origin."""
        cx = sum(x for x, _ in vertices) / len(vertices)
        cy = sum(y for _, y in vertices) / len(vertices)
        return [(x - cx, y - cy) for x, y in vertices]

    @staticmethod
    def destroy_body(space: pymunk.Space, body: pymunk.Body):
        """Safely destroy a body and all its shapes."""
        if body is None:
            return

        for shape in list(body.shapes):
            space.remove(shape)

        space.remove(body)
