"""
Default obstacle course of the 800x600 arena.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .body_factory import BodyFactory


@dataclass(frozen=True)
class ObstacleSpec:
    """Static obstacle: ``shape`` is 'box', 'circle' or 'polygon'."""
    shape: str
    position: Tuple[float, float]
    size: Tuple[float, float] = (0.0, 0.0)
    radius: float = 0.0
    vertices: Tuple[Tuple[float, float], ...] = field(default_factory=tuple)


def default_obstacles() -> List[ObstacleSpec]:
    """The twelve obstacles of the standard course."""
    return [
        # Rectangular obstacles
        ObstacleSpec('box', (400, 300), size=(100, 20)),
        ObstacleSpec('box', (600, 400), size=(80, 40)),
        ObstacleSpec('box', (200, 150), size=(60, 30)),

        # Circular obstacles
        ObstacleSpec('circle', (300, 500), radius=30),
        ObstacleSpec('circle', (700, 200), radius=20),

        # More rectangular obstacles
        ObstacleSpec('box', (500, 100), size=(120, 20)),
        ObstacleSpec('box', (100, 500), size=(40, 60)),

        # More circular obstacles; the first one sits on the start position
        ObstacleSpec('circle', (100, 200), radius=15),
        ObstacleSpec('circle', (600, 500), radius=25),

        # Trapezoid, pentagon and triangle
        ObstacleSpec('polygon', (400, 450),
                     vertices=tuple(BodyFactory.trapezoid_vertices(60, 40, 0.7))),
        ObstacleSpec('polygon', (700, 350),
                     vertices=tuple(BodyFactory.regular_polygon_vertices(5, 30))),
        ObstacleSpec('polygon', (300, 100),
                     vertices=tuple(BodyFactory.centred_vertices([(0, 0), (40, 0), (20, 30)]))),
    ]
