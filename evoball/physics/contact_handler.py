"""
Contact handler for collision-start detection.
"""

from typing import Dict, List, Set, Tuple

import pymunk

from .environment import BodyRef, CollisionEvent


class ContactHandler:
    """
    Turns overlapping shape pairs into collision-start events.

    After each space step every ball shape is queried for overlaps. A pair
    that overlaps now but did not on the previous query produces one event;
    a pair that stays in contact produces nothing until it separates.
    """

    def __init__(self):
        self.contact_events: List[CollisionEvent] = []
        self._active_pairs: Set[Tuple[str, pymunk.Shape]] = set()

    def detect(self, space: pymunk.Space, ball_shapes: Dict[str, pymunk.Shape],
               tags: Dict[pymunk.Shape, BodyRef]) -> int:
        """
        Query overlaps for every ball and record new contacts.

        Args:
            space: The physics space, already stepped
            ball_shapes: Ball shape per agent id
            tags: Body tag per static shape

        Returns:
            Number of new contact events recorded
        """
        current: Set[Tuple[str, pymunk.Shape]] = set()
        new_events = 0

        for agent_id, shape in ball_shapes.items():
            for info in space.shape_query(shape):
                other = tags.get(info.shape)
                if other is None:
                    continue

                pair = (agent_id, info.shape)
                current.add(pair)
                if pair not in self._active_pairs:
                    self.contact_events.append(CollisionEvent(BodyRef.agent(agent_id), other))
                    new_events += 1

        self._active_pairs = current
        return new_events

    def forget_agent(self, agent_id: str):
        """Drop tracked contacts of a ball that was removed or teleported."""
        self._active_pairs = {pair for pair in self._active_pairs if pair[0] != agent_id}

    def clear_events(self):
        """Clear all contact events."""
        self.contact_events.clear()

    def get_events(self) -> List[CollisionEvent]:
        """Get all contact events and clear them."""
        events = self.contact_events.copy()
        self.clear_events()
        return events
