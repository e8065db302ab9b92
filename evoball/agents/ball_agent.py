"""
Ball agent: identity, Q-table and episode-local score.
"""

from typing import Optional

from .q_table import LazyQTable


class BallAgent:
    """A learning ball. Its body lives in the environment under the same id."""

    def __init__(self, agent_id: str, q_table: Optional[LazyQTable] = None, score: float = 0.0):
        self.id = agent_id
        self.q_table = q_table
        self.score = score

    def add_score(self, delta: float):
        self.score += delta

    def get_stats(self):
        stats = {'agent_id': self.id, 'score': self.score}
        if self.q_table is not None:
            stats.update(self.q_table.get_stats())
        return stats

    def __repr__(self) -> str:
        return f"BallAgent(id={self.id!r}, score={self.score})"
