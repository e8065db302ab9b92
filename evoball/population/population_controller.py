"""
Population Controller for the fixed-size set of ball agents.

The population is an indexed list of slots. Cloning never mutates a live
agent: it swaps the slot's agent for a new one with a fresh id.
"""

from typing import List, Dict, Optional
from dataclasses import dataclass

import numpy as np

from evoball.agents.ball_agent import BallAgent
from evoball.agents.q_table import LazyQTable
from evoball.exceptions import InvariantViolation, MissingTableError


@dataclass
class AgentSlot:
    """One position in the population."""
    index: int
    agent: BallAgent
    generation: int = 0


class PopulationController:
    """
    Manages the population of ball agents.

    Size is fixed once the population is full; agent ids must stay unique.
    Both rules are checked after every replacement and a violation raises
    InvariantViolation.
    """

    def __init__(self, population_size: int = 10):
        """
        Initialize the population controller.

        Args:
            population_size: Number of agent slots
        """
        self.population_size = population_size
        self.slots: List[AgentSlot] = []

    def add_agent(self, agent: BallAgent) -> AgentSlot:
        """
        Add an agent to the next free slot.

        Args:
            agent: The agent to add

        Returns:
            The slot holding the agent
        """
        if len(self.slots) >= self.population_size:
            raise ValueError(f"Population is full (max {self.population_size})")
        if self.find_slot(agent.id) is not None:
            raise InvariantViolation(f"Duplicate agent id {agent.id}")

        slot = AgentSlot(index=len(self.slots), agent=agent)
        self.slots.append(slot)
        return slot

    def replace_agent(self, index: int, new_agent: BallAgent) -> BallAgent:
        """
        Put ``new_agent`` into slot ``index`` and return the agent it displaced.
        """
        slot = self.slots[index]
        old_agent = slot.agent
        slot.agent = new_agent
        slot.generation += 1

        self.check_invariants()
        return old_agent

    @property
    def agents(self) -> List[BallAgent]:
        """Agents in slot order."""
        return [slot.agent for slot in self.slots]

    def __len__(self) -> int:
        return len(self.slots)

    def find_slot(self, agent_id: str) -> Optional[AgentSlot]:
        for slot in self.slots:
            if slot.agent.id == agent_id:
                return slot
        return None

    def get_agent(self, agent_id: str) -> Optional[BallAgent]:
        slot = self.find_slot(agent_id)
        return slot.agent if slot else None

    def get_table(self, agent: BallAgent) -> LazyQTable:
        """The agent's Q-table; raises MissingTableError if it has none."""
        if agent.q_table is None:
            raise MissingTableError(agent.id)
        return agent.q_table

    def check_invariants(self):
        """Raise InvariantViolation if the population size or ids are corrupted."""
        if len(self.slots) != self.population_size:
            raise InvariantViolation(
                f"Population size is {len(self.slots)}, expected {self.population_size}"
            )
        ids = [slot.agent.id for slot in self.slots]
        if len(set(ids)) != len(ids):
            duplicates = sorted({agent_id for agent_id in ids if ids.count(agent_id) > 1})
            raise InvariantViolation(f"Duplicate agent ids in population: {duplicates}")

    def get_score_statistics(self) -> Dict[str, float]:
        """
        Score statistics for the current population.

        Returns:
            Dictionary with min, max, mean, std and median score
        """
        if not self.slots:
            return {'min': 0.0, 'max': 0.0, 'mean': 0.0, 'std': 0.0, 'median': 0.0}

        scores = np.array([slot.agent.score for slot in self.slots], dtype=np.float64)
        return {
            'min': float(scores.min()),
            'max': float(scores.max()),
            'mean': float(scores.mean()),
            'std': float(scores.std()),
            'median': float(np.median(scores)),
        }
