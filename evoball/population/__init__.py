"""
Population management module.

This module handles the fixed-size ball population, winner cloning with
mutation and the adaptive mutation-rate controller.
"""

from .population_controller import PopulationController, AgentSlot
from .performance_tracker import AdaptivePerformanceTracker
from .evolution import EvolutionManager, MutationOperator

__all__ = [
    'PopulationController',
    'AgentSlot',
    'AdaptivePerformanceTracker',
    'EvolutionManager',
    'MutationOperator',
]
