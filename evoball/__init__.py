"""
evoball - a population of Q-learning balls that evolves by cloning winners.

Every ball learns its own tabular Q-function while navigating a 2-D arena.
Whenever one ball reaches the target, its Q-table is copied (with random
perturbation) into every other ball, and the perturbation strength adapts
to how quickly successes are arriving.
"""

__version__ = "1.0.0"
