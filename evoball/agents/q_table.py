"""
Q-learning table with lazy random initialization.
"""

import random
from typing import Dict, Iterator, List, Tuple, Any, Optional

import numpy as np

from .actions import Action, ACTIONS
from .state_encoder import StateKey

QKey = Tuple[StateKey, Action]


class LazyQTable:
    """
    Sparse Q-table keyed by ``(state, action)``.

    Reading a key that has never been written draws a value from
    ``uniform(0, 1)``, stores it and returns it. Reads therefore mutate the
    table: ``max_q_value`` can add up to four entries in one call. Later
    reads of the same key return the stored value.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize an empty table.

        Args:
            rng: Random source for lazy initialization (module ``random`` if None)
        """
        self.rng = rng if rng is not None else random
        self.q_values: Dict[QKey, float] = {}
        self.update_count = 0

    def get_q_value(self, state: StateKey, action: Action) -> float:
        """Get Q-value for state-action pair, materializing it if absent."""
        key = (state, action)
        if key not in self.q_values:
            self.q_values[key] = self.rng.random()
        return self.q_values[key]

    def set_q_value(self, state: StateKey, action: Action, value: float):
        """Set Q-value for state-action pair."""
        self.q_values[(state, action)] = float(value)
        self.update_count += 1

    def get_action_values(self, state: StateKey) -> List[float]:
        """Get all action values for a state, in ``ACTIONS`` order."""
        return [self.get_q_value(state, action) for action in ACTIONS]

    def max_q_value(self, state: StateKey) -> float:
        """Maximum Q-value over all actions for a state."""
        return max(self.get_action_values(state))

    def copy(self) -> 'LazyQTable':
        """Independent copy sharing only the random source."""
        clone = LazyQTable(rng=self.rng)
        clone.q_values = dict(self.q_values)
        return clone

    def keys(self):
        return self.q_values.keys()

    def items(self):
        return self.q_values.items()

    def __len__(self) -> int:
        return len(self.q_values)

    def __contains__(self, key: QKey) -> bool:
        return key in self.q_values

    def __iter__(self) -> Iterator[QKey]:
        return iter(self.q_values)

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the Q-table."""
        if not self.q_values:
            return {
                'total_entries': 0,
                'total_states': 0,
                'min_value': 0.0,
                'max_value': 0.0,
                'mean_value': 0.0,
                'std_value': 0.0,
                'update_count': self.update_count,
            }

        values = np.fromiter(self.q_values.values(), dtype=np.float64)
        return {
            'total_entries': len(self.q_values),
            'total_states': len({state for state, _ in self.q_values}),
            'min_value': float(values.min()),
            'max_value': float(values.max()),
            'mean_value': float(values.mean()),
            'std_value': float(values.std()),
            'update_count': self.update_count,
        }
