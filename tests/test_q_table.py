"""
Tests for the lazily initialized Q-table.
"""

import random

from evoball.agents.actions import Action, ACTIONS
from evoball.agents.q_table import LazyQTable


class TestLazyQTable:
    """Test the LazyQTable class."""

    def test_missing_value_is_materialized_once(self, rng):
        """Test that a missing value is drawn once and then kept."""
        table = LazyQTable(rng=rng)
        first = table.get_q_value((1, 2), Action.LEFT)

        assert 0.0 <= first < 1.0
        assert ((1, 2), Action.LEFT) in table
        assert table.get_q_value((1, 2), Action.LEFT) == first
        assert len(table) == 1

    def test_max_q_value_fills_all_actions(self, rng):
        """Test that max_q_value materializes all four actions."""
        table = LazyQTable(rng=rng)
        best = table.max_q_value((0, 0))

        assert len(table) == len(ACTIONS)
        assert best == max(table.get_q_value((0, 0), a) for a in ACTIONS)

    def test_same_seed_gives_same_values(self):
        """Test reproducible initialization with a seeded source."""
        a = LazyQTable(rng=random.Random(7))
        b = LazyQTable(rng=random.Random(7))
        assert a.get_action_values((3, 4)) == b.get_action_values((3, 4))

    def test_set_q_value_counts_updates(self, rng):
        """Test setting values."""
        table = LazyQTable(rng=rng)
        table.set_q_value((0, 0), Action.UP, 2.5)

        assert table.get_q_value((0, 0), Action.UP) == 2.5
        assert table.update_count == 1

    def test_copy_is_independent(self, rng):
        """Test that a copied table does not share entries."""
        table = LazyQTable(rng=rng)
        table.set_q_value((0, 0), Action.UP, 1.0)
        clone = table.copy()
        clone.set_q_value((0, 0), Action.UP, -1.0)

        assert table.get_q_value((0, 0), Action.UP) == 1.0
        assert len(clone) == len(table)

    def test_stats(self, rng):
        """Test table statistics."""
        table = LazyQTable(rng=rng)
        assert table.get_stats()['total_entries'] == 0

        table.set_q_value((0, 0), Action.UP, 1.0)
        table.set_q_value((0, 0), Action.DOWN, 3.0)
        table.set_q_value((0, 0, 1, 0), Action.LEFT, 2.0)
        stats = table.get_stats()

        assert stats['total_entries'] == 3
        assert stats['total_states'] == 2
        assert stats['min_value'] == 1.0
        assert stats['max_value'] == 3.0
        assert stats['mean_value'] == 2.0
        assert stats['update_count'] == 3
