"""
Tests for state discretization.
"""

from evoball.agents.state_encoder import coarse_state, extended_state


def test_coarse_state_floors_each_axis():
    """Test floor bucketing of positions."""
    assert coarse_state((150, 250)) == (1, 2)
    assert coarse_state((99.9, 0)) == (0, 0)
    assert coarse_state((-1, -150)) == (-1, -2)


def test_extended_state_rounds_half_up_and_adds_velocity_sign():
    """Test rounding and velocity signs of the extended key."""
    assert extended_state((150, 249), (3.2, -0.1)) == (2, 2, 1, -1)
    assert extended_state((100, 200), (0, 0)) == (1, 2, 0, 0)
    # -0.5 rounds toward positive infinity
    assert extended_state((-50, 0), (-5, 5)) == (0, 0, -1, 1)


def test_coarse_and_extended_keys_never_coincide():
    """Test that the two key shapes differ in length."""
    assert len(coarse_state((100, 200))) == 2
    assert len(extended_state((100, 200), (0, 0))) == 4


def test_bucket_size_is_configurable():
    """Test a non-default bucket size."""
    assert coarse_state((150, 250), bucket_size=50) == (3, 5)
    assert extended_state((140, 260), (1, 0), bucket_size=50) == (3, 5, 1, 0)
