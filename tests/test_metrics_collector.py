"""
Tests for the metrics collector and status line.
"""

from evoball.evaluation.metrics_collector import MetricsCollector
from evoball.evaluation.observer import StatusReport


def test_status_line_format():
    """Test the status line text."""
    report = StatusReport(
        episode_count=5,
        iterations_count=2,
        last_successful_agent_id="ball-1",
        success_streak=1,
        mutation_magnitude=0.297,
    )
    assert report.format() == (
        "Episode 5 | Iteration 2 | Last successful ball ID: ball-1 | "
        "Streak (same ball): 1 | Learning rate: 0.297"
    )


def test_score_history_is_cleared_on_success():
    """Test the score series and its reset on success."""
    metrics = MetricsCollector()
    for episode in range(3):
        metrics.on_tick(episode, float(episode), -float(episode))

    frame = metrics.score_frame()
    assert list(frame.columns) == ['episode', 'best_score', 'worst_score']
    assert frame['best_score'].tolist() == [0.0, 1.0, 2.0]

    metrics.on_score_history_cleared()
    assert metrics.score_frame().empty
    assert metrics.total_ticks == 3


def test_iteration_history_and_summary():
    """Test the iteration series and summary."""
    metrics = MetricsCollector()
    assert metrics.get_summary()['successes'] == 0
    assert metrics.get_summary()['mean_episodes_per_success'] is None

    metrics.on_success(1, 120, 0.3)
    metrics.on_success(2, 80, 0.297)
    metrics.on_episodes_exhausted(2000)

    frame = metrics.iteration_frame()
    assert frame['episodes'].tolist() == [120, 80]

    summary = metrics.get_summary()
    assert summary['successes'] == 2
    assert summary['mean_episodes_per_success'] == 100.0
    assert summary['best_episodes_per_success'] == 80
    assert metrics.exhausted_at == 2000
