"""
Reporting: observer hooks and the metrics collector behind the charts.
"""

from .observer import StatusReport, TrainingObserver
from .metrics_collector import MetricsCollector, TickRecord, IterationRecord

__all__ = [
    'StatusReport',
    'TrainingObserver',
    'MetricsCollector',
    'TickRecord',
    'IterationRecord',
]
