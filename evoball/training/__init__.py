"""
Training loop: shared state, the per-tick episode controller and the trainer.

Import the controller and the trainer from their modules; this package only
re-exports the state record, which the population package also depends on.
"""

from .training_state import TrainingState

__all__ = ['TrainingState']
