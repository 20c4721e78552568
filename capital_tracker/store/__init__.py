"""
Mutable session state.

The entry store and goal tracker hold the only mutable state in the system.
Each mutation is atomic and reports itself through an optional change
listener, which the session uses to persist and notify observers.
"""
from .entry_store import EntryStore
from .goal_tracker import GoalProgress, GoalTracker

__all__ = ["EntryStore", "GoalTracker", "GoalProgress"]
