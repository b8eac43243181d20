"""
Action-plan repositories for farmapp.

Provides pluggable persistence backends:
- MemoryActionPlanRepository: Fast ephemeral storage for tests and demo data
- SQLiteActionPlanRepository: Local persistence
"""

from .base import ActionPlanRepository, can_transition
from .memory import MemoryActionPlanRepository
from .seed import default_action_plans
from .sqlite import SQLiteActionPlanRepository

__all__ = [
    "ActionPlanRepository",
    "MemoryActionPlanRepository",
    "SQLiteActionPlanRepository",
    "can_transition",
    "default_action_plans",
]
