"""Mini README: Core package initializer for the budget tracker.

This module exposes convenience imports so front-ends can open a session
without knowing the exact module structure. It stays lightweight: the web
interface (and its FastAPI dependency) is only imported on demand.
"""

from .logging_utils import get_logger
from .session import BudgetSession

__all__ = ["BudgetSession", "get_logger"]
