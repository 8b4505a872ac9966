"""Mini README: Interactive interfaces for the budget tracker.

Exports the FastAPI application factory. The command line entry point lives
in ``main_budget_tracker.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
