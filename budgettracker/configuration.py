"""Mini README: Centralised configuration for the budget tracker.

Structure:
    * BudgetTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to locate the storage file, pick the currency
    symbol and choose the interface host/port. Values come from
    ``BUDGET_TRACKER_*`` environment variables or a local ``.env`` file. The
    configuration is cached; tests call ``get_settings.cache_clear()`` after
    changing the environment.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BudgetTrackerSettings(BaseSettings):
    """Runtime configuration for the budget tracker."""

    environment: str = Field(
        "development",
        description="Environment label; \"production\" disables auto-reload when serving.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the local storage file.",
    )
    storage_file: str = Field(
        "budget_tracker.json",
        description="Name of the JSON file that stores every key-value slot.",
    )
    storage_key: str = Field(
        "budget_tracker_transactions",
        description="Slot name under which the ledger is persisted.",
    )
    currency_symbol: str = Field(
        "₹",
        description="Symbol prefixed to every formatted amount.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web interface exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the command line entry point.",
    )

    class Config:
        env_prefix = "BUDGET_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_path(self) -> Path:
        return self.data_directory / self.storage_file

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache()
def get_settings() -> BudgetTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetTrackerSettings()
