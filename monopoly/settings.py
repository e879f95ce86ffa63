"""
Environment-based engine defaults using pydantic-settings.

Hosts that create many games (see ``monopoly.registry``) read their rule
constants from here instead of hard-coding them.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """
    Rule constants for new games.

    Environment variables (prefix: MONOPOLY_):
        MONOPOLY_STARTING_CASH           - Cash handed to each player (default: 1500)
        MONOPOLY_GO_SALARY               - Bonus for passing GO (default: 200)
        MONOPOLY_JAIL_FINE               - Fine paid to leave jail (default: 50)
        MONOPOLY_MORTGAGE_INTEREST_RATE  - Interest charged when lifting a mortgage (default: 0.10)
        MONOPOLY_MAX_TURNS               - Turn ceiling before net-worth scoring (default: 1000)
        MONOPOLY_SEED                    - Optional RNG seed for reproducible games
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="MONOPOLY_",
    )

    starting_cash: int = Field(default=1500, ge=0, description="Starting cash per player.")
    go_salary: int = Field(default=200, ge=0, description="Bonus collected when passing GO.")
    jail_fine: int = Field(default=50, ge=0, description="Fine paid to leave jail.")
    mortgage_interest_rate: float = Field(
        default=0.10,
        ge=0,
        le=1,
        description="Interest on top of the mortgage value when unmortgaging.",
    )
    max_turns: int = Field(default=1000, gt=0, description="Turn ceiling for a single game.")
    seed: Optional[int] = Field(default=None, description="RNG seed; random when unset.")

    @field_validator("seed", mode="before")
    @classmethod
    def empty_seed_is_none(cls, value):
        """Treat an empty MONOPOLY_SEED= as unset."""
        if value == "":
            return None
        return value


@lru_cache
def get_engine_settings() -> EngineSettings:
    """Return cached engine settings instance."""
    return EngineSettings()
