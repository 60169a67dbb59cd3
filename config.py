"""
Centralised settings loader (pydantic-settings).

Every field can be overridden by the upper-cased env-var of the same
name, or from a local `.env` file.
"""

from __future__ import annotations
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime / DB ────────────────────────────────────────────────
    env_name: str = "local"
    database_url: str | None = None          # e.g. postgresql+asyncpg://…
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    create_tables: bool = False              # create missing tables on startup

    # ─── planner knobs ──────────────────────────────────────────────
    use_static_catalog: bool = True          # merge built-in meals after recipes
    top_candidates: int = Field(3, ge=1)     # size of the randomised pick in tier 2

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(extra="ignore", env_file=".env", env_file_encoding="utf-8")


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
