"""Pydantic-based runtime settings for enforcement runs.

Loads from environment variables (prefix ``INTENTGUARD_``, optional .env file).
Invalid values fail fast when settings are first loaded.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.policy import (
    DEFAULT_ALLOW_TOKENS,
    DEFAULT_SUSPICIOUS_TOKENS,
    IntentPolicy,
    normalize_tokens,
)


class RuntimeSettings(BaseSettings):
    """All configuration for a run, validated at startup and immutable after."""

    model_config = SettingsConfigDict(
        env_prefix="INTENTGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # --- Scope selection ---
    policy_label_name: str = Field(
        default="ENFORCE_PRIVATE_TERM",
        min_length=1,
        description="Label identifying the campaigns that participate",
    )
    scope_status_filter: str = Field(
        default="ENABLED",
        description="Only labeled campaigns with this status are enforced",
    )

    # --- Budget ---
    max_new_exclusions_per_run: int = Field(
        default=5000,
        ge=1,
        description="Cap on new exact negatives created per run",
    )

    # --- Intent policy ---
    allow_tokens: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOW_TOKENS),
        description="Strong positive-intent tokens (JSON array in env)",
    )
    suspicious_tokens: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUSPICIOUS_TOKENS),
        description="Negative-intent tokens (JSON array in env)",
    )
    brand_allowlist_tokens: list[str] = Field(
        default_factory=list,
        description="Brand override tokens (JSON array in env)",
    )

    # --- Storage ---
    account_db_path: str = Field(
        default="data/account.db",
        description="SQLite path for the local label/negative keyword store",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level for CLI runs")

    # --- Auth (optional: require key for the operator MCP surface) ---
    require_operator_key: bool = Field(
        default=False,
        description="If True, the operator surface requires INTENTGUARD_OPERATOR_KEY env",
    )

    @field_validator("allow_tokens", "suspicious_tokens", mode="before")
    @classmethod
    def _lowercase_tokens(cls, v: object) -> list[str]:
        return list(normalize_tokens(v))

    @field_validator("brand_allowlist_tokens", mode="before")
    @classmethod
    def _strip_brand_tokens(cls, v: object) -> list[str]:
        return list(normalize_tokens(v, lowercase=False))

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level

    def intent_policy(self) -> IntentPolicy:
        """Freeze the configured token sets into an IntentPolicy."""
        return IntentPolicy(
            allow_tokens=self.allow_tokens,
            suspicious_tokens=self.suspicious_tokens,
            brand_allowlist_tokens=self.brand_allowlist_tokens,
        )


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
