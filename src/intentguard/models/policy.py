"""Intent policy: the three token sets that drive classification."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ALLOW_TOKENS: tuple[str, ...] = (
    "private",
    "vip",
    "luxury",
    "bespoke",
    "exclusive",
)

DEFAULT_SUSPICIOUS_TOKENS: tuple[str, ...] = (
    "excursion",
    "excursions",
    "group tour",
    "group tours",
    "bus tour",
    "bus tours",
    "coach tour",
    "coach tours",
    "hop on hop off",
    "cheap",
)


def normalize_tokens(tokens: object, lowercase: bool = True) -> tuple[str, ...]:
    """Strip (and by default lowercase) tokens, dropping blanks. Order is preserved."""
    if tokens is None:
        return ()
    if isinstance(tokens, str):
        tokens = [tokens]
    out: list[str] = []
    for token in tokens:
        text = str(token).strip()
        if lowercase:
            text = text.lower()
        if text:
            out.append(text)
    return tuple(out)


class IntentPolicy(BaseModel):
    """Immutable token sets for one enforcement run."""

    model_config = ConfigDict(frozen=True)

    allow_tokens: tuple[str, ...] = Field(
        default=DEFAULT_ALLOW_TOKENS,
        description="Strong positive-intent signals; a match keeps the term",
    )
    suspicious_tokens: tuple[str, ...] = Field(
        default=DEFAULT_SUSPICIOUS_TOKENS,
        description="Negative-intent signals; a match makes the term a block candidate",
    )
    brand_allowlist_tokens: tuple[str, ...] = Field(
        default=(),
        description="Brand overrides; a match keeps the term regardless of other tokens",
    )

    @field_validator("allow_tokens", "suspicious_tokens", mode="before")
    @classmethod
    def _lowercase(cls, value: object) -> tuple[str, ...]:
        return normalize_tokens(value)

    # Brand tokens keep their configured casing for the "brand:" audit tag.
    @field_validator("brand_allowlist_tokens", mode="before")
    @classmethod
    def _strip_brands(cls, value: object) -> tuple[str, ...]:
        return normalize_tokens(value, lowercase=False)
