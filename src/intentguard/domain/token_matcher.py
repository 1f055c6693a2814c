"""Substring token matching for query terms."""

from __future__ import annotations

from collections.abc import Iterable


def contains_any(text: str, tokens: Iterable[str]) -> bool:
    """True iff ``text`` contains at least one token as a case-insensitive substring.

    Containment, not whole-word matching: multi-word tokens such as
    "group tour" must match inside longer queries.
    """
    lower = (text or "").lower()
    return any(token.lower() in lower for token in tokens if token)


def matching_tokens(text: str, tokens: Iterable[str]) -> tuple[str, ...]:
    """Return every token contained in ``text``, in token-list order."""
    lower = (text or "").lower()
    return tuple(token for token in tokens if token and token.lower() in lower)
