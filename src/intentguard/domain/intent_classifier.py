"""IntentClassifier: ordered, first-match-wins rules over three token sets.

Semantics: see domain/intent_semantics.py.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..models.policy import IntentPolicy
from .intent_semantics import BLOCK_CANDIDATE, BRAND_TAG_PREFIX, KEEP, UNCERTAIN
from .token_matcher import matching_tokens


class IntentClass(str, Enum):
    """Outcome of classifying one query term."""

    keep = KEEP
    block_candidate = BLOCK_CANDIDATE
    uncertain = UNCERTAIN


@dataclass(frozen=True)
class ClassificationResult:
    """Intent class plus the tokens that produced it."""

    intent: IntentClass
    matched_tokens: tuple[str, ...] = ()
    rule: str = "uncertain"


@dataclass(frozen=True)
class IntentRule:
    """One row of the rule table.

    ``match`` receives the lowercased term and the policy and returns the
    matched tokens; an empty tuple means the rule does not fire.
    """

    name: str
    intent: IntentClass
    match: Callable[[str, IntentPolicy], tuple[str, ...]]


def _match_brand(term: str, policy: IntentPolicy) -> tuple[str, ...]:
    hits = matching_tokens(term, policy.brand_allowlist_tokens)
    if not hits:
        return ()
    return (f"{BRAND_TAG_PREFIX}{hits[0]}",)


def _match_allow(term: str, policy: IntentPolicy) -> tuple[str, ...]:
    return matching_tokens(term, policy.allow_tokens)


def _match_suspicious(term: str, policy: IntentPolicy) -> tuple[str, ...]:
    return matching_tokens(term, policy.suspicious_tokens)


DEFAULT_RULES: tuple[IntentRule, ...] = (
    IntentRule(name="brand", intent=IntentClass.keep, match=_match_brand),
    IntentRule(name="allow", intent=IntentClass.keep, match=_match_allow),
    IntentRule(name="suspicious", intent=IntentClass.block_candidate, match=_match_suspicious),
)


class IntentClassifier:
    """Evaluate an ordered rule table; the first rule that fires wins.

    Falls through to ``uncertain`` with no matched tokens.
    """

    def __init__(
        self,
        policy: IntentPolicy | None = None,
        rules: tuple[IntentRule, ...] = DEFAULT_RULES,
    ) -> None:
        self._policy = policy or IntentPolicy()
        self._rules = rules

    @property
    def policy(self) -> IntentPolicy:
        return self._policy

    @property
    def rules(self) -> tuple[IntentRule, ...]:
        return self._rules

    def classify(self, term: str | None) -> ClassificationResult:
        lower = (term or "").lower()
        for rule in self._rules:
            matched = rule.match(lower, self._policy)
            if matched:
                return ClassificationResult(intent=rule.intent, matched_tokens=matched, rule=rule.name)
        return ClassificationResult(intent=IntentClass.uncertain)


def classify(
    term: str | None,
    allow_tokens: tuple[str, ...] | list[str],
    suspicious_tokens: tuple[str, ...] | list[str],
    brand_allowlist: tuple[str, ...] | list[str] = (),
) -> ClassificationResult:
    """Classify one term against explicit token lists using the default rules."""
    policy = IntentPolicy(
        allow_tokens=allow_tokens,
        suspicious_tokens=suspicious_tokens,
        brand_allowlist_tokens=brand_allowlist,
    )
    return IntentClassifier(policy).classify(term)
