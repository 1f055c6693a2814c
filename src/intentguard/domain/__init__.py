"""Domain layer: token matching, intent rules, ledger and reconciliation."""

from .exclusion_ledger import ExclusionLedger, normalize_exclusion_text, normalize_term
from .intent_classifier import (
    DEFAULT_RULES,
    ClassificationResult,
    IntentClass,
    IntentClassifier,
    IntentRule,
    classify,
)
from .intent_semantics import (
    RULE_ALLOW_BEATS_SUSPICIOUS,
    RULE_BRAND_OVERRIDE,
    RULE_SUBSTRING_CONTAINMENT,
    RULE_SUSPICIOUS_BLOCK,
    RULE_UNCERTAIN_NEVER_EXCLUDED,
)
from .reconciliation_engine import ReconciliationEngine, reconcile
from .token_matcher import contains_any, matching_tokens

__all__ = [
    "ClassificationResult",
    "DEFAULT_RULES",
    "ExclusionLedger",
    "IntentClass",
    "IntentClassifier",
    "IntentRule",
    "ReconciliationEngine",
    "classify",
    "contains_any",
    "matching_tokens",
    "normalize_exclusion_text",
    "normalize_term",
    "reconcile",
    "RULE_ALLOW_BEATS_SUSPICIOUS",
    "RULE_BRAND_OVERRIDE",
    "RULE_SUBSTRING_CONTAINMENT",
    "RULE_SUSPICIOUS_BLOCK",
    "RULE_UNCERTAIN_NEVER_EXCLUDED",
]
