"""Domain models: policy, observations, actions and run statistics."""

from .actions import ExclusionAction
from .observation import Observation
from .policy import DEFAULT_ALLOW_TOKENS, DEFAULT_SUSPICIOUS_TOKENS, IntentPolicy
from .run_stats import ReconcileResult, RunStatistics, ScopeStats

__all__ = [
    "DEFAULT_ALLOW_TOKENS",
    "DEFAULT_SUSPICIOUS_TOKENS",
    "ExclusionAction",
    "IntentPolicy",
    "Observation",
    "ReconcileResult",
    "RunStatistics",
    "ScopeStats",
]
