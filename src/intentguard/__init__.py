"""IntentGuard: search-term intent enforcement with exact negative keywords."""

from .domain import ClassificationResult, ExclusionLedger, IntentClass, ReconciliationEngine, classify
from .models import ExclusionAction, IntentPolicy, Observation, ReconcileResult, RunStatistics

__version__ = "0.1.0"
__all__ = [
    "ClassificationResult",
    "ExclusionAction",
    "ExclusionLedger",
    "IntentClass",
    "IntentPolicy",
    "Observation",
    "ReconcileResult",
    "ReconciliationEngine",
    "RunStatistics",
    "classify",
]
