"""Services: enforcement orchestration and reporting; engines in domain."""

from ..domain.intent_classifier import IntentClassifier
from ..domain.reconciliation_engine import ReconciliationEngine
from .enforcement_service import EnforcementReport, EnforcementService
from .errors import CollaboratorError
from .reporting import report_to_dict, summary_lines

__all__ = [
    "CollaboratorError",
    "EnforcementReport",
    "EnforcementService",
    "IntentClassifier",
    "ReconciliationEngine",
    "report_to_dict",
    "summary_lines",
]
