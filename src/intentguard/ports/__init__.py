"""Port interfaces (Protocols).

Services depend only on these, never on concrete adapters.
No SQLite, file-format or ads-platform imports allowed here.
"""

from .exclusion_store import ExclusionStorePort
from .label_store import LabelHandle, LabelStorePort, ScopeHandle
from .report_source import TrafficReportPort

__all__ = [
    "ExclusionStorePort",
    "LabelHandle",
    "LabelStorePort",
    "ScopeHandle",
    "TrafficReportPort",
]
