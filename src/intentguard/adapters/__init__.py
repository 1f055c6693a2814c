"""Concrete adapter implementations."""

from .file_report_source import FileReportSource
from .sqlite_account_store import SqliteAccountStore

__all__ = [
    "FileReportSource",
    "SqliteAccountStore",
]
