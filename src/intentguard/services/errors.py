"""Errors raised by the enforcement service."""

from __future__ import annotations


class CollaboratorError(RuntimeError):
    """An external collaborator failed; the run was aborted.

    Exclusions created before the failure stay in place.
    """

    def __init__(self, collaborator: str, operation: str, cause: BaseException) -> None:
        self.collaborator = collaborator
        self.operation = operation
        self.cause = cause
        super().__init__(f"{collaborator} failed during {operation}: {cause}")
