from __future__ import annotations

from typing import List, Optional


class ConquestError(Exception):
    """Base exception for the Conquest project."""


class DataValidationError(ConquestError):
    """Raised when a card or enemy data table fails validation."""

    def __init__(self, message: str, errors: Optional[List[object]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in getattr(e, "path", [])) or "<root>"
            parts.append(f" - at {path}: {getattr(e, 'message', e)}")
        return "\n".join(parts)


class UnknownCardError(ConquestError, KeyError):
    """Raised when a card id is not present in a registry."""


class UnknownEnemyError(ConquestError, KeyError):
    """Raised when an enemy id is not present in a registry."""
