"""Domain error codes for theater billing."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_PLAY_TYPE = "UNKNOWN_PLAY_TYPE"
    PLAY_NOT_FOUND = "PLAY_NOT_FOUND"
    INVALID_DOCUMENT = "INVALID_DOCUMENT"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and operator-facing message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayTypeError(DomainError):
    """Raised when a play's type tag has no pricing rule."""

    def __init__(self, play_type: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY_TYPE,
            message=f"unknown type: {play_type}",
        )
        self.play_type = play_type


class PlayNotFoundError(DomainError):
    """Raised when a performance references a play id missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.PLAY_NOT_FOUND,
            message=f"play not found: {play_id}",
        )
        self.play_id = play_id


class InvalidDocumentError(DomainError):
    """Raised when a plays or invoices document cannot be turned into records."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DOCUMENT,
            message=f"{source}: {reason}",
        )
        self.source = source
        self.reason = reason
