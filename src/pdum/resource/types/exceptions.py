"""Custom exceptions for pdum.resource types."""

from __future__ import annotations

from typing import Optional

from googleapiclient.errors import HttpError


class OperationError(RuntimeError):
    """Raised when a long-running operation finishes with an error."""

    def __init__(self, name: str, error: Optional[dict] = None) -> None:
        self.name = name
        self.error = error or {}
        super().__init__(
            f"Operation {name} failed with error code {self.error.get('code', 'Unknown')}: "
            f"{self.error.get('message', 'Unknown error')}"
        )


class OperationTimeoutError(TimeoutError):
    """Raised when an operation does not finish within the allotted time."""

    def __init__(self, name: str, timeout: float) -> None:
        self.name = name
        self.timeout = timeout
        super().__init__(f"Operation timed out after {timeout} seconds. Operation name: {name}")


__all__ = ["HttpError", "OperationError", "OperationTimeoutError"]
