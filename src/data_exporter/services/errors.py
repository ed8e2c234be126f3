from __future__ import annotations


class PolicyValidationError(ValueError):
    """Raised when policy input breaks a creation rule; `message` is user-facing."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
