"""Error types for flowpaste.

Malformed HTML or CSS never raises: the compilers degrade to partial output.
These exceptions cover programming-contract violations only.
"""

from __future__ import annotations


class FlowpasteError(Exception):
    """Base error for all flowpaste errors."""


class ContractError(FlowpasteError, ValueError):
    """Raised when a caller passes an argument the compilers cannot accept."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        self.argument = argument
        super().__init__(message)


def require_text(value: object, argument: str) -> str:
    """Return *value* if it is a string, otherwise raise ContractError."""
    if value is None:
        raise ContractError(f"{argument} must not be None", argument=argument)
    if not isinstance(value, str):
        raise ContractError(
            f"{argument} must be a string, got {type(value).__name__}",
            argument=argument,
        )
    return value
