"""Error taxonomy surfaced to the user as status messages."""

from __future__ import annotations


class PizzeriaError(Exception):
    """
    Base class for user-facing failures.

    These are reported in the status line and abort the current operation;
    they are never meant to reach the process level.
    """

    code = "pizzeria_error"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class ValidationError(PizzeriaError):
    """Raised for malformed, empty or out-of-range input values."""

    code = "validation"


class SelectionError(PizzeriaError):
    """Raised when a position does not match any catalog or order entry."""

    code = "selection"


class PreconditionError(PizzeriaError):
    """Raised when a required catalog is empty before an operation starts."""

    code = "precondition"


class OrderClosedError(PizzeriaError):
    """Raised when adding items to an order that is already completed."""

    code = "order_closed"
