# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Exception hierarchy for Conviction.

The math in :mod:`conviction.core` signals degenerate input numerically
(``0``, ``nan``, ``inf``) rather than by raising. These exceptions cover
the surrounding layer: settings, caller-side validation and checkpoint
verification.
"""

from __future__ import annotations

from typing import Any


class ConvictionException(Exception):  # noqa: N818
    """Base exception for all Conviction errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ConvictionException):
    """Exception for invalid caller-supplied values.

    Raised when:
    - A stake event record is missing required fields
    - A field cannot be coerced to its numeric type
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConfigException(ConvictionException):
    """Exception for configuration errors.

    Raised when environment settings fail validation, e.g. an alpha
    outside ``(0, 1)``.
    """

    def __init__(self, message: str, missing_vars: list[str] | None = None):
        details = {}
        if missing_vars:
            details["missing_vars"] = missing_vars
        super().__init__(message, details)
        self.missing_vars = missing_vars or []


class ConvictionMismatchError(ConvictionException):
    """Embedded ledger conviction disagrees with the replayed value."""

    def __init__(self, embedded: float, replayed: float):
        message = f"Conviction mismatch: ledger has {embedded!r}, replay gives {replayed!r}"
        super().__init__(message, {"embedded": embedded, "replayed": replayed})
        self.embedded = embedded
        self.replayed = replayed
