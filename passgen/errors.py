"""
Exceptions raised by the password generator.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class PassgenError(Exception):
    pass


class ValidationErrorKind(str, Enum):
    INVALID_LENGTH = "invalid_length"
    INVALID_CLASS = "invalid_class"


class ValidationError(PassgenError, ValueError):
    """
    Raised when a generator is constructed with invalid parameters.

    `kind` tells callers which parameter was rejected; `value` is the
    offending input.
    """

    def __init__(self, kind: ValidationErrorKind, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value


class EntropySourceError(PassgenError, RuntimeError):
    """The entropy source could not supply bytes as promised."""
