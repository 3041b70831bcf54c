"""
Configuration for the password generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .charsets import ALL_CLASSES, CharacterClass, coerce_class
from .errors import ValidationError, ValidationErrorKind

MIN_LENGTH = 4
MAX_LENGTH = 1024
DEFAULT_LENGTH = 16


@dataclass(frozen=True)
class GeneratorConfig:
    # Desired password length in characters, within [MIN_LENGTH, MAX_LENGTH].
    length: int = DEFAULT_LENGTH

    # Character classes a password may draw from.
    # An empty set means "all classes", never an error.
    classes: frozenset[CharacterClass] = field(default=ALL_CLASSES)

    def __post_init__(self) -> None:
        length = self.length
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValidationError(
                ValidationErrorKind.INVALID_LENGTH,
                f"invalid length: {length!r} (expected an integer)",
                value=length,
            )
        if length < MIN_LENGTH or length > MAX_LENGTH:
            raise ValidationError(
                ValidationErrorKind.INVALID_LENGTH,
                f"invalid length: {length} (must be between {MIN_LENGTH} and {MAX_LENGTH})",
                value=length,
            )

        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "classes", _normalize_classes(self.classes))

    @classmethod
    def create(
        cls,
        length: int = DEFAULT_LENGTH,
        classes: Iterable[CharacterClass | str] | None = None,
    ) -> "GeneratorConfig":
        """
        Validating constructor.

        Every call builds a fresh config; parameters not given here take
        their defaults, they are never carried over from an earlier config.
        """
        return cls(length=length, classes=classes)  # type: ignore[arg-type]


def _normalize_classes(classes: Iterable[CharacterClass | str] | None) -> frozenset[CharacterClass]:
    if classes is None:
        return ALL_CLASSES
    if isinstance(classes, (str, CharacterClass)):
        classes = [classes]
    normalized = frozenset(coerce_class(c) for c in classes)
    return normalized or ALL_CLASSES


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()
