"""
Character classes and their fixed character sets.

The four sets are disjoint and immutable for the lifetime of the process.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .errors import ValidationError, ValidationErrorKind


class CharacterClass(Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGITS = "digits"
    SPECIAL = "special"


# Membership is always tested in this order.
CLASS_ORDER: tuple[CharacterClass, ...] = (
    CharacterClass.UPPER,
    CharacterClass.LOWER,
    CharacterClass.DIGITS,
    CharacterClass.SPECIAL,
)

ALL_CLASSES: frozenset[CharacterClass] = frozenset(CLASS_ORDER)

CHARACTER_SETS: Mapping[CharacterClass, str] = MappingProxyType(
    {
        CharacterClass.UPPER: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        CharacterClass.LOWER: "abcdefghijklmnopqrstuvwxyz",
        CharacterClass.DIGITS: "0123456789",
        CharacterClass.SPECIAL: "!#$%@=^*+-",
    }
)

_MEMBERS: Mapping[CharacterClass, frozenset[str]] = MappingProxyType(
    {cls: frozenset(chars) for cls, chars in CHARACTER_SETS.items()}
)


def coerce_class(value: CharacterClass | str) -> CharacterClass:
    """
    Accept a CharacterClass, its value ("digits") or its name ("DIGITS").
    """
    if isinstance(value, CharacterClass):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for cls in CLASS_ORDER:
            if cls.value == key:
                return cls
    raise ValidationError(
        ValidationErrorKind.INVALID_CLASS,
        f"unknown character class: {value!r}",
        value=value,
    )


def class_of(char: str, classes: frozenset[CharacterClass] = ALL_CLASSES) -> CharacterClass | None:
    """Return the enabled class `char` belongs to, or None."""
    for cls in CLASS_ORDER:
        if cls in classes and char in _MEMBERS[cls]:
            return cls
    return None


def alphabet_for(classes: frozenset[CharacterClass]) -> str:
    """Concatenate the character sets of `classes` in check order."""
    return "".join(CHARACTER_SETS[cls] for cls in CLASS_ORDER if cls in classes)
