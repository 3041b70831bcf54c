"""
Random password and PIN generator package.
"""

from .charsets import ALL_CLASSES, CHARACTER_SETS, CLASS_ORDER, CharacterClass
from .config import DEFAULT_CONFIG, MAX_LENGTH, MIN_LENGTH, GeneratorConfig
from .entropy import (
    DeviceEntropySource,
    EntropySource,
    QuantumEntropySource,
    SystemEntropySource,
)
from .errors import EntropySourceError, PassgenError, ValidationError, ValidationErrorKind
from .generator import (
    GenerationMeta,
    PasswordGenerator,
    create_generator,
    generate,
    generate_password,
    generate_password_with_meta,
)

__all__ = [
    "ALL_CLASSES",
    "CHARACTER_SETS",
    "CLASS_ORDER",
    "CharacterClass",
    "DEFAULT_CONFIG",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "GeneratorConfig",
    "DeviceEntropySource",
    "EntropySource",
    "QuantumEntropySource",
    "SystemEntropySource",
    "EntropySourceError",
    "PassgenError",
    "ValidationError",
    "ValidationErrorKind",
    "GenerationMeta",
    "PasswordGenerator",
    "create_generator",
    "generate",
    "generate_password",
    "generate_password_with_meta",
]
