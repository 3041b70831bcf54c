"""
Password generator and high-level generation functions.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from .charsets import CharacterClass, alphabet_for
from .config import DEFAULT_CONFIG, DEFAULT_LENGTH, GeneratorConfig
from .entropy import DEFAULT_BLOCK_SIZE, EntropyFactory, SystemEntropySource, iter_blocks
from .mapping import bytes_to_password

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """

    password: str

    # Byte accounting for the rejection loop
    bytes_drawn: int
    bytes_rejected: int
    blocks_drawn: int

    # Strength / config metadata
    entropy_bits: float
    source_name: str
    config: GeneratorConfig


class PasswordGenerator:
    """
    Produces passwords for one immutable config.

    The generator keeps no random state: every call builds a fresh entropy
    source from `entropy_factory`, opens it, and closes it before returning.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        entropy_factory: EntropyFactory | None = None,
        block_size: int = DEFAULT_BLOCK_SIZE,
    ) -> None:
        if isinstance(block_size, bool) or not isinstance(block_size, int) or block_size < 1:
            raise ValueError(f"block_size must be a positive integer, got {block_size!r}")
        self._config = config or DEFAULT_CONFIG
        self._entropy_factory = entropy_factory or SystemEntropySource
        self._block_size = block_size

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def block_size(self) -> int:
        return self._block_size

    def generate_with_meta(self) -> GenerationMeta:
        cfg = self._config
        source = self._entropy_factory()

        with source:
            result = bytes_to_password(
                iter_blocks(source, self._block_size), cfg.length, cfg.classes
            )

        # Accepted bytes are uniform over the union of enabled sets.
        pool = len(alphabet_for(cfg.classes))
        entropy_bits = len(result.password) * math.log2(pool)

        logger.debug(
            "generated %d-char password from %s (classes=%s, drawn=%d, rejected=%d, blocks=%d)",
            cfg.length,
            source.name,
            sorted(c.value for c in cfg.classes),
            result.bytes_drawn,
            result.bytes_rejected,
            result.blocks_drawn,
        )

        return GenerationMeta(
            password=result.password,
            bytes_drawn=result.bytes_drawn,
            bytes_rejected=result.bytes_rejected,
            blocks_drawn=result.blocks_drawn,
            entropy_bits=entropy_bits,
            source_name=source.name,
            config=cfg,
        )

    def generate(self) -> str:
        """Return a new random password of exactly `config.length` characters."""
        return self.generate_with_meta().password

    def __repr__(self) -> str:
        classes = ",".join(sorted(c.value for c in self._config.classes))
        return f"PasswordGenerator(length={self._config.length}, classes={{{classes}}})"


def create_generator(
    length: int = DEFAULT_LENGTH,
    classes: Iterable[CharacterClass | str] | None = None,
    entropy_factory: EntropyFactory | None = None,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> PasswordGenerator:
    """
    Build a generator from scratch.

    Raises ValidationError when `length` is outside [4, 1024]. An empty or
    missing `classes` selects all four character classes.
    """
    config = GeneratorConfig.create(length, classes)
    return PasswordGenerator(config, entropy_factory=entropy_factory, block_size=block_size)


def generate(generator: PasswordGenerator) -> str:
    return generator.generate()


def generate_password_with_meta(
    config: GeneratorConfig | None = None,
    entropy_factory: EntropyFactory | None = None,
) -> GenerationMeta:
    return PasswordGenerator(config, entropy_factory=entropy_factory).generate_with_meta()


def generate_password(
    config: GeneratorConfig | None = None,
    entropy_factory: EntropyFactory | None = None,
) -> str:
    """
    High-level function:
    - Open a fresh entropy source.
    - Filter its bytes into password characters.
    - Close the source and return the password.
    """
    return generate_password_with_meta(config, entropy_factory).password
