"""
Mapping logic: turn a stream of random bytes into a password by rejection.

Each byte is read as a character code. Codes outside the printable ASCII
band, and printable characters outside every enabled class, are
discarded. Accepted characters are appended until the password reaches
the requested length, stopping mid-block if needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .charsets import CharacterClass, class_of
from .errors import EntropySourceError

PRINTABLE_MIN = 33
PRINTABLE_MAX = 126


@dataclass
class MappingResult:
    password: str
    # Bytes actually examined; bytes left over in the last block are not counted.
    bytes_drawn: int
    bytes_rejected: int
    blocks_drawn: int


def candidate_char(byte: int) -> str | None:
    """Return the printable ASCII character for `byte`, or None."""
    if PRINTABLE_MIN <= byte <= PRINTABLE_MAX:
        return chr(byte)
    return None


def bytes_to_password(
    blocks: Iterable[bytes],
    length: int,
    classes: frozenset[CharacterClass],
) -> MappingResult:
    """
    Filter `blocks` until `length` characters from `classes` are accepted.

    `blocks` must be able to supply enough bytes; an unbounded stream such
    as ``entropy.iter_blocks`` terminates with probability 1.
    """
    password_chars: list[str] = []
    drawn = 0
    rejected = 0
    block_count = 0

    if length <= 0:
        return MappingResult("", 0, 0, 0)

    for block in blocks:
        block_count += 1
        for byte in block:
            drawn += 1
            char = candidate_char(byte)
            if char is None or class_of(char, classes) is None:
                rejected += 1
                continue

            password_chars.append(char)
            if len(password_chars) == length:
                return MappingResult("".join(password_chars), drawn, rejected, block_count)

    raise EntropySourceError(
        f"byte stream ended after {len(password_chars)} of {length} characters"
    )
