"""
Entropy sources: providers of random bytes for the password generator.

A source is a scoped resource. Open it (or enter it with ``with``), pull
as many bytes as needed with ``read``, and close it. ``iter_blocks`` turns
an open source into a lazy, unbounded stream of byte blocks.
"""

from __future__ import annotations

import hashlib
import logging
import os
from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, Iterator, List, Optional

from .errors import EntropySourceError

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 64

# Raw quantum bits gathered per SHA-256 mixing step.
QUANTUM_BITS_PER_DIGEST = 256


class EntropySource(ABC):
    """Base class for entropy sources."""

    def __init__(self) -> None:
        self._opened = False

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def is_open(self) -> bool:
        return self._opened

    def open(self) -> None:
        self._opened = True
        logger.debug("opened entropy source %s", self.name)

    def close(self) -> None:
        if self._opened:
            self._opened = False
            logger.debug("closed entropy source %s", self.name)

    def read(self, size: int) -> bytes:
        """Return `size` random bytes."""
        if not self._opened:
            raise EntropySourceError(f"entropy source {self.name} is not open")
        return self._read(size)

    @abstractmethod
    def _read(self, size: int) -> bytes:
        ...

    def __enter__(self) -> "EntropySource":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name}>"


EntropyFactory = Callable[[], EntropySource]


class SystemEntropySource(EntropySource):
    """The operating system CSPRNG via ``os.urandom``."""

    def _read(self, size: int) -> bytes:
        return os.urandom(size)


class DeviceEntropySource(EntropySource):
    """
    Reads from a random device file, ``/dev/urandom`` by default.

    The file handle is held only between ``open`` and ``close``.
    """

    def __init__(self, path: str = "/dev/urandom") -> None:
        super().__init__()
        self.path = path
        self._fh: Optional[BinaryIO] = None

    @property
    def name(self) -> str:
        return f"device:{self.path}"

    def open(self) -> None:
        try:
            self._fh = open(self.path, "rb", buffering=0)
        except OSError as exc:
            raise EntropySourceError(f"cannot open {self.path}: {exc}") from exc
        super().open()

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None
        super().close()

    def _read(self, size: int) -> bytes:
        assert self._fh is not None
        return self._fh.read(size)


class QuantumEntropySource(EntropySource):
    """
    Random bytes from simulated qubit measurements.

    Each refill runs the quantum circuit until at least 256 raw bits are
    collected, then mixes them with SHA-256 ``entropy_rounds`` times.
    With ``entropy_rounds=0`` the packed raw bits are used directly.
    """

    def __init__(self, num_qubits: int = 16, entropy_rounds: int = 1) -> None:
        super().__init__()
        if entropy_rounds < 0:
            raise ValueError(f"entropy_rounds must be >= 0, got {entropy_rounds}")
        self.num_qubits = num_qubits
        self.entropy_rounds = entropy_rounds
        self._engine = None
        self._buffer = bytearray()

    @property
    def name(self) -> str:
        return f"quantum:{self.num_qubits}q"

    def open(self) -> None:
        # Imported lazily so the simulator is only loaded when used.
        from .quantum_engine import QuantumEngine

        self._engine = QuantumEngine(self.num_qubits)
        self._buffer.clear()
        super().open()

    def close(self) -> None:
        self._engine = None
        self._buffer.clear()
        super().close()

    def _read(self, size: int) -> bytes:
        while len(self._buffer) < size:
            self._buffer.extend(self._refill())
        out = bytes(self._buffer[:size])
        del self._buffer[:size]
        return out

    def _refill(self) -> bytes:
        assert self._engine is not None
        bits: List[int] = []
        while len(bits) < QUANTUM_BITS_PER_DIGEST:
            bits.extend(self._engine.get_raw_bits())
        return amplify_entropy(bits_to_bytes(bits), self.entropy_rounds)


def iter_blocks(source: EntropySource, block_size: int = DEFAULT_BLOCK_SIZE) -> Iterator[bytes]:
    """
    Lazily pull blocks of `block_size` bytes from an open source, forever.

    The stream is not restartable; bytes already yielded are never replayed.
    """
    if block_size < 1:
        raise ValueError(f"block_size must be positive, got {block_size}")
    while True:
        block = source.read(block_size)
        if not block:
            raise EntropySourceError(f"entropy source {source.name} returned no data")
        logger.debug("pulled %d bytes from %s", len(block), source.name)
        yield block


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def amplify_entropy(data: bytes, rounds: int = 1) -> bytes:
    """
    Apply SHA-256 `rounds` times to mix the input.

    The result is always a 32-byte digest unless `rounds` is 0, in which
    case `data` is returned unchanged.
    """
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data
