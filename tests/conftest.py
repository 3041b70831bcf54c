import itertools

import pytest

from passgen.entropy import EntropySource


class ScriptedEntropySource(EntropySource):
    """Replays `data` cyclically and records how it was used."""

    def __init__(self, data: bytes) -> None:
        super().__init__()
        self._stream = itertools.cycle(data)
        self.open_calls = 0
        self.close_calls = 0
        self.reads: list[int] = []

    def open(self) -> None:
        self.open_calls += 1
        super().open()

    def close(self) -> None:
        self.close_calls += 1
        super().close()

    def _read(self, size: int) -> bytes:
        self.reads.append(size)
        return bytes(next(self._stream) for _ in range(size))


class EmptyEntropySource(EntropySource):
    def __init__(self) -> None:
        super().__init__()
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()

    def _read(self, size: int) -> bytes:
        return b""


@pytest.fixture
def scripted():
    """Factory fixture: scripted(data) -> (entropy_factory, created_sources)."""

    def make(data: bytes):
        created: list[ScriptedEntropySource] = []

        def factory() -> ScriptedEntropySource:
            source = ScriptedEntropySource(data)
            created.append(source)
            return source

        return factory, created

    return make
