"""Shared fixtures for memory tests."""

from pathlib import Path

import pytest

from longmem.memory import MemoryStore

DIM = 8


class FakeEmbeddings:
    """Deterministic embeddings: each new text gets the next one-hot vector.

    Distinct texts are sqrt(2) apart (score ~0.41); identical texts score 1.0.
    """

    def __init__(self, vectors: dict[str, list[float]] | None = None) -> None:
        self.vectors = dict(vectors or {})
        self.calls: list[str] = []
        self._next = 0

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if text not in self.vectors:
            vector = [0.0] * DIM
            vector[self._next % DIM] = 1.0
            self._next += 1
            self.vectors[text] = vector
        return list(self.vectors[text])


class FailingEmbeddings:
    """Provider whose every call fails."""

    async def embed(self, text: str) -> list[float]:
        raise RuntimeError("embedding backend down")


@pytest.fixture
def store(tmp_path: Path) -> MemoryStore:
    """Create a MemoryStore with a temporary database."""
    store = MemoryStore(tmp_path / "test_memory.db", DIM)
    store.init_db()
    yield store
    store.close()


@pytest.fixture
def embeddings() -> FakeEmbeddings:
    return FakeEmbeddings()


@pytest.fixture
def failing_embeddings() -> FailingEmbeddings:
    return FailingEmbeddings()
