"""Data models for the memory system."""

from dataclasses import dataclass
from typing import Any

MEMORY_CATEGORIES: tuple[str, ...] = ("preference", "fact", "decision", "entity", "other")


@dataclass(frozen=True)
class MemoryEntry:
    """A memory stored in the vector store.

    Attributes:
        id: UUID assigned by the store.
        text: The remembered text.
        vector: Embedding of text.
        importance: Importance score in [0, 1].
        category: One of MEMORY_CATEGORIES.
        created_at: Creation time in milliseconds since the epoch.
        username: Sender handle or display name, when known.
        channel: Originating channel (e.g. 'telegram'), when known.
        chat_id: Originating chat id, when known.
    """

    id: str
    text: str
    vector: tuple[float, ...]
    importance: float
    category: str
    created_at: int
    username: str | None = None
    channel: str | None = None
    chat_id: str | None = None

    def to_dict(self, include_vector: bool = False) -> dict[str, Any]:
        """Serialize for tool details and CLI output."""
        data: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "category": self.category,
            "importance": self.importance,
            "created_at": self.created_at,
            "username": self.username,
            "channel": self.channel,
            "chat_id": self.chat_id,
        }
        if include_vector:
            data["vector"] = list(self.vector)
        return data


@dataclass(frozen=True)
class MemorySearchResult:
    """A search hit with its similarity score in (0, 1]."""

    entry: MemoryEntry
    score: float


@dataclass(frozen=True)
class EnvelopeMetadata:
    """Sender metadata parsed from a message envelope header."""

    channel: str | None = None
    username: str | None = None
    chat_id: str | None = None
