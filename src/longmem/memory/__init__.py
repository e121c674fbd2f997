"""Memory module for vector-backed long-term memory."""

from .capture import CaptureDecision, CaptureGate
from .categories import TRIGGER_TO_CATEGORY, detect_category, storage_category
from .embeddings import (
    EmbeddingError,
    EmbeddingProvider,
    LocalEmbeddings,
    OpenAIEmbeddings,
    TimedEmbeddings,
    create_embedding_provider,
)
from .manager import ForgetOutcome, MemoryManager, StoreOutcome
from .models import MEMORY_CATEGORIES, EnvelopeMetadata, MemoryEntry, MemorySearchResult
from .store import MemoryStore
from .tools import ForgetTool, RecallTool, StoreTool

__all__ = [
    "CaptureDecision",
    "CaptureGate",
    "EmbeddingError",
    "EmbeddingProvider",
    "EnvelopeMetadata",
    "ForgetOutcome",
    "ForgetTool",
    "LocalEmbeddings",
    "MEMORY_CATEGORIES",
    "MemoryEntry",
    "MemoryManager",
    "MemorySearchResult",
    "MemoryStore",
    "OpenAIEmbeddings",
    "RecallTool",
    "StoreOutcome",
    "StoreTool",
    "TRIGGER_TO_CATEGORY",
    "TimedEmbeddings",
    "create_embedding_provider",
    "detect_category",
    "storage_category",
]
