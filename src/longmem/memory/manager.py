"""Memory manager for orchestrating recall, storage and auto-capture."""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from ..logging import JSONLLogger, get_logger
from .capture import CaptureGate
from .categories import detect_category, storage_category
from .embeddings import EmbeddingProvider
from .message_utils import parse_envelope_metadata, strip_memory_tags
from .models import EnvelopeMetadata, MemoryEntry, MemorySearchResult
from .store import MemoryStore

logger = logging.getLogger(__name__)

DEFAULT_IMPORTANCE = 0.7
DUPLICATE_THRESHOLD = 0.95

RECALL_MIN_SCORE = 0.1
AUTO_RECALL_LIMIT = 3
AUTO_RECALL_MIN_SCORE = 0.3
MIN_PROMPT_LENGTH = 5

FORGET_SEARCH_LIMIT = 5
FORGET_MIN_SCORE = 0.7
FORGET_AUTO_DELETE_SCORE = 0.9


@dataclass(frozen=True)
class StoreOutcome:
    """Result of an explicit store request.

    Exactly one of entry (newly stored) or duplicate (existing near-identical
    memory) is set.
    """

    entry: MemoryEntry | None = None
    duplicate: MemorySearchResult | None = None


@dataclass(frozen=True)
class ForgetOutcome:
    """Result of a forget request.

    Attributes:
        action: 'deleted', 'candidates' or 'not_found'.
        memory_id: Id of the deleted memory.
        text: Text of the deleted memory, when known.
        candidates: Possible matches when the query was ambiguous.
    """

    action: str
    memory_id: str | None = None
    text: str | None = None
    candidates: list[MemorySearchResult] = field(default_factory=list)


def extract_message_texts(messages: list[Any]) -> list[str]:
    """Collect text from user and assistant messages.

    Content may be a string or a list of blocks; only {"type": "text"}
    blocks are used. Other roles and malformed messages are skipped.
    """
    texts: list[str] = []
    for msg in messages:
        if not isinstance(msg, dict):
            continue
        if msg.get("role") not in ("user", "assistant"):
            continue

        content = msg.get("content")
        if isinstance(content, str):
            texts.append(content)
            continue

        if isinstance(content, list):
            for block in content:
                if (
                    isinstance(block, dict)
                    and block.get("type") == "text"
                    and isinstance(block.get("text"), str)
                ):
                    texts.append(block["text"])
    return texts


class MemoryManager:
    """Orchestrates memory operations: recall, storage and capture.

    This is the main interface for the memory system, coordinating
    between the embedding provider, the vector store and the capture gate.
    """

    def __init__(
        self,
        store: MemoryStore,
        embeddings: EmbeddingProvider,
        gate: CaptureGate | None = None,
        capture_limit: int = 3,
        event_logger: JSONLLogger | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            store: The MemoryStore for persistence.
            embeddings: Provider used to embed stored texts and queries.
            gate: Capture gate for auto-capture (all languages if None).
            capture_limit: Maximum memories stored per conversation.
            event_logger: JSONL event logger (global logger if None).
        """
        self.store = store
        self.embeddings = embeddings
        self.gate = gate or CaptureGate()
        self.capture_limit = capture_limit
        self.events = event_logger or get_logger()

    async def recall(
        self,
        query: str,
        limit: int = 5,
        min_score: float = RECALL_MIN_SCORE,
    ) -> list[MemorySearchResult]:
        """Search memories semantically related to a query."""
        vector = await self.embeddings.embed(query)
        return self.store.search(vector, limit, min_score)

    def format_for_prompt(self, results: list[MemorySearchResult]) -> str:
        """Format recalled memories as a block to prepend to the agent context.

        Returns:
            <relevant-memories> block, or empty string if no results.
        """
        if not results:
            return ""

        lines = "\n".join(f"- [{r.entry.category}] {r.entry.text}" for r in results)
        return (
            "<relevant-memories>\n"
            "The following memories may be relevant to this conversation:\n"
            f"{lines}\n"
            "</relevant-memories>"
        )

    async def build_context(self, prompt: str, chat_id: str | None = None) -> str | None:
        """Auto-recall: memories relevant to the live prompt.

        Failures are logged and yield None; recall never blocks a turn.
        """
        if not prompt or len(prompt) < MIN_PROMPT_LENGTH:
            return None

        start = time.perf_counter()
        try:
            results = await self.recall(prompt, AUTO_RECALL_LIMIT, AUTO_RECALL_MIN_SCORE)
        except Exception as e:
            logger.warning("recall failed: %s", e)
            self.events.log_hook_error("before_agent_start", str(e), chat_id=chat_id)
            return None

        if not results:
            return None

        logger.info("injecting %d memories into context", len(results))
        self.events.log_recall(
            len(results),
            chat_id=chat_id,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return self.format_for_prompt(results)

    async def remember(
        self,
        text: str,
        importance: float = DEFAULT_IMPORTANCE,
        category: str = "other",
        metadata: EnvelopeMetadata | None = None,
        source: str = "explicit",
    ) -> StoreOutcome:
        """Store text unless a near-identical memory already exists."""
        vector = await self.embeddings.embed(text)

        existing = self.store.search(vector, 1, DUPLICATE_THRESHOLD)
        if existing:
            return StoreOutcome(duplicate=existing[0])

        metadata = metadata or EnvelopeMetadata()
        entry = self.store.store(
            text=text,
            vector=vector,
            importance=importance,
            category=category,
            username=metadata.username,
            channel=metadata.channel,
            chat_id=metadata.chat_id,
        )
        self.events.log_store(entry.id, entry.category, source=source)
        return StoreOutcome(entry=entry)

    async def forget(
        self,
        memory_id: str | None = None,
        query: str | None = None,
    ) -> ForgetOutcome:
        """Delete a memory by id, or by query when the match is unambiguous.

        Raises:
            ValueError: If neither argument is given, or memory_id is not a UUID.
        """
        if memory_id:
            self.store.delete(memory_id)
            self.events.log_forget(memory_id)
            return ForgetOutcome(action="deleted", memory_id=memory_id)

        if not query:
            raise ValueError("Provide query or memoryId.")

        results = await self.recall(query, FORGET_SEARCH_LIMIT, FORGET_MIN_SCORE)
        if not results:
            return ForgetOutcome(action="not_found")

        if len(results) == 1 and results[0].score > FORGET_AUTO_DELETE_SCORE:
            entry = results[0].entry
            self.store.delete(entry.id)
            self.events.log_forget(entry.id)
            return ForgetOutcome(action="deleted", memory_id=entry.id, text=entry.text)

        return ForgetOutcome(action="candidates", candidates=results)

    def detect_category(self, text: str) -> str:
        """Storage category for text under the gate's language filter."""
        return detect_category(text, self.gate.languages)

    async def capture_from_conversation(
        self,
        messages: list[Any],
        chat_id: str | None = None,
    ) -> list[MemoryEntry]:
        """Store memorable statements from a finished conversation.

        Args:
            messages: The conversation messages to analyze.
            chat_id: Optional session identifier for event logs.

        Returns:
            Newly stored entries (at most capture_limit).
        """
        texts = extract_message_texts(messages)
        logger.debug("[agent_end] extracted %d texts", len(texts))

        skipped: Counter[str] = Counter()
        to_capture = []
        for raw in texts:
            decision = self.gate.evaluate(raw)
            if decision.accepted:
                to_capture.append((raw, decision))
            else:
                skipped[decision.reason] += 1

        stored: list[MemoryEntry] = []
        for raw, decision in to_capture[: self.capture_limit]:
            assert decision.match is not None
            # Envelope metadata must be read before it is stripped
            metadata = parse_envelope_metadata(strip_memory_tags(raw).strip())
            outcome = await self.remember(
                decision.text,
                importance=DEFAULT_IMPORTANCE,
                category=storage_category(decision.match.category),
                metadata=metadata,
                source="auto",
            )
            if outcome.entry is not None:
                stored.append(outcome.entry)
            else:
                skipped["duplicate"] += 1

        if stored:
            logger.info("auto-captured %d memories", len(stored))
        self.events.log_capture(
            len(stored), len(texts), chat_id=chat_id, skipped=dict(skipped)
        )
        return stored
