"""Memory plugin: wires the memory system into an agent host.

The host calls:
- register(registry) once, to expose the memory tools
- before_agent_start(prompt) before each run, to get context to prepend
- agent_end(messages, success) after each run, to auto-capture memories
"""

from __future__ import annotations

import logging
from typing import Any

from .config import MemoryConfig
from .logging import JSONLLogger, get_logger
from .memory import (
    CaptureGate,
    EmbeddingProvider,
    ForgetTool,
    MemoryManager,
    MemoryStore,
    RecallTool,
    StoreTool,
    create_embedding_provider,
)
from .tools import ToolRegistry

logger = logging.getLogger(__name__)

PLUGIN_ID = "longmem"


class MemoryPlugin:
    """Long-term memory with auto-recall and auto-capture hooks."""

    def __init__(
        self,
        config: MemoryConfig,
        embeddings: EmbeddingProvider | None = None,
        store: MemoryStore | None = None,
        event_logger: JSONLLogger | None = None,
    ) -> None:
        """Initialize the plugin from config.

        Args:
            config: Parsed memory configuration.
            embeddings: Provider override (built from config if None).
            store: Store override (built from config if None).
            event_logger: JSONL event logger (global logger if None).
        """
        self.config = config
        self.events = event_logger or get_logger()
        self.embeddings = embeddings or create_embedding_provider(config.embedding)
        self.store = store or MemoryStore(config.db_path, config.embedding.dimensions)
        self.store.init_db()
        self.gate = CaptureGate(config.language)
        self.manager = MemoryManager(
            self.store,
            self.embeddings,
            gate=self.gate,
            capture_limit=config.capture_limit,
            event_logger=self.events,
        )

        logger.info(
            "plugin registered (db: %s, model: %s)",
            config.db_path,
            config.embedding.model,
        )

    def register(self, registry: ToolRegistry) -> None:
        """Register the memory tools with the host's registry."""
        registry.register(RecallTool(self.manager))
        registry.register(StoreTool(self.manager))
        registry.register(ForgetTool(self.manager))

    async def before_agent_start(self, prompt: str, chat_id: str | None = None) -> str | None:
        """Hook called before the agent runs.

        Returns:
            A <relevant-memories> block to prepend to the context, or None.
        """
        if not self.config.auto_recall:
            return None

        try:
            return await self.manager.build_context(prompt, chat_id=chat_id)
        except Exception as e:
            logger.warning("recall failed: %s", e)
            self.events.log_hook_error("before_agent_start", str(e), chat_id=chat_id)
            return None

    async def agent_end(
        self,
        messages: list[Any],
        success: bool = True,
        chat_id: str | None = None,
    ) -> int:
        """Hook called when the agent finishes a run.

        Capture is best-effort: failures are logged and never raised.

        Returns:
            Number of memories stored.
        """
        if not self.config.auto_capture or not success or not messages:
            return 0

        try:
            stored = await self.manager.capture_from_conversation(messages, chat_id=chat_id)
        except Exception as e:
            logger.warning("capture failed: %s", e)
            self.events.log_hook_error("agent_end", str(e), chat_id=chat_id)
            return 0

        return len(stored)

    def start(self) -> None:
        logger.info(
            "initialized (db: %s, provider: %s, model: %s)",
            self.config.db_path,
            self.config.embedding.provider,
            self.config.embedding.model,
        )
        self.events.log("plugin_start", plugin=PLUGIN_ID)

    def stop(self) -> None:
        self.store.close()
        logger.info("stopped")
        self.events.log("plugin_stop", plugin=PLUGIN_ID)
