"""Memory tools exposed to the agent."""

from typing import Any

from ..tools.base import Tool, ToolResult
from .manager import DEFAULT_IMPORTANCE, MemoryManager
from .models import MEMORY_CATEGORIES


class RecallTool(Tool):
    """Tool for searching long-term memories."""

    def __init__(self, manager: MemoryManager) -> None:
        self.manager = manager

    @property
    def name(self) -> str:
        return "memory_recall"

    @property
    def description(self) -> str:
        return (
            "Search through long-term memories. Use when you need context about "
            "user preferences, past decisions, or previously discussed topics."
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "limit": {"type": "integer", "description": "Max results (default: 5)"},
            },
            "required": ["query"],
        }

    async def execute(self, **kwargs: Any) -> ToolResult:
        """Search memories.

        Args:
            query: Search query.
            limit: Maximum number of results.

        Returns:
            ToolResult listing matches with their similarity.
        """
        query = kwargs.get("query", "")
        limit = kwargs.get("limit") or 5

        if not query:
            return ToolResult(success=False, output="", error="'query' is required")

        results = await self.manager.recall(query, limit=limit)

        if not results:
            return ToolResult(
                success=True,
                output="No relevant memories found.",
                metadata={"count": 0},
            )

        lines = "\n".join(
            f"{i}. [{r.entry.category}] {r.entry.text} ({r.score * 100:.0f}%)"
            for i, r in enumerate(results, start=1)
        )
        memories = [
            {
                "id": r.entry.id,
                "text": r.entry.text,
                "category": r.entry.category,
                "importance": r.entry.importance,
                "score": r.score,
            }
            for r in results
        ]
        return ToolResult(
            success=True,
            output=f"Found {len(results)} memories:\n\n{lines}",
            metadata={"count": len(results), "memories": memories},
        )


class StoreTool(Tool):
    """Tool for saving information to long-term memory."""

    def __init__(self, manager: MemoryManager) -> None:
        self.manager = manager

    @property
    def name(self) -> str:
        return "memory_store"

    @property
    def description(self) -> str:
        return (
            "Save important information in long-term memory. "
            "Use for preferences, facts, decisions."
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "text": {"type": "string", "description": "Information to remember"},
                "importance": {
                    "type": "number",
                    "description": "Importance 0-1 (default: 0.7)",
                },
                "category": {
                    "type": "string",
                    "enum": list(MEMORY_CATEGORIES),
                    "description": "Memory category (default: other)",
                },
            },
            "required": ["text"],
        }

    async def execute(self, **kwargs: Any) -> ToolResult:
        """Store text unless a near-duplicate exists.

        Args:
            text: Information to remember.
            importance: Importance score in [0, 1].
            category: One of MEMORY_CATEGORIES.
        """
        text = kwargs.get("text", "")
        importance = kwargs.get("importance", DEFAULT_IMPORTANCE)
        category = kwargs.get("category") or "other"

        if not text:
            return ToolResult(success=False, output="", error="'text' is required")

        if category not in MEMORY_CATEGORIES:
            return ToolResult(
                success=False,
                output="",
                error=f"Unknown category '{category}'",
            )

        if not 0 <= importance <= 1:
            return ToolResult(
                success=False,
                output="",
                error="'importance' must be between 0 and 1",
            )

        outcome = await self.manager.remember(text, importance=importance, category=category)

        if outcome.duplicate is not None:
            existing = outcome.duplicate.entry
            return ToolResult(
                success=True,
                output=f'Similar memory already exists: "{existing.text}"',
                metadata={
                    "action": "duplicate",
                    "existingId": existing.id,
                    "existingText": existing.text,
                },
            )

        assert outcome.entry is not None
        preview = text if len(text) <= 100 else text[:100] + "..."
        return ToolResult(
            success=True,
            output=f'Stored: "{preview}"',
            metadata={"action": "created", "id": outcome.entry.id},
        )


class ForgetTool(Tool):
    """Tool for deleting memories."""

    def __init__(self, manager: MemoryManager) -> None:
        self.manager = manager

    @property
    def name(self) -> str:
        return "memory_forget"

    @property
    def description(self) -> str:
        return "Delete specific memories. GDPR-compliant."

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search to find memory"},
                "memoryId": {"type": "string", "description": "Specific memory ID"},
            },
            "required": [],
        }

    async def execute(self, **kwargs: Any) -> ToolResult:
        """Forget a memory by id, or by query.

        Args:
            query: Search text to locate the memory.
            memoryId: Exact id of the memory.
        """
        query = kwargs.get("query")
        memory_id = kwargs.get("memoryId")

        if not query and not memory_id:
            return ToolResult(
                success=False,
                output="",
                error="Provide query or memoryId.",
                metadata={"error": "missing_param"},
            )

        outcome = await self.manager.forget(memory_id=memory_id, query=query)

        if outcome.action == "deleted":
            if memory_id:
                output = f"Memory {outcome.memory_id} forgotten."
            else:
                output = f'Forgotten: "{outcome.text}"'
            return ToolResult(
                success=True,
                output=output,
                metadata={"action": "deleted", "id": outcome.memory_id},
            )

        if outcome.action == "not_found":
            return ToolResult(
                success=True,
                output="No matching memories found.",
                metadata={"found": 0},
            )

        listing = "\n".join(
            f"- [{r.entry.id[:8]}] {r.entry.text[:60]}..." for r in outcome.candidates
        )
        candidates = [
            {
                "id": r.entry.id,
                "text": r.entry.text,
                "category": r.entry.category,
                "score": r.score,
            }
            for r in outcome.candidates
        ]
        return ToolResult(
            success=True,
            output=f"Found {len(outcome.candidates)} candidates. Specify memoryId:\n{listing}",
            metadata={"action": "candidates", "candidates": candidates},
        )
