"""JSONL logging for memory events."""

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class LogEntry:
    """A single log entry."""

    timestamp: str
    event: str
    chat_id: str | None = None
    count: int | None = None
    category: str | None = None
    memory_id: str | None = None
    duration_ms: float | None = None
    error: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, excluding None values."""
        data = asdict(self)
        return {k: v for k, v in data.items() if v is not None and v != {} and v != []}


class JSONLLogger:
    """Logger that writes structured logs in JSONL format."""

    def __init__(
        self,
        log_dir: str | Path | None = None,
        filename: str = "logs.jsonl",
        max_size_mb: float = 10.0,
    ) -> None:
        if log_dir is None:
            log_dir = Path.home() / ".longmem" / "logs"
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.filename = filename
        self.max_size_bytes = int(max_size_mb * 1024 * 1024)

    @property
    def log_path(self) -> Path:
        """Current log file path."""
        return self.log_dir / self.filename

    def _rotate_if_needed(self) -> None:
        """Rotate log file if it exceeds max size."""
        if not self.log_path.exists():
            return

        if self.log_path.stat().st_size >= self.max_size_bytes:
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            rotated_name = f"{self.log_path.stem}_{timestamp}.jsonl"
            self.log_path.rename(self.log_dir / rotated_name)

    def _write(self, entry: LogEntry) -> None:
        """Write a log entry to the file.

        Event logging is best-effort: an unwritable log is reported through
        the standard logger and the event is dropped.
        """
        try:
            self._rotate_if_needed()
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry.to_dict(), ensure_ascii=False) + "\n")
        except OSError as e:
            logger.warning("could not write %s event to %s: %s", entry.event, self.log_path, e)

    def log(
        self,
        event: str,
        *,
        chat_id: str | None = None,
        count: int | None = None,
        category: str | None = None,
        memory_id: str | None = None,
        duration_ms: float | None = None,
        error: str | None = None,
        **extra: Any,
    ) -> None:
        """Log an event."""
        entry = LogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            event=event,
            chat_id=chat_id,
            count=count,
            category=category,
            memory_id=memory_id,
            duration_ms=duration_ms,
            error=error,
            extra=extra if extra else {},
        )
        self._write(entry)

    def log_recall(
        self,
        count: int,
        *,
        chat_id: str | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Log memories injected into the agent context."""
        self.log("memory_recall", chat_id=chat_id, count=count, duration_ms=duration_ms)

    def log_capture(
        self,
        stored: int,
        candidates: int,
        *,
        chat_id: str | None = None,
        skipped: dict[str, int] | None = None,
    ) -> None:
        """Log the outcome of an auto-capture pass."""
        self.log(
            "memory_capture",
            chat_id=chat_id,
            count=stored,
            candidates=candidates,
            **({"skipped": skipped} if skipped else {}),
        )

    def log_store(self, memory_id: str, category: str, *, source: str) -> None:
        """Log a stored memory ('auto' or 'explicit' source)."""
        self.log("memory_store", memory_id=memory_id, category=category, source=source)

    def log_forget(self, memory_id: str) -> None:
        """Log a deleted memory."""
        self.log("memory_forget", memory_id=memory_id)

    def log_hook_error(self, hook: str, error: str, *, chat_id: str | None = None) -> None:
        """Log a swallowed failure in a lifecycle hook."""
        self.log("hook_error", chat_id=chat_id, error=error, hook=hook)


# Global logger instance
_logger: JSONLLogger | None = None


def get_logger() -> JSONLLogger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = JSONLLogger()
    return _logger


def configure_logger(log_dir: str | Path | None = None, max_size_mb: float = 10.0) -> JSONLLogger:
    """Configure and return the global logger."""
    global _logger
    _logger = JSONLLogger(log_dir=log_dir, max_size_mb=max_size_mb)
    return _logger
