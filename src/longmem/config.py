"""Memory plugin configuration.

Loads configuration from ~/.longmem/config.json. The file holds either the
memory settings at its root or under a "memory" key:

```json
{
  "memory": {
    "embedding": {"provider": "openai", "apiKey": "${OPENAI_API_KEY}"},
    "dbPath": "~/.longmem/memory.db",
    "autoCapture": true,
    "autoRecall": true,
    "language": ["ru", "en"]
  }
}
```
"""

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .memory.embeddings import (
    DEFAULT_LOCAL_MODEL,
    DEFAULT_OPENAI_BASE_URL,
    DEFAULT_OPENAI_MODEL,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".longmem" / "config.json"
DEFAULT_DB_PATH = Path.home() / ".longmem" / "memory.db"
DEFAULT_CAPTURE_LIMIT = 3

EMBEDDING_DIMENSIONS: dict[str, int] = {
    # OpenAI models
    "text-embedding-3-small": 1536,
    "text-embedding-3-large": 3072,
    # Local sentence-transformers models
    "all-MiniLM-L6-v2": 384,
    "all-MiniLM-L12-v2": 384,
    "paraphrase-multilingual-MiniLM-L12-v2": 384,
}


class ConfigError(ValueError):
    """Raised for invalid memory configuration."""


def vector_dims_for_model(model: str) -> int:
    """Embedding dimension for a supported model.

    Raises:
        ConfigError: If the model is not in EMBEDDING_DIMENSIONS.
    """
    name = model.removeprefix("sentence-transformers/")
    dims = EMBEDDING_DIMENSIONS.get(name)
    if not dims:
        raise ConfigError(f"Unsupported embedding model: {model}")
    return dims


@dataclass
class EmbeddingConfig:
    """Embedding provider settings.

    Attributes:
        provider: 'openai' (remote API) or 'local' (sentence-transformers).
        model: Model name; must be listed in EMBEDDING_DIMENSIONS.
        api_key: API key, required for the openai provider.
        base_url: API base URL for the openai provider.
    """

    provider: str = "openai"
    model: str = DEFAULT_OPENAI_MODEL
    api_key: str | None = None
    base_url: str = DEFAULT_OPENAI_BASE_URL

    @property
    def dimensions(self) -> int:
        return vector_dims_for_model(self.model)


@dataclass
class MemoryConfig:
    """Configuration for the memory plugin."""

    embedding: EmbeddingConfig
    db_path: Path = DEFAULT_DB_PATH
    auto_capture: bool = True
    auto_recall: bool = True
    language: str | list[str] = "auto"
    capture_limit: int = DEFAULT_CAPTURE_LIMIT


def _assert_allowed_keys(value: dict[str, Any], allowed: list[str], label: str) -> None:
    unknown = [key for key in value if key not in allowed]
    if unknown:
        raise ConfigError(f"{label} has unknown keys: {', '.join(unknown)}")


def resolve_env_vars(value: str) -> str:
    """Replace ${VAR} references with environment values.

    Raises:
        ConfigError: If a referenced variable is not set.
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        env_value = os.environ.get(name)
        if not env_value:
            raise ConfigError(f"Environment variable {name} is not set")
        return env_value

    return re.sub(r"\$\{([^}]+)\}", _replace, value)


def _parse_language(value: Any) -> str | list[str]:
    if value is None:
        return "auto"
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    raise ConfigError("language must be 'auto', a language code, or a list of codes")


def parse_config(value: Any) -> MemoryConfig:
    """Validate a raw config mapping and build a MemoryConfig.

    Args:
        value: Parsed JSON object.

    Returns:
        MemoryConfig with defaults applied.

    Raises:
        ConfigError: On missing or unknown keys, a missing API key,
            an unset environment variable, or an unsupported model.
    """
    if not value or not isinstance(value, dict):
        raise ConfigError("memory config required")

    _assert_allowed_keys(
        value,
        ["embedding", "dbPath", "autoCapture", "autoRecall", "language", "captureLimit"],
        "memory config",
    )

    embedding = value.get("embedding")
    if not isinstance(embedding, dict):
        raise ConfigError("embedding config is required")

    provider = "local" if embedding.get("provider") == "local" else "openai"

    if provider == "local":
        _assert_allowed_keys(embedding, ["provider", "model"], "embedding config")
        model = embedding.get("model")
        if not isinstance(model, str):
            model = DEFAULT_LOCAL_MODEL
        vector_dims_for_model(model)
        embedding_config = EmbeddingConfig(provider="local", model=model)
    else:
        if not isinstance(embedding.get("apiKey"), str):
            raise ConfigError("embedding.apiKey is required for OpenAI provider")
        _assert_allowed_keys(
            embedding, ["provider", "apiKey", "model", "baseUrl"], "embedding config"
        )
        model = embedding.get("model")
        if not isinstance(model, str):
            model = DEFAULT_OPENAI_MODEL
        vector_dims_for_model(model)
        base_url = embedding.get("baseUrl")
        embedding_config = EmbeddingConfig(
            provider="openai",
            model=model,
            api_key=resolve_env_vars(embedding["apiKey"]),
            base_url=base_url if isinstance(base_url, str) else DEFAULT_OPENAI_BASE_URL,
        )

    db_path = value.get("dbPath")
    capture_limit = value.get("captureLimit", DEFAULT_CAPTURE_LIMIT)
    if not isinstance(capture_limit, int) or capture_limit < 1:
        capture_limit = DEFAULT_CAPTURE_LIMIT

    return MemoryConfig(
        embedding=embedding_config,
        db_path=Path(db_path).expanduser() if isinstance(db_path, str) else DEFAULT_DB_PATH,
        auto_capture=value.get("autoCapture") is not False,
        auto_recall=value.get("autoRecall") is not False,
        language=_parse_language(value.get("language")),
        capture_limit=capture_limit,
    )


def load_config(config_path: Path | None = None) -> MemoryConfig:
    """Load MemoryConfig from a JSON file.

    Args:
        config_path: Path to config file. Uses DEFAULT_CONFIG_PATH if None.

    Returns:
        Parsed MemoryConfig.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not path.exists():
        raise ConfigError(f"No config file at {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if isinstance(data, dict) and isinstance(data.get("memory"), dict):
        data = data["memory"]

    logger.debug("Loaded memory config from %s", path)
    return parse_config(data)
