"""Long-term vector memory with multilingual auto-capture triggers."""

from .config import ConfigError, EmbeddingConfig, MemoryConfig, load_config, parse_config
from .plugin import MemoryPlugin

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "EmbeddingConfig",
    "MemoryConfig",
    "MemoryPlugin",
    "load_config",
    "parse_config",
]
