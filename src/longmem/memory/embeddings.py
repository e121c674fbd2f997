"""Embedding providers: OpenAI-compatible HTTP API or a local model."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any, Protocol

import httpx

if TYPE_CHECKING:
    from ..config import EmbeddingConfig

logger = logging.getLogger(__name__)

DEFAULT_OPENAI_MODEL = "text-embedding-3-small"
DEFAULT_LOCAL_MODEL = "sentence-transformers/all-MiniLM-L6-v2"
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"

SLOW_EMBED_MS = 100


class EmbeddingError(RuntimeError):
    """Raised when a provider cannot produce an embedding."""


class EmbeddingProvider(Protocol):
    """Anything that turns text into a fixed-dimension vector."""

    async def embed(self, text: str) -> list[float]: ...


class OpenAIEmbeddings:
    """Embeddings from the OpenAI /embeddings endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_OPENAI_MODEL,
        base_url: str = DEFAULT_OPENAI_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def embed(self, text: str) -> list[float]:
        """Embed text with a single API call.

        Raises:
            EmbeddingError: On HTTP errors or an unexpected response shape.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/embeddings",
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json={"model": self.model, "input": text},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise EmbeddingError(
                f"Embedding request failed with status {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise EmbeddingError(f"Embedding request failed: {e}") from e

        try:
            return [float(v) for v in response.json()["data"][0]["embedding"]]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise EmbeddingError(f"Malformed embedding response: {e}") from e


class LocalEmbeddings:
    """Embeddings from a sentence-transformers model, loaded on first use."""

    def __init__(self, model: str = DEFAULT_LOCAL_MODEL) -> None:
        self.model = model
        self._model: Any = None

    def _get_model(self) -> Any:
        if self._model is None:
            try:
                from sentence_transformers import SentenceTransformer
            except ImportError:
                raise ImportError(
                    "sentence-transformers is required for local embeddings. "
                    "Install it with: pip install 'longmem[local]'"
                )
            self._model = SentenceTransformer(self.model)
        return self._model

    def _encode(self, text: str) -> list[float]:
        vector = self._get_model().encode(
            text,
            normalize_embeddings=True,
            show_progress_bar=False,
        )
        return [float(v) for v in vector]

    async def embed(self, text: str) -> list[float]:
        """Embed text in a worker thread (model load included on first call)."""
        return await asyncio.to_thread(self._encode, text)


class TimedEmbeddings:
    """Wraps a provider and logs embedding latency.

    The first call is always logged since it includes model load or
    connection setup; later calls only when slower than SLOW_EMBED_MS.
    """

    def __init__(self, inner: EmbeddingProvider, model: str) -> None:
        self.inner = inner
        self.model = model
        self._first_call = True

    async def embed(self, text: str) -> list[float]:
        start = time.perf_counter()
        result = await self.inner.embed(text)
        elapsed_ms = (time.perf_counter() - start) * 1000

        if self._first_call:
            logger.info(
                "first embed (%s): %.0fms (includes model load)", self.model, elapsed_ms
            )
            self._first_call = False
        elif elapsed_ms > SLOW_EMBED_MS:
            logger.info("embed: %.0fms", elapsed_ms)

        return result


def create_embedding_provider(config: EmbeddingConfig) -> TimedEmbeddings:
    """Build the configured provider, wrapped with latency logging."""
    inner: EmbeddingProvider
    if config.provider == "local":
        inner = LocalEmbeddings(config.model)
    else:
        inner = OpenAIEmbeddings(
            api_key=config.api_key or "",
            model=config.model,
            base_url=config.base_url,
        )
    return TimedEmbeddings(inner, config.model)
