"""Tests for memory configuration loading."""

import json
from pathlib import Path

import pytest

from longmem.config import (
    DEFAULT_CAPTURE_LIMIT,
    DEFAULT_DB_PATH,
    ConfigError,
    EmbeddingConfig,
    load_config,
    parse_config,
    resolve_env_vars,
    vector_dims_for_model,
)


class TestVectorDims:
    """Tests for model dimension lookup."""

    @pytest.mark.parametrize(
        "model, dims",
        [
            ("text-embedding-3-small", 1536),
            ("text-embedding-3-large", 3072),
            ("all-MiniLM-L6-v2", 384),
            ("sentence-transformers/all-MiniLM-L6-v2", 384),
            ("paraphrase-multilingual-MiniLM-L12-v2", 384),
        ],
    )
    def test_known_models(self, model, dims):
        assert vector_dims_for_model(model) == dims

    def test_unknown_model_raises(self):
        with pytest.raises(ConfigError, match="Unsupported embedding model: foo"):
            vector_dims_for_model("foo")

    def test_embedding_config_dimensions(self):
        assert EmbeddingConfig(model="text-embedding-3-large").dimensions == 3072


class TestResolveEnvVars:
    """Tests for ${VAR} substitution."""

    def test_replaces(self, monkeypatch):
        monkeypatch.setenv("LONGMEM_TEST_KEY", "sk-123")
        assert resolve_env_vars("${LONGMEM_TEST_KEY}") == "sk-123"

    def test_plain_value_unchanged(self):
        assert resolve_env_vars("sk-literal") == "sk-literal"

    def test_unset_raises(self, monkeypatch):
        monkeypatch.delenv("LONGMEM_MISSING", raising=False)
        with pytest.raises(ConfigError, match="LONGMEM_MISSING is not set"):
            resolve_env_vars("${LONGMEM_MISSING}")


class TestParseConfig:
    """Tests for parse_config."""

    def test_openai_defaults(self):
        config = parse_config({"embedding": {"apiKey": "sk-test"}})

        assert config.embedding.provider == "openai"
        assert config.embedding.model == "text-embedding-3-small"
        assert config.embedding.api_key == "sk-test"
        assert config.embedding.base_url == "https://api.openai.com/v1"
        assert config.db_path == DEFAULT_DB_PATH
        assert config.auto_capture is True
        assert config.auto_recall is True
        assert config.language == "auto"
        assert config.capture_limit == DEFAULT_CAPTURE_LIMIT

    def test_full_config(self, monkeypatch):
        monkeypatch.setenv("LONGMEM_TEST_KEY", "sk-env")
        config = parse_config(
            {
                "embedding": {
                    "provider": "openai",
                    "apiKey": "${LONGMEM_TEST_KEY}",
                    "model": "text-embedding-3-large",
                    "baseUrl": "http://localhost:8080/v1",
                },
                "dbPath": "~/memories/db.sqlite",
                "autoCapture": False,
                "autoRecall": False,
                "language": ["ru", "en"],
                "captureLimit": 5,
            }
        )

        assert config.embedding.api_key == "sk-env"
        assert config.embedding.dimensions == 3072
        assert config.embedding.base_url == "http://localhost:8080/v1"
        assert config.db_path == Path.home() / "memories" / "db.sqlite"
        assert config.auto_capture is False
        assert config.auto_recall is False
        assert config.language == ["ru", "en"]
        assert config.capture_limit == 5

    def test_local_provider(self):
        config = parse_config({"embedding": {"provider": "local"}})

        assert config.embedding.provider == "local"
        assert config.embedding.model == "sentence-transformers/all-MiniLM-L6-v2"
        assert config.embedding.api_key is None
        assert config.embedding.dimensions == 384

    def test_local_provider_rejects_api_key(self):
        with pytest.raises(ConfigError, match="embedding config has unknown keys: apiKey"):
            parse_config({"embedding": {"provider": "local", "apiKey": "sk"}})

    @pytest.mark.parametrize("value", [None, {}, [], "config"])
    def test_requires_mapping(self, value):
        with pytest.raises(ConfigError, match="memory config required"):
            parse_config(value)

    def test_requires_embedding(self):
        with pytest.raises(ConfigError, match="embedding config is required"):
            parse_config({"autoCapture": True})

    def test_requires_api_key_for_openai(self):
        with pytest.raises(ConfigError, match="apiKey is required"):
            parse_config({"embedding": {"provider": "openai"}})

    def test_unknown_top_level_keys(self):
        with pytest.raises(ConfigError, match="memory config has unknown keys: foo, bar"):
            parse_config({"embedding": {"apiKey": "sk"}, "foo": 1, "bar": 2})

    def test_unknown_embedding_keys(self):
        with pytest.raises(ConfigError, match="embedding config has unknown keys: dims"):
            parse_config({"embedding": {"apiKey": "sk", "dims": 3}})

    def test_unsupported_model(self):
        with pytest.raises(ConfigError, match="Unsupported embedding model"):
            parse_config({"embedding": {"apiKey": "sk", "model": "ada-002"}})

    def test_invalid_language(self):
        with pytest.raises(ConfigError, match="language"):
            parse_config({"embedding": {"apiKey": "sk"}, "language": 7})

    @pytest.mark.parametrize("limit", [0, -1, "3", 2.5])
    def test_invalid_capture_limit_uses_default(self, limit):
        config = parse_config({"embedding": {"apiKey": "sk"}, "captureLimit": limit})
        assert config.capture_limit == DEFAULT_CAPTURE_LIMIT

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_config({})


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="No config file"):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_root_level_settings(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"embedding": {"provider": "local"}}))

        config = load_config(path)

        assert config.embedding.provider == "local"

    def test_memory_section(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "memory": {
                        "embedding": {"provider": "local"},
                        "dbPath": str(tmp_path / "memory.db"),
                    }
                }
            )
        )

        config = load_config(path)

        assert config.db_path == tmp_path / "memory.db"
