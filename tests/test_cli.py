"""Tests for the ltm CLI."""

import json
from pathlib import Path

import pytest

from longmem import cli
from longmem.cli import create_parser, run_memory_cli
from longmem.memory import EmbeddingError, MemoryStore

DIM = 384


def unit(index: int) -> list[float]:
    vector = [0.0] * DIM
    vector[index] = 1.0
    return vector


class StaticEmbeddings:
    """Embeds every query as the same vector."""

    def __init__(self, vector: list[float]) -> None:
        self.vector = vector

    async def embed(self, text: str) -> list[float]:
        return list(self.vector)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "memory": {
                    "embedding": {"provider": "local", "model": "all-MiniLM-L6-v2"},
                    "dbPath": str(tmp_path / "memory.db"),
                }
            }
        )
    )
    return path


@pytest.fixture
def seeded(tmp_path: Path, config_path: Path) -> Path:
    store = MemoryStore(tmp_path / "memory.db", DIM)
    store.init_db()
    store.store("I like tea", unit(0), category="preference")
    store.store("I live in Berlin", unit(1), category="fact", username="j2h4u", channel="telegram")
    store.close()
    return config_path


class TestParser:
    """Tests for argument parsing."""

    def test_list_defaults(self):
        args = create_parser().parse_args(["list"])
        assert (args.limit, args.offset, args.json) == (20, 0, False)

    def test_search_defaults(self):
        args = create_parser().parse_args(["search", "tea"])
        assert args.query == "tea"
        assert args.limit == 5

    def test_match_repeatable_lang(self):
        args = create_parser().parse_args(["match", "hi", "-l", "ru", "--lang", "en"])
        assert args.lang == ["ru", "en"]

    def test_no_command_prints_help(self, capsys):
        assert run_memory_cli([]) == 0
        assert "usage: ltm" in capsys.readouterr().out


class TestStoreCommands:
    """Tests for list, search and stats."""

    def test_stats(self, seeded: Path, capsys):
        assert run_memory_cli(["--config", str(seeded), "stats"]) == 0
        assert capsys.readouterr().out.strip() == "Total memories: 2"

    def test_list(self, seeded: Path, capsys):
        assert run_memory_cli(["--config", str(seeded), "list"]) == 0

        out = capsys.readouterr().out
        assert "Memories (1-2 of 2)" in out
        assert "[preference] I like tea" in out
        assert "[fact] (@j2h4u via telegram) I live in Berlin" in out

    def test_list_next_page_hint(self, seeded: Path, capsys):
        run_memory_cli(["--config", str(seeded), "list", "--limit", "1"])

        out = capsys.readouterr().out
        assert "Next page: ltm list --offset 1 --limit 1" in out

    def test_list_json(self, seeded: Path, capsys):
        run_memory_cli(["--config", str(seeded), "list", "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["total"] == 2
        assert [e["text"] for e in payload["entries"]] == ["I live in Berlin", "I like tea"]
        assert "vector" not in payload["entries"][0]

    def test_list_empty(self, config_path: Path, capsys):
        run_memory_cli(["--config", str(config_path), "list"])
        assert "No memories (total: 0)." in capsys.readouterr().out

    def test_search(self, seeded: Path, capsys, monkeypatch):
        monkeypatch.setattr(
            cli, "create_embedding_provider", lambda config: StaticEmbeddings(unit(0))
        )

        assert run_memory_cli(["--config", str(seeded), "search", "tea"]) == 0

        results = json.loads(capsys.readouterr().out)
        assert results[0]["text"] == "I like tea"
        assert results[0]["score"] == pytest.approx(1.0)
        assert all(r["score"] >= 0.3 for r in results)

    def test_missing_config(self, tmp_path: Path, capsys):
        code = run_memory_cli(["--config", str(tmp_path / "nope.json"), "stats"])

        assert code == 1
        assert "Error: No config file" in capsys.readouterr().out

    def test_search_embedding_failure(self, seeded: Path, capsys, monkeypatch):
        class DownEmbeddings:
            async def embed(self, text: str) -> list[float]:
                raise EmbeddingError("connection refused")

        monkeypatch.setattr(cli, "create_embedding_provider", lambda config: DownEmbeddings())

        code = run_memory_cli(["--config", str(seeded), "search", "tea"])

        assert code == 1
        assert "Error: connection refused" in capsys.readouterr().out


class TestMatchCommand:
    """Tests for trigger diagnostics."""

    def test_best_match(self, capsys):
        assert run_memory_cli(["match", "Меня зовут Иван"]) == 0

        out = capsys.readouterr().out
        assert "Category: identity" in out
        assert "Weight: 2" in out
        assert "Language: ru" in out
        assert "Auto-capture: yes" in out

    def test_match_rejected_by_gate(self, capsys):
        run_memory_cli(["match", "Мне 5 лет"])
        assert "Auto-capture: no (too_short)" in capsys.readouterr().out

    def test_language_filter(self, capsys):
        run_memory_cli(["match", "Меня зовут Иван", "--lang", "en"])
        assert "No triggers matched." in capsys.readouterr().out

    def test_all(self, capsys):
        run_memory_cli(["match", "Запомни, мне 30 лет", "--all", "-l", "ru"])

        out = capsys.readouterr().out
        assert "remember" in out
        assert "identity" in out
        assert "Total: 2 trigger(s)" in out
