"""CLI commands for inspecting long-term memory.

Provides subcommands for listing, searching and counting memories, and a
diagnostic view of the capture triggers.
"""

import argparse
import asyncio
import json
import sys
from datetime import datetime
from pathlib import Path

from .config import ConfigError, MemoryConfig, load_config
from .memory import EmbeddingError, MemoryEntry, MemoryStore, create_embedding_provider
from .memory.capture import CaptureGate
from .triggers import match_all, match_best


def _load(args: argparse.Namespace) -> MemoryConfig:
    path = Path(args.config).expanduser() if args.config else None
    return load_config(path)


def _open_store(config: MemoryConfig) -> MemoryStore:
    store = MemoryStore(config.db_path, config.embedding.dimensions)
    store.init_db()
    return store


def _format_entry(entry: MemoryEntry) -> str:
    """Two-line display of a memory entry."""
    date = datetime.fromtimestamp(entry.created_at / 1000).strftime("%Y-%m-%d %H:%M:%S")
    text = entry.text if len(entry.text) <= 100 else entry.text[:100] + "..."

    meta = " via ".join(
        part for part in (f"@{entry.username}" if entry.username else None, entry.channel) if part
    )
    meta_prefix = f"({meta}) " if meta else ""

    return (
        f"[{entry.category}] {meta_prefix}{text}\n"
        f"  id: {entry.id} | importance: {entry.importance} | {date}\n"
    )


def cmd_list(args: argparse.Namespace) -> int:
    """List memories with pagination."""
    store = _open_store(_load(args))
    try:
        count = store.count()
        entries = store.list(limit=args.limit, offset=args.offset)
    finally:
        store.close()

    if args.json:
        payload = {
            "total": count,
            "offset": args.offset,
            "limit": args.limit,
            "entries": [
                {
                    **entry.to_dict(),
                    "created_at": datetime.fromtimestamp(entry.created_at / 1000).isoformat(),
                }
                for entry in entries
            ],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    if not entries:
        print(f"No memories (total: {count}).")
        return 0

    print(f"\nMemories ({args.offset + 1}-{min(args.offset + len(entries), count)} of {count}):\n")
    for entry in entries:
        print(_format_entry(entry))

    if args.offset + len(entries) < count:
        print(f"\nNext page: ltm list --offset {args.offset + args.limit} --limit {args.limit}")
    return 0


async def _search(config: MemoryConfig, query: str, limit: int) -> list[dict]:
    embeddings = create_embedding_provider(config.embedding)
    store = _open_store(config)
    try:
        vector = await embeddings.embed(query)
        results = store.search(vector, limit, 0.3)
    finally:
        store.close()
    return [
        {
            "id": r.entry.id,
            "text": r.entry.text,
            "category": r.entry.category,
            "importance": r.entry.importance,
            "score": r.score,
        }
        for r in results
    ]


def cmd_search(args: argparse.Namespace) -> int:
    """Search memories and print JSON results."""
    output = asyncio.run(_search(_load(args), args.query, args.limit))
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Show memory statistics."""
    store = _open_store(_load(args))
    try:
        count = store.count()
    finally:
        store.close()
    print(f"Total memories: {count}")
    return 0


def cmd_match(args: argparse.Namespace) -> int:
    """Show how the capture triggers classify a text."""
    languages = args.lang or "auto"

    if args.all:
        rules = match_all(args.text, languages)
        if not rules:
            print("No triggers matched.")
            return 0
        print(f"\n{'Language':<10} {'Category':<12} {'Weight':<7} Pattern")
        print("-" * 80)
        for rule in rules:
            print(f"{rule.language:<10} {rule.category.value:<12} {rule.weight:<7} {rule.pattern}")
        print(f"\nTotal: {len(rules)} trigger(s)")
        return 0

    match = match_best(args.text, languages)
    if match is None:
        print("No triggers matched.")
        return 0

    decision = CaptureGate(languages).evaluate(args.text)
    print(f"Category: {match.category.value}")
    print(f"Weight: {match.weight}")
    print(f"Language: {match.language}")
    print(f"Auto-capture: {'yes' if decision.accepted else 'no (' + decision.reason + ')'}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the memory CLI."""
    parser = argparse.ArgumentParser(
        prog="ltm",
        description="Long-term memory commands",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to config file (default: ~/.longmem/config.json)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Sub-command help")

    list_parser = subparsers.add_parser("list", help="List all memories with pagination")
    list_parser.add_argument("--limit", type=int, default=20, help="Number of items per page")
    list_parser.add_argument("--offset", type=int, default=0, help="Skip first N items")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search memories")
    search_parser.add_argument("query", help="Search query")
    search_parser.add_argument("--limit", type=int, default=5, help="Max results")

    subparsers.add_parser("stats", help="Show memory statistics")

    match_parser = subparsers.add_parser("match", help="Show which triggers fire on a text")
    match_parser.add_argument("text", help="Text to classify")
    match_parser.add_argument(
        "-l", "--lang",
        action="append",
        help="Language filter (repeatable, default: all languages)",
    )
    match_parser.add_argument(
        "-a", "--all",
        action="store_true",
        help="List every matching trigger instead of the best one",
    )

    return parser


def run_memory_cli(argv: list[str] | None = None) -> int:
    """Run the memory CLI with given arguments.

    Args:
        argv: Command-line arguments. Uses sys.argv[1:] if None.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "list": cmd_list,
        "search": cmd_search,
        "stats": cmd_stats,
        "match": cmd_match,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (ConfigError, EmbeddingError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(run_memory_cli())
