"""Command-line interface for the Social Graph analyzer.

Usage:
    social-graph suggest alice
    social-graph separation alice dave
    social-graph components --json
    social-graph stats --dataset data/Dataset.csv
    social-graph menu
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from social_graph import __version__
from social_graph.config import get_settings
from social_graph.core.exceptions import ConfigurationError, SocialGraphError
from social_graph.dataset import load_dataset
from social_graph.graph.analyzer import NetworkAnalyzer, QueryLimits
from social_graph.graph.models import (
    Component,
    DegreeRank,
    NetworkStats,
    SeparationResult,
    Suggestion,
)
from social_graph.utils.logging import LogContext, get_logger, setup_logging

logger = get_logger(__name__)

MENU = """
--- Social Network Analysis Tool ---
1. Friend suggestions based on mutual connections
2. Degree of separation between two users
3. Identify top connected components
4. Analyze top influential users (centrality)
5. Basic network statistics
0. Exit"""


# =============================================================================
# Formatting
# =============================================================================


def format_suggestions(suggestions: list[Suggestion]) -> list[str]:
    """Render friend suggestions."""
    if not suggestions:
        return ["No suggestions found."]
    return [f"{s.user} ({s.score} distant mutuals)" for s in suggestions]


def format_separation(result: SeparationResult) -> list[str]:
    """Render a degree-of-separation result."""
    if not result.connected:
        return [f"Degree of Separation: not connected ({result.source} -> {result.target})"]
    return [f"Degree of Separation: {result.hops}"]


def format_components(components: list[Component]) -> list[str]:
    """Render ranked components."""
    return [
        f"Component {i} ({c.size} users): {' '.join(c.members)}"
        for i, c in enumerate(components, start=1)
    ]


def format_influence(ranked: list[DegreeRank]) -> list[str]:
    """Render influential users."""
    return [f"{r.user} ({r.degree} connections)" for r in ranked]


def format_stats(stats: NetworkStats) -> list[str]:
    """Render network statistics."""
    if stats.empty_network:
        average = "n/a (empty network)"
    else:
        average = f"{stats.average_degree:g}"

    lines = [
        f"Total Users: {stats.total_users}",
        f"Average Connections/User: {average}",
        "Top Users by Connections:",
    ]
    lines.extend(f"{r.user} ({r.degree})" for r in stats.top_by_degree)
    return lines


# =============================================================================
# Commands
# =============================================================================


def run_query(analyzer: NetworkAnalyzer, args: argparse.Namespace) -> tuple[Any, list[str]]:
    """Run the query named by ``args.command``.

    Returns:
        Tuple of (JSON-ready payload, text lines).
    """
    if args.command == "suggest":
        suggestions = analyzer.suggest_friends(args.user)
        return [s.to_dict() for s in suggestions], format_suggestions(suggestions)

    if args.command == "separation":
        result = analyzer.separation(args.source, args.target)
        return result.to_dict(), format_separation(result)

    if args.command == "components":
        components = analyzer.list_components()
        return [c.to_dict() for c in components], format_components(components)

    if args.command == "influence":
        ranked = analyzer.rank_influence()
        return [r.to_dict() for r in ranked], format_influence(ranked)

    if args.command == "stats":
        stats = analyzer.compute_stats()
        return stats.to_dict(), format_stats(stats)

    raise ValueError(f"Unknown command: {args.command}")


def run_menu(analyzer: NetworkAnalyzer, stdin: TextIO, stdout: TextIO) -> None:
    """Run the interactive numbered menu until the user picks 0 or input ends."""

    def ask(prompt: str) -> str | None:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def emit(lines: list[str]) -> None:
        for line in lines:
            stdout.write(line + "\n")

    while True:
        stdout.write(MENU + "\n")
        choice = ask("Choose an option: ")
        if choice is None:
            break
        choice = choice.strip()

        if choice == "1":
            user = ask("Enter username: ")
            if user is None:
                break
            emit(format_suggestions(analyzer.suggest_friends(user)))
        elif choice == "2":
            source = ask("Enter first user: ")
            target = ask("Enter second user: ") if source is not None else None
            if source is None or target is None:
                break
            emit(format_separation(analyzer.separation(source, target)))
        elif choice == "3":
            emit(format_components(analyzer.list_components()))
        elif choice == "4":
            emit(format_influence(analyzer.rank_influence()))
        elif choice == "5":
            emit(format_stats(analyzer.compute_stats()))
        elif choice == "0":
            emit(["Exiting..."])
            break
        else:
            emit(["Invalid option. Try again."])


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="social-graph",
        description="Analyze a friendship network",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--dataset",
        type=str,
        default=None,
        help="Path to the friendship dataset (default: from settings)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest = subparsers.add_parser("suggest", help="Friend suggestions for a user")
    suggest.add_argument("user")

    separation = subparsers.add_parser("separation", help="Degree of separation between two users")
    separation.add_argument("source")
    separation.add_argument("target")

    subparsers.add_parser("components", help="Largest connected components")
    subparsers.add_parser("influence", help="Most connected users")
    subparsers.add_parser("stats", help="Basic network statistics")
    subparsers.add_parser("menu", help="Interactive menu")

    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """CLI entry point.

    Query results go to stdout; errors go to stderr.

    Returns:
        Process exit code: 0 on success, 1 when the configuration or the
        dataset cannot be loaded.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        stderr.write(f"Error: {e.message}\n")
        return 1

    setup_logging(settings.app)
    dataset_path = Path(args.dataset) if args.dataset else settings.dataset.path

    try:
        store = load_dataset(dataset_path, settings.dataset)
    except SocialGraphError as e:
        logger.error("Failed to load dataset", error=e.__class__.__name__, **e.details)
        stderr.write(f"Error: {e.message}\n")
        return 1

    analyzer = NetworkAnalyzer(store, QueryLimits.from_settings(settings.graph))

    if args.command == "menu":
        run_menu(analyzer, stdin, stdout)
        return 0

    with LogContext(command=args.command, dataset=str(dataset_path)):
        payload, lines = run_query(analyzer, args)
    if args.json:
        stdout.write(json.dumps(payload, indent=2) + "\n")
    else:
        for line in lines:
            stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
