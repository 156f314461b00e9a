"""Command line entry points for class searches and hierarchy graphs."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import networkx as nx

from .config import resolve_finder_config
from .errors import FilesystemError
from .finder import ClassFinder
from .graph import build_hierarchy_graph, save_graph
from .models import Relation


def build_graph_from_root(
    root: str | Path,
    output_path: str | Path | None = None,
    finder: ClassFinder | None = None,
) -> nx.DiGraph:
    finder = finder or ClassFinder(config=resolve_finder_config())
    graph = build_hierarchy_graph(finder.scan_directory(root))

    if output_path:
        save_graph(graph, output_path)

    return graph


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find PHP classes by parent class, interface or trait"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    find = commands.add_parser("find", help="List declarations related to a class name")
    find.add_argument("--root", required=True, help="Directory to scan")
    find.add_argument("--target", required=True, help="Fully-qualified class name")
    find.add_argument(
        "--relation",
        choices=[relation.value for relation in Relation],
        default=Relation.EXTENDS.value,
        help="Relation to the target",
    )
    find.add_argument("--json", action="store_true", help="Print JSON records")

    graph = commands.add_parser("graph", help="Write the class hierarchy graph as JSON")
    graph.add_argument("--root", required=True, help="Directory to scan")
    graph.add_argument("--output", default="class_graph.json", help="Output JSON path")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    finder = ClassFinder(config=resolve_finder_config())
    try:
        if args.command == "graph":
            graph = build_graph_from_root(args.root, args.output, finder=finder)
            print(graph.number_of_nodes(), graph.number_of_edges())
            return 0

        results = finder.find(args.root, args.target, args.relation)
    except FilesystemError as exc:
        raise SystemExit(str(exc)) from exc

    if args.json:
        print(json.dumps([item.to_dict() for item in results], indent=2))
    else:
        for item in results:
            print(f"{item.name}\t{item.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
