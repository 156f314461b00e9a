"""NetworkX class-hierarchy graph built from scanned declarations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

import networkx as nx
from networkx.readwrite import json_graph

from .models import Declaration
from .names import SEPARATOR, normalize_name


NODE_CLASS = "Class"
NODE_INTERFACE = "Interface"
NODE_EXTERNAL = "External"

EDGE_EXTENDS = "EXTENDS"
EDGE_IMPLEMENTS = "IMPLEMENTS"
EDGE_USES = "USES"

ALL_EDGE_TYPES = frozenset({EDGE_EXTENDS, EDGE_IMPLEMENTS, EDGE_USES})


def class_node_id(name: str) -> str:
    return f"class:{normalize_name(name)}"


def build_hierarchy_graph(declarations: Iterable[Declaration]) -> nx.DiGraph:
    """Edges point from a declaration to what it extends, implements or uses.

    Names that are referenced but never declared in the scanned tree get
    placeholder nodes flagged ``external``. A name declared twice keeps
    the first declaration's attributes.
    """
    graph = nx.DiGraph()
    declarations = list(declarations)

    for declaration in declarations:
        _ensure_node(
            graph,
            class_node_id(declaration.name),
            type=NODE_INTERFACE if declaration.kind == "interface" else NODE_CLASS,
            name=declaration.short_name,
            qualname=declaration.name,
            path=declaration.path,
            kind=declaration.kind,
            external=False,
        )

    for declaration in declarations:
        source_id = class_node_id(declaration.name)
        if declaration.extends is not None:
            _add_relation(graph, source_id, declaration.extends, EDGE_EXTENDS)
        for interface in declaration.implements:
            _add_relation(graph, source_id, interface, EDGE_IMPLEMENTS)
        for trait in declaration.traits:
            _add_relation(graph, source_id, trait, EDGE_USES)

    return graph


def descendants_of(
    graph: nx.DiGraph,
    name: str,
    edge_types: Iterable[str] | None = None,
) -> list[str]:
    """Qualified names of every declaration reaching ``name`` transitively."""
    target_id = class_node_id(name)
    if target_id not in graph:
        return []

    allowed = set(edge_types or ALL_EDGE_TYPES)
    view = nx.subgraph_view(
        graph,
        filter_edge=lambda source, target: graph[source][target]["type"] in allowed,
    )
    names = [
        graph.nodes[node_id]["qualname"]
        for node_id in nx.ancestors(view, target_id)
        if not graph.nodes[node_id].get("external")
    ]
    return sorted(names, key=str.lower)


def save_graph(graph: nx.DiGraph, path: str | Path) -> None:
    data = json_graph.node_link_data(graph)
    Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_graph(path: str | Path) -> nx.DiGraph:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return json_graph.node_link_graph(data, directed=True)


def _add_relation(graph: nx.DiGraph, source_id: str, target: str, edge_type: str) -> None:
    target_id = class_node_id(target)
    _ensure_node(
        graph,
        target_id,
        type=NODE_EXTERNAL,
        name=target.rsplit(SEPARATOR, 1)[-1],
        qualname=target,
        path=None,
        kind=None,
        external=True,
    )
    graph.add_edge(source_id, target_id, type=edge_type)


def _ensure_node(graph: nx.DiGraph, node_id: str, **attrs) -> None:
    if node_id not in graph:
        graph.add_node(node_id, **attrs)
