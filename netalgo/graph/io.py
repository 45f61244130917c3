"""Build NetworkX graphs from node-link data, edge lists, and YAML/JSON files.

All loaders return multigraphs (``MultiDiGraph`` or ``MultiGraph``) so that
parallel edges in the source document are preserved for the algorithms.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import networkx as nx
import yaml

from netalgo.logging import get_logger
from netalgo.utils.yaml_utils import normalize_yaml_dict_keys

logger = get_logger(__name__)


def _new_graph(directed: bool) -> nx.MultiGraph:
    return nx.MultiDiGraph() if directed else nx.MultiGraph()


def node_link_to_graph(data: Dict[str, Any]) -> nx.MultiGraph:
    """
    Reconstructs a graph from its node-link dict representation.

    Expected input format:
        {
            "directed": true,
            "graph": { ... graph attributes ... },
            "nodes": [
                {"id": <node_id>, "attr": { ... node attributes ... }},
                ...
            ],
            "links": [
                {
                    "source": <indexed_node>,
                    "target": <indexed_node>,
                    "key": <edge_id>,
                    "attr": { ... edge attributes ... }
                },
                ...
            ]
        }

    Args:
        data: A dict representing the node-link structure.

    Returns:
        A MultiDiGraph (or MultiGraph when ``directed`` is false).

    Raises:
        ValueError: If a link refers to a node index that does not exist.
    """
    graph = _new_graph(bool(data.get("directed", True)))
    graph.graph.update(data.get("graph", {}))

    # Build a mapping from integer indices to original node IDs.
    node_map: Dict[int, Any] = {}
    for idx, node_obj in enumerate(data.get("nodes", [])):
        node_id = node_obj["id"]
        graph.add_node(node_id, **node_obj.get("attr", {}))
        node_map[idx] = node_id

    for edge_obj in data.get("links", []):
        try:
            src_id = node_map[edge_obj["source"]]
            dst_id = node_map[edge_obj["target"]]
        except KeyError as exc:
            raise ValueError(f"Link {edge_obj!r} refers to unknown node {exc}") from None
        graph.add_edge(
            src_id, dst_id, key=edge_obj.get("key"), **edge_obj.get("attr", {})
        )

    return graph


def edgelist_to_graph(
    lines: Iterable[str],
    columns: List[str],
    separator: Optional[str] = None,
    graph: Optional[nx.MultiGraph] = None,
    source: str = "src",
    target: str = "dst",
    key: str = "key",
    numeric: bool = True,
) -> nx.MultiGraph:
    """
    Builds or updates a graph from an edge list.

    Each line is split by ``separator`` into tokens which are mapped to
    ``columns``. The ``source`` and ``target`` tokens become node IDs, the
    ``key`` token (if present) the edge key, and the rest edge attributes.
    Blank lines and lines starting with ``#`` are skipped.

    Args:
        lines: An iterable of strings, each representing one edge.
        columns: A list of column names, e.g. ["src", "dst", "cost"].
        separator: Token separator; ``None`` splits on any whitespace.
        graph: An existing graph to update; if None, a new MultiDiGraph is created.
        source: The column name for the source node ID.
        target: The column name for the target node ID.
        key: The column name for a custom edge key (if present).
        numeric: Convert attribute tokens to int/float where possible.

    Returns:
        The updated (or newly created) graph.

    Raises:
        ValueError: If a line does not have one token per column.
    """
    if graph is None:
        graph = nx.MultiDiGraph()

    for line in lines:
        line = line.rstrip("\r\n")
        if _is_skipped_line(line):
            continue
        tokens = line.split(separator)
        if len(tokens) != len(columns):
            raise ValueError(
                f"Line '{line}' does not match expected columns {columns} (token count mismatch)."
            )

        line_dict = dict(zip(columns, tokens))
        attr_dict = {
            k: _parse_number(v) if numeric else v
            for k, v in line_dict.items()
            if k not in (source, target, key)
        }
        graph.add_edge(
            line_dict[source], line_dict[target], key=line_dict.get(key), **attr_dict
        )

    return graph


def _is_skipped_line(line: str) -> bool:
    """Blank lines and comment lines (leading whitespace allowed) carry no edge."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def _parse_number(token: str) -> Union[int, float, str]:
    for cast in (int, float):
        try:
            return cast(token)
        except ValueError:
            continue
    return token


def document_to_graph(data: Dict[str, Any], cost_attr: str = "cost") -> nx.MultiGraph:
    """Build a graph from a netalgo graph document.

    Document format::

        directed: true          # optional, default true
        nodes: [A, B, C]        # optional
        edges:
          - [A, B, 1]           # source, target, optional cost
          - {source: B, target: C, cost: 2, key: b-c}

    Documents that carry ``links`` instead of ``edges`` are treated as
    node-link data (see :func:`node_link_to_graph`).

    Args:
        data: Parsed document.
        cost_attr: Attribute name that list-form edge costs are stored under.

    Returns:
        A MultiDiGraph or MultiGraph.

    Raises:
        ValueError: If the document or one of its edges is malformed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Graph document must be a mapping, got {type(data).__name__}")
    data = normalize_yaml_dict_keys(data)

    if "links" in data:
        return node_link_to_graph(data)

    unknown = set(data) - {"directed", "nodes", "edges", "graph"}
    if unknown:
        raise ValueError(f"Unrecognized graph document keys: {sorted(unknown)}")

    graph = _new_graph(bool(data.get("directed", True)))
    graph.graph.update(data.get("graph") or {})
    graph.add_nodes_from(data.get("nodes") or [])

    for entry in data.get("edges") or []:
        if isinstance(entry, dict):
            attrs = dict(entry)
            try:
                src = attrs.pop("source")
                dst = attrs.pop("target")
            except KeyError as exc:
                raise ValueError(f"Edge {entry!r} is missing {exc}") from None
            key = attrs.pop("key", None)
            graph.add_edge(src, dst, key=key, **attrs)
        elif isinstance(entry, (list, tuple)) and len(entry) in (2, 3):
            attrs = {cost_attr: entry[2]} if len(entry) == 3 else {}
            graph.add_edge(entry[0], entry[1], **attrs)
        else:
            raise ValueError(
                f"Edge {entry!r} must be a mapping or a [source, target, cost?] list"
            )

    return graph


def load_graph(path: Union[str, Path], cost_attr: str = "cost") -> nx.MultiGraph:
    """Load a graph document from a YAML or JSON file.

    Files ending in ``.txt`` or ``.edges`` are read as whitespace-separated
    ``src dst [cost]`` edge lists instead.

    Args:
        path: File to read.
        cost_attr: Attribute name for edge costs.

    Returns:
        A MultiDiGraph or MultiGraph.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the content is not a valid graph document.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    if path.suffix in (".txt", ".edges"):
        rows = [ln for ln in text.splitlines() if not _is_skipped_line(ln)]
        width = len(rows[0].split()) if rows else 2
        columns = ["src", "dst", cost_attr][:width]
        graph = edgelist_to_graph(rows, columns)
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Could not parse {path}: {exc}") from exc
        graph = document_to_graph(data or {}, cost_attr=cost_attr)

    logger.debug(
        "Loaded %s: %d nodes, %d edges",
        path.name,
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph
