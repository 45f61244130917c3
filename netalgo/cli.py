"""Command-line interface for netalgo."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional, Tuple

import networkx as nx

from netalgo.algorithms.connectivity import (
    articulation_points,
    biconnected_components,
    cut_edges,
)
from netalgo.algorithms.floyd_warshall import (
    NegativeCycleError,
    edge_attr_cost,
    floyd_warshall_path,
)
from netalgo.algorithms.measure import BoundedMeasure, IntMeasure, NumberMeasure
from netalgo.graph.io import load_graph
from netalgo.logging import get_logger, level_for_flags, set_global_log_level
from netalgo.types.base import ParallelEdgePolicy

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. "123.0 ms" or "1.23 s"."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _sort_key(node: Any) -> Tuple[str, str]:
    return (type(node).__name__, str(node))


def _resolve_node(graph: nx.Graph, token: str) -> Any:
    """Map a command-line token to a node, trying an integer reading second."""
    if token in graph:
        return token
    try:
        as_int = int(token)
    except ValueError:
        as_int = None
    if as_int is not None and as_int in graph:
        return as_int
    raise KeyError(f"Node '{token}' is not in the graph.")


def _parse_pair(graph: nx.Graph, text: str) -> Tuple[Any, Any]:
    source, sep, target = text.partition(":")
    if not sep or not source or not target:
        raise ValueError(f"Invalid pair '{text}', expected SOURCE:TARGET")
    return _resolve_node(graph, source), _resolve_node(graph, target)


def _load(path: Path, undirected: bool, cost_attr: str) -> nx.Graph:
    logger.debug(f"Loading graph from: {path}")
    graph = load_graph(path, cost_attr=cost_attr)
    if undirected and graph.is_directed():
        graph = graph.to_undirected()
    return graph


def _emit(payload: Dict[str, Any], headers: List[str], rows: List[List[str]], fmt: str) -> None:
    if fmt == "table":
        table = _format_table(headers, rows)
        print(table if table else "   (none)")
    else:
        print(json.dumps(payload, indent=2, default=str))


def _cmd_cut_vertices(graph: nx.Graph, fmt: str) -> None:
    points = sorted(articulation_points(graph), key=_sort_key)
    _emit(
        {"articulation_points": points},
        ["Node"],
        [[str(n)] for n in points],
        fmt,
    )


def _cmd_cut_edges(graph: nx.Graph, fmt: str) -> None:
    bridges = cut_edges(graph)
    _emit(
        {"cut_edges": [list(e) for e in bridges]},
        ["Source", "Target"],
        [[str(u), str(v)] for u, v in bridges],
        fmt,
    )


def _cmd_components(graph: nx.Graph, fmt: str) -> None:
    components = [sorted(c, key=_sort_key) for c in biconnected_components(graph)]
    _emit(
        {"biconnected_components": components},
        ["#", "Size", "Nodes"],
        [
            [str(i + 1), str(len(c)), ", ".join(str(n) for n in c)]
            for i, c in enumerate(components)
        ],
        fmt,
    )


def _cmd_apsp(
    graph: nx.Graph,
    fmt: str,
    pairs: List[str],
    parallel_edges: str,
    int_bits: Optional[int],
    cost_attr: str,
) -> None:
    requested = [_parse_pair(graph, p) for p in pairs]
    measure: BoundedMeasure = IntMeasure(int_bits) if int_bits else NumberMeasure()
    dist, paths = floyd_warshall_path(
        graph,
        requested,
        edge_attr_cost(cost_attr),
        measure=measure,
        parallel_edges=ParallelEdgePolicy.from_string(parallel_edges),
    )

    def show(value: Any) -> Any:
        return None if measure.is_max(value) else value

    nodes = sorted(graph.nodes(), key=_sort_key)
    if requested:
        keys = requested
    else:
        keys = [(u, v) for u in nodes for v in nodes]

    distances: Dict[str, Dict[str, Any]] = {}
    for u, v in keys:
        distances.setdefault(str(u), {})[str(v)] = show(dist[(u, v)])

    payload: Dict[str, Any] = {"distances": distances}
    if requested:
        payload["paths"] = {
            f"{u}->{v}": [list(hop) for hop in paths[(u, v)]] for u, v in requested
        }

    rows = []
    for u, v in keys:
        d = show(dist[(u, v)])
        hops = paths.get((u, v))
        route = " ".join([str(u)] + [str(b) for _, b in hops]) if hops else ""
        rows.append([str(u), str(v), "inf" if d is None else str(d), route])
    _emit(payload, ["Source", "Target", "Distance", "Path"], rows, fmt)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``netalgo`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="netalgo",
        description="Connectivity and all-pairs shortest path analysis of graph files.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{cut-vertices,cut-edges,components,apsp}",
        help="Available commands",
    )

    cv_parser = subparsers.add_parser("cut-vertices", help="List articulation points")
    ce_parser = subparsers.add_parser("cut-edges", help="List bridges")
    bc_parser = subparsers.add_parser(
        "components", help="List biconnected components"
    )
    apsp_parser = subparsers.add_parser(
        "apsp", help="All-pairs shortest paths (Floyd-Warshall)"
    )
    apsp_parser.add_argument(
        "--pair",
        "-p",
        action="append",
        default=[],
        metavar="SRC:DST",
        help="Report distance and path for this pair only (repeatable)",
    )
    apsp_parser.add_argument(
        "--parallel-edges",
        choices=[p.name.lower() for p in ParallelEdgePolicy],
        default="min",
        help="Which parallel edge seeds the distance matrix (default: min)",
    )
    apsp_parser.add_argument(
        "--int-bits",
        type=int,
        default=None,
        help="Use fixed-width signed integer costs with this many bits",
    )

    for p in (cv_parser, ce_parser, bc_parser, apsp_parser):
        p.add_argument("graph", type=Path, help="Graph file (YAML, JSON or edge list)")
        p.add_argument(
            "--format",
            "-f",
            choices=["json", "table"],
            default="json",
            help="Output format (default: json)",
        )
        p.add_argument(
            "--undirected",
            action="store_true",
            help="Treat a directed graph document as undirected",
        )
        p.add_argument(
            "--cost-attr",
            default="cost",
            help="Edge attribute holding costs (default: cost)",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    started = perf_counter()
    try:
        graph = _load(args.graph, args.undirected, args.cost_attr)
        if args.command == "cut-vertices":
            _cmd_cut_vertices(graph, args.format)
        elif args.command == "cut-edges":
            _cmd_cut_edges(graph, args.format)
        elif args.command == "components":
            _cmd_components(graph, args.format)
        elif args.command == "apsp":
            _cmd_apsp(
                graph,
                args.format,
                args.pair,
                args.parallel_edges,
                args.int_bits,
                args.cost_attr,
            )
    except FileNotFoundError:
        logger.error(f"Graph file not found: {args.graph}")
        sys.exit(1)
    except NegativeCycleError:
        logger.error("Graph contains a negative cycle; distances are undefined")
        sys.exit(1)
    except (KeyError, ValueError) as e:
        logger.error(f"Invalid input: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.debug(
        f"{args.command} completed in {_format_duration(perf_counter() - started)}"
    )


if __name__ == "__main__":
    main()
