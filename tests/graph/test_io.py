import json
from pathlib import Path

import networkx as nx
import pytest

from netalgo.graph.io import (
    document_to_graph,
    edgelist_to_graph,
    load_graph,
    node_link_to_graph,
)


def test_node_link_to_graph():
    data = {
        "directed": True,
        "graph": {"name": "demo"},
        "nodes": [{"id": "A", "attr": {"site": 1}}, {"id": "B"}],
        "links": [
            {"source": 0, "target": 1, "key": "e1", "attr": {"cost": 4}},
            {"source": 0, "target": 1, "key": "e2", "attr": {"cost": 2}},
        ],
    }
    g = node_link_to_graph(data)
    assert isinstance(g, nx.MultiDiGraph)
    assert g.graph["name"] == "demo"
    assert g.nodes["A"]["site"] == 1
    assert g.edges["A", "B", "e2"]["cost"] == 2
    assert g.number_of_edges() == 2


def test_node_link_undirected():
    data = {"directed": False, "nodes": [{"id": 1}, {"id": 2}], "links": [{"source": 0, "target": 1}]}
    g = node_link_to_graph(data)
    assert isinstance(g, nx.MultiGraph) and not g.is_directed()


def test_node_link_unknown_index():
    data = {"nodes": [{"id": "A"}], "links": [{"source": 0, "target": 5}]}
    with pytest.raises(ValueError, match="unknown node"):
        node_link_to_graph(data)


class TestEdgelist:
    def test_basic(self):
        lines = ["A B 3", "# comment", "", "B C 1.5"]
        g = edgelist_to_graph(lines, ["src", "dst", "cost"])
        assert g.edges["A", "B", 0]["cost"] == 3
        assert g.edges["B", "C", 0]["cost"] == 1.5

    def test_indented_comments_skipped(self):
        lines = ["   # src dst cost", "A B 3", "\t# trailing note"]
        g = edgelist_to_graph(lines, ["src", "dst", "cost"])
        assert g.number_of_edges() == 1

    def test_parallel_lines_kept(self):
        g = edgelist_to_graph(["A B 3", "A B 1"], ["src", "dst", "cost"])
        assert g.number_of_edges() == 2

    def test_custom_separator_and_key(self):
        g = edgelist_to_graph(["A,B,x,7"], ["src", "dst", "key", "cost"], separator=",")
        assert g.edges["A", "B", "x"]["cost"] == 7

    def test_non_numeric(self):
        g = edgelist_to_graph(["A B 3"], ["src", "dst", "cost"], numeric=False)
        assert g.edges["A", "B", 0]["cost"] == "3"

    def test_token_mismatch(self):
        with pytest.raises(ValueError, match="token count mismatch"):
            edgelist_to_graph(["A B 3 4"], ["src", "dst", "cost"])

    def test_updates_given_graph(self):
        g = nx.MultiGraph()
        edgelist_to_graph(["A B"], ["src", "dst"], graph=g)
        assert not g.is_directed()
        assert g.has_edge("B", "A")


class TestDocument:
    def test_list_and_mapping_edges(self):
        doc = {
            "nodes": ["Z"],
            "edges": [["A", "B", 2], ["B", "C"], {"source": "C", "target": "A", "cost": 5, "key": "ca"}],
        }
        g = document_to_graph(doc)
        assert g.is_directed()
        assert set(g) == {"A", "B", "C", "Z"}
        assert g.edges["A", "B", 0]["cost"] == 2
        assert "cost" not in g.edges["B", "C", 0]
        assert g.edges["C", "A", "ca"]["cost"] == 5

    def test_cost_attr_name(self):
        g = document_to_graph({"edges": [["A", "B", 2]]}, cost_attr="weight")
        assert g.edges["A", "B", 0]["weight"] == 2

    def test_undirected(self):
        g = document_to_graph({"directed": False, "edges": [["A", "B"]]})
        assert isinstance(g, nx.MultiGraph) and not g.is_directed()

    def test_links_delegate_to_node_link(self):
        doc = {"nodes": [{"id": "A"}, {"id": "B"}], "links": [{"source": 0, "target": 1}]}
        assert document_to_graph(doc).has_edge("A", "B")

    def test_not_a_mapping(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            document_to_graph([["A", "B"]])

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unrecognized"):
            document_to_graph({"edges": [], "vertices": []})

    def test_edge_missing_endpoint(self):
        with pytest.raises(ValueError, match="missing"):
            document_to_graph({"edges": [{"source": "A"}]})

    def test_malformed_edge(self):
        with pytest.raises(ValueError, match="must be a mapping or"):
            document_to_graph({"edges": [["A"]]})


class TestLoadGraph:
    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "g.yaml"
        path.write_text(
            """
directed: false
edges:
  - [A, B, 1]
  - [B, C, 2]
"""
        )
        g = load_graph(path)
        assert not g.is_directed()
        assert g.edges["B", "C", 0]["cost"] == 2

    def test_json(self, tmp_path: Path):
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"edges": [["A", "B", 7]]}))
        assert load_graph(path).edges["A", "B", 0]["cost"] == 7

    def test_edge_list_file(self, tmp_path: Path):
        path = tmp_path / "g.txt"
        path.write_text("# src dst cost\nA B 3\nB C 4\n")
        g = load_graph(path)
        assert g.edges["B", "C", 0]["cost"] == 4

    def test_edge_list_indented_comment_header(self, tmp_path: Path):
        path = tmp_path / "g.edges"
        path.write_text("  # header\na b 1\n\t# note\nb c 2\n")
        g = load_graph(path)
        assert g.number_of_edges() == 2
        assert g.edges["b", "c", 0]["cost"] == 2

    def test_empty_yaml_is_empty_graph(self, tmp_path: Path):
        path = tmp_path / "g.yaml"
        path.write_text("")
        assert load_graph(path).number_of_nodes() == 0

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "g.yaml"
        path.write_text("edges: [A, B\n")
        with pytest.raises(ValueError, match="Could not parse"):
            load_graph(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "nope.yaml")
