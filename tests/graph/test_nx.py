import networkx as nx
import pytest

from netalgo.graph.nx import NodeMap, NxIndexedGraph, as_indexed_graph, from_networkx
from netalgo.graph.protocol import IndexedGraph
from netalgo.types.dto import EdgeRef


class TestNodeMap:
    def test_from_names(self):
        node_map = NodeMap.from_names(["A", "B", "C"])
        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}
        assert len(node_map) == 3

    def test_empty(self):
        assert len(NodeMap.from_names([])) == 0

    def test_duplicate_names(self):
        with pytest.raises(ValueError, match="unique"):
            NodeMap.from_names(["A", "B", "A"])


class TestFromNetworkx:
    def test_insertion_order_index(self):
        g = nx.DiGraph()
        g.add_edge("B", "A", cost=1)
        g.add_node("C")
        graph = from_networkx(g)
        assert [graph.to_index(n) for n in ("B", "A", "C")] == [0, 1, 2]
        assert [graph.from_index(i) for i in range(3)] == ["B", "A", "C"]
        assert list(graph.node_identifiers()) == ["B", "A", "C"]
        assert graph.node_count() == 3

    def test_sort_nodes(self):
        g = nx.Graph([("B", "A"), ("C", "A")])
        graph = from_networkx(g, sort_nodes=True)
        assert list(graph.node_identifiers()) == ["A", "B", "C"]

    def test_satisfies_protocol(self):
        assert isinstance(from_networkx(nx.Graph()), IndexedGraph)

    def test_rejects_non_graph(self):
        with pytest.raises(TypeError, match="Expected NetworkX graph"):
            from_networkx({"A": ["B"]})

    def test_unknown_node(self):
        graph = from_networkx(nx.Graph([("A", "B")]))
        with pytest.raises(KeyError, match="not in the graph"):
            graph.to_index("Z")

    def test_repr(self):
        graph = from_networkx(nx.MultiDiGraph([("A", "B")]))
        assert repr(graph) == "NxIndexedGraph(MultiDiGraph, nodes=2)"


class TestEdges:
    def test_directed_edges_are_outgoing(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", cost=3)
        g.add_edge("C", "A", cost=1)
        graph = from_networkx(g)
        assert list(graph.edges("A")) == [EdgeRef("A", "B")]
        assert list(graph.edges("B")) == []
        assert graph.is_directed()

    def test_edge_data_passed_through(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", cost=3)
        (edge,) = from_networkx(g).edge_references()
        assert edge.data == {"cost": 3}
        assert edge.key is None

    def test_undirected_edges_seen_from_both_ends(self):
        graph = from_networkx(nx.Graph([("A", "B")]))
        assert [e.target for e in graph.edges("A")] == ["B"]
        assert [e.target for e in graph.edges("B")] == ["A"]
        assert len(list(graph.edge_references())) == 1
        assert not graph.is_directed()

    def test_multigraph_keys(self):
        g = nx.MultiDiGraph()
        g.add_edge("A", "B", key="x", cost=1)
        g.add_edge("A", "B", key="y", cost=2)
        graph = from_networkx(g)
        refs = list(graph.edge_references())
        assert [(e.key, e.data["cost"]) for e in refs] == [("x", 1), ("y", 2)]
        assert [e.key for e in graph.edges("A")] == ["x", "y"]

    def test_edge_ref_equality_ignores_data(self):
        assert EdgeRef("A", "B", 0, {"cost": 1}) == EdgeRef("A", "B", 0, {"cost": 2})
        assert hash(EdgeRef("A", "B", 0, {"cost": 1})) == hash(EdgeRef("A", "B", 0))


def test_as_indexed_graph_wraps_networkx_only():
    g = nx.Graph([("A", "B")])
    wrapped = as_indexed_graph(g)
    assert isinstance(wrapped, NxIndexedGraph)
    assert as_indexed_graph(wrapped) is wrapped
