import networkx as nx
import pytest

from netalgo import cli


def test_format_table_alignment() -> None:
    table = cli._format_table(["Node", "Degree"], [["A", "1"], ["LongName", "22"]])
    lines = table.splitlines()
    assert lines[0].startswith("   Node")
    assert set(lines[1].strip()) <= {"-", "+"}
    assert len(lines) == 4


def test_format_table_empty() -> None:
    assert cli._format_table(["Node"], []) == ""


def test_format_duration() -> None:
    assert cli._format_duration(0.0123) == "12.3 ms"
    assert cli._format_duration(2.5) == "2.50 s"


def test_resolve_node_prefers_string() -> None:
    g = nx.Graph()
    g.add_nodes_from(["1", 2])
    assert cli._resolve_node(g, "1") == "1"
    assert cli._resolve_node(g, "2") == 2
    with pytest.raises(KeyError):
        cli._resolve_node(g, "3")


@pytest.mark.parametrize("text", ["ab", ":b", "a:", ""])
def test_parse_pair_rejects_bad_format(text) -> None:
    g = nx.Graph([("a", "b")])
    with pytest.raises(ValueError, match="SOURCE:TARGET"):
        cli._parse_pair(g, text)


def test_sort_key_mixed_types() -> None:
    assert sorted([2, "b", 1, "a"], key=cli._sort_key) == [1, 2, "a", "b"]
