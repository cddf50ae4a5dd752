import pytest

from pressure_release.errors import GraphError
from pressure_release.graph import Vertex, build_graph, make_vertex, parse_file, parse_line


def test_parse_line_plural():
    vertex = parse_line("Valve AA has flow rate=0; tunnels lead to valves DD, II, BB")
    assert vertex == Vertex(name="AA", flow_rate=0, neighbors=("DD", "II", "BB"))


def test_parse_line_singular():
    vertex = parse_line("Valve HH has flow rate=22; tunnel leads to valve GG\n")
    assert vertex.flow_rate == 22
    assert vertex.neighbors == ("GG",)


def test_parse_line_bad():
    with pytest.raises(GraphError, match="line 7"):
        parse_line("Valve A has flow rate=x", 7)


def test_parse_file(sample_file):
    vertices = parse_file(sample_file)
    assert len(vertices) == 10
    assert vertices["DD"].neighbors == ("CC", "AA", "EE")


def test_parse_file_skips_blank_lines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(
        "Valve AA has flow rate=0; tunnel leads to valve BB\n\n"
        "Valve BB has flow rate=3; tunnel leads to valve AA\n"
    )
    assert set(parse_file(str(path))) == {"AA", "BB"}


def test_build_graph_is_read_only(sample):
    with pytest.raises(TypeError):
        sample["ZZ"] = make_vertex("ZZ", 0, [])


def test_build_graph_duplicate():
    with pytest.raises(GraphError, match="Duplicate valve 'AA'"):
        build_graph([make_vertex("AA", 0, []), make_vertex("AA", 3, [])])


def test_build_graph_unknown_neighbor():
    with pytest.raises(GraphError, match="unknown valve 'QQ'"):
        build_graph([make_vertex("AA", 0, ["BB"]), make_vertex("BB", 1, ["AA", "QQ"])])


def test_build_graph_negative_rate():
    with pytest.raises(GraphError, match="Negative flow rate"):
        build_graph([make_vertex("AA", -1, [])])
