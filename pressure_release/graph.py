import re
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pressure_release.errors import GraphError
from pressure_release.logging import get_logger

logger = get_logger(__name__)

LINE_REGEX = re.compile(
    "^Valve ([A-Z]{2}) has flow rate=([0-9]+); tunnel(?:s)? lead(?:s)? to valve(?:s)? ((?:[A-Z]{2}(?:, )?)+)$"
)


@dataclass(frozen=True)
class Vertex:
    name: str
    flow_rate: int
    neighbors: tuple[str, ...]


Graph = Mapping[str, Vertex]


def make_vertex(name: str, flow_rate: int, neighbors: Iterable[str]) -> Vertex:
    return Vertex(
        name=sys.intern(name),
        flow_rate=flow_rate,
        neighbors=tuple(sys.intern(neighbor) for neighbor in neighbors),
    )


def build_graph(vertices: Iterable[Vertex]) -> Graph:
    """Indexes the valves by name and checks every tunnel leads somewhere.

    Tunnels are assumed to be listed from both ends, that is not checked."""
    results: dict[str, Vertex] = {}
    for vertex in vertices:
        if vertex.name in results:
            raise GraphError(f"Duplicate valve {vertex.name!r}: {vertex}")
        if vertex.flow_rate < 0:
            raise GraphError(f"Negative flow rate on valve {vertex.name!r}: {vertex}")
        results[vertex.name] = vertex
    for vertex in results.values():
        for neighbor in vertex.neighbors:
            if neighbor not in results:
                raise GraphError(
                    f"Valve {vertex.name!r} leads to unknown valve {neighbor!r}: {vertex}"
                )
    logger.debug("Built graph with %d valves", len(results))
    return MappingProxyType(results)


def parse_line(line: str, line_number: int = 0) -> Vertex:
    match = LINE_REGEX.match(line.rstrip("\n"))
    if match is None:
        raise GraphError(f"Can't parse line {line_number}: {line.rstrip()!r}")
    name, flow_str, neighbors_str = match.groups()
    return make_vertex(name, int(flow_str), neighbors_str.split(", "))


def parse_file(path: str) -> Graph:
    with open(path, "r") as f:
        vertices = [
            parse_line(line, i + 1)
            for i, line in enumerate(f.readlines())
            if line.strip()
        ]
    return build_graph(vertices)
