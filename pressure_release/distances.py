from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from pressure_release.config import MAX_VALUABLE_VALVES
from pressure_release.errors import ConfigurationError, MissingOriginError
from pressure_release.graph import Graph
from pressure_release.logging import get_logger

logger = get_logger(__name__)


def hop_counts(vertices: Graph, source: str) -> dict[str, int]:
    """Number of tunnels on the shortest walk from source to every valve
    reachable from it"""
    hops = {source: 0}
    active_positions = [source]
    distance = 0
    while len(active_positions) > 0:
        distance += 1
        new_active_positions = []
        for active_position in active_positions:
            for neighbor in vertices[active_position].neighbors:
                if neighbor in hops:
                    # Already found path to there
                    continue
                hops[neighbor] = distance
                new_active_positions.append(neighbor)
        active_positions = new_active_positions
    return hops


@dataclass(frozen=True)
class DistanceIndex:
    """Shortest hop counts between the valves worth visiting.

    Rows exist for the origin and every valuable valve, and hold only the
    valuable valves reachable from the row's source. Each valuable valve owns
    one bit of the opened-set."""

    origin: str
    valuable: tuple[str, ...]
    flow_rates: Mapping[str, int]
    masks: Mapping[str, int]
    distances: Mapping[str, Mapping[str, int]]

    def distance(self, source: str, target: str) -> Optional[int]:
        return self.distances[source].get(target)

    def opened_names(self, opened: int) -> list[str]:
        return [name for name in self.valuable if opened & self.masks[name]]


def build_distance_index(
    vertices: Graph, origin: str, max_valuable_valves: int = MAX_VALUABLE_VALVES
) -> DistanceIndex:
    if origin not in vertices:
        raise MissingOriginError(f"Origin valve {origin!r} is not in the graph")
    valuable = tuple(
        sorted(vertex.name for vertex in vertices.values() if vertex.flow_rate > 0)
    )
    if len(valuable) > max_valuable_valves:
        raise ConfigurationError(
            f"{len(valuable)} valves have a flow rate, "
            f"at most {max_valuable_valves} are supported"
        )
    distances: dict[str, Mapping[str, int]] = {}
    for source in (origin,) + valuable:
        if source in distances:
            continue
        hops = hop_counts(vertices, source)
        distances[source] = MappingProxyType(
            {target: hops[target] for target in valuable if target in hops}
        )
    logger.debug(
        "Distance index over %d valuable valves from %d sources",
        len(valuable),
        len(distances),
    )
    return DistanceIndex(
        origin=origin,
        valuable=valuable,
        flow_rates=MappingProxyType(
            {name: vertices[name].flow_rate for name in valuable}
        ),
        masks=MappingProxyType({name: 1 << i for i, name in enumerate(valuable)}),
        distances=MappingProxyType(distances),
    )
