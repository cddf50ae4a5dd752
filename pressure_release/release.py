"""Entry points: best pressure release for a valve network."""

import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Union

from pressure_release.config import DEFAULT_CONFIG, SearchConfig
from pressure_release.coordinator import (
    Opening,
    TeamCache,
    best_team_pressure,
    plan_openings,
    starting_travels,
)
from pressure_release.distances import DistanceIndex, build_distance_index
from pressure_release.errors import ConfigurationError, GraphError, MissingOriginError
from pressure_release.graph import Graph, Vertex, build_graph, parse_file
from pressure_release.logging import get_logger
from pressure_release.solver import Cache, best_pressure

logger = get_logger(__name__)


@dataclass
class ReleasePlan:
    pressure: int
    openings: list[Opening] = field(default_factory=list)


def _as_graph(vertices: Union[Graph, Iterable[Vertex]]) -> Graph:
    # build_graph's own result is already checked
    if isinstance(vertices, MappingProxyType):
        return vertices
    if isinstance(vertices, Mapping):
        for name, vertex in vertices.items():
            if name != vertex.name:
                raise GraphError(f"Valve {vertex.name!r} is filed under {name!r}: {vertex}")
        vertices = vertices.values()
    return build_graph(vertices)


def _resolve(
    config: Optional[SearchConfig],
    time_budget: Optional[int],
    agents: Optional[int],
    origin: Optional[str],
) -> tuple[SearchConfig, int, int, str]:
    config = config or DEFAULT_CONFIG
    time_budget = config.time_budget if time_budget is None else time_budget
    agents = config.agents if agents is None else agents
    origin = config.origin if origin is None else origin
    if agents < 1:
        raise ConfigurationError(f"Need at least one agent, got {agents}")
    return config, time_budget, agents, origin


def _deadline(config: SearchConfig) -> Optional[float]:
    if config.deadline_seconds is None:
        return None
    return time.monotonic() + config.deadline_seconds


def max_pressure(
    vertices: Union[Graph, Iterable[Vertex]],
    time_budget: Optional[int] = None,
    agents: Optional[int] = None,
    origin: Optional[str] = None,
    config: Optional[SearchConfig] = None,
) -> int:
    """Most pressure `agents` movers starting at `origin` can release together
    within `time_budget` minutes.

    Arguments left as None are taken from `config` (DEFAULT_CONFIG when not
    given)."""
    config, time_budget, agents, origin = _resolve(config, time_budget, agents, origin)
    graph = _as_graph(vertices)
    if origin not in graph:
        raise MissingOriginError(f"Origin valve {origin!r} is not in the graph")
    if time_budget <= 0:
        return 0
    start = time.perf_counter()
    index = build_distance_index(graph, origin, config.max_valuable_valves)
    deadline = _deadline(config)
    if agents == 1:
        cache: Cache = {}
        result = best_pressure(index, origin, time_budget, 0, cache, deadline)
        cached_states = len(cache)
    else:
        team_cache: TeamCache = {}
        result = best_team_pressure(
            index, starting_travels(origin, agents), time_budget, 0, team_cache, deadline
        )
        cached_states = len(team_cache)
    logger.debug("Search cached %d states", cached_states)
    logger.info(
        "Released %d with %d agent(s) in %d minutes (%.3fs)",
        result,
        agents,
        time_budget,
        time.perf_counter() - start,
    )
    return result


def plan_release(
    vertices: Union[Graph, Iterable[Vertex]],
    time_budget: Optional[int] = None,
    agents: Optional[int] = None,
    origin: Optional[str] = None,
    config: Optional[SearchConfig] = None,
) -> ReleasePlan:
    """Like max_pressure, but also returns which valve gets opened when"""
    config, time_budget, agents, origin = _resolve(config, time_budget, agents, origin)
    graph = _as_graph(vertices)
    if origin not in graph:
        raise MissingOriginError(f"Origin valve {origin!r} is not in the graph")
    if time_budget <= 0:
        return ReleasePlan(pressure=0)
    index: DistanceIndex = build_distance_index(
        graph, origin, config.max_valuable_valves
    )
    deadline = _deadline(config)
    cache: TeamCache = {}
    travels = starting_travels(origin, agents)
    pressure = best_team_pressure(index, travels, time_budget, 0, cache, deadline)
    openings = plan_openings(index, travels, time_budget, 0, cache, deadline)
    return ReleasePlan(pressure=pressure, openings=openings)


def solve(
    path: str = "input.txt",
    time_budget: Optional[int] = None,
    agents: Optional[int] = None,
    origin: Optional[str] = None,
    config: Optional[SearchConfig] = None,
) -> int:
    return max_pressure(parse_file(path), time_budget, agents, origin, config)
