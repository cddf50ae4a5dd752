from pressure_release.config import DEFAULT_CONFIG, TEAM_CONFIG, SearchConfig
from pressure_release.coordinator import Opening
from pressure_release.distances import DistanceIndex, build_distance_index
from pressure_release.errors import (
    ConfigurationError,
    GraphError,
    MissingOriginError,
    SearchTimeoutError,
    ValveNetworkError,
)
from pressure_release.fanout import Problem, max_pressure_many
from pressure_release.graph import Graph, Vertex, build_graph, make_vertex, parse_file
from pressure_release.release import ReleasePlan, max_pressure, plan_release, solve

__all__ = [
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "DistanceIndex",
    "Graph",
    "GraphError",
    "MissingOriginError",
    "Opening",
    "Problem",
    "ReleasePlan",
    "SearchConfig",
    "SearchTimeoutError",
    "TEAM_CONFIG",
    "ValveNetworkError",
    "Vertex",
    "build_distance_index",
    "build_graph",
    "make_vertex",
    "max_pressure",
    "max_pressure_many",
    "parse_file",
    "plan_release",
    "solve",
]
