from pressure_release.graph import Graph, build_graph, make_vertex, parse_line

SAMPLE_LINES = [
    "Valve AA has flow rate=0; tunnels lead to valves DD, II, BB",
    "Valve BB has flow rate=13; tunnels lead to valves CC, AA",
    "Valve CC has flow rate=2; tunnels lead to valves DD, BB",
    "Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE",
    "Valve EE has flow rate=3; tunnels lead to valves FF, DD",
    "Valve FF has flow rate=0; tunnels lead to valves EE, GG",
    "Valve GG has flow rate=0; tunnels lead to valves FF, HH",
    "Valve HH has flow rate=22; tunnel leads to valve GG",
    "Valve II has flow rate=0; tunnels lead to valves AA, JJ",
    "Valve JJ has flow rate=21; tunnel leads to valve II",
]


def sample_network() -> Graph:
    return build_graph(parse_line(line, i + 1) for i, line in enumerate(SAMPLE_LINES))


def network(rates: dict[str, int], tunnels: list[tuple[str, str]]) -> Graph:
    """Builds a graph from flow rates and undirected tunnels"""
    neighbors: dict[str, list[str]] = {name: [] for name in rates}
    for a, b in tunnels:
        neighbors[a].append(b)
        neighbors[b].append(a)
    return build_graph(
        make_vertex(name, rate, neighbors[name]) for name, rate in rates.items()
    )


def corridor(length: int, rate: int) -> Graph:
    """AA, then `length` - 1 empty valves, then one valve of `rate`"""
    names = ["AA"] + [f"C{i}" for i in range(1, length)] + ["ZZ"]
    rates = {name: 0 for name in names}
    rates["ZZ"] = rate
    return network(rates, list(zip(names, names[1:])))
