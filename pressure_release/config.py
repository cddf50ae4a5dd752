"""Search parameters and the presets for the two puzzle variants."""

from dataclasses import dataclass
from typing import Optional

ORIGIN = "AA"
MAX_TIME = 30
TEAM_MAX_TIME = 26
# Opened valves are tracked as bits of an int; the search is exponential in
# this count, so larger networks are refused instead of slowly ground through.
# A single mover copes with the whole range. With two or more movers the
# state also holds every mover's destination and arrival time, so past about
# 15 valves with flow expect minutes rather than seconds even with bound
# pruning, and lower the limit or set deadline_seconds accordingly.
MAX_VALUABLE_VALVES = 24


@dataclass(frozen=True)
class SearchConfig:
    origin: str = ORIGIN
    time_budget: int = MAX_TIME
    agents: int = 1
    max_valuable_valves: int = MAX_VALUABLE_VALVES
    # Wall clock limit for one top-level search, None to run to exhaustion
    deadline_seconds: Optional[float] = None


DEFAULT_CONFIG = SearchConfig()
TEAM_CONFIG = SearchConfig(time_budget=TEAM_MAX_TIME, agents=2)
