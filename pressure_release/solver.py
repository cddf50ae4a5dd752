import time
from collections.abc import Iterator
from typing import NamedTuple, Optional

from pressure_release.distances import DistanceIndex
from pressure_release.errors import SearchTimeoutError


class Move(NamedTuple):
    """Walking to a valve and opening it"""

    target: str
    minutes: int  # tunnels walked plus the minute spent opening
    time_remaining: int  # once the valve is open
    opened: int
    reward: int


Cache = dict[tuple[str, int, int], int]


def check_deadline(deadline: Optional[float]) -> None:
    if deadline is not None and time.monotonic() > deadline:
        raise SearchTimeoutError("Search ran past its deadline")


def candidate_moves(
    index: DistanceIndex, position: str, time_remaining: int, opened: int
) -> Iterator[Move]:
    for target, distance in index.distances[position].items():
        mask = index.masks[target]
        if opened & mask:
            continue
        minutes = distance + 1
        if minutes > time_remaining:
            continue
        new_time_remaining = time_remaining - minutes
        yield Move(
            target=target,
            minutes=minutes,
            time_remaining=new_time_remaining,
            opened=opened | mask,
            reward=index.flow_rates[target] * new_time_remaining,
        )


def best_pressure(
    index: DistanceIndex,
    position: str,
    time_remaining: int,
    opened: int,
    cache: Cache,
    deadline: Optional[float] = None,
) -> int:
    """Most pressure a single mover standing at `position` can still release.

    Valves already open are accounted for by the caller, only valves opened
    from here on count."""
    if time_remaining <= 0:
        return 0
    key = (position, time_remaining, opened)
    if key in cache:
        return cache[key]
    check_deadline(deadline)
    best = 0
    for move in candidate_moves(index, position, time_remaining, opened):
        best = max(
            best,
            move.reward
            + best_pressure(
                index, move.target, move.time_remaining, move.opened, cache, deadline
            ),
        )
    cache[key] = best
    return best
