"""Several movers sharing one clock and one set of valves.

Each mover is described by where it is headed and how many minutes are left
until it gets there and has the valve open. The search always jumps the clock
to the next arrival; every mover arriving at that moment picks its next valve
together with the others arriving with it, so simultaneous arrivals are one
joint decision rather than a sequence of individual ones.
"""

import itertools
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from pressure_release.distances import DistanceIndex
from pressure_release.solver import Move, candidate_moves, check_deadline

AgentTravel = tuple[str, int]  # destination, minutes until arrival
TeamCache = dict[tuple[tuple[AgentTravel, ...], int, int], int]


@dataclass(frozen=True)
class Opening:
    valve: str
    time_remaining: int


@dataclass(frozen=True)
class TeamStep:
    travels: tuple[AgentTravel, ...]  # Sorted!
    time_remaining: int
    opened: int
    reward: int
    openings: tuple[Opening, ...]


def starting_travels(origin: str, agents: int) -> tuple[AgentTravel, ...]:
    return ((origin, 0),) * agents


def _choice_key(choice: Optional[Move]) -> str:
    return "" if choice is None else choice.target


def _is_canonical(positions: list[str], choices: tuple[Optional[Move], ...]) -> bool:
    # Movers standing on the same valve are interchangeable, keep one ordering
    for i in range(len(positions) - 1):
        if positions[i] == positions[i + 1] and _choice_key(choices[i]) > _choice_key(
            choices[i + 1]
        ):
            return False
    return True


def joint_steps(
    index: DistanceIndex,
    travels: tuple[AgentTravel, ...],
    time_remaining: int,
    opened: int,
) -> Iterator[TeamStep]:
    """Advances to the next arrival and yields every joint choice of the
    movers arriving then.

    A mover may always decline, in which case it does nothing for the rest of
    the run and is dropped from the state. A mover with no valve in reach can
    only decline."""
    delta = min(minutes for _, minutes in travels)
    time_remaining -= delta
    free_positions = sorted(dest for dest, minutes in travels if minutes == delta)
    busy = [(dest, minutes - delta) for dest, minutes in travels if minutes > delta]
    options: list[list[Optional[Move]]] = [
        [None, *candidate_moves(index, position, time_remaining, opened)]
        for position in free_positions
    ]
    for choices in itertools.product(*options):
        if not _is_canonical(free_positions, choices):
            continue
        moves = [move for move in choices if move is not None]
        targets = {move.target for move in moves}
        if len(targets) != len(moves):
            continue
        new_opened = opened
        for target in targets:
            new_opened |= index.masks[target]
        yield TeamStep(
            travels=tuple(
                sorted(busy + [(move.target, move.minutes) for move in moves])
            ),
            time_remaining=time_remaining,
            opened=new_opened,
            reward=sum(move.reward for move in moves),
            openings=tuple(
                Opening(valve=move.target, time_remaining=move.time_remaining)
                for move in moves
            ),
        )


def reward_bound(
    index: DistanceIndex,
    travels: tuple[AgentTravel, ...],
    time_remaining: int,
    opened: int,
) -> int:
    """Reward if every closed valve were opened as soon as its nearest mover
    could get there. Never below what the movers can actually release."""
    bound = 0
    for valve in index.valuable:
        if opened & index.masks[valve]:
            continue
        latest = 0
        for dest, minutes in travels:
            distance = index.distances[dest].get(valve)
            if distance is not None:
                latest = max(latest, time_remaining - minutes - distance - 1)
        bound += index.flow_rates[valve] * latest
    return bound


def best_team_pressure(
    index: DistanceIndex,
    travels: tuple[AgentTravel, ...],
    time_remaining: int,
    opened: int,
    cache: TeamCache,
    deadline: Optional[float] = None,
) -> int:
    if len(travels) == 0 or time_remaining <= 0:
        return 0
    key = (travels, time_remaining, opened)
    if key in cache:
        return cache[key]
    check_deadline(deadline)
    # Most promising steps first, so the rest can be cut off by their bound
    steps = sorted(
        (
            (
                step.reward
                + reward_bound(index, step.travels, step.time_remaining, step.opened),
                step,
            )
            for step in joint_steps(index, travels, time_remaining, opened)
        ),
        key=lambda bounded: -bounded[0],
    )
    best = 0
    for bound, step in steps:
        if bound <= best:
            break
        best = max(
            best,
            step.reward
            + best_team_pressure(
                index,
                step.travels,
                step.time_remaining,
                step.opened,
                cache,
                deadline,
            ),
        )
    cache[key] = best
    return best


def plan_openings(
    index: DistanceIndex,
    travels: tuple[AgentTravel, ...],
    time_remaining: int,
    opened: int,
    cache: TeamCache,
    deadline: Optional[float] = None,
) -> list[Opening]:
    """Replays one best schedule out of a searched cache, latest opening last"""
    openings: list[Opening] = []
    best = best_team_pressure(index, travels, time_remaining, opened, cache, deadline)
    while best > 0:
        for step in joint_steps(index, travels, time_remaining, opened):
            rest = best_team_pressure(
                index,
                step.travels,
                step.time_remaining,
                step.opened,
                cache,
                deadline,
            )
            if step.reward + rest == best:
                openings.extend(step.openings)
                travels = step.travels
                time_remaining = step.time_remaining
                opened = step.opened
                best = rest
                break
        else:
            raise RuntimeError("Cache doesn't hold the searched state")
    return sorted(openings, key=lambda opening: -opening.time_remaining)
