from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Optional, cast

from tqdm import tqdm

from pressure_release.config import SearchConfig
from pressure_release.graph import Graph
from pressure_release.logging import get_logger
from pressure_release.release import max_pressure

logger = get_logger(__name__)


@dataclass
class Problem:
    vertices: Graph
    time_budget: Optional[int] = None
    agents: Optional[int] = None
    origin: Optional[str] = None
    config: Optional[SearchConfig] = None


def _run(problem: Problem) -> int:
    return max_pressure(
        problem.vertices,
        time_budget=problem.time_budget,
        agents=problem.agents,
        origin=problem.origin,
        config=problem.config,
    )


def max_pressure_many(
    problems: list[Problem], parallelism: int = 1, progress: bool = False
) -> list[int]:
    """Scores independent problems, each search with its own cache.

    Results are in the order of `problems`. The first failing problem's
    exception is raised."""
    results: list[Optional[int]] = [None] * len(problems)
    if parallelism > 1:
        logger.debug(
            "Scoring %d problems on %d threads", len(problems), parallelism
        )
        with ThreadPoolExecutor(max_workers=parallelism) as executor:
            futures = {
                executor.submit(_run, problem): i for i, problem in enumerate(problems)
            }
            for future in tqdm(
                as_completed(futures), total=len(futures), disable=not progress
            ):
                results[futures[future]] = future.result()
    else:
        for i, problem in enumerate(tqdm(problems, disable=not progress)):
            results[i] = _run(problem)
    return cast(list[int], results)
