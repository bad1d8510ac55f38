import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from itertools import combinations
from math import comb
from typing import Iterable, Optional

from tqdm import tqdm

from .config import SolverConfig
from .errors import MalformedInputError
from .search import ScoreCache, max_score
from .tunnels import DistanceTable, find_distances, working_valve_names
from .valve_map import ValveMap
from .valves import Vertex, load_puzzle_input

logger = logging.getLogger(__name__)


def score_partition(
    vertices: dict[str, Vertex],
    distances: DistanceTable,
    start: str,
    budget: int,
    mine: Iterable[str],
    theirs: Iterable[str],
    cache: Optional[ScoreCache] = None,
) -> int:
    """Pressure released when each agent only opens the valves assigned to it"""
    total = 0
    for assigned in (mine, theirs):
        valve_map = ValveMap.from_vertices(
            [vertices[start]] + [vertices[name] for name in assigned if name != start],
            distances,
        )
        total += max_score(start, {start}, budget, valve_map, cache)
    return total


def _best_split_of_size(
    vertices: dict[str, Vertex],
    distances: DistanceTable,
    start: str,
    budget: int,
    valves: list[str],
    their_share: int,
    progress: bool = False,
) -> int:
    cache: ScoreCache = {}
    best = 0
    everything = frozenset(valves)
    for theirs in tqdm(
        combinations(valves, their_share),
        total=comb(len(valves), their_share),
        disable=not progress,
        leave=False,
    ):
        theirs = frozenset(theirs)
        score = score_partition(
            vertices, distances, start, budget, everything - theirs, theirs, cache
        )
        if score > best:
            best = score
    return best


def split_workload(
    vertices: dict[str, Vertex],
    distances: DistanceTable,
    start: str,
    budget: int,
    workers: int = 1,
    progress: bool = False,
) -> int:
    # Swapping who does which share doesn't change the total, so only the
    # smaller half of the share sizes needs to be tried.
    valves = sorted(
        name for name in working_valve_names(vertices, start) if name != start
    )
    share_sizes = range(len(valves) // 2 + 1)
    if workers == 1:
        best = 0
        for their_share in share_sizes:
            logger.info(
                "splitting %d valves: %d for me, %d for the elephant",
                len(valves),
                len(valves) - their_share,
                their_share,
            )
            best = max(
                best,
                _best_split_of_size(
                    vertices, distances, start, budget, valves, their_share, progress
                ),
            )
        return best

    best = 0
    with ProcessPoolExecutor(max_workers=workers) as pool:
        futures = {
            pool.submit(
                _best_split_of_size, vertices, distances, start, budget, valves, their_share
            ): their_share
            for their_share in share_sizes
        }
        for future in tqdm(as_completed(futures), total=len(futures), disable=not progress):
            their_share = futures[future]
            score = future.result()
            logger.info(
                "splitting %d valves: %d for me, %d for the elephant -> %d",
                len(valves),
                len(valves) - their_share,
                their_share,
                score,
            )
            best = max(best, score)
    return best


def solve_two_agent(
    vertices: dict[str, Vertex],
    start: str,
    budget: int,
    workers: int = 1,
    progress: bool = False,
) -> int:
    if start not in vertices:
        raise MalformedInputError(f"start valve {start} is not in the graph")
    distances = find_distances(vertices, working_valve_names(vertices, start))
    return split_workload(vertices, distances, start, budget, workers, progress)


def solve(config: Optional[SolverConfig] = None) -> int:
    config = config or SolverConfig()
    vertices = load_puzzle_input(config)
    return solve_two_agent(
        vertices,
        config.start_valve,
        config.two_agent_budget,
        workers=config.workers,
        progress=config.progress,
    )


if __name__ == "__main__":
    print(solve(SolverConfig(progress=True)))
