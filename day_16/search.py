from dataclasses import dataclass, field
from typing import Iterable, Optional

from .valve_map import ValveMap

# (position, valves still closed, minutes left) -> best pressure from here on.
# Only valid for maps cut from the same distance table and flow rates.
ScoreCache = dict[tuple[str, frozenset[str], int], int]


@dataclass
class Route:
    pressure_released: int
    path: list[tuple[str, int]] = field(default_factory=list)


def _best_from(
    position: str,
    closed: frozenset[str],
    time_remaining: int,
    valve_map: ValveMap,
    cache: Optional[ScoreCache],
) -> int:
    if cache is not None:
        key = (position, closed, time_remaining)
        if key in cache:
            return cache[key]
    best = 0
    for vertex in closed:
        candidate_time_remaining = time_remaining - valve_map.distance(position, vertex) - 1
        if candidate_time_remaining < 0:
            continue
        pressure = valve_map.flow_rate(vertex) * candidate_time_remaining + _best_from(
            vertex, closed - {vertex}, candidate_time_remaining, valve_map, cache
        )
        if pressure > best:
            best = pressure
    if cache is not None:
        cache[key] = best
    return best


def max_score(
    current_valve: str,
    visited: Iterable[str],
    remaining_time: int,
    valve_map: ValveMap,
    cache: Optional[ScoreCache] = None,
) -> int:
    """Most pressure that can still be released by opening valves of the map
    that aren't in visited, starting from current_valve with remaining_time
    minutes left. Walking a tunnel and opening a valve take a minute each."""
    closed = valve_map.all_valve_ids() - frozenset(visited) - {current_valve}
    return _best_from(current_valve, closed, remaining_time, valve_map, cache)


def best_route(
    start: str,
    remaining_time: int,
    valve_map: ValveMap,
    cache: Optional[ScoreCache] = None,
) -> Route:
    """An order of opening valves that achieves max_score. Ties go to the
    valve with the smallest name."""
    if cache is None:
        cache = {}
    closed = valve_map.all_valve_ids() - {start}
    position, time_remaining = start, remaining_time
    target = _best_from(position, closed, time_remaining, valve_map, cache)
    route = Route(pressure_released=target, path=[(start, remaining_time)])
    while target > 0:
        for vertex in sorted(closed):
            candidate_time_remaining = time_remaining - valve_map.distance(position, vertex) - 1
            if candidate_time_remaining < 0:
                continue
            gained = valve_map.flow_rate(vertex) * candidate_time_remaining
            rest = _best_from(vertex, closed - {vertex}, candidate_time_remaining, valve_map, cache)
            if gained + rest == target:
                break
        else:
            raise RuntimeError(f"no valve continues the best route from {position}")
        route.path.append((vertex, candidate_time_remaining))
        closed = closed - {vertex}
        position, time_remaining, target = vertex, candidate_time_remaining, rest
    return route
