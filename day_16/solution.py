from typing import Optional

from .config import SolverConfig
from .errors import MalformedInputError
from .search import Route, best_route, max_score
from .tunnels import find_distances, working_valve_names
from .valve_map import ValveMap
from .valves import Vertex, load_puzzle_input


def build_full_map(vertices: dict[str, Vertex], start: str) -> ValveMap:
    if start not in vertices:
        raise MalformedInputError(f"start valve {start} is not in the graph")
    working = working_valve_names(vertices, start)
    distances = find_distances(vertices, working)
    return ValveMap.from_vertices([vertices[name] for name in working], distances)


def solve_single_agent(vertices: dict[str, Vertex], start: str, budget: int) -> int:
    valve_map = build_full_map(vertices, start)
    return max_score(start, {start}, budget, valve_map, cache={})


def find_single_agent_route(vertices: dict[str, Vertex], start: str, budget: int) -> Route:
    return best_route(start, budget, build_full_map(vertices, start))


def solve(config: Optional[SolverConfig] = None) -> tuple[int, Route]:
    config = config or SolverConfig()
    vertices = load_puzzle_input(config)
    route = find_single_agent_route(vertices, config.start_valve, config.single_agent_budget)
    return route.pressure_released, route


if __name__ == "__main__":
    print(solve())
