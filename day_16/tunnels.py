import logging
from typing import Iterable

from .errors import DisconnectedGraphError
from .valves import Vertex

logger = logging.getLogger(__name__)

DistanceTable = dict[tuple[str, str], int]


def working_valve_names(vertices: dict[str, Vertex], start: str) -> list[str]:
    return sorted(
        vertex.name
        for vertex in vertices.values()
        if vertex.flow_rate > 0 or vertex.name == start
    )


def distances_from(vertices: dict[str, Vertex], source: str) -> dict[str, int]:
    """Minutes needed to walk from source to every valve reachable from it"""
    distances = {source: 0}
    active_positions = [source]
    while len(active_positions) > 0:
        new_active_positions = []
        for active_position in active_positions:
            for neighbor in vertices[active_position].neighbors:
                if neighbor in distances:
                    # Already found path to there
                    continue
                distances[neighbor] = distances[active_position] + 1
                new_active_positions.append(neighbor)
        active_positions = new_active_positions
    return distances


def find_distances(vertices: dict[str, Vertex], working: Iterable[str]) -> DistanceTable:
    """Creates a table with the shortest walk between every pair of working
    valves. Every other valve is only passed through on the way."""
    working = list(working)
    result: DistanceTable = {}
    for source in working:
        reachable = distances_from(vertices, source)
        for target in working:
            if target not in reachable:
                raise DisconnectedGraphError(f"no tunnels lead from {source} to {target}")
            result[(source, target)] = reachable[target]
    logger.debug("computed %d distances between %d working valves", len(result), len(working))
    return result
