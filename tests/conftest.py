from pathlib import Path

import pytest

from day_16.tunnels import find_distances, working_valve_names
from day_16.valves import Vertex, parse_lines

SAMPLE_INPUT = """\
Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
Valve BB has flow rate=13; tunnels lead to valves CC, AA
Valve CC has flow rate=2; tunnels lead to valves DD, BB
Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE
Valve EE has flow rate=3; tunnels lead to valves FF, DD
Valve FF has flow rate=0; tunnels lead to valves EE, GG
Valve GG has flow rate=0; tunnels lead to valves FF, HH
Valve HH has flow rate=22; tunnel leads to valve GG
Valve II has flow rate=0; tunnels lead to valves AA, JJ
Valve JJ has flow rate=21; tunnel leads to valve II
"""


def chain(flow_rates: list[int]) -> dict[str, Vertex]:
    """Valves V0 - V1 - ... laid out in a line, V0 first."""
    names = [f"V{i}" for i in range(len(flow_rates))]
    vertices = {}
    for i, (name, rate) in enumerate(zip(names, flow_rates)):
        neighbors = tuple(names[j] for j in (i - 1, i + 1) if 0 <= j < len(names))
        vertices[name] = Vertex(name=name, flow_rate=rate, neighbors=neighbors)
    return vertices


@pytest.fixture
def sample_vertices() -> dict[str, Vertex]:
    return parse_lines(SAMPLE_INPUT.splitlines())


@pytest.fixture
def sample_distances(sample_vertices):
    return find_distances(sample_vertices, working_valve_names(sample_vertices, "AA"))


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "day16.txt"
    path.write_text(SAMPLE_INPUT)
    return path


@pytest.fixture
def make_chain():
    return chain
