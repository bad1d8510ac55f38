from dataclasses import dataclass
from typing import Iterable

from .tunnels import DistanceTable
from .valves import Vertex


@dataclass(frozen=True)
class ValveMap:
    """The valves one agent is responsible for and the walks between them."""

    flow_rates: dict[str, int]
    distances: DistanceTable

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex], distances: DistanceTable) -> "ValveMap":
        flow_rates = {vertex.name: vertex.flow_rate for vertex in vertices}
        return cls(
            flow_rates=flow_rates,
            distances={
                (a, b): distances[(a, b)] for a in flow_rates for b in flow_rates
            },
        )

    def distance(self, a: str, b: str) -> int:
        return self.distances[(a, b)]

    def flow_rate(self, valve: str) -> int:
        return self.flow_rates[valve]

    def all_valve_ids(self) -> frozenset[str]:
        return frozenset(self.flow_rates)
