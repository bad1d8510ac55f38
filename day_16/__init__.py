"""Advent of Code 2022, day 16: Proboscidea Volcanium."""

from .config import SolverConfig
from .errors import Day16Error, DisconnectedGraphError, MalformedInputError, MissingInputError
from .search import Route, best_route, max_score
from .solution import solve_single_agent
from .solution2 import solve_two_agent
from .valves import Vertex, parse_file, parse_lines

TITLE = "Proboscidea Volcanium"

__all__ = [
    "TITLE",
    "SolverConfig",
    "Day16Error",
    "DisconnectedGraphError",
    "MalformedInputError",
    "MissingInputError",
    "Route",
    "best_route",
    "max_score",
    "solve_single_agent",
    "solve_two_agent",
    "Vertex",
    "parse_file",
    "parse_lines",
]
