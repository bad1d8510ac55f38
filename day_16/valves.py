import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from .config import SolverConfig
from .errors import MalformedInputError, MissingInputError

logger = logging.getLogger(__name__)

LINE_REGEX = re.compile(
    "^Valve ([A-Z]{2}) has flow rate=([0-9]+); tunnel(?:s)? lead(?:s)? to valve(?:s)? ((?:[A-Z]{2}(?:, )?)+)$"
)


@dataclass(frozen=True)
class Vertex:
    name: str
    flow_rate: int
    neighbors: tuple[str, ...]


def parse_lines(lines: Iterable[str]) -> dict[str, Vertex]:
    results: dict[str, Vertex] = {}
    for i, line in enumerate(lines):
        line = line.rstrip("\n")
        if not line.strip():
            continue
        match = LINE_REGEX.match(line)
        if match is None:
            raise MalformedInputError(f"line {i + 1} is not a valve record: {line!r}")
        name, flow_str, neighbors_str = match.groups()
        if name in results:
            raise MalformedInputError(f"valve {name} is defined twice (line {i + 1})")
        results[name] = Vertex(
            name=name,
            flow_rate=int(flow_str),
            neighbors=tuple(neighbors_str.split(", ")),
        )
    for vertex in results.values():
        unknown = [n for n in vertex.neighbors if n not in results]
        if unknown:
            raise MalformedInputError(
                f"valve {vertex.name} leads to unknown valve(s) {', '.join(unknown)}"
            )
    logger.debug("parsed %d valves", len(results))
    return results


def parse_file(path: Union[str, Path]) -> dict[str, Vertex]:
    with open(path, "r") as f:
        return parse_lines(f.readlines())


def load_puzzle_input(config: SolverConfig) -> dict[str, Vertex]:
    path = config.input_path
    if not path.is_file():
        raise MissingInputError(f"missing input file: {path}")
    return parse_file(path)
