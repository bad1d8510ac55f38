from dataclasses import dataclass, field, replace
from pathlib import Path

START_VALVE = "AA"
SINGLE_AGENT_BUDGET = 30
TWO_AGENT_BUDGET = 26


@dataclass(frozen=True)
class SolverConfig:
    """Settings for one run of the day 16 solvers.

    Attributes:
        start_valve: Valve both agents start at.
        single_agent_budget: Minutes available when working alone.
        two_agent_budget: Minutes available to each agent when working with the elephant.
        input_dir: Directory holding the puzzle inputs.
        input_filename: Name of the day 16 input inside input_dir.
        workers: Processes used by the workload splitter. 1 keeps it in-process.
        progress: Show a tqdm progress bar while splitting the workload.
    """

    start_valve: str = START_VALVE
    single_agent_budget: int = SINGLE_AGENT_BUDGET
    two_agent_budget: int = TWO_AGENT_BUDGET
    input_dir: Path = field(default_factory=lambda: Path("assets/inputs"))
    input_filename: str = "day16.txt"
    workers: int = 1
    progress: bool = False

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def input_path(self) -> Path:
        return Path(self.input_dir) / self.input_filename

    def with_overrides(self, **changes) -> "SolverConfig":
        """Copy of this config with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
