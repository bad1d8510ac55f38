class Day16Error(RuntimeError):
    pass


class MalformedInputError(Day16Error):
    """Raised for puzzle input that doesn't describe a valid valve graph."""


class MissingInputError(Day16Error):
    pass


class DisconnectedGraphError(Day16Error):
    """Raised when two working valves have no tunnel path between them.

    Puzzle inputs are always connected, so this means the graph was built
    wrong rather than something a caller can recover from.
    """
