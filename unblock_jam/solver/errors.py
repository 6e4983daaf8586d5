"""
Errors Module - Failure types surfaced by level loading and search.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .solution import Solution


class PuzzleError(Exception):
    """Base class for all puzzle engine errors."""


class InvalidLevelError(PuzzleError, ValueError):
    """
    Raised when board or piece geometry is malformed.

    Surfaced at construction/load time, before any search starts.
    """


class SearchFailure(PuzzleError):
    """
    Base class for unsuccessful search results.

    The search engine never raises these itself; Solution.raise_for_status()
    converts a non-solved status for callers that prefer exceptions.

    Attributes:
        solution: The Solution that carried the failure status
    """

    def __init__(self, message: str, solution: "Solution"):
        super().__init__(message)
        self.solution = solution


class SearchLimitExceeded(SearchFailure):
    """Iteration budget exhausted before reaching the goal."""


class NoSolution(SearchFailure):
    """Frontier exhausted: the puzzle cannot be solved from this state."""


class SearchCancelled(SearchFailure):
    """Search stopped at a checkpoint because cancellation was requested."""
