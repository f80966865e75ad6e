# core/search_state.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Search state enumeration for the tableau decision procedure

from enum import Enum, auto


class SearchState(Enum):
    """State of a tableau search.

    A search starts RUNNING with the tableau seeded from the input formula and
    ends in exactly one terminal state:

    Values:
        RUNNING: Queue non-empty, no verdict yet
        SATISFIABLE: A fully expanded, contradiction-free branch was found
        UNSATISFIABLE: Every branch closed and the queue is exhausted
    """

    RUNNING = auto()
    SATISFIABLE = auto()
    UNSATISFIABLE = auto()

    def __str__(self) -> str:
        """Generate string representation of the state.

        Returns:
            Human-readable state name
        """
        return self.name

    def is_terminal(self) -> bool:
        """Determine if the search has reached a verdict.

        Returns:
            True for SATISFIABLE or UNSATISFIABLE, False while RUNNING
        """
        return self in (SearchState.SATISFIABLE, SearchState.UNSATISFIABLE)
