# core/exceptions.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Exceptions raised by the tableau decision procedure

"""Exceptions raised by the tableau core.

The decision procedure is total on well-formed formulas: neither exception
below is raised by an unbounded search over a formula built from the six
formula node types. They make the remaining failure modes explicit instead of
letting them surface as assertion failures deep inside the search loop.
"""


class SolverError(RuntimeError):
    """Base class for tableau solver failures."""

    pass


class RuleLookupError(SolverError):
    """Raised when a selected non-literal has no expansion rule.

    Unreachable for formulas made of the six known node types; indicates a
    foreign Formula subclass reached the solver.
    """

    pass


class BranchLimitExceeded(SolverError):
    """Raised when a search explores more branches than its configured limit.

    Attributes:
        limit: The configured maximum number of explored branches
    """

    def __init__(self, limit: int):
        super().__init__(f"Tableau search exceeded the limit of {limit} branches")
        self.limit = limit
