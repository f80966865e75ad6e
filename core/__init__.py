# core/__init__.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Core module public API for the tableau decision procedure

"""Core components of the propositional tableau decision procedure.

This module decides satisfiability and validity of well-formed propositional
formulas with the analytic tableau method. A formula is decomposed by alpha
and beta expansion rules into alternative branches until every branch either
closes on a contradiction or consists of literals only.

Primary Components:
    Expansion, ExpansionKind, expand: The alpha/beta rule table
    Theory: The set of formulas making up one branch
    Tableau, SearchOrder: The queue of branches still under exploration
    SearchState: Running / satisfiable / unsatisfiable search states
    TableauSolver, SearchStats: The search driver and its counters
    is_satisfiable, is_valid: Convenience entry points

Example:
    >>> from parser import parse
    >>> from core import is_valid
    >>> is_valid(parse("((a^b)->a)"))
    True
"""

from .analysis import collect_variables, formula_depth, formula_size, formula_weight
from .exceptions import BranchLimitExceeded, RuleLookupError, SolverError
from .rules import Expansion, ExpansionKind, expand
from .search_state import SearchState
from .solver import SearchStats, TableauSolver, is_satisfiable, is_valid
from .tableau import SearchOrder, Tableau
from .theory import Theory

__all__ = [
    "Expansion",
    "ExpansionKind",
    "expand",
    "Theory",
    "Tableau",
    "SearchOrder",
    "SearchState",
    "SearchStats",
    "TableauSolver",
    "is_satisfiable",
    "is_valid",
    "SolverError",
    "RuleLookupError",
    "BranchLimitExceeded",
    "formula_size",
    "formula_weight",
    "formula_depth",
    "collect_variables",
]

__version__ = "1.0.0"
__description__ = "Core components for propositional tableau solving"
