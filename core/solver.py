# core/solver.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Tableau search driver deciding satisfiability and validity

"""Satisfiability and validity via the propositional tableau method.

The search keeps a queue of alternative theories (branches), seeded with the
single theory `{phi}`:

    Tableau <- [{phi}]
    while Tableau is not empty:
        Theory <- Dequeue(Tableau)
        if FullyExpanded(Theory) and not Contradictory(Theory):
            return true
        NonLiteral <- PickNonLiteral(Theory)
        case Expansion(NonLiteral) of
            alpha {a1, a2}: Theory' <- Theory[NonLiteral := a1, a2]
                            enqueue Theory' unless queued or contradictory
            beta  {b1, b2}: Theory1 <- Theory[NonLiteral := b1]
                            Theory2 <- Theory[NonLiteral := b2]
                            enqueue each unless queued or contradictory
    return false

Branches are checked for contradictions before they are queued: once a literal
and its negation share a branch, further expansion only adds members, so the
branch can be dropped immediately.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Optional

from parser.ast_nodes import Formula, Negation
from utils.logger import TableauLogger
from .analysis import collect_variables, formula_size
from .exceptions import BranchLimitExceeded, RuleLookupError
from .rules import expand
from .search_state import SearchState
from .tableau import SearchOrder, Tableau
from .theory import Theory


@dataclass
class SearchStats:
    """Counters describing the work done by one tableau search.

    Attributes:
        branches_explored: Theories taken off the tableau
        branches_enqueued: Theories put on the tableau (including the seed)
        branches_closed: Expanded theories dropped for containing a contradiction
        duplicates_skipped: Expanded theories dropped because an equal one was queued
        peak_queue_size: Largest number of theories queued at once
    """

    branches_explored: int = 0
    branches_enqueued: int = 0
    branches_closed: int = 0
    duplicates_skipped: int = 0
    peak_queue_size: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


class TableauSolver:
    """Tableau decision procedure with configurable search order and limits.

    The solver holds no global state. Diagnostics go to the logger handle
    passed in, if any; without one the search is silent.

    Attributes:
        order: Branch exploration order of the underlying tableau
        max_branches: Maximum number of branches a single search may explore,
            None for no limit
        stats: Counters of the most recent search
        state: State of the most recent search
    """

    def __init__(
        self,
        order: SearchOrder = SearchOrder.BREADTH_FIRST,
        max_branches: Optional[int] = None,
        logger: Optional[TableauLogger] = None,
    ):
        if max_branches is not None and max_branches < 1:
            raise ValueError("max_branches must be a positive integer")

        self.order = order
        self.max_branches = max_branches
        self.logger = logger
        self.stats = SearchStats()
        self.state = SearchState.RUNNING

    def run(self, formula: Formula) -> SearchState:
        """Search for an open, fully expanded branch of the formula's tableau.

        Args:
            formula: Well-formed formula to decide

        Returns:
            SearchState.SATISFIABLE or SearchState.UNSATISFIABLE

        Raises:
            BranchLimitExceeded: If max_branches is set and the search needs more
            RuleLookupError: If a non-literal without expansion rule is selected
        """
        self.stats = SearchStats()
        self.state = SearchState.RUNNING

        tableau = Tableau.seeded(formula, self.order)
        self._record_enqueue(tableau)

        if self._tracing():
            self.logger.search_start(
                str(formula), formula_size(formula), ", ".join(collect_variables(formula))
            )

        while not tableau.is_empty():
            theory = tableau.pop_front()
            self.stats.branches_explored += 1

            if self.max_branches is not None and self.stats.branches_explored > self.max_branches:
                raise BranchLimitExceeded(self.max_branches)

            if self._tracing():
                self.logger.branch_selected(str(theory), len(tableau))

            if theory.is_fully_expanded() and not theory.has_contradiction():
                if self._tracing():
                    self.logger.open_branch_found(str(theory))
                return self._finish(formula, SearchState.SATISFIABLE)

            self._expand_branch(theory, tableau)

        return self._finish(formula, SearchState.UNSATISFIABLE)

    def is_satisfiable(self, formula: Formula) -> bool:
        """Check whether some truth assignment makes the formula true."""
        return self.run(formula) is SearchState.SATISFIABLE

    def is_valid(self, formula: Formula) -> bool:
        """Check whether the formula is true under every assignment.

        A formula is valid exactly when its negation is unsatisfiable.
        """
        return not self.is_satisfiable(Negation(formula))

    def _expand_branch(self, theory: Theory, tableau: Tableau) -> None:
        """Apply the expansion rule of one non-literal and queue the resulting branches."""
        non_literal = theory.select_non_literal()
        if non_literal is None:
            # Fully expanded but contradictory: the branch closes
            self.stats.branches_closed += 1
            if self._tracing():
                self.logger.branch_closed(str(theory))
            return

        expansion = expand(non_literal)
        if expansion is None:
            raise RuleLookupError(f"No expansion rule applies to non-literal {non_literal}")

        if self._tracing():
            self.logger.expansion_applied(
                str(expansion.kind).capitalize(), str(non_literal), str(expansion)
            )

        if expansion.is_alpha():
            branch = theory.copy()
            branch.replace(non_literal, expansion.formulas)
            self._enqueue(branch, tableau)
        else:
            for output in expansion.formulas:
                branch = theory.copy()
                branch.replace(non_literal, (output,))
                self._enqueue(branch, tableau)

    def _enqueue(self, theory: Theory, tableau: Tableau) -> None:
        if tableau.contains(theory):
            self.stats.duplicates_skipped += 1
            if self._tracing():
                self.logger.duplicate_branch(str(theory))
            return

        if theory.has_contradiction():
            self.stats.branches_closed += 1
            if self._tracing():
                self.logger.branch_closed(str(theory))
            return

        tableau.push_back(theory)
        self._record_enqueue(tableau)

    def _record_enqueue(self, tableau: Tableau) -> None:
        self.stats.branches_enqueued += 1
        self.stats.peak_queue_size = max(self.stats.peak_queue_size, len(tableau))

    def _finish(self, formula: Formula, state: SearchState) -> SearchState:
        self.state = state
        if self._tracing():
            self.logger.search_result(str(formula), str(state))
        return state

    def _tracing(self) -> bool:
        return self.logger is not None and self.logger.is_debug_enabled()


def is_satisfiable(formula: Formula, logger: Optional[TableauLogger] = None) -> bool:
    """Decide whether the formula is satisfiable.

    Args:
        formula: Well-formed formula
        logger: Optional logger receiving the search trace at DEBUG level

    Returns:
        True if some assignment makes the formula true
    """
    return TableauSolver(logger=logger).is_satisfiable(formula)


def is_valid(formula: Formula, logger: Optional[TableauLogger] = None) -> bool:
    """Decide whether the formula is valid (true under every assignment).

    Args:
        formula: Well-formed formula
        logger: Optional logger receiving the search trace at DEBUG level

    Returns:
        True if the negation of the formula is unsatisfiable
    """
    return TableauSolver(logger=logger).is_valid(formula)
