# tests/core_tests/test_solver.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Test suite for the tableau search driver

"""Test suite for satisfiability and validity decisions.

Formulas are built directly from AST nodes so that these tests exercise the
core without going through the parser.
"""

import pytest
from parser.ast_nodes import (
    Variable,
    Negation,
    Conjunction,
    Disjunction,
    Implication,
    Biimplication,
)
from core import (
    BranchLimitExceeded,
    RuleLookupError,
    SearchOrder,
    SearchState,
    TableauSolver,
    is_satisfiable,
    is_valid,
)
from parser.ast_nodes import Formula
from utils.logger import LogLevel, TableauLogger


a, b, c = Variable("a"), Variable("b"), Variable("c")


class TestSatisfiabilityAndValidity:
    """Known satisfiable / valid verdicts for small formulas."""

    CASES = [
        # (description, formula, satisfiable, valid)
        ("variable", a, True, False),
        ("negated variable", Negation(a), True, False),
        ("conjunction same variable", Conjunction(a, a), True, False),
        ("conjunction", Conjunction(a, b), True, False),
        ("disjunction same variable", Disjunction(a, a), True, False),
        ("disjunction", Disjunction(a, b), True, False),
        ("implication", Implication(a, b), True, False),
        ("biimplication", Biimplication(a, b), True, False),
        ("contradiction", Conjunction(a, Negation(a)), False, False),
        ("excluded middle", Disjunction(a, Negation(a)), True, True),
        (
            "excluded middle nested negation",
            Disjunction(Negation(a), Negation(Negation(a))),
            True,
            True,
        ),
        ("self implication", Implication(a, a), True, True),
        ("negated self implication", Implication(Negation(a), Negation(a)), True, True),
        ("self biimplication", Biimplication(a, a), True, True),
        ("negated self biimplication", Biimplication(Negation(a), Negation(a)), True, True),
        ("conjunction elimination", Implication(Conjunction(a, b), a), True, True),
        ("double negation", Negation(Negation(a)), True, False),
        ("double negation contradiction", Conjunction(Negation(Negation(a)), Negation(a)), False, False),
        (
            "hypothetical syllogism",
            Implication(Conjunction(Implication(a, b), Implication(b, c)), Implication(a, c)),
            True,
            True,
        ),
        (
            "contraposition",
            Biimplication(Implication(a, b), Implication(Negation(b), Negation(a))),
            True,
            True,
        ),
        (
            "de morgan",
            Biimplication(Negation(Conjunction(a, b)), Disjunction(Negation(a), Negation(b))),
            True,
            True,
        ),
        ("negated biimplication", Negation(Biimplication(a, b)), True, False),
        ("negated self biimplication unsat", Negation(Biimplication(a, a)), False, False),
        ("affirming the consequent", Implication(Conjunction(Implication(a, b), b), a), True, False),
        (
            "three way contradiction",
            Conjunction(Conjunction(Disjunction(a, b), Negation(a)), Negation(b)),
            False,
            False,
        ),
    ]

    @pytest.mark.parametrize(
        "description, formula, satisfiable, valid",
        CASES,
        ids=[case[0] for case in CASES],
    )
    def test_verdicts(self, description, formula, satisfiable, valid):
        assert is_satisfiable(formula) is satisfiable
        assert is_valid(formula) is valid

    @pytest.mark.parametrize(
        "description, formula, satisfiable, valid",
        CASES,
        ids=[case[0] for case in CASES],
    )
    def test_validity_is_unsatisfiable_negation(self, description, formula, satisfiable, valid):
        assert is_valid(formula) == (not is_satisfiable(Negation(formula)))

    @pytest.mark.parametrize(
        "description, formula, satisfiable, valid",
        CASES,
        ids=[case[0] for case in CASES],
    )
    def test_depth_first_agrees(self, description, formula, satisfiable, valid):
        solver = TableauSolver(order=SearchOrder.DEPTH_FIRST)
        assert solver.is_satisfiable(formula) is satisfiable
        assert solver.is_valid(formula) is valid


class TestSolverState:
    """Test cases for search states and statistics."""

    def test_run_returns_terminal_state(self):
        solver = TableauSolver()

        assert solver.state is SearchState.RUNNING
        assert solver.run(Disjunction(a, b)) is SearchState.SATISFIABLE
        assert solver.state.is_terminal()
        assert solver.run(Conjunction(a, Negation(a))) is SearchState.UNSATISFIABLE

    def test_running_is_not_terminal(self):
        assert not SearchState.RUNNING.is_terminal()
        assert str(SearchState.SATISFIABLE) == "SATISFIABLE"

    def test_literal_needs_single_branch(self):
        solver = TableauSolver()
        solver.run(a)

        assert solver.stats.branches_explored == 1
        assert solver.stats.branches_enqueued == 1
        assert solver.stats.peak_queue_size == 1

    def test_closed_branches_are_counted(self):
        solver = TableauSolver()
        solver.run(Conjunction(a, Negation(a)))

        assert solver.stats.branches_closed == 1
        assert solver.stats.branches_explored == 1

    def test_duplicate_branches_are_skipped(self):
        """(a|a) splits into two identical branches {a}; only one is queued."""
        solver = TableauSolver()
        solver.run(Disjunction(a, a))

        assert solver.stats.duplicates_skipped == 1
        assert solver.stats.branches_enqueued == 2

    def test_stats_reset_between_runs(self):
        solver = TableauSolver()
        solver.run(Implication(Conjunction(a, b), c))
        solver.run(a)

        assert solver.stats.branches_explored == 1

    def test_stats_as_dict(self):
        solver = TableauSolver()
        solver.run(a)

        assert solver.stats.as_dict() == {
            "branches_explored": 1,
            "branches_enqueued": 1,
            "branches_closed": 0,
            "duplicates_skipped": 0,
            "peak_queue_size": 1,
        }


def _chain(depth: int) -> Formula:
    """((x0|x1)^((x1|x2)^...)) with `depth` disjunctions."""
    variables = [Variable(f"x{i}") for i in range(depth + 1)]
    formula = Disjunction(variables[0], variables[1])
    for i in range(1, depth):
        formula = Conjunction(formula, Disjunction(variables[i], variables[i + 1]))
    return formula


class TestTermination:
    """Test cases for bounded search effort."""

    @pytest.mark.parametrize("depth", [1, 2, 4, 6])
    def test_branch_count_bounded_by_formula_size(self, depth):
        formula = Negation(_chain(depth))
        solver = TableauSolver()
        solver.is_satisfiable(formula)

        # Each explored branch is a distinct subset of the finitely many formulas
        # reachable by expansion; for this family 4**depth is a generous ceiling.
        assert solver.stats.branches_explored <= 4 ** (depth + 1)

    def test_branch_limit_aborts_search(self):
        solver = TableauSolver(max_branches=2)

        with pytest.raises(BranchLimitExceeded) as exc_info:
            solver.is_valid(_chain(5))

        assert exc_info.value.limit == 2

    def test_branch_limit_not_hit_for_small_search(self):
        solver = TableauSolver(max_branches=1)
        assert solver.is_satisfiable(a)

    def test_invalid_branch_limit_rejected(self):
        with pytest.raises(ValueError):
            TableauSolver(max_branches=0)


class _Opaque(Formula):
    """A formula node unknown to the rule table."""

    __slots__ = ()

    def __str__(self) -> str:
        return "<opaque>"


class TestInternalErrors:
    """Test cases for explicit internal errors."""

    def test_unknown_non_literal_raises_rule_lookup_error(self):
        with pytest.raises(RuleLookupError):
            is_satisfiable(Conjunction(a, _Opaque()))


class TestSearchTrace:
    """Test cases for the explicit logger handle."""

    def test_debug_trace_written_to_given_logger(self, capsys):
        logger = TableauLogger("tableau_solver_trace_test", LogLevel.DEBUG)

        assert is_valid(Implication(a, a), logger=logger)

        output = capsys.readouterr().out
        assert "Starting Tableau Search" in output
        assert "Alpha expansion" in output
        assert "UNSATISFIABLE" in output

    def test_no_trace_below_debug_level(self, capsys):
        logger = TableauLogger("tableau_solver_quiet_test", LogLevel.INFO)

        assert is_satisfiable(Disjunction(a, b), logger=logger)
        assert capsys.readouterr().out == ""
