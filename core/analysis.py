# core/analysis.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Structural measures over formula trees

"""Structural measures of formulas, implemented as AST visitors.

The measures feed the solver's debug trace and search statistics, and
`formula_weight` is the well-founded measure behind termination: every output
of an expansion rule weighs strictly less than its input. Plain node counts
are not enough for that, because `(A<->B)` expands to `(A->B)` which has the
same number of nodes; biimplications are therefore weighted as the two
implications they stand for.

Visitors are run with `Formula.fold`, so each visit method combines the
results already computed for the node's children.
"""

from __future__ import annotations
from typing import FrozenSet, List

from parser import ast_nodes as ast


class _SizeVisitor(ast.Visitor):
    """Counts the nodes of a formula tree."""

    def visit_variable(self, n: ast.Variable) -> int:
        return 1

    def visit_negation(self, n: ast.Negation, operand: int) -> int:
        return 1 + operand

    def visit_conjunction(self, n: ast.Conjunction, left: int, right: int) -> int:
        return 1 + left + right

    def visit_disjunction(self, n: ast.Disjunction, left: int, right: int) -> int:
        return 1 + left + right

    def visit_implication(self, n: ast.Implication, premise: int, conclusion: int) -> int:
        return 1 + premise + conclusion

    def visit_biimplication(self, n: ast.Biimplication, left: int, right: int) -> int:
        return 1 + left + right


class _WeightVisitor(_SizeVisitor):
    """Node count with each biimplication counted as two implications."""

    def visit_biimplication(self, n: ast.Biimplication, left: int, right: int) -> int:
        return 3 + 2 * (left + right)


class _DepthVisitor(ast.Visitor):
    """Computes the nesting depth of a formula tree."""

    def visit_variable(self, n: ast.Variable) -> int:
        return 1

    def visit_negation(self, n: ast.Negation, operand: int) -> int:
        return 1 + operand

    def visit_conjunction(self, n: ast.Conjunction, left: int, right: int) -> int:
        return 1 + max(left, right)

    def visit_disjunction(self, n: ast.Disjunction, left: int, right: int) -> int:
        return 1 + max(left, right)

    def visit_implication(self, n: ast.Implication, premise: int, conclusion: int) -> int:
        return 1 + max(premise, conclusion)

    def visit_biimplication(self, n: ast.Biimplication, left: int, right: int) -> int:
        return 1 + max(left, right)


class _VariableCollector(ast.Visitor):
    """Collects the variable names occurring in a formula."""

    def visit_variable(self, n: ast.Variable) -> FrozenSet[str]:
        return frozenset((n.name,))

    def visit_negation(self, n: ast.Negation, operand: FrozenSet[str]) -> FrozenSet[str]:
        return operand

    def visit_conjunction(self, n, left, right) -> FrozenSet[str]:
        return left | right

    def visit_disjunction(self, n, left, right) -> FrozenSet[str]:
        return left | right

    def visit_implication(self, n, premise, conclusion) -> FrozenSet[str]:
        return premise | conclusion

    def visit_biimplication(self, n, left, right) -> FrozenSet[str]:
        return left | right


def formula_size(formula: ast.Formula) -> int:
    """Number of nodes (sub-formula occurrences) in the formula."""
    return formula.fold(_SizeVisitor())


def formula_weight(formula: ast.Formula) -> int:
    """Termination measure: strictly decreases from a formula to each of its expansion outputs."""
    return formula.fold(_WeightVisitor())


def formula_depth(formula: ast.Formula) -> int:
    """Nesting depth of the formula; a variable has depth 1."""
    return formula.fold(_DepthVisitor())


def collect_variables(formula: ast.Formula) -> List[str]:
    """Sorted names of the variables occurring in the formula."""
    return sorted(formula.fold(_VariableCollector()))
