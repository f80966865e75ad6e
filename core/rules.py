# core/rules.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Alpha/beta expansion rule table for propositional tableaux

"""Expansion rule table for the propositional tableau method.

Every non-literal formula matches exactly one of the rows below. Alpha rules
decompose a formula conjunctively: their outputs are asserted together in the
same branch. Beta rules decompose disjunctively: each output heads a branch of
its own.

    | Form          | Kind  | Outputs                 |
    | ------------- | ----- | ----------------------- |
    | (A^B)         | alpha | A, B                    |
    | (A<->B)       | alpha | (A->B), (B->A)          |
    | (-(-A))       | alpha | A                       |
    | (-(A|B))      | alpha | (-A), (-B)              |
    | (-(A->B))     | alpha | A, (-B)                 |
    | (A|B)         | beta  | A / B                   |
    | (-(A^B))      | beta  | (-A) / (-B)             |
    | (A->B)        | beta  | (-A) / B                |
    | (-(A<->B))    | beta  | (A^(-B)) / (B^(-A))     |

Every output has a strictly smaller `core.analysis.formula_weight` than the
formula it was derived from, which is what makes the search terminate.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from parser.ast_nodes import (
    Formula,
    Negation,
    Conjunction,
    Disjunction,
    Implication,
    Biimplication,
)


class ExpansionKind(Enum):
    """Classification of a tableau expansion."""

    ALPHA = auto()  # outputs stay in the same branch
    BETA = auto()  # each output starts its own branch

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Expansion:
    """Result of applying the rule table to a non-literal formula.

    Attributes:
        kind: Whether the outputs are conjunctive (alpha) or disjunctive (beta)
        formulas: One or two outputs for alpha, exactly two for beta
    """

    kind: ExpansionKind
    formulas: Tuple[Formula, ...]

    def __post_init__(self):
        if self.kind is ExpansionKind.BETA and len(self.formulas) != 2:
            raise ValueError("A beta expansion has exactly two outputs")
        if self.kind is ExpansionKind.ALPHA and not 1 <= len(self.formulas) <= 2:
            raise ValueError("An alpha expansion has one or two outputs")

    @classmethod
    def alpha(cls, *formulas: Formula) -> Expansion:
        return cls(ExpansionKind.ALPHA, tuple(formulas))

    @classmethod
    def beta(cls, first: Formula, second: Formula) -> Expansion:
        return cls(ExpansionKind.BETA, (first, second))

    def is_alpha(self) -> bool:
        return self.kind is ExpansionKind.ALPHA

    def __str__(self) -> str:
        separator = ", " if self.is_alpha() else " / "
        return separator.join(str(f) for f in self.formulas)


def expand(formula: Formula) -> Optional[Expansion]:
    """Look up the expansion rule for a formula.

    Args:
        formula: Formula to decompose

    Returns:
        The alpha or beta expansion of the formula, or None when no rule
        applies (literals)

    Raises:
        TypeError: If the argument is not a Formula
    """
    if not isinstance(formula, Formula):
        raise TypeError(f"Expected a Formula, got {type(formula).__name__}")

    if isinstance(formula, Conjunction):
        return Expansion.alpha(formula.left, formula.right)

    elif isinstance(formula, Biimplication):
        return Expansion.alpha(
            Implication(formula.left, formula.right),
            Implication(formula.right, formula.left),
        )

    elif isinstance(formula, Disjunction):
        return Expansion.beta(formula.left, formula.right)

    elif isinstance(formula, Implication):
        return Expansion.beta(Negation(formula.premise), formula.conclusion)

    elif isinstance(formula, Negation):
        return _expand_negation(formula.operand)

    return None


def _expand_negation(inner: Formula) -> Optional[Expansion]:
    """Expansion rules for a formula of the form (-inner)."""
    if isinstance(inner, Negation):
        return Expansion.alpha(inner.operand)

    elif isinstance(inner, Disjunction):
        return Expansion.alpha(Negation(inner.left), Negation(inner.right))

    elif isinstance(inner, Implication):
        return Expansion.alpha(inner.premise, Negation(inner.conclusion))

    elif isinstance(inner, Conjunction):
        return Expansion.beta(Negation(inner.left), Negation(inner.right))

    elif isinstance(inner, Biimplication):
        return Expansion.beta(
            Conjunction(inner.left, Negation(inner.right)),
            Conjunction(inner.right, Negation(inner.left)),
        )

    # (-p) for a variable p is a literal
    return None
