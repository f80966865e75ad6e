# parser/ast_nodes.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic formulas. Two formulas compare equal
exactly when their trees have the same shape and the same variable names at
corresponding positions. Theories and tableaux rely on this to de-duplicate
formulas and branches.

Formulas may be nested far deeper than the interpreter's recursion limit, so
no operation on a node recurses over the tree:
    - the structural hash is computed once at construction from the cached
      hashes of the children and stored in a slot
    - equality and `__str__` walk the tree with an explicit stack
    - visitors are driven bottom-up by `Formula.fold`, which receives each
      node together with the results already computed for its children

Node Types:
    Variable: Propositional variables
    Negation: Unary negation
    Conjunction, Disjunction, Implication, Biimplication: Binary connectives
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Protocol, Tuple, Union


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Visit methods receive the node and the results already produced for its
    children, in child order. Use `Formula.fold` to run a visitor over a tree.
    """

    def visit_variable(self, n: Variable): ...

    def visit_negation(self, n: Negation, operand): ...

    def visit_conjunction(self, n: Conjunction, left, right): ...

    def visit_disjunction(self, n: Disjunction, left, right): ...

    def visit_implication(self, n: Implication, premise, conclusion): ...

    def visit_biimplication(self, n: Biimplication, left, right): ...


@dataclass(frozen=True, slots=True, eq=False)
class Formula:
    """Base class for all propositional formula nodes.

    Every concrete node type implements `children` for traversal, `accept`
    for visitor dispatch and `_render_parts` for the canonical, fully
    parenthesised textual form accepted by the parser.
    """

    _hash: int = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "_hash", hash((type(self).__name__, *self._hash_parts())))

    def children(self) -> Tuple[Formula, ...]:
        """Immediate sub-formulas in left-to-right order."""
        return ()

    def accept(self, v: Visitor, *child_results):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node
            child_results: Results of the visitor on `children()`

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def fold(self, v: Visitor) -> Any:
        """Run a visitor bottom-up over the tree without recursion.

        Args:
            v: Visitor whose methods combine a node with its children's results

        Returns:
            The visitor's result for this node
        """
        results: List[Any] = []
        pending: List[Tuple[Formula, bool]] = [(self, False)]

        while pending:
            node, children_done = pending.pop()
            children = node.children()

            if children and not children_done:
                pending.append((node, True))
                pending.extend((child, False) for child in reversed(children))
                continue

            if children:
                child_results = results[-len(children):]
                del results[-len(children):]
                results.append(node.accept(v, *child_results))
            else:
                results.append(node.accept(v))

        return results[0]

    def is_literal(self) -> bool:
        """Check whether this formula is a literal.

        A literal is a propositional variable `p` or its single negation `(-p)`.
        The check stops after one negation level: `(-(-p))` is not a literal
        and has to be expanded by the double negation rule.

        Returns:
            True if the formula is a variable or a negated variable
        """
        return False

    def _hash_parts(self) -> Tuple[Any, ...]:
        return tuple(hash(child) for child in self.children())

    def _render_parts(self) -> Tuple[Union[str, Formula], ...]:
        raise NotImplementedError

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Formula):
            return NotImplemented

        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if type(left) is not type(right) or left._hash != right._hash:
                return False
            if isinstance(left, Variable):
                if left.name != right.name:
                    return False
                continue
            pending.extend(zip(left.children(), right.children()))

        return True

    def __str__(self) -> str:
        parts: List[str] = []
        pending: List[Union[str, Formula]] = [self]

        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            else:
                pending.extend(reversed(item._render_parts()))

        return "".join(parts)


@dataclass(frozen=True, slots=True, eq=False)
class Variable(Formula):
    """Propositional variable, the base case of the formula grammar.

    Attributes:
        name: Identifier of the variable (non-empty)
    """

    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Variable name must be a non-empty identifier")
        Formula.__post_init__(self)

    def accept(self, v: Visitor, *child_results):
        return v.visit_variable(self)

    def is_literal(self) -> bool:
        return True

    def _hash_parts(self) -> Tuple[Any, ...]:
        return (self.name,)

    def _render_parts(self) -> Tuple[Union[str, Formula], ...]:
        return (self.name,)


@dataclass(frozen=True, slots=True, eq=False)
class Negation(Formula):
    """Logical negation of a sub-formula.

    Attributes:
        operand: The formula being negated
    """

    operand: Formula

    def children(self) -> Tuple[Formula, ...]:
        return (self.operand,)

    def accept(self, v: Visitor, *child_results):
        return v.visit_negation(self, *child_results)

    def is_literal(self) -> bool:
        return isinstance(self.operand, Variable)

    def _render_parts(self) -> Tuple[Union[str, Formula], ...]:
        return ("(-", self.operand, ")")


@dataclass(frozen=True, slots=True, eq=False)
class Conjunction(Formula):
    """Binary formula whose main connective is logical AND.

    Attributes:
        left: Left conjunct
        right: Right conjunct
    """

    left: Formula
    right: Formula

    def children(self) -> Tuple[Formula, ...]:
        return (self.left, self.right)

    def accept(self, v: Visitor, *child_results):
        return v.visit_conjunction(self, *child_results)

    def _render_parts(self) -> Tuple[Union[str, Formula], ...]:
        return ("(", self.left, "^", self.right, ")")


@dataclass(frozen=True, slots=True, eq=False)
class Disjunction(Formula):
    """Binary formula whose main connective is logical OR.

    Attributes:
        left: Left disjunct
        right: Right disjunct
    """

    left: Formula
    right: Formula

    def children(self) -> Tuple[Formula, ...]:
        return (self.left, self.right)

    def accept(self, v: Visitor, *child_results):
        return v.visit_disjunction(self, *child_results)

    def _render_parts(self) -> Tuple[Union[str, Formula], ...]:
        return ("(", self.left, "|", self.right, ")")


@dataclass(frozen=True, slots=True, eq=False)
class Implication(Formula):
    """Binary formula whose main connective is material implication.

    Attributes:
        premise: Antecedent of the implication
        conclusion: Consequent of the implication
    """

    premise: Formula
    conclusion: Formula

    def children(self) -> Tuple[Formula, ...]:
        return (self.premise, self.conclusion)

    def accept(self, v: Visitor, *child_results):
        return v.visit_implication(self, *child_results)

    def _render_parts(self) -> Tuple[Union[str, Formula], ...]:
        return ("(", self.premise, "->", self.conclusion, ")")


@dataclass(frozen=True, slots=True, eq=False)
class Biimplication(Formula):
    """Binary formula whose main connective is the biconditional.

    Attributes:
        left: Left side of the biconditional
        right: Right side of the biconditional
    """

    left: Formula
    right: Formula

    def children(self) -> Tuple[Formula, ...]:
        return (self.left, self.right)

    def accept(self, v: Visitor, *child_results):
        return v.visit_biimplication(self, *child_results)

    def _render_parts(self) -> Tuple[Union[str, Formula], ...]:
        return ("(", self.left, "<->", self.right, ")")
