# core/theory.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Theory: the set of formulas making up one tableau branch

from __future__ import annotations
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Tuple

from parser.ast_nodes import Formula, Variable, Negation


class Theory:
    """A set of formulas corresponding to one branch of the tableau tree.

    The branch represents the conjunction of its members: it describes a
    satisfying scenario only if every member can hold at once. Membership is
    de-duplicated by structural formula equality. Members are kept in
    insertion order so that the choice of the next formula to expand is
    deterministic; the order carries no logical meaning and is ignored by
    equality.
    """

    __slots__ = ("_formulas",)

    def __init__(self, formulas: Iterable[Formula] = ()):
        self._formulas: Dict[Formula, None] = dict.fromkeys(formulas)

    @classmethod
    def from_formula(cls, formula: Formula) -> Theory:
        """Construct a theory seeded with a single formula."""
        return cls((formula,))

    def add(self, formula: Formula) -> None:
        """Add a formula to the theory, doing nothing if it is already present."""
        self._formulas.setdefault(formula, None)

    def copy(self) -> Theory:
        """Return an independent copy of this theory."""
        return Theory(self._formulas)

    def is_fully_expanded(self) -> bool:
        """Check whether every member is a literal (`p` or `(-p)`)."""
        return all(f.is_literal() for f in self._formulas)

    def has_contradiction(self) -> bool:
        """Check whether the theory contains a literal `p` and its negation `(-p)`.

        Scans the members once, tracking for each variable name whether its
        positive and negative literal have been seen, and stops at the first
        variable with both. Non-literals are skipped, so `(-(-p))` next to `p`
        is not a contradiction.

        Time O(n) over the members, extra space O(k) for k variable names.

        Returns:
            True if some variable occurs both positively and negatively
        """
        # variable name -> (has_positive, has_negative)
        occurrences: Dict[str, Tuple[bool, bool]] = {}

        for formula in self._formulas:
            if isinstance(formula, Variable):
                name, positive = formula.name, True
            elif isinstance(formula, Negation) and isinstance(formula.operand, Variable):
                name, positive = formula.operand.name, False
            else:
                continue

            has_positive, has_negative = occurrences.get(name, (False, False))
            if positive:
                has_positive = True
            else:
                has_negative = True

            if has_positive and has_negative:
                return True
            occurrences[name] = (has_positive, has_negative)

        return False

    def select_non_literal(self) -> Optional[Formula]:
        """Return the first non-literal member in insertion order, or None."""
        return next((f for f in self._formulas if not f.is_literal()), None)

    def replace(self, existing: Formula, replacements: Iterable[Formula]) -> None:
        """Replace a member with its expansion.

        Removes `existing` and adds each replacement. Does nothing when
        `existing` is not a member.
        """
        if existing not in self._formulas:
            return
        del self._formulas[existing]
        for formula in replacements:
            self.add(formula)

    def key(self) -> FrozenSet[Formula]:
        """Return the member set in a hashable, order-insensitive form."""
        return frozenset(self._formulas)

    def __len__(self) -> int:
        return len(self._formulas)

    def __iter__(self) -> Iterator[Formula]:
        return iter(tuple(self._formulas))

    def __contains__(self, formula: object) -> bool:
        return formula in self._formulas

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Theory):
            return NotImplemented
        return self._formulas.keys() == other._formulas.keys()

    # Theories are mutable; hash key() instead
    __hash__ = None

    def __str__(self) -> str:
        return "{" + ", ".join(str(f) for f in self._formulas) + "}"

    def __repr__(self) -> str:
        return f"Theory({self})"
