# core/tableau.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Tableau: the queue of alternative branches still under exploration

"""Branch queue for the tableau search.

A tableau holds the theories (branches) that are neither closed nor fully
expanded yet. For the tree

        (a|b)
        /   \\
       a     b

the two branches are the theories `{a}` and `{b}`. The queue never holds two
theories with the same members: the search consults `contains` before
enqueueing so identical branches are only explored once.
"""

from __future__ import annotations
from collections import Counter, deque
from enum import Enum, auto
from typing import Deque, FrozenSet, Optional, Tuple

from parser.ast_nodes import Formula
from .theory import Theory


class SearchOrder(Enum):
    """Order in which queued branches are explored.

    Both orders decide satisfiability correctly; they differ in which open
    branch is found first and in the peak queue size.
    """

    BREADTH_FIRST = auto()  # FIFO
    DEPTH_FIRST = auto()  # LIFO

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")


class Tableau:
    """Queue of alternative theories with set-equality membership tests."""

    def __init__(self, order: SearchOrder = SearchOrder.BREADTH_FIRST):
        self.order = order
        self._theories: Deque[Tuple[FrozenSet[Formula], Theory]] = deque()
        self._keys: Counter[FrozenSet[Formula]] = Counter()

    @classmethod
    def seeded(
        cls, formula: Formula, order: SearchOrder = SearchOrder.BREADTH_FIRST
    ) -> Tableau:
        """Construct a tableau whose single branch is the theory `{formula}`."""
        tableau = cls(order)
        tableau.push_back(Theory.from_formula(formula))
        return tableau

    def is_empty(self) -> bool:
        return not self._theories

    def pop_front(self) -> Optional[Theory]:
        """Take the next theory to explore, or None when the tableau is empty.

        Breadth-first tableaux take the oldest theory, depth-first ones the
        most recently queued.
        """
        if not self._theories:
            return None

        if self.order is SearchOrder.DEPTH_FIRST:
            key, theory = self._theories.pop()
        else:
            key, theory = self._theories.popleft()

        self._keys[key] -= 1
        if self._keys[key] <= 0:
            del self._keys[key]
        return theory

    def push_back(self, theory: Theory) -> None:
        """Queue a theory for exploration."""
        key = theory.key()
        self._theories.append((key, theory))
        self._keys[key] += 1

    def contains(self, theory: Theory) -> bool:
        """Check whether a theory with the same members is already queued."""
        return theory.key() in self._keys

    def __len__(self) -> int:
        return len(self._theories)

    def __str__(self) -> str:
        return "[" + ", ".join(str(t) for _, t in self._theories) + "]"
