# tests/core_tests/test_tableau.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Test suite for the Tableau branch queue

"""Test suite for the Tableau branch queue."""

from parser.ast_nodes import Negation, Conjunction, Variable
from core.tableau import SearchOrder, Tableau
from core.theory import Theory


class TestTableauQueue:
    """Test cases for queue behaviour."""

    def test_seeded_holds_single_theory(self, a):
        tableau = Tableau.seeded(a)

        assert not tableau.is_empty()
        assert len(tableau) == 1
        assert tableau.pop_front() == Theory.from_formula(a)
        assert tableau.is_empty()

    def test_pop_from_empty_returns_none(self):
        assert Tableau().pop_front() is None

    def test_breadth_first_is_fifo(self, a, b):
        tableau = Tableau()
        tableau.push_back(Theory([a]))
        tableau.push_back(Theory([b]))

        assert tableau.pop_front() == Theory([a])
        assert tableau.pop_front() == Theory([b])

    def test_depth_first_is_lifo(self, a, b):
        tableau = Tableau(SearchOrder.DEPTH_FIRST)
        tableau.push_back(Theory([a]))
        tableau.push_back(Theory([b]))

        assert tableau.pop_front() == Theory([b])
        assert tableau.pop_front() == Theory([a])

    def test_search_order_str(self):
        assert str(SearchOrder.DEPTH_FIRST) == "depth-first"


class TestTableauMembership:
    """Test cases for set-equality based duplicate detection."""

    def test_contains_set_equal_theory_in_any_order(self, a, b):
        tableau = Tableau()
        tableau.push_back(Theory([a, Negation(b), Conjunction(a, b)]))

        assert tableau.contains(Theory([Conjunction(a, b), a, Negation(b)]))

    def test_contains_rejects_different_members(self, a, b):
        tableau = Tableau()
        tableau.push_back(Theory([a, b]))

        assert not tableau.contains(Theory([a]))
        assert not tableau.contains(Theory([a, b, Variable("c")]))

    def test_popped_theory_no_longer_contained(self, a):
        tableau = Tableau.seeded(a)
        theory = tableau.pop_front()

        assert not tableau.contains(theory)

    def test_membership_tracks_remaining_copies(self, a):
        tableau = Tableau()
        tableau.push_back(Theory([a]))
        tableau.push_back(Theory([a]))
        tableau.pop_front()

        assert tableau.contains(Theory([a]))
        tableau.pop_front()
        assert not tableau.contains(Theory([a]))

    def test_later_mutation_does_not_corrupt_membership(self, a, b):
        theory = Theory([a])
        tableau = Tableau()
        tableau.push_back(theory)
        theory.add(b)

        assert tableau.contains(Theory([a]))
        tableau.pop_front()
        assert tableau.is_empty()
        assert not tableau.contains(Theory([a]))
