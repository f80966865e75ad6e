# utils/__init__.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Utility module exports

from .formula_reader import (
    read_formulas,
    read_formula_stream,
    FormulaLine,
    FormulaFileError,
)

__all__ = [
    "read_formulas",
    "read_formula_stream",
    "FormulaLine",
    "FormulaFileError",
]
