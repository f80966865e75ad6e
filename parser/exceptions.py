# parser/exceptions.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula parsing.

This module defines the exceptions raised while turning formula text into an
abstract syntax tree. The tableau core never sees malformed input: every
rejection happens here, before a formula reaches the solver.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails.

    Base class for all parser rejections. Used throughout the parsing pipeline
    to provide consistent error handling for the command line front end.
    """

    pass


class EmptyFormulaError(ParseError):
    """Raised when the input text is empty or contains only whitespace."""

    pass


class IllFormedFormulaError(ParseError):
    """Raised when the input text does not conform to the formula grammar.

    Covers both illegal characters rejected by the lexer and token sequences
    rejected by the grammar (missing parentheses, dangling operators, ...).
    """

    pass
