# parser/__init__.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing for the tableau solver.

This module turns textual, fully parenthesised propositional formulas into the
immutable abstract syntax trees consumed by the tableau core. All input
validation happens here: the solver only ever receives well-formed trees.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees

Grammar Features:
    - Mandatory parentheses around every operator application
    - Alternative operator spellings (- ~, ^ &, -> =>, <-> <=>)
    - Distinct errors for empty and ill-formed input

Example:
    >>> from parser import parse
    >>> ast = parse("((a^b)->a)")
    >>> # Returns Implication node with a Conjunction premise
"""

from .exceptions import ParseError, EmptyFormulaError, IllFormedFormulaError
from .grammar import _FormulaParser
from .ast_nodes import (
    Formula,
    Variable,
    Negation,
    Conjunction,
    Disjunction,
    Implication,
    Biimplication,
)
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Parse a propositional formula string into its Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation to keep parsing
    stateless.

    Args:
        source: Formula string to parse

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        EmptyFormulaError: Formula text is empty or whitespace only
        IllFormedFormulaError: Formula text does not match the grammar
        ParseError: Any other parsing failure

    Example:
        >>> ast = parse("(p|(-p))")
        >>> # Returns Disjunction node with Variable and Negation children
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "ParseError",
    "EmptyFormulaError",
    "IllFormedFormulaError",
    "Formula",
    "Variable",
    "Negation",
    "Conjunction",
    "Disjunction",
    "Implication",
    "Biimplication",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing components"
