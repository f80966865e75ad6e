# parser/lexer.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of fully parenthesised propositional
formulas, breaking input strings into tokens for parser consumption. Several
operators accept an alternative spelling so formulas written with either
common ASCII notation are understood.

Supported Tokens:
- Negation: -, ~
- Conjunction: ^, &
- Disjunction: |
- Implication: ->, =>
- Biimplication: <->, <=>
- Parentheses: (, )
- Variables: [a-zA-Z][a-zA-Z0-9_]*
- Spaces and tabs: ignored during tokenization
"""

from sly import Lexer
from .exceptions import IllFormedFormulaError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Patterns are matched in definition order, so the multi-character arrows
    are listed before the single character negation they start with.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VARIABLE",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t"

    IFF = r"<->|<=>"
    IMPLIES = r"->|=>"
    NOT = r"-|~"
    AND = r"\^|&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    VARIABLE = r"[a-zA-Z][a-zA-Z0-9_]*"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when encountering characters that don't match
        any defined token pattern.

        Args:
            t: SLY token object containing error context

        Raises:
            IllFormedFormulaError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise IllFormedFormulaError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
