# parser/grammar.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implementation using SLY parser generator.

Every unary and binary operator application must be wrapped in its own pair
of parentheses, so the grammar has no precedence or associativity to resolve:

    formula ::= VARIABLE
              | "(" NOT formula ")"
              | "(" formula AND formula ")"
              | "(" formula OR formula ")"
              | "(" formula IMPLIES formula ")"
              | "(" formula IFF formula ")"
"""

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import (
    Formula,
    Variable,
    Negation,
    Conjunction,
    Disjunction,
    Implication,
    Biimplication,
)
from .exceptions import ParseError, EmptyFormulaError, IllFormedFormulaError
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for fully parenthesised propositional formulas.

    Implements grammar rules to construct AST nodes from token streams and
    reports malformed input as IllFormedFormulaError.

    Attributes:
        tokens: Token types from FormulaLexer
    """

    tokens = FormulaLexer.tokens

    @_("formula")
    def start(self, p) -> Formula:
        """Start rule: complete input is a single formula."""
        return p.formula

    @_("VARIABLE")
    def formula(self, p) -> Formula:
        """Propositional variable."""
        return Variable(p.VARIABLE)

    @_("LPAREN NOT formula RPAREN")
    def formula(self, p) -> Formula:
        """Negated formula."""
        return Negation(p.formula)

    @_("LPAREN formula AND formula RPAREN")
    def formula(self, p) -> Formula:
        """Conjunction."""
        return Conjunction(p.formula0, p.formula1)

    @_("LPAREN formula OR formula RPAREN")
    def formula(self, p) -> Formula:
        """Disjunction."""
        return Disjunction(p.formula0, p.formula1)

    @_("LPAREN formula IMPLIES formula RPAREN")
    def formula(self, p) -> Formula:
        """Implication."""
        return Implication(p.formula0, p.formula1)

    @_("LPAREN formula IFF formula RPAREN")
    def formula(self, p) -> Formula:
        """Biimplication."""
        return Biimplication(p.formula0, p.formula1)

    def parse(self, text: str) -> Formula:
        """Parse formula text into an AST.

        Args:
            text: Propositional formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            EmptyFormulaError: If the text is empty or whitespace only
            IllFormedFormulaError: If the text violates the grammar
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        if not text or not text.strip():
            raise EmptyFormulaError("Input formula is empty.")

        try:
            ast_result = super().parse(FormulaLexer().tokenize(text))

            if ast_result is None:
                raise IllFormedFormulaError("Failed to parse formula (syntax error).")

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't
        match any grammar rule.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            IllFormedFormulaError: Always raised with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise IllFormedFormulaError(error_msg)
