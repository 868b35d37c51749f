# wff/grammar.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Grammar and parser for wffs using SLY

"""Wff grammar implementation using SLY parser generator.

The grammar is fully parenthesized, so it needs neither precedence nor
associativity rules:

    formula    : PROP
               | NOT formula
               | LPAREN formula connective formula RPAREN
    connective : AND | OR | COND | BICOND

Each formula rule builds one Nonterminal node. Literal tokens become Terminal
children, so the tree keeps every token of the input and renders back to it.
A string is a formula only if the whole token sequence derives it: "pq" and
"(p v q v r)" are rejected rather than truncated.
"""

from sly import Parser
from .lexer import WffLexer
from .tokens import Operator, Token, from_lexeme
from .tree import Nonterminal, Terminal
from .exceptions import GrammarError, WffError
from utils.logger import get_logger


def _terminal(token_type: str, value: str) -> Terminal:
    return Terminal(from_lexeme(token_type, value))


class _WffParser(Parser):
    """SLY-based LALR(1) parser for wffs.

    Attributes:
        tokens: Token types from WffLexer
    """

    tokens = WffLexer.tokens

    start = "formula"

    @_("PROP")
    def formula(self, p) -> Nonterminal:
        """Bare proposition."""
        return Nonterminal([_terminal("PROP", p.PROP)])

    @_("NOT formula")
    def formula(self, p) -> Nonterminal:
        """Negation."""
        return Nonterminal([_terminal("NOT", p.NOT), p.formula])

    @_("LPAREN formula connective formula RPAREN")
    def formula(self, p) -> Nonterminal:
        """Parenthesized binary connective."""
        return Nonterminal(
            [
                _terminal("LPAREN", p.LPAREN),
                p.formula0,
                p.connective,
                p.formula1,
                _terminal("RPAREN", p.RPAREN),
            ]
        )

    @_("AND", "OR", "COND", "BICOND")
    def connective(self, p) -> Terminal:
        """Binary connective symbol."""
        return Terminal(Token.op(Operator(p[0])))

    def parse(self, text: str) -> Nonterminal:
        """Parse wff text into its parse tree.

        Args:
            text: Formula string to parse

        Returns:
            Root Nonterminal of the parse tree

        Raises:
            LexError: The text contains an illegal character
            GrammarError: The token sequence is not a formula
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            tree = super().parse(WffLexer().tokenize(text))

            if tree is None and text.strip() == "":
                raise GrammarError("Input formula is empty.")

            if tree is None:
                raise GrammarError("Failed to parse formula (syntax error).")

            logger.debug(f"Successfully parsed formula into {type(tree).__name__}")
            return tree

        except WffError:
            logger.debug("Formula rejected by lexer or grammar")
            raise
        except RecursionError:
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise GrammarError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called by SLY on a token that no grammar rule accepts here, including
        tokens left over after a complete formula.

        Args:
            token: Problematic token or None at end of input

        Raises:
            GrammarError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise GrammarError(error_msg)
