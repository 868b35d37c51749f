# wff/lexer.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Lexical analyzer for wff tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks wff strings into tokens for the grammar. Propositions are
single letters, so "pq" is two tokens. The lowercase letter 'v' is reserved
for disjunction and never names a variable.

Supported Tokens:
- Operators: ~, ^, v, =>, <=>
- Parentheses: (, )
- Propositions: any single letter other than 'v'
- Whitespace: spaces are ignored
"""

from typing import List

from sly import Lexer
from .exceptions import LexError
from .tokens import Token, from_lexeme
from utils.logger import get_logger


class WffLexer(Lexer):
    """SLY-based lexer for wff tokenization.

    Compound operators are matched as whole patterns, so a '=' without its
    trailing '>' (or a '<' without '=>') never matches and is reported as an
    illegal character at the position where it starts.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        PROP: Single-letter proposition pattern with 'v' remapped to OR
    """

    tokens = {
        "PROP",
        "NOT",
        "AND",
        "OR",
        "COND",
        "BICOND",
        "LPAREN",
        "RPAREN",
    }

    ignore = " "

    # Compound operators
    BICOND = r"<=>"
    COND = r"=>"

    NOT = r"~"
    AND = r"\^"
    LPAREN = r"\("
    RPAREN = r"\)"

    PROP = r"[a-zA-Z]"

    # 'v' is the disjunction symbol, not a variable
    PROP["v"] = "OR"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object whose value is the unconsumed input

        Raises:
            LexError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise LexError(illegal_char, error_pos)


def tokenize(text: str) -> List[Token]:
    """Tokenize a wff string.

    Args:
        text: Formula string

    Returns:
        Tokens in left-to-right order

    Raises:
        LexError: The string contains a character outside the wff alphabet
    """
    return [from_lexeme(tok.type, tok.value) for tok in WffLexer().tokenize(text)]
