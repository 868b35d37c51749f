# wff/tokens.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Token model for propositional formula strings

"""Token types produced by the wff lexer.

A token is a small tagged value: a parenthesis, a proposition carrying its
variable name, or an operator carrying its connective. Tokens are immutable
and compare by value, so two proposition tokens with the same letter are
equal and denote the same variable.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class TokenKind(Enum):
    """Lexical category of a token."""

    NONE = auto()
    LPAREN = auto()
    RPAREN = auto()
    PROPOSITION = auto()
    OPERATOR = auto()


class Operator(Enum):
    """Logical connectives with their canonical symbols."""

    NOT = "~"
    AND = "^"
    OR = "v"
    COND = "=>"
    BICOND = "<=>"

    def __str__(self) -> str:
        return self.value

    @property
    def is_binary(self) -> bool:
        """True for connectives that join two subformulas."""
        return self is not Operator.NOT


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical unit of a formula.

    Attributes:
        kind: Lexical category
        variable: Variable name for PROPOSITION tokens, otherwise None
        operator: Connective for OPERATOR tokens, otherwise None
    """

    kind: TokenKind
    variable: Optional[str] = None
    operator: Optional[Operator] = None

    @classmethod
    def lparen(cls) -> Token:
        return cls(TokenKind.LPAREN)

    @classmethod
    def rparen(cls) -> Token:
        return cls(TokenKind.RPAREN)

    @classmethod
    def proposition(cls, variable: str) -> Token:
        return cls(TokenKind.PROPOSITION, variable=variable)

    @classmethod
    def op(cls, operator: Operator) -> Token:
        return cls(TokenKind.OPERATOR, operator=operator)

    @property
    def is_proposition(self) -> bool:
        return self.kind is TokenKind.PROPOSITION

    def __str__(self) -> str:
        """Return the canonical text of the token."""
        if self.kind is TokenKind.PROPOSITION:
            return self.variable
        if self.kind is TokenKind.OPERATOR:
            return str(self.operator)
        if self.kind is TokenKind.LPAREN:
            return "("
        if self.kind is TokenKind.RPAREN:
            return ")"
        return ""


# Lexer token type name -> Token, for every type except PROP
_FIXED_TOKENS = {
    "LPAREN": Token.lparen(),
    "RPAREN": Token.rparen(),
    "NOT": Token.op(Operator.NOT),
    "AND": Token.op(Operator.AND),
    "OR": Token.op(Operator.OR),
    "COND": Token.op(Operator.COND),
    "BICOND": Token.op(Operator.BICOND),
}


def from_lexeme(token_type: str, value: str) -> Token:
    """Build a Token from a lexer token type and its matched text.

    Args:
        token_type: Token type name assigned by WffLexer
        value: Matched source text

    Returns:
        The corresponding Token

    Raises:
        KeyError: token_type is not a WffLexer token type
    """
    if token_type == "PROP":
        return Token.proposition(value)
    return _FIXED_TOKENS[token_type]
