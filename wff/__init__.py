# wff/__init__.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Formula tokenization, parsing and tree queries

"""Propositional formula (wff) parsing.

This package turns strings such as "((p v q) => ~r)" into parse trees that
keep every token of the input. The trees are the common currency of the
rewriting package: patterns are compiled from them, matches point into them,
and substitution edits them in place.

Syntax:
    - Propositions: single letters, case-sensitive ('v' is reserved)
    - Negation: ~p
    - Binary connectives, always parenthesized: (p ^ q), (p v q),
      (p => q), (p <=> q)
    - Spaces are ignored

Core Functions:
    tokenize: Formula string to token list
    parse: Formula string to parse tree
    create: Formula string to Formula object
    render: Canonical text of a formula or tree node

Example:
    >>> from wff import create, enumerate_subformulas
    >>> f = create("(p v ~q)")
    >>> f.render()
    '(pv~q)'
    >>> [s.render() for s in enumerate_subformulas(f)]
    ['p', 'q', '~q', '(pv~q)']
"""

from .exceptions import WffError, LexError, GrammarError
from .tokens import Token, TokenKind, Operator
from .lexer import tokenize
from .tree import Nonterminal, SearchVar, Terminal, subtree_equals, format_tree
from .formula import (
    Formula,
    SubformulaNode,
    VariableOccurrence,
    create,
    enumerate_subformulas,
    find_variable_occurrences,
    format_parse_tree,
    parse,
    render,
    subformula_tree,
    unique_subformulas,
    variables,
)

__all__ = [
    "WffError",
    "LexError",
    "GrammarError",
    "Token",
    "TokenKind",
    "Operator",
    "tokenize",
    "Nonterminal",
    "SearchVar",
    "Terminal",
    "subtree_equals",
    "format_tree",
    "Formula",
    "SubformulaNode",
    "VariableOccurrence",
    "create",
    "enumerate_subformulas",
    "find_variable_occurrences",
    "format_parse_tree",
    "parse",
    "render",
    "subformula_tree",
    "unique_subformulas",
    "variables",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and parse tree queries"
