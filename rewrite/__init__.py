# rewrite/__init__.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Pattern matching and substitution over formula parse trees

"""Pattern search and rewriting for wffs.

Patterns are ordinary formula strings whose propositions act as variables.
A pattern variable matches any subformula, and repeated variables must match
equal subformulas.

Core Functions:
    compile_pattern: Parse tree to search pattern
    search: All occurrences of a compiled pattern in a tree
    match_groups: All occurrences of a pattern string in a formula
    match: Flattened bindings of all occurrences
    substitute: Rewrite one occurrence in place

Example:
    >>> from wff import create
    >>> from rewrite import match_groups, substitute
    >>> f = create("~(p ^ ~~q)")
    >>> len(match_groups(f, "~~a"))
    1
    >>> substitute(f, "~~a", "a", 0)
    True
    >>> f.render()
    '~(p^q)'
"""

from .exceptions import (
    RewriteError,
    IndexOutOfRangeError,
    NoMatchError,
    UnboundReplacementVariableError,
)
from .pattern import Pattern, PatternCompiler, compile_pattern
from .matcher import Binding, MatchGroup, match, match_groups, match_node, search
from .substitution import substitute

__all__ = [
    "RewriteError",
    "IndexOutOfRangeError",
    "NoMatchError",
    "UnboundReplacementVariableError",
    "Pattern",
    "PatternCompiler",
    "compile_pattern",
    "Binding",
    "MatchGroup",
    "match",
    "match_groups",
    "match_node",
    "search",
    "substitute",
]
