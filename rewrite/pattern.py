# rewrite/pattern.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Compilation of formulas into search patterns

"""Compiles parsed formulas into search patterns.

A pattern is written as an ordinary formula, e.g. "(a ^ ~b)". Compiling it
turns every bare proposition into a wildcard (SearchVar) that stands for any
subformula, while connectives, negations and parentheses stay literal and
must match exactly. "(a ^ ~b)" therefore matches "((p v q) ^ ~r)" with a
bound to "(p v q)" and b bound to "r".

Compilation builds a new tree and leaves the source tree untouched, so the
same parsed formula can serve both as a formula and as a pattern.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from wff import Formula, parse
from wff.tree import Nonterminal, ParseTreeNode, SearchVar, Terminal, Visitor
from utils.logger import get_logger


@dataclass(frozen=True)
class Pattern:
    """A compiled search pattern.

    Attributes:
        root: Root of the pattern tree; wildcards are SearchVar leaves
        variables: Distinct pattern variables in order of first occurrence
        source: Text the pattern was compiled from, if known
    """

    root: ParseTreeNode
    variables: Tuple[str, ...]
    source: str = ""

    @classmethod
    def from_string(cls, text: str) -> Pattern:
        """Parse and compile a pattern string.

        Raises:
            LexError: The string contains an illegal character
            GrammarError: The string is not a well-formed formula
        """
        return compile_pattern(parse(text), source=text)

    def __str__(self) -> str:
        return str(self.root)


class PatternCompiler(Visitor):
    """Builds a pattern tree from a parse tree.

    Walks the tree depth-first. A Nonterminal whose child is a proposition
    Terminal becomes a SearchVar for that proposition and is not descended
    into. Every other node is copied literally.
    """

    def __init__(self):
        self._variables: Dict[str, None] = {}

    def compile(self, root: ParseTreeNode, source: str = "") -> Pattern:
        """Compile the tree rooted at root.

        Args:
            root: Root of a parse tree
            source: Pattern text, kept for messages

        Returns:
            The compiled pattern
        """
        self._variables.clear()
        pattern_root = root.accept(self)
        pattern = Pattern(pattern_root, tuple(self._variables), source or str(root))
        get_logger().pattern_compiled(pattern.source, ", ".join(pattern.variables))
        return pattern

    def visit_terminal(self, n: Terminal) -> Terminal:
        return Terminal(n.token)

    def visit_searchvar(self, n: SearchVar) -> SearchVar:
        self._variables.setdefault(n.variable)
        return SearchVar(n.variable)

    def visit_nonterminal(self, n: Nonterminal) -> ParseTreeNode:
        for child in n.children:
            if isinstance(child, Terminal) and child.token.is_proposition:
                self._variables.setdefault(child.token.variable)
                return SearchVar(child.token.variable)
        return Nonterminal([child.accept(self) for child in n.children])


def compile_pattern(target: Union[Formula, ParseTreeNode], source: str = "") -> Pattern:
    """Compile a formula or parse tree into a search pattern.

    Args:
        target: Formula or parse tree root to compile
        source: Pattern text; defaults to the formula's source or rendering

    Returns:
        The compiled pattern
    """
    if isinstance(target, Formula):
        return PatternCompiler().compile(target.root, source or target.source)
    return PatternCompiler().compile(target, source)
