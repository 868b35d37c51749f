# rewrite/matcher.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Structural pattern matching over formula parse trees

"""Finds occurrences of a compiled pattern inside a formula.

Matching walks the formula tree and the pattern tree side by side. Literal
pattern nodes must agree token for token; a wildcard captures whatever
subformula sits at its position. A variable used more than once in a pattern
must capture structurally equal subformulas each time, so "(a ^ a)" matches
"(p ^ p)" but not "(p ^ q)".

search() tries the pattern at every formula node of the tree, outermost
first, and reports each success as a MatchGroup. Occurrences may nest: "~a"
occurs twice in "~~p".
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from wff import Formula
from wff.tree import (
    Nonterminal,
    ParseTreeNode,
    SearchVar,
    Terminal,
    iter_preorder,
    subtree_equals,
)
from .pattern import Pattern
from utils.logger import get_logger


@dataclass(frozen=True)
class Binding:
    """One captured subformula.

    Attributes:
        node: Captured node inside the searched formula's tree
        variable: Pattern variable that captured it
    """

    node: ParseTreeNode
    variable: str

    def __str__(self) -> str:
        return f"{self.variable}: {self.node}"


@dataclass(frozen=True)
class MatchGroup:
    """All bindings from one occurrence of a pattern.

    Attributes:
        root: Formula node where the occurrence begins (substitution root)
        bindings: One binding per distinct pattern variable, in the order the
            variables are first met in the pattern
    """

    root: Nonterminal
    bindings: Tuple[Binding, ...]

    def bindings_by_variable(self) -> Dict[str, ParseTreeNode]:
        """Map each pattern variable to its captured node."""
        return {binding.variable: binding.node for binding in self.bindings}

    def __len__(self) -> int:
        return len(self.bindings)

    def __str__(self) -> str:
        captured = ", ".join(str(binding) for binding in self.bindings)
        return f"{self.root} {{{captured}}}"


def match_node(target: ParseTreeNode, pattern: ParseTreeNode, bindings: List[Binding]) -> bool:
    """Match a pattern subtree against a formula subtree.

    New bindings are appended to bindings. On failure, bindings appended
    before the failing node are left in place; callers discard the list.

    Args:
        target: Node of the formula tree
        pattern: Node of the pattern tree
        bindings: Bindings made so far for this occurrence

    Returns:
        True if the subtrees match consistently with bindings
    """
    stack = [(target, pattern)]
    while stack:
        target_node, pattern_node = stack.pop()

        if isinstance(pattern_node, SearchVar):
            if isinstance(target_node, Terminal):
                return False
            previous = next(
                (b for b in bindings if b.variable == pattern_node.variable), None
            )
            if previous is None:
                bindings.append(Binding(target_node, pattern_node.variable))
            elif not subtree_equals(previous.node, target_node):
                return False
            continue

        if isinstance(target_node, Terminal):
            if isinstance(pattern_node, Terminal):
                # Token equality: kinds, variable names and connectives all agree
                if target_node.token != pattern_node.token:
                    return False
            elif pattern_node.children:
                return False
            continue

        if isinstance(pattern_node, Terminal):
            return False
        if len(target_node.children) != len(pattern_node.children):
            return False
        # Reversed so children are matched left to right
        stack.extend(reversed(list(zip(target_node.children, pattern_node.children))))
    return True


def search(root: ParseTreeNode, pattern: Pattern) -> List[MatchGroup]:
    """Find every occurrence of a pattern in a tree.

    Args:
        root: Root of the formula tree to search
        pattern: Compiled pattern

    Returns:
        Match groups in pre-order of their roots; empty if none
    """
    groups = []
    for node in iter_preorder(root):
        if not isinstance(node, Nonterminal):
            continue
        bindings: List[Binding] = []
        if match_node(node, pattern.root, bindings):
            groups.append(MatchGroup(node, tuple(bindings)))
    return groups


def match_groups(formula: Formula, pattern: Union[str, Pattern]) -> List[MatchGroup]:
    """Find every occurrence of a pattern in a formula.

    Args:
        formula: Formula to search
        pattern: Pattern string or compiled pattern

    Returns:
        Match groups in pre-order of their roots

    Raises:
        LexError: The pattern string contains an illegal character
        GrammarError: The pattern string is not a well-formed formula
    """
    if isinstance(pattern, str):
        pattern = Pattern.from_string(pattern)
    groups = search(formula.root, pattern)
    get_logger().match_summary(formula.render(), pattern.source, len(groups))
    return groups


def match(formula: Formula, pattern: Union[str, Pattern]) -> List[Binding]:
    """Find every occurrence of a pattern and flatten the bindings.

    Each occurrence contributes one binding per distinct pattern variable,
    so the result length is a multiple of the pattern's variable count.
    """
    return [binding for group in match_groups(formula, pattern) for binding in group.bindings]
