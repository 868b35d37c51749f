# wff/tree.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Parse tree node classes for propositional formula representation

"""Parse tree node classes for wffs.

The parse tree mirrors the grammar exactly. Every formula position is a
Nonterminal whose children follow one of three production shapes:

    [PROP]                                          bare proposition
    [NOT, formula]                                  negation
    [LPAREN, formula, connective, formula, RPAREN]  binary connective

Literal tokens are wrapped in Terminal leaves. SearchVar is the wildcard leaf
used only by compiled patterns (see rewrite.pattern); plain formula trees
never contain one.

Traversals keep an explicit stack rather than recursing, so tree depth is
bounded only by memory.

Nodes are mutable and compare by identity, because matches refer to concrete
positions inside a tree and substitution edits those positions in place. Use
subtree_equals() for structural comparison.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Protocol, Tuple

from .tokens import Token


class Visitor(Protocol):
    """Interface for parse tree visitors."""

    def visit_terminal(self, n: Terminal): ...

    def visit_nonterminal(self, n: Nonterminal): ...

    def visit_searchvar(self, n: SearchVar): ...


@dataclass(eq=False, slots=True)
class ParseTreeNode:
    """Base class for all parse tree nodes."""

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Return the canonical text of the subtree rooted here."""
        raise NotImplementedError


@dataclass(eq=False, slots=True)
class Terminal(ParseTreeNode):
    """Leaf wrapping one token.

    Attributes:
        token: The wrapped token
    """

    token: Token

    @property
    def children(self) -> Tuple[ParseTreeNode, ...]:
        return ()

    def accept(self, v: Visitor):
        return v.visit_terminal(self)

    def __str__(self) -> str:
        return str(self.token)


@dataclass(eq=False, slots=True)
class Nonterminal(ParseTreeNode):
    """Formula node owning an ordered list of children.

    Attributes:
        children: One, two or five child nodes depending on the production
    """

    children: List[ParseTreeNode] = field(default_factory=list)

    def accept(self, v: Visitor):
        return v.visit_nonterminal(self)

    def __str__(self) -> str:
        return "".join(
            str(node) for node in iter_preorder(self) if not isinstance(node, Nonterminal)
        )

    @property
    def is_proposition(self) -> bool:
        """True when this node is the bare-proposition production."""
        return (
            len(self.children) == 1
            and isinstance(self.children[0], Terminal)
            and self.children[0].token.is_proposition
        )

    @property
    def variable(self) -> str:
        """Variable name of a bare-proposition node.

        Raises:
            ValueError: The node is not a bare proposition
        """
        if not self.is_proposition:
            raise ValueError(f"'{self}' is not a bare proposition")
        return self.children[0].token.variable


@dataclass(eq=False, slots=True)
class SearchVar(ParseTreeNode):
    """Wildcard leaf of a compiled pattern.

    Attributes:
        variable: Name of the pattern variable this wildcard binds
    """

    variable: str

    @property
    def children(self) -> Tuple[ParseTreeNode, ...]:
        return ()

    def accept(self, v: Visitor):
        return v.visit_searchvar(self)

    def __str__(self) -> str:
        return self.variable



def iter_preorder(node: ParseTreeNode) -> Iterator[ParseTreeNode]:
    """Yield every node of a subtree, parent before children."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def iter_postorder(node: ParseTreeNode) -> Iterator[ParseTreeNode]:
    """Yield every node of a subtree, children before parent."""
    stack = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded or not current.children:
            yield current
            continue
        stack.append((current, True))
        stack.extend((child, False) for child in reversed(current.children))


def subtree_equals(node1: ParseTreeNode, node2: ParseTreeNode) -> bool:
    """Compare two subtrees structurally.

    Same node classes, equal tokens, same shape, all the way down. Node identity
    plays no role.
    """
    stack = [(node1, node2)]
    while stack:
        left, right = stack.pop()
        if type(left) is not type(right):
            return False
        if isinstance(left, Terminal):
            if left.token != right.token:
                return False
        elif isinstance(left, SearchVar):
            if left.variable != right.variable:
                return False
        elif len(left.children) != len(right.children):
            return False
        else:
            stack.extend(zip(left.children, right.children))
    return True


def _copy_leaf(node: ParseTreeNode) -> ParseTreeNode:
    if isinstance(node, Terminal):
        return Terminal(node.token)
    return SearchVar(node.variable)


def copy_subtree(node: ParseTreeNode) -> ParseTreeNode:
    """Return a structurally equal subtree that shares no nodes with node.

    Tokens are immutable and are shared between the copies.
    """
    if not isinstance(node, Nonterminal):
        return _copy_leaf(node)

    root = Nonterminal()
    stack = [(node, root)]
    while stack:
        source, target = stack.pop()
        for child in source.children:
            if isinstance(child, Nonterminal):
                copy = Nonterminal()
                stack.append((child, copy))
            else:
                copy = _copy_leaf(child)
            target.children.append(copy)
    return root


def format_tree(node: ParseTreeNode, indent: str = "    ") -> str:
    """Lay out a parse tree as indented text, one node per line.

    A Nonterminal prints as 'wff' with the first half of its children above
    it and the rest below, so the tree reads sideways with the root at the
    left margin.

    Args:
        node: Root of the subtree to lay out
        indent: Text repeated once per depth level

    Returns:
        Multi-line string without a trailing newline
    """
    lines: List[str] = []
    # Entries are (node, level) or an already formatted 'wff' line
    stack: List = [(node, 0)]
    while stack:
        entry = stack.pop()
        if isinstance(entry, str):
            lines.append(entry)
            continue
        current, level = entry
        if isinstance(current, Nonterminal):
            half = len(current.children) // 2
            stack.extend((child, level + 1) for child in reversed(current.children[half:]))
            stack.append(f"{indent * level}wff")
            stack.extend((child, level + 1) for child in reversed(current.children[:half]))
        elif isinstance(current, SearchVar):
            lines.append(f"{indent * level}?{current.variable}")
        else:
            lines.append(f"{indent * level}{current}")
    return "\n".join(lines)
