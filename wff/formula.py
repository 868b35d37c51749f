# wff/formula.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Formula objects and read-only queries over their parse trees

"""Formula objects and the queries built on their parse trees.

A Formula owns the string it was created from and the root of its parse tree.
Construction is all-or-nothing: create() either returns a formula with a
complete, valid tree or raises, so no half-built formula is ever observable.

Rendering concatenates the terminal tokens left to right with no whitespace,
which is the canonical form of a formula: create("(p v q)").render() returns
"(pvq)".
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .grammar import _WffParser
from .tree import (
    Nonterminal,
    ParseTreeNode,
    format_tree,
    iter_postorder,
)
from utils.logger import get_logger


@dataclass(eq=False)
class Formula:
    """A wff together with its parse tree.

    Attributes:
        source: The string the formula was created from
        root: Root of the parse tree; rewritten in place by substitution
    """

    source: str
    root: Nonterminal

    @property
    def var_count(self) -> int:
        """Number of distinct propositional variables in the current tree."""
        return len(variables(self))

    def render(self) -> str:
        """Return the canonical text of the formula."""
        return str(self.root)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class VariableOccurrence:
    """Location of one proposition inside a formula's parse tree.

    Attributes:
        variable: Variable name
        node: The bare-proposition Nonterminal wrapping the proposition
        path: Child indices leading from the root to node
    """

    variable: str
    node: Nonterminal = field(compare=False)
    path: Tuple[int, ...]


@dataclass
class SubformulaNode:
    """Node of the subformula tree: a subformula and its immediate subformulas.

    Attributes:
        text: Canonical text of the subformula
        subformulas: Zero, one or two immediate subformulas
    """

    text: str
    subformulas: List[SubformulaNode] = field(default_factory=list)

    def format(self, indent: str = "\t\t") -> str:
        """Lay out the subformula tree sideways, root at the left margin."""
        lines: List[str] = []
        stack: List = [(self, 0)]
        while stack:
            entry = stack.pop()
            if isinstance(entry, str):
                lines.append(entry)
                continue
            node, level = entry
            half = len(node.subformulas) // 2
            stack.extend((sub, level + 1) for sub in reversed(node.subformulas[half:]))
            stack.append(f"{indent * level}{node.text}")
            stack.extend((sub, level + 1) for sub in reversed(node.subformulas[:half]))
        return "\n".join(lines)


def parse(source: str) -> Nonterminal:
    """Parse a wff string into a parse tree.

    Uses a fresh parser instance for each call.

    Args:
        source: Formula string

    Returns:
        Root Nonterminal of the parse tree

    Raises:
        LexError: The string contains an illegal character
        GrammarError: The string is not a well-formed formula
    """
    return _WffParser().parse(source)


def create(source: str) -> Formula:
    """Create a Formula from its string.

    Args:
        source: Formula string

    Returns:
        A formula with a complete parse tree

    Raises:
        LexError: The string contains an illegal character
        GrammarError: The string is not a well-formed formula
    """
    formula = Formula(source, parse(source))
    get_logger().formula_created(source, formula.render(), formula.var_count)
    return formula


def render(target: Union[Formula, ParseTreeNode]) -> str:
    """Return the canonical text of a formula or of any parse tree node."""
    if isinstance(target, Formula):
        return target.render()
    return str(target)


def enumerate_subformulas(formula: Formula) -> List[Formula]:
    """List one Formula per formula node of the parse tree.

    Subformulas come children first, then the formula containing them, so the
    whole formula is last. Repeated subformulas are listed once per
    occurrence; see unique_subformulas().
    """
    return [
        create(str(node))
        for node in iter_postorder(formula.root)
        if isinstance(node, Nonterminal)
    ]


def unique_subformulas(formula: Formula) -> List[Formula]:
    """Like enumerate_subformulas(), keeping only the first of equal texts."""
    seen = set()
    unique = []
    for sub in enumerate_subformulas(formula):
        text = sub.render()
        if text not in seen:
            seen.add(text)
            unique.append(sub)
    return unique


def find_variable_occurrences(target: Union[Formula, ParseTreeNode]) -> List[VariableOccurrence]:
    """List every proposition occurrence, left to right.

    Args:
        target: A formula or the root of any plain parse tree

    Returns:
        One VariableOccurrence per proposition token
    """
    root = target.root if isinstance(target, Formula) else target
    occurrences: List[VariableOccurrence] = []
    stack: List[Tuple[ParseTreeNode, Tuple[int, ...]]] = [(root, ())]
    while stack:
        node, path = stack.pop()
        if not isinstance(node, Nonterminal):
            continue
        if node.is_proposition:
            occurrences.append(VariableOccurrence(node.variable, node, path))
            continue
        stack.extend(
            (child, path + (index,)) for index, child in reversed(list(enumerate(node.children)))
        )
    return occurrences


def variables(target: Union[Formula, ParseTreeNode]) -> List[str]:
    """Distinct variable names in order of first occurrence."""
    return list(dict.fromkeys(occ.variable for occ in find_variable_occurrences(target)))


def subformula_tree(formula: Formula) -> SubformulaNode:
    """Build the tree of subformulas of a formula.

    Each node holds a subformula's text and the nodes of its immediate
    subformulas: none for a proposition, one for a negation, two for a binary
    connective.
    """
    root = SubformulaNode(str(formula.root))
    stack = [(formula.root, root)]
    while stack:
        node, tree_node = stack.pop()
        for child in node.children:
            if isinstance(child, Nonterminal):
                sub = SubformulaNode(str(child))
                tree_node.subformulas.append(sub)
                stack.append((child, sub))
    return root


def format_parse_tree(formula: Formula) -> str:
    """Lay out a formula's parse tree as indented text."""
    return format_tree(formula.root)
