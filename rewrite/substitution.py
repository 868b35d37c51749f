# rewrite/substitution.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# In-place rewriting of one pattern occurrence

"""Rewrites one occurrence of a search pattern inside a formula.

    >>> f = create("((p v q) ^ r)")
    >>> substitute(f, "(a ^ b)", "(b ^ a)", 0)
    True
    >>> f.render()
    '(r^(pvq))'

All checks run before the formula is modified: an unknown occurrence, an
invalid replacement string, or a replacement variable the search pattern
does not bind leaves the formula exactly as it was. Captured subformulas are
copied into the replacement, so a variable may appear in it any number of
times. Matches obtained before a substitution must not be reused after it.
"""

from typing import Dict

from wff import Formula, WffError, parse
from wff.tree import Nonterminal, ParseTreeNode, Terminal, copy_subtree
from .exceptions import IndexOutOfRangeError, NoMatchError, UnboundReplacementVariableError
from .matcher import search
from .pattern import Pattern
from utils.logger import get_logger


def substitute(
    formula: Formula, search_pattern: str, replacement_pattern: str, occurrence_index: int
) -> bool:
    """Replace one occurrence of search_pattern with replacement_pattern.

    Args:
        formula: Formula to rewrite in place
        search_pattern: Pattern string selecting what to replace
        replacement_pattern: Pattern string written over the occurrence; its
            variables take the subformulas captured by search_pattern
        occurrence_index: Zero-based index among the occurrences, in the
            order reported by rewrite.match_groups()

    Returns:
        True once the formula has been rewritten

    Raises:
        LexError, GrammarError: A pattern string is malformed
        NoMatchError: search_pattern does not occur in the formula
        IndexOutOfRangeError: occurrence_index is not a valid occurrence
        UnboundReplacementVariableError: The replacement uses a variable the
            search pattern does not bind
    """
    logger = get_logger()
    before = formula.render()

    try:
        pattern = Pattern.from_string(search_pattern)
    except WffError as e:
        logger.substitution_rejected(before, f"invalid search pattern: {e}")
        raise
    groups = search(formula.root, pattern)

    if not groups:
        logger.substitution_rejected(before, f"no occurrence of '{search_pattern}'")
        raise NoMatchError(search_pattern, occurrence_index)
    if not 0 <= occurrence_index < len(groups):
        logger.substitution_rejected(before, f"occurrence {occurrence_index} of {len(groups)}")
        raise IndexOutOfRangeError(occurrence_index, len(groups))

    group = groups[occurrence_index]
    try:
        resolved = _resolve(parse(replacement_pattern), group.bindings_by_variable())
    except (WffError, UnboundReplacementVariableError) as e:
        logger.substitution_rejected(before, str(e))
        raise

    group.root.children = resolved.children

    logger.substitution_applied(before, formula.render(), occurrence_index)
    return True


def _resolve(node: Nonterminal, captured: Dict[str, ParseTreeNode]) -> Nonterminal:
    """Build a copy of a replacement tree with its variables filled in.

    Raises:
        UnboundReplacementVariableError: A variable has no captured subtree
    """
    root = Nonterminal()
    stack = [(node, root)]
    while stack:
        source, target = stack.pop()
        if source.is_proposition:
            if source.variable not in captured:
                raise UnboundReplacementVariableError(source.variable)
            target.children = copy_subtree(captured[source.variable]).children
            continue
        for child in source.children:
            if isinstance(child, Nonterminal):
                resolved = Nonterminal()
                stack.append((child, resolved))
            else:
                resolved = Terminal(child.token)
            target.children.append(resolved)
    return root
