# tests/rewrite_tests/test_substitution.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Test suite for in-place substitution

"""Test suite for rewriting pattern occurrences in place.

Covers successful rewrites at chosen occurrences, reuse of captured
subformulas, and the guarantee that every failed substitution leaves the
formula exactly as it was.
"""

import pytest
from wff import GrammarError, LexError, create, render
from wff.tree import iter_preorder
from rewrite import (
    IndexOutOfRangeError,
    NoMatchError,
    RewriteError,
    UnboundReplacementVariableError,
    match_groups,
    substitute,
)
from utils.logger import get_logger


class TestSubstitution:
    """Test cases for successful substitutions."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    REWRITE_CASES = [
        # (formula, search, replace, index, expected)
        ("(p ^ q)", "(a ^ b)", "(b ^ a)", 0, "(q^p)"),
        ("((p v q) ^ r)", "(a ^ b)", "(b ^ a)", 0, "(r^(pvq))"),
        ("((p ^ q) ^ r)", "(a ^ b)", "(b ^ a)", 0, "(r^(p^q))"),
        ("((p ^ q) ^ r)", "(a ^ b)", "(b ^ a)", 1, "((q^p)^r)"),
        ("(p => q)", "(a => b)", "(~a v b)", 0, "(~pvq)"),
        ("((p ^ q) <=> r)", "(a <=> b)", "(b <=> a)", 0, "(r<=>(p^q))"),
        ("~~(p => ~~q)", "~~a", "a", 0, "(p=>~~q)"),
        ("~~(p => ~~q)", "~~a", "a", 1, "~~(p=>q)"),
        ("~(p ^ q)", "~(a ^ b)", "(~a v ~b)", 0, "(~pv~q)"),
        ("(p ^ (q v r))", "(a ^ b)", "b", 0, "(qvr)"),
        ("(p ^ q)", "(a ^ b)", "((a ^ b) v (a ^ a))", 0, "((p^q)v(p^p))"),
        ("(p v q)", "a", "~~a", 2, "(pv~~q)"),
    ]

    @pytest.mark.parametrize("formula, search, replace, index, expected", REWRITE_CASES)
    def test_rewrite(self, formula, search, replace, index, expected):
        """Test a substitution produces the expected formula.

        Args:
            formula: Formula string
            search: Search pattern
            replace: Replacement pattern
            index: Occurrence index
            expected: Canonical text after substitution
        """
        parsed = create(formula)

        assert substitute(parsed, search, replace, index) is True
        assert render(parsed) == expected

    def test_root_node_is_rewritten_in_place(self):
        """Test the formula keeps its root object when the root is rewritten."""
        formula = create("(p ^ q)")
        root = formula.root

        substitute(formula, "(a ^ b)", "(b ^ a)", 0)

        assert formula.root is root
        assert formula.source == "(p ^ q)"

    def test_repeated_replacement_variable_shares_no_nodes(self):
        """Test each use of a variable in the replacement gets its own copy."""
        formula = create("(p ^ q)")
        substitute(formula, "(a ^ b)", "(a ^ a)", 0)

        left = formula.root.children[1]
        right = formula.root.children[3]
        assert render(left) == render(right) == "p"
        assert left is not right

        node_ids = [id(node) for node in iter_preorder(formula.root)]
        assert len(node_ids) == len(set(node_ids))

    def test_rewritten_formula_can_be_searched_again(self):
        """Test the rewritten tree is a valid formula tree."""
        formula = create("(p ^ q)")
        substitute(formula, "(a ^ b)", "(b ^ a)", 0)

        (group,) = match_groups(formula, "(a ^ b)")
        assert render(group.bindings_by_variable()["a"]) == "q"
        assert render(create(render(formula))) == render(formula)

    def test_var_count_follows_the_tree(self):
        """Test the distinct variable count reflects the rewritten formula."""
        formula = create("(p ^ q)")
        assert formula.var_count == 2

        substitute(formula, "(a ^ b)", "a", 0)

        assert render(formula) == "p"
        assert formula.var_count == 1

    def test_chained_rewrites(self):
        """Test several substitutions applied one after another."""
        formula = create("~(p => q)")

        substitute(formula, "(a => b)", "(~a v b)", 0)
        substitute(formula, "~(a v b)", "(~a ^ ~b)", 0)
        substitute(formula, "~~a", "a", 0)

        assert render(formula) == "(p^~q)"


class TestFailedSubstitution:
    """Test cases for substitutions that must leave the formula unchanged."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    FAILURE_CASES = [
        # (formula, search, replace, index, error)
        ("(p ^ q)", "(a ^ b)", "(b ^ a)", 1, IndexOutOfRangeError),
        ("(p ^ q)", "(a ^ b)", "(b ^ a)", 7, IndexOutOfRangeError),
        ("(p ^ q)", "(a ^ b)", "(b ^ a)", -1, IndexOutOfRangeError),
        ("(p v q)", "(a ^ b)", "(b ^ a)", 0, NoMatchError),
        ("(p ^ q)", "(a ^ a)", "a", 0, NoMatchError),
        ("(p ^ q)", "(a ^ b)", "(a ^ c)", 0, UnboundReplacementVariableError),
        ("((p ^ q) ^ r)", "(a ^ b)", "~((b ^ a) v c)", 1, UnboundReplacementVariableError),
        ("(p ^ q)", "(a ^ b)", "(b ^ a", 0, GrammarError),
        ("(p ^ q)", "(a ^ b)", "(b & a)", 0, LexError),
        ("(p ^ q)", "(a ^ b ^ c)", "a", 0, GrammarError),
        ("(p ^ q)", "(a | b)", "a", 0, LexError),
    ]

    @pytest.mark.parametrize("formula, search, replace, index, error", FAILURE_CASES)
    def test_failure_leaves_formula_unchanged(self, formula, search, replace, index, error):
        """Test every failure raises and leaves the formula byte-for-byte intact.

        Args:
            formula: Formula string
            search: Search pattern
            replace: Replacement pattern
            index: Occurrence index
            error: Expected exception type
        """
        parsed = create(formula)
        before = render(parsed)
        nodes_before = list(iter_preorder(parsed.root))

        with pytest.raises(error):
            substitute(parsed, search, replace, index)

        assert render(parsed) == before
        assert list(iter_preorder(parsed.root)) == nodes_before

    @pytest.mark.parametrize("formula, search, replace, index, error", FAILURE_CASES)
    def test_failure_is_logged_as_rejected(self, monkeypatch, formula, search, replace, index, error):
        """Test every failed substitution is reported through the logger.

        Args:
            monkeypatch: Pytest monkeypatch fixture
            formula: Formula string
            search: Search pattern
            replace: Replacement pattern
            index: Occurrence index
            error: Expected exception type
        """
        rejected = []
        monkeypatch.setattr(
            self.logger,
            "substitution_rejected",
            lambda before, reason: rejected.append((before, reason)),
        )
        parsed = create(formula)

        with pytest.raises(error):
            substitute(parsed, search, replace, index)

        assert len(rejected) == 1
        assert rejected[0][0] == render(parsed)

    def test_no_match_is_an_index_error(self):
        """Test an absent pattern counts as an out-of-range occurrence."""
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            substitute(create("(p v q)"), "(a ^ b)", "a", 0)

        assert isinstance(exc_info.value, NoMatchError)
        assert isinstance(exc_info.value, RewriteError)
        assert exc_info.value.count == 0
        assert exc_info.value.pattern == "(a ^ b)"

    def test_index_error_reports_counts(self):
        """Test the error names the requested index and available occurrences."""
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            substitute(create("((p ^ q) ^ r)"), "(a ^ b)", "a", 2)

        assert exc_info.value.index == 2
        assert exc_info.value.count == 2
        assert not isinstance(exc_info.value, NoMatchError)

    def test_unbound_variable_is_named(self):
        """Test the error names the replacement variable that has no binding."""
        with pytest.raises(UnboundReplacementVariableError) as exc_info:
            substitute(create("(p ^ q)"), "(a ^ b)", "(a v z)", 0)

        assert exc_info.value.variable == "z"
        assert "'z'" in str(exc_info.value)

    def test_previous_matches_survive_failed_substitution(self):
        """Test a failed substitution does not disturb existing match groups."""
        formula = create("((p ^ q) ^ r)")
        groups = match_groups(formula, "(a ^ b)")

        with pytest.raises(IndexOutOfRangeError):
            substitute(formula, "(a ^ b)", "(b ^ a)", 5)

        assert [g.root for g in match_groups(formula, "(a ^ b)")] == [g.root for g in groups]
