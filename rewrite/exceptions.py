# rewrite/exceptions.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Custom exceptions for pattern substitution

"""Exceptions raised when a substitution cannot be carried out.

Every one of them is raised before the target formula is touched, so a
caught RewriteError always means the formula is unchanged.
"""


class RewriteError(RuntimeError):
    """Base class for substitution failures."""

    pass


class IndexOutOfRangeError(RewriteError):
    """The requested occurrence does not exist.

    Attributes:
        index: Requested zero-based occurrence index
        count: Number of occurrences found
    """

    def __init__(self, index: int, count: int, message: str = ""):
        self.index = index
        self.count = count
        super().__init__(
            message or f"Occurrence index {index} out of range ({count} occurrence(s) found)"
        )


class NoMatchError(IndexOutOfRangeError):
    """The search pattern does not occur in the formula at all.

    Attributes:
        pattern: The search pattern string
    """

    def __init__(self, pattern: str, index: int = 0):
        self.pattern = pattern
        super().__init__(index, 0, f"Pattern '{pattern}' does not occur in the formula")


class UnboundReplacementVariableError(RewriteError):
    """The replacement uses a variable that the search pattern does not bind.

    Attributes:
        variable: The unbound variable name
    """

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(
            f"Replacement variable '{variable}' does not appear in the search pattern"
        )
