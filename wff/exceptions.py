# wff/exceptions.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Custom exceptions for formula tokenization and parsing

"""Domain-specific exceptions for wff processing.

Two failure modes exist when turning a string into a formula: the string
contains characters outside the wff alphabet (LexError), or the token
sequence does not satisfy the formula grammar (GrammarError). Both derive
from WffError so callers can treat construction failures uniformly.
"""


class WffError(RuntimeError):
    """Base class for all formula construction failures."""

    pass


class LexError(WffError):
    """Exception raised when the tokenizer meets an unrecognized character.

    Also raised for malformed compound operators, e.g. a '=' that is not
    followed by '>'.

    Attributes:
        character: The offending character
        position: Zero-based index of the character in the input string
    """

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Illegal character '{character}' encountered at position {position}"
        )


class GrammarError(WffError):
    """Exception raised when a token sequence is not a well-formed formula.

    Covers unexpected tokens, missing connectives or parentheses, empty
    input, and tokens left over after a complete formula.
    """

    pass
