"""
Exceptions raised by the bpd package.
"""


class PreconditionError(ValueError):
    """Raised when a move is applied where its legality predicate is false."""

    pass


class InvalidInputError(ValueError):
    """Raised on a malformed permutation, tile matrix, symbol grid or ASM."""

    pass


class OutOfBoundsError(IndexError):
    """Raised when a cell or rectangle lies outside the 1..n range of a grid."""

    pass
