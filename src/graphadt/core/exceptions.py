"""
Custom exceptions for the graph ADT.

This module defines the hierarchy of exceptions raised by graph operations.
Invalid caller input is reported through ValidationError subclasses, which are
also ValueErrors so callers can catch them generically. A failed internal
representation invariant is an implementation defect and is reported through
RepInvariantError, an AssertionError.
"""


class ValidationError(ValueError):
    """
    Raised when an argument to a graph operation is rejected.

    This exception is raised synchronously, before any state change, when
    input fails to meet the operation's preconditions.

    Examples:
        * Missing vertex label
        * Negative edge weight
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidVertexError(ValidationError):
    """
    Raised when a vertex label is missing or unusable.

    Examples:
        * ``None`` passed as a vertex, source or target
        * Unhashable label such as a list or dict
    """


class InvalidWeightError(ValidationError):
    """
    Raised when an edge weight is outside the allowed domain.

    Weights passed to ``set`` must be integers greater than or equal to zero.
    Stored edge records must carry a weight of at least one.

    Examples:
        * Negative weight
        * Floating point or boolean weight
        * Edge record constructed with weight zero
    """


class RepInvariantError(AssertionError):
    """
    Raised when a graph's internal representation invariant does not hold.

    This exception signals a defect in a graph implementation, not bad input.
    It is only raised when debug invariant checking is enabled through
    ``GraphConfig.check_rep``.

    Examples:
        * Edge whose endpoint is missing from the vertex set
        * Stored edge with a non-positive weight
        * Duplicate vertex label
    """

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])

    def __str__(self) -> str:
        """Format invariant error message with the individual violations."""
        base = f"Representation Invariant Error: {super().__str__()}"
        if not self.errors:
            return base
        return base + "".join(f"\n  - {error}" for error in self.errors)
