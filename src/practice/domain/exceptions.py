"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so callers
can catch the whole family at once, or a single kind when they care which
rule was broken.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException, ValueError):
    """An input value is malformed (e.g. a non-positive withdrawal amount)."""


class InvalidOperationError(DomainException):
    """The input is well-formed but applying it would break an invariant."""
