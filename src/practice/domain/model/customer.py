"""Customer value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """A customer as seen by the discount policy.

    ``age`` is not validated; negative ages are accepted as-is.
    """

    name: str
    age: int
