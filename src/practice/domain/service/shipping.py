"""Domain service: Shipping."""

from __future__ import annotations

from practice.domain.model.value_objects import Address


def shipping_label(address: Address) -> str:
    return f"Shipping to: {address.street}, {address.city}"
