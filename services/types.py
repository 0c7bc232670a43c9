"""Response envelopes shared by the services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServiceMessage:
    """
    Informational response carrying only a message.

    Attributes:
        message: Human-readable message.
    """

    message: str


CART_EMPTY = ServiceMessage(
    "Oopsie! Your cart feels a bit lonely. "
    "Toss in a product and let's get this shopping party started"
)
