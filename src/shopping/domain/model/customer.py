"""Customer value object — only used to look up a customer's cart."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    id: int
    phone: str
