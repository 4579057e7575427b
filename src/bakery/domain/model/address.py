"""Saved shipping address belonging to a shopper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Address:
    id: int | None
    owner_id: int
    text: str
    label: str | None = None

    def formatted(self) -> str:
        """Flat single-line form stored on orders."""
        return " ".join(self.text.split())
