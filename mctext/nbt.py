"""Holder for raw NBT compound data carried as a string."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["BinaryTagHolder"]


@dataclass(frozen=True)
class BinaryTagHolder:
    """Holds a compound binary tag in its raw string form."""

    value: str

    def __str__(self) -> str:
        return self.value