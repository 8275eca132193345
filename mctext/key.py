"""Namespaced resource keys such as ``minecraft:diamond``."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "MINECRAFT_NAMESPACE",
    "Key",
    "parse",
    "parse_valid",
    "make",
    "namespace_valid",
    "value_valid",
]

MINECRAFT_NAMESPACE = "minecraft"

_NAMESPACE_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789_-.")
_VALUE_CHARS = _NAMESPACE_CHARS | {"/"}


@dataclass(frozen=True)
class Key:
    """A namespace and a value, written ``namespace:value``."""

    namespace: str
    value: str

    def __str__(self) -> str:
        return f"{self.namespace}:{self.value}"


def _split(text: str) -> tuple[str, str]:
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError('count of ":" must be 1')
    return parts[0], parts[1]


def parse(text: str) -> Key:
    """Split ``namespace:value`` into a key without validating the parts."""
    namespace, value = _split(text)
    return Key(namespace, value)


def parse_valid(text: str) -> Key:
    """Split ``namespace:value`` into a key and validate both parts."""
    namespace, value = _split(text)
    return make(namespace, value)


def make(namespace: str, value: str) -> Key:
    """Build a key, raising ValueError if either part holds invalid characters."""
    if not namespace_valid(namespace) or not value_valid(value):
        raise ValueError("invalid namespace or value")
    return Key(namespace, value)


def namespace_valid(namespace: str) -> bool:
    """Whether every character is allowed in a namespace."""
    return all(ch in _NAMESPACE_CHARS for ch in namespace)


def value_valid(value: str) -> bool:
    """Whether every character is allowed in a value."""
    return all(ch in _VALUE_CHARS for ch in value)