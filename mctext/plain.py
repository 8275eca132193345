"""Plain text serialisation that keeps only the text content."""

from __future__ import annotations

from typing import Iterator, Union

from .component import Component, Text

__all__ = ["PlainCodec"]


class PlainCodec:
    """Writes components as bare text; colours, decorations and events are dropped."""

    def marshal(self, component: Component) -> str:
        """Concatenate the content of a text component and all its children."""
        return "".join(self._pieces(component))

    def _pieces(self, component: Component) -> Iterator[str]:
        if not isinstance(component, Text):
            raise TypeError(f"unsupported component type {type(component).__name__}")
        yield component.content
        for child in component.children:
            yield from self._pieces(child)

    def unmarshal(self, data: Union[bytes, str]) -> Text:
        """Wrap the whole input in a single text component."""
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="replace")
        return Text(content=data)