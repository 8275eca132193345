"""Legacy section-sign formatting codes such as ``§cRed §lbold``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Union

from .color import NAMES_ORDER, RGB, Color, Named
from .component import (
    DECORATIONS_ORDER,
    Component,
    Decoration,
    State,
    Text,
    open_url,
)

__all__ = [
    "SECTION_CHAR",
    "AMPERSAND_CHAR",
    "HEX_CHAR",
    "DEFAULT_CHAR",
    "DEFAULT_HEX_CHAR",
    "CHARS",
    "Reset",
    "Format",
    "LegacyCodec",
]

SECTION_CHAR = "§"
"""The legacy character used by Minecraft."""
AMPERSAND_CHAR = "&"
"""The legacy character frequently used by configurations and commands."""
HEX_CHAR = "#"
"""The character used to prefix hex colours."""

DEFAULT_CHAR = SECTION_CHAR
DEFAULT_HEX_CHAR = HEX_CHAR

CHARS = "0123456789abcdefklmnor"

_URL = re.compile(r"(?:(https?)://)?([-\w_.]+\.\w{2,})(/\S*)?", re.ASCII)


@dataclass(frozen=True)
class Reset:
    """The legacy reset format."""

    def __str__(self) -> str:
        return "reset"


Format = Union[Named, RGB, Decoration, Reset]

_FORMATS: tuple = (*NAMES_ORDER, *DECORATIONS_ORDER, Reset())
if len(_FORMATS) != len(CHARS):
    raise RuntimeError("formats length differs from legacy chars length")

_CODE_BY_FORMAT = {fmt: code for code, fmt in zip(CHARS, _FORMATS)}
_FORMAT_BY_CODE = {code: fmt for code, fmt in zip(CHARS, _FORMATS)}


@dataclass
class _Formatting:
    """A colour and a set of decorations in effect."""

    color: Optional[Color] = None
    decorations: Set[Decoration] = field(default_factory=set)

    def copy(self) -> "_Formatting":
        return _Formatting(self.color, set(self.decorations))

    def assign(self, other: "_Formatting") -> None:
        self.color = other.color
        self.decorations = set(other.decorations)

    def apply(self, component: Component) -> None:
        style = component.style
        if style.color is not None:
            self.color = style.color
        for decoration in DECORATIONS_ORDER:
            state = style.decoration(decoration)
            if state is State.TRUE:
                self.decorations.add(decoration)
            elif state is State.FALSE:
                self.decorations.discard(decoration)

    def ordered_decorations(self) -> Iterator[Decoration]:
        return (d for d in DECORATIONS_ORDER if d in self.decorations)


class _Writer:
    """Accumulates legacy text while tracking the formatting already written."""

    def __init__(self, codec: "LegacyCodec") -> None:
        self._codec = codec
        self._pieces: List[str] = []
        self._current = _Formatting()

    def text(self) -> str:
        return "".join(self._pieces)

    def append(self, component: Optional[Component], formatting: _Formatting) -> None:
        if component is None:
            return
        formatting.apply(component)
        if isinstance(component, Text) and component.content:
            self._sync(formatting)
            self._pieces.append(component.content)
        if not component.children:
            return
        child_formatting = formatting.copy()
        for child in component.children:
            if child is None:
                continue
            self.append(child, child_formatting)
            child_formatting.assign(formatting)

    def _sync(self, wanted: _Formatting) -> None:
        # Decorations cannot be undone, so any difference needs a full reset.
        if wanted.color == self._current.color and wanted.decorations == self._current.decorations:
            return
        self._write_format(wanted.color if wanted.color is not None else Reset())
        self._current.color = wanted.color
        for decoration in wanted.ordered_decorations():
            self._write_format(decoration)
        self._current.decorations = set(wanted.decorations)

    def _write_format(self, fmt: Format) -> None:
        self._pieces.append(self._codec.char)
        self._pieces.append(self._code(fmt))

    def _code(self, fmt: Format) -> str:
        if isinstance(fmt, (RGB, Named)):
            if self._codec.no_downsample_color:
                return fmt.hex()
            fmt = fmt.named()
        return _CODE_BY_FORMAT[fmt]


def _apply_format(text: Text, fmt: Format) -> bool:
    """Apply a format to text; return True if it resets what comes before it."""
    if isinstance(fmt, RGB):
        text.style.color = fmt
        return True
    if isinstance(fmt, Named):
        text.style.color = fmt.rgb
        return True
    if isinstance(fmt, Decoration):
        text.style.set_decoration(fmt, State.TRUE)
        return False
    return isinstance(fmt, Reset)


def _clean(text: str) -> str:
    return text.replace("\ufffd", "")


def _last_index(text: str, char: str, end: int) -> int:
    end = min(len(text), end)
    if end < 0:
        return -1
    return text.rfind(char, 0, end)


@dataclass
class LegacyCodec:
    """Encodes components to legacy formatting codes and decodes them back.

    char: the format character, ``§`` by default.
    hex_char: the character prefixing hex colours.
    no_downsample_color: write hex colours instead of the nearest named colour.
    clickable_url: on decoding plain text, add an open_url click event for a URL in it.
    """

    char: str = DEFAULT_CHAR
    hex_char: str = DEFAULT_HEX_CHAR
    no_downsample_color: bool = False
    clickable_url: bool = False

    def marshal(self, component: Component) -> str:
        """Return the legacy formatted text of a component."""
        writer = _Writer(self)
        writer.append(component, _Formatting())
        return writer.text()

    def unmarshal(self, data: Union[bytes, str]) -> Text:
        """Decode legacy formatted text into a text component."""
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="replace")
        source = data

        position = _last_index(source, self.char, len(source) - 1)
        if position == -1:
            return self._extract_url(Text(content=source))

        parts: List[Component] = []
        current: Optional[Text] = None
        reset = False
        end = len(source)
        while True:
            fmt = _FORMAT_BY_CODE.get(source[position + 1])
            if fmt is not None:
                start = position + 2
                if start != end:
                    if current is None:
                        current = Text()
                    elif reset:
                        parts.append(current)
                        reset = False
                        current = Text()
                    else:
                        current = Text(extra=[current])
                    current.content = _clean(source[start:end])
                elif current is None:
                    current = Text()
                if not reset:
                    reset = _apply_format(current, fmt)
                end = position
            position = _last_index(source, self.char, position)
            if position == -1:
                break

        if current is not None:
            parts.append(current)
        parts.reverse()

        content = _clean(source[:end]) if end > 0 else ""
        return Text(content=content, extra=parts)

    def _extract_url(self, text: Text) -> Text:
        if not self.clickable_url:
            return text
        match = _URL.search(text.content)
        if match and match.group(0):
            text.style.click_event = open_url(match.group(0))
        return text