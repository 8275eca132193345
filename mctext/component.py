"""Text components and their styles, click events and hover events."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, List, Optional, Union

from .color import Color
from .key import MINECRAFT_NAMESPACE, Key
from .nbt import BinaryTagHolder

__all__ = [
    "ClickAction",
    "ClickEvent",
    "CLICK_ACTIONS",
    "open_url",
    "open_file",
    "run_command",
    "suggest_command",
    "change_page",
    "copy_to_clipboard",
    "show_dialog",
    "custom_event",
    "HoverAction",
    "HoverEvent",
    "HOVER_ACTIONS",
    "ShowItemHover",
    "ShowEntityHover",
    "show_text",
    "show_item",
    "show_entity",
    "Decoration",
    "DECORATIONS_ORDER",
    "State",
    "state_by_bool",
    "Style",
    "Text",
    "Translation",
    "Component",
    "DEFAULT_FONT",
]


# --- click events -----------------------------------------------------------


class ClickAction(Enum):
    """What happens when a component is clicked."""

    OPEN_URL = "open_url"
    OPEN_FILE = "open_file"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"
    SHOW_DIALOG = "show_dialog"
    CUSTOM = "custom"

    @property
    def readable(self) -> bool:
        """Unreadable actions are dropped when decoding."""
        return self is not ClickAction.OPEN_FILE

    def __str__(self) -> str:
        return self.value


CLICK_ACTIONS: dict[str, ClickAction] = {action.value: action for action in ClickAction}


@dataclass(frozen=True)
class ClickEvent:
    """A click action together with its string argument."""

    action: ClickAction
    value: str


def open_url(url: str) -> ClickEvent:
    return ClickEvent(ClickAction.OPEN_URL, url)


def open_file(file: str) -> ClickEvent:
    return ClickEvent(ClickAction.OPEN_FILE, file)


def run_command(command: str) -> ClickEvent:
    return ClickEvent(ClickAction.RUN_COMMAND, command)


def suggest_command(command: str) -> ClickEvent:
    return ClickEvent(ClickAction.SUGGEST_COMMAND, command)


def change_page(page: str) -> ClickEvent:
    return ClickEvent(ClickAction.CHANGE_PAGE, page)


def copy_to_clipboard(text: str) -> ClickEvent:
    return ClickEvent(ClickAction.COPY_TO_CLIPBOARD, text)


def show_dialog(dialog: str) -> ClickEvent:
    return ClickEvent(ClickAction.SHOW_DIALOG, dialog)


def custom_event(event_id: str, payload: str = "") -> ClickEvent:
    """A custom event; a non-empty payload is joined to the id with ``|``."""
    value = f"{event_id}|{payload}" if payload else event_id
    return ClickEvent(ClickAction.CUSTOM, value)


# --- hover events -----------------------------------------------------------


class HoverAction(Enum):
    """What is shown when a component is hovered."""

    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"

    @property
    def readable(self) -> bool:
        """Unreadable actions are dropped when decoding."""
        return True

    @property
    def value_type(self) -> type:
        """The type of value this action carries."""
        return {
            HoverAction.SHOW_TEXT: Text,
            HoverAction.SHOW_ITEM: ShowItemHover,
            HoverAction.SHOW_ENTITY: ShowEntityHover,
        }[self]

    def __str__(self) -> str:
        return self.value


HOVER_ACTIONS: dict[str, HoverAction] = {action.value: action for action in HoverAction}


@dataclass(frozen=True)
class HoverEvent:
    """A hover action together with the value it displays."""

    action: HoverAction
    value: Any


@dataclass
class ShowItemHover:
    """An item shown on hover."""

    item: Key
    count: int
    nbt: Optional[BinaryTagHolder] = None


@dataclass
class ShowEntityHover:
    """An entity shown on hover."""

    type: Key
    id: uuid.UUID
    name: Optional["Component"] = None


def show_text(text: "Component") -> HoverEvent:
    return HoverEvent(HoverAction.SHOW_TEXT, text)


def show_item(item: ShowItemHover) -> HoverEvent:
    return HoverEvent(HoverAction.SHOW_ITEM, item)


def show_entity(entity: ShowEntityHover) -> HoverEvent:
    return HoverEvent(HoverAction.SHOW_ENTITY, entity)


# --- decorations and style --------------------------------------------------


class Decoration(str, Enum):
    """A text decoration such as ``underlined``."""

    OBFUSCATED = "obfuscated"
    BOLD = "bold"
    STRIKETHROUGH = "strikethrough"
    UNDERLINED = "underlined"
    ITALIC = "italic"

    def __str__(self) -> str:
        return self.value


DECORATIONS_ORDER: tuple[Decoration, ...] = tuple(Decoration)


class State(IntEnum):
    """A tri-state: unset, true or false."""

    NOT_SET = 0
    TRUE = 1
    FALSE = 2

    def __str__(self) -> str:
        if self is State.TRUE:
            return "true"
        if self is State.FALSE:
            return "false"
        return "null"


def state_by_bool(value: bool) -> State:
    return State.TRUE if value else State.FALSE


DEFAULT_FONT = Key(MINECRAFT_NAMESPACE, "default")


def _as_decoration(decoration: Union[Decoration, str]) -> Optional[Decoration]:
    try:
        return Decoration(decoration)
    except ValueError:
        return None


@dataclass
class Style:
    """The style of a component."""

    obfuscated: State = State.NOT_SET
    bold: State = State.NOT_SET
    strikethrough: State = State.NOT_SET
    underlined: State = State.NOT_SET
    italic: State = State.NOT_SET
    font: Optional[Key] = None
    color: Optional[Color] = None
    click_event: Optional[ClickEvent] = None
    hover_event: Optional[HoverEvent] = None
    insertion: Optional[str] = None

    def is_zero(self) -> bool:
        """Whether nothing in the style is set."""
        return self == Style()

    def decoration(self, decoration: Union[Decoration, str]) -> State:
        """The state of a decoration; NOT_SET for unknown decorations."""
        known = _as_decoration(decoration)
        if known is None:
            return State.NOT_SET
        return getattr(self, known.value)

    def set_decoration(self, decoration: Union[Decoration, str], state: State) -> None:
        """Set a decoration's state; unknown decorations are ignored."""
        known = _as_decoration(decoration)
        if known is not None:
            setattr(self, known.value, state)


# --- components -------------------------------------------------------------


@dataclass
class Text:
    """A literal text component."""

    content: str = ""
    style: Style = field(default_factory=Style)
    extra: List["Component"] = field(default_factory=list)

    @property
    def children(self) -> List["Component"]:
        return self.extra

    @children.setter
    def children(self, children: List["Component"]) -> None:
        self.extra = list(children)


@dataclass
class Translation:
    """A translatable component with a translation key and arguments."""

    key: str = ""
    style: Style = field(default_factory=Style)
    with_: List["Component"] = field(default_factory=list)

    @property
    def children(self) -> List["Component"]:
        return self.with_

    @children.setter
    def children(self, children: List["Component"]) -> None:
        self.with_ = list(children)


Component = Union[Text, Translation]