"""JSON serialisation of text components, for both current and older clients."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Union

from .color import Color
from .component import (
    DECORATIONS_ORDER,
    ClickEvent,
    Component,
    HoverAction,
    HoverEvent,
    ShowEntityHover,
    ShowItemHover,
    State,
    Style,
    Text,
    Translation,
)
from .json_decode import decode

__all__ = ["JsonCodec"]

_INTEGER = re.compile(r"[+-]?[0-9]+")

_CLICK_FIELDS = {
    "open_url": "url",
    "open_file": "path",
    "run_command": "command",
    "suggest_command": "command",
    "copy_to_clipboard": "value",
    "show_dialog": "dialog",
}


@dataclass
class JsonCodec:
    """Encodes components to JSON text and decodes them back.

    Decoding accepts every supported format; the flags only change encoding.

    no_downsample_color: write hex colours instead of the nearest named colour.
    no_legacy_hover: leave out the old ``value`` key next to ``contents``.
    use_legacy_field_names: write ``clickEvent``/``hoverEvent``.
    use_legacy_click_event_structure: write click values under ``value``.
    use_legacy_hover_event_structure: nest hover data under ``contents``.
    sort_keys: sort object keys in the output.
    """

    no_downsample_color: bool = False
    no_legacy_hover: bool = False
    use_legacy_field_names: bool = False
    use_legacy_click_event_structure: bool = False
    use_legacy_hover_event_structure: bool = False
    sort_keys: bool = False

    def encode(self, component: Component) -> dict:
        """Return the JSON object for a component as a dict."""
        obj: dict = {}
        if isinstance(component, Text):
            obj["text"] = component.content
            children_key = "extra"
        elif isinstance(component, Translation):
            obj["translate"] = component.key
            children_key = "with"
        else:
            raise TypeError(
                f"unsupported component type {type(component).__name__}"
            )
        self._encode_style(obj, component.style)
        children = [self.encode(child) for child in component.children]
        if children:
            obj[children_key] = children
        return obj

    def marshal(self, component: Component) -> str:
        """Return the JSON text for a component."""
        return json.dumps(
            self.encode(component),
            separators=(",", ":"),
            sort_keys=self.sort_keys,
            ensure_ascii=False,
        )

    def unmarshal(self, data: Union[bytes, str]) -> Component:
        """Decode a component from JSON text."""
        return decode(data)

    def _encode_style(self, obj: dict, style: Style) -> None:
        if style.font is not None:
            obj["font"] = str(style.font)
        if style.color is not None:
            obj["color"] = self._encode_color(style.color)
        for decoration in DECORATIONS_ORDER:
            state = style.decoration(decoration)
            if state is not State.NOT_SET:
                obj[decoration.value] = state is State.TRUE
        if style.insertion is not None:
            obj["insertion"] = style.insertion
        if style.click_event is not None:
            name = "clickEvent" if self.use_legacy_field_names else "click_event"
            obj[name] = self._encode_click_event(style.click_event)
        if style.hover_event is not None:
            hover = self._encode_hover_event(style.hover_event)
            if hover:
                name = "hoverEvent" if self.use_legacy_field_names else "hover_event"
                obj[name] = hover

    def _encode_color(self, color: Color) -> str:
        if not self.no_downsample_color:
            return color.named().name
        return color.hex()

    def _encode_click_event(self, event: ClickEvent) -> dict:
        action = event.action.value
        value = event.value
        obj: dict[str, Any] = {"action": action}
        if self.use_legacy_click_event_structure:
            obj["value"] = value
        elif action in _CLICK_FIELDS:
            obj[_CLICK_FIELDS[action]] = value
        elif action == "change_page":
            if value:
                obj["page"] = int(value) if _INTEGER.fullmatch(value) else value
        elif action == "custom":
            event_id, sep, payload = value.partition("|")
            obj["id"] = event_id
            if sep and payload:
                obj["payload"] = payload
        else:
            obj["value"] = value
        return obj

    def _nest_legacy(self, obj: dict, contents: dict) -> None:
        obj["contents"] = contents
        if not self.no_legacy_hover:
            obj["value"] = contents

    def _encode_hover_event(self, event: HoverEvent) -> dict:
        obj: dict[str, Any] = {"action": event.action.value}
        value = event.value
        legacy = self.use_legacy_hover_event_structure

        if event.action is HoverAction.SHOW_TEXT and isinstance(value, Text):
            text_obj = self.encode(value)
            if legacy:
                self._nest_legacy(obj, text_obj)
            else:
                obj["value"] = text_obj

        elif event.action is HoverAction.SHOW_ITEM and isinstance(value, ShowItemHover):
            if legacy:
                item_obj: dict[str, Any] = {"id": str(value.item), "count": value.count}
                if value.nbt is not None:
                    item_obj["tag"] = str(value.nbt)
                self._nest_legacy(obj, item_obj)
            else:
                obj["id"] = str(value.item)
                obj["count"] = value.count
                if value.nbt is not None:
                    obj["tag"] = str(value.nbt)

        elif event.action is HoverAction.SHOW_ENTITY and isinstance(
            value, ShowEntityHover
        ):
            name_obj = self.encode(value.name)
            if legacy:
                self._nest_legacy(
                    obj,
                    {"type": str(value.type), "id": str(value.id), "name": name_obj},
                )
            else:
                obj["id"] = str(value.type)
                obj["uuid"] = str(value.id)
                obj["name"] = name_obj

        return obj