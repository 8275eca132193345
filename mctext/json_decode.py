"""Decoding of JSON text components into component objects."""

from __future__ import annotations

import json
import uuid
from typing import Any, Optional, Union

from . import key as keys
from .color import NAMES, Color, InvalidFormatError, parse_hex
from .component import (
    CLICK_ACTIONS,
    DECORATIONS_ORDER,
    HOVER_ACTIONS,
    ClickEvent,
    Component,
    Decoration,
    HoverAction,
    HoverEvent,
    ShowEntityHover,
    ShowItemHover,
    Style,
    Text,
    Translation,
    state_by_bool,
)
from .nbt import BinaryTagHolder

__all__ = ["ComponentDecodeError", "decode", "decode_value"]

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_CLICK_FIELDS = {
    "open_url": "url",
    "open_file": "path",
    "run_command": "command",
    "suggest_command": "command",
    "copy_to_clipboard": "value",
    "show_dialog": "dialog",
}


class ComponentDecodeError(ValueError):
    """Raised when JSON input cannot be decoded into a component."""


def decode(data: Union[bytes, str]) -> Component:
    """Parse JSON text and decode the component it holds."""
    try:
        value = json.loads(data)
    except ValueError as exc:
        raise ComponentDecodeError(str(exc)) from exc
    return decode_value(value)


def decode_value(value: Any) -> Component:
    """Decode an already parsed JSON value (object, string or array)."""
    if isinstance(value, dict):
        return _decode_component(value)
    if isinstance(value, str):
        return Text(content=value)
    if isinstance(value, list):
        return _decode_list(value)
    raise ComponentDecodeError(
        f"json input unmarshalled to unsupported type {_type_name(value)}"
    )


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _sprint(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if _is_number(value):
        return str(value)
    return json.dumps(value)


def _decode_list(items: list) -> Component:
    parent: Optional[Component] = None
    for item in items:
        child = decode_value(item)
        if parent is None:
            parent = child
        else:
            parent.children.append(child)
    if parent is None:
        raise ComponentDecodeError("component array must not be empty")
    return parent


def _decode_component(obj: dict) -> Component:
    component: Component
    if "text" in obj:
        component = Text(content=_sprint(obj["text"]))
    elif "translate" in obj:
        translation_key = _sprint(obj["translate"])
        if "with" in obj:
            args = obj["with"]
            if not isinstance(args, list):
                raise ComponentDecodeError(
                    'found invalid translate component, value of key "with" is not an array'
                )
            component = Translation(
                key=translation_key, with_=[decode_value(arg) for arg in args]
            )
        else:
            component = Translation(key=translation_key)
    else:
        component = Text()

    if "extra" in obj:
        extra = obj["extra"]
        if not isinstance(extra, list):
            raise ComponentDecodeError(
                f'value of key "extra" is not an array, but {_type_name(extra)}'
            )
        for item in extra:
            component.children.append(decode_value(item))

    style = _decode_style(obj)
    if not style.is_zero():
        component.style = style
    return component


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(text)


def _decode_style(obj: dict) -> Style:
    style = Style()
    if "font" in obj:
        try:
            style.font = _decode_key(obj["font"])
        except ComponentDecodeError as exc:
            raise ComponentDecodeError(
                f'error decoding value of "font" key: {exc}'
            ) from exc
    if "color" in obj:
        try:
            color, decoration = _decode_color(obj["color"])
        except ComponentDecodeError as exc:
            raise ComponentDecodeError(
                f'error decoding value of "color" key: {exc}'
            ) from exc
        if color is not None:
            style.color = color
        elif decoration is not None:
            style.set_decoration(decoration, state_by_bool(True))

    for decoration in DECORATIONS_ORDER:
        name = decoration.value
        if name not in obj:
            continue
        raw = obj[name]
        if isinstance(raw, bool):
            flag = raw
        elif isinstance(raw, str):
            try:
                flag = _parse_bool(raw)
            except ValueError as exc:
                raise ComponentDecodeError(
                    f'value of key "{name}" is not a bool, but str: {raw}'
                ) from exc
        else:
            raise ComponentDecodeError(
                f'value of key "{name}" is not a bool, but {_type_name(raw)}'
            )
        style.set_decoration(decoration, state_by_bool(flag))

    if "insertion" in obj:
        insertion = obj["insertion"]
        if not isinstance(insertion, str):
            raise ComponentDecodeError(
                f'value of key "insertion" is not a string, but {_type_name(insertion)}'
            )
        style.insertion = insertion

    click = _pick_event_object(obj, "click_event", "clickEvent")
    if click is not None:
        style.click_event = _decode_click_event(click)

    hover = _pick_event_object(obj, "hover_event", "hoverEvent")
    if hover is not None:
        style.hover_event = _decode_hover_event(hover)
    return style


def _pick_event_object(obj: dict, modern: str, legacy: str) -> Optional[dict]:
    if modern in obj:
        name = modern
    elif legacy in obj:
        name = legacy
    else:
        return None
    value = obj[name]
    if not isinstance(value, dict):
        raise ComponentDecodeError(
            f'value of key "{name}" is not a json object, but {_type_name(value)}'
        )
    return value


def _decode_color(raw: Any) -> tuple[Optional[Color], Optional[Decoration]]:
    if not isinstance(raw, str):
        raise ComponentDecodeError("must be a string")
    color: Optional[Color]
    if raw.startswith("#"):
        try:
            color = parse_hex(raw)
        except InvalidFormatError as exc:
            raise ComponentDecodeError(str(exc)) from exc
    else:
        color = NAMES.get(raw)
    try:
        decoration: Optional[Decoration] = Decoration(raw)
    except ValueError:
        decoration = None
    reset = decoration is None and raw.lower() == "reset"
    if color is None and decoration is None and not reset:
        raise ComponentDecodeError(f"don't know how to parse {raw} as color")
    return color, decoration


def _decode_click_event(obj: dict) -> Optional[ClickEvent]:
    action_name = obj.get("action")
    if not isinstance(action_name, str):
        return None
    action = CLICK_ACTIONS.get(action_name)
    if action is None or not action.readable:
        return None

    value = obj.get("value")
    if not isinstance(value, str):
        value = ""

    if not value:
        if action_name in _CLICK_FIELDS:
            found = obj.get(_CLICK_FIELDS[action_name])
            if isinstance(found, str):
                value = found
        elif action_name == "change_page":
            page = obj.get("page")
            if isinstance(page, str):
                value = page
            elif _is_number(page):
                value = str(int(page))
        elif action_name == "custom":
            event_id = obj.get("id")
            if isinstance(event_id, str):
                value = event_id
                payload = obj.get("payload")
                if isinstance(payload, str) and payload:
                    value = f"{event_id}|{payload}"

    if not value:
        return None
    return ClickEvent(action, value)


def _decode_hover_event(obj: dict) -> Optional[HoverEvent]:
    action_name = obj.get("action")
    if not isinstance(action_name, str):
        return None
    action = HOVER_ACTIONS.get(action_name)
    if action is None or not action.readable:
        return None

    has_legacy = "contents" in obj or "value" in obj
    value: Any = None
    if action is HoverAction.SHOW_TEXT:
        if "value" in obj:
            value = decode_value(obj["value"])
        elif "contents" in obj:
            value = decode_value(obj["contents"])
    elif action is HoverAction.SHOW_ITEM and "id" in obj and not has_legacy:
        value = _decode_item(obj)
    elif (
        action is HoverAction.SHOW_ENTITY
        and ("id" in obj or "type" in obj)
        and not has_legacy
    ):
        fields = _entity_fields(obj)
        if fields is None:
            return None
        value = _decode_entity(obj, *fields)
    elif "contents" in obj:
        value = _decode_hover_contents(obj["contents"], action)
    elif "value" in obj:
        value = _decode_hover_contents(obj["value"], action)

    if value is None:
        return None
    return HoverEvent(action, value)


def _decode_item(obj: dict) -> ShowItemHover:
    item = _decode_key(obj["id"])
    count = 1
    if "count" in obj:
        raw = obj["count"]
        if not _is_number(raw):
            raise ComponentDecodeError(
                f'show item hover event\'s value of key "count" is not a number, '
                f"but {_type_name(raw)}"
            )
        count = int(raw)
    tag = None
    if "tag" in obj:
        raw = obj["tag"]
        if not isinstance(raw, str):
            raise ComponentDecodeError(
                f'show item hover event\'s value of key "tag" is not a string, '
                f"but {_type_name(raw)}"
            )
        tag = BinaryTagHolder(raw)
    return ShowItemHover(item=item, count=count, nbt=tag)


def _entity_fields(obj: dict) -> Optional[tuple[str, str]]:
    if "id" in obj and "uuid" in obj:
        return "id", "uuid"
    if "type" in obj and "id" in obj:
        return "type", "id"
    return None


def _decode_entity(obj: dict, type_field: str, id_field: str) -> ShowEntityHover:
    entity_type = _decode_key(obj[type_field])
    entity_id = _decode_uuid(obj[id_field])
    name = decode_value(obj["name"]) if "name" in obj else None
    return ShowEntityHover(type=entity_type, id=entity_id, name=name)


def _decode_hover_contents(raw: Any, action: HoverAction) -> Any:
    if isinstance(raw, dict):
        obj = raw
    elif isinstance(raw, list):
        return _decode_list(raw)
    elif isinstance(raw, str):
        if action is HoverAction.SHOW_TEXT:
            return decode(raw)
        try:
            parsed = json.loads(raw)
        except ValueError as exc:
            raise ComponentDecodeError(str(exc)) from exc
        if not isinstance(parsed, dict):
            raise ComponentDecodeError(
                f"hover event value must hold a json object, but {_type_name(parsed)}"
            )
        obj = parsed
    else:
        raise ComponentDecodeError(
            'hover event\'s value of key "contents" is not a json object nor string, '
            f"but {_type_name(raw)}"
        )

    if action is HoverAction.SHOW_TEXT:
        return _decode_component(obj)
    if action is HoverAction.SHOW_ITEM:
        if "id" not in obj:
            raise ComponentDecodeError('show item hover event misses key "id"')
        return _decode_item(obj)
    fields = _entity_fields(obj)
    if fields is None:
        raise ComponentDecodeError(
            "show entity hover event misses required keys. "
            f"Available fields: {sorted(obj)}"
        )
    return _decode_entity(obj, *fields)


def _decode_key(raw: Any) -> keys.Key:
    if not isinstance(raw, str):
        raise ComponentDecodeError("must be as string")
    try:
        return keys.parse_valid(raw)
    except ValueError as exc:
        raise ComponentDecodeError(str(exc)) from exc


def _decode_uuid(raw: Any) -> uuid.UUID:
    if not isinstance(raw, str):
        raise ComponentDecodeError("must be as string")
    try:
        return uuid.UUID(raw)
    except ValueError as exc:
        raise ComponentDecodeError(f"invalid UUID: {raw}") from exc