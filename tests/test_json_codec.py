import uuid

import pytest

from mctext.color import AQUA, BLUE, RED, hex_int
from mctext.component import (
    DEFAULT_FONT,
    ShowEntityHover,
    ShowItemHover,
    State,
    Style,
    Text,
    Translation,
    change_page,
    copy_to_clipboard,
    custom_event,
    open_url,
    run_command,
    show_dialog,
    show_entity,
    show_item,
    show_text,
    suggest_command,
)
from mctext.json_codec import JsonCodec
from mctext.json_decode import ComponentDecodeError
from mctext.key import parse
from mctext.nbt import BinaryTagHolder

PRE_1215 = JsonCodec(
    no_legacy_hover=False,
    no_downsample_color=True,
    use_legacy_field_names=True,
    use_legacy_click_event_structure=True,
    use_legacy_hover_event_structure=True,
    sort_keys=True,
)

PLUS_1215 = JsonCodec(
    no_legacy_hover=True,
    no_downsample_color=True,
    sort_keys=True,
)

COMPAT = JsonCodec(no_legacy_hover=True, no_downsample_color=True, sort_keys=True)

JSON_TXT_NEW = (
    '{"bold":false,"click_event":{"action":"suggest_command","command":"/help"},'
    '"color":"#55ffff","extra":[{"color":"#ff5555","italic":true,"obfuscated":false,'
    '"text":" there!"}],"font":"minecraft:default","hover_event":{"action":"show_text",'
    '"value":{"extra":[{"text":"!"}],"text":" world"}},"insertion":"insert me",'
    '"italic":false,"obfuscated":true,"text":"Hello","underlined":true}'
)

JSON_TXT_LEGACY = (
    '{"bold":false,"clickEvent":{"action":"suggest_command","value":"/help"},'
    '"color":"#55ffff","extra":[{"color":"#ff5555","italic":true,"obfuscated":false,'
    '"text":" there!"}],"font":"minecraft:default","hoverEvent":{"action":"show_text",'
    '"contents":{"extra":[{"text":"!"}],"text":" world"},'
    '"value":{"extra":[{"text":"!"}],"text":" world"}},"insertion":"insert me",'
    '"italic":false,"obfuscated":true,"text":"Hello","underlined":true}'
)

ENTITY_UUID = "12345678-1234-1234-1234-123456789abc"


def make_txt():
    return Text(
        content="Hello",
        extra=[
            Text(
                content=" there!",
                style=Style(color=RED.rgb, italic=State.TRUE, obfuscated=State.FALSE),
            )
        ],
        style=Style(
            obfuscated=State.TRUE,
            bold=State.FALSE,
            strikethrough=State.NOT_SET,
            underlined=State.TRUE,
            italic=State.FALSE,
            font=DEFAULT_FONT,
            color=AQUA.rgb,
            click_event=suggest_command("/help"),
            hover_event=show_text(Text(content=" world", extra=[Text(content="!")])),
            insertion="insert me",
        ),
    )


def test_marshal_text_new_format():
    out = PLUS_1215.marshal(make_txt())
    assert out == JSON_TXT_NEW
    assert '"click_event":' in out
    assert '"hover_event":' in out


def test_marshal_text_legacy_format():
    out = PRE_1215.marshal(make_txt())
    assert out == JSON_TXT_LEGACY
    assert '"clickEvent":' in out
    assert '"hoverEvent":' in out


@pytest.mark.parametrize("codec", [PLUS_1215, PRE_1215, COMPAT])
@pytest.mark.parametrize("data", [JSON_TXT_NEW, JSON_TXT_LEGACY])
def test_unmarshal_any_format(codec, data):
    assert codec.unmarshal(data) == make_txt()


def test_unmarshal_bytes():
    assert PLUS_1215.unmarshal(JSON_TXT_NEW.encode()) == make_txt()


def test_round_trip_cross_format():
    assert PLUS_1215.unmarshal(PRE_1215.marshal(make_txt())) == make_txt()
    assert PRE_1215.unmarshal(PLUS_1215.marshal(make_txt())) == make_txt()


def test_translation():
    tr = Translation(
        key="sample.key",
        style=Style(color=RED.rgb),
        with_=[Text(content="Hello"), Translation(key="another.key")],
    )
    expected = (
        '{"color":"#ff5555","translate":"sample.key",'
        '"with":[{"text":"Hello"},{"translate":"another.key"}]}'
    )
    assert PLUS_1215.marshal(tr) == expected
    assert PLUS_1215.unmarshal(expected) == tr


def test_click_event_both_formats():
    component = Text(content="Click me", style=Style(click_event=copy_to_clipboard("test")))
    new = PLUS_1215.marshal(component)
    assert '"click_event":' in new
    assert '"copy_to_clipboard"' in new
    assert PLUS_1215.unmarshal(new) == component
    legacy = PRE_1215.marshal(component)
    assert '"clickEvent":' in legacy
    assert '"copy_to_clipboard"' in legacy
    assert PRE_1215.unmarshal(legacy) == component


def test_hover_event_both_formats():
    component = Text(content="Hover me", style=Style(hover_event=show_text(Text(content="Tooltip"))))
    new = PLUS_1215.marshal(component)
    assert '"hover_event":' in new
    assert '"show_text"' in new
    assert PLUS_1215.unmarshal(new) == component
    legacy = PRE_1215.marshal(component)
    assert '"hoverEvent":' in legacy
    assert '"show_text"' in legacy
    assert PRE_1215.unmarshal(legacy) == component


CLICK_CASES = [
    ("Open URL", open_url("https://example.com"), "open_url", "https://example.com"),
    ("Run Command", run_command("/say hello"), "run_command", "/say hello"),
    ("Suggest Command", suggest_command("/help"), "suggest_command", "/help"),
    ("Copy Text", copy_to_clipboard("copied text"), "copy_to_clipboard", "copied text"),
    ("Change Page", change_page("3"), "change_page", "3"),
    ("Show Dialog", show_dialog("my_dialog_id"), "show_dialog", "my_dialog_id"),
    ("Custom Event", custom_event("my_event", "some_payload"), "custom", "my_event|some_payload"),
]


@pytest.mark.parametrize("content,event,action,value", CLICK_CASES)
def test_click_actions_pre_1215(content, event, action, value):
    component = Text(content=content, style=Style(click_event=event))
    out = PRE_1215.marshal(component)
    assert '"clickEvent"' in out
    assert f'"action":"{action}"' in out
    assert f'"value":"{value}"' in out
    assert PRE_1215.unmarshal(out) == component


@pytest.mark.parametrize("content,event,action,value", CLICK_CASES)
def test_click_actions_1215_plus(content, event, action, value):
    component = Text(content=content, style=Style(click_event=event))
    out = PLUS_1215.marshal(component)
    assert '"click_event"' in out
    assert f'"action":"{action}"' in out
    if action == "open_url":
        assert f'"url":"{value}"' in out
    elif action in ("run_command", "suggest_command"):
        assert f'"command":"{value}"' in out
    elif action == "change_page":
        assert '"page":3' in out
    elif action == "copy_to_clipboard":
        assert f'"value":"{value}"' in out
    assert PLUS_1215.unmarshal(out) == component


@pytest.mark.parametrize("content,event,action,value", CLICK_CASES)
def test_click_actions_cross_compatibility(content, event, action, value):
    component = Text(content=content, style=Style(click_event=event))
    assert PLUS_1215.unmarshal(PRE_1215.marshal(component)) == component
    assert PRE_1215.unmarshal(PLUS_1215.marshal(component)) == component


def test_change_page_non_numeric_stays_string():
    component = Text(content="p", style=Style(click_event=change_page("next")))
    assert PLUS_1215.encode(component)["click_event"] == {
        "action": "change_page",
        "page": "next",
    }


def test_example_new_click_actions():
    codec = JsonCodec(no_downsample_color=True, sort_keys=True)
    dialog = Text(content="Open Dialog", style=Style(click_event=show_dialog("my_custom_dialog")))
    with_payload = Text(
        content="Custom Event with Payload",
        style=Style(click_event=custom_event("my_event", "some_data")),
    )
    simple = Text(content="Simple Custom Event", style=Style(click_event=custom_event("simple_event")))
    assert codec.marshal(dialog) == (
        '{"click_event":{"action":"show_dialog","dialog":"my_custom_dialog"},"text":"Open Dialog"}'
    )
    assert codec.marshal(with_payload) == (
        '{"click_event":{"action":"custom","id":"my_event","payload":"some_data"},'
        '"text":"Custom Event with Payload"}'
    )
    assert codec.marshal(simple) == (
        '{"click_event":{"action":"custom","id":"simple_event"},"text":"Simple Custom Event"}'
    )


MODERN = JsonCodec(sort_keys=True)
LEGACY = JsonCodec(
    use_legacy_field_names=True, use_legacy_click_event_structure=True, sort_keys=True
)


def test_new_actions_show_dialog():
    component = Text(content="Show Dialog", style=Style(click_event=show_dialog("test_dialog")))
    modern = MODERN.marshal(component)
    assert '"dialog":"test_dialog"' in modern
    assert '"value":"test_dialog"' in LEGACY.marshal(component)
    assert MODERN.unmarshal(modern).style.click_event.value == "test_dialog"


def test_new_actions_custom():
    component = Text(content="Custom Event", style=Style(click_event=custom_event("my_id", "my_payload")))
    modern = MODERN.marshal(component)
    assert '"id":"my_id"' in modern
    assert '"payload":"my_payload"' in modern
    assert MODERN.unmarshal(modern).style.click_event.value == "my_id|my_payload"


def hover_text_component():
    return Text(
        content="Hover for text",
        style=Style(hover_event=show_text(Text(content="Tooltip text", style=Style(color=RED.rgb)))),
    )


def test_hover_show_text_pre_1215():
    component = hover_text_component()
    out = PRE_1215.marshal(component)
    assert '"hoverEvent"' in out
    assert '"action":"show_text"' in out
    assert '"contents"' in out
    assert PRE_1215.unmarshal(out) == component


def test_hover_show_text_1215_plus():
    component = hover_text_component()
    out = PLUS_1215.marshal(component)
    assert '"hover_event"' in out
    assert '"action":"show_text"' in out
    assert '"value"' in out
    assert '"contents"' not in out
    assert PLUS_1215.unmarshal(out) == component


def hover_item_component():
    return Text(
        content="Hover for item",
        style=Style(
            hover_event=show_item(
                ShowItemHover(
                    item=parse("minecraft:diamond"),
                    count=5,
                    nbt=BinaryTagHolder('{display:{Name:"Special Diamond"}}'),
                )
            )
        ),
    )


def test_hover_show_item_pre_1215():
    component = hover_item_component()
    out = PRE_1215.marshal(component)
    assert '"hoverEvent"' in out
    assert '"action":"show_item"' in out
    assert '"contents"' in out
    assert '"minecraft:diamond"' in out
    assert PRE_1215.unmarshal(out) == component


def test_hover_show_item_1215_plus():
    component = hover_item_component()
    out = PLUS_1215.marshal(component)
    assert '"hover_event"' in out
    assert '"action":"show_item"' in out
    assert '"id":"minecraft:diamond"' in out
    assert '"count":5' in out
    assert '"contents"' not in out
    assert PLUS_1215.unmarshal(out) == component


def hover_entity_component():
    return Text(
        content="Hover for entity",
        style=Style(
            hover_event=show_entity(
                ShowEntityHover(
                    type=parse("minecraft:player"),
                    id=uuid.UUID(ENTITY_UUID),
                    name=Text(content="TestPlayer", style=Style(color=BLUE.rgb)),
                )
            )
        ),
    )


def test_hover_show_entity_pre_1215():
    component = hover_entity_component()
    out = PRE_1215.marshal(component)
    assert '"hoverEvent"' in out
    assert '"action":"show_entity"' in out
    assert '"contents"' in out
    assert '"type":"minecraft:player"' in out
    assert f'"id":"{ENTITY_UUID}"' in out
    assert PRE_1215.unmarshal(out) == component


def test_hover_show_entity_1215_plus():
    component = hover_entity_component()
    out = PLUS_1215.marshal(component)
    assert '"hover_event"' in out
    assert '"action":"show_entity"' in out
    assert '"id":"minecraft:player"' in out
    assert f'"uuid":"{ENTITY_UUID}"' in out
    assert '"contents"' not in out
    assert '"type":"minecraft:player"' not in out
    assert PLUS_1215.unmarshal(out) == component


def test_hover_show_entity_cross_compatibility_field_names():
    legacy_json = (
        '{"text":"Hover for entity","hover_event":{"action":"show_entity","contents":'
        '{"type":"minecraft:player","id":"' + ENTITY_UUID + '",'
        '"name":{"text":"TestPlayer","color":"#5555ff"}}}}'
    )
    assert PLUS_1215.unmarshal(legacy_json) == hover_entity_component()
    new_json = (
        '{"text":"Hover for entity","hover_event":{"action":"show_entity",'
        '"id":"minecraft:player","uuid":"' + ENTITY_UUID + '",'
        '"name":{"text":"TestPlayer","color":"#5555ff"}}}'
    )
    assert PRE_1215.unmarshal(new_json) == hover_entity_component()


def test_show_entity_without_name_cannot_be_encoded():
    component = Text(
        content="x",
        style=Style(
            hover_event=show_entity(
                ShowEntityHover(type=parse("minecraft:pig"), id=uuid.UUID(ENTITY_UUID))
            )
        ),
    )
    with pytest.raises(TypeError):
        PLUS_1215.marshal(component)


def test_downsampled_color_uses_nearest_name():
    codec = JsonCodec()
    assert codec.encode(Text(content="a", style=Style(color=hex_int(0xFFAA01)))) == {
        "text": "a",
        "color": "gold",
    }
    assert codec.encode(Text(content="b", style=Style(color=AQUA.rgb)))["color"] == "aqua"


def test_no_legacy_hover_omits_value_key():
    codec = JsonCodec(no_legacy_hover=True, use_legacy_hover_event_structure=True)
    hover = codec.encode(Text(content="h", style=Style(hover_event=show_text(Text(content="t")))))
    assert hover["hover_event"] == {"action": "show_text", "contents": {"text": "t"}}


def test_unsupported_component_raises():
    with pytest.raises(TypeError):
        PLUS_1215.encode("plain string")


def test_unmarshal_invalid_json_raises():
    with pytest.raises(ComponentDecodeError):
        PLUS_1215.unmarshal("{not json")