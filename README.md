# mctext

Build, read and write Minecraft text components in Python.

`mctext` models chat components (`Text`, `Translation`) with their `Style`
(color, decorations, font, insertion, click and hover events) and converts
them to and from three formats:

- **JSON** (`JsonCodec`): the component JSON used by the game, in both the
  1.21.5+ layout (`click_event`, `hover_event`, action-specific click fields,
  inlined hover data) and the older layout (`clickEvent`, `hoverEvent`,
  `value`, `contents`). Decoding accepts either layout, whatever the codec's
  settings.
- **Plain** (`PlainCodec`): only the text content, styling dropped.
- **Legacy** (`LegacyCodec`): `§`-prefixed (or `&`-prefixed) format codes.

The package has no dependencies outside the standard library.

## Installation

```
pip install mctext
```

## Modules

| Module | Contents |
| --- | --- |
| `mctext.color` | `RGB`, `Named`, the sixteen named colors (`BLACK` ... `WHITE`), `NAMES`, `NAMES_ORDER`, `parse_hex`, `hex_int`, `InvalidFormatError` |
| `mctext.key` | `Key`, `parse`, `parse_valid`, `make`, `namespace_valid`, `value_valid`, `MINECRAFT_NAMESPACE` |
| `mctext.nbt` | `BinaryTagHolder`, a raw NBT string carried unchanged |
| `mctext.component` | `Text`, `Translation`, `Style`, `State`, `Decoration`, click and hover events and their helper functions |
| `mctext.json_decode` | `decode`, `decode_value`, `ComponentDecodeError` |
| `mctext.json_codec` | `JsonCodec` |
| `mctext.plain` | `PlainCodec` |
| `mctext.legacy` | `LegacyCodec`, `Reset`, the format characters (`SECTION_CHAR`, `AMPERSAND_CHAR`, `CHARS`) |

## Building components

```python
from mctext.color import parse_hex
from mctext.component import Style, Text, State, run_command, show_text

greeting = Text(
    "Hello",
    style=Style(
        bold=State.TRUE,
        color=parse_hex("#55ffff"),
        click_event=run_command("/spawn"),
        hover_event=show_text(Text("Click to go to spawn")),
    ),
    extra=[Text(" world!")],
)
```

Decorations (`bold`, `italic`, `underlined`, `strikethrough`, `obfuscated`)
are tri-state: `State.NOT_SET`, `State.TRUE` or `State.FALSE`.
`Style.decoration(Decoration.BOLD)` reads one and `Style.set_decoration(...)`
sets one; `Style.is_zero()` tells whether nothing is set.

Click events are made with `open_url`, `open_file`, `run_command`,
`suggest_command`, `change_page`, `copy_to_clipboard`, `show_dialog` and
`custom_event(event_id, payload="")`; a non-empty payload is stored as
`"id|payload"`. Hover events are made with `show_text`, `show_item`
(a `ShowItemHover` with `item`, `count` and optional `nbt`) and `show_entity`
(a `ShowEntityHover` with `type`, `id` as a `uuid.UUID`, and optional `name`).

### Colors

A color is either an `RGB` value (`parse_hex("#ff5555")`, `parse_hex("#f55")`,
`hex_int(0xff5555)`) or one of the sixteen `Named` colors such as
`mctext.color.RED`. `RGB.hex()` gives the `#rrggbb` form and
`RGB.nearest_named()` finds the closest named color. `parse_hex` raises
`InvalidFormatError` (a `ValueError`) on malformed input.

### Keys

Fonts, item ids and entity types are `Key` objects, written
`namespace:value`. `mctext.key.parse("minecraft:diamond")` splits without
checking the characters; `parse_valid` and `make` also validate them. All
three raise `ValueError` on bad input.

## JSON

```python
from mctext.json_codec import JsonCodec

modern = JsonCodec(no_downsample_color=True)
print(modern.marshal(greeting))      # JSON text
as_dict = modern.encode(greeting)    # the same object as a dict

older = JsonCodec(
    use_legacy_field_names=True,
    use_legacy_click_event_structure=True,
    use_legacy_hover_event_structure=True,
)
component = older.unmarshal('{"text":"Hi","color":"red"}')
```

Options of `JsonCodec`, all `False` by default; they change encoding only:

- `no_downsample_color`: write `#rrggbb` instead of the nearest named color.
- `no_legacy_hover`: with the older hover layout, leave out the `value` key
  written next to `contents`.
- `use_legacy_field_names`: write `clickEvent` / `hoverEvent`.
- `use_legacy_click_event_structure`: write every click argument under `value`
  instead of `url`, `path`, `command`, `page`, `dialog` or `id`/`payload`.
- `use_legacy_hover_event_structure`: nest hover data under `contents`.
- `sort_keys`: sort object keys in the output.

`unmarshal` takes `str` or `bytes`; JSON strings and arrays are accepted as
components too. Invalid input raises `ComponentDecodeError` (a `ValueError`)
from `mctext.json_decode`, where `decode` and `decode_value` can also be called
directly. Unknown or incomplete click and hover events are dropped rather than
raising, and `open_file` click events are never decoded.

## Plain text

```python
from mctext.plain import PlainCodec

PlainCodec().marshal(greeting)      # "Hello world!"
PlainCodec().unmarshal("Hi there")  # Text("Hi there")
```

`PlainCodec.marshal` handles `Text` components only and raises `TypeError`
for a `Translation`.

## Legacy format codes

```python
from mctext.legacy import LegacyCodec

codec = LegacyCodec()
codec.marshal(greeting)                # "§b§lHello world!"
codec.unmarshal("§cRed §lbold")        # Text with styled children
```

Use `LegacyCodec(char="&")` for ampersand codes. With
`no_downsample_color=True` colors are written as the format character followed
by `#rrggbb` instead of a color code. With `clickable_url=True`, decoding text
that holds no format codes attaches an `open_url` click event for the first
link found in it.

## Limits

- NBT data is not parsed: `BinaryTagHolder` only carries the raw string.
- `LegacyCodec.unmarshal` understands the single-character codes in `CHARS`
  only; hex colors in legacy text are not decoded.
- There is no command-line tool; the package is a library.