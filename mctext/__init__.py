"""Minecraft text components: colors, keys, styles and events, with JSON, plain and legacy codecs."""

__version__ = "0.1.0"
__all__ = ["color", "key", "nbt", "component", "json_decode", "json_codec", "plain", "legacy"]