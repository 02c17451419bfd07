"""Identifier sanitizing for names and descriptions coming from EAGLE.

All functions are total: they never raise and never return ``None``.
"""

from __future__ import annotations

from ..constants import NAME_SEPARATORS, TEXT_PLACEHOLDERS, UNNAMED

_DIGITS = frozenset("0123456789")
_BOLD_TAGS = ("<b>", "</b>")
_BREAK_TAGS = ("<br />", "<br/>", "<br>")


def _or_unnamed(name: str) -> str:
    return name if name else UNNAMED


def _is_auto_name(raw: str, prefix: str) -> bool:
    """Check for EAGLE's generated names, e.g. ``G$3`` or ``P$12``."""
    digits = raw[len(prefix) :]
    return raw.startswith(prefix) and bool(digits) and all(c in _DIGITS for c in digits)


def _join_whitespace(text: str, separator: str = "_") -> str:
    """Collapse every whitespace run into ``separator`` (text is trimmed too)."""
    return separator.join(text.split())


def _replace_tag(text: str, tag: str, replacement: str) -> str:
    """Case-insensitive replacement of a literal (lowercase ASCII) markup tag."""
    parts = []
    start = 0
    i = 0
    while i <= len(text) - len(tag):
        if text[i : i + len(tag)].lower() == tag:
            parts.append(text[start:i])
            parts.append(replacement)
            i += len(tag)
            start = i
        else:
            i += 1
    parts.append(text[start:])
    return "".join(parts)


def convert_element_name(raw: str) -> str:
    return _or_unnamed(raw.strip())


def convert_element_description(raw: str) -> str:
    """Strip the little HTML EAGLE descriptions use and normalize lines."""
    text = raw
    for tag in _BOLD_TAGS:
        text = _replace_tag(text, tag, "")
    for tag in _BREAK_TAGS:
        text = _replace_tag(text, tag, "\n")
    lines = (line.strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line).strip()


def convert_component_name(raw: str) -> str:
    """Trim, and drop one trailing separator unless that empties the name.

    Names consisting only of separators lose just one of them, so ``"--"``
    becomes ``"-"``.
    """
    name = raw.strip()
    if len(name) > 1 and name[-1] in NAME_SEPARATORS:
        name = name[:-1].rstrip()
    return _or_unnamed(name)


def convert_device_name(device_set_name: str, device_name: str) -> str:
    """Join a device set name and a device (package variant) suffix.

    Exactly one separator ends up between both parts; an existing one on
    either side is reused, the name's own one winning.
    """
    name = device_set_name
    suffix = device_name
    if suffix:
        separator = "-"
        if name and name[-1] in NAME_SEPARATORS:
            separator = name[-1]
            name = name[:-1]
        elif suffix[0] in NAME_SEPARATORS:
            separator = suffix[0]
        if suffix[0] in NAME_SEPARATORS:
            suffix = suffix[1:]
        name = name + separator + suffix
    return _or_unnamed(name.strip())


def convert_gate_name(raw: str) -> str:
    """Gate names; an empty result means the default (only) gate."""
    name = raw.strip()
    if _is_auto_name(name, "G$"):
        return ""
    if name.startswith("-"):
        name = name[1:]
    return _join_whitespace(name)


def convert_pin_or_pad_name(raw: str) -> str:
    name = raw.strip()
    if _is_auto_name(name, "P$"):
        return name[2:]
    return _or_unnamed(_join_whitespace(name))


def convert_text_value(raw: str) -> str:
    """Map EAGLE's ``>NAME``/``>VALUE`` tokens to attribute placeholders."""
    return TEXT_PLACEHOLDERS.get(raw, raw)
