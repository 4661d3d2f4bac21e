"""Attribute values and their DOT serialization."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Union

RAW_MARKUP_MARKER = "<<"

_KEY_PATTERN = re.compile(r"\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*")
_NUMBER_PATTERN = re.compile(r"-?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?")
_BARE_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
_SEPARATOR_PATTERN = re.compile(r"[\s;,]*")
# json.dumps doubles the backslash of DOT escapes such as \l (left-justified line).
_DOUBLED_DOT_ESCAPE = re.compile(r"\\\\([lnr])")
_DOT_LEFT_ESCAPE = re.compile(r"(?<!\\)((?:\\\\)*)\\l")


@dataclass(frozen=True)
class RawMarkup:
    """A value emitted without quoting, e.g. a Graphviz HTML-like label ``<<b>x</b>>``."""

    text: str

    def __str__(self) -> str:
        return self.text


AttributeValue = Union[str, int, float, bool, RawMarkup]
Attributes = Dict[str, AttributeValue]


def raw(text: str) -> RawMarkup:
    return RawMarkup(text)


def coerce_value(value: object) -> object:
    """Turn legacy ``<<...>>`` strings into :class:`RawMarkup`; leave everything else alone."""

    if isinstance(value, str) and value.startswith(RAW_MARKUP_MARKER):
        return RawMarkup(value)
    return value


def coerce_attributes(attributes: Optional[Mapping[str, object]]) -> Attributes:
    return {key: coerce_value(value) for key, value in (attributes or {}).items()}


def format_value(value: object) -> str:
    if isinstance(value, RawMarkup):
        return value.text
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    text = json.dumps(str(value), ensure_ascii=False)
    return _DOUBLED_DOT_ESCAPE.sub(r"\\\1", text)


def serialize_attributes(attributes: Optional[Mapping[str, object]]) -> str:
    """Return ``key=value;`` items joined by spaces, or ``""`` for no attributes.

    ``None`` values are skipped so unset settings never produce empty declarations.
    """

    if not attributes:
        return ""
    parts = [
        f"{key}={format_value(value)};"
        for key, value in attributes.items()
        if value is not None
    ]
    return " ".join(parts)


def serialize_attribute_list(attributes: Optional[Mapping[str, object]]) -> str:
    body = serialize_attributes(attributes)
    return f" [ {body} ]" if body else ""


def _scan_quoted(text: str, start: int) -> int:
    index = start + 1
    while index < len(text):
        ch = text[index]
        if ch == "\\":
            index += 2
            continue
        if ch == '"':
            return index + 1
        index += 1
    raise ValueError(f"Unterminated string starting at {start}")


def _scan_markup(text: str, start: int) -> int:
    depth = 0
    for index in range(start, len(text)):
        ch = text[index]
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
            if depth == 0:
                return index + 1
    raise ValueError(f"Unbalanced markup starting at {start}")


def _decode_quoted(literal: str) -> str:
    # \l has no JSON meaning; restore the literal backslash before decoding.
    return json.loads(_DOT_LEFT_ESCAPE.sub(r"\1\\\\l", literal))


def parse_attributes(text: str) -> Attributes:
    """Parse the output of :func:`serialize_attributes` or :func:`serialize_attribute_list`.

    Quoted values decode to ``str``, bare numbers to ``int``/``float``,
    ``true``/``false`` to ``bool`` and angle-bracket markup to :class:`RawMarkup`.
    """

    body = text.strip()
    if body.startswith("[") and body.endswith("]"):
        body = body[1:-1]

    result: Attributes = {}
    index = _SEPARATOR_PATTERN.match(body, 0).end()
    while index < len(body):
        key_match = _KEY_PATTERN.match(body, index)
        if not key_match:
            raise ValueError(f"Expected attribute name at {index}: {body[index:index + 20]!r}")
        key = key_match.group(1)
        index = key_match.end()
        ch = body[index:index + 1]
        if ch == '"':
            end = _scan_quoted(body, index)
            value: AttributeValue = _decode_quoted(body[index:end])
        elif ch == "<":
            end = _scan_markup(body, index)
            value = RawMarkup(body[index:end])
        else:
            number_match = _NUMBER_PATTERN.match(body, index)
            bare_match = _BARE_PATTERN.match(body, index)
            if number_match:
                end = number_match.end()
                literal = number_match.group(0)
                value = float(literal) if any(c in literal for c in ".eE") else int(literal)
            elif bare_match:
                end = bare_match.end()
                literal = bare_match.group(0)
                value = {"true": True, "false": False}.get(literal, literal)
            else:
                raise ValueError(f"Expected attribute value for {key!r} at {index}")
        result[key] = value
        index = _SEPARATOR_PATTERN.match(body, end).end()
    return result
