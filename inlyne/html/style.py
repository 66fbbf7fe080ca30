"""Parsing inline ``style`` attributes."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Union

_HEX = re.compile(r"\+?[0-9A-Fa-f]+")
_U32_MAX = 0xFFFFFFFF


def _parse_hex(text: str) -> int | None:
    if not _HEX.fullmatch(text):
        return None
    value = int(text, 16)
    return value if value <= _U32_MAX else None


@dataclass(frozen=True)
class BackgroundColor:
    """A ``background-color:#RRGGBB`` declaration."""

    color: int


@dataclass(frozen=True)
class TextColor:
    """A ``color:#RRGGBB`` declaration."""

    color: int


class FontWeight(Enum):
    NORMAL = "normal"
    BOLD = "bold"

    @classmethod
    def parse(cls, text: str) -> FontWeight | None:
        return cls.BOLD if text == "bold" else None


class FontStyle(Enum):
    NORMAL = "normal"
    ITALIC = "italic"

    @classmethod
    def parse(cls, text: str) -> FontStyle | None:
        return cls.ITALIC if text == "italic" else None


class TextDecoration(Enum):
    NORMAL = "normal"
    UNDERLINE = "underline"

    @classmethod
    def parse(cls, text: str) -> TextDecoration | None:
        return cls.UNDERLINE if text == "underline" else None


Style = Union[BackgroundColor, TextColor, FontWeight, FontStyle, TextDecoration]


def _parse_part(part: str) -> Style | None:
    if part.startswith("background-color:#"):
        color = _parse_hex(part.removeprefix("background-color:#"))
        if color is not None:
            return BackgroundColor(color)
    if part.startswith("color:#"):
        color = _parse_hex(part.removeprefix("color:#"))
        if color is not None:
            return TextColor(color)
    if part.startswith("font-weight:"):
        weight = FontWeight.parse(part.removeprefix("font-weight:"))
        if weight is not None:
            return weight
    if part.startswith("font-style:"):
        style = FontStyle.parse(part.removeprefix("font-style:"))
        if style is not None:
            return style
    if part.startswith("text-decoration:"):
        return TextDecoration.parse(part.removeprefix("text-decoration:"))
    return None


def iter_styles(style: str) -> Iterator[Style]:
    """Yield the supported declarations of a ``;``-separated style string."""
    for part in style.split(";"):
        parsed = _parse_part(part)
        if parsed is not None:
            yield parsed