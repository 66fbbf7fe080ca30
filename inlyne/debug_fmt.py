"""Compact debug representations for colours, byte blobs and spacers."""

from __future__ import annotations

from collections.abc import Sequence


def _display_float(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_f32_color(rgba: Sequence[float]) -> str:
    """Format an RGBA colour, omitting alpha when fully opaque."""
    r, g, b, a = rgba
    if (r, g, b, a) == (0.0, 0.0, 0.0, 1.0):
        return "Color(BLACK)"
    if a == 1.0:
        return f"Color {{ r: {r:.2f}, g: {g:.2f}, b: {b:.2f} }}"
    return f"Color {{ r: {r:.2f}, g: {g:.2f}, b: {b:.2f}, a: {a:.2f} }}"


def format_maybe_f32_color(rgba: Sequence[float] | None) -> str:
    """Format an optional colour as ``None`` or ``Some(...)``."""
    if rgba is None:
        return "None"
    return f"Some({format_f32_color(rgba)})"


def format_bytes_prefix(data: bytes | Sequence[int]) -> str:
    """Show short byte blobs fully and longer ones as length and a prefix."""
    values = list(data)
    if len(values) > 3:
        x, y, z = values[:3]
        return f"{{ len: {len(values)}, data: [{x}, {y}, {z}, ..] }}"
    return "[" + ", ".join(str(v) for v in values) + "]"


def format_spacer(space: float, visible: bool) -> str:
    """Format a vertical spacer of ``space`` pixels."""
    kind = "VisibleSpacer" if visible else "InvisibleSpacer"
    return f"{kind}({_display_float(space)})"