"""
Fill functions for LUMEN materials.

A material value is either a plain CSS background (``#1a1a2e``,
``tomato``) or one of the fill functions:

    solid(#color)
    gradient(#from, #to)
    gradient(angle, #from, #to, ...)
    radial(#center, #edge, ...)
    glass(#color, opacity)
    noise(#color)

Unknown function names fall back to using the whole value as the background.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

Declarations = dict[str, str]

_FN_RE = re.compile(r"^([\w-]+)\((.+)\)$", re.DOTALL)
_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_FLOAT_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

DEFAULT_GRADIENT_ANGLE = "135deg"
GLASS_BLUR = "blur(12px)"
DEFAULT_GLASS_COLOR = "#ffffff"
DEFAULT_GLASS_OPACITY = 0.1
DEFAULT_NOISE_COLOR = "#1a1a2e"

# Fractal-noise SVG laid over the flat fill at 4% opacity
NOISE_TEXTURE = (
    "url(\"data:image/svg+xml,%3Csvg viewBox='0 0 200 200' "
    "xmlns='http://www.w3.org/2000/svg'%3E%3Cfilter id='n'%3E"
    "%3CfeTurbulence type='fractalNoise' baseFrequency='0.65' numOctaves='3' "
    "stitchTiles='stitch'/%3E%3C/filter%3E%3Crect width='100%25' height='100%25' "
    "filter='url(%23n)' opacity='0.04'/%3E%3C/svg%3E\")"
)


@dataclass(frozen=True)
class FnCall:
    """A parsed ``name(arg, arg, ...)`` value."""

    name: str
    args: list[str]


def split_args(text: str) -> list[str]:
    """
    Split on commas that are not nested inside parentheses.

    >>> split_args("#fff, rgba(0, 0, 0, 0.5)")
    ['#fff', 'rgba(0, 0, 0, 0.5)']
    """
    args: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            args.append("".join(current).strip())
            current = []
            continue
        current.append(ch)

    tail = "".join(current).strip()
    if tail:
        args.append(tail)
    return args


def parse_fn(value: str) -> FnCall | None:
    """
    Parse a function-shaped value.

    Returns:
        FnCall, or None if the value is not shaped like ``name(args)``
    """
    match = _FN_RE.match(value)
    if not match:
        return None
    return FnCall(name=match.group(1), args=split_args(match.group(2)))


def parse_opacity(text: str, default: float = DEFAULT_GLASS_OPACITY) -> float:
    """Read the leading number of ``text``; ``default`` if there is none."""
    match = _FLOAT_RE.match(text)
    if not match:
        return default
    return float(match.group(0))


def format_number(number: float) -> str:
    """Render a number the short way: ``0.5``, ``1``, ``0.25``."""
    if number.is_integer():
        return str(int(number))
    return repr(number)


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """
    Convert a 3- or 6-digit hex color to an ``rgba()`` value.

    A 3-digit color is expanded by doubling each digit first.

    >>> hex_to_rgba("#abc", 0.5)
    'rgba(170, 187, 204, 0.5)'
    """
    digits = hex_color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c + c for c in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    return f"rgba({r}, {g}, {b}, {format_number(alpha)})"


def is_hex_color(value: str) -> bool:
    return value.startswith("#") and bool(_HEX_RE.match(value[1:]))


def _solid(call: FnCall, raw: str) -> Declarations:
    return {"background": call.args[0] if call.args else raw}


def _gradient(call: FnCall, raw: str) -> Declarations:
    if len(call.args) <= 2:
        direction, colors = DEFAULT_GRADIENT_ANGLE, call.args
    else:
        direction, colors = call.args[0], call.args[1:]
    return {"background": f"linear-gradient({', '.join([direction, *colors])})"}


def _radial(call: FnCall, raw: str) -> Declarations:
    return {"background": f"radial-gradient({', '.join(['circle', *call.args])})"}


def _glass(call: FnCall, raw: str) -> Declarations:
    color = call.args[0] if call.args else DEFAULT_GLASS_COLOR
    opacity = parse_opacity(call.args[1]) if len(call.args) > 1 else DEFAULT_GLASS_OPACITY
    background = hex_to_rgba(color, opacity) if is_hex_color(color) else color
    return {
        "background": background,
        "backdrop-filter": GLASS_BLUR,
        "-webkit-backdrop-filter": GLASS_BLUR,
    }


def _noise(call: FnCall, raw: str) -> Declarations:
    color = call.args[0] if call.args else DEFAULT_NOISE_COLOR
    return {
        "background": color,
        "background-image": NOISE_TEXTURE,
    }


FILL_FUNCTIONS: dict[str, Callable[[FnCall, str], Declarations]] = {
    "solid": _solid,
    "gradient": _gradient,
    "radial": _radial,
    "glass": _glass,
    "noise": _noise,
}


def resolve_fill(value: str) -> Declarations:
    """
    Resolve an inline material value to CSS declarations.

    Plain values and unknown functions become ``background: <value>``.
    """
    call = parse_fn(value)
    if call is None:
        return {"background": value}

    handler = FILL_FUNCTIONS.get(call.name)
    if handler is None:
        return {"background": value}
    return handler(call, value)
