"""
Property resolution for LUMEN.

Maps ``key: value`` properties to CSS declarations. Keys mean different
things depending on the node they sit on, so there is one table per node
kind and the tables are never merged:

- SURFACE_PROPERTIES: layout, sizing, fill and visual properties
- TEXT_PROPERTIES: typography; ``color`` is the foreground color
- MATERIAL_PROPERTIES: ``color`` is the fill; everything else resolves
  as it would on a surface

Keys missing from a table pass through unchanged as ``key: value``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from . import ir
from .materials import Declarations, resolve_fill

logger = logging.getLogger(__name__)

# Width/height value that grows the element into the parent's free space
FILL_KEYWORD = "fill"

ALIGN_KEYWORDS = {
    "start": "flex-start",
    "end": "flex-end",
}

JUSTIFY_KEYWORDS = {
    "start": "flex-start",
    "end": "flex-end",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
}


@dataclass
class StyleContext:
    """
    Lookup state for one compilation.

    Attributes:
        materials: Named materials by name
        expanding: Materials currently being inlined (cycle guard)
    """

    materials: dict[str, ir.Material] = field(default_factory=dict)
    expanding: list[str] = field(default_factory=list)


SurfaceResolver = Callable[[str, StyleContext], Declarations]
TextResolver = Callable[[str], Declarations]


def _rename(css_key: str) -> Callable[..., Declarations]:
    def resolve(value: str, ctx: StyleContext | None = None) -> Declarations:
        return {css_key: value}

    return resolve


def _size(axis: str) -> SurfaceResolver:
    def resolve(value: str, ctx: StyleContext) -> Declarations:
        if value == FILL_KEYWORD:
            return {"flex": "1", f"min-{axis}": "0"}
        return {axis: value}

    return resolve


def _material(value: str, ctx: StyleContext) -> Declarations:
    if value in ctx.materials:
        return resolve_material(ctx.materials[value], ctx)
    return resolve_fill(value)


def _use(value: str, ctx: StyleContext) -> Declarations:
    if value in ctx.materials:
        return resolve_material(ctx.materials[value], ctx)
    logger.debug("use: no material named %r", value)
    return {}


def _layout(value: str, ctx: StyleContext) -> Declarations:
    words = value.split()
    direction = "row" if words and words[0] == "row" else "column"
    return {"display": "flex", "flex-direction": direction}


def _wrap(value: str, ctx: StyleContext) -> Declarations:
    return {"flex-wrap": "wrap" if value == "true" else "nowrap"}


def _align(value: str, ctx: StyleContext) -> Declarations:
    return {"align-items": ALIGN_KEYWORDS.get(value, value)}


def _justify(value: str, ctx: StyleContext) -> Declarations:
    return {"justify-content": JUSTIFY_KEYWORDS.get(value, value)}


SURFACE_PROPERTIES: dict[str, SurfaceResolver] = {
    # Dimensions
    "width": _size("width"),
    "height": _size("height"),
    "min-width": _rename("min-width"),
    "max-width": _rename("max-width"),
    "min-height": _rename("min-height"),
    "max-height": _rename("max-height"),
    # Fill
    "material": _material,
    "use": _use,
    # Layout
    "layout": _layout,
    "gap": _rename("gap"),
    "wrap": _wrap,
    "align": _align,
    "justify": _justify,
    # Visual
    "radius": _rename("border-radius"),
    "opacity": _rename("opacity"),
    "border": _rename("border"),
    "shadow": _rename("box-shadow"),
    "layer": _rename("z-index"),
    "overflow": _rename("overflow"),
    "cursor": _rename("cursor"),
    # Spacing
    "padding": _rename("padding"),
    "margin": _rename("margin"),
    # Motion
    "transition": _rename("transition"),
}


def _text_wrap(value: str) -> Declarations:
    return {"white-space": "nowrap" if value == "false" else "normal"}


TEXT_PROPERTIES: dict[str, TextResolver] = {
    "font": _rename("font-family"),
    "size": _rename("font-size"),
    "color": _rename("color"),
    "weight": _rename("font-weight"),
    "align": _rename("text-align"),
    "spacing": _rename("letter-spacing"),
    "height": _rename("line-height"),
    "style": _rename("font-style"),
    "transform": _rename("text-transform"),
    "decoration": _rename("text-decoration"),
    "wrap": _text_wrap,
    "padding": _rename("padding"),
}


MATERIAL_PROPERTIES: dict[str, SurfaceResolver] = {
    "color": _rename("background"),
}


def resolve_surface_property(key: str, value: str, ctx: StyleContext) -> Declarations:
    """Resolve one surface property."""
    resolver = SURFACE_PROPERTIES.get(key)
    if resolver is None:
        return {key: value}
    return resolver(value, ctx)


def resolve_text_property(key: str, value: str) -> Declarations:
    """Resolve one text property. Text nodes never see materials."""
    resolver = TEXT_PROPERTIES.get(key)
    if resolver is None:
        return {key: value}
    return resolver(value)


def resolve_material_property(key: str, value: str, ctx: StyleContext) -> Declarations:
    """Resolve one property written inside a material definition."""
    resolver = MATERIAL_PROPERTIES.get(key)
    if resolver is None:
        return resolve_surface_property(key, value, ctx)
    return resolver(value, ctx)


def resolve_material(material: ir.Material, ctx: StyleContext) -> Declarations:
    """
    Resolve a named material into the declarations it stands for.

    Properties are merged in order, later keys overwriting earlier ones.
    A material that refers back to itself (directly or through another
    material) contributes nothing at the point of the cycle.
    """
    if material.name in ctx.expanding:
        logger.debug("material cycle through %r cut off", material.name)
        return {}

    ctx.expanding.append(material.name)
    try:
        css: Declarations = {}
        for prop in material.properties:
            css.update(resolve_material_property(prop.key, prop.value, ctx))
        return css
    finally:
        ctx.expanding.pop()
