"""
Tree compiler for LUMEN.

Turns a parsed Program into CSS and HTML in two passes:

    Pass 1: collect every top-level material into a name -> Material table
    Pass 2: render each top-level surface depth-first, resolving material
            references through the table

Because the table is built before any surface is rendered, a surface may
refer to a material declared further down the source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from markupsafe import escape

from . import ir
from .ids import IdGenerator
from .materials import Declarations
from .styles import StyleContext, resolve_surface_property, resolve_text_property

logger = logging.getLogger(__name__)

SURFACE_CLASS = "lumen-surface"
TEXT_CLASS = "lumen-text"

SURFACE_DEFAULTS: Declarations = {
    "box-sizing": "border-box",
    "position": "relative",
}

TEXT_DEFAULTS: Declarations = {
    "box-sizing": "border-box",
    "margin": "0",
}


@dataclass(frozen=True)
class CompileResult:
    """
    Output of one compilation.

    Attributes:
        css: Newline-joined rules, one per rendered surface/text node
        html: Newline-joined top-level fragments
    """

    css: str
    html: str


@dataclass(frozen=True)
class RenderedNode:
    """A rendered subtree: its own rule followed by its descendants' rules."""

    id: str
    css: str
    html: str


def serialize_declarations(css: Declarations) -> str:
    return "; ".join(f"{key}: {value}" for key, value in css.items())


def css_rule(element_id: str, css: Declarations) -> str:
    """``#lm1 { width: 320px; height: 180px }``"""
    return f"#{element_id} {{ {serialize_declarations(css)} }}"


def collect_materials(program: ir.Program) -> dict[str, ir.Material]:
    """Pass 1: later materials with a duplicate name replace earlier ones."""
    return {material.name: material for material in program.materials}


class TreeCompiler:
    """
    Renders one Program.

    Args:
        ids: Id generator to draw element ids from
        materials: Named materials available to ``material``/``use``
    """

    def __init__(self, ids: IdGenerator, materials: dict[str, ir.Material]):
        self.ids = ids
        self.context = StyleContext(materials=materials)

    def render_surface(self, node: ir.Surface) -> RenderedNode:
        element_id = self.ids.next_id()

        css = dict(SURFACE_DEFAULTS)
        for prop in node.properties:
            css.update(resolve_surface_property(prop.key, prop.value, self.context))

        children = [self.render_child(child) for child in node.children]

        rules = [css_rule(element_id, css), *(child.css for child in children)]
        inner = "\n".join(child.html for child in children)
        html = (
            f'<div id="{element_id}" class="{SURFACE_CLASS}" data-name="{escape(node.name)}">'
            f"{inner}</div>"
        )
        return RenderedNode(id=element_id, css="\n".join(rules), html=html)

    def render_text(self, node: ir.Text) -> RenderedNode:
        element_id = self.ids.next_id()

        css = dict(TEXT_DEFAULTS)
        for prop in node.properties:
            css.update(resolve_text_property(prop.key, prop.value))

        html = f'<p id="{element_id}" class="{TEXT_CLASS}">{escape(node.content)}</p>'
        return RenderedNode(id=element_id, css=css_rule(element_id, css), html=html)

    def render_child(self, node: ir.Surface | ir.Text) -> RenderedNode:
        if isinstance(node, ir.Surface):
            return self.render_surface(node)
        return self.render_text(node)


def render(program: ir.Program, ids: IdGenerator | None = None) -> CompileResult:
    """
    Compile a Program to CSS and HTML.

    Args:
        program: Parsed program
        ids: Id generator; a fresh one (ids from ``lm1``) when omitted

    Returns:
        CompileResult with the stylesheet and markup text
    """
    if ids is None:
        ids = IdGenerator()

    materials = collect_materials(program)
    compiler = TreeCompiler(ids, materials)

    rendered = [compiler.render_surface(surface) for surface in program.surfaces]
    logger.debug(
        "Rendered %d surface(s) with %d material(s), last id %s%d",
        len(rendered),
        len(materials),
        ids.prefix,
        ids.count,
    )

    return CompileResult(
        css="\n".join(node.css for node in rendered),
        html="\n".join(node.html for node in rendered),
    )
