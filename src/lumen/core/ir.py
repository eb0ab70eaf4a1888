"""
LUMEN tree (IR) types.

Nodes produced by the parser and consumed by the compiler. All nodes are
frozen once constructed; the tree is built once per compilation, walked
once, then dropped.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Property(BaseModel):
    """
    A single ``key: value`` line.

    Attributes:
        key: Property name (identifier)
        value: Trimmed value text. May be a function expression such as
            ``gradient(#a, #b)``. Quoted values keep their quotes.
    """

    key: str
    value: str = ""

    model_config = ConfigDict(frozen=True)


class Text(BaseModel):
    """Leaf node carrying literal text and typography properties."""

    kind: Literal["text"] = "text"
    content: str
    properties: list[Property] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Material(BaseModel):
    """
    Named, reusable bundle of properties.

    Referenced by name from a surface's ``material`` or ``use`` property.
    Inside a material, ``color`` means the fill (background) color.
    """

    kind: Literal["material"] = "material"
    name: str
    properties: list[Property] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Surface(BaseModel):
    """
    A bounded renderable region: one ``<div>`` plus one style rule.

    Attributes:
        name: Surface name (case-sensitive)
        properties: Properties in source order
        children: Nested surfaces and text nodes in source order
    """

    kind: Literal["surface"] = "surface"
    name: str
    properties: list[Property] = Field(default_factory=list)
    children: list[Annotated[Surface | Text, Field(discriminator="kind")]] = Field(
        default_factory=list
    )

    model_config = ConfigDict(frozen=True)


Statement = Annotated[Surface | Material, Field(discriminator="kind")]


class Program(BaseModel):
    """Top-level declarations in source order."""

    body: list[Statement] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def surfaces(self) -> list[Surface]:
        return [node for node in self.body if isinstance(node, Surface)]

    @property
    def materials(self) -> list[Material]:
        return [node for node in self.body if isinstance(node, Material)]


Surface.model_rebuild()
Program.model_rebuild()
