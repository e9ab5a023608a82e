"""Presentation tree models.

The transformer turns the markdown-it syntax tree into these nodes; the HTML
serializer in ``render.py`` is their only consumer.
"""

from typing import Literal

from pydantic import BaseModel, Field

PropertyValue = str | int | bool | list[str] | None


class Text(BaseModel):
    type: Literal["text"] = "text"
    value: str


class Raw(BaseModel):
    """Verbatim HTML taken from the source document."""

    type: Literal["raw"] = "raw"
    value: str


class Element(BaseModel):
    type: Literal["element"] = "element"
    tag_name: str
    properties: dict[str, PropertyValue] = Field(default_factory=dict)
    children: list["ElementContent"] = Field(default_factory=list)


ElementContent = Element | Text | Raw


class Root(BaseModel):
    """Top of a converted document."""

    type: Literal["root"] = "root"
    children: list[ElementContent] = Field(default_factory=list)


# Update forward references
Element.model_rebuild()
Root.model_rebuild()


# Handler return value: one node, several nodes, or nothing (node elided)
HandlerResult = ElementContent | list[ElementContent] | None
