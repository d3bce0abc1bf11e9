"""Cross-reference rendering for documentation types."""

from __future__ import annotations

from collections.abc import Container
from typing import TYPE_CHECKING

from ..naming import to_anchor
from .types import render_display_parts

if TYPE_CHECKING:
    from mdmodels.datamodel import Attribute


def linkify(dtype: str, text: str, type_names: Container[str]) -> str:
    """Link text to the section of dtype if it is a model type.

    Primitive and external types are returned as plain text.
    """
    if dtype in type_names:
        return f"[{text}](#{to_anchor(dtype)})"
    return text


def render_linked_type(attribute: Attribute, type_names: Container[str]) -> str:
    """Render the display type of an attribute with cross-references."""
    return " | ".join(
        linkify(dtype, label, type_names) for dtype, label in render_display_parts(attribute)
    )
