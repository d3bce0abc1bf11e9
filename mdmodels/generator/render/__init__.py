"""Renderers for mdmodels data models.

This package contains modules for rendering text from a data model:
- types: Attribute type expressions (display and declaration form)
- links: Cross-references to object and enumeration sections
- markdown: Markdown reference page
- classes: pydantic-xml class definitions
"""

from __future__ import annotations

from .classes import render_classes, render_field, render_param_binding, render_signature
from .links import linkify, render_linked_type
from .markdown import render_document
from .types import render_type

__all__ = [
    "linkify",
    "render_classes",
    "render_document",
    "render_field",
    "render_linked_type",
    "render_param_binding",
    "render_signature",
    "render_type",
]
