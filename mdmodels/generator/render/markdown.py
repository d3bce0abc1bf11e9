"""Render the Markdown reference page of a data model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..naming import to_anchor
from .links import render_linked_type

if TYPE_CHECKING:
    from collections.abc import Container

    from mdmodels.datamodel import Attribute, DataModel, Enumeration, Object

logger = logging.getLogger(__name__)

SEPARATOR = "------"

# Options surfaced through the docstring instead
RESERVED_OPTIONS = frozenset({"description"})


def render_graph(model: DataModel) -> list[str]:
    """Render the Mermaid dependency graph.

    Every (attribute, dtype) pair pointing to a model type yields one edge,
    repeated pairs are kept.
    """
    type_names = model.type_names
    lines = ["```mermaid", "flowchart TB"]
    for obj in model.objects:
        for attribute in obj.attributes:
            for dtype in attribute.dtypes:
                if dtype not in type_names:
                    continue
                lines.append(
                    f"    {to_anchor(obj.name)}({obj.name}) --> {to_anchor(dtype)}({dtype})"
                )
    lines.append("```")
    lines.append("")
    return lines


def render_ontologies(model: DataModel) -> list[str]:
    """Render the ontology list, nothing if no prefixes are declared."""
    prefixes = model.prefixes
    if not prefixes:
        return []

    lines = ["## Ontologies", ""]
    for prefix in prefixes:
        lines.append(f"- [{prefix.prefix}]({prefix.uri})")
    lines.append("")
    return lines


def _render_attribute(attribute: Attribute, type_names: Container[str]) -> list[str]:
    name = f"__{attribute.name}*__" if attribute.required else attribute.name
    lines = [f"- {name}: {render_linked_type(attribute, type_names)}"]

    if attribute.docstring:
        first, *rest = attribute.docstring.splitlines()
        lines.append(f"    - {first}")
        # Continuation lines stay inside the bullet
        lines.extend(f"      {line}" if line.strip() else "" for line in rest)

    for option in attribute.options:
        if option.key in RESERVED_OPTIONS:
            continue
        lines.append(f"    - `{option.key.capitalize()}`: {option.value}")

    return lines


def render_object(obj: Object, type_names: Container[str]) -> list[str]:
    """Render the heading and attribute listing of a single object."""
    logger.debug(f"Rendering documentation for object: {obj.name}")
    lines = [f"### {obj.name}", ""]

    if obj.docstring:
        lines.append(obj.docstring)
        lines.append("")
    if obj.term:
        lines.append(f"`Term`: {obj.term}")
        lines.append("")

    for attribute in obj.attributes:
        lines.extend(_render_attribute(attribute, type_names))

    if obj.attributes:
        lines.append("")
    lines.append(SEPARATOR)
    lines.append("")
    return lines


def render_enumeration(enum: Enumeration) -> list[str]:
    """Render the heading and key/value mappings of an enumeration."""
    lines = [f"### {enum.name}", ""]

    if enum.docstring:
        lines.append(enum.docstring)
        lines.append("")

    lines.append("```python")
    for key, value in enum.mappings.items():
        lines.append(f"{key} = {value}")
    lines.append("```")
    lines.append("")
    lines.append(SEPARATOR)
    lines.append("")
    return lines


def render_document(model: DataModel) -> str:
    """Render the complete reference page of a data model.

    Raises:
        SchemaContractError: If an attribute declares no data type
    """
    lines: list[str] = []

    if model.name:
        lines.extend([f"# {model.name}", ""])

    lines.extend(render_graph(model))
    lines.extend(render_ontologies(model))

    type_names = model.type_names
    lines.extend(["## Types", ""])
    for obj in model.objects:
        lines.extend(render_object(obj, type_names))

    if model.enums:
        lines.extend(["## Enumerations", ""])
        for enum in model.enums:
            lines.extend(render_enumeration(enum))

    logger.debug(
        f"Rendered document: {len(model.objects)} objects, {len(model.enums)} enumerations"
    )
    return "\n".join(lines)
