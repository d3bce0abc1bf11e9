"""Naming helpers shared by the renderers."""

from __future__ import annotations

import json
import keyword

from mdmodels.exceptions import SchemaContractError


def to_anchor(name: str) -> str:
    """Case-insensitive anchor/node id of a type name."""
    return name.lower()


def quote(value: str) -> str:
    """Render a value as a double-quoted Python string literal."""
    return json.dumps(value, ensure_ascii=False)


def docstring(text: str) -> str:
    """Render free text as a triple-quoted docstring literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"""{escaped}"""'


def check_identifier(name: str, element: str) -> str:
    """Ensure a name can be used as a Python identifier.

    Raises:
        SchemaContractError: If the name is a keyword or not an identifier
    """
    if keyword.iskeyword(name):
        raise SchemaContractError(element, f"'{name}' collides with a reserved word")
    if not name.isidentifier():
        raise SchemaContractError(element, f"'{name}' is not a valid identifier")
    return name


def render_all_export(names: list[str]) -> list[str]:
    """Render an __all__ list for a generated module."""
    lines = ["__all__ = ["]
    for name in names:
        lines.append(f'    "{name}",')
    lines.append("]")
    lines.append("")
    return lines
