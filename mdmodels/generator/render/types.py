"""Render attribute type expressions.

Two forms are produced from the same attribute:
- display form for documentation, e.g. ``list[Person] | list[string]``
- declaration form for generated classes, e.g. ``Optional[str]``,
  ``Union[None, int, str]`` or ``List[Person]``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdmodels.exceptions import SchemaContractError
from mdmodels.primitives import to_python_type

if TYPE_CHECKING:
    from mdmodels.datamodel import Attribute


def _require_dtypes(attribute: Attribute) -> list[str]:
    if not attribute.dtypes:
        raise SchemaContractError(attribute.name, "attribute declares no data type")
    return attribute.dtypes


def render_display_parts(attribute: Attribute) -> list[tuple[str, str]]:
    """Get (dtype, label) pairs of the display form in declared order.

    The label carries the multiplicity decoration while the dtype stays bare,
    so each alternative can be cross-referenced on its own.
    """
    parts = []
    for dtype in _require_dtypes(attribute):
        label = f"list[{dtype}]" if attribute.multiple else dtype
        parts.append((dtype, label))
    return parts


def render_declaration_type(attribute: Attribute) -> str:
    """Render the type hint used in a generated field declaration."""
    mapped = [to_python_type(dtype) for dtype in _require_dtypes(attribute)]
    dtypes = [dtype for dtype in mapped if dtype != "None"]
    # A declared null type counts as the null alternative
    nullable = (not attribute.required and not attribute.multiple) or len(dtypes) < len(mapped)

    if not dtypes:
        scalar = "None"
    elif len(dtypes) == 1:
        scalar = dtypes[0]
        if nullable:
            scalar = f"Optional[{scalar}]"
    else:
        # Null alternative goes first, declared order is kept for the rest
        alternatives = ["None", *dtypes] if nullable else dtypes
        scalar = f"Union[{', '.join(alternatives)}]"

    if attribute.multiple:
        return f"List[{scalar}]"
    return scalar


def render_type(attribute: Attribute, for_declaration: bool = False) -> str:
    """Render the type expression of an attribute.

    Args:
        attribute: Attribute to render
        for_declaration: Render the class declaration form instead of the
            documentation display form

    Returns:
        The type expression

    Raises:
        SchemaContractError: If the attribute declares no data type
    """
    if for_declaration:
        return render_declaration_type(attribute)
    return " | ".join(label for _, label in render_display_parts(attribute))
