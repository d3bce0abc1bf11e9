"""Primitive data types and their Python counterparts."""

from __future__ import annotations

from collections.abc import Iterable

# md-models type -> Python type hint
TYPE_MAPPING = {
    "string": "str",
    "float": "float",
    "integer": "int",
    "boolean": "bool",
    "bool": "bool",
    "null": "None",
}


def is_primitive(dtype: str) -> bool:
    """Check if the given data type is a primitive type."""
    return dtype in TYPE_MAPPING


def filter_non_primitives(dtypes: Iterable[str]) -> list[str]:
    """Return the non-primitive types of *dtypes*, keeping their order."""
    return [dtype for dtype in dtypes if not is_primitive(dtype)]


def to_python_type(dtype: str) -> str:
    """Get the Python type hint for a data type.

    Object, enumeration and external type names are returned unchanged.
    """
    return TYPE_MAPPING.get(dtype, dtype)
