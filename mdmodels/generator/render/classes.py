"""Render pydantic-xml class definitions from a data model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mdmodels.exceptions import SchemaContractError

from ..naming import check_identifier, docstring, quote, render_all_export
from .types import render_type

if TYPE_CHECKING:
    from mdmodels.datamodel import Attribute, DataModel, Enumeration, Object

logger = logging.getLogger(__name__)

INDENT = "    "

# Parameters every add_to helper declares itself
HELPER_PARAMS = frozenset({"self", "kwargs"})


def _render_options(attribute: Attribute) -> str:
    """Render the json_schema_extra mapping, empty if there is nothing to carry."""
    items = []
    if attribute.term:
        items.append(f'"term": {quote(attribute.term)}')
    for option in attribute.options:
        items.append(f"{quote(option.key)}: {quote(option.value)}")
    if not items:
        return ""
    return "{" + ", ".join(items) + "}"


def render_field(attribute: Attribute) -> list[str]:
    """Render a single field declaration of a class body.

    Raises:
        SchemaContractError: If the attribute has no data type or its name
            is not a usable identifier
    """
    name = check_identifier(attribute.name, attribute.name)
    declared = render_type(attribute, for_declaration=True)

    if attribute.is_xml_attr:
        binding, tag_kwarg = "attr", "name"
    else:
        binding, tag_kwarg = "element", "tag"

    lines = [
        f"{INDENT}{name}: {declared} = {binding}(",
        f"{INDENT * 2}{tag_kwarg}={quote(attribute.xml_name)},",
    ]

    if attribute.multiple:
        lines.append(f"{INDENT * 2}default_factory=list,")
    elif not attribute.required:
        lines.append(f"{INDENT * 2}default=None,")

    options = _render_options(attribute)
    if options:
        lines.append(f"{INDENT * 2}json_schema_extra={options},")

    lines.append(f"{INDENT})")
    return lines


def render_signature(model: DataModel, object_name: str) -> str:
    """Render the parameters of a method constructing the named object.

    Parameters follow the attribute order. Optional and multiple ones
    default to None and are meant to be keyword-only.

    Returns:
        The parameter list, empty if the object does not exist
    """
    obj = model.get_object(object_name)
    if obj is None:
        return ""

    params = []
    for attribute in obj.attributes:
        name = check_identifier(attribute.name, f"{obj.name}.{attribute.name}")
        param = f"{name}: {render_type(attribute, for_declaration=True)}"
        if attribute.multiple or not attribute.required:
            param += " = None"
        params.append(param)
    return ", ".join(params)


def render_param_binding(model: DataModel, object_name: str) -> str:
    """Render a mapping literal forwarding parameters to the named object.

    Returns:
        The mapping literal, empty if the object does not exist
    """
    obj = model.get_object(object_name)
    if obj is None:
        return ""

    pairs = []
    for attribute in obj.attributes:
        name = check_identifier(attribute.name, f"{obj.name}.{attribute.name}")
        pairs.append(f"{quote(name)}: {name}")
    return "{" + ", ".join(pairs) + "}"


def _render_enum(enum: Enumeration) -> list[str]:
    """Render a single Enum class."""
    name = check_identifier(enum.name, enum.name)
    lines = [f"class {name}(Enum):"]

    if enum.docstring:
        lines.append(f"{INDENT}{docstring(enum.docstring)}")
        lines.append("")

    for key, value in enum.mappings.items():
        member = check_identifier(key, f"{enum.name}.{key}")
        lines.append(f"{INDENT}{member} = {quote(value)}")

    if not enum.mappings:
        lines.append(f"{INDENT}pass")

    lines.append("")
    lines.append("")
    return lines


def _render_add_to(model: DataModel, attribute: Attribute) -> list[str]:
    """Render an add_to_<attribute> helper for a list of model objects."""
    targets = [dtype for dtype in attribute.dtypes if dtype in model.object_names]
    if not attribute.multiple or len(targets) != 1:
        return []

    target = targets[0]
    for target_attribute in model.get_object(target).attributes:
        if target_attribute.name in HELPER_PARAMS:
            raise SchemaContractError(
                f"{target}.{target_attribute.name}",
                f"'{target_attribute.name}' collides with a parameter of add_to_{attribute.name}",
            )

    signature = render_signature(model, target)
    params = ["self"]
    if signature:
        params.extend(["*", signature])
    params.append("**kwargs")

    return [
        "",
        f"{INDENT}def add_to_{attribute.name}({', '.join(params)}) -> {target}:",
        f'{INDENT * 2}"""Add a new {target} to the \'{attribute.name}\' attribute."""',
        f"{INDENT * 2}params = {render_param_binding(model, target)}",
        f"{INDENT * 2}params = {{key: value for key, value in params.items() if value is not None}}",
        f"{INDENT * 2}obj = {target}(**params, **kwargs)",
        f"{INDENT * 2}self.{attribute.name}.append(obj)",
        f"{INDENT * 2}return self.{attribute.name}[-1]",
    ]


def _has_id_attribute(obj: Object) -> bool:
    return any(attribute.name == "id" for attribute in obj.attributes)


def _render_class(model: DataModel, obj: Object) -> list[str]:
    """Render a single pydantic-xml class."""
    logger.debug(f"Rendering class: {obj.name}")
    name = check_identifier(obj.name, obj.name)

    header_kwargs = [f"tag={quote(obj.name)}", 'search_mode="unordered"']
    if model.config.nsmap:
        header_kwargs.append("nsmap=NSMAP")

    lines = [f"class {name}(BaseXmlModel, {', '.join(header_kwargs)}):"]
    body: list[str] = []

    if obj.docstring:
        body.append(f"{INDENT}{docstring(obj.docstring)}")
        body.append("")

    if model.config.id_field and not _has_id_attribute(obj):
        body.extend(
            [
                f"{INDENT}id: Optional[str] = attr(",
                f'{INDENT * 2}name="id",',
                f"{INDENT * 2}default_factory=lambda: str(uuid4()),",
                f'{INDENT * 2}json_schema_extra={{"description": "Unique identifier of the given object."}},',
                f"{INDENT})",
            ]
        )

    for attribute in obj.attributes:
        body.extend(render_field(attribute))

    for attribute in obj.attributes:
        body.extend(_render_add_to(model, attribute))

    if not body:
        body.append(f"{INDENT}pass")

    lines.extend(body)
    lines.append("")
    lines.append("")
    return lines


def render_classes(model: DataModel) -> str:
    """Render the complete classes module of a data model.

    Raises:
        SchemaContractError: If a name collides with a reserved word or an
            attribute declares no data type
    """
    title = model.name or "data"
    lines = [
        docstring(f"Classes generated from the {title} model."),
        "",
        "from __future__ import annotations",
        "",
    ]

    if model.enums:
        lines.append("from enum import Enum")
    lines.append("from typing import List, Optional, Union")
    if model.config.id_field:
        lines.append("from uuid import uuid4")
    lines.extend(
        [
            "",
            "from pydantic_xml import BaseXmlModel, attr, element",
            "",
            "",
        ]
    )

    if model.config.nsmap:
        lines.append("NSMAP = {")
        for prefix, uri in model.config.nsmap.items():
            lines.append(f"{INDENT}{quote(prefix)}: {quote(uri)},")
        lines.append("}")
        lines.append("")
        lines.append("")

    names = []
    for enum in model.enums:
        names.append(enum.name)
        lines.extend(_render_enum(enum))

    for obj in model.objects:
        names.append(obj.name)
        lines.extend(_render_class(model, obj))

    lines.extend(render_all_export(names))

    logger.debug(f"Rendered classes module with {len(names)} classes")
    return "\n".join(lines)
