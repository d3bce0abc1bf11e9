"""Schema model consumed by the renderers.

The model is a fully resolved, read-only description of a data model:
objects with typed attributes, enumerations and the front matter
configuration carrying ontology prefixes. All classes are frozen pydantic
models, so rendering can never mutate them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mdmodels.primitives import filter_non_primitives


class XMLType(BaseModel):
    """XML serialization descriptor of an attribute.

    Can be given as a string where a leading "@" marks an XML attribute:

        XMLType.model_validate("@id")   # XMLType(name="id", is_attr=True)
        XMLType.model_validate("name")  # XMLType(name="name", is_attr=False)
    """

    model_config = ConfigDict(frozen=True)

    name: str
    is_attr: bool = False

    @classmethod
    def from_str(cls, value: str) -> XMLType:
        if value.startswith("@"):
            return cls(name=value[1:], is_attr=True)
        return cls(name=value, is_attr=False)


class AttrOption(BaseModel):
    """Free-form key/value metadata of an attribute."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class Attribute(BaseModel):
    """A named, typed field of an Object."""

    model_config = ConfigDict(frozen=True)

    name: str
    docstring: str = ""
    required: bool = False
    multiple: bool = False
    dtypes: list[str] = Field(default_factory=list)
    options: list[AttrOption] = Field(default_factory=list)
    xml: XMLType | None = None
    term: str | None = None

    @field_validator("xml", mode="before")
    @classmethod
    def _parse_xml_shorthand(cls, value: Any) -> Any:
        if isinstance(value, str):
            return XMLType.from_str(value)
        return value

    @property
    def xml_name(self) -> str:
        """XML tag of the attribute, falling back to its name."""
        return self.xml.name if self.xml is not None else self.name

    @property
    def is_xml_attr(self) -> bool:
        return self.xml is not None and self.xml.is_attr

    def option(self, key: str) -> str | None:
        """Get the value of the first option with the given key."""
        for option in self.options:
            if option.key == key:
                return option.value
        return None


class Object(BaseModel):
    """A schema type with named attributes."""

    model_config = ConfigDict(frozen=True)

    name: str
    docstring: str = ""
    term: str | None = None
    attributes: list[Attribute] = Field(default_factory=list)


class Enumeration(BaseModel):
    """A schema enumeration mapping keys to values."""

    model_config = ConfigDict(frozen=True)

    name: str
    docstring: str = ""
    mappings: dict[str, str] = Field(default_factory=dict)


class Prefix(BaseModel):
    """An ontology namespace short name mapped to its URI."""

    model_config = ConfigDict(frozen=True)

    prefix: str
    uri: str


class FrontMatter(BaseModel):
    """Model-level configuration.

    Args:
        id_field: Whether generated classes get an "id" attribute
        prefixes: Ontology prefixes mapped to their URIs
        nsmap: XML namespace map of the generated classes
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id_field: bool = Field(default=True, alias="id-field")
    prefixes: dict[str, str] | None = None
    nsmap: dict[str, str] | None = None


class DataModel(BaseModel):
    """The complete schema model handed to the renderers."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    objects: list[Object] = Field(default_factory=list)
    enums: list[Enumeration] = Field(default_factory=list)
    config: FrontMatter = Field(default_factory=FrontMatter)

    @classmethod
    def from_json(cls, text: str | bytes) -> DataModel:
        """Build a model from its JSON serialization."""
        return cls.model_validate_json(text)

    @classmethod
    def from_path(cls, path: str | Path) -> DataModel:
        """Build a model from a JSON file."""
        return cls.from_json(Path(path).read_text(encoding="utf-8"))

    @property
    def prefixes(self) -> list[Prefix]:
        """Ontology prefixes in declared order."""
        if not self.config.prefixes:
            return []
        return [Prefix(prefix=prefix, uri=uri) for prefix, uri in self.config.prefixes.items()]

    @property
    def object_names(self) -> frozenset[str]:
        return frozenset(obj.name for obj in self.objects)

    @property
    def enum_names(self) -> frozenset[str]:
        return frozenset(enum.name for enum in self.enums)

    @property
    def type_names(self) -> frozenset[str]:
        """All names eligible for cross-referencing (objects and enums)."""
        return self.object_names | self.enum_names

    def get_object(self, name: str) -> Object | None:
        """Look up an object by name, returning None when it does not exist."""
        for obj in self.objects:
            if obj.name == name:
                return obj
        return None

    def unresolved_types(self) -> list[str]:
        """Non-primitive dtypes that are neither objects nor enumerations.

        These are rendered as plain external type names.
        """
        known = self.type_names
        unresolved: list[str] = []
        for obj in self.objects:
            for attribute in obj.attributes:
                for dtype in filter_non_primitives(attribute.dtypes):
                    if dtype not in known and dtype not in unresolved:
                        unresolved.append(dtype)
        return unresolved
