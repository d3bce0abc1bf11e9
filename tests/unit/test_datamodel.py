"""Tests for the schema model."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from mdmodels.datamodel import (
    Attribute,
    AttrOption,
    DataModel,
    Enumeration,
    FrontMatter,
    Object,
    Prefix,
    XMLType,
)


class TestXMLType:
    """Tests for XML descriptors."""

    def test_attribute_shorthand(self) -> None:
        """A leading @ marks an XML attribute."""
        assert XMLType.from_str("@id") == XMLType(name="id", is_attr=True)

    def test_element_shorthand(self) -> None:
        """Anything else is an element."""
        assert XMLType.from_str("name") == XMLType(name="name", is_attr=False)

    def test_attribute_accepts_string(self) -> None:
        """Attributes accept the string shorthand for xml."""
        attribute = Attribute(name="ident", dtypes=["string"], xml="@id")
        assert attribute.xml == XMLType(name="id", is_attr=True)
        assert attribute.xml_name == "id"
        assert attribute.is_xml_attr is True

    def test_attribute_accepts_mapping(self) -> None:
        """Attributes accept the serialized form for xml."""
        attribute = Attribute.model_validate(
            {"name": "ident", "dtypes": ["string"], "xml": {"name": "Ident", "is_attr": False}}
        )
        assert attribute.xml_name == "Ident"
        assert attribute.is_xml_attr is False

    def test_missing_xml(self) -> None:
        """Without descriptor the attribute name is the element tag."""
        attribute = Attribute(name="value", dtypes=["float"])
        assert attribute.xml_name == "value"
        assert attribute.is_xml_attr is False


class TestAttribute:
    """Tests for attribute helpers."""

    def test_option_lookup(self) -> None:
        """The first option with a key is returned."""
        attribute = Attribute(
            name="mass",
            dtypes=["float"],
            options=[AttrOption(key="unit", value="mg"), AttrOption(key="unit", value="g")],
        )
        assert attribute.option("unit") == "mg"
        assert attribute.option("term") is None

    def test_frozen(self) -> None:
        """Models cannot be mutated."""
        attribute = Attribute(name="mass", dtypes=["float"])
        with pytest.raises(ValidationError):
            attribute.required = True


class TestFrontMatter:
    """Tests for model configuration."""

    def test_defaults(self) -> None:
        """Defaults match the md-models conventions."""
        config = FrontMatter()
        assert config.id_field is True
        assert config.prefixes is None
        assert config.nsmap is None

    def test_alias(self) -> None:
        """id-field can be given by alias or by name."""
        assert FrontMatter.model_validate({"id-field": False}).id_field is False
        assert FrontMatter(id_field=False).id_field is False


class TestDataModel:
    """Tests for model lookups."""

    @pytest.fixture
    def model(self) -> DataModel:
        return DataModel(
            objects=[
                Object(
                    name="Team",
                    attributes=[
                        Attribute(name="lead", dtypes=["Person"]),
                        Attribute(name="size", dtypes=["Quantity", "integer"]),
                        Attribute(name="unit", dtypes=["UnitDefinition", "Quantity"]),
                    ],
                ),
                Object(name="Person"),
            ],
            enums=[Enumeration(name="Color")],
            config=FrontMatter(prefixes={"schema": "http://schema.org/", "obo": "http://obo/"}),
        )

    def test_name_sets(self, model: DataModel) -> None:
        """Object and enumeration names form the cross-reference set."""
        assert model.object_names == {"Team", "Person"}
        assert model.enum_names == {"Color"}
        assert model.type_names == {"Team", "Person", "Color"}

    def test_prefixes(self, model: DataModel) -> None:
        """Prefixes keep their declared order."""
        assert model.prefixes == [
            Prefix(prefix="schema", uri="http://schema.org/"),
            Prefix(prefix="obo", uri="http://obo/"),
        ]

    def test_no_prefixes(self) -> None:
        """Models without prefixes have an empty list."""
        assert DataModel().prefixes == []

    def test_get_object(self, model: DataModel) -> None:
        """Lookups return the object or None."""
        person = model.get_object("Person")
        assert person is not None
        assert person.name == "Person"
        assert model.get_object("Missing") is None

    def test_unresolved_types(self, model: DataModel) -> None:
        """Unknown non-primitive types are reported once in first-seen order."""
        assert model.unresolved_types() == ["Quantity", "UnitDefinition"]

    def test_from_json(self) -> None:
        """Models load from their JSON serialization."""
        payload = {
            "name": "Team",
            "objects": [
                {
                    "name": "Person",
                    "attributes": [
                        {"name": "name", "dtypes": ["string"], "required": True, "xml": "@name"},
                    ],
                }
            ],
            "config": {"id-field": False, "prefixes": {"schema": "http://schema.org/"}},
        }
        model = DataModel.from_json(json.dumps(payload))

        assert model.name == "Team"
        assert model.config.id_field is False
        attribute = model.objects[0].attributes[0]
        assert attribute.required is True
        assert attribute.xml == XMLType(name="name", is_attr=True)

    def test_from_path(self, tmp_path) -> None:
        """Models load from JSON files."""
        path = tmp_path / "model.json"
        path.write_text(DataModel(name="Team").model_dump_json(), encoding="utf-8")
        assert DataModel.from_path(path).name == "Team"
