"""mdmodels - Render reference documentation and Python classes from data models."""

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
from mdmodels.exceptions import MDModelsError, SchemaContractError
from mdmodels.generator import generate_classes, generate_docs

__version__ = "0.1.0"

__all__ = [
    # Model
    "DataModel",
    "Object",
    "Attribute",
    "AttrOption",
    "Enumeration",
    "Prefix",
    "XMLType",
    "FrontMatter",
    # Generation
    "generate_docs",
    "generate_classes",
    # Errors
    "MDModelsError",
    "SchemaContractError",
]
