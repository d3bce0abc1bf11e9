"""Tests for the generation driver."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from mdmodels import DataModel, generate_classes, generate_docs
from mdmodels.datamodel import Attribute, Object

MODEL = DataModel(
    name="Lab",
    objects=[
        Object(
            name="Sample",
            attributes=[
                Attribute(name="name", dtypes=["string"], required=True),
                Attribute(name="quantity", dtypes=["Quantity"]),
            ],
        )
    ],
)


class TestGenerate:
    """Tests for writing generated files."""

    def test_generates_docs(self) -> None:
        """The document is written, creating parent directories."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "docs" / "lab.md"
            path = generate_docs(MODEL, output)

            assert path == output
            content = output.read_text(encoding="utf-8")
            assert content.startswith("# Lab\n")
            assert "- quantity: Quantity" in content

    def test_generates_classes(self) -> None:
        """The classes module is written and compiles."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "lab" / "models.py"
            generate_classes(MODEL, output)

            content = output.read_text(encoding="utf-8")
            assert "class Sample(BaseXmlModel" in content
            compile(content, "models.py", "exec")

    def test_warns_on_unresolved_types(self, caplog) -> None:
        """Unknown types are reported, not fatal."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with caplog.at_level(logging.WARNING, logger="mdmodels.generator"):
                generate_docs(MODEL, Path(tmpdir) / "lab.md")

        assert "Quantity" in caplog.text
