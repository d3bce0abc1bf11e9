"""Generate documentation and Python classes from a data model.

Example:
    from mdmodels import DataModel
    from mdmodels.generator import generate_classes, generate_docs

    model = DataModel.from_path("model.json")
    generate_docs(model, "docs/model.md")
    generate_classes(model, "lib/model.py")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .render import render_classes, render_document

if TYPE_CHECKING:
    from mdmodels.datamodel import DataModel

logger = logging.getLogger(__name__)


def _report_unresolved(model: DataModel) -> None:
    for dtype in model.unresolved_types():
        logger.warning(f"Type '{dtype}' is not defined in the model, rendering it as plain text")


def _write(content: str, output_path: str | Path) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def generate_docs(model: DataModel, output_path: str | Path) -> Path:
    """Render the reference page of a model and write it to output_path.

    Args:
        model: Data model to document
        output_path: Markdown file to write

    Returns:
        Path of the written file
    """
    _report_unresolved(model)
    path = _write(render_document(model), output_path)
    logger.info(f"Documentation written to {path}")
    return path


def generate_classes(model: DataModel, output_path: str | Path) -> Path:
    """Render the classes module of a model and write it to output_path.

    Args:
        model: Data model to generate classes for
        output_path: Python module to write

    Returns:
        Path of the written file
    """
    _report_unresolved(model)
    path = _write(render_classes(model), output_path)
    logger.info(
        f"Classes written to {path}: {len(model.objects)} objects, {len(model.enums)} enumerations"
    )
    return path


__all__ = ["generate_classes", "generate_docs"]
