"""Rendering exceptions for mdmodels.

This module provides exception classes for the renderers so that schema
contract violations surface as one clear failure for the offending element.
"""


class MDModelsError(Exception):
    """Base class for all mdmodels errors."""

    pass


class SchemaContractError(MDModelsError, ValueError):
    """Raised when the schema model breaks a rendering contract.

    Examples are an attribute without any dtype or a type name that
    collides with a Python keyword. Rendering aborts for the offending
    element instead of emitting malformed output.

    Example:
        try:
            render_document(model)
        except SchemaContractError as exc:
            print(f"Fix {exc.element} upstream")
    """

    def __init__(self, element: str, message: str):
        self.element = element
        super().__init__(f"{element}: {message}")
