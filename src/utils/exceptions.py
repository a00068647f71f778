"""
Custom exception hierarchy for EDM Graph.

This module defines all custom exceptions used throughout the application,
providing clear error categorization and better error handling.
"""

from __future__ import annotations

from typing import Optional


class EdmGraphError(Exception):
    """Base exception for all EDM Graph errors."""

    pass


class ConfigurationError(EdmGraphError):
    """Raised when configuration is invalid or missing."""

    pass


class ValidationError(EdmGraphError):
    """Raised when input validation fails."""

    pass


class ParsingError(EdmGraphError):
    """Raised when a metadata document cannot be read."""

    pass


class DocumentLoadError(ParsingError):
    """Raised when the XML document source fails to load or parse."""

    pass


class AnnotationError(EdmGraphError):
    """Raised when an annotation element cannot be classified."""

    pass


class InvalidAnnotationElementError(AnnotationError, ValueError):
    """Raised when the element handed to the classifier is not an Annotation."""

    def __init__(self, element_name: str) -> None:
        super().__init__(f"Element is not an Annotation: {element_name}")
        self.element_name = element_name


class UnknownAnnotationTypeError(AnnotationError):
    """Raised when the annotation type token is outside the known vocabulary."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown annotation type: {token}")
        self.token = token


class MissingAnnotationAttributeError(AnnotationError):
    """Raised when neither an attribute nor EnumMember content yields a type."""

    def __init__(self, attribute_name: Optional[str]) -> None:
        super().__init__(f"No AttributeName found {attribute_name or ''}".rstrip())
        self.attribute_name = attribute_name
