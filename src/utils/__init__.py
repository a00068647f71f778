"""
Utility modules for EDM Graph.

This package provides common utilities, exceptions, constants, type aliases,
validators, and logging configuration used throughout the application.
"""

from __future__ import annotations

from .constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_DEPTH,
    EDM_NAMESPACE,
    INHERITS_FROM,
    METADATA_FILE_EXTENSIONS,
)
from .exceptions import (
    AnnotationError,
    ConfigurationError,
    DocumentLoadError,
    EdmGraphError,
    InvalidAnnotationElementError,
    MissingAnnotationAttributeError,
    ParsingError,
    UnknownAnnotationTypeError,
    ValidationError,
)
from .logging_config import setup_logging
from .types import JSON, JSONList, KeyNames, NameFilter
from .validators import validate_entity_name, validate_file_path, validate_max_depth

__all__ = [
    # Constants
    "DEFAULT_JSON_INDENT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MAX_DEPTH",
    "EDM_NAMESPACE",
    "INHERITS_FROM",
    "METADATA_FILE_EXTENSIONS",
    # Exceptions
    "AnnotationError",
    "ConfigurationError",
    "DocumentLoadError",
    "EdmGraphError",
    "InvalidAnnotationElementError",
    "MissingAnnotationAttributeError",
    "ParsingError",
    "UnknownAnnotationTypeError",
    "ValidationError",
    # Logging
    "setup_logging",
    # Types
    "JSON",
    "JSONList",
    "KeyNames",
    "NameFilter",
    # Validators
    "validate_entity_name",
    "validate_file_path",
    "validate_max_depth",
]
