"""
Application constants for EDM Graph.

This module contains the fixed EDM vocabulary, default values, and
configuration constants used throughout the application.
"""

from __future__ import annotations

# EDM document vocabulary
EDM_NAMESPACE = "http://docs.oasis-open.org/odata/ns/edm"
INHERITS_FROM = "InheritsFrom"
COLLECTION_PREFIX = "Collection("
COLLECTION_SUFFIX = ")"

# Supported metadata file extensions
METADATA_FILE_EXTENSIONS = [".edmx", ".csdl", ".xml"]

# Path search configuration
DEFAULT_MAX_DEPTH = 3  # hops

# Export configuration
DEFAULT_JSON_INDENT = 2

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
