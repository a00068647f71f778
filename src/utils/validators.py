"""
Validation utilities for EDM Graph.

This module provides validation functions for command line and caller
input before it reaches the extractor or the path search.
"""

from __future__ import annotations

from pathlib import Path

from .exceptions import ValidationError


def validate_file_path(file_path: str, must_exist: bool = True) -> Path:
    """
    Validate file path and return Path object.

    Args:
        file_path: Path to validate
        must_exist: If True, file must exist

    Returns:
        Path object

    Raises:
        ValidationError: If validation fails
    """
    path = Path(file_path)

    if must_exist and not path.is_file():
        raise ValidationError(f"File does not exist: {file_path}")

    return path


def validate_max_depth(max_depth: int) -> int:
    """
    Validate the hop budget for a path search.

    Raises:
        ValidationError: If depth is not a non-negative integer
    """
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise ValidationError(
            f"Invalid max depth: {max_depth}. Must be a non-negative integer"
        )

    return max_depth


def validate_entity_name(name: str) -> str:
    """Validate an entity name is a non-blank string and return it stripped."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"Invalid entity name: {name!r}")

    return name.strip()
