"""
Type aliases for EDM Graph.

This module defines common type aliases used throughout the application
to improve code readability.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

# Common type aliases
JSON = Dict[str, Any]
JSONList = List[Dict[str, Any]]

# Extraction types
KeyNames = List[Optional[str]]
NameFilter = Sequence[str]
