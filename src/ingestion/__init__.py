"""
Ingestion module for metadata files.

This module maps metadata files to graph plugins by extension and turns
their content into standardized node and edge results.
"""

from __future__ import annotations

__all__: list[str] = []
