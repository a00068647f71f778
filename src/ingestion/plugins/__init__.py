"""Graph plugins for metadata extraction."""

from .base import EntityNode, GraphPlugin, MetadataGraph, RelationshipEdge
from .edmx_metadata import EdmxMetadataPlugin

__all__ = [
    "EdmxMetadataPlugin",
    "EntityNode",
    "GraphPlugin",
    "MetadataGraph",
    "RelationshipEdge",
]
