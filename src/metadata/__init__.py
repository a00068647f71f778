"""
EDM metadata module.

This module extracts entity descriptions and a relationship graph from
OData EDM (CSDL/EDMX) metadata documents and searches that graph for
paths between entity types.
"""

from __future__ import annotations

from .annotations import classify_annotation, get_annotation
from .document_source import DocumentSource
from .extractor import EdmExtractor
from .models import (
    AnnotationInfo,
    AnnotationRegularType,
    AnnotationType,
    AXType,
    EntityInfo,
    EntityRelationshipInfo,
    NavigationPropertyInfo,
    PropertyInfo,
    ReferentialConstraint,
    RelationshipKind,
)
from .parser import EdmMetadataParser
from .path_finder import find_paths
from .type_names import simple_entity_name

__all__ = [
    "AnnotationInfo",
    "AnnotationRegularType",
    "AnnotationType",
    "AXType",
    "DocumentSource",
    "EdmExtractor",
    "EdmMetadataParser",
    "EntityInfo",
    "EntityRelationshipInfo",
    "NavigationPropertyInfo",
    "PropertyInfo",
    "ReferentialConstraint",
    "RelationshipKind",
    "classify_annotation",
    "find_paths",
    "get_annotation",
    "simple_entity_name",
]
