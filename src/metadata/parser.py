"""Facade tying a metadata document source to extraction and path search."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterator, List, Optional, Union

from ..utils.constants import EDM_NAMESPACE
from .document_source import DocumentSource
from .extractor import EdmExtractor
from .models import EntityInfo, EntityRelationshipInfo
from .path_finder import EntityPath, find_paths


class EdmMetadataParser:
    """Entry point for reading one EDM metadata document.

    The document is parsed on first use and shared by every later call.

    Example:
        >>> parser = EdmMetadataParser.from_file("metadata.edmx")
        >>> relationships = parser.parse_relationships()
        >>> parser.find_paths("Customer", "Product", 3, relationships)
    """

    def __init__(self, source: DocumentSource, namespace: Optional[str] = None) -> None:
        self.source = source
        self.extractor = EdmExtractor(namespace or EDM_NAMESPACE)

    @classmethod
    def from_file(
        cls, file_path: Union[str, Path], namespace: Optional[str] = None
    ) -> "EdmMetadataParser":
        return cls(DocumentSource.from_file(file_path), namespace)

    @classmethod
    def from_string(
        cls, xml_data: Union[str, bytes], namespace: Optional[str] = None
    ) -> "EdmMetadataParser":
        return cls(DocumentSource.from_string(xml_data), namespace)

    @classmethod
    def from_stream(cls, xml_stream: IO, namespace: Optional[str] = None) -> "EdmMetadataParser":
        return cls(DocumentSource.from_stream(xml_stream), namespace)

    def parse_relationships(self) -> List[EntityRelationshipInfo]:
        return self.extractor.extract_relationships(self.source.root)

    def get_all_entities_info(self, *entity_names: str) -> Iterator[EntityInfo]:
        """Lazily describe entities, optionally restricted to ``entity_names``.

        The document is not loaded until the first entity is requested.
        """
        yield from self.extractor.describe_entities(self.source.root, entity_names)

    def list_entity_names(self) -> List[Optional[str]]:
        return self.extractor.list_entity_names(self.source.root)

    def find_paths(
        self,
        start_entity: str,
        end_entity: str,
        max_depth: int,
        relationships: Optional[List[EntityRelationshipInfo]] = None,
    ) -> List[EntityPath]:
        """Search ``relationships``, or this document's own edges when omitted."""
        if relationships is None:
            relationships = self.parse_relationships()
        return find_paths(start_entity, end_entity, max_depth, relationships)
