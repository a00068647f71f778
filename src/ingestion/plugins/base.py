"""Graph records produced from metadata documents, and the plugin contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ...utils.types import KeyNames


@dataclass
class EntityNode:
    """One declared entity type."""

    name: str
    keys: KeyNames = field(default_factory=list)
    properties: List[Optional[str]] = field(default_factory=list)
    navigation_properties: List[str] = field(default_factory=list)
    base_type: Optional[str] = None
    label: str = "EntityType"


@dataclass
class RelationshipEdge:
    """A labelled relationship between two entity type names.

    ``keys`` is only set on navigation edges.
    """

    source: str
    target: str
    relationship: str
    navigation_property: Optional[str] = None
    keys: Optional[KeyNames] = None


@dataclass
class MetadataGraph:
    """Entity graph of one metadata document.

    ``external_refs`` lists relationship targets the document never declares.
    ``error`` is set when the document could not be parsed at all, and
    ``annotation_error`` when entities were reduced to name-only nodes.
    """

    nodes: List[EntityNode] = field(default_factory=list)
    edges: List[RelationshipEdge] = field(default_factory=list)
    external_refs: List[str] = field(default_factory=list)
    relationship_count: int = 0
    source: Optional[str] = None
    error: Optional[str] = None
    annotation_error: Optional[str] = None

    @property
    def entity_count(self) -> int:
        return len(self.nodes)


class GraphPlugin(ABC):
    """Turns the raw content of a metadata file into a MetadataGraph."""

    @property
    @abstractmethod
    def supported_extensions(self) -> List[str]:
        """File extensions supported by this plugin."""
        raise NotImplementedError

    def handles(self, path: Union[str, Path]) -> bool:
        suffix = Path(path).suffix.lower()
        return suffix in (ext.lower() for ext in self.supported_extensions)

    @abstractmethod
    def parse(self, content: Union[str, bytes], source: Optional[str] = None) -> MetadataGraph:
        """Build the graph of ``content``; ``source`` names where it came from.

        Bytes are decoded according to the document's XML declaration.
        """
        raise NotImplementedError
