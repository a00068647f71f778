"""EDMX/CSDL metadata plugin."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from ...metadata.document_source import DocumentSource
from ...metadata.extractor import EdmExtractor
from ...metadata.models import EntityInfo, EntityRelationshipInfo, RelationshipKind
from ...utils.constants import EDM_NAMESPACE, METADATA_FILE_EXTENSIONS
from ...utils.exceptions import AnnotationError, ParsingError
from .base import EntityNode, GraphPlugin, MetadataGraph, RelationshipEdge

logger = logging.getLogger(__name__)

RELATIONSHIP_LABELS = {
    RelationshipKind.INHERITANCE: "INHERITS_FROM",
    RelationshipKind.NAVIGATION: "NAVIGATES_TO",
    RelationshipKind.FOREIGN_KEY: "FOREIGN_KEY",
    RelationshipKind.REFERENTIAL_CONSTRAINT: "REFERENCES",
}


class EdmxMetadataPlugin(GraphPlugin):
    """Turn an EDM metadata document into entity nodes and relationship edges."""

    def __init__(self, namespace: str = EDM_NAMESPACE) -> None:
        self.extractor = EdmExtractor(namespace)

    @property
    def supported_extensions(self) -> List[str]:
        return list(METADATA_FILE_EXTENSIONS)

    def parse(self, content: Union[str, bytes], source: Optional[str] = None) -> MetadataGraph:
        try:
            root = DocumentSource.from_string(content).root
        except ParsingError as exc:
            logger.warning("EDM metadata parsing failed: %s", exc)
            return MetadataGraph(source=source, error=str(exc))

        relationships = self.extractor.extract_relationships(root)
        base_types = {
            r.from_entity_type: r.to_entity_type
            for r in relationships
            if r.kind is RelationshipKind.INHERITANCE
        }
        graph = MetadataGraph(relationship_count=len(relationships), source=source)

        try:
            graph.nodes = [
                self._entity_node(entity, base_types.get(entity.name))
                for entity in self.extractor.describe_entities(root)
            ]
        except AnnotationError as exc:
            logger.warning("Annotation classification failed, using name-only nodes: %s", exc)
            graph.annotation_error = str(exc)
            graph.nodes = [
                EntityNode(name=name, base_type=base_types.get(name))
                for name in self.extractor.list_entity_names(root)
                if name
            ]

        declared = {node.name for node in graph.nodes}
        for relationship in relationships:
            if not relationship.from_entity_type or not relationship.to_entity_type:
                continue
            graph.edges.append(self._relationship_edge(relationship))
            target = relationship.to_entity_type
            if target not in declared and target not in graph.external_refs:
                graph.external_refs.append(target)

        logger.info(
            "Built graph with %d entities and %d edges from %s",
            graph.entity_count,
            len(graph.edges),
            source or "<string>",
        )
        return graph

    @staticmethod
    def _entity_node(entity: EntityInfo, base_type: Optional[str]) -> EntityNode:
        return EntityNode(
            name=entity.name or "",
            keys=list(entity.keys),
            properties=[prop.name for prop in entity.properties],
            navigation_properties=[str(nav) for nav in entity.navigation_properties],
            base_type=base_type,
        )

    @staticmethod
    def _relationship_edge(relationship: EntityRelationshipInfo) -> RelationshipEdge:
        return RelationshipEdge(
            source=relationship.from_entity_type,
            target=relationship.to_entity_type,
            relationship=RELATIONSHIP_LABELS[relationship.kind],
            navigation_property=relationship.navigation_property,
            keys=list(relationship.keys) if relationship.keys is not None else None,
        )
