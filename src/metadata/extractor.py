"""Relationship graph and entity description extraction from EDM metadata."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Iterable, Iterator, List, Optional

from ..utils.constants import EDM_NAMESPACE, INHERITS_FROM
from ..utils.types import KeyNames, NameFilter
from .annotations import ANNOTATION_ELEMENT, get_annotation, local_name
from .models import (
    EntityInfo,
    EntityRelationshipInfo,
    NavigationPropertyInfo,
    PropertyInfo,
    ReferentialConstraint,
    RelationshipKind,
)
from .type_names import simple_entity_name

logger = logging.getLogger(__name__)


class EdmExtractor:
    """Reads entity types out of a parsed EDM document.

    Extraction is permissive: absent or malformed attributes become ``None``
    fields instead of errors, since metadata documents are often hand-edited
    or partially generated. Only annotation classification raises.
    """

    def __init__(self, namespace: str = EDM_NAMESPACE) -> None:
        self.namespace = namespace

    def _tag(self, name: str) -> str:
        return f"{{{self.namespace}}}{name}"

    def entity_types(self, root: ET.Element) -> Iterator[ET.Element]:
        return root.iter(self._tag("EntityType"))

    def list_entity_names(self, root: ET.Element) -> List[Optional[str]]:
        return [entity_type.get("Name") for entity_type in self.entity_types(root)]

    def read_keys(self, entity_type: ET.Element) -> Optional[KeyNames]:
        """Key property names, or None when the entity declares no Key."""
        key = entity_type.find(self._tag("Key"))
        if key is None:
            return None
        return [ref.get("Name") for ref in key.findall(self._tag("PropertyRef"))]

    def extract_relationships(self, root: ET.Element) -> List[EntityRelationshipInfo]:
        """Build the flat, ordered edge list for every entity type.

        Per entity the order is: inheritance edge, then each navigation edge
        followed by its foreign-key edges, then referential-constraint edges
        declared directly under the entity.
        """
        relationships: List[EntityRelationshipInfo] = []
        entity_count = 0

        for entity_type in self.entity_types(root):
            entity_count += 1
            from_entity = entity_type.get("Name")

            base_type = entity_type.get("BaseType")
            if base_type is not None:
                relationships.append(
                    EntityRelationshipInfo(
                        from_entity_type=from_entity,
                        navigation_property=INHERITS_FROM,
                        to_entity_type=simple_entity_name(base_type),
                        kind=RelationshipKind.INHERITANCE,
                    )
                )

            keys = self.read_keys(entity_type)

            for navigation in entity_type.findall(self._tag("NavigationProperty")):
                target = simple_entity_name(navigation.get("Type"))
                relationships.append(
                    EntityRelationshipInfo(
                        from_entity_type=from_entity,
                        navigation_property=navigation.get("Name"),
                        to_entity_type=target,
                        keys=list(keys) if keys is not None else None,
                        kind=RelationshipKind.NAVIGATION,
                    )
                )

                # Foreign keys point at the navigation target, not a separately
                # declared referenced type.
                for constraint in navigation.findall(self._tag("ReferentialConstraint")):
                    relationships.append(
                        EntityRelationshipInfo(
                            from_entity_type=from_entity,
                            navigation_property=constraint.get("Property"),
                            to_entity_type=target,
                            kind=RelationshipKind.FOREIGN_KEY,
                        )
                    )

            for constraint in entity_type.findall(self._tag("ReferentialConstraint")):
                to_entity = simple_entity_name(constraint.get("ReferencedEntityType"))
                if not to_entity:
                    logger.debug(
                        "Skipping referential constraint on %s without a referenced type",
                        from_entity,
                    )
                    continue
                relationships.append(
                    EntityRelationshipInfo(
                        from_entity_type=from_entity,
                        navigation_property=None,
                        to_entity_type=to_entity,
                        kind=RelationshipKind.REFERENTIAL_CONSTRAINT,
                    )
                )

        logger.debug(
            "Extracted %d relationships from %d entity types",
            len(relationships),
            entity_count,
        )
        return relationships

    def describe_entities(
        self, root: ET.Element, name_filter: Optional[NameFilter] = None
    ) -> Iterator[EntityInfo]:
        """Yield an EntityInfo per entity type, in document order.

        When ``name_filter`` is non-empty only entities whose name matches one
        of its values, ignoring case, are described. Each entity is built only
        when requested.
        """
        wanted = {name.casefold() for name in name_filter or () if name is not None}

        for entity_type in self.entity_types(root):
            entity_name = entity_type.get("Name")

            if wanted and (entity_name is None or entity_name.casefold() not in wanted):
                continue

            yield EntityInfo(
                name=entity_name,
                properties=list(
                    self.get_entity_properties(entity_type.findall(self._tag("Property")))
                ),
                navigation_properties=list(
                    self.get_navigation_properties(
                        entity_type.findall(self._tag("NavigationProperty"))
                    )
                ),
                keys=self.read_keys(entity_type) or [],
            )

    def get_entity_properties(
        self, property_elements: Iterable[ET.Element]
    ) -> Iterator[PropertyInfo]:
        for prop in property_elements:
            annotations = [
                get_annotation(element)
                for element in prop.iter()
                if element is not prop and local_name(element.tag) == ANNOTATION_ELEMENT
            ]
            yield PropertyInfo(
                name=prop.get("Name"),
                type=prop.get("Type"),
                annotations=annotations,
            )

    def get_navigation_properties(
        self, navigation_elements: Iterable[ET.Element]
    ) -> Iterator[NavigationPropertyInfo]:
        """Read navigation properties and their referential constraints.

        ``nullable`` is True only for a case-insensitive ``"true"`` value and
        stays None when the attribute is absent, so a missing declaration is
        not reported as an explicit ``Nullable="false"``.
        """
        for navigation in navigation_elements:
            nullable_raw = navigation.get("Nullable")
            yield NavigationPropertyInfo(
                name=navigation.get("Name"),
                type=navigation.get("Type"),
                nullable=nullable_raw.lower() == "true"
                if nullable_raw is not None
                else None,
                partner=navigation.get("Partner"),
                referential_constraints=[
                    ReferentialConstraint(
                        property=constraint.get("Property"),
                        referenced_property=constraint.get("ReferencedProperty"),
                    )
                    for constraint in navigation.findall(self._tag("ReferentialConstraint"))
                ],
            )
