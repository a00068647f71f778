"""Records produced by the EDM metadata extractor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .type_names import is_collection_type, simple_entity_name


class RelationshipKind(Enum):
    """Derivation rule that produced a relationship edge."""

    INHERITANCE = "inheritance"
    NAVIGATION = "navigation"
    FOREIGN_KEY = "foreign_key"
    REFERENTIAL_CONSTRAINT = "referential_constraint"


class AnnotationRegularType(Enum):
    """Value kind declared by an annotation's type attribute."""

    STRING = "String"
    BOOL = "Bool"
    ENUM = "Enum"


class AXType(Enum):
    """Primitive type tokens recognized in EnumMember annotation content."""

    STRING = "String"
    REAL = "Real"
    INT32 = "Int32"
    INT64 = "Int64"
    ENUM = "Enum"
    UTC_DATE_TIME = "UtcDateTime"
    GUID = "Guid"
    DATE = "Date"
    TIME = "Time"
    CONTAINER = "Container"


@dataclass
class EntityRelationshipInfo:
    """Directed edge between two entity type names.

    ``navigation_property`` is None for referential-constraint-only edges.
    ``keys`` holds the primary key names of the source entity and is only
    attached to navigation edges.
    """

    from_entity_type: Optional[str]
    navigation_property: Optional[str]
    to_entity_type: Optional[str]
    keys: Optional[List[Optional[str]]] = None
    kind: RelationshipKind = RelationshipKind.NAVIGATION

    def other_end(self, entity_name: str) -> Optional[str]:
        """Return the endpoint opposite ``entity_name``."""
        if self.from_entity_type == entity_name:
            return self.to_entity_type
        return self.from_entity_type


@dataclass(frozen=True)
class AnnotationType:
    regular: AnnotationRegularType
    ax_type: Optional[AXType] = None


@dataclass
class AnnotationInfo:
    term: Optional[str]
    annotation_type: AnnotationType


@dataclass
class PropertyInfo:
    name: Optional[str]
    type: Optional[str]
    annotations: List[AnnotationInfo] = field(default_factory=list)


@dataclass
class ReferentialConstraint:
    """Maps a local property to a key property on the related entity."""

    property: Optional[str]
    referenced_property: Optional[str]


@dataclass
class NavigationPropertyInfo:
    """A named link from one entity type to another.

    Example::

        <NavigationProperty Name="ReleasedProductMaster"
                            Type="Microsoft.Dynamics.DataEntities.ReleasedProductMasterV2"
                            Nullable="false" Partner="ReleasedProductVariants"/>

    Navigating ``ReleasedProductMaster`` leads to a ``ReleasedProductMasterV2``.
    ``Partner`` names the reverse navigation property declared on that target,
    which points back at the entity owning this definition. The pairing is
    recorded as declared and never verified.
    """

    name: Optional[str]
    type: Optional[str]
    nullable: Optional[bool] = None
    partner: Optional[str] = None
    referential_constraints: List[ReferentialConstraint] = field(default_factory=list)

    @property
    def is_collection(self) -> bool:
        return is_collection_type(self.type)

    def target_entity_name(self) -> Optional[str]:
        return simple_entity_name(self.type)

    def __str__(self) -> str:
        return self.name or ""


@dataclass
class EntityInfo:
    name: Optional[str]
    properties: List[PropertyInfo] = field(default_factory=list)
    navigation_properties: List[NavigationPropertyInfo] = field(default_factory=list)
    keys: List[Optional[str]] = field(default_factory=list)
