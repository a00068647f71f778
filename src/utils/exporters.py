"""
Export utilities for extracted relationships, entities and paths.
"""

from __future__ import annotations

import json
import re
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Sequence

from src.ingestion.plugins.base import MetadataGraph
from src.metadata.models import EntityInfo, EntityRelationshipInfo, RelationshipKind

from .constants import DEFAULT_JSON_INDENT
from .types import JSON, JSONList

# --- JSON Exports ---


def relationship_to_dict(relationship: EntityRelationshipInfo) -> JSON:
    return {
        "from_entity_type": relationship.from_entity_type,
        "navigation_property": relationship.navigation_property,
        "to_entity_type": relationship.to_entity_type,
        "keys": relationship.keys,
        "kind": relationship.kind.value,
    }


def entity_to_dict(entity: EntityInfo) -> JSON:
    """Convert an EntityInfo, including nested records, to plain data."""

    def _convert(value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {k: _convert(v) for k, v in value.items()}
        if isinstance(value, list):
            return [_convert(v) for v in value]
        return value

    return _convert(asdict(entity))


def paths_to_dicts(paths: Sequence[Sequence[EntityRelationshipInfo]]) -> JSONList:
    return [
        {
            "length": len(path),
            "edges": [relationship_to_dict(relationship) for relationship in path],
        }
        for path in paths
    ]


def graph_to_dict(graph: MetadataGraph) -> JSON:
    payload = asdict(graph)
    payload["entity_count"] = graph.entity_count
    return payload


def to_json(payload: Any, indent: int = DEFAULT_JSON_INDENT) -> str:
    return json.dumps(payload, indent=indent, ensure_ascii=False)


# --- Diagram Exports ---


def _mermaid_id(name: str) -> str:
    return re.sub(r"[^0-9A-Za-z_]", "_", name)


def render_mermaid(relationships: Sequence[EntityRelationshipInfo]) -> str:
    """
    Render relationships as a Mermaid ``graph TD`` diagram.

    Inheritance is drawn dotted; edges with a missing endpoint are omitted.
    """
    lines: List[str] = ["graph TD"]
    for relationship in relationships:
        source = relationship.from_entity_type
        target = relationship.to_entity_type
        if not source or not target:
            continue

        label = relationship.navigation_property or "ReferentialConstraint"
        arrow = "-.->" if relationship.kind is RelationshipKind.INHERITANCE else "-->"
        lines.append(f"    {_mermaid_id(source)} {arrow}|{label}| {_mermaid_id(target)}")
    return "\n".join(lines)


def summarize_relationships(relationships: Sequence[EntityRelationshipInfo]) -> Dict[str, int]:
    """Count relationships per derivation kind."""
    summary = {kind.value: 0 for kind in RelationshipKind}
    for relationship in relationships:
        summary[relationship.kind.value] += 1
    return summary
