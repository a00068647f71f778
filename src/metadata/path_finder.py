"""Bounded enumeration of simple paths through the relationship graph."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Set

from .models import EntityRelationshipInfo

logger = logging.getLogger(__name__)

EntityPath = List[EntityRelationshipInfo]


def find_paths(
    start_entity: str,
    end_entity: str,
    max_depth: int,
    relationships: Sequence[EntityRelationshipInfo],
) -> List[EntityPath]:
    """
    Enumerate every simple path of at most ``max_depth`` edges between two entities.

    Edges are followed in both directions. A path never visits the same
    entity twice, but an entity left behind by one branch may be visited
    again by a sibling branch. Paths are returned in edge-list order with no
    shortest-path preference.

    Args:
        start_entity: Simple name of the entity to start from
        end_entity: Simple name of the entity to reach
        max_depth: Maximum number of edges per path; negative yields no paths
        relationships: Edge list, as produced by the extractor

    Returns:
        List of paths, each an ordered list of edges. ``start == end`` yields
        the empty path first.
    """
    adjacency = _index_by_entity(relationships)
    result: List[EntityPath] = []
    _dfs(start_entity, end_entity, max_depth, [], set(), result, adjacency)

    logger.debug(
        "Found %d paths from %s to %s within %d hops",
        len(result),
        start_entity,
        end_entity,
        max_depth,
    )
    return result


def _index_by_entity(
    relationships: Sequence[EntityRelationshipInfo],
) -> Dict[str, List[EntityRelationshipInfo]]:
    """Group edges by each endpoint, keeping edge-list order per entity."""
    adjacency: Dict[str, List[EntityRelationshipInfo]] = {}
    for relationship in relationships:
        endpoints = {relationship.from_entity_type, relationship.to_entity_type}
        for entity in endpoints:
            if entity is not None:
                adjacency.setdefault(entity, []).append(relationship)
    return adjacency


def _dfs(
    current_entity: str,
    end_entity: str,
    depth: int,
    current_path: EntityPath,
    visited_entities: Set[str],
    result: List[EntityPath],
    adjacency: Dict[str, List[EntityRelationshipInfo]],
) -> None:
    if depth < 0:
        return

    visited_entities.add(current_entity)

    if current_entity == end_entity:
        result.append(list(current_path))

    if depth > 0:
        for relationship in adjacency.get(current_entity, []):
            next_entity = relationship.other_end(current_entity)

            # Dangling endpoints from malformed navigation properties.
            if next_entity is None or next_entity in visited_entities:
                continue

            current_path.append(relationship)
            _dfs(
                next_entity,
                end_entity,
                depth - 1,
                current_path,
                visited_entities,
                result,
                adjacency,
            )
            current_path.pop()

    visited_entities.discard(current_entity)
