"""Helpers for EDM type name strings."""

from __future__ import annotations

from typing import Optional

from ..utils.constants import COLLECTION_PREFIX, COLLECTION_SUFFIX


def simple_entity_name(raw_type: Optional[str]) -> Optional[str]:
    """Reduce a qualified, possibly collection-wrapped type to its simple name.

    ``Collection(Microsoft.Dynamics.DataEntities.FiscalCalendarEntity)``
    becomes ``FiscalCalendarEntity``. Cardinality is not preserved.
    """
    if not raw_type:
        return raw_type

    unwrapped = raw_type.replace(COLLECTION_PREFIX, "").replace(COLLECTION_SUFFIX, "")
    return unwrapped.split(".")[-1]


def is_collection_type(raw_type: Optional[str]) -> bool:
    return bool(raw_type) and raw_type.startswith(COLLECTION_PREFIX)
