"""Classification of property annotations into their declared value types."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Dict, Optional

from ..utils.exceptions import (
    InvalidAnnotationElementError,
    MissingAnnotationAttributeError,
    UnknownAnnotationTypeError,
)
from .models import AnnotationInfo, AnnotationRegularType, AnnotationType, AXType

ANNOTATION_ELEMENT = "Annotation"
ENUM_MEMBER_ELEMENT = "EnumMember"
TERM_ATTRIBUTE = "Term"

REGULAR_TYPES: Dict[str, AnnotationRegularType] = {
    "String": AnnotationRegularType.STRING,
    "Bool": AnnotationRegularType.BOOL,
    "EnumMember": AnnotationRegularType.ENUM,
}

AX_TYPES: Dict[str, AXType] = {ax_type.value: ax_type for ax_type in AXType}


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified names."""
    return tag.rsplit("}", 1)[-1]


def classify_annotation(element: ET.Element) -> AnnotationType:
    """Work out the value type an ``Annotation`` element declares.

    The type is read from the first attribute other than ``Term``
    (``String``, ``Bool`` or ``EnumMember``). Without such an attribute the
    first ``EnumMember`` child is used instead: its text is a path such as
    ``Namespace.AXType/Int32`` whose last segment names the primitive type.
    Whitespace around that text is ignored, so an indented ``EnumMember``
    classifies like a compact one and a blank one counts as absent.

    Raises:
        InvalidAnnotationElementError: If the element is not an Annotation.
        UnknownAnnotationTypeError: If the attribute name or enum token is not
            part of the known vocabulary.
        MissingAnnotationAttributeError: If neither source declares a type.
    """
    if local_name(element.tag) != ANNOTATION_ELEMENT:
        raise InvalidAnnotationElementError(local_name(element.tag))

    attribute_name = _type_attribute_name(element)
    if attribute_name:
        regular = REGULAR_TYPES.get(attribute_name)
        if regular is None:
            raise UnknownAnnotationTypeError(attribute_name)
        return AnnotationType(regular)

    enum_member = next(
        (child for child in element if local_name(child.tag) == ENUM_MEMBER_ELEMENT),
        None,
    )
    enum_member_value = (
        "".join(enum_member.itertext()).strip() if enum_member is not None else ""
    )
    if enum_member_value:
        token = enum_member_value.split("/")[-1]
        ax_type = AX_TYPES.get(token)
        if ax_type is None:
            raise UnknownAnnotationTypeError(token)
        return AnnotationType(AnnotationRegularType.ENUM, ax_type)

    raise MissingAnnotationAttributeError(attribute_name)


def get_annotation(element: ET.Element) -> AnnotationInfo:
    annotation_type = classify_annotation(element)
    return AnnotationInfo(
        term=element.get(TERM_ATTRIBUTE),
        annotation_type=annotation_type,
    )


def _type_attribute_name(element: ET.Element) -> Optional[str]:
    for name in element.attrib:
        attribute = local_name(name)
        if attribute.lower() != TERM_ATTRIBUTE.lower():
            return attribute
    return None
