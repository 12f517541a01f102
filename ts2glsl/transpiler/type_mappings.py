"""Type annotation resolution and qualifier unwrapping."""

from typing import Optional

from ts2glsl.ast.nodes import Identifier, NodeType, TSTypeReference, TypeNode
from ts2glsl.transpiler.constants import GLSLType
from ts2glsl.transpiler.errors import (
    MissingTypeError,
    UnknownTypeError,
    UnsupportedAnnotationError,
)

# Catalog lookup by host-language spelling (case-sensitive)
TYPE_CATALOG: dict[str, GLSLType] = {member.name: member for member in GLSLType}


def resolve_type(
    annotation: Optional[TypeNode],
    strict: bool = False,
    what: str = "return type",
) -> GLSLType:
    """Map a type annotation node to exactly one catalog type.

    Unknown or qualified type reference names fall back to ``void`` unless
    ``strict`` is set.

    Args:
        annotation: Type annotation node, or None when the source has none
        strict: Raise for type reference names missing from the catalog
        what: Description of the annotation used in the missing-type message

    Returns:
        The matching catalog type

    Raises:
        MissingTypeError: If the annotation is absent
        UnknownTypeError: If strict and the referenced name is not in the catalog
        UnsupportedAnnotationError: If the annotation kind has no mapping
    """
    if annotation is None:
        raise MissingTypeError(what)

    if annotation.type == NodeType.TS_TYPE_REFERENCE:
        assert isinstance(annotation, TSTypeReference)
        type_name = annotation.type_name
        if isinstance(type_name, Identifier) and type_name.name in TYPE_CATALOG:
            return TYPE_CATALOG[type_name.name]
        if strict:
            raise UnknownTypeError(_reference_name(annotation), annotation)
        return GLSLType.void

    if annotation.type == NodeType.TS_BOOLEAN_KEYWORD:
        return GLSLType.bool

    if annotation.type == NodeType.TS_VOID_KEYWORD:
        return GLSLType.void

    raise UnsupportedAnnotationError(annotation.type, annotation)


def get_type_arguments(annotation: Optional[TypeNode]) -> list[str]:
    """Extract the generic argument names of a type reference.

    Only arguments that are themselves plain type references are kept; their
    names pass through verbatim, without catalog resolution.

    Args:
        annotation: Type annotation node, possibly None

    Returns:
        Argument names in source order, empty for non-generic annotations
    """
    if not isinstance(annotation, TSTypeReference) or not annotation.type_arguments:
        return []

    names: list[str] = []
    for argument in annotation.type_arguments:
        if isinstance(argument, TSTypeReference) and isinstance(
            argument.type_name, Identifier
        ):
            names.append(argument.type_name.name)
    return names


def _reference_name(annotation: TSTypeReference) -> str:
    """Render a possibly qualified type reference name as dotted text."""
    parts: list[str] = []
    name = annotation.type_name
    while not isinstance(name, Identifier):
        parts.append(name.right.name)
        name = name.left
    parts.append(name.name)
    return ".".join(reversed(parts))
