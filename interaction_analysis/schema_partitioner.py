"""
Element schema partitioning.

Sorts the element schemas of both taxonomies into the lists the resolver
scans: schemas whose roles are all non-interactive, schemas with at least one
interactive role, and schemas whose AX objects are all windows or structure.
"""

from typing import AbstractSet, FrozenSet, Iterable, Sequence, Tuple

from taxonomy.axobjects import AXObjectTaxonomy
from taxonomy.models import ElementSchema

NON_INTERACTIVE_AXOBJECT_TYPES = frozenset({"window", "structure"})

SchemaMapping = Iterable[Tuple[ElementSchema, Sequence[str]]]


def partition_non_interactive_schemas(mapping: SchemaMapping,
                                      non_interactive_names: AbstractSet[str]) -> Tuple[ElementSchema, ...]:
    """Schemas whose every associated name is non-interactive (empty sets included)."""
    return tuple(
        schema for schema, names in mapping
        if all(name in non_interactive_names for name in names)
    )


def partition_interactive_schemas(mapping: SchemaMapping,
                                  interactive_names: AbstractSet[str]) -> Tuple[ElementSchema, ...]:
    """Schemas with at least one interactive associated name."""
    return tuple(
        schema for schema, names in mapping
        if any(name in interactive_names for name in names)
    )


def non_interactive_axobjects(axobject_taxonomy: AXObjectTaxonomy) -> FrozenSet[str]:
    """Names of AX objects typed as a window or as structure."""
    return frozenset(
        name for name, axobject in axobject_taxonomy.axobjects.items()
        if axobject.type in NON_INTERACTIVE_AXOBJECT_TYPES
    )
