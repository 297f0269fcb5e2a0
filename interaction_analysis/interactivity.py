"""
Interactivity Resolver

Decides whether an HTML element, known only by its tag name and literal
attributes, is non-interactive. Evidence is taken from the element's implicit
ARIA roles first and from the accessibility objects it maps to second.

Usage:
    from interaction_analysis import build_context, is_non_interactive_element

    context = build_context()
    is_non_interactive_element("div", [], context)                  # True
    is_non_interactive_element("input", {"type": "button"}, context) # False
"""

import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, FrozenSet, Optional, Tuple

from config import config
from taxonomy.aria import RoleTaxonomy, load_role_taxonomy
from taxonomy.axobjects import AXObjectTaxonomy, load_axobject_taxonomy
from taxonomy.models import ElementSchema
from .attributes import AttributeList, attributes_comparator, normalize_attributes
from .role_classifier import classify_roles
from .schema_partitioner import (
    non_interactive_axobjects,
    partition_interactive_schemas,
    partition_non_interactive_schemas,
)


@dataclass(frozen=True)
class InteractivityContext:
    """Everything the resolver needs, derived once from the two taxonomies."""

    host_elements: FrozenSet[str]
    reserved_elements: FrozenSet[str]
    non_interactive_roles: FrozenSet[str]
    interactive_roles: FrozenSet[str]
    non_interactive_axobjects: FrozenSet[str]
    non_interactive_element_role_schemas: Tuple[ElementSchema, ...]
    interactive_element_role_schemas: Tuple[ElementSchema, ...]
    non_interactive_element_axobject_schemas: Tuple[ElementSchema, ...]


def build_context(role_taxonomy: Optional[RoleTaxonomy] = None,
                  axobject_taxonomy: Optional[AXObjectTaxonomy] = None) -> InteractivityContext:
    """
    Derive the classification sets and schema lists.

    Args:
        role_taxonomy: Role taxonomy to use. Loaded from the configured data
                       directory when omitted.
        axobject_taxonomy: AX object taxonomy to use. Loaded from the
                           configured data directory when omitted.

    Returns:
        Immutable InteractivityContext
    """
    role_taxonomy = role_taxonomy or load_role_taxonomy()
    axobject_taxonomy = axobject_taxonomy or load_axobject_taxonomy()

    classification = classify_roles(role_taxonomy)
    axobject_names = non_interactive_axobjects(axobject_taxonomy)

    context = InteractivityContext(
        host_elements=frozenset(role_taxonomy.dom),
        reserved_elements=frozenset(
            name for name, element in role_taxonomy.dom.items() if element.reserved
        ),
        non_interactive_roles=classification.non_interactive_roles,
        interactive_roles=classification.interactive_roles,
        non_interactive_axobjects=axobject_names,
        non_interactive_element_role_schemas=partition_non_interactive_schemas(
            role_taxonomy.element_roles, classification.non_interactive_roles
        ),
        interactive_element_role_schemas=partition_interactive_schemas(
            role_taxonomy.element_roles, classification.interactive_roles
        ),
        non_interactive_element_axobject_schemas=partition_non_interactive_schemas(
            axobject_taxonomy.element_axobjects, axobject_names
        ),
    )

    if config.is_verbose():
        print(f"  > Interactivity context built: "
              f"{len(context.non_interactive_roles)} non-interactive roles, "
              f"{len(context.interactive_roles)} interactive roles, "
              f"{len(context.non_interactive_axobjects)} non-interactive AX objects", file=sys.stderr)
        print(f"    > Schemas: {len(context.non_interactive_element_role_schemas)} non-interactive (roles), "
              f"{len(context.interactive_element_role_schemas)} interactive (roles), "
              f"{len(context.non_interactive_element_axobject_schemas)} non-interactive (AX objects)",
              file=sys.stderr)

    return context


@lru_cache(maxsize=1)
def get_default_context() -> InteractivityContext:
    """The context built from the configured taxonomy data, built on first use."""
    return build_context()


def _schema_matcher(tag_name: str, attributes: dict) -> Callable[[ElementSchema], bool]:
    def matches(element_schema: ElementSchema) -> bool:
        return (
            tag_name == element_schema.name
            and attributes_comparator(element_schema.attributes, attributes)
        )
    return matches


def is_non_interactive_element(tag_name: str, attributes: AttributeList = None,
                               context: Optional[InteractivityContext] = None) -> bool:
    """
    Returns True when the element has an inherently non-interactive role, or
    when it has no role evidence either way and only maps to window or
    structure accessibility objects. Returns False whenever non-interactivity
    cannot be shown.

    Args:
        tag_name: Lowercase HTML tag name
        attributes: The element's literal attributes (see normalize_attributes)
        context: Derived taxonomy data. The default context is used when omitted.

    Raises:
        TypeError: If tag_name is not a string
    """
    if not isinstance(tag_name, str):
        raise TypeError(f"tag_name must be a string, got {type(tag_name).__name__}")

    context = context or get_default_context()

    # Components and custom elements: the rendered DOM element is unknown.
    if tag_name not in context.host_elements:
        return False

    # <header> only has banner semantics as a direct child of <body>, which
    # cannot be told from the element alone.
    if tag_name == "header":
        return False

    matches = _schema_matcher(tag_name, normalize_attributes(attributes))

    if any(matches(schema) for schema in context.non_interactive_element_role_schemas):
        return True

    if any(matches(schema) for schema in context.interactive_element_role_schemas):
        return False

    if any(matches(schema) for schema in context.non_interactive_element_axobject_schemas):
        return True

    return False
