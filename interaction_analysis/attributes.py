"""
Attribute matching for element schemas.

Elements arrive with their literal, statically known attributes in whatever
shape the caller's parser produces. They are normalized to a lowercase
name -> value mapping before being checked against a schema's constraints.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Union

from taxonomy.models import AttributeConstraint

AttributeList = Union[Mapping[str, Any], Iterable[Any], None]


def _attribute_name_and_value(attribute: Any):
    """Pull (name, value) out of a pair, a mapping or a node-like object."""
    if isinstance(attribute, (tuple, list)) and len(attribute) == 2:
        return attribute[0], attribute[1]
    if isinstance(attribute, Mapping):
        return attribute.get('name'), attribute.get('value')
    return getattr(attribute, 'name', None), getattr(attribute, 'value', None)


def normalize_attributes(attributes: AttributeList) -> Dict[str, Any]:
    """
    Normalize an element's attributes to a name -> value dict.

    Args:
        attributes: A dict of name -> value, or an iterable of ``(name, value)``
                    pairs, ``{'name': ..., 'value': ...}`` mappings or objects
                    with ``name``/``value`` attributes. Entries without a
                    string name (spread attributes, for instance) are skipped.

    Returns:
        Dict keyed by lowercase attribute name. When a name repeats, the
        first occurrence wins.
    """
    if attributes is None:
        return {}

    if isinstance(attributes, Mapping):
        items = attributes.items()
    else:
        items = (_attribute_name_and_value(attribute) for attribute in attributes)

    normalized = {}
    for name, value in items:
        if not isinstance(name, str):
            continue
        normalized.setdefault(name.lower(), value)
    return normalized


def _satisfies(constraint: AttributeConstraint, actual: Dict[str, Any]) -> bool:
    if constraint.must_be_absent:
        return constraint.name not in actual

    if constraint.name not in actual:
        return False

    value = actual[constraint.name]
    if constraint.must_be_set and (value is None or str(value) == ''):
        return False
    if constraint.value is not None and (value is None or str(value) != constraint.value):
        return False
    return True


def attributes_comparator(required: Iterable[AttributeConstraint], attributes: AttributeList) -> bool:
    """
    Check an element's attributes against a schema's attribute constraints.

    Every required constraint must hold; attributes the schema does not
    mention are ignored, so an empty requirement list matches anything.

    Args:
        required: The schema's attribute constraints
        attributes: The element's attributes (see normalize_attributes)

    Returns:
        True if all constraints are satisfied
    """
    actual = normalize_attributes(attributes)
    return all(_satisfies(constraint, actual) for constraint in required or ())
