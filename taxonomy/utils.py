"""
Shared helpers for the taxonomy loaders.
Reads the YAML data files and turns raw entries into element schemas.
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple
import yaml

from .models import AttributeConstraint, ElementSchema, CONSTRAINT_KEYWORDS


def load_yaml_file(yaml_path: Path, root_key: str) -> Any:
    """
    Load one taxonomy data file and return the value under its root key.

    Args:
        yaml_path: Path to the YAML file
        root_key: Top-level key holding the data

    Returns:
        The parsed value stored under ``root_key``

    Raises:
        FileNotFoundError: If the data file doesn't exist
        IOError: If the data file cannot be read
        ValueError: If the file is not valid YAML or lacks ``root_key``
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Taxonomy data file not found: {yaml_path}")

    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in taxonomy data file {yaml_path}: {e}")
    except IOError as e:
        raise IOError(f"Failed to read taxonomy data file {yaml_path}: {e}")

    if not isinstance(data, dict) or root_key not in data:
        raise ValueError(f"Taxonomy data file {yaml_path} has no '{root_key}' section")

    return data[root_key]


def parse_attribute_constraint(raw: Dict[str, Any], source: str) -> AttributeConstraint:
    """Build an AttributeConstraint from its YAML mapping."""
    if not isinstance(raw, dict) or not isinstance(raw.get('name'), str):
        raise ValueError(f"{source}: attribute entry needs a string 'name': {raw!r}")

    constraints = tuple(raw.get('constraints') or ())
    unknown = [c for c in constraints if c not in CONSTRAINT_KEYWORDS]
    if unknown:
        raise ValueError(f"{source}: unknown attribute constraint(s) {unknown} on '{raw['name']}'")

    value = raw.get('value')
    if value is not None:
        value = str(value)

    return AttributeConstraint(name=raw['name'].lower(), value=value, constraints=constraints)


def parse_element_schema(raw: Dict[str, Any], source: str) -> ElementSchema:
    """Build an ElementSchema from its YAML mapping."""
    if not isinstance(raw, dict) or not isinstance(raw.get('name'), str):
        raise ValueError(f"{source}: element schema needs a string 'name': {raw!r}")

    attributes = tuple(
        parse_attribute_constraint(attribute, source)
        for attribute in raw.get('attributes') or ()
    )
    return ElementSchema(name=raw['name'].lower(), attributes=attributes)


def parse_schema_mapping(entries: List[Dict[str, Any]], set_key: str,
                         source: str) -> Tuple[Tuple[ElementSchema, Tuple[str, ...]], ...]:
    """
    Parse an ordered list of ``{element, <set_key>}`` entries.

    Entries whose schemas are equal are merged into one pair; the merged
    name set keeps first-seen order and the pair keeps the position of the
    first entry.

    Args:
        entries: Raw list loaded from YAML
        set_key: Key holding the associated names (``roles`` or ``axobjects``)
        source: File name used in error messages

    Returns:
        Tuple of (ElementSchema, names) pairs in source order
    """
    if not isinstance(entries, list):
        raise ValueError(f"{source}: expected a list of element entries")

    merged: Dict[ElementSchema, List[str]] = {}
    for index, entry in enumerate(entries):
        location = f"{source} entry {index}"
        if not isinstance(entry, dict) or 'element' not in entry:
            raise ValueError(f"{location}: missing 'element'")

        schema = parse_element_schema(entry['element'], location)
        names = entry.get(set_key) or []
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError(f"{location}: '{set_key}' must be a list of names")

        bucket = merged.setdefault(schema, [])
        for name in names:
            if name not in bucket:
                bucket.append(name)

    return tuple((schema, tuple(names)) for schema, names in merged.items())
