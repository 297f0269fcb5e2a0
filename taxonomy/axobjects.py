"""
Accessibility Object Taxonomy

Loads platform accessibility object types and the element-to-object mapping.
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from config import config
from .models import AXObject, ElementSchema, AXOBJECT_TYPES
from .utils import load_yaml_file, parse_schema_mapping


@dataclass(frozen=True)
class AXObjectTaxonomy:
    """Read-only view of the accessibility object taxonomy."""

    axobjects: Mapping[str, AXObject]
    element_axobjects: Tuple[Tuple[ElementSchema, Tuple[str, ...]], ...]

    def axobject_names(self) -> Iterator[str]:
        return iter(self.axobjects)

    def get_axobject(self, name: str) -> AXObject:
        return self.axobjects[name]


def load_axobject_taxonomy(data_dir: Optional[Path] = None) -> AXObjectTaxonomy:
    """
    Load the accessibility object taxonomy from YAML data files.

    Args:
        data_dir: Directory holding the data files. Defaults to the
                  configured taxonomy data directory.

    Returns:
        AXObjectTaxonomy instance

    Raises:
        FileNotFoundError: If a data file is missing
        ValueError: If an object has an unknown type or the element mapping
                    names an object that is not defined
    """
    data_dir = Path(data_dir) if data_dir is not None else config.get_taxonomy_data_dir()

    raw_objects = load_yaml_file(data_dir / config.AXOBJECTS_FILE, 'axobjects')
    if not isinstance(raw_objects, dict):
        raise ValueError(f"{config.AXOBJECTS_FILE}: 'axobjects' must be a mapping")

    axobjects = {}
    for name, definition in raw_objects.items():
        object_type = (definition or {}).get('type')
        if object_type not in AXOBJECT_TYPES:
            raise ValueError(
                f"{config.AXOBJECTS_FILE}: AX object '{name}' has unknown type {object_type!r}"
            )
        axobjects[name] = AXObject(name=name, type=object_type)

    element_axobjects = parse_schema_mapping(
        load_yaml_file(data_dir / config.ELEMENT_AXOBJECTS_FILE, 'element_axobjects'),
        'axobjects',
        config.ELEMENT_AXOBJECTS_FILE,
    )

    for schema, object_names in element_axobjects:
        undefined = [name for name in object_names if name not in axobjects]
        if undefined:
            raise ValueError(
                f"{config.ELEMENT_AXOBJECTS_FILE}: {schema.describe()} maps to undefined AX object(s) {undefined}"
            )

    return AXObjectTaxonomy(axobjects=MappingProxyType(axobjects), element_axobjects=element_axobjects)
