"""
ARIA Role Taxonomy

Loads the WAI-ARIA role definitions, the implicit element-to-role mapping and
the HTML host element vocabulary from the packaged YAML data.
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from config import config
from .models import DomElement, ElementSchema, Role
from .utils import load_yaml_file, parse_schema_mapping


@dataclass(frozen=True)
class RoleTaxonomy:
    """Read-only view of the role taxonomy."""

    roles: Mapping[str, Role]
    element_roles: Tuple[Tuple[ElementSchema, Tuple[str, ...]], ...]
    dom: Mapping[str, DomElement]

    def role_names(self) -> Iterator[str]:
        return iter(self.roles)

    def get_role(self, name: str) -> Role:
        return self.roles[name]

    def is_host_element(self, tag_name: str) -> bool:
        """Whether ``tag_name`` is a known HTML element."""
        return tag_name in self.dom

    def is_reserved_element(self, tag_name: str) -> bool:
        element = self.dom.get(tag_name)
        return element is not None and element.reserved


def _parse_roles(raw_roles, source: str) -> Mapping[str, Role]:
    if not isinstance(raw_roles, dict):
        raise ValueError(f"{source}: 'roles' must be a mapping of role name to definition")

    roles = {}
    for name, definition in raw_roles.items():
        if not isinstance(definition, dict) or not isinstance(definition.get('abstract'), bool):
            raise ValueError(f"{source}: role '{name}' needs a boolean 'abstract'")

        chains = definition.get('superClass') or []
        if not isinstance(chains, list) or not all(
            isinstance(chain, list) and all(isinstance(c, str) for c in chain)
            for chain in chains
        ):
            raise ValueError(f"{source}: role '{name}' superClass must be a list of lists of strings")

        roles[name] = Role(
            name=name,
            abstract=definition['abstract'],
            super_class=tuple(tuple(chain) for chain in chains),
        )
    return MappingProxyType(roles)


def _parse_dom(raw_dom, source: str) -> Mapping[str, DomElement]:
    if not isinstance(raw_dom, dict):
        raise ValueError(f"{source}: 'elements' must be a mapping of tag name to definition")

    return MappingProxyType({
        name: DomElement(name=name, reserved=bool((definition or {}).get('reserved', False)))
        for name, definition in raw_dom.items()
    })


def load_role_taxonomy(data_dir: Optional[Path] = None) -> RoleTaxonomy:
    """
    Load the role taxonomy from YAML data files.

    Args:
        data_dir: Directory holding the data files. Defaults to the
                  configured taxonomy data directory.

    Returns:
        RoleTaxonomy instance

    Raises:
        FileNotFoundError: If a data file is missing
        ValueError: If a data file is malformed or the element mapping names
                    a role that is not defined
    """
    data_dir = Path(data_dir) if data_dir is not None else config.get_taxonomy_data_dir()

    roles = _parse_roles(
        load_yaml_file(data_dir / config.ROLES_FILE, 'roles'), config.ROLES_FILE
    )
    dom = _parse_dom(
        load_yaml_file(data_dir / config.DOM_FILE, 'elements'), config.DOM_FILE
    )
    element_roles = parse_schema_mapping(
        load_yaml_file(data_dir / config.ELEMENT_ROLES_FILE, 'element_roles'),
        'roles',
        config.ELEMENT_ROLES_FILE,
    )

    for schema, role_names in element_roles:
        undefined = [name for name in role_names if name not in roles]
        if undefined:
            raise ValueError(
                f"{config.ELEMENT_ROLES_FILE}: {schema.describe()} maps to undefined role(s) {undefined}"
            )

    return RoleTaxonomy(roles=roles, element_roles=element_roles, dom=dom)
