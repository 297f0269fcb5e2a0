import shutil
from types import MappingProxyType

import pytest

from config import config
from interaction_analysis import build_context
from taxonomy import (
    AttributeConstraint,
    AXObject,
    AXObjectTaxonomy,
    DomElement,
    ElementSchema,
    Role,
    RoleTaxonomy,
)


@pytest.fixture(scope="session")
def default_context():
    """Context derived from the packaged taxonomy data."""
    return build_context()


@pytest.fixture
def data_dir(tmp_path):
    """A writable copy of the packaged taxonomy data directory."""
    target = tmp_path / "data"
    shutil.copytree(config.DEFAULT_TAXONOMY_DATA_DIR, target)
    return target


def make_role_taxonomy(roles, element_roles=(), dom=("div", "span", "button", "input", "header")):
    return RoleTaxonomy(
        roles=MappingProxyType({
            name: Role(name=name, abstract=abstract, super_class=tuple(tuple(c) for c in chains))
            for name, (abstract, chains) in roles.items()
        }),
        element_roles=tuple(element_roles),
        dom=MappingProxyType({name: DomElement(name=name) for name in dom}),
    )


def make_axobject_taxonomy(axobjects, element_axobjects=()):
    return AXObjectTaxonomy(
        axobjects=MappingProxyType({
            name: AXObject(name=name, type=object_type)
            for name, object_type in axobjects.items()
        }),
        element_axobjects=tuple(element_axobjects),
    )


def schema(name, **attributes):
    """ElementSchema shortcut: schema("input", type="button")."""
    return ElementSchema(
        name=name,
        attributes=tuple(AttributeConstraint(name=key, value=value) for key, value in attributes.items()),
    )


SMALL_ROLES = {
    "widget": (True, [["roletype"]]),
    "structure": (True, [["roletype"]]),
    "button": (False, [["roletype", "widget", "command"]]),
    "progressbar": (False, [["roletype", "widget"], ["roletype", "structure", "range"]]),
    "toolbar": (False, [["roletype", "structure", "section", "group"]]),
    "generic": (False, [["roletype", "structure"]]),
    "paragraph": (False, [["roletype", "structure", "section"]]),
    "row": (False, [["roletype", "structure", "section", "group"], ["roletype", "widget"]]),
}


@pytest.fixture
def small_role_taxonomy():
    return make_role_taxonomy(SMALL_ROLES)
