"""
Role Classifier

Splits the concrete ARIA roles into non-interactive and interactive sets by
looking for the "widget" category in their superclass chains.
"""

from dataclasses import dataclass
from typing import FrozenSet

from taxonomy.aria import RoleTaxonomy

WIDGET_CATEGORY = "widget"

# Meant to have no semantic value, so it is neither interactive nor not.
# @see https://www.w3.org/TR/wai-aria-1.2/#generic
SEMANTICALLY_EMPTY_ROLES = frozenset({"generic"})

# Descends from widget, but its value is always read-only in practice.
FORCED_NON_INTERACTIVE_ROLES = frozenset({"progressbar"})

# Does not descend from widget, but supports aria-activedescendant.
FORCED_INTERACTIVE_ROLES = frozenset({"toolbar"})


@dataclass(frozen=True)
class RoleClassification:
    non_interactive_roles: FrozenSet[str]
    interactive_roles: FrozenSet[str]


def classify_roles(role_taxonomy: RoleTaxonomy) -> RoleClassification:
    """
    Partition the concrete roles of a taxonomy.

    A role descends from widget when any of its superclass chains contains
    the "widget" category. The toolbar and progressbar overrides are applied
    after the ancestry split, and "generic" is left out of both sets.

    Args:
        role_taxonomy: Loaded role taxonomy

    Returns:
        RoleClassification with the two role name sets
    """
    chain_sets = {
        name: role.super_class_sets
        for name, role in role_taxonomy.roles.items()
        if not role.abstract
    }
    widget_roles = {
        name for name, chains in chain_sets.items()
        if any(WIDGET_CATEGORY in chain for chain in chains)
    }

    non_interactive = {
        name for name in chain_sets
        if name not in widget_roles
        and name not in FORCED_INTERACTIVE_ROLES
        and name not in SEMANTICALLY_EMPTY_ROLES
    }
    non_interactive |= FORCED_NON_INTERACTIVE_ROLES

    interactive = {
        name for name in widget_roles
        if name not in FORCED_NON_INTERACTIVE_ROLES
        and name not in SEMANTICALLY_EMPTY_ROLES
    }
    interactive |= FORCED_INTERACTIVE_ROLES

    return RoleClassification(
        non_interactive_roles=frozenset(non_interactive),
        interactive_roles=frozenset(interactive),
    )
