"""
Taxonomy Module

Read-only semantic data sources for element classification:
- ARIA role taxonomy (roles, implicit element roles, host elements)
- Accessibility object taxonomy (AX object types and element mapping)

Usage:
    from taxonomy import load_role_taxonomy, load_axobject_taxonomy

    roles = load_role_taxonomy()
    axobjects = load_axobject_taxonomy()
"""

from .models import AttributeConstraint, AXObject, DomElement, ElementSchema, Role
from .aria import RoleTaxonomy, load_role_taxonomy
from .axobjects import AXObjectTaxonomy, load_axobject_taxonomy

__all__ = [
    'AttributeConstraint', 'AXObject', 'DomElement', 'ElementSchema', 'Role',
    'RoleTaxonomy', 'load_role_taxonomy',
    'AXObjectTaxonomy', 'load_axobject_taxonomy',
]
