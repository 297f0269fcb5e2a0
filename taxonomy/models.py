"""
Taxonomy data model.

Immutable records for the ARIA role taxonomy and the accessibility object
taxonomy. Instances are built once by the loaders and shared read-only.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

AXOBJECT_TYPES = ("window", "structure", "widget")
CONSTRAINT_KEYWORDS = ("set", "undefined")


@dataclass(frozen=True)
class Role:
    """A named ARIA role with its abstractness and superclass chains."""

    name: str
    abstract: bool
    super_class: Tuple[Tuple[str, ...], ...] = ()

    @property
    def super_class_sets(self) -> Tuple[frozenset, ...]:
        """Each superclass chain as a set of category names."""
        return tuple(frozenset(chain) for chain in self.super_class)


@dataclass(frozen=True)
class DomElement:
    """An HTML host element. Reserved elements are never rendered."""

    name: str
    reserved: bool = False


@dataclass(frozen=True)
class AXObject:
    """A platform accessibility object type."""

    name: str
    type: str


@dataclass(frozen=True)
class AttributeConstraint:
    """
    One attribute precondition of an element schema.

    Attributes:
        name: Attribute name, lowercase.
        value: Required literal value, or None when any value is accepted.
        constraints: Keywords from CONSTRAINT_KEYWORDS. ``set`` requires a
            non-empty value, ``undefined`` requires the attribute be absent.
    """

    name: str
    value: Optional[str] = None
    constraints: Tuple[str, ...] = ()

    @property
    def must_be_absent(self) -> bool:
        return "undefined" in self.constraints

    @property
    def must_be_set(self) -> bool:
        return "set" in self.constraints


@dataclass(frozen=True)
class ElementSchema:
    """A tag name plus the attribute preconditions that select it."""

    name: str
    attributes: Tuple[AttributeConstraint, ...] = field(default_factory=tuple)

    def describe(self) -> str:
        """Render the schema like a CSS selector, e.g. ``input[type="text"]``."""
        parts = [self.name]
        for attribute in self.attributes:
            if attribute.must_be_absent:
                parts.append(f":not([{attribute.name}])")
            elif attribute.value is not None:
                parts.append(f'[{attribute.name}="{attribute.value}"]')
            else:
                parts.append(f"[{attribute.name}]")
        return "".join(parts)
