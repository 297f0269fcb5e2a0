"""
Interaction Analysis Module

This module classifies HTML elements as non-interactive for accessibility
linting, using only the tag name and the literal attribute values:
- Role classification from the ARIA superclass chains
- Element schema partitioning for roles and accessibility objects
- Three-tier resolution (non-interactive roles, interactive roles, AX objects)
- Scanning of whole HTML documents

Usage:
    from interaction_analysis import is_non_interactive_element

    is_non_interactive_element("p", [])  # True
"""

from .attributes import attributes_comparator, normalize_attributes
from .role_classifier import RoleClassification, classify_roles
from .interactivity import (
    InteractivityContext,
    build_context,
    get_default_context,
    is_non_interactive_element,
)
from .html_scanner import scan_html, scan_html_file

__version__ = "1.0.0"
__all__ = [
    "attributes_comparator",
    "normalize_attributes",
    "RoleClassification",
    "classify_roles",
    "InteractivityContext",
    "build_context",
    "get_default_context",
    "is_non_interactive_element",
    "scan_html",
    "scan_html_file",
]
