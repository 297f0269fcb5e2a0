"""
HTML Scanner Module

Runs the interactivity resolver over every element of an HTML document.
Markup is parsed with BeautifulSoup; only the literal attribute values in the
source are used, nothing is rendered or executed.
"""

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from bs4 import BeautifulSoup

from config import config
from .interactivity import InteractivityContext, get_default_context, is_non_interactive_element


@dataclass
class ElementInfo:
    """One element as found in the markup."""

    tag_name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    line: Optional[int] = None


def extract_elements(html_content: str, skip_tags: FrozenSet[str] = frozenset()) -> List[ElementInfo]:
    """
    Parse HTML and list its elements in document order.

    Args:
        html_content: Raw HTML content
        skip_tags: Tag names to leave out (non-rendered elements)

    Returns:
        List of ElementInfo
    """
    if not html_content or not html_content.strip():
        return []

    # Keep class/rel/etc. as the literal string instead of a token list
    soup = BeautifulSoup(html_content, config.HTML_PARSER, multi_valued_attributes=None)

    elements = []
    for tag in soup.find_all(True):
        tag_name = tag.name.lower()
        if tag_name in skip_tags:
            continue
        elements.append(ElementInfo(
            tag_name=tag_name,
            attributes={name.lower(): value for name, value in tag.attrs.items()},
            line=getattr(tag, 'sourceline', None),
        ))
    return elements


def scan_html(html_content: str, context: Optional[InteractivityContext] = None) -> Dict[str, Any]:
    """
    Classify every rendered element of an HTML document.

    Args:
        html_content: Raw HTML content
        context: Derived taxonomy data. The default context is used when omitted.

    Returns:
        Dictionary with per-element results and summary counts
    """
    context = context or get_default_context()

    results = []
    for element in extract_elements(html_content, context.reserved_elements):
        results.append({
            "tag_name": element.tag_name,
            "attributes": element.attributes,
            "line": element.line,
            "non_interactive": is_non_interactive_element(
                element.tag_name, element.attributes, context
            ),
        })

    non_interactive_count = sum(1 for result in results if result["non_interactive"])

    if config.is_verbose():
        print(f"    > Scanned {len(results)} elements, "
              f"{non_interactive_count} non-interactive", file=sys.stderr)

    return {
        "elements": results,
        "summary": {
            "total": len(results),
            "non_interactive": non_interactive_count,
            "other": len(results) - non_interactive_count,
        },
    }


def load_html_content(html_path: Path) -> str:
    """
    Load HTML content from file with error handling.

    Raises:
        FileNotFoundError: If HTML file doesn't exist
        IOError: If HTML cannot be read
    """
    if not html_path.exists():
        raise FileNotFoundError(f"HTML file not found: {html_path}")

    try:
        with open(html_path, 'r', encoding='utf-8') as f:
            return f.read()
    except (IOError, UnicodeDecodeError) as e:
        raise IOError(f"Failed to read HTML file {html_path}: {e}")


def scan_html_file(html_path: Path, context: Optional[InteractivityContext] = None) -> Dict[str, Any]:
    """
    Scan an HTML file.

    Args:
        html_path: Path to the HTML file
        context: Derived taxonomy data. The default context is used when omitted.

    Returns:
        Scan report with ``success`` and ``file`` keys, or an error response
        (``success`` False, ``error``) when the file cannot be read
    """
    html_path = Path(html_path)
    try:
        html_content = load_html_content(html_path)
    except (FileNotFoundError, IOError) as e:
        print(f"    > Error reading HTML file {html_path}: {str(e)}", file=sys.stderr)
        return {"success": False, "error": str(e), "file": str(html_path)}

    report = scan_html(html_content, context)
    return {"success": True, "file": str(html_path), **report}


def print_scan_summary(report: Dict[str, Any]) -> None:
    """Print a formatted summary of a scan report."""
    print(f"\n📄 File: {report['file']}")
    summary = report["summary"]
    print(f"🔍 Elements scanned: {summary['total']}")
    print(f"🧱 Non-interactive: {summary['non_interactive']}")
    print(f"🖱️  Interactive or undetermined: {summary['other']}")

    for element in report["elements"]:
        marker = "non-interactive" if element["non_interactive"] else "-"
        line = element["line"] if element["line"] is not None else "?"
        print(f"  • line {line}: <{element['tag_name']}> {marker}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line interface.
    Usage: python -m interaction_analysis <html_file> [--json]
    """
    args = list(sys.argv[1:] if argv is None else argv)
    as_json = "--json" in args
    args = [arg for arg in args if arg != "--json"]

    if len(args) != 1:
        print("Usage: python -m interaction_analysis <html_file> [--json]")
        print("Example: python -m interaction_analysis page.html --json")
        return 1

    report = scan_html_file(Path(args[0]))
    if not report["success"]:
        if as_json:
            print(json.dumps(report))
        else:
            print(f"❌ {report['error']}")
        return 1

    if as_json:
        print(json.dumps(report, indent=2, ensure_ascii=False))
    else:
        print_scan_summary(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
