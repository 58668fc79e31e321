"""
Feature initializers wired into every rendered page.

Each initializer takes no arguments, looks up its elements in the current
document and attaches a named behavior to them. Pages without the elements
are left untouched.
"""

from __future__ import annotations

from ..dom import Element, get_document


def wire(selector: str, behavior: str) -> list[Element]:
    """Bind behavior to every element matching selector in the current document."""
    elements = get_document().query_selector_all(selector)
    for el in elements:
        el.bind(behavior)
    return elements


__all__ = ["wire"]
