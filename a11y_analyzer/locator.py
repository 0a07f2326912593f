"""
Element Locator

Turns an Element into a short, human-readable selector for reports.
Best effort only: the result is not guaranteed to be unique and is
not meant to be fed back into a query engine.
"""

import re

from .tree import Element

_WHITESPACE = re.compile(r"\s+")


def locate(element: Element) -> str:
    """
    Build a selector string for an element.

    Priority (first match wins):
    1. Non-empty id -> "#id"
    2. Non-empty class -> ".a.b" (whitespace runs become dots)
    3. Bare tag name

    Only the element's own attributes are consulted.

    Example:
        locate(Element("div", {"id": "a", "class": "b c"}, 0))  # "#a"
        locate(Element("div", {"class": "b  c"}, 0))            # ".b.c"
    """
    element_id = (element.attribute("id") or "").strip()
    if element_id:
        return f"#{element_id}"

    class_name = (element.attribute("class") or "").strip()
    if class_name:
        return "." + _WHITESPACE.sub(".", class_name)

    return element.tag
