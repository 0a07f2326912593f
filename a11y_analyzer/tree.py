"""
Markup Tree

Immutable, queryable view over parsed HTML.

Parsing is delegated to BeautifulSoup's permissive html.parser, so
unclosed tags, stray end tags and missing doctypes all parse. The
parsed soup is flattened into read-only Element views in document
order and then dropped; rules never see or mutate BeautifulSoup
objects.

Example:
    tree = parse("<main><img src='a.png'></main>")
    for img in tree.select_by_tag("img"):
        print(img.attribute("alt"))  # None
"""

import logging
import warnings
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Optional, Union

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, Tag

from .errors import MalformedMarkupError

logger = logging.getLogger(__name__)


class Element:
    """
    Read-only view of one element in a MarkupTree.

    Attributes:
        tag: Lowercase tag name
        attributes: Read-only mapping of lowercase attribute names to values
        position: Zero-based ordinal in document order
        parent: Enclosing element, or None at the top level
    """

    __slots__ = ("tag", "attributes", "position", "parent")

    def __init__(
        self,
        tag: str,
        attributes: Mapping[str, str],
        position: int,
        parent: Optional["Element"] = None
    ):
        object.__setattr__(self, "tag", tag.lower())
        object.__setattr__(
            self, "attributes",
            MappingProxyType({k.lower(): v for k, v in attributes.items()})
        )
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "parent", parent)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"<Element {self.tag} #{self.position}>"

    def attribute(self, name: str) -> Optional[str]:
        """Get an attribute value (case-insensitive name), None if absent"""
        return self.attributes.get(name.lower())

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self.attributes

    def ancestors(self) -> Iterator["Element"]:
        """Yield enclosing elements, nearest first"""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


class MarkupTree:
    """
    Build-once, read-many collection of Elements in document order.

    Example:
        tree = parse(html)
        headings = tree.select_by_tag("h1", "h2", "h3")
        labelled = tree.select(lambda el: el.has_attribute("aria-label"))
    """

    def __init__(self, elements: tuple[Element, ...]):
        self._elements = tuple(elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    @property
    def elements(self) -> tuple[Element, ...]:
        return self._elements

    def select(self, predicate: Callable[[Element], bool]) -> tuple[Element, ...]:
        """Elements matching predicate, in document order"""
        return tuple(el for el in self._elements if predicate(el))

    def select_by_tag(self, *names: str) -> tuple[Element, ...]:
        """Elements whose tag is one of names, in document order"""
        wanted = {name.lower() for name in names}
        return self.select(lambda el: el.tag in wanted)


def _attribute_value(value) -> str:
    # Multi-valued attributes (class, rel, ...) come back as lists
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return "" if value is None else str(value)


def parse(markup: Union[str, bytes]) -> MarkupTree:
    """
    Parse HTML into a MarkupTree.

    Args:
        markup: HTML text, or raw bytes (encoding is sniffed)

    Returns:
        MarkupTree with every element in document order

    Raises:
        MalformedMarkupError: If the input cannot be tokenized at all
    """
    if not isinstance(markup, (str, bytes)):
        raise MalformedMarkupError(
            f"Expected markup text, got {type(markup).__name__}"
        )

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(markup, "html.parser")
    except Exception as e:
        raise MalformedMarkupError(f"Markup could not be tokenized: {e}") from e

    elements: list[Element] = []
    views: dict[int, Element] = {}

    # find_all walks descendants iteratively, parents before children
    for position, node in enumerate(soup.find_all(True)):
        parent_node = node.parent
        parent = views.get(id(parent_node)) if isinstance(parent_node, Tag) else None
        element = Element(
            tag=node.name,
            attributes={name: _attribute_value(value) for name, value in node.attrs.items()},
            position=position,
            parent=parent,
        )
        views[id(node)] = element
        elements.append(element)

    logger.debug("Parsed markup into %d elements", len(elements))
    return MarkupTree(tuple(elements))
