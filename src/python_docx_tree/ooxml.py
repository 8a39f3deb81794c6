"""
Helpers for reading WordprocessingML property elements.

These wrap the ``element.find(w(...))`` / ``element.get(w("val"))`` pattern
used throughout the readers and encode OOXML's boolean-property rules in one
place.
"""

from __future__ import annotations

from lxml import etree

from .constants import w
from .models.style import Indent, Spacing

# w:val values that switch a boolean property off
FALSE_VALUES = ("0", "false", "off")


def find(parent: etree._Element | None, tag: str) -> etree._Element | None:
    """First child with the given qualified tag, None if absent (or no parent)."""
    if parent is None:
        return None
    return parent.find(tag)


def child_attribute(
    parent: etree._Element | None, tag: str, attribute: str | None = None
) -> str | None:
    """Read an attribute of a child element, ``w:val`` by default.

    Example:
        >>> child_attribute(rpr, w("sz"))
        '24'
    """
    child = find(parent, tag)
    if child is None:
        return None
    return child.get(attribute or w("val"))


def is_true_value(value: str | None) -> bool:
    """Interpret a boolean attribute value; a missing value means True."""
    return value is None or value.lower() not in FALSE_VALUES


def read_boolean_element(element: etree._Element | None) -> bool:
    """Read a toggle property such as ``w:b``.

    - Absent: False
    - Present with no value: True
    - Present with w:val="0", "false" or "off": False
    """
    if element is None:
        return False
    return is_true_value(element.get(w("val")))


def read_optional_boolean(parent: etree._Element | None, tag: str) -> bool | None:
    """Read a toggle property, returning None when it is absent.

    Used for style definitions, where an absent property is inherited.
    """
    element = find(parent, tag)
    if element is None:
        return None
    return is_true_value(element.get(w("val")))


def read_indent(element: etree._Element | None) -> Indent:
    """Read a ``w:ind`` element (absent gives an empty Indent)."""
    if element is None:
        return Indent()
    return Indent(
        left=element.get(w("left")),
        right=element.get(w("right")),
        start=element.get(w("start")),
        end=element.get(w("end")),
        first_line=element.get(w("firstLine")),
        hanging=element.get(w("hanging")),
    )


def read_spacing(element: etree._Element | None) -> Spacing:
    """Read a ``w:spacing`` element (absent gives an empty Spacing)."""
    if element is None:
        return Spacing()
    return Spacing(
        before=element.get(w("before")),
        after=element.get(w("after")),
        line=element.get(w("line")),
        line_rule=element.get(w("lineRule")),
    )


def is_element(node: object) -> bool:
    """True for elements; False for comments, processing instructions and entities."""
    return isinstance(node, etree._Element) and isinstance(node.tag, str)
