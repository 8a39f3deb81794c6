"""
Complex field tracking for ``w:fldChar`` / ``w:instrText`` sequences.

A complex field is written as a run of markers::

    begin -> instruction text ... -> separate -> displayed result ... -> end

Fields nest, so open fields are kept on a stack. Each body reader owns its
own :class:`ComplexFieldStack`; nothing here is shared between reads.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from lxml import etree

from .constants import w
from .errors import MalformedFieldError
from .models.document import Checkbox
from .ooxml import find, read_boolean_element

logger = logging.getLogger(__name__)

_EXTERNAL_LINK = re.compile(r'\s*HYPERLINK "(.*)"')
_INTERNAL_LINK = re.compile(r'\s*HYPERLINK\s+\\l\s+"(.*)"')
_CHECKBOX = re.compile(r"\s*FORMCHECKBOX\s*")


class FieldType(Enum):
    BEGIN = "begin"
    HYPERLINK = "hyperlink"
    CHECKBOX = "checkbox"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ComplexField:
    """A stack entry for an open field.

    Attributes:
        field_type: BEGIN until the instruction text has been classified
        fld_char: The ``begin`` marker element (carries form field data)
        href: Target of an external hyperlink field
        anchor: Bookmark name of an internal hyperlink field
        checked: State of a checkbox field
    """

    field_type: FieldType
    fld_char: etree._Element | None = None
    href: str | None = None
    anchor: str | None = None
    checked: bool = False


def parse_instr_text(instr_text: str, fld_char: etree._Element | None = None) -> ComplexField:
    """Classify a field's instruction text.

    Args:
        instr_text: The concatenated ``w:instrText`` contents
        fld_char: The ``begin`` marker, consulted for checkbox state

    Example:
        >>> parse_instr_text(' HYPERLINK "http://example.com"').href
        'http://example.com'
    """
    match = _EXTERNAL_LINK.search(instr_text)
    if match:
        return ComplexField(FieldType.HYPERLINK, href=match.group(1))

    match = _INTERNAL_LINK.search(instr_text)
    if match:
        return ComplexField(FieldType.HYPERLINK, anchor=match.group(1))

    if _CHECKBOX.search(instr_text):
        checkbox = find(find(fld_char, w("ffData")), w("checkBox"))
        checked_element = find(checkbox, w("checked"))
        if checked_element is None:
            checked = read_boolean_element(find(checkbox, w("default")))
        else:
            checked = read_boolean_element(checked_element)
        return ComplexField(FieldType.CHECKBOX, checked=checked)

    return ComplexField(FieldType.UNKNOWN)


class ComplexFieldStack:
    """The open complex fields of one body read, innermost last."""

    def __init__(self) -> None:
        self._stack: list[ComplexField] = []
        self._instr_text: list[str] = []

    def __len__(self) -> int:
        return len(self._stack)

    def begin(self, fld_char: etree._Element | None = None) -> None:
        """Open a field and start a fresh instruction-text buffer."""
        self._stack.append(ComplexField(FieldType.BEGIN, fld_char=fld_char))
        self._instr_text = []

    def add_instr_text(self, text: str) -> None:
        """Append instruction text for the open field (ignored when none is open)."""
        if self._stack:
            self._instr_text.append(text)
        else:
            logger.debug("Ignoring instruction text outside a complex field")

    def separate(self) -> None:
        """Classify the innermost field's instruction text.

        Raises:
            MalformedFieldError: If no field is open
        """
        if not self._stack:
            raise MalformedFieldError("separate")
        self._stack.append(self._classify(self._stack.pop()))

    def end(self) -> Checkbox | None:
        """Close the innermost field.

        Returns:
            A Checkbox if the field was a checkbox form field, otherwise None

        Raises:
            MalformedFieldError: If no field is open
        """
        if not self._stack:
            raise MalformedFieldError("end")
        field = self._stack.pop()
        if field.field_type is FieldType.BEGIN:
            field = self._classify(field)
        if field.field_type is FieldType.CHECKBOX:
            return Checkbox(checked=field.checked)
        return None

    def current_hyperlink(self) -> ComplexField | None:
        """The innermost open hyperlink field, if any."""
        for field in reversed(self._stack):
            if field.field_type is FieldType.HYPERLINK:
                return field
        return None

    def _classify(self, field: ComplexField) -> ComplexField:
        fld_char = field.fld_char if field.field_type is FieldType.BEGIN else None
        return parse_instr_text("".join(self._instr_text), fld_char)
