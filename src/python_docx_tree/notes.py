"""
Reader for word/footnotes.xml and word/endnotes.xml.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lxml import etree

from .body_reader import BodyReader
from .constants import w
from .models.document import Note, NoteType
from .results import Result

logger = logging.getLogger(__name__)

# Notes Word uses to draw the line above the note area, not real content
_SEPARATOR_TYPES = ("separator", "continuationSeparator")


def create_notes_reader(
    note_type: NoteType, body_reader: BodyReader
) -> Callable[[etree._Element], Result]:
    """Create a reader for one notes part.

    Args:
        note_type: Whether the part holds footnotes or endnotes
        body_reader: Reader for the part's note bodies

    Returns:
        A function turning the part's root element into a Result of Note nodes
    """
    tag = w(note_type.value)

    def read_notes_xml(root: etree._Element) -> Result:
        results = [
            _read_note(note_type, element, body_reader)
            for element in root.iter(tag)
            if element.get(w("type")) not in _SEPARATOR_TYPES
        ]
        logger.debug(f"Read {len(results)} {note_type.value}s")
        return Result.combine(results)

    return read_notes_xml


def _read_note(note_type: NoteType, element: etree._Element, body_reader: BodyReader) -> Result:
    note_id = element.get(w("id"))
    return body_reader.read_xml_elements(element).map(
        lambda body: Note(note_type, note_id, body)
    )
