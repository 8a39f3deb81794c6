"""
Readers for header and footer parts.

Word names header parts header1.xml, header2.xml, ... in the order it
creates them. The number is used as a hint for which pages of a section the
part applies to; anything else is the default header or footer.
"""

from __future__ import annotations

import posixpath
import re

from lxml import etree

from .body_reader import BodyReader
from .models.document import Footer, Header, HeaderFooterType
from .results import Result

_PART_NUMBER = re.compile(r"(?:header|footer)(\d+)\.xml$")

_TYPES_BY_NUMBER = {
    "1": HeaderFooterType.FIRST,
    "2": HeaderFooterType.EVEN,
    "3": HeaderFooterType.ODD,
}


def header_footer_type(part_name: str) -> HeaderFooterType:
    """Infer the header/footer kind from its part name.

    Example:
        >>> header_footer_type("word/header2.xml")
        <HeaderFooterType.EVEN: 'even'>
    """
    match = _PART_NUMBER.search(posixpath.basename(part_name))
    if match is None:
        return HeaderFooterType.DEFAULT
    return _TYPES_BY_NUMBER.get(match.group(1), HeaderFooterType.DEFAULT)


def read_header_xml(
    root: etree._Element, body_reader: BodyReader, part_name: str, section_index: int
) -> Result:
    """Read a w:hdr part into a Header node."""
    header_type = header_footer_type(part_name)
    return body_reader.read_xml_elements(root).map(
        lambda children: Header(children, header_type=header_type, section_index=section_index)
    )


def read_footer_xml(
    root: etree._Element, body_reader: BodyReader, part_name: str, section_index: int
) -> Result:
    """Read a w:ftr part into a Footer node."""
    footer_type = header_footer_type(part_name)
    return body_reader.read_xml_elements(root).map(
        lambda children: Footer(children, footer_type=footer_type, section_index=section_index)
    )
