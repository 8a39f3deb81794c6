"""
Reader for word/comments.xml.
"""

from __future__ import annotations

from collections.abc import Callable

from lxml import etree

from .body_reader import BodyReader
from .constants import w
from .models.document import Comment
from .results import Result


def create_comments_reader(body_reader: BodyReader) -> Callable[[etree._Element], Result]:
    """Create a reader that turns a comments part into Comment nodes."""

    def read_comments_xml(root: etree._Element) -> Result:
        return Result.combine(
            _read_comment(element, body_reader) for element in root.iter(w("comment"))
        )

    return read_comments_xml


def _read_comment(element: etree._Element, body_reader: BodyReader) -> Result:
    comment_id = element.get(w("id"))
    author_name = _read_optional(element.get(w("author")))
    author_initials = _read_optional(element.get(w("initials")))
    return body_reader.read_xml_elements(element).map(
        lambda body: Comment(
            comment_id,
            body,
            author_name=author_name,
            author_initials=author_initials,
        )
    )


def _read_optional(value: str | None) -> str | None:
    return value if value and value.strip() else None
