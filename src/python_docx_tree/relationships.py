"""
Relationships reader for .rels files in OOXML packages.

A relationship links one part to another (or to an external resource) using
a unique ID (rId), a relationship type URI, and a target. Parts refer to
images, hyperlinks and other parts by relationship ID.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass

from lxml import etree

from .constants import PACKAGE_RELATIONSHIPS_NAMESPACE

logger = logging.getLogger(__name__)

_RELATIONSHIP_TAG = f"{{{PACKAGE_RELATIONSHIPS_NAMESPACE}}}Relationship"


@dataclass(frozen=True)
class Relationship:
    relationship_id: str
    target: str
    type: str
    target_mode: str | None = None


class Relationships:
    """The relationships of a single package part.

    Example:
        >>> rels = Relationships.from_element(root)
        >>> rels.find_target_by_relationship_id("rId1")
        'styles.xml'
    """

    def __init__(self, relationships: list[Relationship] | None = None) -> None:
        self._relationships = list(relationships or [])
        self._targets_by_id = {rel.relationship_id: rel.target for rel in self._relationships}
        self._targets_by_type: dict[str, list[str]] = {}
        for rel in self._relationships:
            self._targets_by_type.setdefault(rel.type, []).append(rel.target)

    @classmethod
    def from_element(cls, root: etree._Element | None) -> Relationships:
        """Read relationships from a parsed .rels part (None gives no relationships)."""
        if root is None:
            return cls()

        relationships = []
        for element in root.iter(_RELATIONSHIP_TAG):
            rel_id = element.get("Id")
            target = element.get("Target")
            if rel_id is None or target is None:
                logger.debug("Skipping relationship without Id or Target")
                continue
            relationships.append(
                Relationship(
                    relationship_id=rel_id,
                    target=target,
                    type=element.get("Type", ""),
                    target_mode=element.get("TargetMode"),
                )
            )
        return cls(relationships)

    def find_target_by_relationship_id(self, relationship_id: str) -> str | None:
        """Get the target for a relationship ID, None if there is no such ID."""
        return self._targets_by_id.get(relationship_id)

    def find_targets_by_type(self, relationship_type: str) -> list[str]:
        """Get all targets of a relationship type, in document order."""
        return list(self._targets_by_type.get(relationship_type, []))

    def __len__(self) -> int:
        return len(self._relationships)


EMPTY_RELATIONSHIPS = Relationships()


class RelationshipTypes:
    """Common OOXML relationship types."""

    OFFICE_DOCUMENT = (
        "http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument"
    )
    COMMENTS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/comments"
    FOOTNOTES = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/footnotes"
    ENDNOTES = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/endnotes"
    STYLES = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/styles"
    NUMBERING = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/numbering"
    THEME = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/theme"
    HEADER = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/header"
    FOOTER = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/footer"
    IMAGE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/image"
    HYPERLINK = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/hyperlink"


def relationships_filename(part_name: str) -> str:
    """Compute the .rels part name for a given part.

    For example:
    - "word/document.xml" -> "word/_rels/document.xml.rels"
    - "document.xml" -> "_rels/document.xml.rels"
    """
    dirname, basename = posixpath.split(part_name)
    return posixpath.join(dirname, "_rels", f"{basename}.rels")


def join_part_path(base: str, target: str) -> str:
    """Resolve a relationship target against the directory of its source part.

    Absolute targets ("/word/media/a.png") are taken from the package root.
    The result never has a leading slash.
    """
    if target.startswith("/"):
        path = target
    elif base:
        path = posixpath.join(base, target)
    else:
        path = target
    return posixpath.normpath(path).lstrip("/")


def replace_fragment(uri: str, fragment: str) -> str:
    """Replace (or add) the ``#fragment`` of a URI."""
    base, _, _ = uri.partition("#")
    return f"{base}#{fragment}"
