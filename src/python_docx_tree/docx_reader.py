"""
DocxReader: reads a whole .docx package into a Document tree.

Parts are read in dependency order. Theme fonts feed the style defaults,
styles are needed to follow numbering style links, and numbering and styles
are needed by every body reader. Notes, comments, headers and footers do not
depend on each other, so they are read in parallel, each with its own
BodyReader; their results are joined in a fixed order so the messages of a
read are always the same.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO

from lxml import etree

from .body_reader import BodyReader
from .comments import create_comments_reader
from .constants import w
from .content_types import CONTENT_TYPES_PART, ContentTypeMap
from .errors import ExternalFileError, InvalidDocumentError, MissingPartError
from .files import Files
from .headers_footers import read_footer_xml, read_header_xml
from .models.document import Document, Image, Node, NoteType, iter_nodes
from .notes import create_notes_reader
from .numbering import NumberingRegistry, read_numbering_xml
from .options import ReadOptions
from .package import OOXMLPackage
from .relationships import (
    Relationships,
    RelationshipTypes,
    join_part_path,
    relationships_filename,
)
from .results import Message, Result, warning
from .styles import StyleRegistry, read_styles_xml
from .theme import read_theme_xml

logger = logging.getLogger(__name__)

_MAIN_DOCUMENT_FALLBACK = "word/document.xml"


@dataclass(frozen=True)
class PartPaths:
    """Package paths of the parts a document is read from."""

    main_document: str
    comments: str = "word/comments.xml"
    endnotes: str = "word/endnotes.xml"
    footnotes: str = "word/footnotes.xml"
    numbering: str = "word/numbering.xml"
    styles: str = "word/styles.xml"
    theme: str = "word/theme.xml"
    headers: list[str] = field(default_factory=list)
    footers: list[str] = field(default_factory=list)


def _read_relationships(package: OOXMLPackage, part_name: str) -> Relationships:
    return Relationships.from_element(package.get_part(relationships_filename(part_name)))


def _find_part_path(
    package: OOXMLPackage,
    relationships: Relationships,
    relationship_type: str,
    base_path: str,
    fallback_path: str,
) -> str:
    """First relationship target of a type that exists in the package, else the fallback."""
    for target in relationships.find_targets_by_type(relationship_type):
        path = join_part_path(base_path, target)
        if package.part_exists(path):
            return path
    return fallback_path


def find_part_paths(package: OOXMLPackage) -> PartPaths:
    """Locate the parts of a document through the package relationships.

    Raises:
        MissingPartError: If the main document part does not exist
    """
    main_document = _find_part_path(
        package,
        _read_relationships(package, ""),
        RelationshipTypes.OFFICE_DOCUMENT,
        "",
        _MAIN_DOCUMENT_FALLBACK,
    )
    if not package.part_exists(main_document):
        raise MissingPartError(main_document)

    relationships = _read_relationships(package, main_document)
    base_path = posixpath.dirname(main_document)

    def related(relationship_type: str, name: str) -> str:
        return _find_part_path(
            package, relationships, relationship_type, base_path, f"word/{name}.xml"
        )

    paths = PartPaths(
        main_document=main_document,
        comments=related(RelationshipTypes.COMMENTS, "comments"),
        endnotes=related(RelationshipTypes.ENDNOTES, "endnotes"),
        footnotes=related(RelationshipTypes.FOOTNOTES, "footnotes"),
        numbering=related(RelationshipTypes.NUMBERING, "numbering"),
        styles=related(RelationshipTypes.STYLES, "styles"),
        theme=related(RelationshipTypes.THEME, "theme"),
        headers=[
            join_part_path(base_path, target)
            for target in relationships.find_targets_by_type(RelationshipTypes.HEADER)
        ],
        footers=[
            join_part_path(base_path, target)
            for target in relationships.find_targets_by_type(RelationshipTypes.FOOTER)
        ],
    )
    logger.debug(f"Found part paths: {paths}")
    return paths


class DocxReader:
    """Reads the parts of an open package into a Document.

    Example:
        >>> with OOXMLPackage.open("report.docx") as package:
        ...     result = DocxReader(package).read()
        >>> document = result.value

    Args:
        package: An open package
        options: Read configuration (base path for linked images, thread pool size)
    """

    def __init__(self, package: OOXMLPackage, options: ReadOptions | None = None) -> None:
        self._package = package
        self._options = options or ReadOptions()

        if self._options.base_path is not None:
            self._files = Files(self._options.base_path)
        elif package.source_path is not None:
            self._files = Files.relative_to_file(package.source_path)
        else:
            self._files = Files()

    def read(self) -> Result:
        """Read the whole document.

        Returns:
            A Result holding the Document node and every warning of the read

        Raises:
            MissingPartError: If the package has no main document part
            InvalidDocumentError: If the main document has no body
        """
        package = self._package
        content_types = ContentTypeMap.from_element(package.get_part(CONTENT_TYPES_PART))
        paths = find_part_paths(package)

        theme = read_theme_xml(package.get_part(paths.theme))

        styles_root = package.get_part(paths.styles)
        styles = read_styles_xml(styles_root, theme) if styles_root is not None else StyleRegistry()

        numbering_root = package.get_part(paths.numbering)
        if numbering_root is not None:
            numbering = read_numbering_xml(numbering_root, styles)
        else:
            numbering = NumberingRegistry({}, {}, styles)

        def create_body_reader(part_name: str) -> BodyReader:
            return BodyReader(
                styles=styles,
                numbering=numbering,
                relationships=_read_relationships(package, part_name),
                content_types=content_types,
                package=package,
                files=self._files,
            )

        def read_part(
            part_name: str, read: Callable[[etree._Element, BodyReader], Result]
        ) -> Result:
            root = package.get_part(part_name)
            if root is None:
                return Result.empty()
            return read(root, create_body_reader(part_name))

        with ThreadPoolExecutor(max_workers=self._options.max_workers) as executor:
            footnotes = executor.submit(
                read_part,
                paths.footnotes,
                lambda root, reader: create_notes_reader(NoteType.FOOTNOTE, reader)(root),
            )
            endnotes = executor.submit(
                read_part,
                paths.endnotes,
                lambda root, reader: create_notes_reader(NoteType.ENDNOTE, reader)(root),
            )
            comments = executor.submit(
                read_part,
                paths.comments,
                lambda root, reader: create_comments_reader(reader)(root),
            )
            headers = [
                executor.submit(read_part, path, _header_reader(path, index))
                for index, path in enumerate(paths.headers)
            ]
            footers = [
                executor.submit(read_part, path, _footer_reader(path, index))
                for index, path in enumerate(paths.footers)
            ]
            logger.debug(
                f"Reading notes, comments, {len(headers)} headers and "
                f"{len(footers)} footers in parallel"
            )

            notes_result = Result.combine([footnotes.result(), endnotes.result()])
            comments_result = comments.result()
            headers_result = Result.combine(future.result() for future in headers)
            footers_result = Result.combine(future.result() for future in footers)

        document_root = package.get_part(paths.main_document)
        if document_root is None:
            raise MissingPartError(paths.main_document)
        body = document_root.find(w("body"))
        if body is None:
            raise InvalidDocumentError(paths.main_document)

        body_result = create_body_reader(paths.main_document).read_xml_elements(body).insert_extra()

        def create_document(children: list[Node]) -> Document:
            return Document(
                children,
                notes=notes_result.nodes,
                comments=comments_result.nodes,
                headers=headers_result.nodes,
                footers=footers_result.nodes,
                custom_styles=styles.custom_styles,
                numbering_styles=numbering.numbering_styles,
                document_defaults=styles.document_defaults,
            )

        return Result(
            create_document(body_result.nodes),
            messages=(
                notes_result.messages
                + comments_result.messages
                + headers_result.messages
                + footers_result.messages
                + body_result.messages
            ),
        )


def _header_reader(part_name: str, index: int) -> Callable[[etree._Element, BodyReader], Result]:
    return lambda root, reader: read_header_xml(root, reader, part_name, index)


def _footer_reader(part_name: str, index: int) -> Callable[[etree._Element, BodyReader], Result]:
    return lambda root, reader: read_footer_xml(root, reader, part_name, index)


def iter_images(document: Document) -> Iterator[Image]:
    """Every Image node in the document, including notes, comments, headers and footers."""
    for part in (
        document.children,
        document.notes,
        document.comments,
        document.headers,
        document.footers,
    ):
        for node in iter_nodes(part):
            if isinstance(node, Image):
                yield node


def load_images(document: Document) -> list[Message]:
    """Read image bytes and natural dimensions while the package is still open.

    Returns:
        Warnings for images whose bytes could not be read
    """
    messages = []
    for image in iter_images(document):
        try:
            image.populate_natural_dimensions()
        except (KeyError, ExternalFileError, OSError, ValueError) as e:
            reason = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
            messages.append(warning(f"Could not read image {image.path}: {reason}"))
            logger.debug(f"Could not read image {image.path}: {reason}")
    return messages


def read_document(
    source: str | Path | BinaryIO | bytes,
    options: ReadOptions | None = None,
    **overrides: Any,
) -> Result:
    """Read a .docx file into a Document tree.

    Args:
        source: Path to a .docx file, a binary file object, or the file's bytes
        options: Read configuration
        **overrides: ReadOptions fields to override (``base_path``,
            ``max_workers``, ``load_images``)

    Returns:
        A Result holding the Document node and the warnings of the read

    Raises:
        InvalidPackageError: If the source is not a readable ZIP package
        MissingPartError: If the package has no main document part
        InvalidDocumentError: If the main document has no body

    Example:
        >>> result = read_document("report.docx", load_images=False)
        >>> for message in result.messages:
        ...     print(message)
    """
    options = (options or ReadOptions()).with_overrides(**overrides)

    if isinstance(source, bytes):
        package = OOXMLPackage.from_bytes(source)
    else:
        package = OOXMLPackage.open(source)

    with package:
        result = DocxReader(package, options).read()
        if options.load_images:
            result.messages.extend(load_images(result.value))
    return result
