"""
Document tree node classes.

The body reader turns OOXML elements into these nodes. Every node owns its
``children`` list; no node is shared between two parents.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, ClassVar

from python_docx_tree.image_dimensions import measure_image
from python_docx_tree.models.numbering import AbstractNumbering, LevelDefinition
from python_docx_tree.models.style import (
    CustomStyle,
    DocumentDefaults,
    Indent,
    Spacing,
)


class BreakType(Enum):
    LINE = "line"
    PAGE = "page"
    COLUMN = "column"


class NoteType(Enum):
    FOOTNOTE = "footnote"
    ENDNOTE = "endnote"


class HeaderFooterType(Enum):
    """Which pages of a section a header or footer applies to."""

    DEFAULT = "default"
    FIRST = "first"
    EVEN = "even"
    ODD = "odd"


# =============================================================================
# Properties
# =============================================================================


@dataclass(frozen=True)
class ParagraphProperties:
    """Properties read from a paragraph's ``w:pPr``.

    Attributes:
        style_id: Referenced paragraph style ID
        style_name: Display name of the style, None when the style is undefined
        alignment: ``w:jc`` value
        numbering: Resolved list level, if the paragraph is part of a list
        indent: Raw indentation
        spacing: Raw spacing
    """

    style_id: str | None = None
    style_name: str | None = None
    alignment: str | None = None
    numbering: LevelDefinition | None = None
    indent: Indent = field(default_factory=Indent)
    spacing: Spacing = field(default_factory=Spacing)


@dataclass(frozen=True)
class RunProperties:
    """Properties read from a run's ``w:rPr``."""

    style_id: str | None = None
    style_name: str | None = None
    vertical_alignment: str | None = None
    font: str | None = None
    font_size: float | None = None
    color: str | None = None
    is_bold: bool = False
    is_underline: bool = False
    is_italic: bool = False
    is_strikethrough: bool = False
    is_all_caps: bool = False
    is_small_caps: bool = False
    highlight: str | None = None
    shading: str | None = None


@dataclass(frozen=True)
class TableProperties:
    style_id: str | None = None
    style_name: str | None = None
    is_bordered: bool = False


@dataclass(frozen=True)
class CellBorder:
    """One side of a table cell border (``w:sz`` in eighths of a point)."""

    style: str | None = None
    size: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class ImageCrop:
    """Crop rectangle from ``a:srcRect``, as percentages of each edge."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class ImageLayout:
    """Placement hints for DrawingML images.

    Attributes:
        floating: "inline" for ``wp:inline``, "floating" for ``wp:anchor``
        wrapping_style: Name of the first ``wp:wrap*`` element (e.g. "wrapSquare")
        relative_from_h: What the horizontal position is measured from
        relative_from_v: What the vertical position is measured from
        position_offset_h: Horizontal offset in EMU
        position_offset_v: Vertical offset in EMU
    """

    floating: str | None = None
    wrapping_style: str | None = None
    relative_from_h: str | None = None
    relative_from_v: str | None = None
    position_offset_h: int | None = None
    position_offset_v: int | None = None


# =============================================================================
# Nodes
# =============================================================================


class Node:
    """Base class of all document tree nodes."""

    type: ClassVar[str] = "node"


@dataclass
class Text(Node):
    type: ClassVar[str] = "text"

    value: str


@dataclass
class Tab(Node):
    type: ClassVar[str] = "tab"


@dataclass
class Break(Node):
    type: ClassVar[str] = "break"

    break_type: BreakType = BreakType.LINE


@dataclass
class Checkbox(Node):
    type: ClassVar[str] = "checkbox"

    checked: bool = False


@dataclass
class BookmarkStart(Node):
    type: ClassVar[str] = "bookmarkStart"

    name: str | None = None


@dataclass
class NoteReference(Node):
    type: ClassVar[str] = "noteReference"

    note_type: NoteType
    note_id: str | None = None


@dataclass
class CommentReference(Node):
    type: ClassVar[str] = "commentReference"

    comment_id: str | None = None


@dataclass
class CommentRangeStart(Node):
    type: ClassVar[str] = "commentRangeStart"

    comment_id: str | None = None


@dataclass
class CommentRangeEnd(Node):
    type: ClassVar[str] = "commentRangeEnd"

    comment_id: str | None = None


@dataclass
class Run(Node):
    type: ClassVar[str] = "run"

    children: list[Node] = field(default_factory=list)
    properties: RunProperties = field(default_factory=RunProperties)


@dataclass
class Paragraph(Node):
    type: ClassVar[str] = "paragraph"

    children: list[Node] = field(default_factory=list)
    properties: ParagraphProperties = field(default_factory=ParagraphProperties)


@dataclass
class Hyperlink(Node):
    """A link to an external URL (``href``) or a bookmark in the document (``anchor``)."""

    type: ClassVar[str] = "hyperlink"

    children: list[Node] = field(default_factory=list)
    href: str | None = None
    anchor: str | None = None
    target_frame: str | None = None


@dataclass
class Ins(Node):
    """Content inserted with change tracking on."""

    type: ClassVar[str] = "ins"

    children: list[Node] = field(default_factory=list)
    author: str | None = None
    date: str | None = None
    change_id: str | None = None


@dataclass
class Del(Node):
    """Content deleted with change tracking on."""

    type: ClassVar[str] = "del"

    children: list[Node] = field(default_factory=list)
    author: str | None = None
    date: str | None = None
    change_id: str | None = None


@dataclass
class TableCell(Node):
    type: ClassVar[str] = "tableCell"

    children: list[Node] = field(default_factory=list)
    col_span: int = 1
    row_span: int = 1
    width: float | None = None
    background_color: str | None = None
    borders: dict[str, CellBorder] = field(default_factory=dict)


@dataclass
class TableRow(Node):
    type: ClassVar[str] = "tableRow"

    children: list[Node] = field(default_factory=list)
    is_header: bool = False


@dataclass
class Table(Node):
    type: ClassVar[str] = "table"

    children: list[Node] = field(default_factory=list)
    properties: TableProperties = field(default_factory=TableProperties)


@dataclass
class Image(Node):
    """An embedded or linked picture.

    The image bytes are not read while the document is read. ``read`` is a
    zero-argument callable that fetches them on demand; :meth:`read_bytes`
    caches the result.

    Attributes:
        read: Callable returning the image bytes
        path: Package path (or external URI) of the image
        content_type: MIME type, None if it could not be determined
        alt_text: Description or title of the picture
        width: Display width in pixels
        height: Display height in pixels
        natural_width: Pixel width of the image file itself
        natural_height: Pixel height of the image file itself
        crop: Crop rectangle, if the picture is cropped in the document
        layout: Placement hints, for DrawingML pictures
    """

    type: ClassVar[str] = "image"

    read: Callable[[], bytes] | None = field(default=None, repr=False, compare=False)
    path: str | None = None
    content_type: str | None = None
    alt_text: str | None = None
    width: float | None = None
    height: float | None = None
    natural_width: int | None = None
    natural_height: int | None = None
    crop: ImageCrop | None = None
    layout: ImageLayout | None = None
    _data: bytes | None = field(default=None, init=False, repr=False, compare=False)

    def read_bytes(self) -> bytes:
        if self._data is None:
            if self.read is None:
                raise ValueError("image has no data source")
            self._data = self.read()
        return self._data

    def populate_natural_dimensions(self) -> bool:
        """Measure the image file and fill in the natural size.

        Returns:
            True if the dimensions are known after the call
        """
        if self.natural_width is not None and self.natural_height is not None:
            return True
        dimensions = measure_image(self.read_bytes())
        if dimensions is None:
            return False
        self.natural_width, self.natural_height = dimensions
        return True

    @property
    def is_cropped(self) -> bool:
        if self.crop is not None:
            return True
        if self.natural_width is None or self.natural_height is None:
            return False
        return bool(
            (self.width and self.width < self.natural_width)
            or (self.height and self.height < self.natural_height)
        )


@dataclass
class Note(Node):
    type: ClassVar[str] = "note"

    note_type: NoteType
    note_id: str | None
    body: list[Node] = field(default_factory=list)


@dataclass
class Comment(Node):
    type: ClassVar[str] = "comment"

    comment_id: str | None
    body: list[Node] = field(default_factory=list)
    author_name: str | None = None
    author_initials: str | None = None


@dataclass
class Header(Node):
    type: ClassVar[str] = "header"

    children: list[Node] = field(default_factory=list)
    header_type: HeaderFooterType = HeaderFooterType.DEFAULT
    section_index: int = 0


@dataclass
class Footer(Node):
    type: ClassVar[str] = "footer"

    children: list[Node] = field(default_factory=list)
    footer_type: HeaderFooterType = HeaderFooterType.DEFAULT
    section_index: int = 0


@dataclass
class Document(Node):
    """Root of the document tree.

    Attributes:
        children: Body content
        notes: Footnotes followed by endnotes
        comments: Comments from word/comments.xml
        headers: Headers in relationship order
        footers: Footers in relationship order
        custom_styles: Style ID to name, type and resolved properties
        numbering_styles: Abstract numbering definitions by ID
        document_defaults: Character and paragraph defaults, None if absent
    """

    type: ClassVar[str] = "document"

    children: list[Node] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    headers: list[Header] = field(default_factory=list)
    footers: list[Footer] = field(default_factory=list)
    custom_styles: dict[str, CustomStyle] = field(default_factory=dict)
    numbering_styles: dict[str, AbstractNumbering] = field(default_factory=dict)
    document_defaults: DocumentDefaults | None = None


# =============================================================================
# Helpers
# =============================================================================


def iter_nodes(nodes: Iterable[Node]) -> Iterator[Node]:
    """Walk nodes depth-first, in document order, including descendants."""
    for node in nodes:
        yield node
        children = getattr(node, "children", None)
        if children:
            yield from iter_nodes(children)
        body = getattr(node, "body", None)
        if body:
            yield from iter_nodes(body)


def to_dict(value: Any) -> Any:
    """Convert a node (or any model value) to plain JSON-compatible data.

    Image data sources are left out; node dictionaries get a ``type`` key.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [to_dict(item) for item in value]
    if isinstance(value, dict):
        return {key: to_dict(item) for key, item in value.items()}
    if is_dataclass(value) and not isinstance(value, type):
        data: dict[str, Any] = {}
        if isinstance(value, Node):
            data["type"] = value.type
        for f in fields(value):
            if f.name in ("read", "_data"):
                continue
            data[f.name] = to_dict(getattr(value, f.name))
        return data
    return value
