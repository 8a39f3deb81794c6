"""
BodyReader: turns WordprocessingML body content into document tree nodes.

The reader walks an element tree depth-first. Each recognised element kind
maps to a reader method; formatting containers consumed by their parent are
skipped silently, and anything else produces an "unrecognised element"
warning. Warnings travel with the nodes on the returned :class:`Result`.

One BodyReader holds the mutable state of one read (open complex fields,
the contents of deleted paragraphs waiting for the next paragraph, and
vertical-merge markers of the table being read), so every part of a document
gets its own instance.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from functools import partial

import dingbat_to_unicode
from lxml import etree

from .constants import (
    GO_BACK_BOOKMARK,
    IGNORED_ELEMENTS,
    SUPPORTED_IMAGE_TYPES,
    a,
    canonical_name,
    mc,
    o,
    pic,
    r,
    v,
    w,
    w14,
    wp,
)
from .content_types import ContentTypeMap
from .fields import ComplexFieldStack
from .files import Files
from .models.document import (
    BookmarkStart,
    Break,
    BreakType,
    CellBorder,
    Checkbox,
    CommentRangeEnd,
    CommentRangeStart,
    CommentReference,
    Del,
    Hyperlink,
    Image,
    ImageCrop,
    ImageLayout,
    Ins,
    Node,
    NoteReference,
    NoteType,
    Paragraph,
    ParagraphProperties,
    Run,
    RunProperties,
    Tab,
    Table,
    TableCell,
    TableProperties,
    TableRow,
    Text,
)
from .models.numbering import LevelDefinition
from .numbering import NumberingRegistry
from .ooxml import (
    child_attribute,
    find,
    is_element,
    is_true_value,
    read_boolean_element,
    read_indent,
    read_spacing,
)
from .package import OOXMLPackage
from .relationships import EMPTY_RELATIONSHIPS, Relationships, join_part_path, replace_fragment
from .results import Message, Result, warning
from .styles import StyleReference, StyleRegistry
from .tables import VerticalMerge, calculate_row_spans, read_vertical_merge
from .units import convert_to_pixels, extract_shape_dimensions, half_points_to_points

logger = logging.getLogger(__name__)

# Relationship targets of embedded images are relative to this directory
_EMBEDDED_IMAGE_BASE = "word"


class ElementKind(Enum):
    """Element names the body reader has a reader for."""

    PARAGRAPH = "w:p"
    RUN = "w:r"
    FIELD_CHAR = "w:fldChar"
    INSTR_TEXT = "w:instrText"
    TEXT = "w:t"
    DELETED_TEXT = "w:delText"
    TAB = "w:tab"
    NO_BREAK_HYPHEN = "w:noBreakHyphen"
    SOFT_HYPHEN = "w:softHyphen"
    SYMBOL = "w:sym"
    HYPERLINK = "w:hyperlink"
    TABLE = "w:tbl"
    TABLE_ROW = "w:tr"
    TABLE_CELL = "w:tc"
    FOOTNOTE_REFERENCE = "w:footnoteReference"
    ENDNOTE_REFERENCE = "w:endnoteReference"
    COMMENT_REFERENCE = "w:commentReference"
    COMMENT_RANGE_START = "w:commentRangeStart"
    COMMENT_RANGE_END = "w:commentRangeEnd"
    BREAK = "w:br"
    BOOKMARK_START = "w:bookmarkStart"
    ALTERNATE_CONTENT = "mc:AlternateContent"
    STRUCTURED_DOCUMENT_TAG = "w:sdt"
    INSERTION = "w:ins"
    DELETION = "w:del"
    OBJECT = "w:object"
    SMART_TAG = "w:smartTag"
    DRAWING = "w:drawing"
    PICTURE = "w:pict"
    ROUND_RECT = "v:roundrect"
    SHAPE = "v:shape"
    TEXT_BOX = "v:textbox"
    TEXT_BOX_CONTENT = "w:txbxContent"
    GROUP = "v:group"
    RECT = "v:rect"
    INLINE = "wp:inline"
    ANCHOR = "wp:anchor"
    IMAGE_DATA = "v:imagedata"

    @classmethod
    def for_name(cls, name: str) -> ElementKind | None:
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class ImageFile:
    """Where an image's bytes live and how to fetch them."""

    path: str | None
    read: Callable[[], bytes] | None


def _warn(text: str) -> Message:
    logger.debug(f"Warning: {text}")
    return warning(text)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _read_underline(element: etree._Element | None) -> bool:
    if element is None:
        return False
    return element.get(w("val")) not in (None, "false", "0", "none")


def _read_highlight(value: str | None) -> str | None:
    if not value or value == "none":
        return None
    return value


def _read_symbol(element: etree._Element) -> Result:
    """Map a ``w:sym`` character in a symbol font to its Unicode equivalent.

    Word often writes symbol characters in the private use area (``F0xx``);
    when that code isn't in the font's table, the low byte is tried instead.
    """
    font = element.get(w("font"))
    char = element.get(w("char"))

    code_point = None
    if font and char and re.fullmatch(r"[0-9A-Fa-f]+", char):
        code_point = dingbat_to_unicode.hex(font, char)
        if code_point is None and re.fullmatch(r"F0..", char, re.IGNORECASE):
            code_point = dingbat_to_unicode.hex(font, char[2:])

    if code_point is None:
        message = (
            "A w:sym element with an unsupported character was ignored: "
            f"char {char} in font {font}"
        )
        return Result.empty([_warn(message)])
    return Result(Text(code_point.char))


def read_numbering_properties(
    style_id: str | None,
    num_pr: etree._Element | None,
    numbering: NumberingRegistry,
) -> LevelDefinition | None:
    """Resolve the list level of a paragraph.

    An explicit ``w:numPr`` (both ``w:ilvl`` and ``w:numId``) takes priority;
    otherwise a level linked to the paragraph's style is used.
    """
    level = child_attribute(num_pr, w("ilvl"))
    num_id = child_attribute(num_pr, w("numId"))
    if level is not None and num_id is not None:
        return numbering.find_level(num_id, level)
    if style_id is not None:
        return numbering.find_level_by_paragraph_style_id(style_id)
    return None


class BodyReader:
    """Reads the body content of one package part.

    Args:
        styles: Style registry of the document
        numbering: Numbering registry of the document
        relationships: Relationships of the part being read
        content_types: Content type map of the package
        package: Package embedded images are read from
        files: Reader for linked (external) images

    Example:
        >>> reader = BodyReader(styles=styles, numbering=numbering)
        >>> result = reader.read_xml_elements(body)
        >>> paragraphs = result.value
    """

    def __init__(
        self,
        *,
        styles: StyleRegistry | None = None,
        numbering: NumberingRegistry | None = None,
        relationships: Relationships = EMPTY_RELATIONSHIPS,
        content_types: ContentTypeMap | None = None,
        package: OOXMLPackage | None = None,
        files: Files | None = None,
    ) -> None:
        self._styles = styles or StyleRegistry.empty()
        self._numbering = numbering or NumberingRegistry.empty()
        self._relationships = relationships
        self._content_types = content_types or ContentTypeMap()
        self._package = package
        self._files = files or Files()

        self._fields = ComplexFieldStack()
        # Children of deleted paragraphs, prepended to the next paragraph read
        self._deleted_paragraph_contents: list[etree._Element] = []
        # Vertical merge markers of the cells of the table being read, None outside tables
        self._vertical_merges: dict[int, VerticalMerge] | None = None

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def read_xml_elements(self, elements: Iterable[etree._Element]) -> Result:
        """Read a sequence of sibling elements, in order."""
        return Result.combine([self.read_xml_element(element) for element in elements])

    def read_xml_element(self, element: etree._Element) -> Result:
        """Read one element into zero or more nodes."""
        if not is_element(element):
            return Result.empty()

        name = canonical_name(element.tag)
        kind = ElementKind.for_name(name)
        if kind is None:
            if name in IGNORED_ELEMENTS:
                return Result.empty()
            return Result.empty([_warn(f"An unrecognised element was ignored: {name}")])

        match kind:
            case ElementKind.PARAGRAPH:
                return self._read_paragraph(element)
            case ElementKind.RUN:
                return self._read_run(element)
            case ElementKind.FIELD_CHAR:
                return self._read_field_char(element)
            case ElementKind.INSTR_TEXT:
                self._fields.add_instr_text(element.text or "")
                return Result.empty()
            case ElementKind.TEXT | ElementKind.DELETED_TEXT:
                return Result(Text(element.text or ""))
            case ElementKind.TAB:
                return Result(Tab())
            case ElementKind.NO_BREAK_HYPHEN:
                return Result(Text("\u2011"))
            case ElementKind.SOFT_HYPHEN:
                return Result(Text("\u00ad"))
            case ElementKind.SYMBOL:
                return _read_symbol(element)
            case ElementKind.HYPERLINK:
                return self._read_hyperlink(element)
            case ElementKind.TABLE:
                return self._read_table(element)
            case ElementKind.TABLE_ROW:
                return self._read_table_row(element)
            case ElementKind.TABLE_CELL:
                return self._read_table_cell(element)
            case ElementKind.FOOTNOTE_REFERENCE:
                return Result(NoteReference(NoteType.FOOTNOTE, element.get(w("id"))))
            case ElementKind.ENDNOTE_REFERENCE:
                return Result(NoteReference(NoteType.ENDNOTE, element.get(w("id"))))
            case ElementKind.COMMENT_REFERENCE:
                return Result(CommentReference(element.get(w("id"))))
            case ElementKind.COMMENT_RANGE_START:
                return Result(CommentRangeStart(element.get(w("id"))))
            case ElementKind.COMMENT_RANGE_END:
                return Result(CommentRangeEnd(element.get(w("id"))))
            case ElementKind.BREAK:
                return self._read_break(element)
            case ElementKind.BOOKMARK_START:
                bookmark_name = element.get(w("name"))
                if bookmark_name == GO_BACK_BOOKMARK:
                    return Result.empty()
                return Result(BookmarkStart(bookmark_name))
            case ElementKind.ALTERNATE_CONTENT:
                fallback = element.find(mc("Fallback"))
                return self.read_xml_elements(fallback if fallback is not None else [])
            case ElementKind.STRUCTURED_DOCUMENT_TAG:
                return self._read_sdt(element)
            case ElementKind.INSERTION:
                return self._read_revision(element, Ins)
            case ElementKind.DELETION:
                return self._read_revision(element, Del)
            case ElementKind.PICTURE:
                return self.read_xml_elements(element).to_extra()
            case ElementKind.SHAPE:
                return self._read_shape(element)
            case ElementKind.INLINE | ElementKind.ANCHOR:
                return self._read_drawing(element)
            case ElementKind.IMAGE_DATA:
                return self._read_image_data(element)
            case (
                ElementKind.OBJECT
                | ElementKind.SMART_TAG
                | ElementKind.DRAWING
                | ElementKind.ROUND_RECT
                | ElementKind.TEXT_BOX
                | ElementKind.TEXT_BOX_CONTENT
                | ElementKind.GROUP
                | ElementKind.RECT
            ):
                return self.read_xml_elements(element)

        return Result.empty()

    # -------------------------------------------------------------------------
    # Paragraphs and runs
    # -------------------------------------------------------------------------

    def _read_paragraph(self, element: etree._Element) -> Result:
        ppr = element.find(w("pPr"))
        is_deleted = find(find(ppr, w("rPr")), w("del")) is not None

        if is_deleted:
            self._deleted_paragraph_contents.extend(element)
            return Result.empty()

        children = list(element)
        if self._deleted_paragraph_contents:
            children = self._deleted_paragraph_contents + children
            self._deleted_paragraph_contents = []

        return Result.map_both(
            self._read_paragraph_properties(ppr),
            self.read_xml_elements(children),
            lambda properties, nodes: Paragraph(nodes, properties),
        ).insert_extra()

    def _read_paragraph_properties(self, ppr: etree._Element | None) -> Result:
        def create(style: StyleReference) -> ParagraphProperties:
            return ParagraphProperties(
                style_id=style.style_id,
                style_name=style.name,
                alignment=child_attribute(ppr, w("jc")),
                numbering=read_numbering_properties(
                    style.style_id, find(ppr, w("numPr")), self._numbering
                ),
                indent=read_indent(find(ppr, w("ind"))),
                spacing=read_spacing(find(ppr, w("spacing"))),
            )

        style_id = child_attribute(ppr, w("pStyle"))
        return self._styles.resolve_paragraph_style(style_id).map(create)

    def _read_run(self, element: etree._Element) -> Result:
        def create(properties: RunProperties, children: list[Node]) -> Run:
            hyperlink = self._fields.current_hyperlink()
            if hyperlink is not None and children:
                children = [Hyperlink(children, href=hyperlink.href, anchor=hyperlink.anchor)]
            return Run(children, properties)

        return Result.map_both(
            self._read_run_properties(element.find(w("rPr"))),
            self.read_xml_elements(element),
            create,
        )

    def _read_run_properties(self, rpr: etree._Element | None) -> Result:
        def create(style: StyleReference) -> RunProperties:
            return RunProperties(
                style_id=style.style_id,
                style_name=style.name,
                vertical_alignment=child_attribute(rpr, w("vertAlign")),
                font=child_attribute(rpr, w("rFonts"), w("ascii")),
                font_size=half_points_to_points(child_attribute(rpr, w("sz"))),
                color=child_attribute(rpr, w("color")),
                is_bold=read_boolean_element(find(rpr, w("b"))),
                is_underline=_read_underline(find(rpr, w("u"))),
                is_italic=read_boolean_element(find(rpr, w("i"))),
                is_strikethrough=read_boolean_element(find(rpr, w("strike"))),
                is_all_caps=read_boolean_element(find(rpr, w("caps"))),
                is_small_caps=read_boolean_element(find(rpr, w("smallCaps"))),
                highlight=_read_highlight(child_attribute(rpr, w("highlight"))),
                shading=child_attribute(rpr, w("shd"), w("fill")),
            )

        style_id = child_attribute(rpr, w("rStyle"))
        return self._styles.resolve_run_style(style_id).map(create)

    def _read_field_char(self, element: etree._Element) -> Result:
        field_type = element.get(w("fldCharType"))
        if field_type == "begin":
            self._fields.begin(element)
        elif field_type == "separate":
            self._fields.separate()
        elif field_type == "end":
            checkbox = self._fields.end()
            if checkbox is not None:
                return Result(checkbox)
        return Result.empty()

    def _read_hyperlink(self, element: etree._Element) -> Result:
        relationship_id = element.get(r("id"))
        anchor = element.get(w("anchor"))
        target_frame = element.get(w("tgtFrame")) or None

        def create(children: list[Node]) -> Hyperlink | list[Node]:
            if relationship_id:
                href = self._relationships.find_target_by_relationship_id(relationship_id)
                if href is not None and anchor:
                    href = replace_fragment(href, anchor)
                return Hyperlink(children, href=href, target_frame=target_frame)
            if anchor:
                return Hyperlink(children, anchor=anchor, target_frame=target_frame)
            return children

        return self.read_xml_elements(element).map(create)

    def _read_break(self, element: etree._Element) -> Result:
        break_type = element.get(w("type"))
        if break_type is None or break_type == "textWrapping":
            return Result(Break(BreakType.LINE))
        if break_type == "page":
            return Result(Break(BreakType.PAGE))
        if break_type == "column":
            return Result(Break(BreakType.COLUMN))
        return Result.empty([_warn(f"Unsupported break type: {break_type}")])

    def _read_sdt(self, element: etree._Element) -> Result:
        checkbox = find(element.find(w("sdtPr")), w14("checkbox"))
        if checkbox is not None:
            checked = checkbox.find(w14("checked"))
            is_checked = checked is not None and is_true_value(checked.get(w14("val")))
            return Result(Checkbox(is_checked))

        content = element.find(w("sdtContent"))
        return self.read_xml_elements(content if content is not None else [])

    def _read_revision(self, element: etree._Element, node_class: type[Ins] | type[Del]) -> Result:
        first_child = next((child for child in element if is_element(child)), None)
        change = find(find(first_child, w("rPr")), w("rPrChange"))

        def attribute(name: str) -> str | None:
            value = element.get(w(name))
            if value:
                return value
            return change.get(w(name)) if change is not None else None

        author, date, change_id = attribute("author"), attribute("date"), attribute("id")

        # The revision sits inside a run carrying the element's own w:rPr
        def create(properties: RunProperties, children: list[Node]) -> Run:
            revision = node_class(children, author=author, date=date, change_id=change_id)
            return Run([revision], properties)

        return Result.map_both(
            self._read_run_properties(element.find(w("rPr"))),
            self.read_xml_elements(element),
            create,
        )

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def _read_table(self, element: etree._Element) -> Result:
        properties = self._read_table_properties(element.find(w("tblPr")))

        # Nested tables get their own markers; the enclosing table's are restored after
        outer_merges = self._vertical_merges
        self._vertical_merges = merges = {}
        try:
            children = self.read_xml_elements(element)
        finally:
            self._vertical_merges = outer_merges

        return children.flat_map(lambda rows: calculate_row_spans(rows, merges)).flat_map(
            lambda rows: properties.map(lambda props: Table(rows, props))
        )

    def _read_table_properties(self, tbl_pr: etree._Element | None) -> Result:
        borders = find(tbl_pr, w("tblBorders"))
        first_border = None
        if borders is not None:
            first_border = next((child for child in borders if is_element(child)), None)
        is_bordered = (
            first_border is not None
            and len(first_border.attrib) > 0
            and first_border.get(w("val")) not in ("nil", "none")
        )

        style_id = child_attribute(tbl_pr, w("tblStyle"))
        return self._styles.resolve_table_style(style_id).map(
            lambda style: TableProperties(
                style_id=style.style_id, style_name=style.name, is_bordered=is_bordered
            )
        )

    def _read_table_row(self, element: etree._Element) -> Result:
        is_header = find(element.find(w("trPr")), w("tblHeader")) is not None
        return self.read_xml_elements(element).map(
            lambda children: TableRow(children, is_header=is_header)
        )

    def _read_table_cell(self, element: etree._Element) -> Result:
        tc_pr = element.find(w("tcPr"))

        grid_span = child_attribute(tc_pr, w("gridSpan"))
        col_span = int(grid_span) if grid_span and grid_span.isdigit() and int(grid_span) > 0 else 1

        width = None
        tc_w = find(tc_pr, w("tcW"))
        if tc_w is not None and tc_w.get(w("type"), "dxa") == "dxa":
            try:
                width = convert_to_pixels(tc_w.get(w("w"), ""), "dxa")
            except ValueError:
                width = None

        borders = {}
        tc_borders = find(tc_pr, w("tcBorders"))
        if tc_borders is not None:
            for side in tc_borders:
                if is_element(side):
                    borders[etree.QName(side).localname] = CellBorder(
                        style=side.get(w("val")),
                        size=side.get(w("sz")),
                        color=side.get(w("color")),
                    )

        vertical_merge = read_vertical_merge(tc_pr)
        background_color = child_attribute(tc_pr, w("shd"), w("fill"))

        def create(children: list[Node]) -> TableCell:
            cell = TableCell(
                children,
                col_span=col_span,
                width=width,
                background_color=background_color,
                borders=borders,
            )
            if vertical_merge is not VerticalMerge.NONE and self._vertical_merges is not None:
                self._vertical_merges[id(cell)] = vertical_merge
            return cell

        return self.read_xml_elements(element).map(create)

    # -------------------------------------------------------------------------
    # Images
    # -------------------------------------------------------------------------

    def _read_shape(self, element: etree._Element) -> Result:
        image_data = element.find(v("imagedata"))
        if image_data is None:
            return self.read_xml_elements(element)
        width, height = extract_shape_dimensions(element.get("style") or "")
        return self._read_image_data(image_data, width, height)

    def _read_image_data(
        self,
        element: etree._Element,
        width: float | None = None,
        height: float | None = None,
    ) -> Result:
        relationship_id = element.get(r("id"))
        if not relationship_id:
            return Result.empty(
                [_warn("A v:imagedata element without a relationship ID was ignored")]
            )

        image_file = self._find_embedded_image_file(relationship_id)
        if image_file is None:
            return Result.empty(
                [_warn(f"Could not find image file for relationship ID {relationship_id}")]
            )
        return self._read_image(image_file, element.get(o("title")), width, height)

    def _read_drawing(self, element: etree._Element) -> Result:
        blips = [
            blip
            for blip_fill in element.iter(pic("blipFill"))
            for blip in blip_fill.iter(a("blip"))
        ]
        return Result.combine([self._read_blip(element, blip) for blip in blips])

    def _read_blip(self, element: etree._Element, blip: etree._Element) -> Result:
        doc_pr = element.find(wp("docPr"))
        description = doc_pr.get("descr") if doc_pr is not None else None
        title = doc_pr.get("title") if doc_pr is not None else None
        alt_text = title if _is_blank(description) else description

        extent = element.find(wp("extent"))
        width = height = None
        if extent is not None:
            cx, cy = extent.get("cx"), extent.get("cy")
            width = convert_to_pixels(cx, "emu") if cx else None
            height = convert_to_pixels(cy, "emu") if cy else None

        image_file = self._find_blip_image_file(blip)
        if image_file is None:
            return Result.empty([_warn("Could not find image file for a:blip element")])

        return self._read_image(
            image_file,
            alt_text,
            width,
            height,
            layout=_read_image_layout(element),
            crop=_read_crop(blip),
        )

    def _find_blip_image_file(self, blip: etree._Element) -> ImageFile | None:
        embed_id = blip.get(r("embed"))
        link_id = blip.get(r("link"))
        if embed_id:
            return self._find_embedded_image_file(embed_id)
        if link_id:
            path = self._relationships.find_target_by_relationship_id(link_id)
            if path is None:
                return None
            return ImageFile(path, partial(self._files.read, path))
        return None

    def _find_embedded_image_file(self, relationship_id: str) -> ImageFile | None:
        target = self._relationships.find_target_by_relationship_id(relationship_id)
        if target is None:
            return None
        path = join_part_path(_EMBEDDED_IMAGE_BASE, target)
        read = partial(self._package.read_bytes, path) if self._package is not None else None
        return ImageFile(path, read)

    def _read_image(
        self,
        image_file: ImageFile,
        alt_text: str | None,
        width: float | None,
        height: float | None,
        layout: ImageLayout | None = None,
        crop: ImageCrop | None = None,
    ) -> Result:
        content_type = self._content_types.find_content_type(image_file.path)
        image = Image(
            read=image_file.read,
            path=image_file.path,
            content_type=content_type,
            alt_text=alt_text,
            width=width,
            height=height,
            crop=crop,
            layout=layout,
        )
        messages = []
        if content_type not in SUPPORTED_IMAGE_TYPES:
            messages.append(
                _warn(f"Image of type {content_type} is unlikely to display in web browsers")
            )
        return Result(image, messages=messages)


def _read_position(position: etree._Element | None) -> tuple[str | None, int | None]:
    if position is None:
        return None, None
    offset_element = position.find(wp("posOffset"))
    offset = None
    if offset_element is not None and offset_element.text:
        try:
            offset = int(offset_element.text.strip())
        except ValueError:
            offset = None
    return position.get("relativeFrom"), offset


def _read_image_layout(element: etree._Element) -> ImageLayout:
    floating = None
    wrapping_style = None
    if element.tag == wp("inline"):
        floating = "inline"
    elif element.tag == wp("anchor"):
        floating = "floating"
        for child in element:
            if is_element(child) and child.tag.startswith(wp("wrap")):
                wrapping_style = etree.QName(child).localname
                break

    relative_from_h, offset_h = _read_position(element.find(wp("positionH")))
    relative_from_v, offset_v = _read_position(element.find(wp("positionV")))
    return ImageLayout(
        floating=floating,
        wrapping_style=wrapping_style,
        relative_from_h=relative_from_h,
        relative_from_v=relative_from_v,
        position_offset_h=offset_h,
        position_offset_v=offset_v,
    )


def _read_crop(blip: etree._Element) -> ImageCrop | None:
    """Read ``a:srcRect`` next to a blip; edges are in thousandths of a percent."""
    parent = blip.getparent()
    src_rect = parent.find(a("srcRect")) if parent is not None else None
    if src_rect is None:
        return None

    def edge(name: str) -> float:
        value = src_rect.get(name)
        try:
            return int(value) / 1000 if value else 0.0
        except ValueError:
            return 0.0

    crop = ImageCrop(left=edge("l"), top=edge("t"), right=edge("r"), bottom=edge("b"))
    if crop == ImageCrop():
        return None
    return crop
