"""
StyleRegistry class for resolving styles from word/styles.xml.

This module reads style definitions (paragraph, character, table and
numbering styles) and document defaults, and resolves a style's formatting
through its ``w:basedOn`` chain.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from lxml import etree

from .constants import w
from .models.style import (
    CharacterDefaults,
    CustomStyle,
    DocumentDefaults,
    FontSet,
    Language,
    NumberingReference,
    NumberingStyle,
    ParagraphDefaults,
    Style,
    StyleProperties,
    StyleType,
)
from .ooxml import child_attribute, find, read_indent, read_optional_boolean, read_spacing
from .results import Result, warning
from .theme import Theme
from .units import half_points_to_points

logger = logging.getLogger(__name__)

# Style sets a w:basedOn reference is looked up in, in order
_INHERITABLE_TYPES = (StyleType.PARAGRAPH, StyleType.CHARACTER, StyleType.TABLE)


@dataclass(frozen=True)
class StyleReference:
    """A style ID as referenced by content, with the name it resolved to."""

    style_id: str | None = None
    name: str | None = None


class StyleRegistry:
    """Lookup and inheritance resolution for a document's styles.

    Example:
        >>> styles = read_styles_xml(root)
        >>> styles.find_paragraph_style_by_id("Heading1").name
        'heading 1'
        >>> styles.resolve_properties("Heading1").font_size
        16.0

    Attributes:
        document_defaults: Defaults from ``w:docDefaults``, None if absent
    """

    def __init__(
        self,
        styles: list[Style] | None = None,
        numbering_styles: dict[str, NumberingStyle] | None = None,
        document_defaults: DocumentDefaults | None = None,
    ) -> None:
        self._by_type: dict[StyleType, dict[str, Style]] = {t: {} for t in StyleType}
        self._all: dict[str, Style] = {}
        for style in styles or []:
            if style.style_type is not None:
                self._by_type[style.style_type][style.style_id] = style
            self._all[style.style_id] = style
        self._numbering_styles = dict(numbering_styles or {})
        self.document_defaults = document_defaults
        self._resolved: dict[tuple[StyleType | None, str], StyleProperties] = {}
        self._custom_styles: dict[str, CustomStyle] | None = None

    @classmethod
    def empty(cls) -> StyleRegistry:
        """A registry for documents without a styles part."""
        return cls()

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def find_paragraph_style_by_id(self, style_id: str) -> Style | None:
        return self._by_type[StyleType.PARAGRAPH].get(style_id)

    def find_character_style_by_id(self, style_id: str) -> Style | None:
        return self._by_type[StyleType.CHARACTER].get(style_id)

    def find_table_style_by_id(self, style_id: str) -> Style | None:
        return self._by_type[StyleType.TABLE].get(style_id)

    def find_numbering_style_by_id(self, style_id: str) -> NumberingStyle | None:
        return self._numbering_styles.get(style_id)

    def __contains__(self, style_id: str) -> bool:
        return style_id in self._all

    def __len__(self) -> int:
        return len(self._all)

    # -------------------------------------------------------------------------
    # Style references
    # -------------------------------------------------------------------------

    def resolve_paragraph_style(self, style_id: str | None) -> Result:
        """Resolve a ``w:pStyle`` reference to a :class:`StyleReference`.

        An ID that names no paragraph style gives a null name and exactly one
        warning; it never aborts the read.
        """
        return self._resolve_reference(style_id, "Paragraph", self.find_paragraph_style_by_id)

    def resolve_run_style(self, style_id: str | None) -> Result:
        """Resolve a ``w:rStyle`` reference to a :class:`StyleReference`."""
        return self._resolve_reference(style_id, "Run", self.find_character_style_by_id)

    def resolve_table_style(self, style_id: str | None) -> Result:
        """Resolve a ``w:tblStyle`` reference to a :class:`StyleReference`."""
        return self._resolve_reference(style_id, "Table", self.find_table_style_by_id)

    def _resolve_reference(
        self, style_id: str | None, kind: str, lookup: Callable[[str], Style | None]
    ) -> Result:
        if not style_id:
            return Result(StyleReference(style_id or None, None))
        style = lookup(style_id)
        if style is None:
            message = warning(
                f"{kind} style with ID {style_id} was referenced but not defined in the document"
            )
            return Result(StyleReference(style_id, None), messages=[message])
        return Result(StyleReference(style_id, style.name))

    # -------------------------------------------------------------------------
    # Inheritance
    # -------------------------------------------------------------------------

    def resolve_properties(self, style_id: str) -> StyleProperties | None:
        """Get a style's properties with its ``w:basedOn`` chain applied.

        The style's own values always win over inherited ones. A chain that
        loops back on itself is cut where it revisits a style.

        Returns:
            The resolved properties, or None if there is no such style
        """
        style = self._all.get(style_id)
        if style is None:
            return None
        return self._resolve(style, frozenset())

    def _find_base_style(self, style_id: str) -> Style | None:
        for style_type in _INHERITABLE_TYPES:
            style = self._by_type[style_type].get(style_id)
            if style is not None:
                return style
        return None

    def _resolve(self, style: Style, visiting: frozenset) -> StyleProperties:
        key = (style.style_type, style.style_id)
        cached = self._resolved.get(key)
        if cached is not None:
            return cached
        if key in visiting:
            logger.debug(f"Style inheritance cycle at '{style.style_id}'")
            return style.properties

        properties = style.properties
        if style.based_on:
            base = self._find_base_style(style.based_on)
            if base is not None:
                properties = properties.inherit(self._resolve(base, visiting | {key}))
            else:
                logger.debug(f"Style '{style.style_id}' is based on unknown style '{style.based_on}'")

        self._resolved[key] = properties
        return properties

    @property
    def custom_styles(self) -> dict[str, CustomStyle]:
        """Every style, by ID, with name, type and resolved properties."""
        if self._custom_styles is None:
            self._custom_styles = {
                style_id: CustomStyle(
                    name=style.name,
                    style_type=style.style_type.value if style.style_type else None,
                    properties=self._resolve(style, frozenset()),
                )
                for style_id, style in self._all.items()
            }
        return self._custom_styles

    @property
    def numbering_styles(self) -> dict[str, NumberingStyle]:
        return dict(self._numbering_styles)


# =============================================================================
# Reading
# =============================================================================


def read_styles_xml(root: etree._Element, theme: Theme | None = None) -> StyleRegistry:
    """Build a style registry from a parsed word/styles.xml.

    Args:
        root: The ``w:styles`` element
        theme: Theme used to resolve font references in the document defaults

    Returns:
        The populated registry
    """
    styles: list[Style] = []
    numbering_styles: dict[str, NumberingStyle] = {}

    for element in root.iter(w("style")):
        style = _read_style_element(element)
        if style is None:
            continue
        styles.append(style)
        if style.style_type is StyleType.NUMBERING:
            numbering_styles[style.style_id] = _read_numbering_style(style.style_id, element)

    registry = StyleRegistry(
        styles,
        numbering_styles,
        _read_document_defaults(root.find(w("docDefaults")), theme),
    )
    logger.debug(f"Read {len(registry)} styles ({len(numbering_styles)} numbering styles)")
    return registry


def _read_style_element(element: etree._Element) -> Style | None:
    style_id = element.get(w("styleId"))
    if not style_id:
        logger.debug("Skipping style element without styleId attribute")
        return None

    style_type_str = element.get(w("type"))
    try:
        style_type: StyleType | None = StyleType(style_type_str)
    except ValueError:
        logger.debug(f"Unknown style type '{style_type_str}' for {style_id}")
        style_type = None

    return Style(
        style_id=style_id,
        style_type=style_type,
        name=child_attribute(element, w("name")),
        based_on=child_attribute(element, w("basedOn")),
        properties=_read_style_properties(element),
    )


def _read_numbering_reference(ppr: etree._Element | None) -> NumberingReference | None:
    num_pr = find(ppr, w("numPr"))
    num_id = child_attribute(num_pr, w("numId"))
    level = child_attribute(num_pr, w("ilvl"))
    if num_id is None and level is None:
        return None
    return NumberingReference(num_id=num_id, level=level)


def _read_numbering_style(style_id: str, element: etree._Element) -> NumberingStyle:
    reference = _read_numbering_reference(element.find(w("pPr")))
    if reference is None:
        return NumberingStyle(style_id)
    return NumberingStyle(style_id, num_id=reference.num_id, level=reference.level)


def _read_underline(rpr: etree._Element) -> bool | None:
    element = rpr.find(w("u"))
    if element is None:
        return None
    return element.get(w("val")) not in ("none", "0", "false")


def _read_style_properties(element: etree._Element) -> StyleProperties:
    """Read the formatting a style element sets itself (no inheritance)."""
    rpr = element.find(w("rPr"))
    ppr = element.find(w("pPr"))

    properties: dict = {"numbering": _read_numbering_reference(ppr)}

    if rpr is not None:
        fonts = rpr.find(w("rFonts"))
        font = None
        if fonts is not None:
            font = (
                fonts.get(w("ascii"))
                or fonts.get(w("eastAsia"))
                or fonts.get(w("hAnsi"))
                or fonts.get(w("cs"))
            )
        properties.update(
            font_size=half_points_to_points(child_attribute(rpr, w("sz"))),
            color=child_attribute(rpr, w("color")),
            underline=_read_underline(rpr),
            bold=read_optional_boolean(rpr, w("b")),
            italic=read_optional_boolean(rpr, w("i")),
            strike=read_optional_boolean(rpr, w("strike")),
            is_all_caps=read_optional_boolean(rpr, w("caps")),
            is_small_caps=read_optional_boolean(rpr, w("smallCaps")),
            vertical_alignment=child_attribute(rpr, w("vertAlign")),
            font=font,
            highlight=child_attribute(rpr, w("highlight")),
            shading=child_attribute(rpr, w("shd"), w("fill")),
        )

    if ppr is not None:
        spacing = ppr.find(w("spacing"))
        indent = ppr.find(w("ind"))
        properties.update(
            spacing=read_spacing(spacing) if spacing is not None else None,
            alignment=child_attribute(ppr, w("jc")),
            indent=read_indent(indent) if indent is not None else None,
        )

    return StyleProperties(**properties)


def _read_font_set(fonts: etree._Element, suffix: str = "", cs_attribute: str = "cs") -> FontSet:
    return FontSet(
        ascii=fonts.get(w(f"ascii{suffix}")),
        east_asia=fonts.get(w(f"eastAsia{suffix}")),
        h_ansi=fonts.get(w(f"hAnsi{suffix}")),
        cs=fonts.get(w(cs_attribute)),
    )


def _read_document_defaults(
    element: etree._Element | None, theme: Theme | None
) -> DocumentDefaults | None:
    if element is None:
        return None

    character = None
    rpr = find(find(element, w("rPrDefault")), w("rPr"))
    if rpr is not None:
        size = rpr.find(w("sz"))
        fonts = rpr.find(w("rFonts"))
        lang = rpr.find(w("lang"))

        font_theme = font = resolved = primary = None
        if fonts is not None:
            font_theme = _read_font_set(fonts, "Theme", "cstheme")
            font = _read_font_set(fonts)
            if theme is not None:
                resolved = FontSet(
                    ascii=theme.resolve_font(font_theme.ascii),
                    h_ansi=theme.resolve_font(font_theme.h_ansi),
                )
                primary = resolved.h_ansi or resolved.ascii or font.ascii or font.h_ansi

        character = CharacterDefaults(
            font_size=half_points_to_points(size.get(w("val"))) if size is not None else None,
            font_theme=font_theme,
            font=font,
            language=(
                Language(
                    val=lang.get(w("val")),
                    east_asia=lang.get(w("eastAsia")),
                    bidi=lang.get(w("bidi")),
                )
                if lang is not None
                else None
            ),
            resolved_fonts=resolved,
            primary_font=primary,
        )

    paragraph = None
    ppr = find(find(element, w("pPrDefault")), w("pPr"))
    if ppr is not None:
        spacing = ppr.find(w("spacing"))
        indent = ppr.find(w("ind"))
        paragraph = ParagraphDefaults(
            spacing=read_spacing(spacing) if spacing is not None else None,
            indent=read_indent(indent) if indent is not None else None,
        )

    return DocumentDefaults(character=character, paragraph=paragraph)
