"""
Style model classes for Word document style resolution.

Provides data classes for the entries of the style registry, the formatting
properties a style carries, and the document-wide defaults read from
``w:docDefaults``.

These models are produced by ``styles.py`` from word/styles.xml.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum


class StyleType(Enum):
    """Types of styles in Word documents.

    Attributes:
        PARAGRAPH: Applied to whole paragraphs
        CHARACTER: Applied to runs of text within paragraphs
        TABLE: Applied to tables
        NUMBERING: Applied to numbered/bulleted lists
    """

    PARAGRAPH = "paragraph"
    CHARACTER = "character"
    TABLE = "table"
    NUMBERING = "numbering"


@dataclass(frozen=True)
class Spacing:
    """Paragraph spacing, raw twentieths of a point (``line`` depends on ``line_rule``)."""

    before: str | None = None
    after: str | None = None
    line: str | None = None
    line_rule: str | None = None


@dataclass(frozen=True)
class Indent:
    """Paragraph indentation, raw twentieths of a point."""

    left: str | None = None
    right: str | None = None
    start: str | None = None
    end: str | None = None
    first_line: str | None = None
    hanging: str | None = None


@dataclass(frozen=True)
class NumberingReference:
    """A ``w:numPr`` pointer: numbering instance ID plus level index."""

    num_id: str | None = None
    level: str | None = None


@dataclass(frozen=True)
class StyleProperties:
    """Formatting properties a style sets.

    All properties are optional: None means "not set here", so the value is
    inherited from the style this one is based on.

    Attributes:
        font_size: Font size in points
        color: Text color as a hex string or "auto"
        underline: Whether text is underlined
        bold: Whether text is bold
        italic: Whether text is italic
        strike: Whether text has strikethrough
        is_all_caps: Whether text is in all capitals
        is_small_caps: Whether text is in small capitals
        vertical_alignment: "superscript", "subscript" or "baseline"
        font: Font family name
        highlight: Highlight color name
        shading: Shading fill color
        spacing: Paragraph spacing
        alignment: Paragraph justification
        indent: Paragraph indentation
        numbering: Numbering the style attaches to its paragraphs
    """

    font_size: float | None = None
    color: str | None = None
    underline: bool | None = None
    bold: bool | None = None
    italic: bool | None = None
    strike: bool | None = None
    is_all_caps: bool | None = None
    is_small_caps: bool | None = None
    vertical_alignment: str | None = None
    font: str | None = None
    highlight: str | None = None
    shading: str | None = None
    spacing: Spacing | None = None
    alignment: str | None = None
    indent: Indent | None = None
    numbering: NumberingReference | None = None

    def inherit(self, base: StyleProperties) -> StyleProperties:
        """Fill unset properties from ``base``; values set here always win."""
        inherited = {
            f.name: getattr(base, f.name)
            for f in fields(self)
            if getattr(self, f.name) is None and getattr(base, f.name) is not None
        }
        return replace(self, **inherited) if inherited else self


@dataclass
class Style:
    """A style registry entry.

    Attributes:
        style_id: Internal identifier used in document references
        style_type: Type of style, or None for a type this reader doesn't know
        name: Display name shown in Word's UI
        based_on: style_id of the parent style to inherit from
        properties: The style's own properties, before inheritance
    """

    style_id: str
    style_type: StyleType | None
    name: str | None = None
    based_on: str | None = None
    properties: StyleProperties = field(default_factory=StyleProperties)


@dataclass(frozen=True)
class NumberingStyle:
    """A numbering style: the numbering instance its paragraphs use."""

    style_id: str
    num_id: str | None = None
    level: str | None = None


@dataclass(frozen=True)
class CustomStyle:
    """A style exposed to downstream consumers, with inherited properties resolved."""

    name: str | None
    style_type: str | None
    properties: StyleProperties


@dataclass(frozen=True)
class FontSet:
    """Font names (or theme font references) per script."""

    ascii: str | None = None
    east_asia: str | None = None
    h_ansi: str | None = None
    cs: str | None = None


@dataclass(frozen=True)
class Language:
    val: str | None = None
    east_asia: str | None = None
    bidi: str | None = None


@dataclass(frozen=True)
class CharacterDefaults:
    """Run defaults from ``w:rPrDefault``.

    ``resolved_fonts`` and ``primary_font`` are only filled when a theme part
    is available to resolve theme font references.
    """

    font_size: float | None = None
    font_theme: FontSet | None = None
    font: FontSet | None = None
    language: Language | None = None
    resolved_fonts: FontSet | None = None
    primary_font: str | None = None


@dataclass(frozen=True)
class ParagraphDefaults:
    """Paragraph defaults from ``w:pPrDefault``."""

    spacing: Spacing | None = None
    indent: Indent | None = None


@dataclass(frozen=True)
class DocumentDefaults:
    character: CharacterDefaults | None = None
    paragraph: ParagraphDefaults | None = None
