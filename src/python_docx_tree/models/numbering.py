"""
Numbering model classes for list level definitions.

A paragraph's numbering reference (numId + ilvl) resolves through a numbering
instance to an abstract numbering definition, whose levels are described by
:class:`LevelDefinition`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

BULLET_FORMAT = "bullet"


@dataclass(frozen=True)
class BulletFont:
    """Fonts a bullet level asks for in its ``w:rFonts`` element."""

    ascii: str | None = None
    h_ansi: str | None = None
    cs: str | None = None
    hint: str | None = None

    def uses(self, family: str) -> bool:
        """Return True if the ASCII or high-ANSI font is ``family``."""
        return self.ascii == family or self.h_ansi == family


@dataclass(frozen=True)
class LevelIndent:
    """Indentation of a list level, raw twentieths of a point."""

    left: str | None = None
    hanging: str | None = None
    first_line: str | None = None


@dataclass(frozen=True)
class LevelDefinition:
    """Formatting rules for one level of a numbered or bulleted list.

    Attributes:
        level: Level index as written in the document ("0" to "8")
        format: ``w:numFmt`` value (e.g. "decimal", "bullet", "lowerRoman")
        delimiter: ``w:lvlText`` value (e.g. "%1.", or the bullet glyph)
        paragraph_style_id: Paragraph style linked to this level, if any
        justification: ``w:lvlJc`` value
        suffix: ``w:suff`` value ("tab", "space" or "nothing")
        is_tentative: Whether Word marked the level as tentative
        start_value: First number of the level
        bullet_font: Fonts used to draw the bullet or number
        indentation: Indentation attached to the level

    Example:
        >>> level = LevelDefinition(level="0", format="decimal", delimiter="%1.")
        >>> level.is_ordered
        True
    """

    level: str
    format: str | None = None
    delimiter: str | None = None
    paragraph_style_id: str | None = None
    justification: str | None = None
    suffix: str | None = None
    is_tentative: bool = False
    start_value: int = 1
    bullet_font: BulletFont | None = None
    indentation: LevelIndent | None = None

    @property
    def is_bullet(self) -> bool:
        return self.format == BULLET_FORMAT

    @property
    def is_ordered(self) -> bool:
        return self.format != BULLET_FORMAT


@dataclass
class AbstractNumbering:
    """An abstract numbering definition.

    Either carries its own levels, or points at a numbering style through
    ``num_style_link``, in which case the levels come from whatever numbering
    instance that style names.
    """

    abstract_num_id: str
    levels: dict[str, LevelDefinition] = field(default_factory=dict)
    num_style_link: str | None = None
