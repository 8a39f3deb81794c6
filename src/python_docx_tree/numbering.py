"""
NumberingRegistry class for resolving list levels from word/numbering.xml.

A paragraph names a numbering instance (``w:numId``) and a level
(``w:ilvl``). The instance points at an abstract numbering definition, which
either lists its levels or links to a numbering style
(``w:numStyleLink``) whose own ``w:numId`` carries on the lookup.
"""

from __future__ import annotations

import logging

from lxml import etree

from .constants import w
from .errors import NumberingConfigurationError
from .models.numbering import AbstractNumbering, BulletFont, LevelDefinition, LevelIndent
from .ooxml import child_attribute, find
from .styles import StyleRegistry

logger = logging.getLogger(__name__)

BULLET = "•"
# Wingdings bullets have no portable Unicode equivalent
WINGDINGS_BULLET = ""

_BULLET_FONTS = ("Symbol", "Wingdings")


class NumberingRegistry:
    """Lookup of list level definitions.

    Example:
        >>> numbering = read_numbering_xml(root, styles)
        >>> numbering.find_level("1", "0").format
        'decimal'

    Args:
        nums: Numbering instance ID to abstract numbering ID
        abstract_nums: Abstract numbering definitions by ID
        styles: Registry used to follow ``w:numStyleLink`` references
    """

    def __init__(
        self,
        nums: dict[str, str],
        abstract_nums: dict[str, AbstractNumbering],
        styles: StyleRegistry,
    ) -> None:
        self._nums = dict(nums)
        self._abstract_nums = dict(abstract_nums)
        self._styles = styles
        self._levels_by_paragraph_style_id: dict[str, LevelDefinition] = {}
        for abstract_num in self._abstract_nums.values():
            for level in abstract_num.levels.values():
                if level.paragraph_style_id is not None:
                    self._levels_by_paragraph_style_id.setdefault(level.paragraph_style_id, level)

    @classmethod
    def empty(cls) -> NumberingRegistry:
        """A registry for documents without a numbering part."""
        return cls({}, {}, StyleRegistry.empty())

    def find_level(self, num_id: str, level: str | int) -> LevelDefinition | None:
        """Resolve a (numId, level) pair to its level definition.

        Style links are followed through the style registry. A link that leads
        back to a numbering instance already visited, or to a numbering style
        that doesn't exist, resolves to None.

        Returns:
            The level definition, or None if it can't be resolved
        """
        visited: set[str] = set()
        level = str(level)
        current: str | None = num_id

        while current is not None:
            if current in visited:
                logger.debug(f"Numbering style link cycle through numId {current}")
                return None
            visited.add(current)

            abstract_num_id = self._nums.get(current)
            if abstract_num_id is None:
                return None
            abstract_num = self._abstract_nums.get(abstract_num_id)
            if abstract_num is None:
                return None
            if abstract_num.num_style_link is None:
                return abstract_num.levels.get(level)

            style = self._styles.find_numbering_style_by_id(abstract_num.num_style_link)
            if style is None:
                logger.debug(f"Numbering style '{abstract_num.num_style_link}' is not defined")
                return None
            current = style.num_id

        return None

    def find_level_by_paragraph_style_id(self, style_id: str) -> LevelDefinition | None:
        """Get the level linked to a paragraph style through ``w:pStyle``.

        When several levels name the same style, the first one read wins.
        """
        return self._levels_by_paragraph_style_id.get(style_id)

    def is_visible_bullet_list(self, num_id: str, level: str | int) -> bool:
        """Whether a level draws a bullet a reader would see.

        The level must be a non-tentative bullet with either bullet text or
        a bullet font (Symbol or Wingdings).
        """
        level_info = self.find_level(num_id, level)
        if level_info is None or not level_info.is_bullet or level_info.is_tentative:
            return False
        has_text = bool(level_info.delimiter)
        has_bullet_font = level_info.bullet_font is not None and any(
            level_info.bullet_font.uses(font) for font in _BULLET_FONTS
        )
        return has_text or has_bullet_font

    def get_bullet_character(self, num_id: str, level: str | int) -> str | None:
        """The glyph to draw for a bullet level, None if the level isn't a bullet."""
        level_info = self.find_level(num_id, level)
        if level_info is None or not level_info.is_bullet:
            return None
        if level_info.delimiter:
            return level_info.delimiter
        font = level_info.bullet_font
        if font is not None:
            if font.uses("Symbol"):
                return BULLET
            if font.uses("Wingdings"):
                return WINGDINGS_BULLET
        return BULLET

    @property
    def numbering_styles(self) -> dict[str, AbstractNumbering]:
        """Abstract numbering definitions by ID, for downstream consumers."""
        return dict(self._abstract_nums)


def read_numbering_xml(root: etree._Element, styles: StyleRegistry | None) -> NumberingRegistry:
    """Build a numbering registry from a parsed word/numbering.xml.

    Raises:
        NumberingConfigurationError: If ``styles`` is None
    """
    if styles is None:
        raise NumberingConfigurationError()

    abstract_nums = {}
    for element in root.iter(w("abstractNum")):
        abstract_num_id = element.get(w("abstractNumId"))
        if abstract_num_id is not None:
            abstract_nums[abstract_num_id] = _read_abstract_num(abstract_num_id, element)

    nums = {}
    for element in root.iter(w("num")):
        num_id = element.get(w("numId"))
        abstract_num_id = child_attribute(element, w("abstractNumId"))
        if num_id is not None and abstract_num_id is not None:
            nums[num_id] = abstract_num_id

    logger.debug(f"Read {len(nums)} numbering instances, {len(abstract_nums)} abstract")
    return NumberingRegistry(nums, abstract_nums, styles)


def _read_abstract_num(abstract_num_id: str, element: etree._Element) -> AbstractNumbering:
    levels: dict[str, LevelDefinition] = {}
    for level_element in element.iter(w("lvl")):
        level = _read_level(level_element)
        levels[level.level] = level

    return AbstractNumbering(
        abstract_num_id=abstract_num_id,
        levels=levels,
        num_style_link=child_attribute(element, w("numStyleLink")),
    )


def _read_level(element: etree._Element) -> LevelDefinition:
    start = child_attribute(element, w("start"))
    try:
        start_value = int(start) if start else 1
    except ValueError:
        start_value = 1

    bullet_font = None
    fonts = find(element.find(w("rPr")), w("rFonts"))
    if fonts is not None:
        bullet_font = BulletFont(
            ascii=fonts.get(w("ascii")),
            h_ansi=fonts.get(w("hAnsi")),
            cs=fonts.get(w("cs")),
            hint=fonts.get(w("hint")),
        )

    indentation = None
    ind = find(element.find(w("pPr")), w("ind"))
    if ind is not None:
        indentation = LevelIndent(
            left=ind.get(w("left")),
            hanging=ind.get(w("hanging")),
            first_line=ind.get(w("firstLine")),
        )

    return LevelDefinition(
        level=element.get(w("ilvl"), "0"),
        format=child_attribute(element, w("numFmt")),
        delimiter=child_attribute(element, w("lvlText")),
        paragraph_style_id=child_attribute(element, w("pStyle")),
        justification=child_attribute(element, w("lvlJc")),
        suffix=child_attribute(element, w("suff")),
        is_tentative=element.get(w("tentative")) in ("1", "true"),
        start_value=start_value,
        bullet_font=bullet_font,
        indentation=indentation,
    )
