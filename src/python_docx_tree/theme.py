"""
Theme font reader for word/theme/theme1.xml.

Document defaults often name fonts indirectly ("minorHAnsi"); the theme's
font scheme says which typefaces those references stand for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lxml import etree

from .constants import a

logger = logging.getLogger(__name__)

_MINOR_REFERENCES = frozenset(["minorHAnsi", "minorEastAsia", "minorBidi", "minorAscii"])
_MAJOR_REFERENCES = frozenset(["majorHAnsi", "majorEastAsia", "majorBidi", "majorAscii"])


@dataclass(frozen=True)
class Theme:
    """Fonts of a theme's font scheme.

    Attributes:
        name: Theme name
        major_font: Latin typeface for headings
        minor_font: Latin typeface for body text
    """

    name: str = "Unknown Theme"
    major_font: str | None = None
    minor_font: str | None = None

    def resolve_font(self, reference: str | None) -> str | None:
        """Resolve a theme font reference such as "minorHAnsi" to a typeface."""
        if reference in _MINOR_REFERENCES:
            return self.minor_font
        if reference in _MAJOR_REFERENCES:
            return self.major_font
        return None


def read_theme_xml(root: etree._Element | None) -> Theme | None:
    """Read the font scheme of a theme part.

    Returns:
        The theme, or None if the part has no ``a:fontScheme``
    """
    if root is None:
        return None

    theme_elements = root.find(a("themeElements"))
    if theme_elements is None:
        return None
    font_scheme = theme_elements.find(a("fontScheme"))
    if font_scheme is None:
        return None

    theme = Theme(
        name=root.get("name") or "Unknown Theme",
        major_font=_latin_typeface(font_scheme.find(a("majorFont"))),
        minor_font=_latin_typeface(font_scheme.find(a("minorFont"))),
    )
    logger.debug(f"Read theme '{theme.name}' (major={theme.major_font}, minor={theme.minor_font})")
    return theme


def _latin_typeface(font: etree._Element | None) -> str | None:
    if font is None:
        return None
    latin = font.find(a("latin"))
    return latin.get("typeface") if latin is not None else None
