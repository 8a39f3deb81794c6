"""
Content type lookup from [Content_Types].xml.

Every part in an OOXML package has a MIME type, given either by an Override
for the part name or by a Default for its file extension.
"""

from __future__ import annotations

import logging
import posixpath

from lxml import etree

from .constants import CONTENT_TYPES_NAMESPACE

logger = logging.getLogger(__name__)

CONTENT_TYPES_PART = "[Content_Types].xml"

# Extensions Word commonly embeds, for packages whose [Content_Types].xml
# doesn't declare them
_FALLBACK_IMAGE_TYPES = {
    "png": "image/png",
    "gif": "image/gif",
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    "bmp": "image/bmp",
    "emf": "image/x-emf",
    "wmf": "image/x-wmf",
    "svg": "image/svg+xml",
}


class ContentTypeMap:
    """Resolves package part names to content types.

    Example:
        >>> content_types = ContentTypeMap.from_element(root)
        >>> content_types.find_content_type("word/media/image1.png")
        'image/png'
    """

    def __init__(
        self,
        defaults: dict[str, str] | None = None,
        overrides: dict[str, str] | None = None,
    ) -> None:
        self._defaults = {ext.lower(): ct for ext, ct in (defaults or {}).items()}
        self._overrides = {name.lstrip("/"): ct for name, ct in (overrides or {}).items()}

    @classmethod
    def from_element(cls, root: etree._Element | None) -> ContentTypeMap:
        """Read a parsed [Content_Types].xml part (None gives an empty map)."""
        if root is None:
            return cls()

        defaults: dict[str, str] = {}
        overrides: dict[str, str] = {}
        for element in root:
            if not isinstance(element.tag, str):
                continue
            content_type = element.get("ContentType")
            if content_type is None:
                continue
            if element.tag == f"{{{CONTENT_TYPES_NAMESPACE}}}Default":
                extension = element.get("Extension")
                if extension:
                    defaults[extension] = content_type
            elif element.tag == f"{{{CONTENT_TYPES_NAMESPACE}}}Override":
                part_name = element.get("PartName")
                if part_name:
                    overrides[part_name] = content_type

        logger.debug(f"Read {len(defaults)} default and {len(overrides)} override content types")
        return cls(defaults, overrides)

    def find_content_type(self, path: str | None) -> str | None:
        """Get the content type of a part, None if it can't be determined.

        Args:
            path: Part name, with or without a leading slash
        """
        if not path:
            return None

        override = self._overrides.get(path.lstrip("/"))
        if override is not None:
            return override

        _, extension = posixpath.splitext(path)
        extension = extension.lstrip(".").lower()
        if extension in self._defaults:
            return self._defaults[extension]
        return _FALLBACK_IMAGE_TYPES.get(extension)

