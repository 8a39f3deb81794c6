"""
Read-only access to .docx packages.

A .docx file is a ZIP archive of XML parts (the main document, styles,
numbering, notes, headers, ...) and media. Readers ask for parts by name and
get parsed lxml elements or raw bytes back.
"""

import io
import logging
import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import Any, BinaryIO

from lxml import etree

from .errors import InvalidPackageError

logger = logging.getLogger(__name__)


def _xml_parser() -> etree.XMLParser:
    # Package parts never need external entities or network access
    return etree.XMLParser(remove_blank_text=False, resolve_entities=False, no_network=True)


class OOXMLPackage:
    """Read-only access to the parts of an OOXML ZIP package.

    The archive is extracted to a private temporary directory when opened,
    so parts can be read from several threads at once without sharing a
    ZipFile handle.

    Example:
        >>> with OOXMLPackage.open("document.docx") as pkg:
        ...     doc_xml = pkg.get_part("word/document.xml")
    """

    def __init__(self, temp_dir: Path, source_path: Path | None = None) -> None:
        """Wrap an already-extracted package. Prefer `open()` or `from_bytes()`.

        Args:
            temp_dir: Directory holding the extracted parts
            source_path: The .docx file the parts came from, if read from a path
        """
        self._temp_dir = temp_dir
        self._source_path = source_path
        self._closed = False

    @classmethod
    def open(cls, source: str | Path | BinaryIO) -> "OOXMLPackage":
        """Extract a .docx file and return a package over its parts.

        Args:
            source: Path to the .docx file, or a binary file object

        Raises:
            InvalidPackageError: If the source is missing or not a valid ZIP file
        """
        source_path: Path | None = None

        if isinstance(source, str | Path):
            source_path = Path(source)
            if not source_path.exists():
                raise InvalidPackageError(str(source_path), "file not found")
            zip_source: Path | BinaryIO = source_path
        else:
            zip_source = source

        label = str(source_path) if source_path else "<stream>"

        if not zipfile.is_zipfile(zip_source):
            raise InvalidPackageError(label, "not a ZIP file")

        # Reset stream position if it was checked by is_zipfile
        if hasattr(zip_source, "seek"):
            zip_source.seek(0)

        temp_dir = Path(tempfile.mkdtemp(prefix="python_docx_tree_"))
        try:
            with zipfile.ZipFile(zip_source, "r") as zip_ref:
                zip_ref.extractall(temp_dir)
        except (zipfile.BadZipFile, OSError, ValueError) as e:
            shutil.rmtree(temp_dir, ignore_errors=True)
            raise InvalidPackageError(label, f"failed to extract: {e}") from e

        logger.debug(f"Extracted {label} to {temp_dir}")
        return cls(temp_dir, source_path)

    @classmethod
    def from_bytes(cls, data: bytes) -> "OOXMLPackage":
        """Open an OOXML package from bytes."""
        return cls.open(io.BytesIO(data))

    @property
    def source_path(self) -> Path | None:
        """Get the original source file path, if available."""
        return self._source_path

    def get_part_path(self, part_name: str) -> Path | None:
        """Get the filesystem path to a package part.

        Args:
            part_name: Path within the package (e.g., "word/document.xml").
                A leading slash is allowed.

        Returns:
            Path to the part in the temp directory, or None if the name points
            outside the package
        """
        root = self._temp_dir.resolve()
        path = (root / part_name.lstrip("/")).resolve()
        if not path.is_relative_to(root):
            logger.debug(f"Refusing part name outside the package: {part_name}")
            return None
        return path

    def part_exists(self, part_name: str) -> bool:
        """Check if a package part exists."""
        path = self.get_part_path(part_name)
        return path is not None and path.is_file()

    def get_part(self, part_name: str) -> etree._Element | None:
        """Get a package part as a parsed XML element.

        Args:
            part_name: Path within the package (e.g., "word/document.xml")

        Returns:
            Parsed XML root element, or None if part doesn't exist
        """
        if not self.part_exists(part_name):
            return None

        path = self.get_part_path(part_name)
        tree = etree.parse(str(path), _xml_parser())
        logger.debug(f"Loaded part {part_name}")
        return tree.getroot()

    def read_bytes(self, part_name: str) -> bytes:
        """Read the raw contents of a package part.

        Raises:
            KeyError: If the part does not exist
        """
        if not self.part_exists(part_name):
            raise KeyError(f"There is no item named '{part_name}' in the archive")
        return self.get_part_path(part_name).read_bytes()

    def close(self) -> None:
        """Remove the extracted parts. Parts can no longer be read afterwards."""
        if not self._closed and self._temp_dir.exists():
            shutil.rmtree(self._temp_dir, ignore_errors=True)
        self._closed = True

    def __enter__(self) -> "OOXMLPackage":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __del__(self) -> None:
        """Remove the extracted parts if the package was never closed."""
        if hasattr(self, "_closed"):
            self.close()
