"""
Access to files outside the package, for linked images.
"""

import logging
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from .errors import ExternalFileError

logger = logging.getLogger(__name__)


class Files:
    """Reads linked files relative to the directory of the input document.

    Args:
        base_path: Directory that relative URIs are resolved against, or None
            when the document was not read from a path
    """

    def __init__(self, base_path: str | Path | None = None) -> None:
        self._base_path = Path(base_path) if base_path is not None else None

    @classmethod
    def relative_to_file(cls, path: str | Path) -> "Files":
        return cls(Path(path).parent)

    def resolve(self, uri: str) -> Path:
        """Turn a relationship target into a filesystem path.

        Raises:
            ExternalFileError: If the URI is relative and there is no base path,
                or it uses a scheme other than ``file``
        """
        parsed = urlparse(uri)
        if parsed.scheme == "file":
            return Path(url2pathname(parsed.path))
        if parsed.scheme and len(parsed.scheme) > 1:
            raise ExternalFileError(uri, f"unsupported URI scheme '{parsed.scheme}'")

        path = Path(uri)
        if path.is_absolute():
            return path
        if self._base_path is None:
            raise ExternalFileError(uri, "path of input document is unknown")
        return self._base_path / path

    def read(self, uri: str) -> bytes:
        """Read a linked file.

        Raises:
            ExternalFileError: If the file can't be located or read
        """
        path = self.resolve(uri)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ExternalFileError(uri, e.strerror or str(e)) from e
        logger.debug(f"Read external file {path}")
        return data
