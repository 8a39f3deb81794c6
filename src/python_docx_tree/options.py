"""
Options controlling how a document is read.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ReadOptions:
    """Configuration for :func:`python_docx_tree.read_document`.

    Attributes:
        base_path: Directory that linked (external) images are resolved
            against. Defaults to the document's own directory when the
            document is read from a path.
        max_workers: Number of threads used to read notes, comments, headers
            and footers in parallel
        load_images: Whether to read image bytes and measure natural image
            dimensions before the package is closed

    Example:
        >>> options = ReadOptions(max_workers=2, load_images=False)
        >>> options.with_overrides(load_images=True).load_images
        True
    """

    base_path: str | Path | None = None
    max_workers: int = 4
    load_images: bool = True

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    def with_overrides(self, **overrides: Any) -> ReadOptions:
        """Return a copy with the given (non-None) fields replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self
