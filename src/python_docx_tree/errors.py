"""
Custom exception classes for python_docx_tree package.

Only conditions that make a read impossible are raised. Everything the reader
can recover from is reported as a warning message on the returned result
instead (see ``results.py``).
"""


class DocxTreeError(Exception):
    """Base exception for all python_docx_tree errors."""

    pass


class InvalidPackageError(DocxTreeError):
    """Raised when the source cannot be opened as an OOXML (ZIP) package.

    Attributes:
        source: Description of the source that failed to open
        reason: Why the package could not be opened
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Could not open '{self.source}' as a .docx package: {self.reason}"


class MissingPartError(DocxTreeError):
    """Raised when a part the reader cannot do without is absent.

    Attributes:
        part_name: Package path that was expected
        hint: Additional context shown after the main message
    """

    def __init__(self, part_name: str, hint: str | None = None) -> None:
        self.part_name = part_name
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = "Could not find main document part. Are you sure this is a valid .docx file?"
        if self.hint:
            msg += f"\n\nNote: {self.hint}"
        return msg


class InvalidDocumentError(DocxTreeError):
    """Raised when the main document part has no ``w:body`` element.

    Attributes:
        part_name: Package path of the main document part
    """

    def __init__(self, part_name: str) -> None:
        self.part_name = part_name
        super().__init__(f"Could not find the body element in '{part_name}'")


class NumberingConfigurationError(DocxTreeError):
    """Raised when numbering definitions are read without a style registry.

    Numbering levels can point at numbering styles, so a numbering registry
    cannot be built unless the styles of the same document are available.
    """

    def __init__(self, message: str = "styles is missing") -> None:
        super().__init__(message)


class MalformedFieldError(DocxTreeError):
    """Raised when a complex field marker has no matching ``begin``.

    Attributes:
        marker: The ``w:fldCharType`` value that was seen ("separate" or "end")
    """

    def __init__(self, marker: str) -> None:
        self.marker = marker
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return (
            f"Found a complex field '{self.marker}' marker with no open field. "
            "The document's field codes are not properly nested."
        )


class ExternalFileError(DocxTreeError):
    """Raised when a linked (external) file cannot be read.

    Attributes:
        uri: The relationship target that was being resolved
        reason: Why the file could not be read
    """

    def __init__(self, uri: str, reason: str) -> None:
        self.uri = uri
        self.reason = reason
        super().__init__(f"could not open external image: '{uri}' ({reason})")
