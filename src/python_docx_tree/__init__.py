"""
python_docx_tree - Read Word documents into a normalized document tree.

This package reads the body of a .docx file (paragraphs, runs, tables,
lists, hyperlinks, images, notes, comments and tracked changes) into plain
Python nodes, with styles and numbering resolved. Anything that can't be
represented is reported as a warning on the result instead of failing the
read.

Example:
    >>> from python_docx_tree import read_document
    >>> result = read_document("report.docx")
    >>> for paragraph in result.value.children:
    ...     print(paragraph.properties.style_name)
    >>> for message in result.messages:
    ...     print(message)
"""

__version__ = "0.1.0"
__all__ = [
    "read_document",
    "DocxReader",
    "BodyReader",
    "ReadOptions",
    "OOXMLPackage",
    "Result",
    "Message",
    "StyleRegistry",
    "NumberingRegistry",
    "read_styles_xml",
    "read_numbering_xml",
    "DocxTreeError",
    "InvalidPackageError",
    "MissingPartError",
    "InvalidDocumentError",
    "NumberingConfigurationError",
    "MalformedFieldError",
    "ExternalFileError",
    "Document",
    "Paragraph",
    "Run",
    "Text",
    "Table",
    "TableRow",
    "TableCell",
    "Hyperlink",
    "Image",
    "iter_nodes",
    "to_dict",
]

from .body_reader import BodyReader
from .docx_reader import DocxReader, read_document
from .errors import (
    DocxTreeError,
    ExternalFileError,
    InvalidDocumentError,
    InvalidPackageError,
    MalformedFieldError,
    MissingPartError,
    NumberingConfigurationError,
)
from .models.document import (
    Document,
    Hyperlink,
    Image,
    Paragraph,
    Run,
    Table,
    TableCell,
    TableRow,
    Text,
    iter_nodes,
    to_dict,
)
from .numbering import NumberingRegistry, read_numbering_xml
from .options import ReadOptions
from .package import OOXMLPackage
from .results import Message, Result
from .styles import StyleRegistry, read_styles_xml
