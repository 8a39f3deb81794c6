"""
Model classes for python_docx_tree.

Document tree nodes, style registry entries and list level definitions.
"""

from python_docx_tree.models.document import (
    Break,
    BreakType,
    Checkbox,
    Comment,
    Del,
    Document,
    Footer,
    Header,
    HeaderFooterType,
    Hyperlink,
    Image,
    Ins,
    Node,
    Note,
    NoteType,
    Paragraph,
    Run,
    Table,
    TableCell,
    TableRow,
    Text,
)
from python_docx_tree.models.numbering import AbstractNumbering, LevelDefinition
from python_docx_tree.models.style import CustomStyle, DocumentDefaults, Style, StyleType

__all__ = [
    "Node",
    "Document",
    "Paragraph",
    "Run",
    "Text",
    "Break",
    "BreakType",
    "Checkbox",
    "Hyperlink",
    "Image",
    "Ins",
    "Del",
    "Table",
    "TableRow",
    "TableCell",
    "Note",
    "NoteType",
    "Comment",
    "Header",
    "Footer",
    "HeaderFooterType",
    "AbstractNumbering",
    "LevelDefinition",
    "Style",
    "StyleType",
    "CustomStyle",
    "DocumentDefaults",
]
