"""Shared fixtures for building minimal .docx packages."""

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

WORD_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
PACKAGE_REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
REL_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

CONTENT_TYPES = """<?xml version="1.0" encoding="UTF-8"?>
<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">
    <Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>
    <Default Extension="xml" ContentType="application/xml"/>
    <Default Extension="png" ContentType="image/png"/>
    <Override PartName="/word/document.xml" ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>
</Types>"""

PACKAGE_RELS = f"""<?xml version="1.0" encoding="UTF-8"?>
<Relationships xmlns="{PACKAGE_REL_NS}">
    <Relationship Id="rId1" Type="{REL_TYPE}/officeDocument" Target="word/document.xml"/>
</Relationships>"""


def document_xml(body: str) -> str:
    """Wrap body content in a w:document part."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<w:document xmlns:w="{WORD_NS}" xmlns:r="{REL_NS}">
    <w:body>{body}</w:body>
</w:document>"""


def relationships_xml(relationships: list[tuple[str, str, str]]) -> str:
    """Build a .rels part from (id, type name, target) tuples."""
    entries = "\n".join(
        f'    <Relationship Id="{rel_id}" Type="{REL_TYPE}/{rel_type}" Target="{target}"/>'
        for rel_id, rel_type, target in relationships
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<Relationships xmlns="{PACKAGE_REL_NS}">
{entries}
</Relationships>"""


def write_docx(
    path: Path,
    body: str = "<w:p><w:r><w:t>Hello world</w:t></w:r></w:p>",
    parts: dict[str, str | bytes] | None = None,
    relationships: list[tuple[str, str, str]] | None = None,
    document: str | None = None,
) -> Path:
    """Write a minimal .docx to ``path``.

    Args:
        path: Destination file
        body: Content of w:body
        parts: Extra parts by name (e.g. "word/styles.xml")
        relationships: Main document relationships as (id, type name, target)
        document: Whole word/document.xml content, replacing the wrapped body
    """
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("[Content_Types].xml", CONTENT_TYPES)
        zf.writestr("_rels/.rels", PACKAGE_RELS)
        zf.writestr("word/document.xml", document if document is not None else document_xml(body))
        zf.writestr("word/_rels/document.xml.rels", relationships_xml(relationships or []))
        for name, content in (parts or {}).items():
            zf.writestr(name, content)
    return path


@pytest.fixture
def make_docx(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: ``make_docx(body=..., parts=..., relationships=...)``."""
    counter = iter(range(1000))

    def factory(**kwargs) -> Path:
        return write_docx(tmp_path / f"document{next(counter)}.docx", **kwargs)

    return factory
