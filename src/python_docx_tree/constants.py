"""
Centralized constants for OOXML namespaces and other magic values.

This module consolidates all namespace URLs, qualified-name helpers and the
fixed element sets the body reader consults. Import from here to ensure
consistency.
"""

# =============================================================================
# Word Processing Namespaces
# =============================================================================

# Main WordprocessingML namespace (Word 2007+)
WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

# Word 2010 namespace (content control checkboxes)
W14_NAMESPACE = "http://schemas.microsoft.com/office/word/2010/wordml"


# =============================================================================
# DrawingML Namespaces
# =============================================================================

# DrawingML main namespace
A_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/main"

# Drawing picture namespace
PIC_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/picture"

# Word Processing Drawing namespace (inline/anchor positioning)
WP_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"


# =============================================================================
# Legacy VML Namespaces
# =============================================================================

VML_NAMESPACE = "urn:schemas-microsoft-com:vml"
OFFICE_NAMESPACE = "urn:schemas-microsoft-com:office:office"
OFFICE_WORD_NAMESPACE = "urn:schemas-microsoft-com:office:word"


# =============================================================================
# Package and Relationship Namespaces
# =============================================================================

# Open Packaging Convention namespaces
PACKAGE_RELATIONSHIPS_NAMESPACE = "http://schemas.openxmlformats.org/package/2006/relationships"
CONTENT_TYPES_NAMESPACE = "http://schemas.openxmlformats.org/package/2006/content-types"

# Office Document relationships
OFFICE_RELATIONSHIPS_NAMESPACE = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
)

# Markup Compatibility namespace
MC_NAMESPACE = "http://schemas.openxmlformats.org/markup-compatibility/2006"


# =============================================================================
# Canonical Prefixes
# =============================================================================

# Prefixes used when naming elements in messages, independent of the prefixes
# a producing application chose.
CANONICAL_PREFIXES = {
    WORD_NAMESPACE: "w",
    W14_NAMESPACE: "w14",
    A_NAMESPACE: "a",
    PIC_NAMESPACE: "pic",
    WP_NAMESPACE: "wp",
    VML_NAMESPACE: "v",
    OFFICE_NAMESPACE: "o",
    OFFICE_WORD_NAMESPACE: "office-word",
    OFFICE_RELATIONSHIPS_NAMESPACE: "r",
    MC_NAMESPACE: "mc",
    PACKAGE_RELATIONSHIPS_NAMESPACE: "relationships",
    CONTENT_TYPES_NAMESPACE: "content-types",
}


# =============================================================================
# Images
# =============================================================================

# Image content types that web browsers display natively
SUPPORTED_IMAGE_TYPES = frozenset(
    [
        "image/png",
        "image/gif",
        "image/jpeg",
        "image/svg+xml",
        "image/tiff",
    ]
)


# =============================================================================
# Body Reader
# =============================================================================

# Elements consumed by their parent (or carrying nothing worth reading) that
# the body reader skips without a warning.
IGNORED_ELEMENTS = frozenset(
    [
        "office-word:wrap",
        "v:shadow",
        "v:shapetype",
        "w:annotationRef",
        "w:bookmarkEnd",
        "w:sectPr",
        "w:proofErr",
        "w:lastRenderedPageBreak",
        "w:footnoteRef",
        "w:endnoteRef",
        "w:pPr",
        "w:rPr",
        "w:tblPr",
        "w:tblGrid",
        "w:trPr",
        "w:tcPr",
    ]
)

# Bookmark Word inserts to remember the last edit position
GO_BACK_BOOKMARK = "_GoBack"


# =============================================================================
# Helper Functions
# =============================================================================


def w(tag: str) -> str:
    """Create a fully qualified Word namespace tag.

    Args:
        tag: Tag name without namespace prefix (e.g., "p", "r", "t")

    Returns:
        Fully qualified tag (e.g., "{http://...wordprocessingml/2006/main}p")

    Example:
        >>> w("p")
        '{http://schemas.openxmlformats.org/wordprocessingml/2006/main}p'
    """
    return f"{{{WORD_NAMESPACE}}}{tag}"


def w14(tag: str) -> str:
    """Create a fully qualified Word 2010 namespace tag."""
    return f"{{{W14_NAMESPACE}}}{tag}"


def a(tag: str) -> str:
    """Create a fully qualified DrawingML main namespace tag.

    Args:
        tag: Tag name without namespace prefix (e.g., "blip", "ext")

    Returns:
        Fully qualified tag with DrawingML main namespace
    """
    return f"{{{A_NAMESPACE}}}{tag}"


def pic(tag: str) -> str:
    """Create a fully qualified DrawingML picture namespace tag."""
    return f"{{{PIC_NAMESPACE}}}{tag}"


def wp(tag: str) -> str:
    """Create a fully qualified Word Processing Drawing namespace tag.

    Args:
        tag: Tag name without namespace prefix (e.g., "inline", "extent")

    Returns:
        Fully qualified tag with Word Processing Drawing namespace
    """
    return f"{{{WP_NAMESPACE}}}{tag}"


def v(tag: str) -> str:
    """Create a fully qualified VML namespace tag."""
    return f"{{{VML_NAMESPACE}}}{tag}"


def o(tag: str) -> str:
    """Create a fully qualified Office (VML extensions) namespace tag."""
    return f"{{{OFFICE_NAMESPACE}}}{tag}"


def r(tag: str) -> str:
    """Create a fully qualified Office relationships namespace tag.

    Args:
        tag: Attribute name without namespace prefix (e.g., "id", "embed")

    Returns:
        Fully qualified attribute name with relationships namespace
    """
    return f"{{{OFFICE_RELATIONSHIPS_NAMESPACE}}}{tag}"


def mc(tag: str) -> str:
    """Create a fully qualified Markup Compatibility namespace tag."""
    return f"{{{MC_NAMESPACE}}}{tag}"


def canonical_name(tag: str) -> str:
    """Convert a Clark-notation tag into a ``prefix:local`` name.

    Namespaces without a canonical prefix keep the full ``{uri}local`` form.

    Example:
        >>> canonical_name(w("p"))
        'w:p'
    """
    if not tag.startswith("{"):
        return tag
    uri, _, local = tag[1:].partition("}")
    prefix = CANONICAL_PREFIXES.get(uri)
    if prefix is None:
        return tag
    return f"{prefix}:{local}"
