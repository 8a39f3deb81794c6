"""Tests for BodyReader: paragraphs, runs, fields, links and revisions."""

import pytest
from lxml import etree

from python_docx_tree.body_reader import BodyReader, read_numbering_properties
from python_docx_tree.errors import MalformedFieldError
from python_docx_tree.models.document import (
    BookmarkStart,
    Break,
    BreakType,
    Checkbox,
    CommentRangeEnd,
    CommentRangeStart,
    CommentReference,
    Del,
    Hyperlink,
    Ins,
    NoteReference,
    NoteType,
    Paragraph,
    Run,
    Tab,
    Text,
)
from python_docx_tree.numbering import NumberingRegistry, read_numbering_xml
from python_docx_tree.relationships import Relationship, Relationships, RelationshipTypes
from python_docx_tree.styles import StyleRegistry, read_styles_xml

NAMESPACES = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "w14": "http://schemas.microsoft.com/office/word/2010/wordml",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "mc": "http://schemas.openxmlformats.org/markup-compatibility/2006",
    "v": "urn:schemas-microsoft-com:vml",
    "o": "urn:schemas-microsoft-com:office:office",
    "custom": "http://example.com/custom",
}


def element(xml: str) -> etree._Element:
    """Parse a snippet with the usual WordprocessingML prefixes declared."""
    declarations = " ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES.items())
    return etree.fromstring(f"<root {declarations}>{xml}</root>")[0]


def read(xml: str, **kwargs):
    return BodyReader(**kwargs).read_xml_element(element(xml))


def messages(result) -> list[str]:
    return [message.message for message in result.messages]


STYLES = read_styles_xml(
    element(
        """
        <w:styles>
            <w:style w:type="paragraph" w:styleId="Heading1"><w:name w:val="heading 1"/></w:style>
            <w:style w:type="character" w:styleId="Strong"><w:name w:val="Strong"/></w:style>
        </w:styles>
        """
    )
)


class TestText:
    """Tests for text-level elements."""

    def test_text(self):
        """Test w:t becomes a Text node."""
        result = read("<w:t>Hello</w:t>")
        assert result.value == Text("Hello")
        assert result.messages == []

    def test_empty_text(self):
        """Test an empty w:t gives empty text."""
        assert read("<w:t/>").value == Text("")

    def test_deleted_text(self):
        """Test w:delText is read like w:t."""
        assert read("<w:delText>gone</w:delText>").value == Text("gone")

    def test_tab(self):
        """Test w:tab becomes a Tab node."""
        assert read("<w:tab/>").value == Tab()

    def test_hyphens(self):
        """Test special hyphens become their Unicode characters."""
        assert read("<w:noBreakHyphen/>").value == Text("\u2011")
        assert read("<w:softHyphen/>").value == Text("\u00ad")


class TestSymbols:
    """Tests for w:sym characters in symbol fonts."""

    def test_symbol_font_character(self):
        """Test a Symbol font character becomes its Unicode text."""
        result = read('<w:sym w:font="Symbol" w:char="61"/>')
        assert result.value == Text("\u03b1")
        assert result.messages == []

    def test_private_use_character_falls_back_to_low_byte(self):
        """Test an F0xx code is looked up by its last two digits."""
        result = read('<w:sym w:font="Symbol" w:char="F061"/>')
        assert result.value == Text("\u03b1")
        assert result.messages == []

    def test_symbol_inside_run(self):
        """Test a w:sym is read as a run child like w:t."""
        run = read('<w:r><w:sym w:font="Symbol" w:char="F061"/><w:t>x</w:t></w:r>').value
        assert run == Run([Text("\u03b1"), Text("x")])

    def test_unsupported_character_warns(self):
        """Test a character with no mapping is dropped with a warning."""
        result = read('<w:sym w:font="Arial" w:char="41"/>')
        assert result.value == []
        assert messages(result) == [
            "A w:sym element with an unsupported character was ignored: char 41 in font Arial"
        ]

    @pytest.mark.parametrize(
        "xml",
        ['<w:sym w:char="61"/>', '<w:sym w:font="Symbol"/>', '<w:sym w:font="Symbol" w:char="zz"/>'],
    )
    def test_incomplete_symbol_warns(self, xml):
        """Test a w:sym without a usable font or hex character warns."""
        result = read(xml)
        assert result.value == []
        assert len(result.messages) == 1
        assert messages(result)[0].startswith("A w:sym element with an unsupported character")


class TestDispatch:
    """Tests for unknown, ignored and non-element nodes."""

    def test_unrecognised_element_warns(self):
        """Test unknown elements produce a warning naming them."""
        result = read("<w:fancyNewThing/>")
        assert result.value == []
        assert messages(result) == ["An unrecognised element was ignored: w:fancyNewThing"]

    def test_unknown_namespace_keeps_full_name(self):
        """Test elements in unknown namespaces are named in Clark notation."""
        result = read("<custom:thing/>")
        assert messages(result) == [
            "An unrecognised element was ignored: {http://example.com/custom}thing"
        ]

    @pytest.mark.parametrize(
        "xml",
        ["<w:bookmarkEnd/>", "<w:sectPr/>", "<w:proofErr/>", "<w:lastRenderedPageBreak/>"],
    )
    def test_ignored_elements_are_silent(self, xml):
        """Test known ignorable elements produce nothing."""
        result = read(xml)
        assert result.value == []
        assert result.messages == []

    def test_xml_comments_are_skipped(self):
        """Test XML comments inside content are skipped silently."""
        result = read("<w:r><!-- a comment --><w:t>x</w:t></w:r>")
        assert result.value.children == [Text("x")]
        assert result.messages == []

    def test_read_xml_elements_keeps_order(self):
        """Test siblings and their warnings come out in document order."""
        body = element("<w:body><w:t>a</w:t><w:foo/><w:t>b</w:t><w:bar/></w:body>")
        result = BodyReader().read_xml_elements(body)
        assert result.value == [Text("a"), Text("b")]
        assert messages(result) == [
            "An unrecognised element was ignored: w:foo",
            "An unrecognised element was ignored: w:bar",
        ]


class TestRuns:
    """Tests for runs and run properties."""

    def test_run_children(self):
        """Test a run holds its content."""
        result = read("<w:r><w:t>Hi</w:t><w:tab/></w:r>")
        assert result.value == Run([Text("Hi"), Tab()])

    def test_run_properties(self):
        """Test run formatting is read from w:rPr."""
        run = read(
            """
            <w:r>
                <w:rPr>
                    <w:rStyle w:val="Strong"/>
                    <w:rFonts w:ascii="Arial"/>
                    <w:sz w:val="28"/>
                    <w:color w:val="FF0000"/>
                    <w:vertAlign w:val="superscript"/>
                    <w:b/>
                    <w:i w:val="0"/>
                    <w:u w:val="single"/>
                    <w:strike w:val="true"/>
                    <w:caps/>
                    <w:highlight w:val="yellow"/>
                    <w:shd w:fill="00FF00"/>
                </w:rPr>
                <w:t>x</w:t>
            </w:r>
            """,
            styles=STYLES,
        ).value

        properties = run.properties
        assert properties.style_id == "Strong"
        assert properties.style_name == "Strong"
        assert properties.font == "Arial"
        assert properties.font_size == 14
        assert properties.color == "FF0000"
        assert properties.vertical_alignment == "superscript"
        assert properties.is_bold is True
        assert properties.is_italic is False
        assert properties.is_underline is True
        assert properties.is_strikethrough is True
        assert properties.is_all_caps is True
        assert properties.is_small_caps is False
        assert properties.highlight == "yellow"
        assert properties.shading == "00FF00"

    @pytest.mark.parametrize(("value", "expected"), [("none", False), ("false", False), ("0", False)])
    def test_underline_off_values(self, value, expected):
        """Test underline values that switch underline off."""
        run = read(f'<w:r><w:rPr><w:u w:val="{value}"/></w:rPr></w:r>').value
        assert run.properties.is_underline is expected

    def test_underline_without_value(self):
        """Test w:u with no value is not an underline."""
        assert read("<w:r><w:rPr><w:u/></w:rPr></w:r>").value.properties.is_underline is False

    def test_highlight_none(self):
        """Test highlight "none" reads as no highlight."""
        run = read('<w:r><w:rPr><w:highlight w:val="none"/></w:rPr></w:r>').value
        assert run.properties.highlight is None

    def test_invalid_font_size(self):
        """Test a non-numeric size is ignored."""
        run = read('<w:r><w:rPr><w:sz w:val="big"/></w:rPr></w:r>').value
        assert run.properties.font_size is None

    def test_undefined_run_style_warns(self):
        """Test an undefined character style warns but still reads the run."""
        result = read('<w:r><w:rPr><w:rStyle w:val="Nope"/></w:rPr><w:t>x</w:t></w:r>')
        assert result.value.properties.style_id == "Nope"
        assert result.value.properties.style_name is None
        assert messages(result) == [
            "Run style with ID Nope was referenced but not defined in the document"
        ]


class TestParagraphs:
    """Tests for paragraphs and paragraph properties."""

    def test_paragraph(self):
        """Test a paragraph holds its runs and resolves its style."""
        result = read(
            """
            <w:p>
                <w:pPr>
                    <w:pStyle w:val="Heading1"/>
                    <w:jc w:val="center"/>
                    <w:ind w:left="720" w:hanging="360"/>
                    <w:spacing w:before="240" w:after="120"/>
                </w:pPr>
                <w:r><w:t>Title</w:t></w:r>
            </w:p>
            """,
            styles=STYLES,
        )

        paragraph = result.value
        assert isinstance(paragraph, Paragraph)
        assert paragraph.children == [Run([Text("Title")])]
        assert paragraph.properties.style_id == "Heading1"
        assert paragraph.properties.style_name == "heading 1"
        assert paragraph.properties.alignment == "center"
        assert paragraph.properties.indent.left == "720"
        assert paragraph.properties.indent.hanging == "360"
        assert paragraph.properties.spacing.before == "240"
        assert result.messages == []

    def test_undefined_paragraph_style_warns_once(self):
        """Test an undefined style gives one warning and a null name."""
        result = read('<w:p><w:pPr><w:pStyle w:val="Missing"/></w:pPr></w:p>')
        assert result.value.properties.style_name is None
        assert messages(result) == [
            "Paragraph style with ID Missing was referenced but not defined in the document"
        ]

    def test_message_order_follows_document(self):
        """Test property warnings come before the warnings of the content."""
        result = read(
            """
            <w:p>
                <w:pPr><w:pStyle w:val="P"/></w:pPr>
                <w:r><w:rPr><w:rStyle w:val="R"/></w:rPr><w:weird/></w:r>
            </w:p>
            """
        )
        assert messages(result) == [
            "Paragraph style with ID P was referenced but not defined in the document",
            "Run style with ID R was referenced but not defined in the document",
            "An unrecognised element was ignored: w:weird",
        ]

    def test_deleted_paragraph_merges_into_next(self):
        """Test a deleted paragraph mark joins its content to the next paragraph."""
        body = element(
            """
            <w:body>
                <w:p>
                    <w:pPr><w:rPr><w:del w:id="1" w:author="A"/></w:rPr></w:pPr>
                    <w:r><w:t>First </w:t></w:r>
                </w:p>
                <w:p><w:r><w:t>second</w:t></w:r></w:p>
            </w:body>
            """
        )
        result = BodyReader().read_xml_elements(body)

        assert len(result.value) == 1
        assert result.value[0].children == [Run([Text("First ")]), Run([Text("second")])]

    def test_floating_content_follows_paragraph(self):
        """Test text box content is lifted out after its paragraph."""
        result = read(
            """
            <w:p>
                <w:r>
                    <w:pict>
                        <v:rect>
                            <v:textbox>
                                <w:txbxContent>
                                    <w:p><w:r><w:t>Boxed</w:t></w:r></w:p>
                                </w:txbxContent>
                            </v:textbox>
                        </v:rect>
                    </w:pict>
                </w:r>
                <w:r><w:t>Outer</w:t></w:r>
            </w:p>
            """
        )

        outer, boxed = result.value
        assert outer.children == [Run([]), Run([Text("Outer")])]
        assert boxed.children == [Run([Text("Boxed")])]
        assert result.extra == []


class TestNumbering:
    """Tests for list levels on paragraphs."""

    NUMBERING = read_numbering_xml(
        element(
            """
            <w:numbering>
                <w:abstractNum w:abstractNumId="0">
                    <w:lvl w:ilvl="0"><w:numFmt w:val="decimal"/></w:lvl>
                    <w:lvl w:ilvl="1"><w:numFmt w:val="bullet"/></w:lvl>
                </w:abstractNum>
                <w:abstractNum w:abstractNumId="1">
                    <w:lvl w:ilvl="0">
                        <w:pStyle w:val="ListNumber"/>
                        <w:numFmt w:val="upperLetter"/>
                    </w:lvl>
                </w:abstractNum>
                <w:num w:numId="1"><w:abstractNumId w:val="0"/></w:num>
            </w:numbering>
            """
        ),
        StyleRegistry.empty(),
    )

    def test_explicit_numbering(self):
        """Test w:numPr resolves to the list level."""
        paragraph = read(
            '<w:p><w:pPr><w:numPr><w:ilvl w:val="1"/><w:numId w:val="1"/></w:numPr></w:pPr></w:p>',
            numbering=self.NUMBERING,
        ).value
        assert paragraph.properties.numbering.level == "1"
        assert paragraph.properties.numbering.is_ordered is False

    def test_numbering_from_paragraph_style(self):
        """Test a paragraph style linked to a level gets that level."""
        level = read_numbering_properties("ListNumber", None, self.NUMBERING)
        assert level.format == "upperLetter"

    def test_incomplete_num_pr_falls_back_to_style(self):
        """Test w:numPr without both ilvl and numId uses the style link."""
        num_pr = element('<w:numPr><w:numId w:val="1"/></w:numPr>')
        level = read_numbering_properties("ListNumber", num_pr, self.NUMBERING)
        assert level.format == "upperLetter"

    def test_no_numbering(self):
        """Test paragraphs outside lists have no level."""
        assert read("<w:p/>", numbering=self.NUMBERING).value.properties.numbering is None
        assert read_numbering_properties(None, None, NumberingRegistry.empty()) is None


class TestBreaks:
    """Tests for w:br."""

    @pytest.mark.parametrize(
        ("xml", "break_type"),
        [
            ("<w:br/>", BreakType.LINE),
            ('<w:br w:type="textWrapping"/>', BreakType.LINE),
            ('<w:br w:type="page"/>', BreakType.PAGE),
            ('<w:br w:type="column"/>', BreakType.COLUMN),
        ],
    )
    def test_break_types(self, xml, break_type):
        """Test supported break types."""
        assert read(xml).value == Break(break_type)

    def test_unsupported_break_type(self):
        """Test other break types warn and produce nothing."""
        result = read('<w:br w:type="sideways"/>')
        assert result.value == []
        assert messages(result) == ["Unsupported break type: sideways"]


class TestReferences:
    """Tests for bookmarks, notes and comments."""

    def test_bookmark(self):
        """Test bookmark starts keep their name."""
        assert read('<w:bookmarkStart w:name="intro"/>').value == BookmarkStart("intro")

    def test_go_back_bookmark_is_ignored(self):
        """Test Word's _GoBack bookmark is dropped."""
        result = read('<w:bookmarkStart w:name="_GoBack"/>')
        assert result.value == []
        assert result.messages == []

    def test_note_references(self):
        """Test footnote and endnote references."""
        assert read('<w:footnoteReference w:id="2"/>').value == NoteReference(
            NoteType.FOOTNOTE, "2"
        )
        assert read('<w:endnoteReference w:id="3"/>').value == NoteReference(
            NoteType.ENDNOTE, "3"
        )

    def test_comment_markers(self):
        """Test comment references and ranges."""
        assert read('<w:commentReference w:id="0"/>').value == CommentReference("0")
        assert read('<w:commentRangeStart w:id="0"/>').value == CommentRangeStart("0")
        assert read('<w:commentRangeEnd w:id="0"/>').value == CommentRangeEnd("0")


class TestHyperlinks:
    """Tests for w:hyperlink."""

    RELATIONSHIPS = Relationships(
        [Relationship("rId5", "http://example.com/page", RelationshipTypes.HYPERLINK, "External")]
    )

    def test_external_link(self):
        """Test a relationship ID resolves to the link target."""
        result = read(
            '<w:hyperlink r:id="rId5" w:tgtFrame="_blank"><w:r><w:t>site</w:t></w:r></w:hyperlink>',
            relationships=self.RELATIONSHIPS,
        )
        assert result.value == Hyperlink(
            [Run([Text("site")])], href="http://example.com/page", target_frame="_blank"
        )

    def test_external_link_with_anchor(self):
        """Test an anchor replaces the fragment of the target."""
        link = read(
            '<w:hyperlink r:id="rId5" w:anchor="part2"/>', relationships=self.RELATIONSHIPS
        ).value
        assert link.href == "http://example.com/page#part2"
        assert link.anchor is None

    def test_internal_link(self):
        """Test an anchor-only link points at a bookmark."""
        link = read('<w:hyperlink w:anchor="intro"><w:r><w:t>x</w:t></w:r></w:hyperlink>').value
        assert link.anchor == "intro"
        assert link.href is None

    def test_link_without_target(self):
        """Test a link with neither target passes its children through."""
        result = read("<w:hyperlink><w:r><w:t>x</w:t></w:r></w:hyperlink>")
        assert result.value == [Run([Text("x")])]


def field_paragraph(instruction: str, begin_extra: str = "", result_text: str = "link") -> str:
    return f"""
    <w:p>
        <w:r><w:fldChar w:fldCharType="begin">{begin_extra}</w:fldChar></w:r>
        <w:r><w:instrText xml:space="preserve">{instruction}</w:instrText></w:r>
        <w:r><w:fldChar w:fldCharType="separate"/></w:r>
        <w:r><w:t>{result_text}</w:t></w:r>
        <w:r><w:fldChar w:fldCharType="end"/></w:r>
    </w:p>
    """


class TestComplexFields:
    """Tests for fields written with w:fldChar."""

    def test_hyperlink_field(self):
        """Test runs inside a HYPERLINK field are wrapped in one link."""
        paragraph = read(field_paragraph(' HYPERLINK "http://example.com" ')).value
        links = [
            child
            for run in paragraph.children
            for child in run.children
            if isinstance(child, Hyperlink)
        ]
        assert links == [Hyperlink([Text("link")], href="http://example.com")]

    def test_field_marker_runs_stay_bare(self):
        """Test runs holding only field characters or instructions get no empty link."""
        paragraph = read(field_paragraph(' HYPERLINK "http://example.com" ')).value
        assert [paragraph.children[index] for index in (0, 1, 2, 4)] == [Run([])] * 4
        assert paragraph.children[3] == Run(
            [Hyperlink([Text("link")], href="http://example.com")]
        )

    def test_internal_hyperlink_field(self):
        """Test HYPERLINK \\l links to a bookmark."""
        paragraph = read(field_paragraph(' HYPERLINK \\l "section1" ')).value
        assert paragraph.children[3] == Run([Hyperlink([Text("link")], anchor="section1")])

    def test_field_result_after_end_is_not_linked(self):
        """Test runs after the field end are plain again."""
        body = element(
            f"<w:body>{field_paragraph(' HYPERLINK &quot;http://a.com&quot; ')}"
            "<w:p><w:r><w:t>after</w:t></w:r></w:p></w:body>"
        )
        result = BodyReader().read_xml_elements(body)
        assert result.value[1].children == [Run([Text("after")])]

    def test_nested_field_inside_hyperlink(self):
        """Test runs in a field nested inside a hyperlink field are still linked."""
        paragraph = read(
            """
            <w:p>
                <w:r><w:fldChar w:fldCharType="begin"/></w:r>
                <w:r><w:instrText> HYPERLINK "http://example.com" </w:instrText></w:r>
                <w:r><w:fldChar w:fldCharType="separate"/></w:r>
                <w:r><w:fldChar w:fldCharType="begin"/></w:r>
                <w:r><w:instrText> PAGE </w:instrText></w:r>
                <w:r><w:fldChar w:fldCharType="separate"/></w:r>
                <w:r><w:t>3</w:t></w:r>
                <w:r><w:fldChar w:fldCharType="end"/></w:r>
                <w:r><w:t> more</w:t></w:r>
                <w:r><w:fldChar w:fldCharType="end"/></w:r>
                <w:r><w:t>after</w:t></w:r>
            </w:p>
            """
        ).value

        assert paragraph.children[6] == Run([Hyperlink([Text("3")], href="http://example.com")])
        assert paragraph.children[8] == Run(
            [Hyperlink([Text(" more")], href="http://example.com")]
        )
        assert paragraph.children[10] == Run([Text("after")])

    def test_unknown_field(self):
        """Test fields that aren't links leave their result text alone."""
        paragraph = read(field_paragraph(" PAGE ", result_text="3")).value
        assert paragraph.children[3] == Run([Text("3")])

    def test_checkbox_field(self):
        """Test FORMCHECKBOX fields become Checkbox nodes."""
        ff_data = '<w:ffData><w:checkBox><w:default w:val="1"/></w:checkBox></w:ffData>'
        paragraph = read(
            f"""
            <w:p>
                <w:r><w:fldChar w:fldCharType="begin">{ff_data}</w:fldChar></w:r>
                <w:r><w:instrText> FORMCHECKBOX </w:instrText></w:r>
                <w:r><w:fldChar w:fldCharType="end"/></w:r>
            </w:p>
            """
        ).value
        assert paragraph.children[2] == Run([Checkbox(checked=True)])

    def test_checkbox_checked_overrides_default(self):
        """Test w:checked wins over w:default."""
        ff_data = (
            "<w:ffData><w:checkBox>"
            '<w:default w:val="1"/><w:checked w:val="0"/>'
            "</w:checkBox></w:ffData>"
        )
        paragraph = read(field_paragraph(" FORMCHECKBOX ", ff_data, "")).value
        assert paragraph.children[4] == Run([Checkbox(checked=False)])

    def test_end_without_begin_raises(self):
        """Test a field end with no open field is an error."""
        with pytest.raises(MalformedFieldError):
            read('<w:r><w:fldChar w:fldCharType="end"/></w:r>')

    def test_separate_without_begin_raises(self):
        """Test a field separator with no open field is an error."""
        with pytest.raises(MalformedFieldError, match="'separate'"):
            read('<w:r><w:fldChar w:fldCharType="separate"/></w:r>')

    def test_fields_are_per_reader(self):
        """Test an open field in one reader doesn't leak into another."""
        first = BodyReader()
        first.read_xml_element(element('<w:r><w:fldChar w:fldCharType="begin"/></w:r>'))
        with pytest.raises(MalformedFieldError):
            BodyReader().read_xml_element(element('<w:r><w:fldChar w:fldCharType="end"/></w:r>'))


class TestStructuredDocumentTags:
    """Tests for w:sdt and mc:AlternateContent."""

    def test_checkbox_content_control(self):
        """Test w14:checkbox content controls become Checkbox nodes."""
        checked = read(
            """
            <w:sdt>
                <w:sdtPr><w14:checkbox><w14:checked w14:val="1"/></w14:checkbox></w:sdtPr>
                <w:sdtContent><w:r><w:t>X</w:t></w:r></w:sdtContent>
            </w:sdt>
            """
        )
        unchecked = read(
            """
            <w:sdt>
                <w:sdtPr><w14:checkbox><w14:checked w14:val="false"/></w14:checkbox></w:sdtPr>
            </w:sdt>
            """
        )
        assert checked.value == Checkbox(checked=True)
        assert unchecked.value == Checkbox(checked=False)

    def test_sdt_content(self):
        """Test other content controls are read through."""
        result = read("<w:sdt><w:sdtPr/><w:sdtContent><w:r><w:t>x</w:t></w:r></w:sdtContent></w:sdt>")
        assert result.value == [Run([Text("x")])]

    def test_alternate_content_uses_fallback(self):
        """Test only mc:Fallback content is read."""
        result = read(
            """
            <mc:AlternateContent>
                <mc:Choice Requires="wps"><w:t>choice</w:t></mc:Choice>
                <mc:Fallback><w:t>fallback</w:t></mc:Fallback>
            </mc:AlternateContent>
            """
        )
        assert result.value == [Text("fallback")]

    def test_alternate_content_without_fallback(self):
        """Test AlternateContent without a fallback gives nothing."""
        result = read("<mc:AlternateContent><mc:Choice/></mc:AlternateContent>")
        assert result.value == []
        assert result.messages == []


class TestRevisions:
    """Tests for tracked insertions and deletions."""

    def test_insertion(self):
        """Test w:ins becomes a run holding an Ins with the revision details."""
        result = read(
            '<w:ins w:id="4" w:author="Jo" w:date="2024-01-02T00:00:00Z">'
            "<w:r><w:t>new</w:t></w:r></w:ins>"
        )
        assert result.value == Run(
            [Ins([Run([Text("new")])], author="Jo", date="2024-01-02T00:00:00Z", change_id="4")]
        )

    def test_deletion(self):
        """Test w:del keeps its deleted text."""
        result = read('<w:del w:id="5" w:author="Sam"><w:r><w:delText>old</w:delText></w:r></w:del>')
        assert result.value == Run([Del([Run([Text("old")])], author="Sam", change_id="5")])

    def test_details_from_run_property_change(self):
        """Test missing details fall back to the first child's w:rPrChange."""
        result = read(
            """
            <w:ins>
                <w:r>
                    <w:rPr><w:rPrChange w:id="9" w:author="Lee" w:date="2024-05-06T00:00:00Z"/></w:rPr>
                    <w:t>x</w:t>
                </w:r>
            </w:ins>
            """
        )
        insertion = result.value.children[0]
        assert insertion.author == "Lee"
        assert insertion.date == "2024-05-06T00:00:00Z"
        assert insertion.change_id == "9"

    def test_revision_run_takes_element_properties(self):
        """Test the w:rPr of the w:ins element styles the wrapping run."""
        result = read(
            '<w:ins w:id="2"><w:rPr><w:b/><w:rStyle w:val="Strong"/></w:rPr>'
            "<w:r><w:t>bold</w:t></w:r></w:ins>",
            styles=STYLES,
        )
        run = result.value
        assert isinstance(run, Run)
        assert run.properties.is_bold is True
        assert run.properties.style_name == "Strong"
        assert run.children == [Ins([Run([Text("bold")])], change_id="2")]
        assert result.messages == []

    def test_revision_run_style_warning(self):
        """Test an undefined style on the w:del element is reported."""
        result = read('<w:del><w:rPr><w:rStyle w:val="Missing"/></w:rPr></w:del>')
        assert result.value.children == [Del([])]
        assert result.value.properties.style_id == "Missing"
        assert messages(result) == [
            "Run style with ID Missing was referenced but not defined in the document"
        ]
