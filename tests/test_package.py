"""Tests for OOXMLPackage, Files and ReadOptions."""

import io
from pathlib import Path

import pytest

from python_docx_tree.errors import ExternalFileError, InvalidPackageError
from python_docx_tree.files import Files
from python_docx_tree.options import ReadOptions
from python_docx_tree.package import OOXMLPackage


class TestOOXMLPackage:
    """Tests for opening packages and reading parts."""

    def test_open_path(self, make_docx):
        """Test parts can be read from a package opened by path."""
        path = make_docx()
        with OOXMLPackage.open(path) as package:
            assert package.source_path == path
            assert package.part_exists("word/document.xml")
            assert package.part_exists("/word/document.xml")
            root = package.get_part("word/document.xml")
            assert root.tag.endswith("}document")

    def test_open_stream_and_bytes(self, make_docx):
        """Test packages open from file objects and bytes."""
        data = make_docx().read_bytes()

        with OOXMLPackage.open(io.BytesIO(data)) as package:
            assert package.source_path is None
            assert package.part_exists("word/document.xml")
        with OOXMLPackage.from_bytes(data) as package:
            assert package.read_bytes("_rels/.rels").startswith(b"<?xml")

    def test_missing_part(self, make_docx):
        """Test missing parts give None, or KeyError for raw bytes."""
        with OOXMLPackage.open(make_docx()) as package:
            assert package.get_part("word/styles.xml") is None
            assert not package.part_exists("word/styles.xml")
            with pytest.raises(KeyError):
                package.read_bytes("word/media/missing.png")

    def test_part_outside_package(self, make_docx):
        """Test part names can't escape the package directory."""
        with OOXMLPackage.open(make_docx()) as package:
            assert package.get_part_path("../../etc/passwd") is None
            assert not package.part_exists("../outside.xml")

    def test_close_removes_temp_dir(self, make_docx):
        """Test closing the package cleans up its extracted files."""
        package = OOXMLPackage.open(make_docx())
        temp_dir = package._temp_dir
        assert temp_dir.exists()
        package.close()
        assert not temp_dir.exists()

    def test_not_a_zip(self, tmp_path: Path):
        """Test non-ZIP input raises InvalidPackageError."""
        path = tmp_path / "fake.docx"
        path.write_text("not a zip")
        with pytest.raises(InvalidPackageError, match="not a ZIP file"):
            OOXMLPackage.open(path)

    def test_file_not_found(self, tmp_path: Path):
        """Test a missing file raises InvalidPackageError."""
        with pytest.raises(InvalidPackageError, match="file not found"):
            OOXMLPackage.open(tmp_path / "missing.docx")


class TestFiles:
    """Tests for reading linked files."""

    def test_relative_to_file(self, tmp_path: Path):
        """Test relative URIs resolve next to the document."""
        (tmp_path / "image.png").write_bytes(b"png")
        files = Files.relative_to_file(tmp_path / "doc.docx")
        assert files.read("image.png") == b"png"

    def test_file_uri_and_absolute_path(self, tmp_path: Path):
        """Test file:// URIs and absolute paths need no base path."""
        target = tmp_path / "image.png"
        target.write_bytes(b"png")
        assert Files().read(str(target)) == b"png"
        assert Files().read(target.as_uri()) == b"png"

    def test_no_base_path(self):
        """Test relative URIs fail without a base path."""
        with pytest.raises(ExternalFileError, match="path of input document is unknown"):
            Files().read("image.png")

    def test_missing_file(self, tmp_path: Path):
        """Test unreadable files raise ExternalFileError."""
        with pytest.raises(ExternalFileError) as exc_info:
            Files(tmp_path).read("missing.png")
        assert exc_info.value.uri == "missing.png"

    def test_unsupported_scheme(self):
        """Test remote URIs are not fetched."""
        with pytest.raises(ExternalFileError, match="unsupported URI scheme"):
            Files("/tmp").read("http://example.com/image.png")


class TestReadOptions:
    """Tests for read configuration."""

    def test_defaults(self):
        """Test default option values."""
        options = ReadOptions()
        assert options.base_path is None
        assert options.max_workers == 4
        assert options.load_images is True

    def test_overrides_ignore_none(self):
        """Test None overrides leave the field alone."""
        options = ReadOptions(max_workers=2).with_overrides(max_workers=None, load_images=False)
        assert options.max_workers == 2
        assert options.load_images is False

    def test_invalid_worker_count(self):
        """Test at least one worker is required."""
        with pytest.raises(ValueError, match="max_workers"):
            ReadOptions(max_workers=0)
