"""Tests for LayeredFileNameFactory."""

import pytest
from dataclasses import replace

from vfsnames.domain.entities.filename import LayeredFileName
from vfsnames.domain.enums import FileType
from vfsnames.domain.exceptions import (
    InvalidEscapeSequenceError,
    InvalidOuterNameError,
    MissingHostnameError,
    UnknownSchemeError,
)


class TestLayeredFileNameFactoryCreate:
    """Verify LayeredFileNameFactory.create() behavior."""

    def test_from_name(self, layered_factory, filename_factory):
        outer = filename_factory.create("ftp://host/dir/archive.zip")
        name = layered_factory.create(outer, "zip")
        assert isinstance(name, LayeredFileName)
        assert name.scheme == "zip"
        assert name.path == "/"
        assert name.type is FileType.FOLDER
        assert name.outer is outer
        assert name.uri == "zip:ftp://host/dir/archive.zip!/"

    def test_from_uri(self, layered_factory):
        name = layered_factory.create("sftp://user@[::1]/a.jar", "jar")
        assert name.outer.hostname == "[::1]"
        assert name.uri == "jar:sftp://user@[::1]/a.jar!/"

    def test_scheme_lowercased(self, layered_factory):
        name = layered_factory.create("ftp://host/a.tgz", "TGZ")
        assert name.scheme == "tgz"

    def test_outer_bang_in_path_is_escaped(self, layered_factory):
        name = layered_factory.create("ftp://host/wow%21.zip", "zip")
        assert name.uri == "zip:ftp://host/wow%21.zip!/"

    def test_outer_uri_with_bang_raises(self, layered_factory):
        with pytest.raises(InvalidOuterNameError) as excinfo:
            layered_factory.create("ftp://host/wow!.zip", "zip")
        assert excinfo.value.uri == "ftp://host/wow!.zip"

    def test_outer_name_with_bang_raises(self, layered_factory, filename_factory):
        outer = filename_factory.create("ftp://ho!st/a.zip")
        with pytest.raises(InvalidOuterNameError):
            layered_factory.create(outer, "zip")

    def test_layered_outer_raises(self, layered_factory, sample_zip_name):
        """Layered names do not nest."""
        with pytest.raises(InvalidOuterNameError):
            layered_factory.create(sample_zip_name, "zip")

    def test_unknown_layered_scheme(self, layered_factory, sample_ftp_name):
        with pytest.raises(UnknownSchemeError):
            layered_factory.create(sample_ftp_name, "ftp")

    def test_bad_outer_uri_propagates(self, layered_factory):
        with pytest.raises(MissingHostnameError):
            layered_factory.create("ftp:///a.zip", "zip")


class TestLayeredFileNameFactoryParse:
    """Verify parsing of layered URIs."""

    def test_root(self, layered_factory):
        name = layered_factory.parse("zip:ftp://host/a.zip!/")
        assert name.path == "/"
        assert name.type is FileType.FOLDER
        assert name.outer.path == "/a.zip"

    def test_inner_path(self, layered_factory):
        name = layered_factory.parse("zip:ftp://host/a.zip!/dir/../entry.txt")
        assert name.path == "/entry.txt"
        assert name.type is FileType.FILE
        assert name.uri == "zip:ftp://host/a.zip!/entry.txt"

    def test_no_delimiter_is_root(self, layered_factory):
        name = layered_factory.parse("zip:ftp://host/a.zip")
        assert name.path == "/"
        assert name.outer.path == "/a.zip"

    def test_inner_folder(self, layered_factory):
        name = layered_factory.parse("jar:ftp://host/a.jar!/META-INF/")
        assert name.path == "/META-INF"
        assert name.type is FileType.FOLDER
        assert name.uri == "jar:ftp://host/a.jar!/META-INF/"
        assert name.friendly_uri == name.uri

    def test_equals_built_root(self, layered_factory):
        built = layered_factory.create("ftp://host/a.zip", "zip")
        assert layered_factory.parse(built.uri) == built

    @pytest.mark.parametrize(
        "uri",
        [
            "zip:ftp://host/a.zip!/",
            "zip:ftp://host/a.zip!/dir/",
            "zip:ftp://host/dir/!/entry",
            "zip:ftp://user:pw@host:2121/dir/a%21b.zip!/x/y%3F.txt",
            "tar:smb://CORP\\alice@host/share/a.tar!/dir/",
            "jar:sftp://[::1]/lib/a.jar!/META-INF/MANIFEST.MF",
        ],
    )
    def test_round_trip(self, layered_factory, uri):
        name = layered_factory.parse(uri)
        assert layered_factory.parse(name.to_uri()) == name

    def test_child_round_trip(self, layered_factory, sample_zip_name):
        entry = replace(sample_zip_name, path="/a b/c.txt", type=FileType.FILE)
        assert layered_factory.parse(entry.uri) == entry

    @pytest.mark.parametrize("uri", ["zip:", "zip:!/entry"])
    def test_empty_outer_raises(self, layered_factory, uri):
        with pytest.raises(InvalidOuterNameError):
            layered_factory.parse(uri)

    def test_no_scheme_raises(self, layered_factory):
        with pytest.raises(InvalidOuterNameError):
            layered_factory.parse("ftp//host/a.zip!/")

    def test_non_layered_scheme_raises(self, layered_factory):
        with pytest.raises(UnknownSchemeError):
            layered_factory.parse("ftp://host/a.zip!/")

    def test_bad_inner_escape_raises(self, layered_factory):
        with pytest.raises(InvalidEscapeSequenceError):
            layered_factory.parse("zip:ftp://host/a.zip!/%zz")
