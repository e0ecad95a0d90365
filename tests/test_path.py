"""Tests for the Path value object."""

from __future__ import annotations

import copy
import pathlib
import pickle
from unittest.mock import MagicMock

import pytest

from filekit.descriptor import FileDescriptor
from filekit.file import File
from filekit.path import Path

LONG = "this/is/the/path/to/my/file.ext"


class TestConstruction:
    """Tests for building paths from different inputs."""

    @pytest.mark.parametrize(
        "pathname",
        [LONG, "/etc/passwd", "a//b", "dir/", "", "vfs://root/dir/file.ext", "c:\\windows"],
    )
    def test_round_trip(self, pathname: str) -> None:
        """The string form equals the input."""
        assert str(Path(pathname)) == pathname
        assert Path(pathname).pathname == pathname

    def test_from_path(self) -> None:
        original = Path("vfs://root/file.ext")
        rebuilt = Path(original)
        assert rebuilt == original
        assert rebuilt.stream_scheme == "vfs://"

    def test_from_pathlib(self) -> None:
        assert Path(pathlib.PurePosixPath("/usr/lib")).pathname == "/usr/lib"

    def test_from_file_wrapper(self, mock_filesystem: MagicMock) -> None:
        assert Path(File("/tmp/x.txt", mock_filesystem)).pathname == "/tmp/x.txt"

    def test_none_rejected(self) -> None:
        with pytest.raises(TypeError):
            Path(None)

    def test_immutable(self) -> None:
        p = Path(LONG)
        with pytest.raises(AttributeError):
            p.raw_pathname = "other"


class TestStreams:
    """Tests for stream scheme detection."""

    def test_stream_scheme_split_off(self) -> None:
        p = Path("vfs://root/dir/file.ext")
        assert p.is_stream() is True
        assert p.stream_scheme == "vfs://"
        assert p.raw_pathname == "root/dir/file.ext"
        assert p.segments() == ("root", "dir", "file.ext")

    def test_plain_path_is_not_stream(self) -> None:
        p = Path("/root/dir")
        assert p.is_stream() is False
        assert p.stream_scheme == ""

    def test_scheme_requires_letters_only(self) -> None:
        assert Path("s3a1://bucket").is_stream() is False
        assert Path("C:/windows").is_stream() is False

    def test_dirname_keeps_scheme(self) -> None:
        assert Path("vfs://root/dir/file.ext").dirname == "vfs://root/dir"


class TestNaming:
    """Tests for filename, dirname and extension."""

    def test_basic_naming(self) -> None:
        p = Path(LONG)
        assert p.dirname == "this/is/the/path/to/my"
        assert p.filename == "file.ext"
        assert p.extension == "ext"
        assert p.pathname == LONG

    def test_dirname_without_separator(self) -> None:
        assert Path("file.ext").dirname == "."

    def test_is_empty(self) -> None:
        assert Path("").is_empty() is True
        assert Path("vfs://").is_empty() is True
        assert Path("a").is_empty() is False


class TestExtension:
    """Tests for set_extension and remove_extension."""

    def test_set_extension(self) -> None:
        p = Path("my/file.ext")
        changed = p.set_extension("bla")
        assert changed.extension == "bla"
        assert changed.pathname == "my/file.bla"
        assert p.pathname == "my/file.ext"

    def test_set_extension_without_dirname(self) -> None:
        assert Path("file.ext").set_extension("txt").pathname == "file.txt"

    def test_set_extension_adds_missing(self) -> None:
        assert Path("/etc/hosts").set_extension("bak").pathname == "/etc/hosts.bak"

    def test_set_extension_keeps_stream(self) -> None:
        assert Path("vfs://root/a.txt").set_extension("md").pathname == "vfs://root/a.md"

    def test_remove_extension(self) -> None:
        p = Path("my/file.ext").set_extension("bla").remove_extension()
        assert p.extension == ""
        assert p.pathname == "my/file"

    def test_remove_extension_without_extension(self) -> None:
        assert Path("my.dir/file").remove_extension().pathname == "my.dir/file"

    def test_remove_extension_matches_first_occurrence(self) -> None:
        """The first literal ``.ext`` is removed, even in a directory segment."""
        assert Path("backup.ext/file.ext").remove_extension().pathname == "backup/file.ext"


class TestTrailingSeparator:
    """Tests for trailing separator handling."""

    def test_add_is_idempotent(self) -> None:
        once = Path("a/b").add_trailing_separator()
        twice = once.add_trailing_separator()
        assert once.pathname == "a/b/"
        assert twice == once

    def test_remove(self) -> None:
        p = Path("a/b/")
        assert p.has_trailing_separator() is True
        assert p.remove_trailing_separator().pathname == "a/b"
        assert p.pathname == "a/b/"

    def test_remove_without_separator_is_noop(self) -> None:
        assert Path("a/b").remove_trailing_separator() == Path("a/b")

    def test_remove_strips_only_one(self) -> None:
        assert Path("a//").remove_trailing_separator().pathname == "a/"


class TestAppend:
    """Tests for append and the / operator."""

    def test_append_chain(self) -> None:
        p = Path("another/path")
        p = p.append("to")
        assert p.pathname == "another/path/to"
        p = p.append(Path("my/stuff"))
        assert p.pathname == "another/path/to/my/stuff"

    def test_append_does_not_modify_receiver(self) -> None:
        base = Path("another/path")
        base.append("to")
        assert base.pathname == "another/path"

    def test_append_with_trailing_separator(self) -> None:
        assert Path("dir/").append("file").pathname == "dir/file"

    def test_append_keeps_stream(self) -> None:
        assert Path("vfs://root").append("file.txt").pathname == "vfs://root/file.txt"

    def test_slash_operator(self) -> None:
        assert (Path("a") / "b" / Path("c")).pathname == "a/b/c"


class TestSegments:
    """Tests for segment access and slicing."""

    def test_segments(self) -> None:
        p = Path(LONG)
        assert p.segments() == ("this", "is", "the", "path", "to", "my", "file.ext")
        assert p.segment_count() == 7
        assert p.segment(1) == "is"

    def test_segment_out_of_range(self) -> None:
        p = Path("a/b")
        assert p.segment(2) is None
        assert p.segment(-1) is None

    def test_no_empty_segments(self) -> None:
        p = Path("/usr//local/")
        assert p.segments() == ("usr", "local")
        assert p.segment(0) == "usr"

    def test_last_segment(self) -> None:
        assert Path(LONG).last_segment() == "file.ext"
        assert Path("dir/sub/").last_segment() == "sub"

    def test_last_segment_empty(self) -> None:
        with pytest.raises(IndexError):
            Path("").last_segment()
        with pytest.raises(IndexError):
            Path("/").last_segment()

    def test_up_to_segment(self) -> None:
        assert str(Path(LONG).up_to_segment(3)) == "this/is/the"
        assert str(Path(LONG).up_to_segment(0)) == ""
        assert str(Path("a/b").up_to_segment(5)) == "a/b"

    def test_remove_first_segments(self) -> None:
        assert str(Path(LONG).remove_first_segments(2)) == "the/path/to/my/file.ext"
        assert str(Path("a/b").remove_first_segments(5)) == ""

    @pytest.mark.parametrize(
        ("pathname", "count", "expected"),
        [
            ("/a//b/", 0, "a/b"),
            ("/a//b/", 1, "b"),
            ("vfs://root//dir", 0, "root/dir"),
            ("a/b", -1, "a/b"),
        ],
    )
    def test_remove_first_segments_always_normalizes(
        self, pathname: str, count: int, expected: str
    ) -> None:
        assert str(Path(pathname).remove_first_segments(count)) == expected

    def test_remove_last_segments(self) -> None:
        assert str(Path(LONG).remove_last_segments(2)) == "this/is/the/path/to"
        assert str(Path("a/b").remove_last_segments(5)) == ""

    def test_absolute_root_kept_by_prefix_operations(self) -> None:
        p = Path("/usr/local/bin")
        assert str(p.up_to_segment(2)) == "/usr/local"
        assert str(p.remove_last_segments(1)) == "/usr/local"
        assert str(p.remove_first_segments(1)) == "local/bin"

    def test_stream_kept_by_prefix_operations(self) -> None:
        p = Path("vfs://root/dir/file.ext")
        assert str(p.up_to_segment(2)) == "vfs://root/dir"
        assert str(p.remove_last_segments(1)) == "vfs://root/dir"
        assert str(p.remove_first_segments(1)) == "dir/file.ext"


class TestMatching:
    """Tests for prefix, matching and relative operations."""

    def test_is_prefix_of(self) -> None:
        assert Path("this/is/the").is_prefix_of(Path(LONG)) is True
        assert Path(LONG).is_prefix_of(Path("this/is/the")) is False

    def test_is_prefix_of_is_string_based(self) -> None:
        assert Path("this/i").is_prefix_of(Path(LONG)) is True

    def test_is_prefix_of_ignores_stream(self) -> None:
        assert Path("root/dir").is_prefix_of(Path("vfs://root/dir/file")) is True

    def test_matching_first_segments(self) -> None:
        p = Path(LONG)
        assert Path("this/is/the").matching_first_segments(p) == 3
        assert p.matching_first_segments(Path("this/is/another/path")) == 2

    def test_matching_first_segments_shorter_other(self) -> None:
        """Comparison stops at the end of the shorter path."""
        assert Path(LONG).matching_first_segments(Path("this/is")) == 2
        assert Path(LONG).matching_first_segments(Path("")) == 0

    def test_make_relative_to(self) -> None:
        p = Path("/var/www/site/index.html")
        assert str(p.make_relative_to(Path("/var/www/"))) == "/site/index.html"
        assert str(p.make_relative_to("/var/www")) == "/site/index.html"

    def test_make_relative_to_unrelated_base(self) -> None:
        assert str(Path("a/b").make_relative_to("c")) == "a/b"

    def test_make_relative_to_stream(self) -> None:
        p = Path("vfs://root/dir/file.ext")
        assert str(p.make_relative_to("vfs://root")) == "/dir/file.ext"


class TestIsAbsolute:
    """Tests for is_absolute."""

    @pytest.mark.parametrize(
        ("pathname", "expected"),
        [
            ("c:\\windows", True),
            ("/etc", True),
            ("\\server\\share", True),
            ("", False),
            ("./some/dir", False),
            ("../up", False),
            ("some/dir", False),
            ("vfs://root/file", True),
        ],
    )
    def test_is_absolute(self, pathname: str, expected: bool, resolver: MagicMock) -> None:
        assert Path(pathname).is_absolute(resolver) is expected

    def test_canonical_path_is_absolute(self) -> None:
        """A path equal to its own real path is absolute."""
        fake = MagicMock()
        fake.realpath.return_value = "relative/looking"
        assert Path("relative/looking").is_absolute(fake) is True

    def test_default_resolver(self) -> None:
        assert Path("/").is_absolute() is True
        assert Path("./x").is_absolute() is False


class TestEquals:
    """Tests for equals and value equality."""

    def test_same_location(self, resolver: MagicMock) -> None:
        assert Path("/var/log").equals("/var/./log", resolver) is True
        assert Path("/tmp/link").equals(Path("/var/log"), resolver) is True

    def test_different_location(self, resolver: MagicMock) -> None:
        assert Path("/etc").equals("/var/log", resolver) is False

    def test_unresolvable_never_equal(self, resolver: MagicMock) -> None:
        assert Path("/missing").equals("/missing", resolver) is False

    def test_streams(self, resolver: MagicMock) -> None:
        a = Path("vfs://root/dir/file.ext")
        b = Path("vfs://root/file.ext")
        assert a.equals(b, resolver) is False
        assert a.equals("vfs://root/dir/file.ext", resolver) is True

    def test_stream_never_equals_plain_path(self, resolver: MagicMock) -> None:
        assert Path("vfs://etc").equals("/etc", resolver) is False
        assert Path("/etc").equals("vfs://etc", resolver) is False
        resolver.realpath.assert_not_called()

    def test_real_directories(self, tmp_path: pathlib.Path) -> None:
        target = tmp_path / "target"
        target.mkdir()
        (tmp_path / "link").symlink_to(target)
        assert Path(str(tmp_path / "link")).equals(str(target)) is True

    def test_dunder_eq_is_string_identity(self) -> None:
        assert Path("a/b") == Path("a/b")
        assert Path("a/b") != Path("a/b/")
        assert Path("a/b") != "a/b"
        assert len({Path("a/b"), Path("a/b")}) == 1


class TestConversions:
    """Tests for conversions to other types."""

    def test_to_file_descriptor(self) -> None:
        descriptor = Path("vfs://root/file.ext").to_file_descriptor()
        assert isinstance(descriptor, FileDescriptor)
        assert descriptor.pathname == "vfs://root/file.ext"

    def test_fspath(self, tmp_path: pathlib.Path) -> None:
        p = Path(str(tmp_path))
        assert pathlib.Path(p) == tmp_path

    def test_repr(self) -> None:
        assert repr(Path("a/b")) == "Path('a/b')"

    @pytest.mark.parametrize("pathname", ["a/b", "/usr//local/", "vfs://root/file.ext", ""])
    def test_copy_and_pickle(self, pathname: str) -> None:
        p = Path(pathname)

        for clone in (copy.copy(p), copy.deepcopy(p), pickle.loads(pickle.dumps(p))):
            assert clone == p
            assert clone.stream_scheme == p.stream_scheme
            assert clone.segments == p.segments
            assert clone.raw_pathname == p.raw_pathname
