"""Tests for .proto file discovery."""

import os

import pytest

from protogen.discovery import find_proto_files
from protogen.errors import DiscoveryError


def _always_file(path):
    return True


class TestFindProtoFiles:
    """Tests for walking a real directory tree."""

    def test_collects_nested_proto_files(self, proto_tree):
        """Test proto files in nested directories are found."""
        files = find_proto_files(str(proto_tree))

        assert set(files) == {
            str(proto_tree / "a" / "x.proto"),
            str(proto_tree / "a" / "b" / "y.proto"),
        }

    def test_results_are_absolute(self, proto_tree):
        """Test every returned path is absolute."""
        for path in find_proto_files(str(proto_tree)):
            assert os.path.isabs(path)

    def test_excludes_non_matching_files(self, proto_tree):
        """Test files without the exact .proto suffix are skipped."""
        (proto_tree / "a" / "x.proto.bak").write_text("")
        (proto_tree / "notes.PROTO").write_text("")

        files = find_proto_files(str(proto_tree))
        assert all(path.endswith(".proto") for path in files)
        assert len(files) == 2

    def test_directories_named_proto_are_traversed_not_collected(self, tmp_path):
        """Test a directory ending in .proto is descended into but not returned."""
        nested = tmp_path / "schemas.proto"
        nested.mkdir()
        (nested / "inner.proto").write_text("")

        assert find_proto_files(str(tmp_path)) == [str(nested / "inner.proto")]

    def test_special_files_are_excluded(self, tmp_path):
        """Test dangling symlinks and FIFOs named *.proto are skipped."""
        (tmp_path / "real.proto").write_text("")
        os.symlink(str(tmp_path / "missing-target"), str(tmp_path / "dangling.proto"))
        os.mkfifo(str(tmp_path / "pipe.proto"))

        assert find_proto_files(str(tmp_path)) == [str(tmp_path / "real.proto")]

    def test_symlink_to_proto_file_is_kept(self, tmp_path):
        """Test a symlink pointing at a regular file is collected."""
        target = tmp_path / "target.txt"
        target.write_text("")
        os.symlink(str(target), str(tmp_path / "linked.proto"))

        assert find_proto_files(str(tmp_path)) == [str(tmp_path / "linked.proto")]

    def test_order_is_lexical_per_directory(self, tmp_path):
        """Test files within a directory come back sorted by name."""
        for name in ["c.proto", "a.proto", "b.proto"]:
            (tmp_path / name).write_text("")

        files = find_proto_files(str(tmp_path))
        assert [os.path.basename(path) for path in files] == ["a.proto", "b.proto", "c.proto"]

    def test_empty_directory_returns_empty_list(self, tmp_path):
        """Test an empty tree yields no files and no error."""
        assert find_proto_files(str(tmp_path)) == []

    def test_missing_root_raises(self, tmp_path):
        """Test a nonexistent root fails with DiscoveryError."""
        missing = tmp_path / "does-not-exist"

        with pytest.raises(DiscoveryError) as exc_info:
            find_proto_files(str(missing))

        assert exc_info.value.root == str(missing)
        assert isinstance(exc_info.value.error, FileNotFoundError)


class TestInjectedWalker:
    """Tests for discovery with a substituted walker."""

    def test_uses_custom_walker(self):
        """Test entries from a custom walker are filtered and joined."""
        def walker(root, onerror=None):
            yield root, ["sub"], ["one.proto", "skip.txt"]
            yield os.path.join(root, "sub"), [], ["two.proto"]

        files = find_proto_files("/protos", walker=walker, is_file=_always_file)
        assert files == ["/protos/one.proto", "/protos/sub/two.proto"]

    def test_is_file_predicate_filters_entries(self):
        """Test entries rejected by the regular-file check are dropped."""
        def walker(root, onerror=None):
            yield root, [], ["keep.proto", "socket.proto"]

        files = find_proto_files(
            "/protos", walker=walker, is_file=lambda path: not path.endswith("socket.proto")
        )
        assert files == ["/protos/keep.proto"]

    def test_first_error_aborts_walk(self):
        """Test the walk stops at the first reported error."""
        visited = []

        def walker(root, onerror=None):
            visited.append(root)
            yield root, ["locked", "open"], ["top.proto"]
            onerror(PermissionError(13, "Permission denied", os.path.join(root, "locked")))
            visited.append("open")
            yield os.path.join(root, "open"), [], ["later.proto"]

        with pytest.raises(DiscoveryError) as exc_info:
            find_proto_files("/protos", walker=walker, is_file=_always_file)

        assert isinstance(exc_info.value.error, PermissionError)
        assert visited == ["/protos"]
