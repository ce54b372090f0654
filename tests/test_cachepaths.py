import os

import pytest

from hfkit.cachepaths import (
    FileMetadata,
    clean_relative_file_path,
    create_symlink,
    extract_file_metadata,
    remove_quotes,
)


@pytest.mark.parametrize(
    "given, expected",
    [
        ("foo/bar", "foo/bar"),
        ("foo/../bar", "bar"),
        ("foo/./bar", "foo/bar"),
        ("/foo/bar", "foo/bar"),
        ("foo//bar", "foo/bar"),
        ("foo/bar/..", "foo"),
        ("../foo/bar", "foo/bar"),
        ("foo/../../../..", "."),
        ("foo/../../../bar", "bar"),
        ("", "."),
        (".", "."),
        ("..", "."),
    ],
)
def test_clean_relative_file_path(given, expected):
    assert clean_relative_file_path(given) == expected


def test_remove_quotes():
    assert remove_quotes('"abc"') == "abc"
    assert remove_quotes('""abc"') == "abc"
    assert remove_quotes("abc") == "abc"


def test_metadata_prefers_linked_etag():
    header = {
        "X-Repo-Commit": "c0ffee",
        "X-Linked-Etag": '"linked"',
        "ETag": '"plain"',
        "X-Linked-Size": "1234",
    }
    metadata = extract_file_metadata(header, "https://hub.example.com/f", 10)
    assert metadata == FileMetadata(
        commit_hash="c0ffee",
        etag="linked",
        location="https://hub.example.com/f",
        size=1234,
    )


def test_metadata_falls_back_to_etag_and_content_length():
    header = {"etag": '"plain"', "location": "https://cdn.example.com/f"}
    metadata = extract_file_metadata(header, "https://hub.example.com/f", 77)
    assert metadata.etag == "plain"
    assert metadata.location == "https://cdn.example.com/f"
    assert metadata.size == 77
    assert metadata.commit_hash == ""


def test_metadata_bad_size_uses_content_length():
    metadata = extract_file_metadata({"X-Linked-Size": "many"}, "u", 5)
    assert metadata.size == 5
    assert metadata.etag == ""


def test_create_symlink_is_relative(tmp_path):
    blob = tmp_path / "blobs" / "abc"
    blob.parent.mkdir()
    blob.write_text("hello")
    link_dir = tmp_path / "snapshots" / "rev"
    link_dir.mkdir(parents=True)
    link = link_dir / "README.md"
    create_symlink(str(link), str(blob))
    assert os.readlink(link) == os.path.join("..", "..", "blobs", "abc")
    assert link.read_text() == "hello"


def test_create_symlink_replaces_existing(tmp_path):
    blob = tmp_path / "blob"
    blob.write_text("new")
    link = tmp_path / "link"
    link.write_text("old")
    create_symlink(str(link), str(blob))
    assert link.is_symlink()
    assert link.read_text() == "new"