import os
import posixpath
import pwd

import pytest

from hfkit.fileutils import exists, replace_tilde_in_dir


def test_exists_for_file_and_directory(tmp_path):
    file_path = tmp_path / "data.bin"
    file_path.write_bytes(b"x")
    assert exists(file_path) is True
    assert exists(str(tmp_path)) is True


def test_exists_false_for_missing(tmp_path):
    assert exists(tmp_path / "missing") is False
    assert exists("") is False


def test_path_without_tilde_is_unchanged():
    assert replace_tilde_in_dir("") == ""
    assert replace_tilde_in_dir("/abs/path") == "/abs/path"
    assert replace_tilde_in_dir("relative/~x") == "relative/~x"


def test_bare_tilde_is_absolute_home():
    home = replace_tilde_in_dir("~")
    assert posixpath.isabs(home)
    assert "~" not in home


def test_tilde_slash_joins_home():
    home = replace_tilde_in_dir("~")
    assert replace_tilde_in_dir("~/a/b") == posixpath.join(home, "a/b")
    assert replace_tilde_in_dir("~/a/../b/") == posixpath.join(home, "b")


def test_named_user_matches_current_user():
    user_name = pwd.getpwuid(os.getuid()).pw_name
    home = pwd.getpwuid(os.getuid()).pw_dir
    assert replace_tilde_in_dir(f"~{user_name}/cache") == posixpath.join(
        posixpath.normpath(home), "cache"
    )
    assert replace_tilde_in_dir(f"~{user_name}") == posixpath.normpath(home)


def test_unknown_user_raises():
    with pytest.raises(LookupError, match="failed to lookup home directory"):
        replace_tilde_in_dir("~no_such_user_for_hfkit_tests/foo")