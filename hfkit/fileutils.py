"""Filesystem helpers: existence checks and home-directory expansion."""

from __future__ import annotations

import os
import posixpath

try:
    import pwd
except ImportError:  # pragma: no cover - platforms without a user database
    pwd = None  # type: ignore[assignment]


def exists(file_path: str | os.PathLike[str]) -> bool:
    """Return True if the file or directory exists."""
    try:
        os.stat(file_path)
    except (OSError, ValueError):
        return False
    return True


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _join(*parts: str) -> str:
    non_empty = [part for part in parts if part]
    if not non_empty:
        return ""
    return _clean("/".join(non_empty))


def _home_of(user_name: str) -> str:
    if pwd is None:
        if user_name:
            raise LookupError(f"unknown user {user_name!r}")
        return os.path.expanduser("~")
    if user_name:
        try:
            return pwd.getpwnam(user_name).pw_dir
        except KeyError as err:
            raise LookupError(f"unknown user {user_name!r}") from err
    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return os.path.expanduser("~")


def replace_tilde_in_dir(dir_path: str) -> str:
    """Replace a leading "~" or "~user" with that user's home directory.

    Paths not starting with "~" are returned unchanged. An unknown user
    raises LookupError.
    """
    if not dir_path.startswith("~"):
        return dir_path
    user_name = ""
    if dir_path != "~" and not dir_path.startswith("~/"):
        separator = dir_path.find("/")
        user_name = dir_path[1:] if separator == -1 else dir_path[1:separator]
    try:
        home_dir = _home_of(user_name)
    except LookupError as err:
        raise LookupError(
            f"failed to lookup home directory for user in path {dir_path!r}: {err}"
        ) from err
    return _join(home_dir, dir_path[1 + len(user_name):])