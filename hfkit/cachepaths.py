"""Helpers for laying out downloaded files in the hub cache."""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from typing import Mapping, Optional

from hfkit.hubconfig import (
    HEADER_X_LINKED_ETAG,
    HEADER_X_LINKED_SIZE,
    HEADER_X_REPO_COMMIT,
)


@dataclass
class FileMetadata:
    """Metadata the hub reports for a file in its response headers."""

    commit_hash: str = ""
    etag: str = ""
    location: str = ""
    size: int = 0


def clean_relative_file_path(repo_file_name: str) -> str:
    """Normalise a repository file name into a safe relative path.

    ".." elements that would leave the directory are dropped; "." is
    returned if nothing is left.
    """
    joined = "/".join(part for part in repo_file_name.split("/") if part)
    cleaned = posixpath.normpath(joined) if joined else ""
    parts = [part for part in cleaned.split("/") if part not in ("", "..")]
    return "/".join(parts) if parts else "."


def create_symlink(dst: str, src: str) -> None:
    """Create a symbolic link ``dst`` pointing to ``src``, relative if possible.

    Any file or link already at ``dst`` is replaced.
    """
    try:
        target = os.path.relpath(src, os.path.dirname(dst) or ".")
    except ValueError:
        target = src
    try:
        os.remove(dst)
    except FileNotFoundError:
        pass
    except OSError as err:
        raise OSError(
            f"failed to remove dst={dst!r} before linking it to {target!r}: {err}"
        ) from err
    try:
        os.symlink(target, dst)
    except OSError as err:
        raise OSError(f"while symlinking {src!r} to {dst!r} using {target!r}: {err}") from err


def remove_quotes(text: str) -> str:
    """Strip leading and trailing double quotes."""
    return text.lstrip('"').rstrip('"')


def _header_get(header: Mapping[str, str], key: str) -> str:
    value: Optional[str] = header.get(key)
    if value is None:
        wanted = key.lower()
        value = next((v for k, v in header.items() if k.lower() == wanted), None)
    return value or ""


def extract_file_metadata(
    header: Mapping[str, str], url: str, content_length: int
) -> FileMetadata:
    """Read commit hash, ETag, location and size from response headers."""
    etag = _header_get(header, HEADER_X_LINKED_ETAG) or _header_get(header, "ETag")
    size_text = _header_get(header, HEADER_X_LINKED_SIZE)
    try:
        size = int(size_text) if size_text else 0
    except ValueError:
        size = 0
    return FileMetadata(
        commit_hash=_header_get(header, HEADER_X_REPO_COMMIT),
        etag=remove_quotes(etag),
        location=_header_get(header, "Location") or url,
        size=size or content_length,
    )