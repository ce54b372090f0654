"""Hub-wide settings: version, session id, cache location and repository types."""

from __future__ import annotations

import enum
import os
import platform
import posixpath
import uuid

VERSION = "v0.0.0-dev"
"""Version of the library."""

SESSION_ID = uuid.uuid4().hex
"""Unique identifier of this process, sent in the user agent."""

DEFAULT_DIR_CREATION_PERM = 0o755
"""Permissions used when creating cache subdirectories."""

DEFAULT_FILE_CREATION_PERM = 0o644
"""Permissions used when creating files inside the cache."""

HEADER_X_REPO_COMMIT = "X-Repo-Commit"
HEADER_X_LINKED_ETAG = "X-Linked-Etag"
HEADER_X_LINKED_SIZE = "X-Linked-Size"

REPO_ID_SEPARATOR = "--"
"""Separates repository name parts when they are mapped to a folder name."""


class RepoType(str, enum.Enum):
    """Kinds of repository served by the hub."""

    DATASET = "datasets"
    SPACE = "spaces"
    MODEL = "models"

    def __str__(self) -> str:
        return self.value


def _join(*parts: str) -> str:
    joined = posixpath.join(*parts)
    return posixpath.normpath(joined) if joined else ""


def default_cache_dir() -> str:
    """Return the hub cache directory shared with other hub clients.

    It is ``$XDG_CACHE_HOME/huggingface/hub`` if that variable is set,
    ``$HOME/.cache/huggingface/hub`` otherwise.
    """
    base = os.environ.get("XDG_CACHE_HOME") or _join(os.environ.get("HOME", ""), ".cache")
    return _join(base, "huggingface", "hub")


def default_http_user_agent() -> str:
    """Return the user agent sent to the hub API."""
    return (
        f"hfkit/{VERSION}; python/{platform.python_version()}; "
        f"session_id/{SESSION_ID}"
    )