"""The repository description returned by the hub API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class FileInfo:
    """One file of a repository."""

    name: str = ""


@dataclass
class SafeTensorsInfo:
    """Parameter counts: the total and per dtype name."""

    total: int = 0
    parameters: dict[str, int] = field(default_factory=dict)


def _str(name: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {name!r}: expected a string")
    return value


def _int(name: str, value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {name!r}: expected an integer")
    return value


def _object(name: str, value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"field {name!r}: expected an object")
    return value


def _list(name: str, value: Any) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {name!r}: expected a list")
    return value


def _safetensors(value: Any) -> SafeTensorsInfo:
    data = {key.lower(): item for key, item in _object("safetensors", value).items()}
    parameters = _object("safetensors.parameters", data.get("parameters"))
    return SafeTensorsInfo(
        total=_int("safetensors.total", data.get("total")),
        parameters={
            key: _int(f"safetensors.parameters[{key}]", count)
            for key, count in parameters.items()
        },
    )


@dataclass
class RepoInfo:
    """Information about a repository, including its list of files."""

    id: str = ""
    model_id: str = ""
    author: str = ""
    commit_hash: str = ""
    tags: list[str] = field(default_factory=list)
    siblings: list[FileInfo] = field(default_factory=list)
    safetensors: SafeTensorsInfo = field(default_factory=SafeTensorsInfo)

    @classmethod
    def from_json(cls, content: Union[bytes, str]) -> "RepoInfo":
        """Parse the API's JSON; raise ValueError if it is malformed."""
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        data, _ = json.JSONDecoder().raw_decode(text.lstrip())
        if data is None:
            return cls()
        data = _object("<root>", data)
        return cls(
            id=_str("id", data.get("id")),
            model_id=_str("model_id", data.get("model_id")),
            author=_str("author", data.get("author")),
            commit_hash=_str("sha", data.get("sha")),
            tags=[_str("tags", tag) for tag in _list("tags", data.get("tags"))],
            siblings=[
                FileInfo(name=_str("rfilename", _object("siblings", s).get("rfilename")))
                for s in _list("siblings", data.get("siblings"))
            ],
            safetensors=_safetensors(data.get("safetensors")),
        )