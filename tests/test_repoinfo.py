import json

import pytest

from hfkit.repoinfo import FileInfo, RepoInfo, SafeTensorsInfo

SAMPLE = {
    "id": "owner/model",
    "model_id": "owner/model",
    "author": "owner",
    "sha": "2439f60ef33a0d46d85da5001d52aeda5b00ce9f",
    "tags": ["text", "safetensors"],
    "siblings": [{"rfilename": "README.md"}, {"rfilename": "sub/weights.bin"}],
    "safetensors": {"parameters": {"F32": 10, "BF16": 20}, "total": 30},
    "downloads": 3,
}


def test_parses_known_fields():
    info = RepoInfo.from_json(json.dumps(SAMPLE).encode())
    assert info.id == SAMPLE["id"]
    assert info.author == SAMPLE["author"]
    assert info.commit_hash == SAMPLE["sha"]
    assert info.tags == SAMPLE["tags"]
    assert info.siblings == [FileInfo("README.md"), FileInfo("sub/weights.bin")]
    assert info.safetensors == SafeTensorsInfo(total=30, parameters={"F32": 10, "BF16": 20})


def test_missing_fields_get_defaults():
    info = RepoInfo.from_json('{"id": "x"}')
    assert info == RepoInfo(id="x")
    assert info.siblings == []


def test_safetensors_keys_are_case_insensitive():
    info = RepoInfo.from_json('{"safetensors": {"Total": 7, "Parameters": {"I8": 7}}}')
    assert info.safetensors.total == 7
    assert info.safetensors.parameters == {"I8": 7}


def test_null_document_gives_empty_info():
    assert RepoInfo.from_json("null") == RepoInfo()


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        RepoInfo.from_json("{not json")


def test_wrong_field_type_raises():
    with pytest.raises(ValueError, match="tags"):
        RepoInfo.from_json('{"tags": "single"}')


def test_round_trip_of_sibling_names():
    names = ["a.txt", "b/c.json"]
    document = {"siblings": [{"rfilename": name} for name in names]}
    info = RepoInfo.from_json(json.dumps(document))
    assert [sibling.name for sibling in info.siblings] == names