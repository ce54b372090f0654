"""Parsing of tokenizer_config.json files."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

_INT_KEY = re.compile(r"-?\d+")


@dataclass
class TokensDecoder:
    """One entry of ``added_tokens_decoder``."""

    content: str = ""
    lstrip: bool = False
    normalized: bool = False
    rstrip: bool = False
    single_word: bool = False
    special: bool = False


@dataclass
class TokenizerConfig:
    """Common fields of a tokenizer_config.json; ``config_file`` is its path."""

    config_file: str = ""
    tokenizer_class: str = ""
    chat_template: str = ""
    use_default_system_prompt: bool = False
    model_max_length: float = 0.0
    max_length: float = 0.0
    sp_model_kwargs: dict[str, Any] = field(default_factory=dict)
    cls_token: str = ""
    unk_token: str = ""
    sep_token: str = ""
    mask_token: str = ""
    bos_token: str = ""
    eos_token: str = ""
    pad_token: str = ""
    add_bos_token: bool = False
    add_eos_token: bool = False
    added_tokens_decoder: dict[int, TokensDecoder] = field(default_factory=dict)
    additional_special_tokens: list[str] = field(default_factory=list)
    do_lower_case: bool = False
    clean_up_tokenization_spaces: bool = False
    spaces_between_special_tokens: bool = False
    tokenize_chinese_chars: bool = False
    strip_accents: Any = None
    name_or_path: str = ""
    do_basic_tokenize: bool = False
    never_split: Any = None
    stride: int = 0
    truncation_side: str = ""
    truncation_strategy: str = ""


def _type_error(name: str, expected: str, value: Any) -> ValueError:
    return ValueError(f"field {name!r}: expected {expected}, got {type(value).__name__}")


def _as_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _type_error(name, "a string", value)
    return value


def _as_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise _type_error(name, "a boolean", value)
    return value


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error(name, "a number", value)
    return float(value)


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_error(name, "an integer", value)
    return value


def _as_dict(name: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _type_error(name, "an object", value)
    return value


def _as_str_list(name: str, value: Any) -> list[str]:
    if not isinstance(value, list):
        raise _type_error(name, "a list", value)
    return ["" if item is None else _as_str(name, item) for item in value]


def _as_tokens_decoder(name: str, value: Any) -> TokensDecoder:
    if value is None:
        return TokensDecoder()
    return TokensDecoder(**_convert(_as_dict(name, value), _DECODER_FIELDS))


def _as_decoder_map(name: str, value: Any) -> dict[int, TokensDecoder]:
    decoders: dict[int, TokensDecoder] = {}
    for key, entry in _as_dict(name, value).items():
        if not _INT_KEY.fullmatch(key):
            raise ValueError(f"field {name!r}: key {key!r} is not an integer")
        decoders[int(key)] = _as_tokens_decoder(f"{name}[{key}]", entry)
    return decoders


_Converter = Callable[[str, Any], Any]

# A converter of None keeps the JSON value as it was decoded.
_DECODER_FIELDS: dict[str, Optional[_Converter]] = {
    "content": _as_str,
    "lstrip": _as_bool,
    "normalized": _as_bool,
    "rstrip": _as_bool,
    "single_word": _as_bool,
    "special": _as_bool,
}

_CONFIG_FIELDS: dict[str, Optional[_Converter]] = {
    "tokenizer_class": _as_str,
    "chat_template": _as_str,
    "use_default_system_prompt": _as_bool,
    "model_max_length": _as_float,
    "max_length": _as_float,
    "sp_model_kwargs": _as_dict,
    "cls_token": _as_str,
    "unk_token": _as_str,
    "sep_token": _as_str,
    "mask_token": _as_str,
    "bos_token": _as_str,
    "eos_token": _as_str,
    "pad_token": _as_str,
    "add_bos_token": _as_bool,
    "add_eos_token": _as_bool,
    "added_tokens_decoder": _as_decoder_map,
    "additional_special_tokens": _as_str_list,
    "do_lower_case": _as_bool,
    "clean_up_tokenization_spaces": _as_bool,
    "spaces_between_special_tokens": _as_bool,
    "tokenize_chinese_chars": _as_bool,
    "strip_accents": None,
    "name_or_path": _as_str,
    "do_basic_tokenize": _as_bool,
    "never_split": None,
    "stride": _as_int,
    "truncation_side": _as_str,
    "truncation_strategy": _as_str,
}


def _convert(
    data: dict[str, Any], converters: dict[str, Optional[_Converter]]
) -> dict[str, Any]:
    return {
        name: data[name] if convert is None else convert(name, data[name])
        for name, convert in converters.items()
        if data.get(name) is not None
    }


def parse_config_content(json_content: Union[bytes, str]) -> TokenizerConfig:
    """Parse the JSON text of a tokenizer_config.json; raise ValueError if invalid."""
    try:
        data = json.loads(json_content)
        if data is None:
            return TokenizerConfig()
        if not isinstance(data, dict):
            raise _type_error("<root>", "an object", data)
        return TokenizerConfig(**_convert(data, _CONFIG_FIELDS))
    except ValueError as err:
        raise ValueError(f"failed to parse tokenizer_config json content: {err}") from err


def parse_config_file(file_path: Union[str, os.PathLike[str]]) -> TokenizerConfig:
    """Read and parse a tokenizer_config.json file, recording its path."""
    path = os.fspath(file_path)
    with open(path, "rb") as config_file:
        content = config_file.read()
    try:
        config = parse_config_content(content)
    except ValueError as err:
        raise ValueError(f"read from file {path!r}: {err}") from err
    config.config_file = path
    return config