"""The tokenizer interface and the enumeration of special tokens."""

from __future__ import annotations

import abc
import enum


class SpecialToken(enum.IntEnum):
    """Commonly used special tokens, whose ids vary between tokenizers."""

    BEGINNING_OF_SENTENCE = 0
    END_OF_SENTENCE = 1
    UNKNOWN = 2
    PAD = 3
    MASK = 4
    CLASSIFICATION = 5
    SPECIAL_TOKENS_COUNT = 6

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "SpecialToken":
        """Look up a token by its snake-case name, ignoring case."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"{name} does not belong to SpecialToken values") from None


def special_token_strings() -> list[str]:
    """Return the names of all special tokens, in value order."""
    return [str(token) for token in SpecialToken]


class Tokenizer(abc.ABC):
    """Converts text to token ids and back."""

    @abc.abstractmethod
    def encode(self, text: str) -> list[int]:
        """Return the token ids for ``text``."""

    @abc.abstractmethod
    def decode(self, ids: list[int]) -> str:
        """Return the text for a sequence of token ids."""

    @abc.abstractmethod
    def special_token_id(self, token: SpecialToken) -> int:
        """Return the id of ``token``; raise ValueError if it is not registered."""