"""
Tokenizers

Split sentence text into TokenElements. The tokenizer to use is named in the
configuration (``tokenizer: whitespace`` or ``tokenizer: character``).
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Type

from proofread.errors import ConfigurationError


@dataclass(frozen=True)
class TokenElement:
    """A single token of a sentence.

    Attributes:
        surface: The token text as it appears in the sentence
        offset: 0-based character offset of the token in the sentence
    """
    surface: str
    offset: int


class Tokenizer(ABC):
    """Abstract base class for tokenizers."""

    name: str = ""

    @abstractmethod
    def tokenize(self, content: str) -> List[TokenElement]:
        """Split content into tokens.

        Args:
            content: Sentence text

        Returns:
            Tokens in the order they appear
        """
        ...

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class WhitespaceTokenizer(Tokenizer):
    """Tokenizer for space-delimited languages.

    Words are split on whitespace; punctuation is emitted as separate tokens.
    """

    name = "whitespace"

    _TOKEN_PATTERN = re.compile(r"[\w'’-]+|[^\w\s]", re.UNICODE)

    def tokenize(self, content: str) -> List[TokenElement]:
        return [
            TokenElement(surface=match.group(0), offset=match.start())
            for match in self._TOKEN_PATTERN.finditer(content)
        ]


class CharacterTokenizer(Tokenizer):
    """One token per non-space character, for text without word spacing."""

    name = "character"

    def tokenize(self, content: str) -> List[TokenElement]:
        return [
            TokenElement(surface=char, offset=index)
            for index, char in enumerate(content)
            if not char.isspace()
        ]


TOKENIZERS: Dict[str, Type[Tokenizer]] = {
    WhitespaceTokenizer.name: WhitespaceTokenizer,
    CharacterTokenizer.name: CharacterTokenizer,
}


def get_tokenizer(name: str) -> Tokenizer:
    """Create a tokenizer by configuration name.

    Raises:
        ConfigurationError: If no tokenizer is known under that name
    """
    tokenizer_class = TOKENIZERS.get(name.lower())
    if tokenizer_class is None:
        raise ConfigurationError(
            f"Unknown tokenizer: {name}. Available tokenizers: {sorted(TOKENIZERS)}"
        )
    return tokenizer_class()
