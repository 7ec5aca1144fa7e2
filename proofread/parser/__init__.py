"""
Document Parsers

Turn raw input (string, stream or file) into Document trees.
"""

from typing import Dict, List, Type

from proofread.errors import ParseError
from proofread.parser.base import DocumentParser
from proofread.parser.markdown import MarkdownParser
from proofread.parser.plain_text import PlainTextParser
from proofread.parser.sentence_extractor import SentenceExtractor


PARSERS: Dict[str, Type[DocumentParser]] = {
    PlainTextParser.name: PlainTextParser,
    MarkdownParser.name: MarkdownParser,
}

# File extensions mapped to parser names
EXTENSIONS: Dict[str, str] = {
    ".txt": PlainTextParser.name,
    ".md": MarkdownParser.name,
    ".markdown": MarkdownParser.name,
}


def get_parser(name: str) -> DocumentParser:
    """Create a parser by name (``plain`` or ``markdown``).

    Raises:
        ParseError: If no parser is known under that name
    """
    parser_class = PARSERS.get(name.lower())
    if parser_class is None:
        raise ParseError(f"Unknown parser: {name}. Available parsers: {available_parsers()}")
    return parser_class()


def parser_for_extension(suffix: str, default: str = PlainTextParser.name) -> DocumentParser:
    return get_parser(EXTENSIONS.get(suffix.lower(), default))


def available_parsers() -> List[str]:
    return sorted(PARSERS)


__all__ = [
    "DocumentParser",
    "MarkdownParser",
    "PlainTextParser",
    "SentenceExtractor",
    "available_parsers",
    "get_parser",
    "parser_for_extension",
]
