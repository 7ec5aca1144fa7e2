"""
Document Tree Model

Immutable-after-parse structure inspected by validators:

    Document -> Section -> Paragraph / ListBlock / header -> Sentence

Documents, sections and their containers compare by identity, so two
structurally equal documents remain distinct keys in a result mapping.
Sentences are plain values.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from proofread.tokenizer import TokenElement


@dataclass(frozen=True)
class Sentence:
    """Smallest unit of text inspected by sentence-level validators.

    Attributes:
        content: The sentence text
        line_number: 1-based line the sentence starts on
        start_offset: 0-based column of the first character in that line
        tokens: Tokens produced by the configured tokenizer
        is_first_sentence: True if the sentence opens its paragraph
    """
    content: str
    line_number: int
    start_offset: int = 0
    tokens: Tuple[TokenElement, ...] = ()
    is_first_sentence: bool = False

    def __len__(self) -> int:
        return len(self.content)

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True, eq=False)
class Paragraph:
    sentences: Tuple[Sentence, ...] = ()


@dataclass(frozen=True, eq=False)
class ListElement:
    """An item of a list block; level is the nesting depth, starting at 1."""
    level: int
    sentences: Tuple[Sentence, ...] = ()


@dataclass(frozen=True, eq=False)
class ListBlock:
    list_elements: Tuple[ListElement, ...] = ()


@dataclass(frozen=True, eq=False)
class Section:
    """A heading-delimited block of a document.

    Attributes:
        level: Heading depth (0 for content before the first heading)
        header: Sentences of the heading text
        paragraphs: Paragraphs in document order
        list_blocks: List blocks in document order
    """
    level: int
    header: Tuple[Sentence, ...] = ()
    paragraphs: Tuple[Paragraph, ...] = ()
    list_blocks: Tuple[ListBlock, ...] = ()

    @property
    def header_text(self) -> str:
        return " ".join(sentence.content for sentence in self.header)

    def sentences(self) -> Iterator[Sentence]:
        """Iterate the sentences of this section in inspection order.

        Paragraph sentences come first, then the header sentences, then the
        sentences of every list element of every list block. Each call
        starts a fresh traversal.
        """
        for paragraph in self.paragraphs:
            yield from paragraph.sentences
        yield from self.header
        for list_block in self.list_blocks:
            for list_element in list_block.list_elements:
                yield from list_element.sentences


@dataclass(frozen=True, eq=False)
class Document:
    """Root unit submitted for inspection.

    Iterating a document yields its sections in document order; the
    iteration is finite and can be repeated.
    """
    sections: Tuple[Section, ...] = ()
    file_name: Optional[str] = field(default=None)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def sentences(self) -> Iterator[Sentence]:
        for section in self.sections:
            yield from section.sentences()

    def __repr__(self) -> str:
        return f"Document(file_name={self.file_name!r}, sections={len(self.sections)})"
