"""
Document Builder

Mutable assembly helper used by parsers (and tests) to build an immutable
Document one element at a time.
"""

from typing import List, Optional, Sequence

from proofread.model.document import (
    Document,
    ListBlock,
    ListElement,
    Paragraph,
    Section,
    Sentence,
)


class _SectionDraft:
    def __init__(self, level: int, header: Sequence[Sentence]):
        self.level = level
        self.header: List[Sentence] = list(header)
        self.paragraphs: List[List[Sentence]] = []
        self.list_blocks: List[List[ListElement]] = []

    def freeze(self) -> Section:
        return Section(
            level=self.level,
            header=tuple(self.header),
            paragraphs=tuple(Paragraph(tuple(p)) for p in self.paragraphs),
            list_blocks=tuple(ListBlock(tuple(b)) for b in self.list_blocks),
        )


class DocumentBuilder:
    """Builds a Document section by section.

    Sentences added before any section is opened go to an implicit level-0
    section. Methods return the builder so calls can be chained:

        >>> document = (DocumentBuilder("notes.md")
        ...     .add_section(1, [Sentence("Intro", 1)])
        ...     .add_paragraph()
        ...     .add_sentence(Sentence("Hello there.", 2))
        ...     .build())
    """

    def __init__(self, file_name: Optional[str] = None):
        self.file_name = file_name
        self._sections: List[_SectionDraft] = []
        self._built = False

    def _current_section(self) -> _SectionDraft:
        if not self._sections:
            self._sections.append(_SectionDraft(0, ()))
        return self._sections[-1]

    def add_section(self, level: int, header: Sequence[Sentence] = ()) -> "DocumentBuilder":
        self._sections.append(_SectionDraft(level, header))
        return self

    def add_section_header(self, sentences: Sequence[Sentence]) -> "DocumentBuilder":
        self._current_section().header.extend(sentences)
        return self

    def add_paragraph(self) -> "DocumentBuilder":
        self._current_section().paragraphs.append([])
        return self

    def add_sentence(self, sentence: Sentence) -> "DocumentBuilder":
        """Append a sentence to the last paragraph, opening one if needed."""
        section = self._current_section()
        if not section.paragraphs:
            section.paragraphs.append([])
        section.paragraphs[-1].append(sentence)
        return self

    def add_list_block(self) -> "DocumentBuilder":
        self._current_section().list_blocks.append([])
        return self

    def add_list_element(self, level: int, sentences: Sequence[Sentence]) -> "DocumentBuilder":
        """Append a list element to the last list block, opening one if needed."""
        section = self._current_section()
        if not section.list_blocks:
            section.list_blocks.append([])
        section.list_blocks[-1].append(ListElement(level, tuple(sentences)))
        return self

    def build(self) -> Document:
        if self._built:
            raise RuntimeError("DocumentBuilder.build() can only be called once")
        self._built = True
        return Document(
            sections=tuple(draft.freeze() for draft in self._sections),
            file_name=self.file_name,
        )
