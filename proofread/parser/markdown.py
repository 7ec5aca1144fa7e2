"""
Markdown parser.

Supports the block structure validators care about:

- ATX headings (``#`` to ``######``) open a new section; the heading text
  becomes the section header
- setext headings (a paragraph underlined with ``===`` or ``---``) open a
  level 1 or level 2 section
- ``-``, ``*``, ``+`` and ``1.`` items form list blocks; every two spaces of
  indentation add a nesting level, indented lines continue the item
- fenced code blocks (``` or ~~~) and thematic breaks (``***``, ``---``) are
  skipped
- block quotes (``>``) become paragraphs with the markers stripped; headings
  and lists inside a quote are read as plain text
- any other non-blank lines form paragraphs, separated by blank lines

Inline markup is left in the sentence text.
"""

import re
from typing import List, Optional

from proofread.model.builder import DocumentBuilder
from proofread.parser.base import DocumentParser
from proofread.parser.sentence_extractor import SentenceExtractor, SourceLine
from proofread.tokenizer import Tokenizer


HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
LIST_ITEM_PATTERN = re.compile(r"^(\s*)([-*+]|\d+[.)])\s+(\S.*)$")
FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")
SETEXT_PATTERN = re.compile(r"^\s{0,3}(=+|-+)\s*$")
THEMATIC_BREAK_PATTERN = re.compile(r"^\s{0,3}([-*_])(\s*\1){2,}\s*$")
QUOTE_PATTERN = re.compile(r"^(\s{0,3}(?:>\s?)+)(.*)$")


class _BlockState:
    def __init__(self):
        self.paragraph: List[SourceLine] = []
        self.list_item: List[SourceLine] = []
        self.list_level: int = 0
        self.in_list = False
        self.in_quote = False
        self.after_blank = False


class MarkdownParser(DocumentParser):
    name = "markdown"

    def _parse_lines(
        self,
        lines: List[str],
        builder: DocumentBuilder,
        sentence_extractor: SentenceExtractor,
        tokenizer: Tokenizer,
    ) -> None:
        state = _BlockState()
        fence: Optional[str] = None

        def flush_paragraph():
            if state.paragraph:
                builder.add_paragraph()
                for sentence in sentence_extractor.extract_sentences(state.paragraph, tokenizer):
                    builder.add_sentence(sentence)
                state.paragraph = []

        def flush_list_item():
            if state.list_item:
                sentences = sentence_extractor.extract_sentences(state.list_item, tokenizer)
                builder.add_list_element(state.list_level, sentences)
                state.list_item = []

        def close_list():
            flush_list_item()
            state.in_list = False

        for line_number, line in enumerate(lines, start=1):
            fence_match = FENCE_PATTERN.match(line)
            if fence is not None:
                if fence_match and fence_match.group(1) == fence:
                    fence = None
                continue
            if fence_match:
                flush_paragraph()
                close_list()
                fence = fence_match.group(1)
                continue

            if not line.strip():
                flush_paragraph()
                flush_list_item()
                state.after_blank = True
                state.in_quote = False
                continue

            setext = SETEXT_PATTERN.match(line)
            if setext and state.paragraph and not state.in_quote:
                header = sentence_extractor.extract_sentences(state.paragraph, tokenizer)
                state.paragraph = []
                builder.add_section(1 if setext.group(1).startswith("=") else 2, header)
                state.after_blank = False
                continue

            if THEMATIC_BREAK_PATTERN.match(line):
                flush_paragraph()
                close_list()
                state.in_quote = False
                state.after_blank = False
                continue

            quote = QUOTE_PATTERN.match(line)
            if quote:
                close_list()
                if not state.in_quote:
                    flush_paragraph()
                    state.in_quote = True
                if quote.group(2).strip():
                    state.paragraph.append(self._source_line(line_number, line, quote.start(2)))
                else:
                    flush_paragraph()
                state.after_blank = False
                continue

            heading = HEADING_PATTERN.match(line)
            if heading:
                flush_paragraph()
                close_list()
                text = heading.group(2)
                column = line.index(text) if text else len(line)
                header = sentence_extractor.extract_sentences(
                    [self._source_line(line_number, line, column)], tokenizer
                )
                builder.add_section(len(heading.group(1)), header)
                state.in_quote = False
                state.after_blank = False
                continue

            item = LIST_ITEM_PATTERN.match(line)
            if item:
                flush_paragraph()
                flush_list_item()
                if not state.in_list:
                    builder.add_list_block()
                    state.in_list = True
                state.list_level = len(item.group(1).expandtabs(4)) // 2 + 1
                state.list_item = [self._source_line(line_number, line, item.start(3))]
                state.in_quote = False
                state.after_blank = False
                continue

            if state.in_list and line[:1].isspace() and not state.after_blank:
                state.list_item.append(self._source_line(line_number, line))
                continue

            close_list()
            if state.in_quote:
                flush_paragraph()
                state.in_quote = False
            state.paragraph.append(self._source_line(line_number, line))
            state.after_blank = False

        flush_paragraph()
        close_list()
