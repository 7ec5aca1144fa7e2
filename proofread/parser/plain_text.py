"""Plain text parser: one section, paragraphs separated by blank lines."""

from typing import List

from proofread.model.builder import DocumentBuilder
from proofread.parser.base import DocumentParser
from proofread.parser.sentence_extractor import SentenceExtractor, SourceLine
from proofread.tokenizer import Tokenizer


class PlainTextParser(DocumentParser):
    name = "plain"

    def _parse_lines(
        self,
        lines: List[str],
        builder: DocumentBuilder,
        sentence_extractor: SentenceExtractor,
        tokenizer: Tokenizer,
    ) -> None:
        builder.add_section(0)
        block: List[SourceLine] = []

        for line_number, line in enumerate(lines, start=1):
            if line.strip():
                block.append(self._source_line(line_number, line))
                continue
            self._flush(block, builder, sentence_extractor, tokenizer)
            block = []

        self._flush(block, builder, sentence_extractor, tokenizer)

    @staticmethod
    def _flush(block, builder, sentence_extractor, tokenizer) -> None:
        if not block:
            return
        builder.add_paragraph()
        for sentence in sentence_extractor.extract_sentences(block, tokenizer):
            builder.add_sentence(sentence)
