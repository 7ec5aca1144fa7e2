"""
Sentence extraction.

Splits a block of text (a paragraph, a heading, a list element) into
sentences at the end-of-sentence symbols of the configured symbol table.
"""

from bisect import bisect_right
from typing import List, Sequence, Tuple

from proofread.config.symbols import SymbolTable, SymbolType
from proofread.model.document import Sentence
from proofread.tokenizer import Tokenizer


# (line_number, column, text) of one source line of a block
SourceLine = Tuple[int, int, str]


class SentenceExtractor:
    """Finds sentence boundaries using a symbol table.

    A sentence ends at a full stop, question mark or exclamation mark,
    together with any end marks and closing quotes or parentheses that
    directly follow it. ASCII end marks only end a sentence when followed by
    whitespace or the end of the text, so "3.14" or "example.com" stay whole.
    """

    def __init__(self, symbol_table: SymbolTable):
        self.symbol_table = symbol_table
        self.end_chars = frozenset(
            symbol_table.value_of(symbol_type)
            for symbol_type in (
                SymbolType.FULL_STOP,
                SymbolType.QUESTION_MARK,
                SymbolType.EXCLAMATION_MARK,
            )
        )
        self.closing_chars = frozenset(
            symbol_table.value_of(symbol_type)
            for symbol_type in (
                SymbolType.RIGHT_QUOTATION_MARK,
                SymbolType.RIGHT_PARENTHESIS,
            )
        )
        # Lines of a block are joined without a separator in languages
        # written without spaces between words
        self.line_separator = "" if symbol_table.lang == "ja" else " "

    def extract(self, text: str) -> List[Tuple[int, int]]:
        """Find sentence spans in text.

        Args:
            text: Text of one block

        Returns:
            (start, end) offsets of each sentence, surrounding whitespace
            excluded. Trailing text without an end mark is a sentence too.
        """
        spans: List[Tuple[int, int]] = []
        start = 0
        index = 0
        length = len(text)

        while index < length:
            if text[index] not in self.end_chars:
                index += 1
                continue

            end = index + 1
            while end < length and (text[end] in self.end_chars or text[end] in self.closing_chars):
                end += 1

            if text[index].isascii() and end < length and not text[end].isspace():
                index = end
                continue

            self._add_span(spans, text, start, end)
            start = end
            index = end

        self._add_span(spans, text, start, length)
        return spans

    def extract_sentences(self, lines: Sequence[SourceLine], tokenizer: Tokenizer) -> List[Sentence]:
        """Build the sentences of a block spread over one or more source lines.

        Args:
            lines: Source lines of the block, with their positions
            tokenizer: Tokenizer used to fill Sentence.tokens

        Returns:
            Sentences in order, each positioned at the line and column where
            it starts
        """
        if not lines:
            return []

        line_starts: List[int] = []
        position = 0
        for _, _, text in lines:
            line_starts.append(position)
            position += len(text) + len(self.line_separator)
        joined = self.line_separator.join(text for _, _, text in lines)

        sentences = []
        for number, (begin, end) in enumerate(self.extract(joined)):
            line_index = bisect_right(line_starts, begin) - 1
            line_number, column, _ = lines[line_index]
            content = joined[begin:end]
            sentences.append(Sentence(
                content=content,
                line_number=line_number,
                start_offset=column + begin - line_starts[line_index],
                tokens=tuple(tokenizer.tokenize(content)),
                is_first_sentence=number == 0,
            ))
        return sentences

    @staticmethod
    def _add_span(spans: List[Tuple[int, int]], text: str, start: int, end: int) -> None:
        while start < end and text[start].isspace():
            start += 1
        while end > start and text[end - 1].isspace():
            end -= 1
        if start < end:
            spans.append((start, end))

    def __repr__(self) -> str:
        return f"SentenceExtractor(lang={self.symbol_table.lang!r})"
