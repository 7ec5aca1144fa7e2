"""
Tests for proofread.parser

Covers the plain text and Markdown parsers, stream and file input, and
parser lookup.
"""

import io

import pytest

from proofread.config.symbols import SymbolTable
from proofread.errors import ParseError
from proofread.parser import (
    MarkdownParser,
    PlainTextParser,
    SentenceExtractor,
    get_parser,
    parser_for_extension,
)
from proofread.tokenizer import WhitespaceTokenizer


MARKDOWN = """Intro text.

# Title

Body one. Body two.

- item one
- item two
  continued here
  - nested

```python
code. ignored.
```

## Sub ##

After.
"""


@pytest.fixture
def extractor():
    return SentenceExtractor(SymbolTable("en"))


@pytest.fixture
def tokenizer():
    return WhitespaceTokenizer()


def texts(sentences):
    return [s.content for s in sentences]


class TestPlainTextParser:
    def test_paragraphs(self, extractor, tokenizer):
        content = "First para line one.\nStill first.\n\n\nSecond para.\n"
        document = PlainTextParser().parse(content, extractor, tokenizer)

        assert len(document.sections) == 1
        section = document.sections[0]
        assert section.level == 0
        assert len(section.paragraphs) == 2
        assert texts(section.paragraphs[0].sentences) == ["First para line one.", "Still first."]
        assert section.paragraphs[0].sentences[1].line_number == 2
        assert section.paragraphs[1].sentences[0].line_number == 5

    def test_empty_input(self, extractor, tokenizer):
        document = PlainTextParser().parse("", extractor, tokenizer)
        assert len(document.sections) == 1
        assert list(document.sentences()) == []

    def test_indented_line_offset(self, extractor, tokenizer):
        document = PlainTextParser().parse("   Indented.", extractor, tokenizer)
        assert document.sections[0].paragraphs[0].sentences[0].start_offset == 3


class TestMarkdownParser:
    @pytest.fixture
    def document(self, extractor, tokenizer):
        return MarkdownParser().parse(MARKDOWN, extractor, tokenizer, file_name="doc.md")

    def test_sections(self, document):
        assert [s.level for s in document.sections] == [0, 1, 2]
        assert [s.header_text for s in document.sections] == ["", "Title", "Sub"]

    def test_leading_paragraph(self, document):
        assert texts(document.sections[0].paragraphs[0].sentences) == ["Intro text."]

    def test_header_position(self, document):
        header = document.sections[2].header[0]
        assert (header.line_number, header.start_offset) == (16, 3)

    def test_paragraph_sentences(self, document):
        assert texts(document.sections[1].paragraphs[0].sentences) == ["Body one.", "Body two."]

    def test_list_block(self, document):
        section = document.sections[1]
        assert len(section.list_blocks) == 1
        elements = section.list_blocks[0].list_elements
        assert [e.level for e in elements] == [1, 1, 2]
        assert [texts(e.sentences) for e in elements] == [
            ["item one"], ["item two continued here"], ["nested"],
        ]
        assert (elements[0].sentences[0].line_number, elements[0].sentences[0].start_offset) == (7, 2)

    def test_code_block_is_skipped(self, document):
        assert "code. ignored." not in " ".join(texts(document.sentences()))

    def test_trailing_section(self, document):
        assert texts(document.sections[2].paragraphs[0].sentences) == ["After."]

    def test_list_then_paragraph(self, extractor, tokenizer):
        document = MarkdownParser().parse("- a\nplain text.\n", extractor, tokenizer)
        section = document.sections[0]
        assert texts(section.list_blocks[0].list_elements[0].sentences) == ["a"]
        assert texts(section.paragraphs[0].sentences) == ["plain text."]

    def test_ordered_list(self, extractor, tokenizer):
        document = MarkdownParser().parse("1. first\n2. second\n", extractor, tokenizer)
        elements = document.sections[0].list_blocks[0].list_elements
        assert [texts(e.sentences) for e in elements] == [["first"], ["second"]]

    def test_blank_line_between_items_keeps_block(self, extractor, tokenizer):
        document = MarkdownParser().parse("- a\n\n- b\n", extractor, tokenizer)
        assert len(document.sections[0].list_blocks) == 1
        assert len(document.sections[0].list_blocks[0].list_elements) == 2

    def test_block_quote_markers_are_stripped(self, extractor, tokenizer):
        content = "> Quote one.\n> Still quoted.\n\nAfter.\n"
        section = MarkdownParser().parse(content, extractor, tokenizer).sections[0]
        quoted = section.paragraphs[0].sentences
        assert texts(quoted) == ["Quote one.", "Still quoted."]
        assert (quoted[1].line_number, quoted[1].start_offset) == (2, 2)
        assert texts(section.paragraphs[1].sentences) == ["After."]

    def test_block_quote_starts_new_paragraph(self, extractor, tokenizer):
        content = "Plain line.\n>> Deeply quoted.\nPlain again.\n"
        section = MarkdownParser().parse(content, extractor, tokenizer).sections[0]
        assert [texts(p.sentences) for p in section.paragraphs] == [
            ["Plain line."], ["Deeply quoted."], ["Plain again."],
        ]

    def test_setext_headings(self, extractor, tokenizer):
        content = "Title\n=====\n\nBody.\n\nSub\n---\n\nMore.\n"
        document = MarkdownParser().parse(content, extractor, tokenizer)
        assert [s.level for s in document.sections] == [1, 2]
        assert [s.header_text for s in document.sections] == ["Title", "Sub"]
        assert texts(document.sections[0].paragraphs[0].sentences) == ["Body."]
        assert document.sections[1].header[0].line_number == 6

    @pytest.mark.parametrize("rule", ["***", "---", "- - -", "___"])
    def test_thematic_break_is_skipped(self, extractor, tokenizer, rule):
        content = f"Before.\n\n{rule}\n\nAfter.\n"
        section = MarkdownParser().parse(content, extractor, tokenizer).sections[0]
        assert [texts(p.sentences) for p in section.paragraphs] == [["Before."], ["After."]]
        assert section.list_blocks == ()

    def test_hash_without_space_is_text(self, extractor, tokenizer):
        document = MarkdownParser().parse("#hashtag here.\n", extractor, tokenizer)
        assert len(document.sections) == 1
        assert texts(document.sections[0].paragraphs[0].sentences) == ["#hashtag here."]


class TestInputSources:
    def test_text_stream(self, extractor, tokenizer):
        document = PlainTextParser().parse_stream(io.StringIO("One. Two."), extractor, tokenizer)
        assert texts(document.sentences()) == ["One.", "Two."]

    def test_undecodable_stream(self, extractor, tokenizer):
        with pytest.raises(ParseError, match="UTF-8"):
            PlainTextParser().parse_stream(io.BytesIO(b"\xff\xfe\xfa"), extractor, tokenizer)

    def test_file(self, extractor, tokenizer, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("Saved text.", encoding="utf-8")
        document = PlainTextParser().parse_file(path, extractor, tokenizer)
        assert document.file_name == str(path)
        assert texts(document.sentences()) == ["Saved text."]

    def test_missing_file(self, extractor, tokenizer, tmp_path):
        with pytest.raises(ParseError) as exc_info:
            PlainTextParser().parse_file(tmp_path / "gone.txt", extractor, tokenizer)
        assert exc_info.value.file_path == tmp_path / "gone.txt"

    def test_batch_aborts_on_first_failure(self, extractor, tokenizer, tmp_path):
        good = tmp_path / "good.txt"
        good.write_text("Fine.", encoding="utf-8")
        with pytest.raises(ParseError):
            PlainTextParser().parse_files([good, tmp_path / "bad.txt"], extractor, tokenizer)


class TestParserLookup:
    def test_by_name(self):
        assert isinstance(get_parser("markdown"), MarkdownParser)
        assert isinstance(get_parser("PLAIN"), PlainTextParser)

    def test_unknown_name(self):
        with pytest.raises(ParseError, match="Unknown parser"):
            get_parser("rst")

    @pytest.mark.parametrize("suffix, expected", [
        (".md", MarkdownParser),
        (".MARKDOWN", MarkdownParser),
        (".txt", PlainTextParser),
        (".rst", PlainTextParser),
    ])
    def test_by_extension(self, suffix, expected):
        assert isinstance(parser_for_extension(suffix), expected)
