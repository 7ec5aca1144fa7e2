"""
Document parser base class.

Parsers turn raw text into a Document. Input can be a string, a text or
binary stream, or a file path; every failure to read or decode the input is
raised as ParseError.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from proofread.errors import ParseError
from proofread.model.builder import DocumentBuilder
from proofread.model.document import Document
from proofread.parser.sentence_extractor import SentenceExtractor, SourceLine
from proofread.tokenizer import Tokenizer


logger = logging.getLogger(__name__)


class DocumentParser(ABC):
    """Abstract base class for document parsers.

    Subclasses implement _parse_lines(), which feeds a DocumentBuilder from
    the input lines.
    """

    name: str = ""

    def parse(
        self,
        content: str,
        sentence_extractor: SentenceExtractor,
        tokenizer: Tokenizer,
        file_name: Optional[str] = None,
    ) -> Document:
        """Parse text content into a Document.

        Args:
            content: The full text
            sentence_extractor: Splits blocks into sentences
            tokenizer: Tokenizes each sentence
            file_name: Name recorded on the document

        Returns:
            Parsed Document
        """
        builder = DocumentBuilder(file_name)
        self._parse_lines(content.splitlines(), builder, sentence_extractor, tokenizer)
        document = builder.build()
        logger.debug(f"Parsed {file_name or '<string>'}: {len(document.sections)} section(s)")
        return document

    def parse_stream(
        self,
        stream: IO,
        sentence_extractor: SentenceExtractor,
        tokenizer: Tokenizer,
        file_name: Optional[str] = None,
    ) -> Document:
        """Parse a text or binary (UTF-8) stream.

        Raises:
            ParseError: If the stream cannot be read or decoded
        """
        try:
            content = stream.read()
            if isinstance(content, bytes):
                content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Cannot decode input as UTF-8: {e}")
        except OSError as e:
            raise ParseError(f"Cannot read input stream: {e}")
        return self.parse(content, sentence_extractor, tokenizer, file_name)

    def parse_file(
        self,
        file_path: Union[str, Path],
        sentence_extractor: SentenceExtractor,
        tokenizer: Tokenizer,
    ) -> Document:
        """Parse a UTF-8 text file.

        Raises:
            ParseError: If the file is missing, unreadable or not UTF-8
        """
        path = Path(file_path)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ParseError("File not found", path)
        except UnicodeDecodeError as e:
            raise ParseError(f"Cannot decode file as UTF-8: {e}", path)
        except OSError as e:
            raise ParseError(f"Cannot read file: {e}", path)
        return self.parse(content, sentence_extractor, tokenizer, file_name=str(path))

    def parse_files(
        self,
        file_paths: Iterable[Union[str, Path]],
        sentence_extractor: SentenceExtractor,
        tokenizer: Tokenizer,
    ) -> List[Document]:
        """Parse files in order; the first failure aborts the whole batch."""
        return [self.parse_file(path, sentence_extractor, tokenizer) for path in file_paths]

    @abstractmethod
    def _parse_lines(
        self,
        lines: List[str],
        builder: DocumentBuilder,
        sentence_extractor: SentenceExtractor,
        tokenizer: Tokenizer,
    ) -> None:
        ...

    @staticmethod
    def _source_line(line_number: int, line: str, column: int = 0) -> SourceLine:
        """Position a line's text, skipping leading whitespace from column on."""
        text = line[column:]
        stripped = text.lstrip()
        return (line_number, column + len(text) - len(stripped), stripped.rstrip())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
