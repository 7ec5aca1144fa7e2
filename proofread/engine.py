"""
Validation Engine

Central orchestrator that applies every configured validator to a batch of
documents at three levels of granularity and collects the errors found for
each document.

Traversal order:

1. Document phase: every document, every validator.
2. Section phase: a pre-pass over every section of every document, then a
   validate-pass in the same order.
3. Sentence phase: a pre-pass over every sentence of every section of every
   document (paragraphs, then header, then list elements), then a
   validate-pass in the same order.

Within each pass validators run in configuration order. Each document has a
single ErrorSink shared by all validators and all phases, so its errors come
out in exactly that order. Exceptions raised by validators are not caught.

Every call to validate_all() runs freshly built validators, so state a
validator gathers in a pre-pass never outlives the call.
"""

import logging
import time
from pathlib import Path
from typing import IO, Dict, Iterable, List, Sequence, Tuple, Union

from proofread.config.loader import ConfigurationLoader
from proofread.config.schema import Configuration
from proofread.model.document import Document
from proofread.parser.base import DocumentParser
from proofread.parser.sentence_extractor import SentenceExtractor
from proofread.validator import ErrorSink, ValidationError, Validator, ValidatorFactory


logger = logging.getLogger(__name__)


class ValidationEngine:
    """Runs the configured validators over parsed documents.

    An engine is not safe for concurrent use: validators keep state between
    the pre-pass and validate-pass of a call. Build one engine per thread.

    Two engines are equal when their configurations are equal, and hash
    accordingly.
    """

    def __init__(self, configuration: Configuration):
        """Initialize the engine.

        Args:
            configuration: Language, tokenizer and validator specifications

        Raises:
            ConfigurationError: If a validator specification cannot be
                resolved or has invalid properties
        """
        self._configuration = configuration
        self._symbol_table = configuration.symbol_table
        self.sentence_extractor = SentenceExtractor(self._symbol_table)
        self.tokenizer = configuration.tokenizer
        self._validators = self._create_validators()

        logger.debug(
            f"Validation engine ready with {len(self._validators)} validator(s): "
            f"{[validator.name for validator in self._validators]}"
        )

    def _create_validators(self) -> Tuple[Validator, ...]:
        return tuple(
            ValidatorFactory.get_instance(spec, self._symbol_table)
            for spec in self._configuration.validators
        )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ValidationEngine":
        """Build an engine from a YAML configuration file."""
        return cls(ConfigurationLoader().load(config_path))

    @classmethod
    def from_resource(cls, resource_path: str) -> "ValidationEngine":
        """Build an engine from a configuration bundled with the package."""
        return cls(ConfigurationLoader().load_from_resource(resource_path))

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def validators(self) -> Tuple[Validator, ...]:
        """Validators built from the configuration, in configuration order.

        Each validation call runs its own instances built from the same
        specifications.
        """
        return self._validators

    # ── Parsing ──

    def parse(self, parser: DocumentParser, source: Union[str, Path, IO]) -> Document:
        """Parse input with this engine's sentence extractor and tokenizer.

        Args:
            parser: Parser for the input format
            source: Text content (str), a file path (Path) or a stream

        Raises:
            ParseError: If the input cannot be read
        """
        if isinstance(source, Path):
            return parser.parse_file(source, self.sentence_extractor, self.tokenizer)
        if isinstance(source, str):
            return parser.parse(source, self.sentence_extractor, self.tokenizer)
        return parser.parse_stream(source, self.sentence_extractor, self.tokenizer)

    def parse_files(
        self,
        parser: DocumentParser,
        file_paths: Iterable[Union[str, Path]],
    ) -> List[Document]:
        """Parse files in order; the first ParseError aborts the batch."""
        return parser.parse_files(file_paths, self.sentence_extractor, self.tokenizer)

    # ── Validation ──

    def validate_all(self, documents: Sequence[Document]) -> Dict[Document, List[ValidationError]]:
        """Validate a batch of documents.

        Note that this method is NOT thread safe.

        Args:
            documents: Parsed documents, validated in this order

        Returns:
            Errors for each input document, in the order they were found.
            Every input document is a key, even when no errors were found.
        """
        start = time.time()
        documents = list(documents)

        sinks: Dict[Document, ErrorSink] = {}
        for document in documents:
            if document not in sinks:
                sinks[document] = ErrorSink()

        validators = self._create_validators()
        self._run_document_validators(validators, documents, sinks)
        self._run_section_validators(validators, documents, sinks)
        self._run_sentence_validators(validators, documents, sinks)

        elapsed_ms = int((time.time() - start) * 1000)
        logger.debug(
            f"Validated {len(sinks)} document(s) with {len(validators)} validator(s) "
            f"in {elapsed_ms}ms: {sum(len(sink) for sink in sinks.values())} error(s)"
        )
        return {document: sink.to_list() for document, sink in sinks.items()}

    def validate(self, document: Document) -> List[ValidationError]:
        """Validate a single document.

        Note that this method is NOT thread safe.
        """
        return self.validate_all([document])[document]

    def _run_document_validators(
        self,
        validators: Tuple[Validator, ...],
        documents: List[Document],
        sinks: Dict[Document, ErrorSink],
    ) -> None:
        for document in documents:
            sink = sinks[document]
            for validator in validators:
                validator.validate_document(document, sink)

    def _run_section_validators(
        self,
        validators: Tuple[Validator, ...],
        documents: List[Document],
        sinks: Dict[Document, ErrorSink],
    ) -> None:
        # Every section of every document is pre-validated before any is validated
        for document in documents:
            for section in document:
                for validator in validators:
                    validator.pre_validate_section(section)

        for document in documents:
            sink = sinks[document]
            for section in document:
                for validator in validators:
                    validator.validate_section(section, sink)

    def _run_sentence_validators(
        self,
        validators: Tuple[Validator, ...],
        documents: List[Document],
        sinks: Dict[Document, ErrorSink],
    ) -> None:
        for document in documents:
            for section in document:
                for sentence in section.sentences():
                    for validator in validators:
                        validator.pre_validate_sentence(sentence)

        for document in documents:
            sink = sinks[document]
            for section in document:
                for sentence in section.sentences():
                    for validator in validators:
                        validator.validate_sentence(sentence, sink)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, ValidationEngine):
            return NotImplemented
        return self._configuration == other._configuration

    def __hash__(self) -> int:
        return hash(self._configuration)

    def __repr__(self) -> str:
        return (
            f"ValidationEngine(configuration={self._configuration!r}, "
            f"sentence_extractor={self.sentence_extractor!r}, "
            f"validators={list(self._validators)!r})"
        )
