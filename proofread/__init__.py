"""
proofread: a text inspection engine.

Parses documents into sections, paragraphs, lists and sentences, runs a
configurable, ordered set of validators over them and reports the errors
found in each document.

Usage:
    engine = ValidationEngine.from_resource("default-en.yaml")
    document = engine.parse(MarkdownParser(), text)
    for error in engine.validate(document):
        print(error.line_number, error.message)
"""

from proofread.config import Configuration, ConfigurationLoader, ValidatorSpec
from proofread.engine import ValidationEngine
from proofread.errors import ConfigurationError, ParseError, ProofreadError
from proofread.model import Document, DocumentBuilder, Sentence
from proofread.parser import MarkdownParser, PlainTextParser, get_parser
from proofread.validator import ErrorSink, ValidationError, Validator, ValidatorFactory

VERSION = "1.0.0"

__all__ = [
    "Configuration",
    "ConfigurationError",
    "ConfigurationLoader",
    "Document",
    "DocumentBuilder",
    "ErrorSink",
    "MarkdownParser",
    "ParseError",
    "PlainTextParser",
    "ProofreadError",
    "Sentence",
    "ValidationEngine",
    "ValidationError",
    "Validator",
    "ValidatorFactory",
    "ValidatorSpec",
    "VERSION",
    "get_parser",
]
