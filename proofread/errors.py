"""
Proofread Error Hierarchy

Defines the exceptions raised by the proofread engine and its collaborators.
Rule violations found in text are never raised; they are reported as
ValidationError records through an ErrorSink.
"""

from pathlib import Path
from typing import Optional


class ProofreadError(Exception):
    """Base exception for all proofread errors."""
    pass


class ConfigurationError(ProofreadError):
    """Error in proofread configuration.

    Raised when a configuration file is missing or unparsable, when it
    contains unknown or invalid settings, or when a validator specification
    cannot be resolved to a validator implementation.

    Attributes:
        source: Path or resource name the configuration came from, if any
        line_number: 1-based line of a YAML syntax error, if known
        column: 1-based column of a YAML syntax error, if known
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line_number: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.source = source
        self.line_number = line_number
        self.column = column

        parts = [message]
        if source:
            parts.append(f"Source: {source}")
        if line_number is not None:
            if column is not None:
                parts.append(f"Line {line_number}, Column {column}")
            else:
                parts.append(f"Line {line_number}")

        super().__init__(" | ".join(parts))


class ParseError(ProofreadError):
    """Error parsing an input document.

    Raised by document parsers when input cannot be read or decoded.
    A parse error aborts the whole batch it occurs in.

    Attributes:
        file_path: The file being parsed, if the input came from a file
    """

    def __init__(self, message: str, file_path: Optional[Path] = None):
        self.file_path = file_path
        if file_path is not None:
            message = f"{message} ({file_path})"
        super().__init__(message)
