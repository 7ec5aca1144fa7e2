"""
Validators

The Validator base class, the ValidationError record and ErrorSink, the
validator factory, and the built-in validators (registered on import).
"""

from proofread.validator.base import (
    ErrorSink,
    Scope,
    ValidationError,
    Validator,
)
from proofread.validator.factory import ValidatorFactory

# Built-in validators register themselves with the factory
from proofread.validator import (  # noqa: F401
    comma_number,
    duplicate_section,
    duplicated_sentence,
    invalid_symbol,
    invalid_word,
    paragraph_number,
    section_count,
    section_length,
    sentence_length,
)

__all__ = [
    "ErrorSink",
    "Scope",
    "ValidationError",
    "Validator",
    "ValidatorFactory",
]
