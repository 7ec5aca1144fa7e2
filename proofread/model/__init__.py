"""
Document Tree Model

Parsed, immutable representation of the text being proofread.
"""

from proofread.model.document import (
    Document,
    ListBlock,
    ListElement,
    Paragraph,
    Section,
    Sentence,
)
from proofread.model.builder import DocumentBuilder

__all__ = [
    "Document",
    "DocumentBuilder",
    "ListBlock",
    "ListElement",
    "Paragraph",
    "Section",
    "Sentence",
]
