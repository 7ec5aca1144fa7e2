"""
Validation Report Data Models

DocumentReport summarizes the errors found in one document and renders them
as JSON, as a human-readable block or as one plain line per error.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from proofread.model.document import Document
from proofread.validator.base import ValidationError


@dataclass
class DocumentReport:
    """Structured report for one validated document.

    Attributes:
        file_name: Name of the validated file, if known
        errors: Errors in the order they were found
        timestamp: When validation was performed (UTC)
        duration_ms: How long the validation call took in milliseconds
    """
    file_name: Optional[str]
    errors: List[ValidationError] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    @classmethod
    def from_results(
        cls,
        results: Dict[Document, List[ValidationError]],
        duration_ms: int = 0,
    ) -> List["DocumentReport"]:
        return [
            cls(file_name=document.file_name, errors=list(errors), duration_ms=duration_ms)
            for document, errors in results.items()
        ]

    def _by_level(self, level: str) -> List[ValidationError]:
        return [e for e in self.errors if e.level == level]

    @property
    def error_count(self) -> int:
        return len(self._by_level("error"))

    @property
    def warning_count(self) -> int:
        return len(self._by_level("warning"))

    @property
    def info_count(self) -> int:
        return len(self._by_level("info"))

    @property
    def is_valid(self) -> bool:
        return self.error_count == 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "file_name": self.file_name,
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
            "summary": {
                "errors": self.error_count,
                "warnings": self.warning_count,
                "infos": self.info_count,
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def format_plain(self) -> List[str]:
        """One ``file:line: [Validator] message`` line per error."""
        name = self.file_name or "<input>"
        lines = []
        for error in self.errors:
            location = f"{name}:{error.line_number}" if error.line_number is not None else name
            lines.append(f"{location}: {error.level}: [{error.validator_name}] {error.message}")
        return lines

    def format_human(self) -> str:
        """Format report for human-readable console output."""
        name = self.file_name or "<input>"
        if not self.errors:
            return f"✅ {name}: No problems found"

        icon = "✅" if self.is_valid else "❌"
        lines = [
            f"{icon} {name}: {self.error_count} error(s), {self.warning_count} warning(s), "
            f"{self.info_count} info"
        ]
        for error in self.errors:
            if error.level == "error":
                prefix = "  ❌"
            elif error.level == "warning":
                prefix = "  ⚠"
            else:
                prefix = "  ℹ"
            where = f"line {error.line_number}" if error.line_number is not None else error.scope.value
            lines.append(f"{prefix} [{error.validator_name}] {where}: {error.message}")
            if error.sentence is not None:
                lines.append(f"      → {error.sentence.content}")
        return "\n".join(lines)
