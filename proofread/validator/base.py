"""
Validator Capability

Defines the contract every pluggable validator satisfies, the immutable
ValidationError record validators produce, and the ErrorSink they append
those records to.

A validator overrides only the hooks it needs; every hook on the base class
is a no-op. The engine calls every hook at every level regardless.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Literal, Mapping, Optional, Set, Tuple

from proofread.config.symbols import SymbolTable
from proofread.errors import ConfigurationError
from proofread.model.document import Document, Section, Sentence


Level = Literal["error", "warning", "info"]
LEVELS: Tuple[str, ...] = ("error", "warning", "info")


class Scope(Enum):
    """Structural level a validation error originates from."""
    DOCUMENT = "document"
    SECTION = "section"
    SENTENCE = "sentence"


@dataclass(frozen=True)
class ValidationError:
    """A single rule violation found in the text.

    Attributes:
        validator_name: Name of the validator that produced the error
        message: Human-readable description of the violation
        scope: Structural level the validator was inspecting
        level: Severity (error, warning, info)
        sentence: Sentence the error points at, if any
        start_position: 0-based offset of the offending text in the sentence
        end_position: 0-based offset just past the offending text
    """
    validator_name: str
    message: str
    scope: Scope
    level: Level = "error"
    sentence: Optional[Sentence] = None
    start_position: Optional[int] = None
    end_position: Optional[int] = None

    @property
    def line_number(self) -> Optional[int]:
        return self.sentence.line_number if self.sentence is not None else None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {
            "validator": self.validator_name,
            "message": self.message,
            "scope": self.scope.value,
            "level": self.level,
        }
        if self.sentence is not None:
            d["sentence"] = self.sentence.content
            d["line_number"] = self.sentence.line_number
            d["start_offset"] = self.sentence.start_offset
        if self.start_position is not None:
            d["start_position"] = self.start_position
        if self.end_position is not None:
            d["end_position"] = self.end_position
        return d


class ErrorSink:
    """Append-only, order-preserving collection of errors for one document."""

    __slots__ = ("_errors",)

    def __init__(self):
        self._errors: List[ValidationError] = []

    def append(self, error: ValidationError) -> None:
        self._errors.append(error)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def to_list(self) -> List[ValidationError]:
        """Snapshot of the errors appended so far, in append order."""
        return list(self._errors)

    def __repr__(self) -> str:
        return f"ErrorSink(errors={len(self._errors)})"


class Validator:
    """Base class for validators.

    Subclasses declare their options in ``DEFAULT_PROPERTIES``; configured
    values are coerced to the type of the default. Every validator also
    accepts ``level`` (error, warning, info).

    Hooks, all no-ops here:
        pre_validate_section(section)
        pre_validate_sentence(sentence)
        validate_document(document, sink)
        validate_section(section, sink)
        validate_sentence(sentence, sink)

    Args:
        properties: Configured option values
        symbol_table: Symbol table of the active configuration

    Raises:
        ConfigurationError: On unknown options or values of the wrong type
    """

    name: str = ""
    DEFAULT_PROPERTIES: Dict[str, Any] = {}

    def __init__(
        self,
        properties: Optional[Mapping[str, Any]] = None,
        symbol_table: Optional[SymbolTable] = None,
    ):
        if not self.name:
            self.name = type(self).__name__
        self.symbol_table = symbol_table or SymbolTable()
        self.properties = self._resolve_properties(dict(properties or {}))
        self.level: Level = self.properties.pop("level")

    # ── Hooks ──

    def pre_validate_section(self, section: Section) -> None:
        pass

    def pre_validate_sentence(self, sentence: Sentence) -> None:
        pass

    def validate_document(self, document: Document, sink: ErrorSink) -> None:
        pass

    def validate_section(self, section: Section, sink: ErrorSink) -> None:
        pass

    def validate_sentence(self, sentence: Sentence, sink: ErrorSink) -> None:
        pass

    # ── Error helpers ──

    def sentence_error(
        self,
        sink: ErrorSink,
        sentence: Sentence,
        message: str,
        start_position: Optional[int] = None,
        end_position: Optional[int] = None,
    ) -> None:
        sink.append(ValidationError(
            validator_name=self.name,
            message=message,
            scope=Scope.SENTENCE,
            level=self.level,
            sentence=sentence,
            start_position=start_position,
            end_position=end_position,
        ))

    def section_error(self, sink: ErrorSink, section: Section, message: str) -> None:
        """Record an error located at the section header."""
        sink.append(ValidationError(
            validator_name=self.name,
            message=message,
            scope=Scope.SECTION,
            level=self.level,
            sentence=_first_sentence(section),
        ))

    def document_error(self, sink: ErrorSink, document: Document, message: str) -> None:
        sink.append(ValidationError(
            validator_name=self.name,
            message=message,
            scope=Scope.DOCUMENT,
            level=self.level,
        ))

    # ── Properties ──

    def get_property(self, key: str) -> Any:
        return self.properties[key]

    def _resolve_properties(self, configured: Dict[str, Any]) -> Dict[str, Any]:
        defaults = dict(self.DEFAULT_PROPERTIES)
        defaults.setdefault("level", "error")

        unknown = sorted(set(configured) - set(defaults))
        if unknown:
            raise ConfigurationError(
                f"Unknown properties for validator {self.name}: {', '.join(unknown)}. "
                f"Supported properties: {sorted(defaults)}"
            )

        resolved = {}
        for key, default in defaults.items():
            if key in configured:
                resolved[key] = self._coerce(key, configured[key], default)
            else:
                resolved[key] = set(default) if isinstance(default, (set, frozenset)) else default

        if resolved["level"] not in LEVELS:
            raise ConfigurationError(
                f"Invalid level for validator {self.name}: {resolved['level']}. "
                f"Expected one of {list(LEVELS)}"
            )
        return resolved

    def _coerce(self, key: str, value: Any, default: Any) -> Any:
        try:
            if isinstance(default, bool):
                return _to_bool(value)
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            if isinstance(default, (set, frozenset)):
                return _to_set(value)
            return str(value)
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Invalid value for property {key} of validator {self.name}: {value!r}"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(properties={self.properties}, level={self.level!r})"


def _first_sentence(section: Section) -> Optional[Sentence]:
    if section.header:
        return section.header[0]
    return next(section.sentences(), None)


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "yes", "on", "1"):
        return True
    if text in ("false", "no", "off", "0"):
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _to_set(value: Any) -> Set[str]:
    if isinstance(value, str):
        return {item.strip() for item in value.split(",") if item.strip()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return {str(item) for item in value}
    raise TypeError(f"not a list: {value!r}")
