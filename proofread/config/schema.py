"""
Configuration schema and data models.

Configuration is validated with Pydantic and frozen once built:

- ``lang``: language of the default symbol table (en, ja)
- ``tokenizer``: tokenizer name (whitespace, character)
- ``symbols``: per-symbol overrides of the default table
- ``validators``: ordered validator specifications
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from proofread.config.symbols import DEFAULT_SYMBOLS, SymbolTable, SymbolType
from proofread.tokenizer import TOKENIZERS, Tokenizer, get_tokenizer


class SymbolOverride(BaseModel):
    """Replacement fields for one symbol; unset fields keep the default."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    value: Optional[str] = Field(default=None, min_length=1)
    invalid_chars: Optional[str] = None
    before_space: Optional[bool] = None
    after_space: Optional[bool] = None


class ValidatorSpec(BaseModel):
    """Specification of one validator: its registered name and properties.

    Attributes:
        name: Name the validator is registered under (e.g. SentenceLength)
        properties: Validator-specific options, plus the common ``level``
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    properties: Dict[str, Any] = Field(default_factory=dict)

    def __hash__(self) -> int:
        # Property values stay out of the hash: 80 and 80.0 compare equal
        return hash((self.name, frozenset(self.properties)))


class Configuration(BaseModel):
    """Complete proofread configuration.

    Two configurations are equal when all of their fields are equal; equal
    configurations hash equally, so they (and engines built from them) can be
    used as dictionary keys.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    lang: str = "en"
    tokenizer_type: str = Field(default="whitespace", alias="tokenizer")
    symbols: Dict[str, SymbolOverride] = Field(default_factory=dict)
    validators: Tuple[ValidatorSpec, ...] = ()

    @field_validator("lang")
    @classmethod
    def _known_language(cls, value: str) -> str:
        if value not in DEFAULT_SYMBOLS:
            raise ValueError(f"unsupported language '{value}', expected one of {sorted(DEFAULT_SYMBOLS)}")
        return value

    @field_validator("tokenizer_type")
    @classmethod
    def _known_tokenizer(cls, value: str) -> str:
        value = value.lower()
        if value not in TOKENIZERS:
            raise ValueError(f"unknown tokenizer '{value}', expected one of {sorted(TOKENIZERS)}")
        return value

    @field_validator("symbols")
    @classmethod
    def _known_symbols(cls, value: Dict[str, SymbolOverride]) -> Dict[str, SymbolOverride]:
        known = {symbol_type.value for symbol_type in SymbolType}
        unknown = sorted(set(value) - known)
        if unknown:
            raise ValueError(f"unknown symbols: {', '.join(unknown)}")
        return value

    @property
    def symbol_table(self) -> SymbolTable:
        overrides = {
            name: override.model_dump(exclude_none=True)
            for name, override in self.symbols.items()
        }
        return SymbolTable(self.lang, overrides)

    @property
    def tokenizer(self) -> Tokenizer:
        return get_tokenizer(self.tokenizer_type)

    @property
    def validator_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.validators)

    def to_dict(self) -> dict:
        """Convert to the dictionary form used in YAML files."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.lang, self.tokenizer_type, frozenset(self.symbols), self.validators))
