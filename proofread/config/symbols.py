"""
Symbol Table

Named punctuation symbols for a language. Each symbol has its canonical
value, the variants considered invalid in that language and whether a space
is required before or after it.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterator, Mapping, Optional

from proofread.errors import ConfigurationError


class SymbolType(Enum):
    """Symbol names understood by the symbol table."""
    FULL_STOP = "FULL_STOP"
    COMMA = "COMMA"
    QUESTION_MARK = "QUESTION_MARK"
    EXCLAMATION_MARK = "EXCLAMATION_MARK"
    COLON = "COLON"
    SEMICOLON = "SEMICOLON"
    LEFT_PARENTHESIS = "LEFT_PARENTHESIS"
    RIGHT_PARENTHESIS = "RIGHT_PARENTHESIS"
    LEFT_QUOTATION_MARK = "LEFT_QUOTATION_MARK"
    RIGHT_QUOTATION_MARK = "RIGHT_QUOTATION_MARK"


@dataclass(frozen=True)
class Symbol:
    """A punctuation symbol.

    Attributes:
        type: Which symbol this is
        value: The canonical character
        invalid_chars: Characters that must not be used in place of value
        before_space: Whether a space is required before the symbol
        after_space: Whether a space is required after the symbol
    """
    type: SymbolType
    value: str
    invalid_chars: str = ""
    before_space: bool = False
    after_space: bool = False


def _symbols(*symbols: Symbol) -> Dict[SymbolType, Symbol]:
    return {symbol.type: symbol for symbol in symbols}


DEFAULT_SYMBOLS: Dict[str, Dict[SymbolType, Symbol]] = {
    "en": _symbols(
        Symbol(SymbolType.FULL_STOP, ".", "．。", after_space=True),
        Symbol(SymbolType.COMMA, ",", "、，", after_space=True),
        Symbol(SymbolType.QUESTION_MARK, "?", "？", after_space=True),
        Symbol(SymbolType.EXCLAMATION_MARK, "!", "！", after_space=True),
        Symbol(SymbolType.COLON, ":", "：", after_space=True),
        Symbol(SymbolType.SEMICOLON, ";", "；", after_space=True),
        Symbol(SymbolType.LEFT_PARENTHESIS, "(", "（", before_space=True),
        Symbol(SymbolType.RIGHT_PARENTHESIS, ")", "）", after_space=True),
        Symbol(SymbolType.LEFT_QUOTATION_MARK, "\"", "“", before_space=True),
        Symbol(SymbolType.RIGHT_QUOTATION_MARK, "\"", "”", after_space=True),
    ),
    "ja": _symbols(
        Symbol(SymbolType.FULL_STOP, "。", "．."),
        Symbol(SymbolType.COMMA, "、", "，,"),
        Symbol(SymbolType.QUESTION_MARK, "？", "?"),
        Symbol(SymbolType.EXCLAMATION_MARK, "！", "!"),
        Symbol(SymbolType.COLON, "：", ":"),
        Symbol(SymbolType.SEMICOLON, "；", ";"),
        Symbol(SymbolType.LEFT_PARENTHESIS, "（", "("),
        Symbol(SymbolType.RIGHT_PARENTHESIS, "）", ")"),
        Symbol(SymbolType.LEFT_QUOTATION_MARK, "「"),
        Symbol(SymbolType.RIGHT_QUOTATION_MARK, "」"),
    ),
}


class SymbolTable:
    """Symbols for one language, with configuration overrides applied.

    Args:
        lang: Language code with a default table (``en`` or ``ja``)
        overrides: Per-symbol replacement fields keyed by symbol name, e.g.
            ``{"COMMA": {"value": "、", "invalid_chars": ","}}``

    Raises:
        ConfigurationError: If the language or a symbol name is unknown
    """

    def __init__(self, lang: str = "en", overrides: Optional[Mapping[str, Mapping]] = None):
        if lang not in DEFAULT_SYMBOLS:
            raise ConfigurationError(
                f"Unsupported language: {lang}. Supported languages: {sorted(DEFAULT_SYMBOLS)}"
            )
        self.lang = lang
        self._symbols: Dict[SymbolType, Symbol] = dict(DEFAULT_SYMBOLS[lang])

        for name, fields in (overrides or {}).items():
            try:
                symbol_type = SymbolType(name)
            except ValueError:
                raise ConfigurationError(f"Unknown symbol: {name}")
            self._symbols[symbol_type] = replace(self._symbols[symbol_type], **dict(fields))

    def get(self, symbol_type: SymbolType) -> Symbol:
        return self._symbols[symbol_type]

    def value_of(self, symbol_type: SymbolType) -> str:
        return self._symbols[symbol_type].value

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __eq__(self, other) -> bool:
        if not isinstance(other, SymbolTable):
            return NotImplemented
        return self.lang == other.lang and self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash((self.lang, tuple(sorted(self._symbols.items(), key=lambda i: i[0].value))))

    def __repr__(self) -> str:
        return f"SymbolTable(lang={self.lang!r})"
