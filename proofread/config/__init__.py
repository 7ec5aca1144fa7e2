"""
Configuration

YAML-backed configuration for the proofread engine: language and symbol
table, tokenizer, and the ordered list of validators to run.
"""

from proofread.config.loader import ConfigurationLoader
from proofread.config.schema import Configuration, SymbolOverride, ValidatorSpec
from proofread.config.symbols import Symbol, SymbolTable, SymbolType

__all__ = [
    "Configuration",
    "ConfigurationLoader",
    "Symbol",
    "SymbolOverride",
    "SymbolTable",
    "SymbolType",
    "ValidatorSpec",
]
