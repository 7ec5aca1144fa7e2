"""
Flags sections sharing the same header text.

Headers are collected during the section pre-pass, so every section in a
group of duplicates is reported, wherever it appears.
"""

from collections import Counter

from proofread.model.document import Section
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("DuplicateSection")
class DuplicateSectionValidator(Validator):

    def __init__(self, properties=None, symbol_table=None):
        super().__init__(properties, symbol_table)
        self._headers: Counter = Counter()

    def pre_validate_section(self, section: Section) -> None:
        key = self._key(section)
        if key:
            self._headers[key] += 1

    def validate_section(self, section: Section, sink: ErrorSink) -> None:
        key = self._key(section)
        if key and self._headers[key] > 1:
            self.section_error(sink, section, f'Found a duplicated section "{section.header_text}".')

    @staticmethod
    def _key(section: Section) -> str:
        return " ".join(section.header_text.split()).lower()
