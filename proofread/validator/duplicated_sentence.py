"""
Flags sentences that occur more than once across the validated documents.

Sentences are counted during the sentence pre-pass, so a duplicate is
reported at every occurrence, including the first.
"""

from collections import Counter

from proofread.model.document import Sentence
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("DuplicatedSentence")
class DuplicatedSentenceValidator(Validator):
    DEFAULT_PROPERTIES = {"min_len": 5}

    def __init__(self, properties=None, symbol_table=None):
        super().__init__(properties, symbol_table)
        self._occurrences: Counter = Counter()

    def pre_validate_sentence(self, sentence: Sentence) -> None:
        key = self._key(sentence)
        if key:
            self._occurrences[key] += 1

    def validate_sentence(self, sentence: Sentence, sink: ErrorSink) -> None:
        key = self._key(sentence)
        if key and self._occurrences[key] > 1:
            self.sentence_error(
                sink,
                sentence,
                f"Found a duplicated sentence ({self._occurrences[key]} occurrences).",
            )

    def _key(self, sentence: Sentence) -> str:
        text = " ".join(sentence.content.split()).lower()
        return text if len(text) >= self.get_property("min_len") else ""
