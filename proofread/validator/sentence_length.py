"""Flags sentences longer than a configured number of characters."""

from proofread.model.document import Sentence
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("SentenceLength")
class SentenceLengthValidator(Validator):
    DEFAULT_PROPERTIES = {"max_len": 120}

    def validate_sentence(self, sentence: Sentence, sink: ErrorSink) -> None:
        max_len = self.get_property("max_len")
        if len(sentence.content) > max_len:
            self.sentence_error(
                sink,
                sentence,
                f"The length of the sentence ({len(sentence.content)}) exceeds the maximum of {max_len}.",
            )
