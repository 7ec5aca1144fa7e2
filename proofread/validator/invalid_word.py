"""Flags tokens that appear in a configured list of forbidden words."""

from proofread.model.document import Sentence
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("InvalidWord")
class InvalidWordValidator(Validator):
    """Reports every token whose lower-cased surface is in ``list``.

    ``list`` is a comma-separated string or a YAML list.
    """

    DEFAULT_PROPERTIES = {"list": frozenset()}

    def __init__(self, properties=None, symbol_table=None):
        super().__init__(properties, symbol_table)
        self._invalid_words = {word.lower() for word in self.get_property("list")}

    def validate_sentence(self, sentence: Sentence, sink: ErrorSink) -> None:
        for token in sentence.tokens:
            if token.surface.lower() in self._invalid_words:
                self.sentence_error(
                    sink,
                    sentence,
                    f'Found invalid word "{token.surface}".',
                    start_position=token.offset,
                    end_position=token.offset + len(token.surface),
                )
