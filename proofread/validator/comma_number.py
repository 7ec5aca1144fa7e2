"""Flags sentences containing too many commas."""

from proofread.config.symbols import SymbolType
from proofread.model.document import Sentence
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("CommaNumber")
class CommaNumberValidator(Validator):
    DEFAULT_PROPERTIES = {"max_num": 3}

    def validate_sentence(self, sentence: Sentence, sink: ErrorSink) -> None:
        comma = self.symbol_table.value_of(SymbolType.COMMA)
        count = sentence.content.count(comma)
        max_num = self.get_property("max_num")
        if count > max_num:
            self.sentence_error(
                sink,
                sentence,
                f"The number of commas ({count}) exceeds the maximum of {max_num}.",
            )
