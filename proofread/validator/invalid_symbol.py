"""Flags characters that are invalid variants of a configured symbol."""

from proofread.model.document import Sentence
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("InvalidSymbol")
class InvalidSymbolValidator(Validator):

    def validate_sentence(self, sentence: Sentence, sink: ErrorSink) -> None:
        for symbol in self.symbol_table:
            for invalid_char in symbol.invalid_chars:
                position = sentence.content.find(invalid_char)
                if position < 0:
                    continue
                self.sentence_error(
                    sink,
                    sentence,
                    f'Found invalid symbol "{invalid_char}"; use "{symbol.value}" '
                    f"for {symbol.type.value}.",
                    start_position=position,
                    end_position=position + 1,
                )
