"""Flags documents with more sections than a configured maximum."""

from proofread.model.document import Document
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("SectionCount")
class SectionCountValidator(Validator):
    DEFAULT_PROPERTIES = {"max_num": 50}

    def validate_document(self, document: Document, sink: ErrorSink) -> None:
        count = len(document.sections)
        max_num = self.get_property("max_num")
        if count > max_num:
            self.document_error(
                sink,
                document,
                f"The number of sections ({count}) exceeds the maximum of {max_num}.",
            )
