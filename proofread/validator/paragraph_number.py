"""Flags sections with too many paragraphs."""

from proofread.model.document import Section
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("ParagraphNumber")
class ParagraphNumberValidator(Validator):
    DEFAULT_PROPERTIES = {"max_num": 6}

    def validate_section(self, section: Section, sink: ErrorSink) -> None:
        max_num = self.get_property("max_num")
        if len(section.paragraphs) > max_num:
            self.section_error(
                sink,
                section,
                f"The number of paragraphs ({len(section.paragraphs)}) exceeds the maximum of {max_num}.",
            )
