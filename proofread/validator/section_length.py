"""Flags sections whose body text is longer than a configured maximum."""

from proofread.model.document import Section
from proofread.validator.base import ErrorSink, Validator
from proofread.validator.factory import ValidatorFactory


@ValidatorFactory.register("SectionLength")
class SectionLengthValidator(Validator):
    """Counts the characters of paragraph and list sentences; the header is excluded."""

    DEFAULT_PROPERTIES = {"max_num": 1000}

    def validate_section(self, section: Section, sink: ErrorSink) -> None:
        length = sum(
            len(sentence.content)
            for paragraph in section.paragraphs
            for sentence in paragraph.sentences
        )
        length += sum(
            len(sentence.content)
            for list_block in section.list_blocks
            for list_element in list_block.list_elements
            for sentence in list_element.sentences
        )
        max_num = self.get_property("max_num")
        if length > max_num:
            self.section_error(
                sink,
                section,
                f"The number of characters in the section ({length}) exceeds the maximum of {max_num}.",
            )
