"""
Tests for proofread.engine

Covers the document, section and sentence phases, their pre-pass /
validate-pass ordering, error aggregation per document, failure
propagation, construction errors and engine equality.
"""

import io
from pathlib import Path

import pytest

from proofread.config.schema import Configuration, ValidatorSpec
from proofread.engine import ValidationEngine
from proofread.errors import ConfigurationError, ParseError
from proofread.model import DocumentBuilder, Sentence
from proofread.parser import MarkdownParser, PlainTextParser
from proofread.validator import Scope, ValidationError, Validator


def paragraph_document(*texts, file_name=None):
    builder = DocumentBuilder(file_name).add_paragraph()
    for line, text in enumerate(texts, start=1):
        builder.add_sentence(Sentence(text, line))
    return builder.build()


class EveryDocumentValidator(Validator):
    def validate_document(self, document, sink):
        self.document_error(sink, document, "document checked")


class MarkerValidator(Validator):
    """Emits one error per sentence, tagged with the validator name."""

    def validate_sentence(self, sentence, sink):
        self.sentence_error(sink, sentence, f"{self.name}({sentence.content})")


class MarkerA(MarkerValidator):
    pass


class MarkerB(MarkerValidator):
    pass


class EchoValidator(Validator):
    def validate_sentence(self, sentence, sink):
        self.sentence_error(sink, sentence, sentence.content)


class PreparedSectionValidator(Validator):
    """Reports a section only if every section was pre-validated first."""

    def __init__(self, properties=None, symbol_table=None):
        super().__init__(properties, symbol_table)
        self.prepared = False
        self.pre_validated = 0

    def pre_validate_section(self, section):
        self.prepared = True
        self.pre_validated += 1

    def validate_section(self, section, sink):
        if self.prepared:
            self.section_error(sink, section, f"prepared after {self.pre_validated}")


class PreparedSentenceValidator(Validator):
    def __init__(self, properties=None, symbol_table=None):
        super().__init__(properties, symbol_table)
        self.pre_validated = 0

    def pre_validate_sentence(self, sentence):
        self.pre_validated += 1

    def validate_sentence(self, sentence, sink):
        self.sentence_error(sink, sentence, f"prepared after {self.pre_validated}")


class EveryHookValidator(Validator):
    def validate_document(self, document, sink):
        self.document_error(sink, document, "document")

    def validate_section(self, section, sink):
        self.section_error(sink, section, "section")

    def validate_sentence(self, sentence, sink):
        self.sentence_error(sink, sentence, "sentence")


class CallLogValidator(Validator):
    """Records every hook call in a shared log."""

    log = []

    def pre_validate_section(self, section):
        self.log.append(("pre_section", self.name))

    def pre_validate_sentence(self, sentence):
        self.log.append(("pre_sentence", self.name))

    def validate_document(self, document, sink):
        self.log.append(("document", self.name))

    def validate_section(self, section, sink):
        self.log.append(("section", self.name))

    def validate_sentence(self, sentence, sink):
        self.log.append(("sentence", self.name))


class FailingValidator(Validator):
    """Raises on the sentence "boom"; records every sentence it validates."""

    visited = []

    def validate_sentence(self, sentence, sink):
        self.visited.append(sentence.content)
        if sentence.content == "boom":
            raise RuntimeError("validator failed")


def messages(errors):
    return [error.message for error in errors]


class TestValidateAll:
    def test_key_set_equals_input_with_no_validators(self, engine_for, sample_document):
        documents = [sample_document, paragraph_document("One."), paragraph_document()]
        results = engine_for().validate_all(documents)

        assert list(results) == documents
        assert all(errors == [] for errors in results.values())

    def test_empty_input(self, engine_for):
        assert engine_for().validate_all([]) == {}

    def test_structurally_equal_documents_are_distinct_keys(self, engine_for):
        d1 = paragraph_document("Same text.")
        d2 = paragraph_document("Same text.")
        results = engine_for().validate_all([d1, d2])
        assert len(results) == 2
        assert d1 in results and d2 in results

    def test_document_validator_emits_per_document(self, register_validator, engine_for):
        register_validator("EveryDocument", EveryDocumentValidator)
        d1 = paragraph_document("First.")
        d2 = paragraph_document("Second.")

        results = engine_for("EveryDocument").validate_all([d1, d2])

        expected = [ValidationError("EveryDocument", "document checked", Scope.DOCUMENT)]
        assert results == {d1: expected, d2: expected}

    def test_sentence_order_is_sentence_then_validator(self, register_validator, engine_for):
        register_validator("A", MarkerA)
        register_validator("B", MarkerB)
        document = paragraph_document("s1", "s2")

        errors = engine_for("A", "B").validate(document)

        assert messages(errors) == ["A(s1)", "B(s1)", "A(s2)", "B(s2)"]

    def test_sentence_sub_traversal_order(self, register_validator, engine_for):
        register_validator("Echo", EchoValidator)
        document = (
            DocumentBuilder()
            .add_section(1, [Sentence("h1", 1)])
            .add_paragraph()
            .add_sentence(Sentence("p1", 2))
            .add_list_block()
            .add_list_element(1, [Sentence("l1", 3)])
            .build()
        )

        assert messages(engine_for("Echo").validate(document)) == ["p1", "h1", "l1"]

    def test_paragraphs_and_list_elements_keep_order(self, register_validator, engine_for):
        register_validator("Echo", EchoValidator)
        document = (
            DocumentBuilder()
            .add_section(1, [Sentence("h1", 1), Sentence("h2", 1)])
            .add_paragraph().add_sentence(Sentence("p1", 2))
            .add_paragraph().add_sentence(Sentence("p2", 3))
            .add_list_block()
            .add_list_element(1, [Sentence("l1", 4)])
            .add_list_element(2, [Sentence("l2", 5), Sentence("l3", 5)])
            .add_list_block()
            .add_list_element(1, [Sentence("l4", 7)])
            .build()
        )

        assert messages(engine_for("Echo").validate(document)) == [
            "p1", "p2", "h1", "h2", "l1", "l2", "l3", "l4",
        ]

    def test_section_pre_pass_completes_before_validate_pass(self, register_validator, engine_for):
        register_validator("Prepared", PreparedSectionValidator)
        d1 = (
            DocumentBuilder()
            .add_section(1, [Sentence("One", 1)])
            .add_section(1, [Sentence("Two", 2)])
            .build()
        )
        d2 = DocumentBuilder().add_section(1, [Sentence("Three", 1)]).build()

        results = engine_for("Prepared").validate_all([d1, d2])

        assert messages(results[d1]) == ["prepared after 3", "prepared after 3"]
        assert messages(results[d2]) == ["prepared after 3"]

    def test_sentence_pre_pass_completes_before_validate_pass(self, register_validator, engine_for):
        register_validator("Prepared", PreparedSentenceValidator)
        d1 = paragraph_document("a", "b")
        d2 = paragraph_document("c")

        results = engine_for("Prepared").validate_all([d1, d2])

        assert messages(results[d1]) == ["prepared after 3", "prepared after 3"]
        assert messages(results[d2]) == ["prepared after 3"]

    def test_phases_accumulate_in_one_sequence(self, register_validator, engine_for, sample_document):
        register_validator("EveryHook", EveryHookValidator)

        errors = engine_for("EveryHook").validate(sample_document)

        assert [error.scope for error in errors] == [
            Scope.DOCUMENT,
            Scope.SECTION, Scope.SECTION,
            Scope.SENTENCE, Scope.SENTENCE, Scope.SENTENCE, Scope.SENTENCE, Scope.SENTENCE,
        ]

    def test_hook_call_order(self, register_validator, engine_for):
        CallLogValidator.log = []
        register_validator("Log1", type("Log1", (CallLogValidator,), {}))
        register_validator("Log2", type("Log2", (CallLogValidator,), {}))
        document = paragraph_document("only")

        engine_for("Log1", "Log2").validate_all([document])

        assert CallLogValidator.log == [
            ("document", "Log1"), ("document", "Log2"),
            ("pre_section", "Log1"), ("pre_section", "Log2"),
            ("section", "Log1"), ("section", "Log2"),
            ("pre_sentence", "Log1"), ("pre_sentence", "Log2"),
            ("sentence", "Log1"), ("sentence", "Log2"),
        ]

    def test_errors_stay_with_their_document(self, register_validator, engine_for):
        register_validator("Echo", EchoValidator)
        d1 = paragraph_document("first")
        d2 = paragraph_document("second", "third")

        results = engine_for("Echo").validate_all([d1, d2])

        assert messages(results[d1]) == ["first"]
        assert messages(results[d2]) == ["second", "third"]

    def test_repeated_document_shares_one_sink(self, register_validator, engine_for):
        register_validator("Echo", EchoValidator)
        document = paragraph_document("again")

        results = engine_for("Echo").validate_all([document, document])

        assert list(results) == [document]
        assert messages(results[document]) == ["again", "again"]

    def test_validator_failure_propagates_and_stops_traversal(self, register_validator, engine_for):
        FailingValidator.visited = []
        register_validator("Failing", FailingValidator)
        d1 = paragraph_document("fine", "boom", "never")
        d2 = paragraph_document("also never")

        with pytest.raises(RuntimeError, match="validator failed"):
            engine_for("Failing").validate_all([d1, d2])

        assert FailingValidator.visited == ["fine", "boom"]


class TestValidate:
    def test_matches_validate_all(self, register_validator, engine_for, sample_document):
        register_validator("Echo", EchoValidator)
        engine = engine_for("Echo")

        assert engine.validate(sample_document) == engine.validate_all([sample_document])[sample_document]

    def test_no_validators(self, engine_for, sample_document):
        assert engine_for().validate(sample_document) == []


class TestConstruction:
    def test_validators_follow_configuration_order(self, engine_for):
        engine = engine_for("SentenceLength", "CommaNumber", "SectionCount")
        assert [v.name for v in engine.validators] == ["SentenceLength", "CommaNumber", "SectionCount"]
        assert isinstance(engine.validators, tuple)

    def test_unknown_validator(self, engine_for):
        with pytest.raises(ConfigurationError, match="NoSuchValidator"):
            engine_for("NoSuchValidator")

    def test_invalid_validator_property(self):
        configuration = Configuration(validators=[
            ValidatorSpec(name="SentenceLength", properties={"max_len": "long"}),
        ])
        with pytest.raises(ConfigurationError, match="max_len"):
            ValidationEngine(configuration)

    def test_unknown_validator_property(self):
        configuration = Configuration(validators=[
            ValidatorSpec(name="SentenceLength", properties={"max_length": 10}),
        ])
        with pytest.raises(ConfigurationError, match="max_length"):
            ValidationEngine(configuration)

    def test_from_resource(self):
        engine = ValidationEngine.from_resource("default-en.yaml")
        assert engine.configuration.lang == "en"
        assert "SentenceLength" in [v.name for v in engine.validators]

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ValidationEngine.from_file(tmp_path / "missing.yaml")

    def test_from_file(self, tmp_path):
        config = tmp_path / "proofread.yaml"
        config.write_text("validators:\n  - name: CommaNumber\n", encoding="utf-8")
        engine = ValidationEngine.from_file(config)
        assert [v.name for v in engine.validators] == ["CommaNumber"]


class TestEquality:
    def test_equal_configurations_give_equal_engines(self):
        def configuration():
            return Configuration(validators=[
                ValidatorSpec(name="SentenceLength", properties={"max_len": 80}),
            ])

        e1 = ValidationEngine(configuration())
        e2 = ValidationEngine(configuration())

        assert e1 == e2
        assert hash(e1) == hash(e2)
        assert {e1: "cached"}[e2] == "cached"

    @pytest.mark.parametrize("first, second", [
        ({"max_len": 80}, {"max_len": 80.0}),
        ({"max_len": 1}, {"max_len": True}),
    ])
    def test_numerically_equal_properties_share_a_cache_slot(self, first, second):
        e1 = ValidationEngine(Configuration(validators=[ValidatorSpec(name="SentenceLength", properties=first)]))
        e2 = ValidationEngine(Configuration(validators=[ValidatorSpec(name="SentenceLength", properties=second)]))

        assert e1 == e2
        assert hash(e1) == hash(e2)
        assert {e1: "cached"}.get(e2) == "cached"

    def test_different_configurations(self, engine_for):
        assert engine_for("SentenceLength") != engine_for("CommaNumber")


class TestParse:
    def test_parse_string(self, engine_for):
        document = engine_for().parse(PlainTextParser(), "One. Two.")
        assert [s.content for s in document.sentences()] == ["One.", "Two."]

    def test_parse_path(self, engine_for, tmp_path):
        path = tmp_path / "doc.md"
        path.write_text("# Title\n\nBody text.\n", encoding="utf-8")
        document = engine_for().parse(MarkdownParser(), path)
        assert document.file_name == str(path)
        assert len(document.sections) == 1

    def test_parse_stream(self, engine_for):
        document = engine_for().parse(PlainTextParser(), io.BytesIO("Hello there.".encode("utf-8")))
        assert [s.content for s in document.sentences()] == ["Hello there."]

    def test_parse_files_fails_fast(self, engine_for, tmp_path):
        good = tmp_path / "good.txt"
        good.write_text("Fine.", encoding="utf-8")
        with pytest.raises(ParseError):
            engine_for().parse_files(PlainTextParser(), [good, tmp_path / "missing.txt", good])

    def test_parse_files_in_order(self, engine_for, tmp_path):
        paths = []
        for name in ("b.txt", "a.txt"):
            path = tmp_path / name
            path.write_text(f"{name}.", encoding="utf-8")
            paths.append(path)
        documents = engine_for().parse_files(PlainTextParser(), paths)
        assert [Path(d.file_name).name for d in documents] == ["b.txt", "a.txt"]


class TestEngineReuse:
    def test_repeated_validate_gives_same_result(self, engine_for):
        engine = engine_for("DuplicatedSentence", "DuplicateSection")
        document = engine.parse(MarkdownParser(), "# Intro\n\nOnly one sentence here.\n")

        first = engine.validate(document)
        second = engine.validate(document)

        assert first == []
        assert second == first

    def test_earlier_documents_do_not_leak_into_later_calls(self, engine_for):
        engine = engine_for("DuplicatedSentence")
        text = "A sentence repeated across files."
        d1 = engine.parse(PlainTextParser(), text)
        d2 = engine.parse(PlainTextParser(), text)

        assert engine.validate(d1) == []
        assert engine.validate(d2) == []
        assert len(engine.validate_all([d1, d2])[d2]) == 1

    def test_each_call_runs_fresh_validators(self, register_validator, engine_for):
        register_validator("Prepared", PreparedSentenceValidator)
        engine = engine_for("Prepared")
        document = paragraph_document("one", "two")

        assert messages(engine.validate(document)) == ["prepared after 2"] * 2
        assert messages(engine.validate(document)) == ["prepared after 2"] * 2

    def test_default_resource_engine_is_reusable(self):
        engine = ValidationEngine.from_resource("default-en.yaml")
        document = engine.parse(MarkdownParser(), "# Notes\n\nNothing to report here.\n")

        assert engine.validate(document) == engine.validate(document) == []
