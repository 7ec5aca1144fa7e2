"""
Pytest configuration and fixtures for test isolation.
"""
import os

import pytest

from proofread.config.schema import Configuration, ValidatorSpec
from proofread.engine import ValidationEngine
from proofread.model import DocumentBuilder, Sentence
from proofread.utils.logging_config import logging_config
from proofread.validator import ValidatorFactory


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by configure_logging() during a test."""
    yield
    logging_config.reset()


@pytest.fixture
def register_validator():
    """Register validator classes for the duration of one test.

    Usage:
        register_validator("Echo", EchoValidator)
    """
    registered = []

    def register(name, validator_class):
        ValidatorFactory.register_validator(name, validator_class)
        registered.append(name)
        return validator_class

    yield register

    for name in registered:
        ValidatorFactory.unregister(name)


@pytest.fixture
def engine_for():
    """Build an engine running the named validators, in order."""
    def build(*names, **config):
        specs = [ValidatorSpec(name=name) for name in names]
        return ValidationEngine(Configuration(validators=specs, **config))
    return build


@pytest.fixture
def sample_document():
    """Two sections exercising paragraphs, a header and a list block."""
    return (
        DocumentBuilder("sample.md")
        .add_section(0)
        .add_paragraph()
        .add_sentence(Sentence("Opening sentence.", 1))
        .add_section(1, [Sentence("Usage", 3)])
        .add_paragraph()
        .add_sentence(Sentence("First usage sentence.", 5))
        .add_sentence(Sentence("Second usage sentence.", 5, 22))
        .add_list_block()
        .add_list_element(1, [Sentence("List item.", 7, 2)])
        .build()
    )
