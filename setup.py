"""
setup.py

Packaging metadata and CLI entry point for proofread.

Version: 1.0.0 - Validation engine with document, section and sentence
phases, YAML configuration, plain text and Markdown parsers, and the
built-in validator set.
"""
from setuptools import setup, find_packages

setup(
    name="proofread",
    version="1.0.0",
    packages=find_packages(include=["proofread", "proofread.*", "cli"]),
    package_data={
        "proofread.config": ["resources/*.yaml"],
    },
    install_requires=[
        "click",
        "pydantic>=2.0",
        "pyyaml",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "proofread=cli:cli",
        ],
    },
    python_requires=">=3.9",
)
