"""
Configuration loader.

Reads YAML configuration from a file, a bundled resource, a string or an
in-memory mapping and validates it into a Configuration. Every failure
(missing file, YAML syntax, unknown keys, invalid values) is reported as a
ConfigurationError carrying the source and, for YAML syntax errors, the line
and column.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from proofread.config.schema import Configuration
from proofread.errors import ConfigurationError


logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "proofread.config"
RESOURCE_DIR = "resources"


class ConfigurationLoader:
    """Loads and validates proofread configuration."""

    def load(self, file_path: Union[str, Path]) -> Configuration:
        """Load configuration from a YAML file.

        Args:
            file_path: Path to the configuration file

        Returns:
            Validated Configuration

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        path = Path(file_path)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigurationError("Configuration file not found", str(path))
        except PermissionError:
            raise ConfigurationError("Permission denied reading configuration file", str(path))
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"File encoding error: {e}", str(path))
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {e}", str(path))

        logger.debug(f"Loading configuration from file {path}")
        return self.load_string(content, source=str(path))

    def load_from_resource(self, resource_path: str) -> Configuration:
        """Load configuration bundled with the package.

        Args:
            resource_path: Resource name, e.g. ``default-en.yaml``; a leading
                slash is ignored

        Raises:
            ConfigurationError: If no such resource exists or it is invalid
        """
        name = resource_path.lstrip("/")
        resource = resources.files(RESOURCE_PACKAGE).joinpath(RESOURCE_DIR).joinpath(name)
        if not resource.is_file():
            raise ConfigurationError(
                f"Configuration resource not found. Available resources: {self.list_resources()}",
                resource_path,
            )

        logger.debug(f"Loading configuration from resource {name}")
        return self.load_string(resource.read_text(encoding="utf-8"), source=resource_path)

    def load_string(self, yaml_content: str, source: Optional[str] = None) -> Configuration:
        """Load configuration from a YAML string.

        Raises:
            ConfigurationError: If the YAML is invalid or fails validation
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            line_number = None
            column = None

            if hasattr(e, "problem_mark") and e.problem_mark:
                line_number = e.problem_mark.line + 1  # YAML uses 0-based line numbers
                column = e.problem_mark.column + 1

            if hasattr(e, "problem") and e.problem:
                message = f"YAML parsing error: {e.problem}"
            else:
                message = f"YAML parsing error: {str(e)}"

            raise ConfigurationError(message, source, line_number, column)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(data).__name__}", source
            )
        return self.load_mapping(data, source=source)

    def load_mapping(self, data: Mapping[str, Any], source: Optional[str] = None) -> Configuration:
        """Validate an in-memory configuration mapping.

        Raises:
            ConfigurationError: Listing every validation problem found
        """
        try:
            configuration = Configuration.model_validate(dict(data))
        except PydanticValidationError as e:
            problems = "; ".join(self._format_problem(error) for error in e.errors())
            raise ConfigurationError(f"Invalid configuration: {problems}", source)

        logger.debug(
            f"Configuration loaded: lang={configuration.lang}, "
            f"tokenizer={configuration.tokenizer_type}, "
            f"validators={list(configuration.validator_names)}"
        )
        return configuration

    @staticmethod
    def list_resources() -> List[str]:
        """Names of the configuration resources bundled with the package."""
        directory = resources.files(RESOURCE_PACKAGE).joinpath(RESOURCE_DIR)
        return sorted(entry.name for entry in directory.iterdir() if entry.name.endswith(".yaml"))

    @staticmethod
    def _format_problem(error: Dict[str, Any]) -> str:
        location = ".".join(str(part) for part in error.get("loc", ())) or "root"
        return f"{location}: {error.get('msg', 'invalid value')}"
