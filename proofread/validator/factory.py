"""
Validator factory.

Maintains the registry of validator classes by name and builds validator
instances from ValidatorSpecs. Built-in validators register themselves when
``proofread.validator`` is imported.
"""

import logging
from typing import Dict, List, Type

from proofread.config.schema import ValidatorSpec
from proofread.config.symbols import SymbolTable
from proofread.errors import ConfigurationError
from proofread.validator.base import Validator


logger = logging.getLogger(__name__)


class ValidatorFactory:
    """Registry and factory for validator classes.

    Usage:
        @ValidatorFactory.register("SentenceLength")
        class SentenceLengthValidator(Validator):
            ...

        validator = ValidatorFactory.get_instance(spec, symbol_table)
    """

    # Registry of validator classes by name
    _registry: Dict[str, Type[Validator]] = {}

    @classmethod
    def register(cls, name: str):
        """Decorator to register a validator class under a name.

        Args:
            name: Name used in configuration files

        Returns:
            Decorator function
        """
        def decorator(validator_class: Type[Validator]) -> Type[Validator]:
            cls.register_validator(name, validator_class)
            return validator_class
        return decorator

    @classmethod
    def register_validator(cls, name: str, validator_class: Type[Validator]) -> None:
        """Register a validator class under a name.

        A later registration under the same name replaces an earlier one. A
        class carries its registered name, so it can only be registered
        under one name at a time.

        Raises:
            TypeError: If validator_class is not a Validator subclass
            ValueError: If the class is already registered under another name
        """
        if not (isinstance(validator_class, type) and issubclass(validator_class, Validator)):
            raise TypeError(f"{validator_class!r} is not a Validator subclass")
        for registered_name, registered_class in cls._registry.items():
            if registered_class is validator_class and registered_name != name:
                raise ValueError(
                    f"{validator_class.__name__} is already registered as {registered_name}"
                )
        validator_class.name = name
        cls._registry[name] = validator_class

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(name, None)

    @classmethod
    def get_registered_names(cls) -> List[str]:
        return sorted(cls._registry)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._registry

    @classmethod
    def get_instance(cls, spec: ValidatorSpec, symbol_table: SymbolTable) -> Validator:
        """Create a validator from its specification.

        Args:
            spec: Validator name and properties
            symbol_table: Symbol table of the active configuration

        Returns:
            New validator instance

        Raises:
            ConfigurationError: If the name is not registered or the
                properties are invalid
        """
        validator_class = cls._registry.get(spec.name)
        if validator_class is None:
            raise ConfigurationError(
                f"No validator registered under name: {spec.name}. "
                f"Available validators: {cls.get_registered_names()}"
            )

        try:
            validator = validator_class(spec.properties, symbol_table)
        except ConfigurationError:
            raise
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Cannot create validator {spec.name}: {e}") from e

        logger.debug(f"Created validator {spec.name}: {validator!r}")
        return validator
