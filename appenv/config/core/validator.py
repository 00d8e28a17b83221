"""
Configuration validation framework.

This module provides validation capabilities for configuration data.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional, Callable


class ValidationError(Exception):
    """Single validation failure collected into a ValidationResult."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None,
                 warnings: Optional[List[str]] = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def add_error(self, error: ValidationError):
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, message: str):
        self.warnings.append(message)

    def merge(self, other: 'ValidationResult') -> 'ValidationResult':
        """Fold another result into this one."""
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)
        return self

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def __bool__(self):
        return self.is_valid


class ConfigValidator(ABC):
    """Abstract base class for configuration validators."""

    def __init__(self, domain: str):
        self.domain = domain

    @abstractmethod
    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration data."""
        pass


class SchemaValidator(ConfigValidator):
    """
    Schema-based configuration validator.

    The schema maps each required key to either a type (or tuple of types)
    or a nested schema dict.
    """

    def __init__(self, domain: str, schema: Dict[str, Any]):
        super().__init__(domain)
        self.schema = schema

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration against schema."""
        result = ValidationResult()

        if not isinstance(config, dict):
            result.add_error(ValidationError(
                f"Configuration must be a dictionary, got {type(config).__name__}",
                value=config
            ))
            return result

        self._validate_dict(config, self.schema, result)
        return result

    def _validate_dict(self, config: Dict[str, Any], schema: Dict[str, Any], result: ValidationResult, path: str = ""):
        """Recursively validate dictionary against schema."""
        for key, expected_type in schema.items():
            full_path = f"{path}.{key}" if path else key

            if key not in config:
                result.add_error(ValidationError(f"Missing required field: {full_path}", field=key))
                continue

            value = config[key]

            if isinstance(expected_type, (type, tuple)):
                if not isinstance(value, expected_type):
                    expected_name = (
                        " or ".join(t.__name__ for t in expected_type)
                        if isinstance(expected_type, tuple) else expected_type.__name__
                    )
                    result.add_error(ValidationError(
                        f"Field {full_path} must be of type {expected_name}, got {type(value).__name__}",
                        field=key, value=value
                    ))
            elif isinstance(expected_type, dict):
                if isinstance(value, dict):
                    self._validate_dict(value, expected_type, result, full_path)
                else:
                    result.add_error(ValidationError(
                        f"Field {full_path} must be a dictionary, got {type(value).__name__}",
                        field=key, value=value
                    ))


class BusinessValidator(ConfigValidator):
    """
    Business logic validator for configuration data.

    Each rule receives the configuration dict and returns either a
    ValidationResult, ``False`` for a plain failure, or anything else for
    success.
    """

    def __init__(self, domain: str, validation_rules: List[Callable[[Dict[str, Any]], Any]]):
        super().__init__(domain)
        self.validation_rules = validation_rules

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration using business rules."""
        result = ValidationResult()

        for rule in self.validation_rules:
            rule_result = rule(config)
            if isinstance(rule_result, ValidationResult):
                result.merge(rule_result)
            elif rule_result is False:
                result.add_error(ValidationError(f"Business rule {rule.__name__} failed"))

        return result
