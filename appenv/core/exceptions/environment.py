"""
Environment registry exceptions for the appenv system.
"""

from typing import List, Optional

from ..enums import ConfigurationErrorKind, Environment
from .base import ConfigurationError


class NotInitializedError(ConfigurationError):
    """Raised when configuration is read before an environment was selected."""

    def __init__(self, operation: str = None):
        self.operation = operation
        reason = "no environment has been selected yet; call set_environment() first"
        super().__init__(ConfigurationErrorKind.NOT_INITIALIZED, operation, reason=reason)


class AlreadyInitializedError(ConfigurationError):
    """Raised when set_environment() is called after a successful selection."""

    def __init__(self, current: Environment, requested: object = None):
        self.current = current
        self.requested = requested
        super().__init__(
            ConfigurationErrorKind.ALREADY_INITIALIZED,
            "environment",
            str(getattr(requested, 'value', requested)) if requested is not None else None,
            f"environment is already set to '{current.value}' and cannot be reassigned"
        )


class UnknownEnvironmentError(ConfigurationError):
    """Raised when an identifier is not present in the environment table."""

    def __init__(self, environment: object, available: Optional[List[str]] = None):
        self.environment = environment
        self.available = available or []
        reason = "unknown environment"
        if self.available:
            reason += f". Available: {self.available}"
        super().__init__(
            ConfigurationErrorKind.UNKNOWN_ENVIRONMENT,
            "environment",
            str(getattr(environment, 'value', environment)),
            reason
        )


class InvalidEnvironmentConfigError(ConfigurationError):
    """Raised when an environment table or bundle fails validation."""

    def __init__(self, config_key: str = None, errors: Optional[List[str]] = None):
        self.errors = errors or []
        reason = "; ".join(self.errors) if self.errors else "invalid configuration"
        super().__init__(ConfigurationErrorKind.INVALID_CONFIGURATION, config_key, reason=reason)
