"""
Base exception classes for the appenv system.
"""

from ..enums import ConfigurationErrorKind


class AppEnvError(Exception):
    """Base exception for all appenv errors."""
    pass


class ConfigurationError(AppEnvError):
    """
    Base exception for configuration errors.

    Every instance carries a ``kind`` so callers can discriminate without
    depending on the concrete subclass.
    """

    def __init__(self, kind: ConfigurationErrorKind, config_key: str = None,
                 config_value: str = None, reason: str = None):
        self.kind = kind
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
