"""
Environment-related enums for the appenv system.
"""

from enum import Enum


class Environment(Enum):
    """Build flavors known at build time."""
    DEV = "dev"
    UAT = "uat"
    PROD = "prod"


class RegistryState(Enum):
    """Environment registry lifecycle states."""
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class ConfigurationErrorKind(Enum):
    """Kinds of configuration contract violations."""
    NOT_INITIALIZED = "not_initialized"
    ALREADY_INITIALIZED = "already_initialized"
    UNKNOWN_ENVIRONMENT = "unknown_environment"
    INVALID_CONFIGURATION = "invalid_configuration"
