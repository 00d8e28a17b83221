"""
Core exceptions for the appenv system.
"""

# Base exceptions
from .base import (
    AppEnvError,
    ConfigurationError
)

# Environment registry exceptions
from .environment import (
    NotInitializedError,
    AlreadyInitializedError,
    UnknownEnvironmentError,
    InvalidEnvironmentConfigError
)

__all__ = [
    # Base exceptions
    'AppEnvError',
    'ConfigurationError',

    # Environment registry exceptions
    'NotInitializedError',
    'AlreadyInitializedError',
    'UnknownEnvironmentError',
    'InvalidEnvironmentConfigError'
]
