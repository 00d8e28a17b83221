"""
appenv: build-flavor environment configuration.

Select the environment once at startup, read it everywhere else:

    from appenv import Environment, environment

    environment.set_environment(Environment.DEV)
    environment.base_url()
"""

from appenv.core.enums import Environment, RegistryState, ConfigurationErrorKind
from appenv.core.exceptions import (
    AppEnvError,
    ConfigurationError,
    NotInitializedError,
    AlreadyInitializedError,
    UnknownEnvironmentError,
    InvalidEnvironmentConfigError
)
from appenv.config import EnvironmentConfig, EnvironmentRegistry
from appenv import environment

__version__ = '0.1.0'

__all__ = [
    'Environment',
    'RegistryState',
    'ConfigurationErrorKind',
    'AppEnvError',
    'ConfigurationError',
    'NotInitializedError',
    'AlreadyInitializedError',
    'UnknownEnvironmentError',
    'InvalidEnvironmentConfigError',
    'EnvironmentConfig',
    'EnvironmentRegistry',
    'environment'
]
