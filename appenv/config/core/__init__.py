"""
Core configuration management components.

This module provides the foundational components for configuration management:
- ConfigProvider: Abstract provider interface and implementations
- ConfigValidator: Validation framework for configuration data
- EnvironmentRegistry: Write-once registry of the current environment
"""

from .provider import ConfigProvider, FileConfigProvider, RuntimeConfigProvider
from .validator import ConfigValidator, SchemaValidator, BusinessValidator, ValidationError, ValidationResult
from .registry import EnvironmentRegistry

__all__ = [
    # Providers
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',

    # Validators
    'ConfigValidator',
    'SchemaValidator',
    'BusinessValidator',
    'ValidationError',
    'ValidationResult',

    # Registry
    'EnvironmentRegistry'
]
