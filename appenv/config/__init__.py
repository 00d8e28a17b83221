"""
Configuration management for build flavors.

This module provides:
- Environment bundles, presets and validation
- Core registry, provider and validator infrastructure
"""

from .core import (
    EnvironmentRegistry, ConfigProvider, FileConfigProvider, RuntimeConfigProvider,
    ConfigValidator, SchemaValidator, BusinessValidator, ValidationError, ValidationResult
)

from .environment import (
    EnvironmentConfig, ENVIRONMENT_PRESETS, get_environment_preset, list_available_environments,
    parse_environment, validate_environment_config, build_environment_table,
    validate_environment_table
)

ENVIRONMENTS_DOMAIN = "environments"


def get_environment_provider(config_dir: str = "settings") -> FileConfigProvider:
    """Get the YAML provider for environment overrides (<config_dir>/environments.yaml)."""
    return FileConfigProvider(ENVIRONMENTS_DOMAIN, config_dir)


def create_registry(config_dir: str = None) -> EnvironmentRegistry:
    """
    Create a registry from the presets, overlaid by the YAML overrides in
    ``config_dir`` when one is given.
    """
    provider = get_environment_provider(config_dir) if config_dir else None
    return EnvironmentRegistry(build_environment_table(provider))


__all__ = [
    # Core infrastructure
    'EnvironmentRegistry',
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',
    'ConfigValidator',
    'SchemaValidator',
    'BusinessValidator',
    'ValidationError',
    'ValidationResult',

    # Environment domain
    'EnvironmentConfig',
    'ENVIRONMENT_PRESETS',
    'get_environment_preset',
    'list_available_environments',
    'parse_environment',
    'validate_environment_config',
    'build_environment_table',
    'validate_environment_table',

    # Convenience functions
    'ENVIRONMENTS_DOMAIN',
    'get_environment_provider',
    'create_registry'
]
