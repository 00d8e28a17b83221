"""
Environment configuration domain.

This module provides the per-flavor configuration bundles, their presets,
validation schema and the table builder used by the registry.
"""

from .config import EnvironmentConfig
from .presets import (
    ENVIRONMENT_PRESETS, get_environment_preset, list_available_environments, parse_environment
)
from .schema import validate_environment_config, get_environment_schema, ENVIRONMENT_SCHEMA
from .table import build_environment_table, validate_environment_table

__all__ = [
    # Configuration classes
    'EnvironmentConfig',

    # Presets
    'ENVIRONMENT_PRESETS',
    'get_environment_preset',
    'list_available_environments',
    'parse_environment',

    # Schema and validation
    'validate_environment_config',
    'get_environment_schema',
    'ENVIRONMENT_SCHEMA',

    # Table
    'build_environment_table',
    'validate_environment_table'
]
