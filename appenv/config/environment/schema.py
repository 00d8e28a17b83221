"""
Environment configuration validation schemas.

This module provides validation schemas and functions for environment
bundles, ensuring every flavor resolves to something usable.
"""

from typing import Dict, Any
from urllib.parse import urlparse

from ..core import ValidationResult, ValidationError, SchemaValidator, BusinessValidator


ENVIRONMENT_SCHEMA: Dict[str, Any] = {
    'display_name': str,
    'base_url': str,
    'settings': dict
}

ALLOWED_FIELDS = frozenset(ENVIRONMENT_SCHEMA)
ALLOWED_URL_SCHEMES = ('http', 'https')
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def check_known_fields(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    for key in sorted(set(data) - ALLOWED_FIELDS, key=str):
        result.add_error(ValidationError(f"Unknown field: {key}", field=str(key)))
    return result


def check_display_name(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    if not data['display_name'].strip():
        result.add_error(ValidationError("display_name must not be blank", field='display_name'))
    return result


def check_base_url(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    parsed = urlparse(data['base_url'])
    if parsed.scheme not in ALLOWED_URL_SCHEMES or not parsed.netloc:
        result.add_error(ValidationError(
            f"base_url must be an absolute http(s) URL, got '{data['base_url']}'",
            field='base_url', value=data['base_url']
        ))
    elif parsed.scheme == 'http':
        result.add_warning(f"base_url '{data['base_url']}' is not using https")
    return result


def check_settings(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    settings = data['settings']

    for key in settings:
        if not isinstance(key, str):
            result.add_error(ValidationError(f"Setting keys must be strings, got {key!r}", field='settings'))

    log_level = settings.get('log_level')
    if log_level is not None and str(log_level).upper() not in VALID_LOG_LEVELS:
        result.add_error(ValidationError(
            f"Invalid log_level '{log_level}'. Expected one of {list(VALID_LOG_LEVELS)}",
            field='log_level', value=log_level
        ))

    if 'json_logs' in settings and not isinstance(settings['json_logs'], bool):
        result.add_error(ValidationError("json_logs must be a boolean", field='json_logs'))

    return result


BUSINESS_RULES = [check_known_fields, check_display_name, check_base_url, check_settings]


def validate_environment_config(config_data: Dict[str, Any]) -> ValidationResult:
    """
    Validate environment configuration data.

    Parameters
    ----------
    config_data : Dict[str, Any]
        Bundle data with display_name, base_url and settings

    Returns
    -------
    ValidationResult
        Validation result with errors and warnings
    """
    schema_result = SchemaValidator('environment', ENVIRONMENT_SCHEMA).validate(config_data)
    if not schema_result.is_valid:
        return schema_result

    business_result = BusinessValidator('environment', BUSINESS_RULES).validate(config_data)
    return schema_result.merge(business_result)


def get_environment_schema() -> Dict[str, Any]:
    """Get the environment configuration schema."""
    return ENVIRONMENT_SCHEMA.copy()
