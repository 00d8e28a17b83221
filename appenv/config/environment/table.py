"""
Environment table construction.

The table is the fixed, total mapping from every Environment to its
bundle. It starts from the presets and may be overlaid by provider data
keyed by environment value.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from appenv.core.enums import Environment
from appenv.core.exceptions import InvalidEnvironmentConfigError
from appenv.logger import get_appenv_logger
from ..core import ConfigProvider
from .config import EnvironmentConfig
from .presets import ENVIRONMENT_PRESETS, parse_environment
from .schema import validate_environment_config

logger = get_appenv_logger().bind(component="EnvironmentTable")


def _merge_override(base: Dict[str, Any], override: Any) -> Dict[str, Any]:
    if not isinstance(override, dict):
        # Let the validator report the bad shape with the same wording as other errors
        return {'display_name': base['display_name'], 'base_url': base['base_url'],
                'settings': override}

    merged = dict(base)
    for key, value in override.items():
        if key == 'settings' and isinstance(value, dict):
            merged['settings'] = {**base['settings'], **value}
        else:
            merged[key] = value
    return merged


def validate_environment_table(table: Mapping[Environment, EnvironmentConfig]) -> None:
    """
    Check that a table covers every Environment with a valid bundle.

    Raises
    ------
    InvalidEnvironmentConfigError
        If an environment is missing, a key is not an Environment, a bundle
        is filed under the wrong key, or a bundle fails validation
    """
    errors = []

    missing = [e.value for e in Environment if e not in table]
    if missing:
        errors.append(f"missing configuration for environments: {missing}")

    for key, config in table.items():
        if not isinstance(key, Environment):
            errors.append(f"table key {key!r} is not an Environment")
            continue
        if not isinstance(config, EnvironmentConfig):
            errors.append(f"bundle for '{key.value}' is a {type(config).__name__}, not an EnvironmentConfig")
            continue
        if config.environment is not key:
            errors.append(f"bundle for '{key.value}' is declared as '{config.environment.value}'")
        result = validate_environment_config(config.to_dict())
        errors.extend(f"{key.value}: {message}" for message in result.messages)

    if errors:
        raise InvalidEnvironmentConfigError('environments', errors)


def build_environment_table(
    provider: Optional[ConfigProvider] = None,
    presets: Mapping[Environment, EnvironmentConfig] = ENVIRONMENT_PRESETS
) -> Mapping[Environment, EnvironmentConfig]:
    """
    Build the read-only environment table.

    Parameters
    ----------
    provider : ConfigProvider, optional
        Source of overrides: a dict keyed by environment value whose entries
        may replace display_name/base_url and merge into settings
    presets : Mapping[Environment, EnvironmentConfig]
        Base bundles, one per environment

    Returns
    -------
    Mapping[Environment, EnvironmentConfig]
        Read-only mapping covering every environment

    Raises
    ------
    UnknownEnvironmentError
        If the overrides name an environment that is not declared
    InvalidEnvironmentConfigError
        If the resulting table is incomplete or a bundle is invalid
    """
    table: Dict[Environment, EnvironmentConfig] = dict(presets)
    overrides = provider.get_config() if provider is not None else {}
    errors = []

    for key, override in overrides.items():
        environment = parse_environment(key)
        base = table.get(environment)
        if base is None:
            errors.append(f"{environment.value}: override given but no base configuration exists")
            continue

        merged = _merge_override(base.to_dict(), override)
        result = validate_environment_config(merged)
        if not result.is_valid:
            errors.extend(f"{environment.value}: {message}" for message in result.messages)
            continue
        for warning in result.warnings:
            logger.warning("Environment override warning", environment=environment.value, warning=warning)

        table[environment] = EnvironmentConfig.from_dict(environment, merged)
        logger.debug("Environment override applied", environment=environment.value,
                     fields=sorted(override))

    if errors:
        raise InvalidEnvironmentConfigError('environments', errors)

    validate_environment_table(table)
    return MappingProxyType(table)
