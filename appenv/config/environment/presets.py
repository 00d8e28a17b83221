"""
Environment configuration presets.

One bundle per Environment member; the table is data, so adding a field or
a flavor never touches the lookup code.
"""

from types import MappingProxyType
from typing import Mapping, Union

from appenv.core.enums import Environment
from appenv.core.exceptions import UnknownEnvironmentError
from .config import EnvironmentConfig


ENVIRONMENT_PRESETS: Mapping[Environment, EnvironmentConfig] = MappingProxyType({
    Environment.DEV: EnvironmentConfig(
        environment=Environment.DEV,
        display_name="Development",
        base_url="https://dev.example.com",
        settings={
            'log_level': 'DEBUG',
            'json_logs': False,
            'application_id_suffix': '.dev'
        }
    ),
    Environment.UAT: EnvironmentConfig(
        environment=Environment.UAT,
        display_name="Staging",
        base_url="https://staging.example.com",
        settings={
            'log_level': 'INFO',
            'json_logs': False,
            'application_id_suffix': '.uat'
        }
    ),
    Environment.PROD: EnvironmentConfig(
        environment=Environment.PROD,
        display_name="Production",
        base_url="https://prod.example.com",
        settings={
            'log_level': 'WARNING',
            'json_logs': True,
            'application_id_suffix': ''
        }
    ),
})


def parse_environment(value: Union[Environment, str]) -> Environment:
    """
    Coerce an Environment member or its (case-insensitive) value.

    Raises
    ------
    UnknownEnvironmentError
        If value does not name a declared environment
    """
    if isinstance(value, Environment):
        return value
    if isinstance(value, str):
        try:
            return Environment(value.strip().lower())
        except ValueError:
            pass
    raise UnknownEnvironmentError(value, list_available_environments())


def get_environment_preset(environment: Union[Environment, str]) -> EnvironmentConfig:
    """
    Get the predefined configuration bundle for an environment.

    Parameters
    ----------
    environment : Environment or str
        The environment, or its value ('dev', 'uat', 'prod')

    Returns
    -------
    EnvironmentConfig
        The preset bundle

    Raises
    ------
    UnknownEnvironmentError
        If environment is not recognized
    """
    return ENVIRONMENT_PRESETS[parse_environment(environment)]


def list_available_environments() -> list[str]:
    """
    Get the environment values in declaration order.

    Returns
    -------
    list[str]
        List of available environment values
    """
    return [environment.value for environment in Environment]
