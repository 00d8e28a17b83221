"""
Environment registry: the single source of truth for which build flavor
is running and what configuration it implies.
"""

import threading
from typing import Any, Mapping, Optional, Tuple, Union

from appenv.core.enums import Environment, RegistryState
from appenv.core.exceptions import (
    AlreadyInitializedError,
    NotInitializedError,
    UnknownEnvironmentError
)
from appenv.logger import get_appenv_logger


class EnvironmentRegistry:
    """
    Write-once holder of the current environment.

    The registry owns a fixed table from every Environment to its
    EnvironmentConfig. ``set_environment`` selects one entry exactly once;
    afterwards every accessor is a pure read of immutable state.

    The selected (environment, config) pair is published with a single
    reference assignment under ``_lock``, so readers never need the lock
    and never observe a half-resolved selection.
    """

    def __init__(self, table: Optional[Mapping[Environment, 'EnvironmentConfig']] = None):
        # Imported here to keep config.core importable from config.environment
        from appenv.config.environment import build_environment_table, validate_environment_table

        self.logger = get_appenv_logger().bind(component="EnvironmentRegistry")
        self._lock = threading.Lock()
        self._selection: Optional[Tuple[Environment, 'EnvironmentConfig']] = None

        if table is None:
            self._table = build_environment_table()
        else:
            validate_environment_table(table)
            self._table = dict(table)

        self.logger.debug("EnvironmentRegistry created", environments=self.environments())

    @property
    def state(self) -> RegistryState:
        if self._selection is None:
            return RegistryState.UNINITIALIZED
        return RegistryState.INITIALIZED

    def is_initialized(self) -> bool:
        return self._selection is not None

    def environments(self) -> list[str]:
        """List the known environment values in declaration order."""
        return [e.value for e in Environment if e in self._table]

    def _resolve(self, environment: Union[Environment, str]) -> Tuple[Environment, 'EnvironmentConfig']:
        from appenv.config.environment import parse_environment

        environment = parse_environment(environment)
        config = self._table.get(environment)
        if config is None:
            raise UnknownEnvironmentError(environment, self.environments())
        return environment, config

    def set_environment(self, environment: Union[Environment, str]) -> 'EnvironmentConfig':
        """
        Select the active environment and resolve its configuration bundle.

        Args:
            environment: An Environment member or its value (case-insensitive)

        Returns:
            The resolved EnvironmentConfig

        Raises:
            AlreadyInitializedError: If an environment was already selected
            UnknownEnvironmentError: If environment is not in the table; the
                registry stays uninitialized
        """
        with self._lock:
            if self._selection is not None:
                current = self._selection[0]
                self.logger.warning("Environment already selected",
                                    current=current.value, requested=str(environment))
                raise AlreadyInitializedError(current, environment)

            try:
                selection = self._resolve(environment)
            except UnknownEnvironmentError:
                self.logger.warning("Unknown environment requested", requested=str(environment))
                raise

            self._selection = selection

        self.logger.info("Environment selected", environment=selection[0].value,
                         display_name=selection[1].display_name)
        return selection[1]

    def _selected(self, operation: str) -> Tuple[Environment, 'EnvironmentConfig']:
        selection = self._selection
        if selection is None:
            raise NotInitializedError(operation)
        return selection

    def current_environment(self) -> Environment:
        return self._selected("current_environment")[0]

    def config(self) -> 'EnvironmentConfig':
        """Return the whole resolved bundle for the current environment."""
        return self._selected("config")[1]

    def display_name(self) -> str:
        return self._selected("display_name")[1].display_name

    def base_url(self) -> str:
        return self._selected("base_url")[1].base_url

    def setting(self, key: str, default: Any = None) -> Any:
        """Return an additional per-environment setting of the current environment."""
        return self._selected("setting")[1].get(key, default)

    def config_for(self, environment: Union[Environment, str]) -> 'EnvironmentConfig':
        """Look up any environment's bundle without selecting it."""
        return self._resolve(environment)[1]
