"""
Process-wide environment registry.

Bootstrap code calls ``set_environment`` once; everything else reads
through the module-level getters.
"""

import threading
from typing import Any, Optional, Union

from appenv.config import EnvironmentConfig, EnvironmentRegistry
from appenv.core.enums import Environment
from appenv.core.exceptions import AlreadyInitializedError

_registry: Optional[EnvironmentRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> EnvironmentRegistry:
    """Get or create the process-wide registry (built from the presets)."""
    global _registry
    registry = _registry
    if registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = EnvironmentRegistry()
            registry = _registry
    return registry


def install_registry(registry: EnvironmentRegistry) -> EnvironmentRegistry:
    """
    Make ``registry`` the process-wide instance.

    Refused once the current process-wide registry has selected an
    environment, so a selection can never be swapped out from under readers.
    """
    global _registry
    with _registry_lock:
        if _registry is not None and _registry is not registry:
            if _registry.is_initialized():
                raise AlreadyInitializedError(_registry.current_environment())
        _registry = registry
    return registry


def reset_registry() -> None:
    """Discard the process-wide registry. Test isolation only."""
    global _registry
    with _registry_lock:
        _registry = None


def set_environment(environment: Union[Environment, str]) -> EnvironmentConfig:
    return get_registry().set_environment(environment)


def current_environment() -> Environment:
    return get_registry().current_environment()


def config() -> EnvironmentConfig:
    return get_registry().config()


def display_name() -> str:
    return get_registry().display_name()


def base_url() -> str:
    return get_registry().base_url()


def setting(key: str, default: Any = None) -> Any:
    return get_registry().setting(key, default)
