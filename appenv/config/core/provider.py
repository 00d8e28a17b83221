"""
Configuration provider base classes and implementations.

Providers only read raw configuration data; turning it into environment
bundles is the job of the environment table builder.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, TypeVar, Generic
from pathlib import Path
import copy
import threading

import yaml

from appenv.core.exceptions import InvalidEnvironmentConfigError
from appenv.logger import get_appenv_logger

T = TypeVar('T')


class ConfigProvider(ABC, Generic[T]):
    """
    Abstract base class for configuration providers.

    Defines the interface that all configuration providers must implement.
    """

    def __init__(self, domain: str):
        self.domain = domain
        self.logger = get_appenv_logger().bind(component=f"ConfigProvider_{domain}")
        self._lock = threading.RLock()

    @abstractmethod
    def get_config(self) -> T:
        """Get current configuration."""
        pass


class FileConfigProvider(ConfigProvider[Dict[str, Any]]):
    """
    File-based configuration provider that reads from YAML files.
    """

    def __init__(self, domain: str, config_dir: str = "settings"):
        super().__init__(domain)
        self.config_dir = Path(config_dir)
        self._config_cache: Optional[Dict[str, Any]] = None
        self._last_modified: Optional[float] = None

    @property
    def config_file(self) -> Path:
        """Get the configuration file path for this domain."""
        return self.config_dir / f"{self.domain}.yaml"

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from file, or an empty dict when absent."""
        with self._lock:
            self._refresh_cache()
            return copy.deepcopy(self._config_cache) if self._config_cache else {}

    def _refresh_cache(self):
        """Refresh configuration cache if file has changed."""
        if not self.config_file.exists():
            self._config_cache = None
            self._last_modified = None
            return

        current_mtime = self.config_file.stat().st_mtime
        if self._last_modified is not None and current_mtime <= self._last_modified:
            return

        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error("Failed to read config file", file=str(self.config_file), error=str(e))
            raise InvalidEnvironmentConfigError(str(self.config_file), [str(e)]) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidEnvironmentConfigError(
                str(self.config_file),
                [f"top-level value must be a mapping, got {type(data).__name__}"]
            )

        self._config_cache = data
        self._last_modified = current_mtime
        self.logger.debug("Config file loaded", file=str(self.config_file), keys=sorted(data))


class RuntimeConfigProvider(ConfigProvider[Dict[str, Any]]):
    """
    Runtime configuration provider that keeps config in memory.
    """

    def __init__(self, domain: str, initial_config: Optional[Dict[str, Any]] = None):
        super().__init__(domain)
        self._config = copy.deepcopy(initial_config) if initial_config else {}

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from memory."""
        with self._lock:
            return copy.deepcopy(self._config)
