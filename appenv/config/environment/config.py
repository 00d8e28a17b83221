"""
Environment domain configuration classes.

An EnvironmentConfig is the immutable bundle of values a build flavor
resolves to: what to call it on screen, where its backend lives, and any
extra per-flavor settings.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional

from appenv.core.enums import Environment


def _freeze(value: Any) -> Any:
    """Recursively turn mappings, lists and sets into read-only equivalents."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    """Inverse of _freeze: plain dicts, lists and sets, freshly copied."""
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    if isinstance(value, frozenset):
        return {_thaw(v) for v in value}
    return value


@dataclass(frozen=True)
class EnvironmentConfig:
    """Configuration bundle for a single environment."""

    environment: Environment
    display_name: str
    base_url: str
    settings: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Nested lists become tuples and nested dicts read-only mappings
        object.__setattr__(self, 'settings', _freeze(self.settings))

    def get(self, key: str, default: Any = None) -> Any:
        """Return an additional setting, or ``default`` when absent."""
        return self.settings.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain, mutable dictionary."""
        return {
            'display_name': self.display_name,
            'base_url': self.base_url,
            'settings': _thaw(self.settings)
        }

    @classmethod
    def from_dict(cls, environment: Environment, data: Dict[str, Any],
                  defaults: Optional['EnvironmentConfig'] = None) -> 'EnvironmentConfig':
        """
        Create configuration from dictionary.

        Missing keys fall back to ``defaults`` when given; ``settings`` are
        merged on top of the defaults' settings rather than replacing them.
        """
        settings: Dict[str, Any] = dict(defaults.settings) if defaults else {}
        settings.update(data.get('settings') or {})

        return cls(
            environment=environment,
            display_name=data.get('display_name', defaults.display_name if defaults else None),
            base_url=data.get('base_url', defaults.base_url if defaults else None),
            settings=settings
        )
