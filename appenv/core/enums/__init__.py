"""
Core enums for the appenv system.
"""

from .environment import (
    Environment,
    RegistryState,
    ConfigurationErrorKind
)

__all__ = [
    'Environment',
    'RegistryState',
    'ConfigurationErrorKind'
]
