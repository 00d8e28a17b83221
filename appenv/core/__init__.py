"""
Core module for the appenv system.

This module provides the foundational components used throughout the system:
- Exception classes for configuration contract violations
- Enum definitions for environments and registry states
"""

from .exceptions import *
from .enums import *

__all__ = []

from .exceptions import __all__ as exceptions_all
from .enums import __all__ as enums_all

__all__.extend(exceptions_all)
__all__.extend(enums_all)
