"""
Interfaces package for linfit.

This package contains abstract base classes that define the core interfaces
for the linfit library. These interfaces establish contracts that concrete
implementations must follow.
"""

from linfit.abstract_interfaces.model import Model

__all__ = ['Model']
