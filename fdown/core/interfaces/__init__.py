"""
Interfaces module.

Contains abstract base classes defining the contracts for adapters.
"""

from fdown.core.interfaces.adapters import IImageStore, ITransport

__all__ = [
    'IImageStore',
    'ITransport',
]
