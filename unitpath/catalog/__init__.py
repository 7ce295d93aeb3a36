"""
Built-in units and conversions.
"""

from functools import lru_cache

from ..converter.solver import Converter
from ..converter.store import ConversionStore
from ..units.registry import UnitRegistry
from .conversions import CONVERSIONS
from .units import UNITS


def build_registry() -> UnitRegistry:
    """A new registry holding every built-in unit."""
    return UnitRegistry(UNITS)


@lru_cache(maxsize=None)
def default_registry() -> UnitRegistry:
    """
    The shared built-in registry used when parsers are given no registry.

    Treat it as read-only; build your own with ``build_registry()`` to add units.
    """
    return build_registry()


def default_converter(store=None, on_unknown='raise') -> Converter:
    """A converter loaded with the built-in conversion records."""
    store = store if store is not None else ConversionStore()
    return Converter(default_registry(), store, CONVERSIONS, on_unknown=on_unknown)


__all__ = ['build_registry', 'default_registry', 'default_converter', 'CONVERSIONS', 'UNITS']
