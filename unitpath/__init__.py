"""
unitpath - Unit conversion by graph search
==========================================

Convert between any two units of the same physical dimension without
supplying a factor. Known direct conversions form a graph per dimension;
missing conversions are derived by composing the most accurate shortest
path, with floating-point error tracked along the way.

Main Features:
- Dimension algebra over ten base dimensions
- Error-tracked floating-point factors
- Prefixed, exponentiated and compound unit parsing
- Linear and affine (temperature) conversions
- Cached conversion graph solver with an injectable store
"""

__version__ = "0.1.0"
__author__ = "unitpath Development Team"

from .core import (Dimension, DimensionMismatchError, DivisionByZeroError, DomainError,
                   FormatError, NoConversionPathError, PrefixNotAllowedError, UnitPathError,
                   UnknownUnitError, UnsupportedOperationError, apply_exponent, compose,
                   decompose, normalize)
from .uncertainties import FloatWithError
from .units import BaseUnit, DerivedUnit, Prefix, PrefixGroup, System, UnitRegistry, UnitTerm
from .conversions import AffineConversion, Conversion
from .converter import CatalogLoader, ConversionRecord, ConversionStore, Converter, Provenance
from .catalog import build_registry, default_converter, default_registry

__all__ = [
    'Dimension', 'decompose', 'compose', 'normalize', 'apply_exponent',
    'FloatWithError',
    'BaseUnit', 'DerivedUnit', 'Prefix', 'PrefixGroup', 'System', 'UnitRegistry', 'UnitTerm',
    'Conversion', 'AffineConversion',
    'CatalogLoader', 'ConversionRecord', 'ConversionStore', 'Converter', 'Provenance',
    'build_registry', 'default_converter', 'default_registry',
    'UnitPathError', 'FormatError', 'DomainError', 'UnknownUnitError', 'DimensionMismatchError',
    'NoConversionPathError', 'PrefixNotAllowedError', 'UnsupportedOperationError',
    'DivisionByZeroError',
]
