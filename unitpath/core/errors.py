"""
Exception hierarchy shared by every unitpath module.
"""


class UnitPathError(Exception):
    """Base class for all unitpath errors."""
    pass


class FormatError(UnitPathError, ValueError):
    """Raised when a symbol or dimension code is malformed."""
    pass


class DomainError(UnitPathError, ValueError):
    """Raised when well-formed input is semantically invalid."""
    pass


class UnknownUnitError(DomainError):
    """Raised when a unit symbol is not present in the registry."""
    pass


class PrefixNotAllowedError(UnknownUnitError):
    """Raised when a known unit is written with a prefix it does not accept."""
    pass


class DimensionMismatchError(DomainError):
    """Raised when two units of different dimension are related."""
    pass


class NoConversionPathError(UnitPathError, LookupError):
    """Raised when the conversion graph does not connect two units."""

    def __init__(self, dimension, src, dest):
        self.dimension = dimension
        self.src = src
        self.dest = dest
        super().__init__(
            f"No conversion path from '{src}' to '{dest}' in dimension '{dimension}'"
        )


class UnsupportedOperationError(UnitPathError, TypeError):
    """Raised for operations that have no meaning on affine conversions."""
    pass


class DivisionByZeroError(UnitPathError, ZeroDivisionError):
    """Raised when a zero-valued scalar is inverted or divided by."""
    pass


class CatalogWarning(UserWarning):
    """Issued when a catalog record is skipped during best-effort loading."""
    pass


class ConversionPathWarning(UserWarning):
    """Issued when a synthesized conversion needed an unusually long path."""
    pass


__all__ = [
    'UnitPathError', 'FormatError', 'DomainError', 'UnknownUnitError', 'PrefixNotAllowedError',
    'DimensionMismatchError', 'NoConversionPathError', 'UnsupportedOperationError',
    'DivisionByZeroError', 'CatalogWarning', 'ConversionPathWarning',
]
