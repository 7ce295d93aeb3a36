"""
Conversions between two units of the same dimension.

A conversion states ``dest = src * factor`` (plus ``offset`` for affine
scales such as Celsius). Factors are error-tracked so that different
derivations of the same conversion can be ranked by accuracy.
"""

from typing import Optional, Union

from ..core.dimensions import Dimension
from ..core.errors import DimensionMismatchError, DomainError, UnsupportedOperationError
from ..uncertainties.float_error import FloatWithError
from ..units.derived_unit import DerivedUnit, UnitRef, to_derived_unit
from ..units.prefix import Prefix
from ..units.registry import UnitRegistry

Scalar = Union[FloatWithError, int, float]


def _multiplier(unit: DerivedUnit) -> FloatWithError:
    result = FloatWithError.exact(1)
    for term in unit.terms:
        result = result * term.multiplier_with_error
    return result


class Conversion:
    """
    Linear conversion ``dest = src * factor``.

    Parameters
    ----------
    src, dest : str, BaseUnit, UnitTerm or DerivedUnit
        Source and destination units; they must share a dimension.
    factor : FloatWithError or float
        Positive scale factor. Plain numbers get an automatic error bound.
    registry : UnitRegistry, optional
        Used to parse string units; defaults to the built-in catalog.
    """

    is_affine = False

    def __init__(self, src: UnitRef, dest: UnitRef, factor: Scalar,
                 registry: Optional[UnitRegistry] = None):
        self._src = to_derived_unit(src, registry)
        self._dest = to_derived_unit(dest, registry)
        src_dimension = self._src.dimension
        dest_dimension = self._dest.dimension
        if src_dimension != dest_dimension:
            raise DimensionMismatchError(
                f"Cannot convert '{self._src}' ({src_dimension}) to "
                f"'{self._dest}' ({dest_dimension})"
            )
        self._factor = FloatWithError.coerce(factor)
        if not self._factor.value > 0:
            raise DomainError(f"Conversion factor must be positive, got {self._factor.value}")

    @staticmethod
    def create(src: UnitRef, dest: UnitRef, factor: Scalar, offset: Optional[Scalar] = None,
               registry: Optional[UnitRegistry] = None) -> 'Conversion':
        """Build a linear conversion, or an affine one when ``offset`` is non-zero."""
        if offset is not None and float(offset) != 0:
            return AffineConversion(src, dest, factor, offset, registry)
        return Conversion(src, dest, factor, registry)

    @property
    def src(self) -> DerivedUnit:
        return self._src

    @property
    def dest(self) -> DerivedUnit:
        return self._dest

    @property
    def factor(self) -> FloatWithError:
        return self._factor

    @property
    def offset(self) -> FloatWithError:
        return FloatWithError.exact(0)

    @property
    def dimension(self) -> Dimension:
        return self._src.dimension

    @property
    def src_symbol(self) -> str:
        return self._src.ascii_symbol

    @property
    def dest_symbol(self) -> str:
        return self._dest.ascii_symbol

    def apply(self, value: float) -> float:
        """Convert a plain number from ``src`` to ``dest``."""
        return value * self._factor.value + self.offset.value

    def apply_with_error(self, value: Scalar) -> FloatWithError:
        return FloatWithError.coerce(value) * self._factor + self.offset

    def inv(self) -> 'Conversion':
        return Conversion(self._dest, self._src, self._factor.inv())

    def pow(self, exponent: int) -> 'Conversion':
        """Raise both units and the factor to an integer power (e.g. ft→m to ft²→m²)."""
        return Conversion(self._src.pow(exponent).merge(), self._dest.pow(exponent).merge(),
                          self._factor.pow(exponent))

    def _require_linear(self, other: 'Conversion', operation: str):
        if self.is_affine or other.is_affine:
            raise UnsupportedOperationError(
                f"{operation} is undefined for affine conversions ('{self}', '{other}')"
            )

    @staticmethod
    def _require_shared(left: DerivedUnit, right: DerivedUnit, operation: str):
        if left != right:
            raise DomainError(f"{operation} needs a shared unit, got '{left}' and '{right}'")

    def combine_sequential(self, other: 'Conversion') -> 'Conversion':
        """``(A→B, B→C) -> A→C``."""
        self._require_shared(self._dest, other._src, "Sequential combination")
        factor = self._factor * other._factor
        offset = self.offset * other._factor + other.offset
        return Conversion.create(self._src, other._dest, factor, offset)

    def combine_convergent(self, other: 'Conversion') -> 'Conversion':
        """``(A→C, B→C) -> A→B``."""
        self._require_linear(other, "Convergent combination")
        self._require_shared(self._dest, other._dest, "Convergent combination")
        return Conversion(self._src, other._src, self._factor / other._factor)

    def combine_divergent(self, other: 'Conversion') -> 'Conversion':
        """``(C→A, C→B) -> A→B``."""
        self._require_linear(other, "Divergent combination")
        self._require_shared(self._src, other._src, "Divergent combination")
        return Conversion(self._dest, other._dest, other._factor / self._factor)

    def combine_opposite(self, other: 'Conversion') -> 'Conversion':
        """``(C→A, B→C) -> A→B``."""
        self._require_linear(other, "Opposite combination")
        self._require_shared(self._src, other._dest, "Opposite combination")
        return Conversion(self._dest, other._src, (self._factor * other._factor).inv())

    def _rescale(self, src: DerivedUnit, dest: DerivedUnit) -> 'Conversion':
        # src and dest differ from the current units only by prefixes
        src_ratio = _multiplier(src) / _multiplier(self._src)
        dest_ratio = _multiplier(self._dest) / _multiplier(dest)
        factor = self._factor * src_ratio * dest_ratio
        offset = self.offset * dest_ratio
        return Conversion.create(src, dest, factor, offset)

    def alter_prefixes(self, src_prefix: Optional[Prefix] = None,
                       dest_prefix: Optional[Prefix] = None) -> 'Conversion':
        """
        Re-express a single-term conversion with different prefixes.

        Parameters
        ----------
        src_prefix, dest_prefix : Prefix or None
            New prefixes for the source and destination terms.

        Returns
        -------
        Conversion
            E.g. ``ft→m`` altered with ``(None, k)`` gives ``ft→km``.
        """
        src_term = self._src.single_term
        dest_term = self._dest.single_term
        if src_term is None or dest_term is None:
            raise DomainError(f"Prefixes can only be altered on single-term conversions, got '{self}'")
        return self._rescale(DerivedUnit([src_term.with_prefix(src_prefix)]),
                             DerivedUnit([dest_term.with_prefix(dest_prefix)]))

    def remove_prefixes(self) -> 'Conversion':
        """The equivalent conversion between the unprefixed units."""
        return self._rescale(self._src.remove_prefixes(), self._dest.remove_prefixes())

    @property
    def has_prefixes(self) -> bool:
        return any(term.prefix is not None for term in self._src.terms + self._dest.terms)

    def __str__(self) -> str:
        return f"{self.dest_symbol} = {self.src_symbol} * ({self._factor})"

    def __repr__(self) -> str:
        return f"Conversion('{self.src_symbol}' -> '{self.dest_symbol}', {self._factor.value!r})"


class AffineConversion(Conversion):
    """
    Affine conversion ``dest = src * factor + offset``, used for temperature scales.

    Affine conversions compose only sequentially; powering them or combining
    them convergently, divergently or oppositely raises
    UnsupportedOperationError.
    """

    is_affine = True

    def __init__(self, src: UnitRef, dest: UnitRef, factor: Scalar, offset: Scalar,
                 registry: Optional[UnitRegistry] = None):
        super().__init__(src, dest, factor, registry)
        self._offset = FloatWithError.coerce(offset)

    @property
    def offset(self) -> FloatWithError:
        return self._offset

    def inv(self) -> 'Conversion':
        offset = self._offset.neg() / self._factor
        return Conversion.create(self._dest, self._src, self._factor.inv(), offset)

    def pow(self, exponent: int) -> 'Conversion':
        if exponent == 1:
            return self
        raise UnsupportedOperationError(f"Affine conversion '{self}' cannot be raised to a power")

    def __str__(self) -> str:
        return f"{self.dest_symbol} = {self.src_symbol} * ({self._factor}) + ({self._offset})"

    def __repr__(self) -> str:
        return (f"AffineConversion('{self.src_symbol}' -> '{self.dest_symbol}', "
                f"{self._factor.value!r}, {self._offset.value!r})")
