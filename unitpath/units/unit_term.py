"""
Unit terms: a base unit with an optional prefix and an integer exponent.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..core.dimensions import Dimension
from ..core.errors import DomainError, PrefixNotAllowedError
from ..uncertainties.float_error import FloatWithError
from .base_unit import BaseUnit
from .prefix import Prefix, prefix_multiplier
from .registry import UnitRegistry
from .symbols import format_exponent, split_exponent

MAX_TERM_EXPONENT = 9


def resolve_registry(registry: Optional[UnitRegistry]) -> UnitRegistry:
    """Fall back to the built-in catalog registry."""
    if registry is not None:
        return registry
    from ..catalog import default_registry
    return default_registry()


@dataclass(frozen=True)
class UnitTerm:
    """
    A single factor of a unit expression, e.g. ``km²`` or ``s⁻¹``.

    Parameters
    ----------
    unit : BaseUnit
        The unprefixed unit.
    prefix : Prefix, optional
        Must belong to one of the unit's allowed prefix groups.
    exponent : int
        Non-zero integer in [-9, 9].
    """
    unit: BaseUnit
    prefix: Optional[Prefix] = None
    exponent: int = 1

    def __post_init__(self):
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise DomainError(f"Exponent must be an integer, got {self.exponent!r}")
        if self.exponent == 0 or abs(self.exponent) > MAX_TERM_EXPONENT:
            raise DomainError(
                f"Exponent of '{self.unit.ascii_symbol}' must be non-zero and within "
                f"[-{MAX_TERM_EXPONENT}, {MAX_TERM_EXPONENT}], got {self.exponent}"
            )
        if self.prefix is not None and not self.unit.accepts_prefix(self.prefix):
            raise PrefixNotAllowedError(
                f"Prefix '{self.prefix.ascii_symbol}' is not allowed for unit '{self.unit.name}'"
            )

    @classmethod
    def parse(cls, symbol: str, registry: Optional[UnitRegistry] = None) -> 'UnitTerm':
        """
        Parse ``[prefix]unit[exponent]`` text such as ``'km2'``, ``'s-1'`` or ``'μm³'``.

        Parameters
        ----------
        symbol : str
            The term text. An optional ``^`` may precede the exponent.
        registry : UnitRegistry, optional
            Units to resolve against; defaults to the built-in catalog.

        Returns
        -------
        UnitTerm
        """
        base_symbol, exponent = split_exponent(symbol)
        unit, prefix = resolve_registry(registry).lookup(base_symbol)
        return cls(unit, prefix, exponent)

    @property
    def multiplier(self) -> float:
        """Prefix multiplier raised to the exponent."""
        return prefix_multiplier(self.prefix) ** self.exponent

    @property
    def multiplier_with_error(self) -> FloatWithError:
        if self.prefix is None:
            return FloatWithError.exact(1)
        return FloatWithError(self.prefix.multiplier).pow(self.exponent)

    @property
    def dimension(self) -> Dimension:
        return self.unit.dimension.apply_exponent(self.exponent)

    @property
    def is_elementary(self) -> bool:
        return self.unit.is_elementary

    @property
    def is_expandable(self) -> bool:
        return self.unit.is_expandable

    @property
    def ascii_symbol(self) -> str:
        return self.format(ascii=True)

    @property
    def unicode_symbol(self) -> str:
        return self.format(ascii=False)

    def format(self, ascii: bool = False) -> str:
        prefix = self.prefix.format(ascii) if self.prefix is not None else ''
        return prefix + self.unit.format(ascii) + format_exponent(self.exponent, ascii)

    def inv(self) -> 'UnitTerm':
        return replace(self, exponent=-self.exponent)

    def pow(self, exponent: int) -> 'UnitTerm':
        return replace(self, exponent=self.exponent * exponent)

    def with_exponent(self, exponent: int) -> 'UnitTerm':
        return replace(self, exponent=exponent)

    def with_prefix(self, prefix: Optional[Prefix]) -> 'UnitTerm':
        return replace(self, prefix=prefix)

    def remove_prefix(self) -> 'UnitTerm':
        return replace(self, prefix=None)

    def remove_exponent(self) -> 'UnitTerm':
        return replace(self, exponent=1)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"UnitTerm('{self.ascii_symbol}')"
