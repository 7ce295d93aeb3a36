"""
Symbol index over a set of base units and their allowed prefixed forms.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..core.dimensions import Dimension, as_dimension
from ..core.errors import DomainError, PrefixNotAllowedError, UnknownUnitError
from .base_unit import BaseUnit, System
from .prefix import PREFIXES, Prefix, prefix_symbols

logger = logging.getLogger(__name__)


class UnitRegistry:
    """
    Registry of base units, looked up by any unprefixed or prefixed spelling.

    An unprefixed spelling always wins over a prefixed one, so ``'Pa'`` is the
    pascal and never peta-annum. Among prefixed spellings the first registered
    unit wins.
    """

    def __init__(self, units: Iterable[BaseUnit] = ()):
        self._units: Dict[str, BaseUnit] = {}
        self._unprefixed: Dict[str, BaseUnit] = {}
        self._prefixed: Dict[str, Tuple[BaseUnit, Prefix]] = {}
        for unit in units:
            self.add(unit)

    def add(self, unit: BaseUnit) -> BaseUnit:
        """Register ``unit``; its unprefixed spellings must be new."""
        for symbol in unit.symbols:
            if symbol in self._unprefixed:
                existing = self._unprefixed[symbol]
                raise DomainError(
                    f"Symbol '{symbol}' of '{unit.name}' is already used by '{existing.name}'"
                )

        self._units[unit.ascii_symbol] = unit
        for symbol in unit.symbols:
            self._unprefixed[symbol] = unit
        for prefix in unit.allowed_prefixes:
            for prefix_symbol in prefix_symbols(prefix):
                for symbol in unit.symbols:
                    self._prefixed.setdefault(prefix_symbol + symbol, (unit, prefix))

        logger.debug("Registered unit %s (%s) with %d prefixes",
                     unit.name, unit.ascii_symbol, len(unit.allowed_prefixes))
        return unit

    def lookup(self, symbol: str) -> Tuple[BaseUnit, Optional[Prefix]]:
        """
        Resolve a possibly-prefixed unit symbol.

        Returns
        -------
        tuple
            ``(base_unit, prefix)`` where prefix is None for unprefixed symbols.
        """
        unit = self._unprefixed.get(symbol)
        if unit is not None:
            return unit, None
        hit = self._prefixed.get(symbol)
        if hit is not None:
            return hit

        for prefix in PREFIXES:
            for prefix_symbol in prefix_symbols(prefix):
                rest = symbol[len(prefix_symbol):]
                if symbol.startswith(prefix_symbol) and rest in self._unprefixed:
                    raise PrefixNotAllowedError(
                        f"Prefix '{prefix_symbol}' is not allowed for unit "
                        f"'{self._unprefixed[rest].name}'"
                    )
        raise UnknownUnitError(f"Unknown unit: '{symbol}'")

    def get(self, symbol: str) -> BaseUnit:
        """Return the unprefixed unit with spelling ``symbol``."""
        try:
            return self._unprefixed[symbol]
        except KeyError:
            raise UnknownUnitError(f"Unknown unit: '{symbol}'") from None

    def by_dimension(self, dimension: Union[Dimension, str]) -> List[BaseUnit]:
        dimension = as_dimension(dimension)
        return [unit for unit in self._units.values() if unit.dimension == dimension]

    def by_system(self, system: System) -> List[BaseUnit]:
        return [unit for unit in self._units.values() if unit.belongs_to(system)]

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._unprefixed or symbol in self._prefixed

    def __iter__(self) -> Iterator[BaseUnit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"UnitRegistry({len(self)} units)"
