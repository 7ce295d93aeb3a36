"""
Named units without prefix or exponent.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from ..core.dimensions import Dimension, as_dimension
from ..core.errors import DomainError
from .prefix import Prefix, PrefixGroup, get_prefixes
from .symbols import check_ascii_symbol


class System(Enum):
    """Measurement systems a unit may belong to."""
    SI = 'SI'
    SI_ACCEPTED = 'SI accepted'
    COMMON = 'common'
    US = 'US customary'
    IMPERIAL = 'imperial'
    SCIENTIFIC = 'scientific'
    ASTRONOMICAL = 'astronomical'
    NAUTICAL = 'nautical'
    TYPOGRAPHY = 'typography'


@dataclass(frozen=True)
class BaseUnit:
    """
    A named unit such as metre, foot or newton.

    Parameters
    ----------
    name : str
        Full name, e.g. ``'metre'``.
    ascii_symbol : str
        1-3 ASCII words or a single special character.
    dimension : Dimension or str
        Physical dimension of the unit.
    unicode_symbol : str, optional
        Display symbol, defaults to the ASCII symbol.
    alternate_symbol : str, optional
        Additional accepted spelling, e.g. ``'deg'`` for ``'°'``.
    prefix_group : PrefixGroup
        Prefixes the unit accepts.
    systems : frozenset of System
        Measurement systems the unit belongs to.
    expansion_symbol : str, optional
        Equivalent derived unit expression, e.g. ``'kg*m*s-2'`` for newton.
    expansion_factor : float
        Scale between the unit and its expansion: ``1 unit = factor * expansion``.
    """
    name: str
    ascii_symbol: str
    dimension: Dimension
    unicode_symbol: Optional[str] = None
    alternate_symbol: Optional[str] = None
    prefix_group: PrefixGroup = PrefixGroup.NONE
    systems: FrozenSet[System] = field(default_factory=frozenset)
    expansion_symbol: Optional[str] = None
    expansion_factor: float = 1.0

    def __post_init__(self):
        check_ascii_symbol(self.ascii_symbol)
        object.__setattr__(self, 'dimension', as_dimension(self.dimension))
        object.__setattr__(self, 'systems', frozenset(self.systems))
        if self.unicode_symbol is None:
            object.__setattr__(self, 'unicode_symbol', self.ascii_symbol)
        if not self.expansion_factor > 0:
            raise DomainError(
                f"Expansion factor of '{self.ascii_symbol}' must be positive, "
                f"got {self.expansion_factor}"
            )

    @property
    def symbols(self) -> Tuple[str, ...]:
        """Distinct spellings of the unprefixed unit, ASCII first."""
        symbols = [self.ascii_symbol]
        for symbol in (self.unicode_symbol, self.alternate_symbol):
            if symbol and symbol not in symbols:
                symbols.append(symbol)
        return tuple(symbols)

    @property
    def is_elementary(self) -> bool:
        return self.dimension.is_elementary

    @property
    def is_expandable(self) -> bool:
        return self.expansion_symbol is not None

    @property
    def allowed_prefixes(self) -> Tuple[Prefix, ...]:
        return get_prefixes(self.prefix_group)

    def accepts_prefix(self, prefix: Prefix) -> bool:
        return bool(prefix.group & self.prefix_group)

    def belongs_to(self, system: System) -> bool:
        return system in self.systems

    def format(self, ascii: bool = False) -> str:
        return self.ascii_symbol if ascii else self.unicode_symbol

    def __str__(self) -> str:
        return self.unicode_symbol
