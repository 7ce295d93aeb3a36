"""
Metric and binary unit prefixes.
"""

from dataclasses import dataclass
from enum import Flag
from typing import Dict, Optional, Tuple

from ..core.errors import DomainError, UnknownUnitError
from .symbols import check_prefix_symbol


class PrefixGroup(Flag):
    """Groups used to decide which prefixes a unit accepts."""
    NONE = 0
    SMALL_ENGINEERING_METRIC = 1
    SMALL_NON_ENGINEERING_METRIC = 2
    LARGE_NON_ENGINEERING_METRIC = 4
    LARGE_ENGINEERING_METRIC = 8
    BINARY = 16

    SMALL_METRIC = SMALL_ENGINEERING_METRIC | SMALL_NON_ENGINEERING_METRIC
    LARGE_METRIC = LARGE_NON_ENGINEERING_METRIC | LARGE_ENGINEERING_METRIC
    ENGINEERING_METRIC = SMALL_ENGINEERING_METRIC | LARGE_ENGINEERING_METRIC
    METRIC = SMALL_METRIC | LARGE_METRIC
    LARGE = LARGE_METRIC | BINARY
    ALL = METRIC | BINARY


@dataclass(frozen=True)
class Prefix:
    """
    A unit prefix such as kilo or kibi.

    Parameters
    ----------
    name : str
        Lower-case name, e.g. ``'kilo'``.
    ascii_symbol : str
        One or two ASCII letters.
    unicode_symbol : str
        Display symbol; differs from the ASCII one only for micro.
    multiplier : float
        Positive scale factor, never 1.
    group : PrefixGroup
        The single group this prefix belongs to.
    """
    name: str
    ascii_symbol: str
    unicode_symbol: str
    multiplier: float
    group: PrefixGroup

    def __post_init__(self):
        check_prefix_symbol(self.ascii_symbol)
        if not self.multiplier > 0 or self.multiplier == 1:
            raise DomainError(
                f"Prefix multiplier must be positive and not 1, got {self.multiplier}"
            )

    @property
    def is_metric(self) -> bool:
        return bool(self.group & PrefixGroup.METRIC)

    @property
    def is_engineering(self) -> bool:
        return bool(self.group & PrefixGroup.ENGINEERING_METRIC)

    def format(self, ascii: bool = False) -> str:
        return self.ascii_symbol if ascii else self.unicode_symbol

    def invert(self) -> 'Prefix':
        """Return the metric prefix with the reciprocal multiplier."""
        if not self.is_metric:
            raise DomainError(f"Binary prefix '{self.ascii_symbol}' has no inverse")
        for prefix in PREFIXES:
            if prefix.is_metric and _same_multiplier(prefix.multiplier, 1 / self.multiplier):
                return prefix
        raise DomainError(f"Prefix '{self.ascii_symbol}' has no inverse")

    def __str__(self) -> str:
        return self.unicode_symbol


def _same_multiplier(a: float, b: float) -> bool:
    return abs(a - b) <= 1e-9 * max(abs(a), abs(b))


_small_eng = PrefixGroup.SMALL_ENGINEERING_METRIC
_small_non_eng = PrefixGroup.SMALL_NON_ENGINEERING_METRIC
_large_non_eng = PrefixGroup.LARGE_NON_ENGINEERING_METRIC
_large_eng = PrefixGroup.LARGE_ENGINEERING_METRIC
_binary = PrefixGroup.BINARY

PREFIXES: Tuple[Prefix, ...] = (
    Prefix('quecto', 'q', 'q', 1e-30, _small_eng),
    Prefix('ronto', 'r', 'r', 1e-27, _small_eng),
    Prefix('yocto', 'y', 'y', 1e-24, _small_eng),
    Prefix('zepto', 'z', 'z', 1e-21, _small_eng),
    Prefix('atto', 'a', 'a', 1e-18, _small_eng),
    Prefix('femto', 'f', 'f', 1e-15, _small_eng),
    Prefix('pico', 'p', 'p', 1e-12, _small_eng),
    Prefix('nano', 'n', 'n', 1e-9, _small_eng),
    Prefix('micro', 'u', 'μ', 1e-6, _small_eng),
    Prefix('milli', 'm', 'm', 1e-3, _small_eng),
    Prefix('centi', 'c', 'c', 1e-2, _small_non_eng),
    Prefix('deci', 'd', 'd', 1e-1, _small_non_eng),
    Prefix('deca', 'da', 'da', 1e1, _large_non_eng),
    Prefix('hecto', 'h', 'h', 1e2, _large_non_eng),
    Prefix('kilo', 'k', 'k', 1e3, _large_eng),
    Prefix('mega', 'M', 'M', 1e6, _large_eng),
    Prefix('giga', 'G', 'G', 1e9, _large_eng),
    Prefix('tera', 'T', 'T', 1e12, _large_eng),
    Prefix('peta', 'P', 'P', 1e15, _large_eng),
    Prefix('exa', 'E', 'E', 1e18, _large_eng),
    Prefix('zetta', 'Z', 'Z', 1e21, _large_eng),
    Prefix('yotta', 'Y', 'Y', 1e24, _large_eng),
    Prefix('ronna', 'R', 'R', 1e27, _large_eng),
    Prefix('quetta', 'Q', 'Q', 1e30, _large_eng),
    Prefix('kibi', 'Ki', 'Ki', 2.0 ** 10, _binary),
    Prefix('mebi', 'Mi', 'Mi', 2.0 ** 20, _binary),
    Prefix('gibi', 'Gi', 'Gi', 2.0 ** 30, _binary),
    Prefix('tebi', 'Ti', 'Ti', 2.0 ** 40, _binary),
    Prefix('pebi', 'Pi', 'Pi', 2.0 ** 50, _binary),
    Prefix('exbi', 'Ei', 'Ei', 2.0 ** 60, _binary),
    Prefix('zebi', 'Zi', 'Zi', 2.0 ** 70, _binary),
    Prefix('yobi', 'Yi', 'Yi', 2.0 ** 80, _binary),
)

# The micro sign (U+00B5) is accepted as an alias of the Greek mu
_ALIASES: Dict[str, str] = {'µ': 'u'}

_BY_SYMBOL: Dict[str, Prefix] = {}
for _prefix in PREFIXES:
    _BY_SYMBOL[_prefix.ascii_symbol] = _prefix
    _BY_SYMBOL[_prefix.unicode_symbol] = _prefix


def prefix_symbols(prefix: Prefix) -> Tuple[str, ...]:
    """Every spelling under which ``prefix`` may be written."""
    symbols = {prefix.ascii_symbol, prefix.unicode_symbol}
    symbols.update(alias for alias, target in _ALIASES.items() if target == prefix.ascii_symbol)
    return tuple(sorted(symbols))


def get_prefix(symbol: str) -> Prefix:
    """Look up a prefix by its ASCII or display symbol."""
    symbol = _ALIASES.get(symbol, symbol)
    try:
        return _BY_SYMBOL[symbol]
    except KeyError:
        raise UnknownUnitError(f"Unknown prefix: '{symbol}'") from None


def get_prefixes(groups: PrefixGroup) -> Tuple[Prefix, ...]:
    """All prefixes belonging to any of ``groups``."""
    return tuple(prefix for prefix in PREFIXES if prefix.group & groups)


def prefix_multiplier(prefix: Optional[Prefix]) -> float:
    return 1.0 if prefix is None else prefix.multiplier

