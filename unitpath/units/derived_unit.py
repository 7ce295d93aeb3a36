"""
Derived (compound) units: products of unit terms such as ``kg·m·s⁻²``.
"""

import re
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..core.dimensions import Dimension
from ..core.errors import FormatError
from ..uncertainties.float_error import FloatWithError
from .base_unit import BaseUnit
from .registry import UnitRegistry
from .symbols import MULTIPLY_ALIASES, MULTIPLY_DOT
from .unit_term import UnitTerm, resolve_registry

_FRACTION_RX = re.compile(r'^(?P<numerator>[^()]+)/\((?P<denominator>[^()]+)\)$')
_OPERATOR_RX = re.compile(r'([*/])')


class DerivedUnit:
    """
    An ordered product of unit terms.

    Equality ignores term order and compares the merged terms, so
    ``m*s-1`` and ``s-1*m`` are the same unit.
    """

    __slots__ = ('_terms',)

    def __init__(self, terms: Iterable[UnitTerm] = ()):
        terms = tuple(terms)
        for term in terms:
            if not isinstance(term, UnitTerm):
                raise TypeError(f"DerivedUnit terms must be UnitTerm, got {type(term).__name__}")
        self._terms: Tuple[UnitTerm, ...] = terms

    @classmethod
    def parse(cls, symbol: str, registry: Optional[UnitRegistry] = None) -> 'DerivedUnit':
        """
        Parse a derived unit expression.

        Two forms are accepted: terms joined by ``*`` and ``/`` (``'kg*m/s2'``),
        and a numerator over a parenthesized denominator (``'W/(sr*m2)'``).
        ``·``, ``⋅`` and ``.`` are accepted for ``*``; ``^`` before an exponent
        is ignored. A ``/`` inverts only the term that follows it.

        Parameters
        ----------
        symbol : str
            Unit expression; ``''`` or ``'1'`` give the dimensionless unit.
        registry : UnitRegistry, optional
            Units to resolve against; defaults to the built-in catalog.

        Returns
        -------
        DerivedUnit
        """
        if not isinstance(symbol, str):
            raise FormatError(f"Unit symbol must be a string, got {type(symbol).__name__}")
        registry = resolve_registry(registry)

        text = symbol.strip()
        if text in ('', '1'):
            return cls()
        for alias in MULTIPLY_ALIASES:
            text = text.replace(alias, '*')
        text = text.replace('^', '')

        match = _FRACTION_RX.match(text)
        if match:
            numerator = _parse_terms(match.group('numerator'), registry, symbol)
            denominator = _parse_terms(match.group('denominator'), registry, symbol)
            return cls(numerator + [term.inv() for term in denominator])
        if '(' in text or ')' in text:
            raise FormatError(f"Invalid unit expression: '{symbol}'")
        return cls(_parse_terms(text, registry, symbol))

    @property
    def terms(self) -> Tuple[UnitTerm, ...]:
        return self._terms

    @property
    def dimension(self) -> Dimension:
        dimension = Dimension()
        for term in self._terms:
            dimension = dimension * term.dimension
        return dimension

    @property
    def is_dimensionless(self) -> bool:
        return self.dimension.is_dimensionless

    @property
    def single_term(self) -> Optional[UnitTerm]:
        """The only term of the merged unit, or None."""
        terms = self.merge().terms
        return terms[0] if len(terms) == 1 else None

    @property
    def is_expandable(self) -> bool:
        return any(term.is_expandable for term in self._terms)

    def is_compatible(self, other: 'UnitRef', registry: Optional[UnitRegistry] = None) -> bool:
        return self.dimension == to_derived_unit(other, registry).dimension

    def merge(self) -> 'DerivedUnit':
        """Sum exponents of terms sharing unit and prefix, dropping zeros."""
        exponents: Dict[Tuple[BaseUnit, object], int] = {}
        for term in self._terms:
            key = (term.unit, term.prefix)
            exponents[key] = exponents.get(key, 0) + term.exponent
        return DerivedUnit(
            UnitTerm(unit, prefix, exponent)
            for (unit, prefix), exponent in exponents.items()
            if exponent != 0
        )

    def pow(self, exponent: int) -> 'DerivedUnit':
        return DerivedUnit(term.pow(exponent) for term in self._terms)

    def inv(self) -> 'DerivedUnit':
        return DerivedUnit(term.inv() for term in self._terms)

    def mul(self, other: 'DerivedUnit') -> 'DerivedUnit':
        return DerivedUnit(self._terms + other._terms).merge()

    def div(self, other: 'DerivedUnit') -> 'DerivedUnit':
        return self.mul(other.inv())

    def remove_prefixes(self) -> 'DerivedUnit':
        return DerivedUnit(term.remove_prefix() for term in self._terms)

    def expand(self, registry: Optional[UnitRegistry] = None) -> Tuple['DerivedUnit', FloatWithError]:
        """
        Replace expandable terms by their expansions.

        Returns
        -------
        tuple
            ``(unit, factor)`` such that ``1 self = factor * unit``. Prefix
            multipliers of expanded terms are folded into ``factor``.
        """
        factor = FloatWithError.exact(1)
        terms: List[UnitTerm] = []
        expanded = False
        for term in self._terms:
            if not term.is_expandable:
                terms.append(term)
                continue
            expansion = DerivedUnit.parse(term.unit.expansion_symbol, registry)
            factor = factor * FloatWithError(term.unit.expansion_factor).pow(term.exponent)
            factor = factor * term.multiplier_with_error
            terms.extend(expansion.pow(term.exponent).terms)
            expanded = True

        unit = DerivedUnit(terms).merge()
        if expanded and unit.is_expandable:
            unit, inner = unit.expand(registry)
            factor = factor * inner
        return unit, factor

    def format(self, ascii: bool = False) -> str:
        """
        Render the unit.

        The ASCII form writes positive terms joined by ``*`` followed by
        ``/``-separated negative terms (``kg*m/s2``); the display form joins
        every term with a multiply dot and superscript exponents (``kg·m·s⁻²``).
        """
        if not ascii:
            return MULTIPLY_DOT.join(term.format(False) for term in self._terms)
        numerator = [term for term in self._terms if term.exponent > 0]
        denominator = [term for term in self._terms if term.exponent < 0]
        if not numerator:
            return '*'.join(term.format(True) for term in denominator)
        text = '*'.join(term.format(True) for term in numerator)
        return text + ''.join('/' + term.inv().format(True) for term in denominator)

    @property
    def ascii_symbol(self) -> str:
        return self.format(ascii=True)

    @property
    def unicode_symbol(self) -> str:
        return self.format(ascii=False)

    def __mul__(self, other):
        return self.mul(other)

    def __truediv__(self, other):
        return self.div(other)

    def __pow__(self, exponent: int):
        return self.pow(exponent)

    def __iter__(self) -> Iterator[UnitTerm]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DerivedUnit):
            return NotImplemented
        return frozenset(self.merge().terms) == frozenset(other.merge().terms)

    def __hash__(self) -> int:
        return hash(frozenset(self.merge().terms))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"DerivedUnit('{self.ascii_symbol}')"


UnitRef = Union[str, BaseUnit, UnitTerm, DerivedUnit]


def to_derived_unit(ref: UnitRef, registry: Optional[UnitRegistry] = None) -> DerivedUnit:
    """Normalize any unit reference to a DerivedUnit."""
    if isinstance(ref, DerivedUnit):
        return ref
    if isinstance(ref, UnitTerm):
        return DerivedUnit([ref])
    if isinstance(ref, BaseUnit):
        return DerivedUnit([UnitTerm(ref)])
    if isinstance(ref, str):
        return DerivedUnit.parse(ref, registry)
    raise TypeError(f"Cannot interpret {type(ref).__name__} as a unit")


def _parse_terms(text: str, registry: UnitRegistry, original: str) -> List[UnitTerm]:
    tokens = _OPERATOR_RX.split(text)
    terms: List[UnitTerm] = []
    # tokens alternate: term, operator, term, ...
    for index in range(0, len(tokens), 2):
        token = tokens[index].strip()
        if not token:
            raise FormatError(f"Invalid unit expression: '{original}'")
        term = UnitTerm.parse(token, registry)
        if index > 0 and tokens[index - 1] == '/':
            term = term.inv()
        terms.append(term)
    return terms
