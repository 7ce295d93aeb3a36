"""
Dimension algebra: encoding, decoding and composition of dimension vectors.

A dimension code is a sequence of letters, each optionally followed by a signed
single-digit exponent, e.g. ``"MLT-2"`` for force. The canonical encoding lists
the letters in a fixed order and omits an exponent of exactly 1.
"""

import re
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple, Union

from .errors import DomainError, FormatError


DIMENSION_CODES: Tuple[str, ...] = ('M', 'L', 'A', 'D', 'C', 'T', 'I', 'H', 'N', 'J')

DIMENSION_NAMES: Dict[str, str] = {
    'M': 'mass',
    'L': 'length',
    'A': 'angle',
    'D': 'data',
    'C': 'currency',
    'T': 'time',
    'I': 'electric current',
    'H': 'temperature',
    'N': 'amount of substance',
    'J': 'luminous intensity',
}

# Symbol of the SI (or conventional) base unit for each dimension letter
SI_BASE_SYMBOLS: Dict[str, str] = {
    'M': 'kg',
    'L': 'm',
    'A': 'rad',
    'D': 'B',
    'C': 'XAU',
    'T': 's',
    'I': 'A',
    'H': 'K',
    'N': 'mol',
    'J': 'cd',
}

DIMENSIONLESS_MARKERS = ('', '1')

MAX_EXPONENT = 9

_CODE_RX = re.compile(r'^(?:[A-Z](?:-?\d)?)+$')
_TERM_RX = re.compile(r'([A-Z])(-?\d)?')


def decompose(code: str) -> Dict[str, int]:
    """
    Parse a dimension code into a mapping of letter to exponent.

    Parameters
    ----------
    code : str
        Dimension code such as ``"MLT-2"``. Letters may appear in any order.

    Returns
    -------
    dict
        Letter to integer exponent, in the order the letters appear.
    """
    if not isinstance(code, str):
        raise FormatError(f"Dimension code must be a string, got {type(code).__name__}")

    text = code.strip()
    if text in DIMENSIONLESS_MARKERS:
        return {}
    if not _CODE_RX.match(text):
        raise FormatError(f"Invalid dimension code: '{code}'")

    vector: Dict[str, int] = {}
    for letter, exponent in _TERM_RX.findall(text):
        if letter not in DIMENSION_CODES:
            raise FormatError(f"Unknown dimension letter '{letter}' in '{code}'")
        if letter in vector:
            raise FormatError(f"Dimension letter '{letter}' repeated in '{code}'")
        vector[letter] = int(exponent) if exponent else 1
    return vector


def compose(vector: Mapping[str, int]) -> str:
    """
    Build the canonical code for a dimension vector.

    Letters with an explicit zero exponent are kept (``"M0"``); callers that
    want them gone must drop them before composing.
    """
    for letter, exponent in vector.items():
        if letter not in DIMENSION_CODES:
            raise FormatError(f"Unknown dimension letter '{letter}'")
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            raise DomainError(f"Dimension exponent must be an integer, got {exponent!r}")
        if abs(exponent) > MAX_EXPONENT:
            raise DomainError(
                f"Exponent {exponent} for dimension '{letter}' is outside "
                f"[-{MAX_EXPONENT}, {MAX_EXPONENT}]"
            )

    parts = []
    for letter in DIMENSION_CODES:
        if letter in vector:
            exponent = vector[letter]
            parts.append(letter if exponent == 1 else f"{letter}{exponent}")
    return ''.join(parts)


def normalize(code: str) -> str:
    """Canonicalize letter order and drop exponents of 1."""
    return compose(decompose(code))


def apply_exponent(code: str, exponent: int) -> str:
    """
    Multiply every exponent in a dimension code by ``exponent``.

    An exponent of 0 yields an explicit all-zero code such as ``"M0L0T0"``
    rather than the empty dimensionless code.
    """
    vector = decompose(code)
    return compose({letter: value * exponent for letter, value in vector.items()})


@dataclass(frozen=True, eq=False)
class Dimension:
    """Immutable dimension vector identified by its canonical code."""
    code: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'code', normalize(self.code))

    @classmethod
    def from_vector(cls, vector: Mapping[str, int]) -> 'Dimension':
        return cls(compose(vector))

    @property
    def vector(self) -> Dict[str, int]:
        return decompose(self.code)

    @property
    def letters(self) -> Tuple[str, ...]:
        return tuple(self.vector)

    @property
    def is_dimensionless(self) -> bool:
        return all(exponent == 0 for exponent in self.vector.values())

    @property
    def is_elementary(self) -> bool:
        """True for a single letter with exponent 1, e.g. ``L``."""
        vector = self.vector
        return len(vector) == 1 and next(iter(vector.values())) == 1

    @property
    def single_letter(self) -> Union[Tuple[str, int], None]:
        """``(letter, exponent)`` when exactly one letter has a non-zero exponent."""
        vector = {k: v for k, v in self.vector.items() if v != 0}
        if len(vector) != 1:
            return None
        return next(iter(vector.items()))

    def apply_exponent(self, exponent: int) -> 'Dimension':
        return Dimension(apply_exponent(self.code, exponent))

    def _combine(self, other, sign: int) -> 'Dimension':
        other = as_dimension(other)
        vector = dict(self.vector)
        for letter, exponent in other.vector.items():
            vector[letter] = vector.get(letter, 0) + sign * exponent
        return Dimension.from_vector({k: v for k, v in vector.items() if v != 0})

    def __mul__(self, other) -> 'Dimension':
        return self._combine(other, 1)

    def __truediv__(self, other) -> 'Dimension':
        return self._combine(other, -1)

    def __pow__(self, power: int) -> 'Dimension':
        return Dimension.from_vector(
            {k: v * power for k, v in self.vector.items() if v * power != 0}
        )

    def __eq__(self, other) -> bool:
        if isinstance(other, str):
            try:
                other = Dimension(other)
            except FormatError:
                return False
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Dimension('{self.code}')"


def as_dimension(value: Union[Dimension, str]) -> Dimension:
    """Accept a Dimension or a dimension code."""
    if isinstance(value, Dimension):
        return value
    return Dimension(value)
