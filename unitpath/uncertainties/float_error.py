"""
Floating-point values that carry an absolute error bound.

The bound tracks rounding error accumulated through arithmetic so that two
derivations of the same quantity can be compared for accuracy.
"""

import math
from typing import Optional, Union

import numpy as np

from ..core.errors import DivisionByZeroError, DomainError


Number = Union[int, float]


def ulp(value: float) -> float:
    """Distance from ``value`` to the next representable float away from zero."""
    return float(np.spacing(abs(float(value))))


def half_ulp(value: float) -> float:
    return ulp(value) / 2


def is_exact_int(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer()


class FloatWithError:
    """
    A float paired with a non-negative absolute error bound.

    Parameters
    ----------
    value : int or float
        The nominal value.
    error : float, optional
        Absolute error bound. When omitted it is 0 for integral values and
        half an ulp of ``value`` otherwise.
    """

    __slots__ = ('_value', '_error')

    def __init__(self, value: Number, error: Optional[float] = None):
        value = float(value)
        if not math.isfinite(value):
            raise DomainError(f"Value must be finite, got {value}")
        if error is None:
            error = 0.0 if is_exact_int(value) else half_ulp(value)
        error = float(error)
        if error < 0 or math.isnan(error):
            raise DomainError(f"Error bound must be non-negative, got {error}")
        self._value = value
        self._error = error

    @classmethod
    def exact(cls, value: int) -> 'FloatWithError':
        """Create from an exact integer with a zero error bound."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise DomainError(f"Exact value must be an integer, got {value!r}")
        return cls(value, 0.0)

    @classmethod
    def coerce(cls, other: Union['FloatWithError', Number]) -> 'FloatWithError':
        if isinstance(other, FloatWithError):
            return other
        return cls(other)

    @property
    def value(self) -> float:
        return self._value

    @property
    def absolute_error(self) -> float:
        return self._error

    @property
    def relative_error(self) -> float:
        if self._value == 0:
            return 0.0 if self._error == 0 else math.inf
        return self._error / abs(self._value)

    @property
    def significant_digits(self) -> int:
        """Number of decimal digits not swamped by the error bound, capped at 17."""
        relative = self.relative_error
        if relative == 0:
            return 17
        if math.isinf(relative):
            return 0
        return max(0, min(17, int(math.floor(-math.log10(relative)))))

    def _rounded(self, value: float, error: float, extra: bool = False) -> 'FloatWithError':
        # Each inexact operation may add up to half an ulp of rounding
        if error > 0 or extra:
            error += half_ulp(value)
        return FloatWithError(value, error)

    def add(self, other) -> 'FloatWithError':
        other = FloatWithError.coerce(other)
        value = self._value + other._value
        return self._rounded(value, self._error + other._error)

    def sub(self, other) -> 'FloatWithError':
        other = FloatWithError.coerce(other)
        value = self._value - other._value
        return self._rounded(value, self._error + other._error)

    def mul(self, other) -> 'FloatWithError':
        other = FloatWithError.coerce(other)
        value = self._value * other._value
        if value == 0:
            return FloatWithError(
                0.0, abs(self._value) * other._error + abs(other._value) * self._error
            )
        relative = self.relative_error + other.relative_error
        return self._rounded(value, relative * abs(value))

    def div(self, other) -> 'FloatWithError':
        other = FloatWithError.coerce(other)
        if other._value == 0:
            raise DivisionByZeroError("Division by a zero-valued scalar")
        value = self._value / other._value
        if value == 0:
            return FloatWithError(0.0, self._error / abs(other._value))
        relative = self.relative_error + other.relative_error
        return self._rounded(value, relative * abs(value), extra=not is_exact_int(value))

    def inv(self) -> 'FloatWithError':
        if self._value == 0:
            raise DivisionByZeroError("Cannot invert a zero-valued scalar")
        return FloatWithError.exact(1).div(self)

    def neg(self) -> 'FloatWithError':
        return FloatWithError(-self._value, self._error)

    def pow(self, exponent: int) -> 'FloatWithError':
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            raise DomainError(f"Exponent must be an integer, got {exponent!r}")
        if exponent == 0:
            return FloatWithError.exact(1)
        if exponent < 0:
            return self.pow(-exponent).inv()
        result = self
        for _ in range(exponent - 1):
            result = result.mul(self)
        return result

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return FloatWithError.coerce(other).add(self)

    def __sub__(self, other):
        return self.sub(other)

    def __rsub__(self, other):
        return FloatWithError.coerce(other).sub(self)

    def __mul__(self, other):
        return self.mul(other)

    def __rmul__(self, other):
        return FloatWithError.coerce(other).mul(self)

    def __truediv__(self, other):
        return self.div(other)

    def __rtruediv__(self, other):
        return FloatWithError.coerce(other).div(self)

    def __pow__(self, exponent: int):
        return self.pow(exponent)

    def __neg__(self):
        return self.neg()

    def __abs__(self):
        return FloatWithError(abs(self._value), self._error)

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, FloatWithError):
            return self._value == other._value and self._error == other._error
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._value, self._error))

    def __str__(self) -> str:
        return f"{self._value:.15g} ± {self._error:.2e} ({self.significant_digits} sig. digits)"

    def __repr__(self) -> str:
        return f"FloatWithError({self._value!r}, {self._error!r})"
