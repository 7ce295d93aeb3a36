from .dimensions import (Dimension, DIMENSION_CODES, DIMENSION_NAMES, SI_BASE_SYMBOLS,
                         apply_exponent, as_dimension, compose, decompose, normalize)
from .errors import (CatalogWarning, ConversionPathWarning, DimensionMismatchError,
                     DivisionByZeroError, DomainError, FormatError, NoConversionPathError,
                     PrefixNotAllowedError, UnitPathError, UnknownUnitError,
                     UnsupportedOperationError)
