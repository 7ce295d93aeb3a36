"""
Symbol text helpers: superscript digits and the unit symbol grammar.
"""

import re

from ..core.errors import FormatError


SUPERSCRIPT_DIGITS = '⁰¹²³⁴⁵⁶⁷⁸⁹'
SUPERSCRIPT_MINUS = '⁻'

_TO_SUPERSCRIPT = str.maketrans('0123456789-', SUPERSCRIPT_DIGITS + SUPERSCRIPT_MINUS)
_FROM_SUPERSCRIPT = str.maketrans(SUPERSCRIPT_DIGITS + SUPERSCRIPT_MINUS, '0123456789-')

MULTIPLY_DOT = '·'
MULTIPLY_ALIASES = ('·', '⋅', '.')

# 1-3 ASCII words, or a single non-letter special character such as '%'
_ASCII_SYMBOL_RX = re.compile(r"^(?:[a-zA-Z]+(?: [a-zA-Z]+){0,2}|[!-'?@`])$")
_PREFIX_SYMBOL_RX = re.compile(r'^[a-zA-Z]{1,2}$')

# Optional '^', then signed ASCII digits or superscript digits
EXPONENT_RX = re.compile(r'^(?P<symbol>.+?)\^?(?P<exponent>-?\d+|⁻?[⁰¹²³⁴⁵⁶⁷⁸⁹]+)?$')


def to_superscript(exponent: int) -> str:
    """Render an integer exponent with Unicode superscript characters."""
    return str(exponent).translate(_TO_SUPERSCRIPT)


def from_superscript(text: str) -> str:
    """Replace superscript digits and minus with their ASCII forms."""
    return text.translate(_FROM_SUPERSCRIPT)


def format_exponent(exponent: int, ascii: bool = True) -> str:
    if exponent == 1:
        return ''
    return str(exponent) if ascii else to_superscript(exponent)


def split_exponent(text: str):
    """
    Split a unit term string into its symbol and integer exponent.

    Returns
    -------
    tuple
        ``(symbol, exponent)``, with exponent 1 when none is written.
    """
    text = text.strip()
    match = EXPONENT_RX.match(text)
    if not text or match is None:
        raise FormatError(f"Invalid unit term: '{text}'")
    symbol = match.group('symbol')
    if any(ch.isdigit() for ch in symbol) or symbol[-1] in '-^' + SUPERSCRIPT_MINUS:
        raise FormatError(f"Invalid unit term: '{text}'")
    exponent = match.group('exponent')
    if exponent is None:
        if text.endswith('^'):
            raise FormatError(f"Invalid unit term: '{text}'")
        return symbol, 1
    return symbol, int(from_superscript(exponent))


def check_ascii_symbol(symbol: str) -> str:
    if not _ASCII_SYMBOL_RX.match(symbol):
        raise FormatError(f"Invalid ASCII unit symbol: '{symbol}'")
    return symbol


def check_prefix_symbol(symbol: str) -> str:
    if not _PREFIX_SYMBOL_RX.match(symbol):
        raise FormatError(f"Invalid ASCII prefix symbol: '{symbol}'")
    return symbol
