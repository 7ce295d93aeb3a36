"""
Built-in direct conversion records ``(src, dest, factor[, offset])``.

Factors that scipy.constants defines are taken from it; exact customary
relationships are written as integers so they carry no rounding error.
"""

from scipy import constants

from ..converter.loader import ConversionRecord

LENGTH = [
    ConversionRecord('in', 'mm', 25.4),
    ConversionRecord('ft', 'in', 12),
    ConversionRecord('yd', 'ft', 3),
    ConversionRecord('mi', 'yd', 1760),
    ConversionRecord('ftm', 'yd', 2),
    ConversionRecord('nmi', 'm', constants.nautical_mile),
    ConversionRecord('au', 'm', constants.astronomical_unit),
    ConversionRecord('ly', 'm', constants.light_year),
    ConversionRecord('pc', 'au', 648000 / constants.pi),
    ConversionRecord('in', 'pt', 72),
    ConversionRecord('P', 'pt', 12),
]

MASS = [
    ConversionRecord('t', 'kg', 1000),
    ConversionRecord('lb', 'kg', constants.pound),
    ConversionRecord('lb', 'oz', 16),
    ConversionRecord('st', 'lb', 14),
    ConversionRecord('ton', 'lb', 2000),
    ConversionRecord('gr', 'mg', 64.79891),
    ConversionRecord('ozt', 'kg', constants.troy_ounce),
    ConversionRecord('Da', 'kg', constants.atomic_mass),
]

TIME = [
    ConversionRecord('min', 's', 60),
    ConversionRecord('h', 'min', 60),
    ConversionRecord('d', 'h', 24),
    ConversionRecord('w', 'd', 7),
    ConversionRecord('y', 'mo', 12),
    ConversionRecord('y', 'd', 365.2425),
    ConversionRecord('mo', 'd', 30.436875),
]

AREA = [
    ConversionRecord('ha', 'm2', 10000),
    ConversionRecord('ac', 'm2', constants.acre),
    ConversionRecord('ac', 'yd2', 4840),
]

VOLUME = [
    ConversionRecord('m3', 'L', 1000),
    ConversionRecord('US gal', 'in3', 231),
    ConversionRecord('US gal', 'L', 3.785411784),
    ConversionRecord('US fl oz', 'mL', 29.5735295625),
    ConversionRecord('US gal', 'US qt', 4),
    ConversionRecord('US qt', 'US pt', 2),
    ConversionRecord('US pt', 'US cup', 2),
    ConversionRecord('US cup', 'US fl oz', 8),
    ConversionRecord('bbl', 'US gal', 42),
    ConversionRecord('imp gal', 'L', 4.54609),
    ConversionRecord('imp gal', 'imp pt', 8),
    ConversionRecord('imp pt', 'imp fl oz', 20),
    ConversionRecord('imp fl oz', 'mL', 28.4130625),
]

ANGLE = [
    ConversionRecord('turn', 'rad', 2 * constants.pi),
    ConversionRecord('turn', 'deg', 360),
    ConversionRecord('deg', 'arcmin', 60),
    ConversionRecord('arcmin', 'arcsec', 60),
    ConversionRecord('turn', 'grad', 400),
]

DATA = [
    ConversionRecord('B', 'b', 8),
]

PRESSURE = [
    ConversionRecord('atm', 'Pa', constants.atm),
    ConversionRecord('bar', 'kPa', 100),
    ConversionRecord('atm', 'Torr', 760),
    ConversionRecord('mmHg', 'Pa', 133.322387415),
    ConversionRecord('inHg', 'mmHg', 25.4),
]

TEMPERATURE = [
    ConversionRecord('degC', 'K', 1, constants.zero_Celsius),
    ConversionRecord('degF', 'degR', 1, 459.67),
    ConversionRecord('K', 'degR', 1.8),
]

CONVERSIONS = (LENGTH + MASS + TIME + AREA + VOLUME + ANGLE + DATA + PRESSURE
               + TEMPERATURE)
