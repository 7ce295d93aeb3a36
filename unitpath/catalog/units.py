"""
Built-in unit definitions.
"""

from scipy import constants

from ..units.base_unit import BaseUnit, System
from ..units.prefix import PrefixGroup

METRIC = PrefixGroup.METRIC
LARGE_ENG = PrefixGroup.LARGE_ENGINEERING_METRIC
SMALL_ENG = PrefixGroup.SMALL_ENGINEERING_METRIC
DATA = PrefixGroup.LARGE

SI = frozenset({System.SI})
SI_ACCEPTED = frozenset({System.SI_ACCEPTED})
COMMON = frozenset({System.COMMON})
US_IMPERIAL = frozenset({System.US, System.IMPERIAL})
US = frozenset({System.US})
IMPERIAL = frozenset({System.IMPERIAL})
SCIENTIFIC = frozenset({System.SCIENTIFIC})
ASTRONOMICAL = frozenset({System.ASTRONOMICAL})
NAUTICAL = frozenset({System.NAUTICAL})
TYPOGRAPHY = frozenset({System.TYPOGRAPHY})


SI_BASE_UNITS = [
    BaseUnit('gram', 'g', 'M', prefix_group=METRIC, systems=SI),
    BaseUnit('metre', 'm', 'L', prefix_group=METRIC, systems=SI),
    BaseUnit('radian', 'rad', 'A', prefix_group=PrefixGroup.SMALL_METRIC, systems=SI),
    BaseUnit('second', 's', 'T', prefix_group=METRIC, systems=SI),
    BaseUnit('ampere', 'A', 'I', prefix_group=METRIC, systems=SI),
    BaseUnit('kelvin', 'K', 'H', prefix_group=METRIC, systems=SI),
    BaseUnit('mole', 'mol', 'N', prefix_group=METRIC, systems=SI),
    BaseUnit('candela', 'cd', 'J', prefix_group=METRIC, systems=SI),
    BaseUnit('byte', 'B', 'D', prefix_group=DATA, systems=COMMON),
    BaseUnit('bit', 'b', 'D', prefix_group=DATA, systems=COMMON),
    BaseUnit('gold troy ounce', 'XAU', 'C', systems=COMMON),
]

SI_DERIVED_UNITS = [
    BaseUnit('hertz', 'Hz', 'T-1', prefix_group=METRIC, systems=SI, expansion_symbol='s-1'),
    BaseUnit('newton', 'N', 'MLT-2', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*m*s-2'),
    BaseUnit('pascal', 'Pa', 'ML-1T-2', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*m-1*s-2'),
    BaseUnit('joule', 'J', 'ML2T-2', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*m2*s-2'),
    BaseUnit('watt', 'W', 'ML2T-3', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*m2*s-3'),
    BaseUnit('coulomb', 'C', 'TI', prefix_group=METRIC, systems=SI, expansion_symbol='s*A'),
    BaseUnit('volt', 'V', 'ML2T-3I-1', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*m2*s-3*A-1'),
    BaseUnit('farad', 'F', 'M-1L-2T4I2', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg-1*m-2*s4*A2'),
    BaseUnit('ohm', 'ohm', 'ML2T-3I-2', unicode_symbol='Ω', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*m2*s-3*A-2'),
    BaseUnit('siemens', 'S', 'M-1L-2T3I2', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg-1*m-2*s3*A2'),
    BaseUnit('weber', 'Wb', 'ML2T-2I-1', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*m2*s-2*A-1'),
    BaseUnit('tesla', 'T', 'MT-2I-1', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*s-2*A-1'),
    BaseUnit('henry', 'H', 'ML2T-2I-2', prefix_group=METRIC, systems=SI,
             expansion_symbol='kg*m2*s-2*A-2'),
    BaseUnit('steradian', 'sr', 'A2', systems=SI, expansion_symbol='rad2'),
    BaseUnit('lumen', 'lm', 'A2J', prefix_group=METRIC, systems=SI, expansion_symbol='cd*sr'),
    BaseUnit('lux', 'lx', 'L-2A2J', prefix_group=METRIC, systems=SI, expansion_symbol='lm*m-2'),
    BaseUnit('becquerel', 'Bq', 'T-1', prefix_group=METRIC, systems=SI, expansion_symbol='s-1'),
    BaseUnit('gray', 'Gy', 'L2T-2', prefix_group=METRIC, systems=SI, expansion_symbol='m2*s-2'),
    BaseUnit('sievert', 'Sv', 'L2T-2', prefix_group=METRIC, systems=SI, expansion_symbol='m2*s-2'),
    BaseUnit('katal', 'kat', 'T-1N', prefix_group=METRIC, systems=SI, expansion_symbol='mol*s-1'),
    BaseUnit('degree Celsius', 'degC', 'H', unicode_symbol='°C', systems=SI),
]

SI_ACCEPTED_UNITS = [
    BaseUnit('litre', 'L', 'L3', alternate_symbol='l', prefix_group=METRIC, systems=SI_ACCEPTED),
    BaseUnit('tonne', 't', 'M', prefix_group=LARGE_ENG, systems=SI_ACCEPTED),
    BaseUnit('hectare', 'ha', 'L2', systems=SI_ACCEPTED),
    BaseUnit('minute', 'min', 'T', systems=SI_ACCEPTED),
    BaseUnit('hour', 'h', 'T', systems=SI_ACCEPTED),
    BaseUnit('day', 'd', 'T', systems=SI_ACCEPTED),
    BaseUnit('degree', 'deg', 'A', unicode_symbol='°', systems=SI_ACCEPTED),
    BaseUnit('arcminute', 'arcmin', 'A', unicode_symbol='′', systems=SI_ACCEPTED),
    BaseUnit('arcsecond', 'arcsec', 'A', unicode_symbol='″', prefix_group=SMALL_ENG,
             systems=SI_ACCEPTED),
    BaseUnit('electronvolt', 'eV', 'ML2T-2', prefix_group=METRIC, systems=SI_ACCEPTED,
             expansion_symbol='J', expansion_factor=constants.electron_volt),
    BaseUnit('dalton', 'Da', 'M', prefix_group=LARGE_ENG, systems=SI_ACCEPTED),
    BaseUnit('astronomical unit', 'au', 'L', systems=SI_ACCEPTED | ASTRONOMICAL),
]

COMMON_UNITS = [
    BaseUnit('week', 'w', 'T', systems=COMMON),
    BaseUnit('month', 'mo', 'T', systems=COMMON),
    BaseUnit('year', 'y', 'T', systems=COMMON),
    BaseUnit('turn', 'turn', 'A', systems=COMMON),
    BaseUnit('gradian', 'grad', 'A', systems=COMMON),
    BaseUnit('bar', 'bar', 'ML-1T-2', prefix_group=METRIC, systems=COMMON),
    BaseUnit('calorie', 'cal', 'ML2T-2', prefix_group=LARGE_ENG, systems=COMMON,
             expansion_symbol='J', expansion_factor=constants.calorie),
    BaseUnit('atmosphere', 'atm', 'ML-1T-2', systems=COMMON),
    BaseUnit('torr', 'Torr', 'ML-1T-2', systems=COMMON),
    BaseUnit('millimetre of mercury', 'mmHg', 'ML-1T-2', systems=COMMON),
    BaseUnit('kilogram force', 'kgf', 'MLT-2', systems=COMMON,
             expansion_symbol='kg*m*s-2', expansion_factor=constants.g),
]

US_IMPERIAL_UNITS = [
    BaseUnit('inch', 'in', 'L', systems=US_IMPERIAL),
    BaseUnit('foot', 'ft', 'L', systems=US_IMPERIAL),
    BaseUnit('yard', 'yd', 'L', systems=US_IMPERIAL),
    BaseUnit('mile', 'mi', 'L', systems=US_IMPERIAL),
    BaseUnit('fathom', 'ftm', 'L', systems=US_IMPERIAL | NAUTICAL),
    BaseUnit('acre', 'ac', 'L2', systems=US_IMPERIAL),
    BaseUnit('pound', 'lb', 'M', systems=US_IMPERIAL),
    BaseUnit('ounce', 'oz', 'M', systems=US_IMPERIAL),
    BaseUnit('stone', 'st', 'M', systems=IMPERIAL),
    BaseUnit('short ton', 'ton', 'M', systems=US),
    BaseUnit('grain', 'gr', 'M', systems=US_IMPERIAL),
    BaseUnit('troy ounce', 'ozt', 'M', systems=US_IMPERIAL),
    BaseUnit('degree Fahrenheit', 'degF', 'H', unicode_symbol='°F', systems=US_IMPERIAL),
    BaseUnit('degree Rankine', 'degR', 'H', unicode_symbol='°R', systems=US_IMPERIAL),
    BaseUnit('US gallon', 'US gal', 'L3', systems=US),
    BaseUnit('US quart', 'US qt', 'L3', systems=US),
    BaseUnit('US pint', 'US pt', 'L3', systems=US),
    BaseUnit('US cup', 'US cup', 'L3', systems=US),
    BaseUnit('US fluid ounce', 'US fl oz', 'L3', systems=US),
    BaseUnit('barrel', 'bbl', 'L3', systems=US),
    BaseUnit('imperial gallon', 'imp gal', 'L3', systems=IMPERIAL),
    BaseUnit('imperial pint', 'imp pt', 'L3', systems=IMPERIAL),
    BaseUnit('imperial fluid ounce', 'imp fl oz', 'L3', systems=IMPERIAL),
    BaseUnit('pound force', 'lbf', 'MLT-2', systems=US_IMPERIAL,
             expansion_symbol='ft*lb*s-2', expansion_factor=constants.g / constants.foot),
    BaseUnit('pound per square inch', 'psi', 'ML-1T-2', systems=US_IMPERIAL,
             expansion_symbol='lbf*in-2'),
    BaseUnit('inch of mercury', 'inHg', 'ML-1T-2', systems=US_IMPERIAL),
    BaseUnit('British thermal unit', 'BTU', 'ML2T-2', systems=US_IMPERIAL,
             expansion_symbol='J', expansion_factor=constants.Btu),
    BaseUnit('horsepower', 'hp', 'ML2T-3', systems=US_IMPERIAL,
             expansion_symbol='W', expansion_factor=constants.hp),
    BaseUnit('mile per hour', 'mph', 'LT-1', systems=US_IMPERIAL, expansion_symbol='mi*h-1'),
]

NAUTICAL_UNITS = [
    BaseUnit('nautical mile', 'nmi', 'L', systems=NAUTICAL),
    BaseUnit('knot', 'kn', 'LT-1', systems=NAUTICAL, expansion_symbol='nmi*h-1'),
]

ASTRONOMICAL_UNITS = [
    BaseUnit('light year', 'ly', 'L', prefix_group=LARGE_ENG, systems=ASTRONOMICAL),
    BaseUnit('parsec', 'pc', 'L', prefix_group=LARGE_ENG, systems=ASTRONOMICAL),
]

TYPOGRAPHY_UNITS = [
    BaseUnit('point', 'pt', 'L', systems=TYPOGRAPHY),
    BaseUnit('pica', 'P', 'L', systems=TYPOGRAPHY),
]

UNITS = (SI_BASE_UNITS + SI_DERIVED_UNITS + SI_ACCEPTED_UNITS + COMMON_UNITS
         + US_IMPERIAL_UNITS + NAUTICAL_UNITS + ASTRONOMICAL_UNITS + TYPOGRAPHY_UNITS)
