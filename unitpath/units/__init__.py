from .base_unit import BaseUnit, System
from .derived_unit import DerivedUnit, UnitRef, to_derived_unit
from .prefix import PREFIXES, Prefix, PrefixGroup, get_prefix, get_prefixes
from .registry import UnitRegistry
from .unit_term import UnitTerm

__all__ = [
    'BaseUnit', 'System', 'DerivedUnit', 'UnitRef', 'to_derived_unit', 'PREFIXES', 'Prefix',
    'PrefixGroup', 'get_prefix', 'get_prefixes', 'UnitRegistry', 'UnitTerm',
]
