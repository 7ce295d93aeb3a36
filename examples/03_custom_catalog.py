"""
Example: Building a Custom Catalog
==================================

Registries and conversion records are plain data, so an application can
define its own units and keep its conversion graph isolated from others.
"""

import warnings

from unitpath import BaseUnit, ConversionStore, Converter, System
from unitpath.catalog import CONVERSIONS, build_registry
from unitpath.core.errors import CatalogWarning, NoConversionPathError

print("Custom Catalog Examples")
print("=" * 50)

# Example 1: Adding units
print("\nExample 1: Furlongs and Fortnights")
print("-" * 40)

registry = build_registry()
registry.add(BaseUnit('furlong', 'fur', 'L', systems=frozenset({System.COMMON})))
registry.add(BaseUnit('fortnight', 'ftn', 'T', systems=frozenset({System.COMMON})))

converter = Converter(registry, records=list(CONVERSIONS) + [
    ('fur', 'yd', 220),
    ('ftn', 'd', 14),
])

speed = converter.convert(1, 'fur/ftn', 'mm/s')
print(f"1 furlong per fortnight = {speed:.6f} mm/s")
print(f"Path: {converter.resolve('L', 'fur', 'km')}")

# Example 2: Loading records with unknown units
print("\n\nExample 2: Skipping Unknown Units")
print("-" * 40)

with warnings.catch_warnings(record=True) as caught:
    warnings.simplefilter('always')
    added = converter.load([('league', 'mi', 3), ('ftn', 'h', 336)], on_unknown='skip')

print(f"Accepted {added} record(s)")
for warning in caught:
    if issubclass(warning.category, CatalogWarning):
        print(f"  warning: {warning.message}")

# Example 3: Isolated stores
print("\n\nExample 3: Isolated Conversion Stores")
print("-" * 40)

store = ConversionStore()
sandbox = Converter(registry, store=store, records=[('fur', 'yd', 220)])
print(f"1 fur = {sandbox.convert(1, 'fur', 'yd')} yd")

try:
    sandbox.convert(1, 'fur', 'm')
except NoConversionPathError as exc:
    print(f"No route in the sandbox: {exc}")

print(f"Graphs in sandbox store: {[str(d) for d in store.dimensions()]}")
