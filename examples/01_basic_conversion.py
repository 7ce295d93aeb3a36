"""
Example: Converting Between Units
=================================

This example resolves conversions with the built-in catalog: simple
lengths, prefixed and compound units, and affine temperature scales.
"""

from unitpath import default_converter

converter = default_converter()

print("Basic Unit Conversion Examples")
print("=" * 50)

# Example 1: Direct and synthesized conversions
print("\nExample 1: Lengths")
print("-" * 40)

for src, dest in [('ft', 'm'), ('mi', 'km'), ('nmi', 'ft'), ('ly', 'au')]:
    conversion = converter.resolve('L', src, dest)
    print(f"  {conversion}")

# Example 2: Compound units
print("\n\nExample 2: Compound Units")
print("-" * 40)

speed = converter.convert(60, 'mph', 'km/h')
print(f"60 mph = {speed:.4f} km/h")

density = converter.convert(1, 'g/cm3', 'lb/ft3')
print(f"1 g/cm³ = {density:.4f} lb/ft³")

pressure = converter.convert(1, 'atm', 'psi')
print(f"1 atm = {pressure:.4f} psi")

# Example 3: Temperature
print("\n\nExample 3: Temperature Scales")
print("-" * 40)

for celsius in (-40, 0, 37, 100):
    fahrenheit = converter.convert(celsius, 'degC', 'degF')
    print(f"  {celsius:6.1f} °C = {fahrenheit:6.1f} °F")

print(f"\nResolved: {converter.resolve('H', 'degC', 'degF')}")

# Example 4: SI expressions
print("\n\nExample 4: SI Base Units")
print("-" * 40)

for dimension in ('MLT-2', 'ML2T-2', 'ML-1T-2', 'L3'):
    print(f"  {dimension:10s} -> {converter.si_unit(dimension)}")
