"""
Example: Tracking Floating-Point Error
======================================

Every conversion factor carries a bound on its accumulated rounding error.
This example shows how the bound grows through arithmetic and through
multi-step conversion paths.
"""

from unitpath import FloatWithError, default_converter

print("Error Tracking Examples")
print("=" * 50)

# Example 1: Arithmetic
print("\nExample 1: Arithmetic on FloatWithError")
print("-" * 40)

exact = FloatWithError(12)
inexact = FloatWithError(0.1)
print(f"12            = {exact}")
print(f"0.1           = {inexact}")
print(f"0.1 + 0.1     = {inexact + inexact}")
print(f"0.1 * 12      = {inexact * exact}")
print(f"6 / 3         = {FloatWithError(6) / FloatWithError(3)}")
print(f"1 / 3         = {FloatWithError(1) / FloatWithError(3)}")

# Example 2: Conversion factors
print("\n\nExample 2: Error in Conversion Factors")
print("-" * 40)

converter = default_converter()
for src, dest in [('ft', 'in'), ('ft', 'm'), ('mi', 'nmi'), ('US gal', 'imp fl oz')]:
    factor = converter.conversion_factor(src, dest)
    print(f"  {src:>6s} -> {dest:<10s} {factor}")

# Example 3: Relative error as precision
print("\n\nExample 3: Significant Digits")
print("-" * 40)

factor = converter.conversion_factor('ly', 'in')
print(f"ly -> in factor: {factor.value:.15e}")
print(f"Relative error:  {factor.relative_error:.2e}")
print(f"Trustworthy to about {factor.significant_digits} significant digits")
