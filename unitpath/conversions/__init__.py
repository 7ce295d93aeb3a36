from .conversion import AffineConversion, Conversion

__all__ = ['Conversion', 'AffineConversion']
