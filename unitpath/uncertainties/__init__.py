from .float_error import FloatWithError, ulp

__all__ = ['FloatWithError', 'ulp']
