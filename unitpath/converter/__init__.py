from .loader import CatalogLoader, ConversionRecord
from .solver import Converter
from .store import ConversionGraph, ConversionStore, Edge, Provenance

__all__ = [
    'CatalogLoader', 'ConversionRecord', 'Converter', 'ConversionGraph', 'ConversionStore',
    'Edge', 'Provenance',
]
