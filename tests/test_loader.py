import warnings

import pytest
from unitpath.catalog import build_registry
from unitpath.conversions import AffineConversion, Conversion
from unitpath.converter import CatalogLoader, ConversionRecord, Converter
from unitpath.core.errors import CatalogWarning, DimensionMismatchError, UnknownUnitError


class TestCatalogLoader:

    def setup_method(self):
        self.registry = build_registry()
        self.records = [('ft', 'm', 0.3048), ('florp', 'm', 2.0), ('kft', 'm', 304.8),
                        ('lb', 'kg', 0.45359237)]

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            CatalogLoader(self.registry, on_unknown='ignore')

    def test_fail_fast(self):
        """Default policy stops at the first unknown unit"""
        loader = CatalogLoader(self.registry)
        with pytest.raises(UnknownUnitError):
            loader.load(self.records)

    def test_best_effort(self):
        """Skip policy warns and keeps the remaining records"""
        loader = CatalogLoader(self.registry, on_unknown='skip')
        with pytest.warns(CatalogWarning, match='florp'):
            grouped = loader.load(self.records)
        assert sorted(str(d) for d in grouped) == ['L', 'M']
        assert len(grouped[next(d for d in grouped if d == 'L')]) == 1

    def test_disallowed_prefix_is_skipped(self):
        """A prefix the unit does not accept counts as an unknown unit"""
        loader = CatalogLoader(self.registry, on_unknown='skip')
        with pytest.warns(CatalogWarning, match='kft'):
            grouped = loader.load([('kft', 'm', 304.8), ('yd', 'ft', 3)])
        assert sum(len(conversions) for conversions in grouped.values()) == 1
        with pytest.raises(UnknownUnitError):
            CatalogLoader(self.registry).load([('kft', 'm', 304.8)])

    def test_dimension_mismatch_is_never_skipped(self):
        loader = CatalogLoader(self.registry, on_unknown='skip')
        with pytest.raises(DimensionMismatchError):
            loader.load([('ft', 'kg', 2.0)])

    def test_records(self):
        record = ConversionRecord.coerce(('degC', 'K', 1, 273.15))
        assert record.offset == 273.15
        assert isinstance(CatalogLoader(self.registry).build(record), AffineConversion)
        with pytest.raises(ValueError):
            ConversionRecord.coerce(('ft', 'm'))

    def test_companion(self):
        """Prefixed conversions get an unprefixed companion"""
        companion = CatalogLoader.companion(Conversion('in', 'cm', 2.54))
        assert companion.dest_symbol == 'm'
        assert companion.factor.value == pytest.approx(0.0254)
        assert CatalogLoader.companion(Conversion('cm', 'm', 0.01)) is None
        assert CatalogLoader.companion(Conversion('ft', 'in', 12)) is None


class TestConverterLoading:

    def test_converter_policy(self):
        registry = build_registry()
        with pytest.raises(UnknownUnitError):
            Converter(registry, records=[('florp', 'm', 2.0)])
        with pytest.warns(CatalogWarning):
            converter = Converter(registry, records=[('florp', 'm', 2.0), ('ft', 'in', 12)],
                                  on_unknown='skip')
        assert converter.convert(2, 'ft', 'in') == 24

    def test_per_call_policy(self):
        converter = Converter(build_registry())
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            added = converter.load([('florp', 'm', 2.0), ('yd', 'ft', 3)], on_unknown='skip')
        assert added == 1
        assert any(issubclass(w.category, CatalogWarning) for w in caught)
        with pytest.raises(UnknownUnitError):
            converter.load([('florp', 'm', 2.0)])
