import logging
import os
import threading
import time
import warnings
from concurrent.futures import ThreadPoolExecutor

import pytest
from unitpath.catalog import build_registry, default_converter
from unitpath.conversions import Conversion
from unitpath.converter import ConversionStore, Converter, Provenance
from unitpath.core.errors import (ConversionPathWarning, DimensionMismatchError, DomainError,
                                  NoConversionPathError, UnsupportedOperationError)
from unitpath.uncertainties import FloatWithError
from unitpath.units import BaseUnit


class TestConverterScenarios:

    def setup_method(self):
        """Isolated converter with a three-record catalog"""
        self.registry = build_registry()
        self.store = ConversionStore()
        self.converter = Converter(self.registry, self.store,
                                   records=[('ft', 'in', 12), ('in', 'cm', 2.54), ('cm', 'm', 0.01)])

    def test_foot_to_metre(self):
        """Chained through inch and the unprefixed inch→metre companion"""
        conversion = self.converter.resolve('L', 'ft', 'm')
        assert conversion.factor.value == pytest.approx(0.3048)
        assert conversion.src_symbol == 'ft'
        assert conversion.dest_symbol == 'm'

    def test_prefixed_destination(self):
        conversion = self.converter.resolve('L', 'ft', 'km')
        assert conversion.factor.value == pytest.approx(0.0003048)
        assert self.converter.convert(1, 'mm', 'in') == pytest.approx(1 / 25.4)

    def test_unconnected_units(self):
        """Two known lengths that no conversion relates"""
        self.registry.add(BaseUnit('ex unit', 'xu', 'L'))
        self.registry.add(BaseUnit('why unit', 'yu', 'L'))
        with pytest.raises(NoConversionPathError) as exc_info:
            self.converter.resolve('L', 'xu', 'yu')
        assert exc_info.value.dimension == 'L'
        assert exc_info.value.src == 'xu'
        assert exc_info.value.dest == 'yu'

    def test_dimension_closure(self):
        """A length never converts to a mass"""
        with pytest.raises(DimensionMismatchError):
            self.converter.resolve('L', 'm', 'kg')
        with pytest.raises(DomainError):
            self.converter.convert(1, 'm', 's')

    def test_identity(self):
        conversion = self.converter.resolve('L', 'ft', 'ft')
        assert conversion.factor.value == 1
        assert conversion.factor.absolute_error == 0


class TestConverterGraph:

    def setup_method(self):
        self.registry = build_registry()
        self.store = ConversionStore()
        self.converter = Converter(self.registry, self.store,
                                   records=[('ft', 'in', 12), ('in', 'mm', 25.4), ('yd', 'ft', 3)])

    def test_caching_is_idempotent(self, monkeypatch):
        """A second request is a direct hit with no search"""
        first = self.converter.resolve('L', 'yd', 'm')

        def fail(*args, **kwargs):
            raise AssertionError("search should not run for a cached pair")

        monkeypatch.setattr(self.converter, '_search', fail)
        second = self.converter.resolve('L', 'yd', 'm')
        assert second is first
        assert second.factor.value == first.factor.value

    def test_cached_edges_are_tagged(self):
        conversion = self.converter.resolve('L', 'yd', 'm')
        cached = self.store.graph('L').edges(Provenance.CACHED)
        keys = {edge.key for edge in cached}
        assert ('yd', 'm') in keys
        assert ('m', 'yd') in keys
        assert conversion in [edge.conversion for edge in cached]

    def test_inverse_round_trip(self):
        """resolve(A, B) * resolve(B, A) ≈ 1"""
        for src, dest in [('yd', 'mm'), ('ft', 'in'), ('in', 'yd')]:
            forward = self.converter.resolve('L', src, dest).factor
            backward = self.converter.resolve('L', dest, src).factor
            assert forward.value * backward.value == pytest.approx(1, rel=1e-12)

    def test_has_direct_and_register(self):
        assert self.converter.has_direct('L', 'ft', 'in')
        assert not self.converter.has_direct('L', 'yd', 'in')
        self.converter.register(Conversion('yd', 'in', 36))
        assert self.converter.has_direct('L', 'yd', 'in')

    def test_companion_edges_are_derived(self):
        self.converter.resolve('L', 'ft', 'in')
        keys = {edge.key for edge in self.store.graph('L').edges(Provenance.DERIVED)}
        assert ('in', 'm') in keys

    def test_reset_clears_cache_and_reseeds(self):
        self.converter.resolve('L', 'yd', 'm')
        self.converter.register(Conversion('yd', 'in', 36))
        self.converter.reset('L')
        assert not self.converter.has_direct('L', 'yd', 'm')
        assert not self.converter.has_direct('L', 'yd', 'in')
        assert self.converter.has_direct('L', 'ft', 'in')

    def test_reset_clears_powered_copies(self):
        """Area and volume graphs drop the copies of reset length edges"""
        self.converter.register(Conversion('mi', 'yd', 1760))
        assert self.converter.has_direct('L2', 'mi2', 'yd2')
        assert self.converter.has_direct('L3', 'mi3', 'yd3')
        self.converter.reset('L')
        assert not self.converter.has_direct('L2', 'mi2', 'yd2')
        assert not self.converter.has_direct('L3', 'mi3', 'yd3')
        assert self.converter.has_direct('L2', 'ft2', 'in2')

    def test_load_after_seeding(self):
        self.converter.resolve('L', 'ft', 'in')
        added = self.converter.load([('mi', 'yd', 1760)])
        assert added == 1
        assert self.converter.convert(1, 'mi', 'km') == pytest.approx(1.609344)

    def test_path_independence(self):
        """Two routes from ft to m agree whichever is registered first"""
        route_a = [('ft', 'in', 12), ('in', 'm', 0.0254)]
        route_b = [('ft', 'yd', FloatWithError.exact(1) / 3), ('yd', 'm', 0.9144)]
        first = Converter(self.registry, records=route_a + route_b).resolve('L', 'ft', 'm')
        second = Converter(self.registry, records=route_b + route_a).resolve('L', 'ft', 'm')
        assert first.factor.value == pytest.approx(second.factor.value, rel=1e-12)

    def test_tie_break_prefers_smaller_error(self):
        """Among equally short paths the more accurate one wins"""
        for name, symbol in [('pee', 'pu'), ('queue', 'qu'), ('are', 'ru'), ('ess', 'su')]:
            self.registry.add(BaseUnit(name, symbol, 'L'))
        converter = Converter(self.registry)
        converter.register(Conversion('pu', 'ru', FloatWithError(2.0, 0.01), self.registry))
        converter.register(Conversion('ru', 'su', FloatWithError(3.0, 0.01), self.registry))
        converter.register(Conversion('pu', 'qu', 2, self.registry))
        converter.register(Conversion('qu', 'su', 3, self.registry))
        conversion = converter.resolve('L', 'pu', 'su')
        assert conversion.factor.value == 6
        assert conversion.factor.absolute_error == 0

    def test_long_path_warning(self):
        for name, symbol in [('aa', 'aa'), ('bb', 'bb'), ('cc', 'cc'), ('dd', 'dd')]:
            self.registry.add(BaseUnit(name, symbol, 'L'))
        converter = Converter(self.registry, path_warning_length=2,
                              records=[('aa', 'bb', 2), ('bb', 'cc', 2), ('cc', 'dd', 2)])
        with pytest.warns(ConversionPathWarning) as record:
            conversion = converter.resolve('L', 'aa', 'dd')
        assert conversion.factor.value == 8
        # attributed to the calling code, not to the solver internals
        assert os.path.basename(record[0].filename) == os.path.basename(__file__)

    def test_injected_store_isolation(self):
        other = Converter(self.registry, ConversionStore())
        self.converter.register(Conversion('yd', 'in', 36))
        assert not other.has_direct('L', 'yd', 'in')
        shared = Converter(self.registry, self.store)
        assert shared.has_direct('L', 'yd', 'in')

    def test_concurrent_resolution(self):
        """Threads resolving the same pairs see consistent results"""
        converter = Converter(self.registry, records=[('ft', 'in', 12), ('in', 'mm', 25.4),
                                                      ('yd', 'ft', 3), ('mi', 'yd', 1760)])
        barrier = threading.Barrier(8)

        def work(_):
            barrier.wait()
            return converter.resolve('L', 'mi', 'm').factor.value

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, range(8)))
        assert all(value == pytest.approx(1609.344) for value in results)
        assert len(set(results)) == 1

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='unitpath'):
            self.converter.resolve('L', 'yd', 'mm')
        assert any('Synthesized' in record.getMessage() for record in caplog.records)


class TestDefaultCatalog:

    def setup_method(self):
        self.converter = default_converter()

    def test_temperature(self):
        """Affine scales compose sequentially through K and °R"""
        assert self.converter.convert(100, 'degC', 'degF') == pytest.approx(212)
        assert self.converter.convert(-40, 'degF', 'degC') == pytest.approx(-40)
        assert self.converter.convert(0, 'K', 'degC') == pytest.approx(-273.15)
        assert self.converter.convert(0, '°C', 'mK') == pytest.approx(273150)
        conversion = self.converter.resolve('H', 'degC', 'degF')
        assert conversion.is_affine
        assert conversion.factor.value == pytest.approx(1.8)
        assert conversion.offset.value == pytest.approx(32)

    def test_affine_inside_compound_unsupported(self):
        with pytest.raises(UnsupportedOperationError):
            self.converter.convert(1, 'degC/s', 'K/s')

    def test_compound_units(self):
        assert self.converter.convert(1, 'km/h', 'm/s') == pytest.approx(1 / 3.6)
        assert self.converter.convert(1, 'kn', 'km/h') == pytest.approx(1.852)
        assert self.converter.convert(60, 'mph', 'km/h') == pytest.approx(96.56064)
        assert self.converter.convert(1, 'g/cm3', 'kg/m3') == pytest.approx(1000)

    def test_expandable_units(self):
        assert self.converter.convert(1, 'lbf', 'N') == pytest.approx(4.4482216152605)
        assert self.converter.convert(1, 'psi', 'kPa') == pytest.approx(6.894757293168361)
        assert self.converter.convert(1, 'kcal', 'kJ') == pytest.approx(4.184)
        assert self.converter.convert(1, 'N*m', 'J') == pytest.approx(1)

    def test_compound_dimension_without_expansion(self):
        """Units like bar and atm reach SI through pascal"""
        assert self.converter.convert(1, 'bar', 'kg*m-1*s-2') == pytest.approx(100000)
        assert self.converter.convert(1, 'atm', 'psi') == pytest.approx(14.695948775513449)
        assert self.converter.convert(1, 'bar/s', 'Pa/s') == pytest.approx(100000)

    def test_powered_dimensions(self):
        """Area, volume and frequency reuse length and time conversions"""
        assert self.converter.convert(1, 'ft2', 'm2') == pytest.approx(0.09290304)
        assert self.converter.convert(1, 'L', 'in3') == pytest.approx(61.02374409473229)
        assert self.converter.convert(1, 'ha', 'ac') == pytest.approx(2.471053814671653)
        assert self.converter.convert(1, 'Hz', 'min-1') == pytest.approx(60)
        assert self.converter.convert(1, 'US gal', 'L') == pytest.approx(3.785411784)

    def test_prefixed_terms(self):
        assert self.converter.convert(1, 'km', 'mi') == pytest.approx(0.621371192237334)
        assert self.converter.convert(1, 'kg', 'lb') == pytest.approx(2.2046226218487757)
        assert self.converter.convert(1, 'KiB', 'b') == pytest.approx(8192)
        assert self.converter.convert(1, 'km2', 'm2') == pytest.approx(1e6)

    def test_si_unit(self):
        assert self.converter.si_unit('MLT-2').format(ascii=True) == 'kg*m/s2'
        assert self.converter.si_unit('L3').format(ascii=True) == 'm3'

    def test_conversion_factor(self):
        factor = self.converter.conversion_factor('yd', 'ft')
        assert factor.value == 3
        assert factor.absolute_error == 0

    def test_everyday_requests_need_short_paths(self):
        """Customary units have metric bridges within the warning length"""
        with warnings.catch_warnings():
            warnings.simplefilter('error', ConversionPathWarning)
            assert self.converter.convert(1, 'US fl oz', 'L') == pytest.approx(0.0295735295625)
            assert self.converter.convert(1, 'imp fl oz', 'm3') == pytest.approx(2.84130625e-5)
            assert self.converter.convert(1, 'mo', 's') == pytest.approx(2629746)

    def test_cross_dimension_resolution_under_contention(self, monkeypatch):
        """Seeding volume while a length request reaches into volume completes"""
        original_seed = self.converter._seed

        def slow_seed(graph):
            if graph.dimension == 'L3':
                time.sleep(0.3)
            original_seed(graph)

        monkeypatch.setattr(self.converter, '_seed', slow_seed)
        results = {}

        def volume():
            results['volume'] = self.converter.convert(1, 'L', 'in3')

        def rainfall():
            results['rainfall'] = self.converter.convert(1, 'L/m2', 'mm')

        threads = [threading.Thread(target=volume, daemon=True),
                   threading.Thread(target=rainfall, daemon=True)]
        threads[0].start()
        time.sleep(0.1)
        threads[1].start()
        for thread in threads:
            thread.join(5)
        assert not any(thread.is_alive() for thread in threads)
        assert results['volume'] == pytest.approx(61.02374409473229)
        assert results['rainfall'] == pytest.approx(1)
