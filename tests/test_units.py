import pytest
from unitpath.catalog import build_registry, default_registry
from unitpath.core.dimensions import Dimension
from unitpath.core.errors import (DomainError, FormatError, PrefixNotAllowedError,
                                  UnknownUnitError)
from unitpath.units import (BaseUnit, DerivedUnit, Prefix, PrefixGroup, System, UnitTerm,
                            get_prefix, get_prefixes, to_derived_unit)


class TestPrefix:

    def test_lookup_by_symbol(self):
        """Prefixes are found by ASCII or display symbol"""
        assert get_prefix('k').multiplier == 1000
        assert get_prefix('Ki').multiplier == 1024
        assert get_prefix('u') is get_prefix('μ')
        assert get_prefix('µ') is get_prefix('u')
        with pytest.raises(DomainError):
            get_prefix('x')

    def test_invert_metric(self):
        """Inversion finds the reciprocal metric prefix"""
        assert get_prefix('k').invert() is get_prefix('m')
        assert get_prefix('da').invert() is get_prefix('d')
        assert get_prefix('Q').invert() is get_prefix('q')

    def test_binary_has_no_inverse(self):
        with pytest.raises(DomainError):
            get_prefix('Mi').invert()

    def test_groups(self):
        """Engineering prefixes have exponents that are multiples of 3"""
        engineering = get_prefixes(PrefixGroup.ENGINEERING_METRIC)
        assert get_prefix('k') in engineering
        assert get_prefix('c') not in engineering
        assert all(p.is_metric for p in get_prefixes(PrefixGroup.METRIC))
        assert len(get_prefixes(PrefixGroup.BINARY)) == 8

    def test_validation(self):
        with pytest.raises(FormatError):
            Prefix('bogus', 'abc', 'abc', 10.0, PrefixGroup.LARGE_METRIC)
        with pytest.raises(DomainError):
            Prefix('unity', 'x', 'x', 1.0, PrefixGroup.LARGE_METRIC)
        with pytest.raises(DomainError):
            Prefix('negative', 'x', 'x', -10.0, PrefixGroup.LARGE_METRIC)


class TestUnitRegistry:

    def setup_method(self):
        self.registry = build_registry()

    def test_unprefixed_symbol_wins(self):
        """'Pa' is the pascal, 'min' is the minute"""
        assert self.registry.lookup('Pa') == (self.registry.get('Pa'), None)
        unit, prefix = self.registry.lookup('min')
        assert unit.name == 'minute' and prefix is None

    def test_prefixed_lookup(self):
        unit, prefix = self.registry.lookup('kPa')
        assert unit.name == 'pascal'
        assert prefix is get_prefix('k')
        unit, prefix = self.registry.lookup('μs')
        assert unit.name == 'second'
        assert prefix.name == 'micro'

    def test_disallowed_prefix(self):
        """A known unit with a prefix it does not accept"""
        with pytest.raises(PrefixNotAllowedError, match="not allowed"):
            self.registry.lookup('kft')
        with pytest.raises(UnknownUnitError) as exc_info:
            self.registry.lookup('florp')
        assert not isinstance(exc_info.value, PrefixNotAllowedError)

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnitError):
            self.registry.lookup('florp')

    def test_duplicate_symbol_rejected(self):
        with pytest.raises(DomainError):
            self.registry.add(BaseUnit('other metre', 'm', 'L'))

    def test_queries(self):
        symbols = [unit.ascii_symbol for unit in self.registry.by_dimension('T')]
        assert 's' in symbols and 'min' in symbols
        nautical = [unit.ascii_symbol for unit in self.registry.by_system(System.NAUTICAL)]
        assert 'nmi' in nautical
        assert 'km' in self.registry
        assert 'kft' not in self.registry


class TestUnitTerm:

    def test_parse_km2(self):
        """Square kilometres"""
        term = UnitTerm.parse('km2')
        assert term.dimension == 'L2'
        assert term.multiplier == 1_000_000
        assert term.exponent == 2
        assert term.prefix is get_prefix('k')

    @pytest.mark.parametrize("symbol,exponent", [
        ('s-1', -1), ('m²', 2), ('m^2', 2), ('s⁻¹', -1), ('cm3', 3), ('m', 1),
    ])
    def test_exponent_forms(self, symbol, exponent):
        assert UnitTerm.parse(symbol).exponent == exponent

    def test_ascii_and_display_micro(self):
        assert UnitTerm.parse('um3') == UnitTerm.parse('μm³')

    @pytest.mark.parametrize("symbol", ['2m', 'm^', 'm-', '', 'm2x'])
    def test_malformed(self, symbol):
        with pytest.raises(FormatError):
            UnitTerm.parse(symbol)

    @pytest.mark.parametrize("symbol", ['m0', 'm10', 'kft', 'florp'])
    def test_invalid(self, symbol):
        with pytest.raises(DomainError):
            UnitTerm.parse(symbol)

    @pytest.mark.parametrize("symbol", [
        'km2', 's-1', 'um3', 'degC', 'kg', 'MiB', 'US gal', 'mmol', 'kohm', 'hPa', 'arcsec',
        'mL', 'Mpc', 'kcal', 'mK',
    ])
    def test_symbol_round_trip(self, symbol):
        """Both renderings parse back to the same term"""
        term = UnitTerm.parse(symbol)
        assert UnitTerm.parse(term.format(ascii=True)) == term
        assert UnitTerm.parse(term.format(ascii=False)) == term

    def test_display_rendering(self):
        assert UnitTerm.parse('um3').format() == 'μm³'
        assert UnitTerm.parse('degC').format() == '°C'
        assert UnitTerm.parse('kohm').format() == 'kΩ'
        assert UnitTerm.parse('s-2').format(ascii=True) == 's-2'

    def test_transformations(self):
        term = UnitTerm.parse('km2')
        assert term.inv().exponent == -2
        assert term.pow(2).exponent == 4
        assert term.with_exponent(3).format(ascii=True) == 'km3'
        assert term.remove_prefix().format(ascii=True) == 'm2'
        assert term.remove_exponent().format(ascii=True) == 'km'

    def test_prefix_must_be_allowed(self):
        foot = default_registry().get('ft')
        with pytest.raises(DomainError):
            UnitTerm(foot, get_prefix('k'))

    def test_expandable(self):
        assert UnitTerm.parse('N').is_expandable
        assert not UnitTerm.parse('m').is_expandable
        assert UnitTerm.parse('m').is_elementary


class TestDerivedUnit:

    def test_operator_form(self):
        unit = DerivedUnit.parse('kg*m/s2')
        assert [t.format(ascii=True) for t in unit.terms] == ['kg', 'm', 's-2']
        assert unit.dimension == 'MLT-2'

    def test_fraction_form(self):
        """Numerator over a parenthesized denominator"""
        unit = DerivedUnit.parse('W/(sr*m2)')
        assert unit.dimension == Dimension('ML2T-3') / Dimension('A2L2')
        assert unit == DerivedUnit.parse('W/sr/m2')

    def test_display_operators(self):
        assert DerivedUnit.parse('kg·m·s⁻²') == DerivedUnit.parse('kg*m/s2')
        assert DerivedUnit.parse('kg.m.s-2') == DerivedUnit.parse('kg*m*s-2')

    def test_merge(self):
        """Like terms merge and zero exponents vanish"""
        assert DerivedUnit.parse('m*s/s').merge() == DerivedUnit.parse('m')
        merged = DerivedUnit.parse('m*m').merge()
        assert len(merged) == 1
        assert merged.terms[0].exponent == 2
        assert DerivedUnit.parse('m/m').merge().dimension.is_dimensionless

    def test_order_insensitive_equality(self):
        assert DerivedUnit.parse('s-1*m') == DerivedUnit.parse('m/s')

    def test_pow(self):
        assert DerivedUnit.parse('m/s').pow(2) == DerivedUnit.parse('m2/s2')

    def test_formatting(self):
        unit = DerivedUnit.parse('kg*m/s2')
        assert unit.format(ascii=True) == 'kg*m/s2'
        assert unit.format() == 'kg·m·s⁻²'
        assert DerivedUnit.parse('s-1').format(ascii=True) == 's-1'

    @pytest.mark.parametrize("symbol", ['kg*m/s2', 'W/(sr*m2)', 'km/h', 'mol/L', 's-1', 'US gal/min'])
    def test_round_trip(self, symbol):
        unit = DerivedUnit.parse(symbol)
        assert DerivedUnit.parse(unit.format(ascii=True)) == unit
        assert DerivedUnit.parse(unit.format(ascii=False)) == unit

    @pytest.mark.parametrize("symbol", ['kg*/s', '(m)', 'm/(s', 'm*'])
    def test_malformed(self, symbol):
        with pytest.raises(FormatError):
            DerivedUnit.parse(symbol)

    def test_expand(self):
        """Expandable units are replaced by their expansions"""
        unit, factor = DerivedUnit.parse('N').expand()
        assert unit == DerivedUnit.parse('kg*m/s2')
        assert factor.value == 1
        unit, factor = DerivedUnit.parse('kN').expand()
        assert factor.value == 1000
        unit, factor = DerivedUnit.parse('psi').expand()
        assert not unit.is_expandable
        assert unit.dimension == DerivedUnit.parse('psi').dimension

    def test_compatibility(self):
        assert DerivedUnit.parse('J').is_compatible('N*m')
        assert not DerivedUnit.parse('J').is_compatible('N')

    def test_to_derived_unit(self):
        registry = default_registry()
        metre = registry.get('m')
        assert to_derived_unit(metre) == DerivedUnit.parse('m')
        assert to_derived_unit(UnitTerm(metre, None, 2)) == DerivedUnit.parse('m2')
        assert to_derived_unit('m/s') == DerivedUnit.parse('m/s')
        with pytest.raises(TypeError):
            to_derived_unit(3.0)
