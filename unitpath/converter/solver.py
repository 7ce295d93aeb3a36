"""
Graph solver that finds or synthesizes conversions between compatible units.

Direct conversions registered for a dimension form a graph whose nodes are
unprefixed unit symbols. A request for an unknown pair is answered by a
level-by-level breadth-first search over registered and derived edges,
keeping the most accurate conversion found at the shortest path length. The
result and its inverse are cached in the graph.
"""

import logging
import sys
import threading
import warnings
from collections import namedtuple
from typing import Dict, Iterable, List, Optional, Sequence, Union

from ..conversions.conversion import Conversion
from ..core.dimensions import SI_BASE_SYMBOLS, Dimension, as_dimension
from ..core.errors import (ConversionPathWarning, DimensionMismatchError,
                           NoConversionPathError, UnknownUnitError,
                           UnsupportedOperationError)
from ..uncertainties.float_error import FloatWithError
from ..units.derived_unit import DerivedUnit, UnitRef, to_derived_unit
from ..units.registry import UnitRegistry
from ..units.unit_term import UnitTerm, resolve_registry
from .loader import CatalogLoader, ConversionRecord
from .store import ConversionGraph, ConversionStore, Provenance

logger = logging.getLogger(__name__)

# conversion: accumulated src→node conversion
# head: the raw edge when the path is a single edge walked backwards
_Path = namedtuple('_Path', ['conversion', 'head'])


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside this package, for warnings."""
    package = __name__.split('.')[0]
    level = 1
    frame = sys._getframe(1)
    while frame is not None and frame.f_globals.get('__name__', '').split('.')[0] == package:
        frame = frame.f_back
        level += 1
    return level


class Converter:
    """
    Resolve conversions between any two units of the same dimension.

    Parameters
    ----------
    registry : UnitRegistry, optional
        Units to resolve symbols against; defaults to the built-in catalog.
    store : ConversionStore, optional
        Graph storage; a fresh store is created when omitted.
    records : iterable, optional
        Conversion records ``(src, dest, factor[, offset])`` to load.
    on_unknown : str
        Policy for records naming unknown units: ``'raise'`` or ``'skip'``.
    path_warning_length : int
        Emit a ConversionPathWarning when a search needs more hops than this.
    """

    def __init__(self, registry: Optional[UnitRegistry] = None,
                 store: Optional[ConversionStore] = None,
                 records: Optional[Iterable[Union[ConversionRecord, Sequence]]] = None,
                 on_unknown: str = 'raise',
                 path_warning_length: int = 4):
        self.registry = resolve_registry(registry)
        self.store = store if store is not None else ConversionStore()
        self.loader = CatalogLoader(self.registry, on_unknown)
        self.path_warning_length = path_warning_length
        self._catalog: Dict[Dimension, List[Conversion]] = {}
        self._catalog_lock = threading.Lock()
        if records is not None:
            self.load(records)

    def load(self, records: Iterable[Union[ConversionRecord, Sequence]],
             on_unknown: Optional[str] = None) -> int:
        """
        Add catalog records; graphs pick them up when first used.

        Returns
        -------
        int
            Number of conversions accepted.
        """
        loader = self.loader if on_unknown is None else CatalogLoader(self.registry, on_unknown)
        grouped = loader.load(records)
        with self._catalog_lock:
            for dimension, conversions in grouped.items():
                self._catalog.setdefault(dimension, []).extend(conversions)
        for dimension, conversions in grouped.items():
            graph = self.store.graph(dimension)
            with graph.lock:
                if graph.seeded:
                    self._add_direct(graph, conversions)
        return sum(len(conversions) for conversions in grouped.values())

    def register(self, conversion: Conversion) -> Conversion:
        """Add a direct conversion (and its unprefixed companion) to its graph."""
        graph = self._graph(conversion.dimension)
        with graph.lock:
            self._add_direct(graph, [conversion])
        return conversion

    def reset(self, dimension: Union[Dimension, str, None] = None):
        """
        Forget registered and cached conversions of one or all dimensions.

        Loaded catalog records are seeded again on next use. Resetting an
        elementary dimension such as ``L`` also resets its powered dimensions
        (``L2``, ``L3``, ...), whose graphs hold copies of its edges.
        """
        if dimension is None:
            self.store.reset()
            return
        dimension = as_dimension(dimension)
        self.store.reset(dimension)
        if dimension.is_elementary:
            letter = dimension.letters[0]
            for other in self.store.dimensions():
                single = other.single_letter
                if other != dimension and single is not None and single[0] == letter:
                    self.store.reset(other)

    def has_direct(self, dimension: Union[Dimension, str], src: UnitRef, dest: UnitRef) -> bool:
        graph = self._graph(as_dimension(dimension))
        return graph.has(self._symbol(src), self._symbol(dest))

    def resolve(self, dimension: Union[Dimension, str], src: UnitRef, dest: UnitRef) -> Conversion:
        """
        Find or synthesize the conversion from ``src`` to ``dest``.

        Parameters
        ----------
        dimension : Dimension or str
            Dimension both units must have.
        src, dest : str, BaseUnit, UnitTerm or DerivedUnit
            Units to convert between.

        Returns
        -------
        Conversion
            ``dest = src * factor (+ offset)``.
        """
        dimension = as_dimension(dimension)
        src_unit = to_derived_unit(src, self.registry).merge()
        dest_unit = to_derived_unit(dest, self.registry).merge()
        for unit in (src_unit, dest_unit):
            if unit.dimension != dimension:
                raise DimensionMismatchError(
                    f"Unit '{unit}' has dimension '{unit.dimension}', expected '{dimension}'"
                )

        graph = self._graph(dimension)
        with graph.lock:
            edge = graph.get(src_unit.ascii_symbol, dest_unit.ascii_symbol)
            if edge is not None:
                return edge.conversion
            if src_unit == dest_unit:
                return Conversion(src_unit, dest_unit, FloatWithError.exact(1))

            conversion = self._synthesize(graph, src_unit, dest_unit)
            graph.add(conversion, Provenance.CACHED, replace=False)
            graph.add(conversion.inv(), Provenance.CACHED, replace=False)
        logger.debug("Synthesized %s", conversion)
        return conversion

    def convert(self, value: float, src: UnitRef, dest: UnitRef) -> float:
        """Convert a plain number, inferring the dimension from ``src``."""
        src_unit = to_derived_unit(src, self.registry)
        return self.resolve(src_unit.dimension, src_unit, dest).apply(value)

    def conversion_factor(self, src: UnitRef, dest: UnitRef) -> FloatWithError:
        src_unit = to_derived_unit(src, self.registry)
        return self.resolve(src_unit.dimension, src_unit, dest).factor

    def si_unit(self, dimension: Union[Dimension, str]) -> DerivedUnit:
        """The SI base unit expression for ``dimension``, e.g. ``kg*m/s2`` for MLT-2."""
        terms = []
        for letter, exponent in as_dimension(dimension).vector.items():
            if exponent == 0:
                continue
            unit, prefix = self.registry.lookup(SI_BASE_SYMBOLS[letter])
            terms.append(UnitTerm(unit, prefix, exponent))
        return DerivedUnit(terms)

    def _symbol(self, ref: UnitRef) -> str:
        return to_derived_unit(ref, self.registry).ascii_symbol

    def _graph(self, dimension: Dimension) -> ConversionGraph:
        graph = self.store.graph(dimension)
        if not graph.seeded:
            with graph.lock:
                if not graph.seeded:
                    self._seed(graph)
                    graph.seeded = True
        return graph

    def _seed(self, graph: ConversionGraph):
        dimension = graph.dimension
        with self._catalog_lock:
            conversions = list(self._catalog.get(dimension, ()))
        self._add_direct(graph, conversions)

        for unit in self.registry.by_dimension(dimension):
            if unit.is_expandable:
                expansion = DerivedUnit.parse(unit.expansion_symbol, self.registry)
                conversion = Conversion(UnitTerm(unit), expansion, unit.expansion_factor)
                self._add_direct(graph, [conversion], replace=False)

        # Powered dimensions such as L3 reuse the linear edges of L
        single = dimension.single_letter
        if single is not None and single[1] != 1 and dimension == Dimension.from_vector(dict([single])):
            letter, exponent = single
            base_graph = self._graph(Dimension(letter))
            for edge in base_graph.edges():
                if edge.searchable and not edge.conversion.is_affine:
                    graph.add(edge.conversion.pow(exponent), Provenance.DERIVED, replace=False)

        logger.debug("Seeded graph %s with %d edge(s)", dimension, len(graph))

    @staticmethod
    def _add_direct(graph: ConversionGraph, conversions: Iterable[Conversion], replace: bool = True):
        for conversion in conversions:
            graph.add(conversion, Provenance.REGISTERED, replace=replace)
            companion = CatalogLoader.companion(conversion)
            if companion is not None:
                graph.add(companion, Provenance.DERIVED, replace=False)

    def _synthesize(self, graph: ConversionGraph, src: DerivedUnit, dest: DerivedUnit) -> Conversion:
        src_term, dest_term = src.single_term, dest.single_term
        if src_term is not None and dest_term is not None:
            conversion = self._resolve_terms(graph, src_term, dest_term)
            if conversion is not None:
                return conversion
        try:
            return self._to_si(src).combine_convergent(self._to_si(dest))
        except (NoConversionPathError, UnknownUnitError) as exc:
            raise NoConversionPathError(graph.dimension, src.ascii_symbol,
                                        dest.ascii_symbol) from exc

    def _resolve_terms(self, graph: ConversionGraph, src: UnitTerm,
                       dest: UnitTerm) -> Optional[Conversion]:
        src_base, dest_base = src.remove_prefix(), dest.remove_prefix()
        if src_base == dest_base:
            conversion = Conversion(src_base, dest_base, FloatWithError.exact(1))
        else:
            conversion = self._find(graph, src_base, dest_base)
            if conversion is None:
                return None
        if src.prefix is not None or dest.prefix is not None:
            conversion = conversion.alter_prefixes(src.prefix, dest.prefix)
        return conversion

    def _find(self, graph: ConversionGraph, src: UnitTerm, dest: UnitTerm) -> Optional[Conversion]:
        edge = graph.get(src.ascii_symbol, dest.ascii_symbol)
        if edge is not None:
            return edge.conversion
        conversion = self._search(graph, src.ascii_symbol, dest.ascii_symbol)
        if conversion is not None:
            return conversion

        # ft3 -> yd3 when the L3 graph lacks a route: solve ft -> yd and cube it
        if src.exponent == dest.exponent != 1:
            base_graph = self._graph(src.unit.dimension)
            with base_graph.lock:
                base = self._find(base_graph, src.remove_exponent(), dest.remove_exponent())
            if base is not None and not base.is_affine:
                return base.pow(src.exponent)
        return None

    def _search(self, graph: ConversionGraph, src: str, dest: str) -> Optional[Conversion]:
        frontier: Dict[str, _Path] = {src: _Path(None, None)}
        visited = {src}
        depth = 0
        while frontier:
            depth += 1
            reached: Dict[str, _Path] = {}
            for node, path in frontier.items():
                for edge in graph.neighbours(node):
                    conversion = edge.conversion
                    forward = conversion.src_symbol == node
                    other = conversion.dest_symbol if forward else conversion.src_symbol
                    if other in visited:
                        continue
                    candidate = self._extend(path, conversion, forward)
                    best = reached.get(other)
                    if best is None or (candidate.conversion.factor.relative_error <
                                        best.conversion.factor.relative_error):
                        reached[other] = candidate

            logger.debug("Search %s -> %s in %s: depth %d reached %d node(s)",
                         src, dest, graph.dimension, depth, len(reached))
            if dest in reached:
                if depth > self.path_warning_length:
                    warnings.warn(
                        f"Conversion '{src}' -> '{dest}' needed {depth} steps",
                        ConversionPathWarning, stacklevel=_caller_stacklevel()
                    )
                return reached[dest].conversion
            visited.update(reached)
            frontier = reached
        return None

    @staticmethod
    def _extend(path: _Path, conversion: Conversion, forward: bool) -> _Path:
        if path.conversion is None:
            if forward:
                return _Path(conversion, None)
            return _Path(conversion.inv(), conversion)

        # Only sequential chaining is defined for affine conversions
        affine = path.conversion.is_affine or conversion.is_affine
        if path.head is not None and not affine:
            if forward:
                combined = path.head.combine_divergent(conversion)
            else:
                combined = path.head.combine_opposite(conversion)
        elif forward:
            combined = path.conversion.combine_sequential(conversion)
        elif affine:
            combined = path.conversion.combine_sequential(conversion.inv())
        else:
            combined = path.conversion.combine_convergent(conversion)
        return _Path(combined, None)

    def _to_si(self, unit: DerivedUnit) -> Conversion:
        factor = FloatWithError.exact(1)
        for term in unit.merge().terms:
            factor = factor * self._term_to_si(term)
        return Conversion(unit, self.si_unit(unit.dimension), factor)

    def _term_to_si(self, term: UnitTerm) -> FloatWithError:
        base = term.remove_exponent()
        if base.is_expandable:
            expansion, factor = DerivedUnit([base]).expand(self.registry)
            return (factor * self._to_si(expansion).factor).pow(term.exponent)

        dimension = base.unit.dimension
        target = self.si_unit(dimension).single_term
        # Compound dimensions reach SI through a unit with an expansion, e.g. bar -> Pa
        if target is not None:
            candidates = [target]
        else:
            candidates = [UnitTerm(unit) for unit in self.registry.by_dimension(dimension)
                          if unit.is_expandable]
        graph = self._graph(dimension)
        for candidate in candidates:
            with graph.lock:
                conversion = self._resolve_terms(graph, base, candidate)
            if conversion is None:
                continue
            if conversion.is_affine:
                raise UnsupportedOperationError(
                    f"Affine unit '{base}' cannot take part in a compound conversion"
                )
            factor = conversion.factor
            if target is None:
                factor = factor * self._term_to_si(candidate)
            return factor.pow(term.exponent)
        raise NoConversionPathError(dimension, base.ascii_symbol,
                                    self.si_unit(dimension).ascii_symbol)
