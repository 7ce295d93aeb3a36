"""
Per-dimension storage of known conversions.

Each dimension has its own graph. All graphs of a store share one re-entrant
lock, since resolving in one dimension may seed or search another. Edges are
indexed by (source symbol, destination symbol) and tagged with their
provenance so that cached results can be told apart from registered facts.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..conversions.conversion import Conversion
from ..core.dimensions import Dimension, as_dimension
from ..core.errors import DimensionMismatchError

logger = logging.getLogger(__name__)


class Provenance(Enum):
    REGISTERED = 'registered'
    DERIVED = 'derived'
    CACHED = 'cached'


@dataclass(frozen=True)
class Edge:
    """A stored conversion and where it came from."""
    conversion: Conversion
    provenance: Provenance

    @property
    def searchable(self) -> bool:
        """Edges the path search may traverse."""
        return self.provenance is not Provenance.CACHED and not self.conversion.has_prefixes

    @property
    def key(self) -> Tuple[str, str]:
        return self.conversion.src_symbol, self.conversion.dest_symbol


class ConversionGraph:
    """Directed multigraph of conversions within one dimension."""

    def __init__(self, dimension: Dimension, lock=None):
        self.dimension = dimension
        self.lock = lock if lock is not None else threading.RLock()
        self.seeded = False
        self._edges: Dict[Tuple[str, str], Edge] = {}
        self._adjacency: Dict[str, List[Edge]] = {}

    def add(self, conversion: Conversion, provenance: Provenance = Provenance.REGISTERED,
            replace: bool = True) -> bool:
        """
        Insert ``conversion``; returns False when the key exists and ``replace`` is off.

        The edge is fully built before it is published, so readers never see a
        partially inserted conversion.
        """
        if conversion.dimension != self.dimension:
            raise DimensionMismatchError(
                f"Conversion '{conversion}' ({conversion.dimension}) does not belong "
                f"to dimension '{self.dimension}'"
            )
        edge = Edge(conversion, provenance)
        with self.lock:
            previous = self._edges.get(edge.key)
            if previous is not None and not replace:
                return False
            if previous is not None and previous.searchable:
                for symbol in set(previous.key):
                    self._adjacency[symbol] = [e for e in self._adjacency[symbol] if e is not previous]
            if edge.searchable:
                for symbol in set(edge.key):
                    self._adjacency[symbol] = self._adjacency.get(symbol, []) + [edge]
            self._edges[edge.key] = edge
        logger.debug("Added %s edge %s", provenance.value, conversion)
        return True

    def get(self, src: str, dest: str) -> Optional[Edge]:
        return self._edges.get((src, dest))

    def has(self, src: str, dest: str) -> bool:
        return (src, dest) in self._edges

    def neighbours(self, symbol: str) -> List[Edge]:
        """Searchable edges touching ``symbol`` in either direction."""
        return self._adjacency.get(symbol, [])

    def edges(self, provenance: Optional[Provenance] = None) -> List[Edge]:
        with self.lock:
            return [edge for edge in self._edges.values()
                    if provenance is None or edge.provenance is provenance]

    @property
    def nodes(self) -> List[str]:
        return list(self._adjacency)

    def clear(self):
        with self.lock:
            self._edges = {}
            self._adjacency = {}
            self.seeded = False

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"ConversionGraph('{self.dimension}', {len(self)} edges)"


class ConversionStore:
    """
    Injectable container of conversion graphs, one per dimension.

    Converters share nothing except the store they are given, so tests can
    build isolated instances. ``lock`` guards every graph of the store.
    """

    def __init__(self):
        self._graphs: Dict[Dimension, ConversionGraph] = {}
        self._lock = threading.Lock()
        self.lock = threading.RLock()

    def graph(self, dimension: Union[Dimension, str]) -> ConversionGraph:
        dimension = as_dimension(dimension)
        graph = self._graphs.get(dimension)
        if graph is None:
            with self._lock:
                graph = self._graphs.setdefault(dimension, ConversionGraph(dimension, self.lock))
        return graph

    def register(self, conversion: Conversion,
                 provenance: Provenance = Provenance.REGISTERED) -> bool:
        return self.graph(conversion.dimension).add(conversion, provenance)

    def has_direct(self, dimension: Union[Dimension, str], src: str, dest: str) -> bool:
        dimension = as_dimension(dimension)
        graph = self._graphs.get(dimension)
        return graph is not None and graph.has(src, dest)

    def reset(self, dimension: Union[Dimension, str, None] = None):
        """Clear one dimension's graph, or every graph when ``dimension`` is None."""
        with self._lock:
            if dimension is None:
                graphs = list(self._graphs.values())
            else:
                graph = self._graphs.get(as_dimension(dimension))
                graphs = [graph] if graph is not None else []
        for graph in graphs:
            graph.clear()
        logger.debug("Reset %d conversion graph(s)", len(graphs))

    def dimensions(self) -> List[Dimension]:
        return list(self._graphs)

    def __iter__(self) -> Iterator[ConversionGraph]:
        return iter(list(self._graphs.values()))
