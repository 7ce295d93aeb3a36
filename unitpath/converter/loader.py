"""
Turning catalog records into conversions.

Records naming units missing from the registry are handled by an explicit
policy: ``'raise'`` stops at the first one, ``'skip'`` warns and moves on.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Union

from ..conversions.conversion import Conversion
from ..core.dimensions import Dimension
from ..core.errors import CatalogWarning, UnknownUnitError
from ..units.registry import UnitRegistry

logger = logging.getLogger(__name__)

ON_UNKNOWN_POLICIES = ('raise', 'skip')


@dataclass(frozen=True)
class ConversionRecord:
    """
    A direct conversion fact ``dest = src * factor + offset``.

    Parameters
    ----------
    src, dest : str
        Unit symbols, possibly prefixed or compound.
    factor : float
        Multiplicative factor.
    offset : float, optional
        Additive offset for affine scales.
    """
    src: str
    dest: str
    factor: float
    offset: Optional[float] = None

    @classmethod
    def coerce(cls, record: Union['ConversionRecord', Sequence]) -> 'ConversionRecord':
        if isinstance(record, ConversionRecord):
            return record
        if len(record) not in (3, 4):
            raise ValueError(f"Conversion record needs 3 or 4 fields, got {record!r}")
        return cls(*record)


class CatalogLoader:
    """
    Build conversions from records against a unit registry.

    Parameters
    ----------
    registry : UnitRegistry
        Units the records are resolved against.
    on_unknown : str
        ``'raise'`` (default) re-raises UnknownUnitError for a record naming an
        unknown unit; ``'skip'`` drops the record with a CatalogWarning.
    """

    def __init__(self, registry: UnitRegistry, on_unknown: str = 'raise'):
        if on_unknown not in ON_UNKNOWN_POLICIES:
            raise ValueError(f"Unknown on_unknown policy: {on_unknown}")
        self.registry = registry
        self.on_unknown = on_unknown

    def build(self, record: Union[ConversionRecord, Sequence]) -> Conversion:
        record = ConversionRecord.coerce(record)
        return Conversion.create(record.src, record.dest, record.factor, record.offset,
                                 registry=self.registry)

    def load(self, records: Iterable[Union[ConversionRecord, Sequence]]) -> Dict[Dimension, List[Conversion]]:
        """
        Build every record and group the conversions by dimension.

        Returns
        -------
        dict
            Dimension to the conversions of that dimension, in record order.
        """
        grouped: Dict[Dimension, List[Conversion]] = {}
        skipped = 0
        for record in records:
            record = ConversionRecord.coerce(record)
            try:
                conversion = self.build(record)
            except UnknownUnitError as exc:
                if self.on_unknown == 'raise':
                    raise
                warnings.warn(f"Skipping conversion '{record.src}' -> '{record.dest}': {exc}",
                              CatalogWarning, stacklevel=2)
                skipped += 1
                continue
            grouped.setdefault(conversion.dimension, []).append(conversion)

        logger.debug("Loaded %d conversion(s) in %d dimension(s), skipped %d",
                     sum(len(c) for c in grouped.values()), len(grouped), skipped)
        return grouped

    @staticmethod
    def companion(conversion: Conversion) -> Optional[Conversion]:
        """
        The unprefixed equivalent of a prefixed conversion.

        ``in→cm`` yields ``in→m``; ``cm→m`` yields nothing since both sides
        reduce to the same unit.
        """
        if not conversion.has_prefixes:
            return None
        unprefixed = conversion.remove_prefixes()
        if unprefixed.src == unprefixed.dest:
            return None
        return unprefixed
