"""Typed tables of model records

Every facet is an ordered, immutable collection of records of one type. The
position of a record in its facet (starting from 1) is its index and defines
the order of everything generated from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar, Union

from assemblerr.basic import Declaration
from assemblerr.errors import DuplicateNameError
from assemblerr.internals.immutable import Immutable


@dataclass(frozen=True)
class CompartmentRecord:
    name: str
    volume: Declaration


@dataclass(frozen=True)
class FlowRecord:
    from_: Optional[str]
    to: Optional[str]
    definition: Declaration


@dataclass(frozen=True)
class ParameterRecord:
    name: str
    type: str


@dataclass(frozen=True)
class AlgebraicRecord:
    name: str
    definition: Declaration


@dataclass(frozen=True)
class ObservationRecord:
    name: Optional[str]
    definition: Declaration
    type: str


@dataclass(frozen=True)
class ParameterValueRecord:
    parameter1: str
    type: str
    value: float
    parameter2: Optional[str] = None
    lower: Optional[float] = None
    upper: Optional[float] = None


@dataclass(frozen=True)
class MetaTagRecord:
    name: str
    value: str


Record = Union[
    CompartmentRecord,
    FlowRecord,
    ParameterRecord,
    AlgebraicRecord,
    ObservationRecord,
    ParameterValueRecord,
    MetaTagRecord,
]

R = TypeVar('R')


class Facet(Immutable, Generic[R]):
    """An ordered table of records of one kind

    Parameters
    ----------
    name : str
        Name of the facet, e.g. ``'compartments'``
    records : tuple
        Records in insertion order
    name_column : bool
        Whether names of records must be unique. Records with None as name
        never collide.
    """

    def __init__(self, name: str, records: tuple[R, ...] = (), name_column: bool = True):
        self._name = name
        self._records = tuple(records)
        self._name_column = name_column

    @property
    def name(self) -> str:
        return self._name

    @property
    def name_column(self) -> bool:
        return self._name_column

    @property
    def records(self) -> tuple[R, ...]:
        return self._records

    @property
    def names(self) -> tuple[str, ...]:
        """Names of all named records in insertion order"""
        if not self._name_column:
            return ()
        return tuple(r.name for r in self._records if r.name is not None)

    def add(self, record: R) -> Facet[R]:
        """New facet with the record appended"""
        if self._name_column and record.name is not None and record.name in self.names:
            raise DuplicateNameError(
                f'Name {record.name!r} is already used in facet {self._name!r}'
            )
        return Facet(self._name, self._records + (record,), self._name_column)

    def merge(self, other: Facet[R]) -> Facet[R]:
        """New facet with the records of other appended after the records of self"""
        if other._name != self._name:
            raise ValueError(f'Cannot merge facet {other._name!r} into {self._name!r}')
        facet = self
        for record in other._records:
            facet = facet.add(record)
        return facet

    def get(self, name: str) -> Optional[R]:
        for record in self._records:
            if getattr(record, 'name', None) == name:
                return record
        return None

    def index(self, name: str) -> Optional[int]:
        """Index of the record with the name or None"""
        for i, record in self.indexed():
            if getattr(record, 'name', None) == name:
                return i
        return None

    def indexed(self) -> Iterator[tuple[int, R]]:
        """Pairs of index and record, indices starting from 1"""
        return enumerate(self._records, start=1)

    def __getitem__(self, index: int) -> R:
        return self._records[index]

    def __iter__(self) -> Iterator[R]:
        return iter(self._records)

    def __len__(self):
        return len(self._records)

    def __bool__(self):
        return bool(self._records)

    def __eq__(self, other):
        if not isinstance(other, Facet):
            return NotImplemented
        return self._name == other._name and self._records == other._records

    def __hash__(self):
        return hash((self._name, self._records))

    def __repr__(self):
        return f'Facet({self._name!r}, {len(self._records)} records)'
