from __future__ import annotations

from typing import Iterator

from assemblerr.errors import InvalidNameError, InvalidTypeError
from assemblerr.internals.immutable import Immutable

from .facets import (
    AlgebraicRecord,
    CompartmentRecord,
    Facet,
    FlowRecord,
    MetaTagRecord,
    ObservationRecord,
    ParameterRecord,
    ParameterValueRecord,
    Record,
)

# Facet name -> (record type, whether names must be unique)
FACETS = {
    'compartments': (CompartmentRecord, True),
    'flows': (FlowRecord, False),
    'parameters': (ParameterRecord, True),
    'algebraics': (AlgebraicRecord, True),
    'observations': (ObservationRecord, True),
    'parameter_values': (ParameterValueRecord, False),
    'meta_tags': (MetaTagRecord, True),
}


class Fragment(Immutable):
    """A part of a model description

    A fragment holds one facet per kind of record. Fragments are combined
    with ``+`` into larger fragments and models. Composition never changes
    its operands.
    """

    def __init__(self, facets: dict[str, Facet] | None = None):
        facets = {} if facets is None else facets
        self._facets = {
            name: facets.get(name, Facet(name, (), name_column))
            for name, (_, name_column) in FACETS.items()
        }

    @classmethod
    def from_records(cls, facet_name: str, records) -> Fragment:
        fragment = cls()
        for record in records:
            fragment = fragment.add(facet_name, record)
        return fragment

    def facet(self, name: str) -> Facet:
        try:
            return self._facets[name]
        except KeyError:
            raise InvalidNameError(f'Unknown facet {name!r}: known facets are {list(FACETS)}')

    @property
    def facets(self) -> dict[str, Facet]:
        return dict(self._facets)

    @property
    def compartments(self) -> Facet[CompartmentRecord]:
        return self._facets['compartments']

    @property
    def flows(self) -> Facet[FlowRecord]:
        return self._facets['flows']

    @property
    def parameters(self) -> Facet[ParameterRecord]:
        return self._facets['parameters']

    @property
    def algebraics(self) -> Facet[AlgebraicRecord]:
        return self._facets['algebraics']

    @property
    def observations(self) -> Facet[ObservationRecord]:
        return self._facets['observations']

    @property
    def parameter_values(self) -> Facet[ParameterValueRecord]:
        return self._facets['parameter_values']

    @property
    def meta_tags(self) -> Facet[MetaTagRecord]:
        return self._facets['meta_tags']

    def add(self, facet_name: str, record: Record):
        """New fragment of the same kind with the record appended to a facet"""
        facet = self.facet(facet_name)
        record_type = FACETS[facet_name][0]
        if not isinstance(record, record_type):
            raise InvalidTypeError(
                f'Facet {facet_name!r} holds {record_type.__name__}: got {type(record).__name__}'
            )
        facets = dict(self._facets)
        facets[facet_name] = facet.add(record)
        return type(self)(facets)

    def merge(self, other: Fragment):
        """New fragment with all records of other appended, facet by facet"""
        if not isinstance(other, Fragment):
            raise InvalidTypeError(f'Cannot merge {type(other).__name__} into a fragment')
        facets = {name: facet.merge(other._facets[name]) for name, facet in self._facets.items()}
        cls = Model if isinstance(self, Model) or isinstance(other, Model) else Fragment
        return cls(facets)

    def __add__(self, other):
        if not isinstance(other, Fragment):
            return NotImplemented
        return self.merge(other)

    def __iter__(self) -> Iterator[Facet]:
        return iter(self._facets.values())

    def __len__(self):
        return sum(len(facet) for facet in self._facets.values())

    def __eq__(self, other):
        if not isinstance(other, Fragment):
            return NotImplemented
        return type(self) is type(other) and self._facets == other._facets

    def __hash__(self):
        return hash(tuple(self._facets.values()))

    def __repr__(self):
        populated = ', '.join(
            f'{name}={len(facet)}' for name, facet in self._facets.items() if facet
        )
        return f'{type(self).__name__}({populated})'


class Model(Fragment):
    """A general, software agnostic pharmacometric model

    The accumulation point of fragments. Create an empty model with
    :func:`model` and add fragments to it.
    """

    pass


def model() -> Model:
    """Create an empty general model

    Compartments, flows, parameters, algebraics, observations, parameter values
    and meta tags can be added to it.

    Returns
    -------
    Model
        A model with all facets present and empty

    Examples
    --------
    >>> from assemblerr import model, observation, parameter
    >>> m = model() + observation('eff ~ emax*dose/(ed50 + dose)', type='additive')
    >>> m = m + parameter('emax', 'log-normal') + parameter('ed50', 'log-normal')
    >>> m.parameters.names
    ('emax', 'ed50')
    """
    return Model()


def combine(a: Fragment, b: Fragment) -> Model:
    """Combine two fragments or models into a model

    Suitable for folding over any number of fragments with
    :func:`functools.reduce`.
    """
    return Model(a.merge(b).facets)
