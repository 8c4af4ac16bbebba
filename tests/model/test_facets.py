import pytest

from assemblerr.basic import Declaration
from assemblerr.errors import DuplicateNameError
from assemblerr.model import (
    CompartmentRecord,
    Facet,
    FlowRecord,
    ObservationRecord,
    ParameterRecord,
)


def test_add():
    facet = Facet('parameters')
    assert len(facet) == 0
    assert not facet

    new = facet.add(ParameterRecord('cl', 'novar'))
    assert len(facet) == 0
    assert len(new) == 1
    assert new.names == ('cl',)

    with pytest.raises(DuplicateNameError):
        new.add(ParameterRecord('cl', 'log-normal'))


def test_unnamed_records_never_collide():
    obs = Facet('observations')
    definition = Declaration.parse('~C')
    obs = obs.add(ObservationRecord(None, definition, 'additive'))
    obs = obs.add(ObservationRecord(None, definition, 'additive'))
    assert len(obs) == 2
    assert obs.names == ()

    flows = Facet('flows', name_column=False)
    record = FlowRecord('central', None, Declaration.parse('~cl*C'))
    flows = flows.add(record).add(record)
    assert len(flows) == 2


def test_merge():
    a = Facet('parameters').add(ParameterRecord('cl', 'novar'))
    b = Facet('parameters', (ParameterRecord('vc', 'novar'), ParameterRecord('ka', 'novar')))
    assert a.merge(b).names == ('cl', 'vc', 'ka')
    assert b.merge(a).names == ('vc', 'ka', 'cl')

    with pytest.raises(DuplicateNameError):
        a.merge(a)
    with pytest.raises(ValueError):
        a.merge(Facet('compartments'))


def test_lookup():
    facet = (
        Facet('compartments')
        .add(CompartmentRecord('depot', Declaration.parse('~1')))
        .add(CompartmentRecord('central', Declaration.parse('~vc')))
    )
    assert facet.index('central') == 2
    assert facet.index('peripheral') is None
    assert facet.get('depot').name == 'depot'
    assert facet.get('peripheral') is None
    assert facet[0].name == 'depot'
    assert [i for i, _ in facet.indexed()] == [1, 2]
    assert [r.name for r in facet] == ['depot', 'central']


def test_eq_hash():
    a = Facet('parameters').add(ParameterRecord('cl', 'novar'))
    b = Facet('parameters', (ParameterRecord('cl', 'novar'),))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Facet('parameters')
