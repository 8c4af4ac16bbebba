from functools import reduce

import pytest

from assemblerr import (
    Fragment,
    Model,
    algebraic,
    combine,
    compartment,
    flow,
    model,
    parameter,
)
from assemblerr.errors import DuplicateNameError, InvalidNameError, InvalidTypeError
from assemblerr.model import FACETS, ParameterRecord


def test_empty_model():
    m = model()
    assert isinstance(m, Model)
    assert len(m) == 0
    assert tuple(m.facets) == tuple(FACETS)
    assert all(len(facet) == 0 for facet in m)
    assert model() == model()


def test_fragment_has_all_facets():
    f = parameter('cl', 'novar')
    assert isinstance(f, Fragment)
    assert not isinstance(f, Model)
    assert set(f.facets) == set(FACETS)
    assert len(f.parameters) == 1
    assert len(f.compartments) == 0


def test_unknown_facet():
    with pytest.raises(InvalidNameError):
        model().facet('covariates')
    with pytest.raises(InvalidNameError):
        model().add('covariates', ParameterRecord('cl', 'novar'))


def test_add_record_of_wrong_type():
    with pytest.raises(InvalidTypeError):
        model().add('compartments', ParameterRecord('cl', 'novar'))


def test_add_record():
    m = model().add('parameters', ParameterRecord('cl', 'novar'))
    assert isinstance(m, Model)
    assert m.parameters.names == ('cl',)


def test_duplicate_names():
    with pytest.raises(DuplicateNameError):
        parameter('cl', 'novar') + parameter('cl', 'novar')
    with pytest.raises(DuplicateNameError):
        model() + compartment('central') + compartment('central')


def test_same_name_in_different_facets():
    m = model() + parameter('k', 'novar') + algebraic('k ~ cl/v')
    assert m.parameters.names == ('k',)
    assert m.algebraics.names == ('k',)


def test_operands_are_unchanged():
    m = model()
    p = parameter('cl', 'novar')
    new = m + p
    assert len(m) == 0
    assert len(p) == 1
    assert len(new) == 1


def test_result_type():
    p = parameter('cl', 'novar')
    c = compartment('central')
    assert type(p + c) is Fragment
    assert type(model() + p) is Model
    assert type(p + model()) is Model
    assert type(combine(p, c)) is Model


def test_add_non_fragment():
    with pytest.raises(TypeError):
        model() + 1
    with pytest.raises(InvalidTypeError):
        model().merge('cl')


def test_associativity():
    a = compartment('central', volume='vc')
    b = parameter('cl', 'novar') + parameter('vc', 'novar')
    c = flow(from_='central', definition='cl*C')
    assert (a + b) + c == a + (b + c)


def test_within_facet_order():
    m = model() + parameter('vc', 'novar') + parameter('cl', 'novar')
    assert m.parameters.names == ('vc', 'cl')


def test_combine_fold(one_compartment_fragments):
    m = reduce(combine, one_compartment_fragments, model())
    assert isinstance(m, Model)
    assert m.compartments.names == ('central',)
    assert m.parameters.names == ('cl', 'vc')
    assert len(m.flows) == 1
    assert len(m.observations) == 1
    assert len(m) == 5


def test_lookup_algebraic():
    m = model() + algebraic('k ~ cl/v')
    assert m.algebraics.get('k').definition.identifier() == 'k'


def test_eq_hash(one_compartment_model, one_compartment_fragments):
    other = reduce(combine, one_compartment_fragments, model())
    assert one_compartment_model == other
    assert hash(one_compartment_model) == hash(other)
    assert parameter('cl', 'novar') != model() + parameter('cl', 'novar')


def test_repr():
    assert repr(model()) == 'Model()'
    assert repr(model() + parameter('cl', 'novar')) == 'Model(parameters=1)'
