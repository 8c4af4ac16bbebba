import warnings

import pytest

from assemblerr import (
    algebraic,
    cmp,
    compartment,
    flow,
    meta_tag,
    observation,
    parameter,
    parameter_value,
    parameter_value_table,
)
from assemblerr.basic import Declaration
from assemblerr.errors import (
    AssemblerrWarning,
    InvalidNameError,
    InvalidTypeError,
    MissingEndpointError,
    MissingIdentifierError,
)
from assemblerr.modeling.builders import is_valid_name


@pytest.mark.parametrize(
    'name, valid',
    (
        ('central', True),
        ('Central_2', True),
        ('c', True),
        ('2central', False),
        ('_central', False),
        ('cen tral', False),
        ('', False),
        (1, False),
        (None, False),
    ),
)
def test_is_valid_name(name, valid):
    assert is_valid_name(name) is valid


def test_compartment():
    c = compartment('central', volume='vc')
    record = c.compartments[0]
    assert record.name == 'central'
    assert record.volume == Declaration.parse('~vc')

    assert compartment('depot').compartments[0].volume == Declaration.parse('~1')
    assert cmp('depot') == compartment('depot')


@pytest.mark.parametrize('name', ('1central', 'my compartment', 3, None))
def test_compartment_invalid_name(name):
    with pytest.raises(InvalidNameError):
        compartment(name)


def test_flow():
    f = flow(from_='depot', to='central', definition='ka*A')
    record = f.flows[0]
    assert (record.from_, record.to) == ('depot', 'central')
    assert record.definition == Declaration.parse('~ka*A')

    assert flow(from_='central', definition='cl*C').flows[0].to is None
    assert flow(to='central', definition=10).flows[0].from_ is None


def test_flow_errors():
    with pytest.raises(MissingEndpointError):
        flow(definition='cl*C')
    with pytest.raises(MissingEndpointError):
        flow(from_=1, to=2, definition='cl*C')
    with pytest.raises(InvalidTypeError):
        flow(from_='central')


def test_parameter():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        p = parameter('cl', 'novar')
    assert p.parameters[0].type == 'novar'

    with pytest.warns(AssemblerrWarning, match='log-normal'):
        p = parameter('cl')
    assert p.parameters[0].type == 'log-normal'

    with pytest.raises(InvalidTypeError):
        parameter('cl', 1)
    with pytest.raises(InvalidNameError):
        parameter('1cl', 'novar')


def test_observation():
    o = observation('conc ~ C["central"]', 'additive')
    record = o.observations[0]
    assert record.name == 'conc'
    assert record.type == 'additive'

    o = observation('C', 'combined', name='conc')
    assert o.observations[0].name == 'conc'

    o = observation('~C', 'additive')
    assert o.observations[0].name is None

    with pytest.warns(AssemblerrWarning, match='additive'):
        o = observation('~C')
    assert o.observations[0].type == 'additive'

    with pytest.raises(InvalidTypeError):
        observation('~C', type=2)
    with pytest.raises(InvalidNameError):
        observation('~C', 'additive', name='my obs')


def test_algebraic():
    a = algebraic('k ~ cl/v')
    assert a.algebraics.names == ('k',)
    assert a.algebraics[0].definition == Declaration.parse('k ~ cl/v')

    with pytest.raises(MissingIdentifierError):
        algebraic('cl/v')


def test_parameter_value():
    pv = parameter_value('cl', 'typical', 5)
    record = pv.parameter_values[0]
    assert record.value == 5.0
    assert isinstance(record.value, float)
    assert record.lower is None and record.upper is None

    pv = parameter_value('cl', 'typical', 5, lower=0.1, upper=100)
    assert (pv.parameter_values[0].lower, pv.parameter_values[0].upper) == (0.1, 100.0)

    with pytest.raises(InvalidNameError):
        parameter_value(1, 'typical', 5)
    with pytest.raises(InvalidNameError):
        parameter_value('cl', 'iiv', 0.1, parameter2=2)
    with pytest.raises(InvalidTypeError):
        parameter_value('cl', 'typical', '5')
    with pytest.raises(InvalidTypeError):
        parameter_value('cl', 'typical', True)
    with pytest.raises(InvalidTypeError):
        parameter_value('cl', 'typical', 5, lower='0')


def test_parameter_value_table():
    pv = parameter_value_table({'cl': 5, 'vc': 50}, 'typical')
    assert [(r.parameter1, r.type, r.value) for r in pv.parameter_values] == [
        ('cl', 'typical', 5.0),
        ('vc', 'typical', 50.0),
    ]

    pv = parameter_value_table({'cl': 5, 'cl2': 0.1}, ['typical', 'iiv'])
    assert [r.type for r in pv.parameter_values] == ['typical', 'iiv']

    with pytest.raises(InvalidTypeError):
        parameter_value_table({'cl': 5, 'vc': 50}, ['typical'])
    with pytest.raises(InvalidTypeError):
        parameter_value_table([('cl', 5)], 'typical')


def test_meta_tag():
    m = meta_tag('title', 'PK model')
    assert m.meta_tags.names == ('title',)
    assert meta_tag('version', 2).meta_tags[0].value == '2'

    with pytest.raises(InvalidNameError):
        meta_tag(None, 'x')
