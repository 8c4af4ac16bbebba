import pytest

from assemblerr import compartment, flow, model, observation, parameter


@pytest.fixture
def one_compartment_fragments():
    return [
        compartment('central', volume='vc'),
        flow(from_='central', definition='cl*C'),
        parameter('cl', type='log-normal'),
        parameter('vc', type='log-normal'),
        observation('conc ~ C["central"]', type='additive'),
    ]


@pytest.fixture
def one_compartment_model(one_compartment_fragments):
    m = model()
    for fragment in one_compartment_fragments:
        m = m + fragment
    return m
