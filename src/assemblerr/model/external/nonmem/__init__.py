from .config import NONMEMConfiguration, conf
from .model import (
    DataItem,
    NonmemModel,
    ObservationEquation,
    Ode,
    Omega,
    ParameterEquation,
    PkVariable,
    Sigma,
    Theta,
)
from .render import render_model
from .target import NonmemTarget, create_target

__all__ = (
    'conf',
    'create_target',
    'DataItem',
    'NonmemModel',
    'NonmemTarget',
    'NONMEMConfiguration',
    'ObservationEquation',
    'Ode',
    'Omega',
    'ParameterEquation',
    'PkVariable',
    'render_model',
    'Sigma',
    'Theta',
)
