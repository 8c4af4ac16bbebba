from .facets import (
    AlgebraicRecord,
    CompartmentRecord,
    Facet,
    FlowRecord,
    MetaTagRecord,
    ObservationRecord,
    ParameterRecord,
    ParameterValueRecord,
)
from .fragment import FACETS, Fragment, Model, combine, model

__all__ = (
    'AlgebraicRecord',
    'combine',
    'CompartmentRecord',
    'Facet',
    'FACETS',
    'FlowRecord',
    'Fragment',
    'MetaTagRecord',
    'Model',
    'model',
    'ObservationRecord',
    'ParameterRecord',
    'ParameterValueRecord',
)
