from .builders import (
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

__all__ = (
    'algebraic',
    'cmp',
    'compartment',
    'flow',
    'meta_tag',
    'observation',
    'parameter',
    'parameter_value',
    'parameter_value_table',
)
