r"""
==========
assemblerr
==========

assemblerr builds pharmacometric models from fragments and writes them as
code for modeling software.

A model is created with :func:`model` and extended with fragments created by
:func:`compartment`, :func:`flow`, :func:`parameter`, :func:`algebraic`,
:func:`observation`, :func:`parameter_value` and :func:`meta_tag`. The order
in which fragments of different kinds are added does not matter. The model is
converted with :func:`convert_to` and rendered with :func:`render`.

Configuration
=============

The NONMEM target is configured in the ``[assemblerr.nonmem]`` section of
``assemblerr.conf``, see :mod:`assemblerr.model.external.nonmem.config`.
"""

__version__ = '0.1.0'

from assemblerr.basic import Declaration
from assemblerr.model import Fragment, Model, combine, model
from assemblerr.model.external import convert_to, render
from assemblerr.modeling import (
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
    'combine',
    'compartment',
    'convert_to',
    'Declaration',
    'flow',
    'Fragment',
    'meta_tag',
    'Model',
    'model',
    'observation',
    'parameter',
    'parameter_value',
    'parameter_value_table',
    'render',
)
