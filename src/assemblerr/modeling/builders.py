"""Functions creating model fragments

Every function validates its arguments and returns a :class:`Fragment` with a
single populated facet. Fragments are combined with ``+``.
"""

from __future__ import annotations

import numbers
import re
import warnings
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from assemblerr.basic import Declaration, as_declaration
from assemblerr.errors import (
    AssemblerrWarning,
    InvalidNameError,
    InvalidTypeError,
    MissingEndpointError,
    MissingIdentifierError,
)
from assemblerr.model import (
    AlgebraicRecord,
    CompartmentRecord,
    FlowRecord,
    Fragment,
    MetaTagRecord,
    ObservationRecord,
    ParameterRecord,
    ParameterValueRecord,
)

TDeclaration = Union[Declaration, str, numbers.Number]

_name_pattern = re.compile(r'[A-Za-z][A-Za-z0-9_]*')


def is_valid_name(name) -> bool:
    return isinstance(name, str) and _name_pattern.fullmatch(name) is not None


def _check_name(name, argument: str = 'name'):
    if not is_valid_name(name):
        raise InvalidNameError(f"'{argument}' needs to be a valid variable name: got {name!r}")


def compartment(name: str, volume: TDeclaration = 1) -> Fragment:
    """Compartment

    Defines name and volume of a compartment

    Parameters
    ----------
    name : str
        Name of the compartment
    volume : Declaration, str or number
        Definition of the compartment volume

    Returns
    -------
    Fragment
        A compartment fragment

    Examples
    --------
    >>> from assemblerr import compartment
    >>> comp = compartment("central", volume="vc")
    >>> comp.compartments.names
    ('central',)
    """
    _check_name(name)
    volume = as_declaration(volume)
    return Fragment.from_records('compartments', [CompartmentRecord(name, volume)])


cmp = compartment


def flow(
    from_: Optional[str] = None, to: Optional[str] = None, definition: Optional[TDeclaration] = None
) -> Fragment:
    """Flow between compartments

    In the definition the special variables ``A`` and ``C`` stand for the
    amount and the concentration in the source compartment.

    Parameters
    ----------
    from_ : str
        Name of the source compartment or None
    to : str
        Name of the destination compartment or None
    definition : Declaration, str or number
        Definition of the flow

    Returns
    -------
    Fragment
        A flow fragment

    Examples
    --------
    >>> from assemblerr import flow
    >>> f = flow(from_="depot", to="central", definition="ka*A")
    """
    if not isinstance(from_, str) and not isinstance(to, str):
        raise MissingEndpointError("'from_' or/and 'to' need to be compartment names")
    if definition is None:
        raise InvalidTypeError("'definition' of the flow needs to be given")
    definition = as_declaration(definition)
    return Fragment.from_records('flows', [FlowRecord(from_, to, definition)])


def parameter(name: str, type: Optional[str] = None) -> Fragment:
    """Model parameter

    Parameters
    ----------
    name : str
        Name of the parameter
    type : str
        Model type of the parameter: 'log-normal', 'normal' or 'novar'.
        Defaults to 'log-normal'.

    Returns
    -------
    Fragment
        A parameter fragment
    """
    _check_name(name)
    if type is None:
        warnings.warn(
            f"No type for the parameter '{name}' was specified, using 'log-normal' as default.",
            AssemblerrWarning,
        )
        type = 'log-normal'
    if not isinstance(type, str):
        raise InvalidTypeError(f"'type' needs to be a string: got {type!r}")
    return Fragment.from_records('parameters', [ParameterRecord(name, type)])


def observation(
    definition: TDeclaration, type: Optional[str] = None, name: Optional[str] = None
) -> Fragment:
    """Observation model

    Defines how variables of the model relate to values in the data.

    Parameters
    ----------
    definition : Declaration or str
        Declaration describing the measurement
    type : str
        Model used for the residual error: 'additive', 'proportional' or
        'combined'. Defaults to 'additive'.
    name : str
        Name identifying the measurement. Defaults to the identifier of the
        definition.

    Returns
    -------
    Fragment
        An observation fragment

    Examples
    --------
    >>> from assemblerr import observation
    >>> c_obs = observation('conc ~ C["central"]', 'additive')
    >>> e_obs = observation('effect', 'combined', name='eff')
    """
    definition = as_declaration(definition)
    if type is None:
        warnings.warn(
            "No type for the observation model was specified, using 'additive' as a default",
            AssemblerrWarning,
        )
        type = 'additive'
    if not isinstance(type, str):
        raise InvalidTypeError(f"'type' needs to be a string: got {type!r}")
    if name is not None:
        _check_name(name)
    elif not definition.is_anonymous():
        name = definition.identifier()
    return Fragment.from_records('observations', [ObservationRecord(name, definition, type)])


def algebraic(definition: TDeclaration) -> Fragment:
    """Named intermediate quantity

    Parameters
    ----------
    definition : Declaration or str
        Named declaration, e.g. ``"k ~ cl/v"``

    Returns
    -------
    Fragment
        An algebraic fragment
    """
    definition = as_declaration(definition)
    if definition.is_anonymous():
        raise MissingIdentifierError("'definition' needs to be named")
    return Fragment.from_records(
        'algebraics', [AlgebraicRecord(definition.identifier(), definition)]
    )


def parameter_value(
    parameter1: str,
    type: str,
    value: float,
    parameter2: Optional[str] = None,
    lower: Optional[float] = None,
    upper: Optional[float] = None,
) -> Fragment:
    """Value of a model parameter

    Parameters
    ----------
    parameter1 : str
        Name of the parameter, or of the observation for residual error values
    type : str
        'typical', 'iiv', 'ruv-add' or 'ruv-prop'
    value : float
        Initial value
    parameter2 : str
        Second parameter for covariances
    lower : float
        Lower bound, only used for typical values
    upper : float
        Upper bound, only used for typical values

    Returns
    -------
    Fragment
        A parameter value fragment
    """
    if not isinstance(parameter1, str):
        raise InvalidNameError("'parameter1' needs to be a string")
    if parameter2 is not None and not isinstance(parameter2, str):
        raise InvalidNameError("'parameter2' needs to be a string")
    if not isinstance(type, str):
        raise InvalidTypeError(f"'type' needs to be a string: got {type!r}")
    record = ParameterValueRecord(
        parameter1,
        type,
        _as_number(value, 'value'),
        parameter2=parameter2,
        lower=None if lower is None else _as_number(lower, 'lower'),
        upper=None if upper is None else _as_number(upper, 'upper'),
    )
    return Fragment.from_records('parameter_values', [record])


def parameter_value_table(
    values: Mapping[str, float], types: Union[str, Sequence[str]]
) -> Fragment:
    """Several parameter values at once

    Parameters
    ----------
    values : dict
        Parameter names and their values
    types : str or list
        One type for all values or one type per value

    Returns
    -------
    Fragment
        A fragment with one parameter value per entry

    Examples
    --------
    >>> from assemblerr import parameter_value_table
    >>> pv = parameter_value_table({'cl': 5.0, 'vc': 50.0}, 'typical')
    >>> len(pv.parameter_values)
    2
    """
    if not isinstance(values, Mapping):
        raise InvalidTypeError("'values' needs to be a mapping from names to values")
    if isinstance(types, str):
        types = [types] * len(values)
    else:
        types = list(types)
        if len(types) != len(values):
            raise InvalidTypeError(
                f"'types' needs to be a string or have one entry per value: "
                f"got {len(types)} types for {len(values)} values"
            )
    fragment = Fragment()
    for (name, value), type in zip(values.items(), types):
        fragment = fragment + parameter_value(name, type, value)
    return fragment


def meta_tag(name: str, value) -> Fragment:
    """Meta information about the model, e.g. its title"""
    if not isinstance(name, str):
        raise InvalidNameError("'name' needs to be a string")
    return Fragment.from_records('meta_tags', [MetaTagRecord(name, str(value))])


def _as_number(value, argument: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidTypeError(f"'{argument}' needs to be a number: got {value!r}")
    return float(value)
