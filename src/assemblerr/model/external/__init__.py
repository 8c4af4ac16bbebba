from __future__ import annotations

import importlib
from typing import Union

from assemblerr.model import Fragment

from .target import SoftwareSpecificModel, Target

supported = ('nonmem',)


def get_target(name: str) -> Target:
    """Create the target registered under a name"""
    if name not in supported:
        raise ValueError(f'Unknown target {name}: supported targets are {list(supported)}')
    module = importlib.import_module('assemblerr.model.external.' + name)
    return module.create_target()


def convert_to(model: Fragment, target: Union[str, Target]) -> SoftwareSpecificModel:
    """Convert a general model into a software specific model

    Parameters
    ----------
    model : Model
        General model
    target : str or Target
        Name of the target software, e.g. 'nonmem', or a target object

    Returns
    -------
    SoftwareSpecificModel
        Model ready to be rendered

    Examples
    --------
    >>> from assemblerr import compartment, convert_to, flow, model, parameter
    >>> m = model() + compartment('central', volume='vc') + flow(from_='central', definition='cl*C')
    >>> nm = convert_to(m + parameter('cl', 'novar') + parameter('vc', 'novar'), 'nonmem')
    >>> [ode.name for ode in nm.odes]
    ['central']
    """
    if isinstance(target, str):
        target = get_target(target)
    elif not isinstance(target, Target):
        raise TypeError(f'Target must be a name or a Target object: got {type(target).__name__}')
    return target.convert(model)


def render(model: SoftwareSpecificModel) -> str:
    """Code of a software specific model"""
    return model.render()


__all__ = ('convert_to', 'get_target', 'render', 'SoftwareSpecificModel', 'Target')
