from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

from assemblerr.basic import Declaration
from assemblerr.internals.immutable import frozenmapping
from assemblerr.model import MetaTagRecord

from ..target import SoftwareSpecificModel
from .render import render_model


@dataclass(frozen=True)
class DataItem:
    index: int
    name: str


@dataclass(frozen=True)
class ParameterEquation:
    name: str
    equation: Declaration


@dataclass(frozen=True)
class PkVariable:
    name: str
    equation: Declaration


@dataclass(frozen=True)
class Ode:
    index: int
    name: str
    equation: Declaration


@dataclass(frozen=True)
class ObservationEquation:
    """IPRED and residual error equations of one observation

    dvid is set when the model has several observations and selects which
    one defines IPRED and Y.
    """

    name: str
    ipred_equation: Declaration
    ruv_equation: Declaration
    dvid: Optional[int] = None


@dataclass(frozen=True)
class Theta:
    index: int
    name: str
    initial: float
    lower: float = 0.0
    upper: float = float('inf')


@dataclass(frozen=True)
class Omega:
    index: int
    name: str
    initial: float


@dataclass(frozen=True)
class Sigma:
    index: int
    name: str
    initial: float


@dataclass(frozen=True)
class NonmemModel(SoftwareSpecificModel):
    """A model for NONMEM

    Created by converting a general model with the NONMEM target. All tables
    are ordered the way they are written into the control stream.
    """

    title: str = ''
    data_file: str = ''
    subroutine: str = ''
    tolerance: int = 0
    meta_tags: tuple[MetaTagRecord, ...] = ()
    data_items: tuple[DataItem, ...] = ()
    parameter_equations: tuple[ParameterEquation, ...] = ()
    pk_variables: tuple[PkVariable, ...] = ()
    compartment_map: frozenmapping = frozenmapping({})
    compartment_volumes: frozenmapping = frozenmapping({})
    odes: tuple[Ode, ...] = ()
    observation_equations: tuple[ObservationEquation, ...] = ()
    thetas: tuple[Theta, ...] = ()
    omegas: tuple[Omega, ...] = ()
    sigmas: tuple[Sigma, ...] = ()

    def replace(self, **kwargs) -> NonmemModel:
        return dataclasses.replace(self, **kwargs)

    def render(self) -> str:
        """NM-TRAN control stream of the model"""
        return render_model(self)
