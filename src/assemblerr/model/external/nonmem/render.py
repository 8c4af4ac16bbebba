"""Rendering of NONMEM models as NM-TRAN control streams

Each section is generated independently and written into a fixed skeleton.
An empty section becomes an empty line so the skeleton is always the same.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from assemblerr.basic import format_number
from assemblerr.internals.code_generator import CodeGenerator

if TYPE_CHECKING:
    from .model import NonmemModel


def render_model(model: NonmemModel) -> str:
    cg = CodeGenerator()
    cg.add(f'$PROBLEM {model.title}')
    cg.add(f'$INPUT {input_code(model)}')
    cg.add(f'$DATA {model.data_file} IGNORE=@')
    cg.add(f'$SUBROUTINES {model.subroutine} TOL={model.tolerance}')
    cg.add(model_code(model))
    cg.add('$PK')
    cg.add(_join(eq.equation.render() for eq in model.parameter_equations))
    cg.add(_join(var.equation.render() for var in model.pk_variables))
    cg.add('$DES')
    cg.add(_join(ode.equation.render() for ode in model.odes))
    cg.add('$ERROR')
    cg.add(observation_code(model))
    cg.add(_join(theta_line(theta) for theta in model.thetas))
    cg.add(_join(omega_line(omega) for omega in model.omegas))
    cg.add(_join(sigma_line(sigma) for sigma in model.sigmas))
    return f'{cg}\n'


def input_code(model: NonmemModel) -> str:
    items = sorted(model.data_items, key=lambda item: item.index)
    return ' '.join(item.name.upper() for item in items)


def model_code(model: NonmemModel) -> str:
    code = f'$MODEL NCOMPARTMENTS={len(model.odes)}'
    for ode in model.odes:
        code += f' COMPARTMENT=({ode.name.upper()})'
    return code


def observation_code(model: NonmemModel) -> str:
    lines = []
    for eq in model.observation_equations:
        lines.append(eq.ipred_equation.render())
        lines.append(eq.ruv_equation.render())
    for eq in model.observation_equations:
        if eq.dvid is not None:
            ipred = eq.ipred_equation.identifier().upper()
            y = eq.ruv_equation.identifier().upper()
            lines.append(f'IF (DVID.EQ.{eq.dvid}) IPRED = {ipred}')
            lines.append(f'IF (DVID.EQ.{eq.dvid}) Y = {y}')
    return _join(lines)


def theta_line(theta) -> str:
    bounds = ', '.join(format_number(x) for x in (theta.lower, theta.initial, theta.upper))
    return f'$THETA ({bounds})  ; {theta.name.upper()}'


def omega_line(omega) -> str:
    return f'$OMEGA {format_number(omega.initial)}  ; IIV-{omega.name.upper()}'


def sigma_line(sigma) -> str:
    return f'$SIGMA {format_number(sigma.initial)}  ; {sigma.name.upper()}'


def _join(lines: Iterable[str]) -> str:
    return '\n'.join(lines)
