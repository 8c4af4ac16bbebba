"""Conversion of general models into NONMEM models"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping

from assemblerr.basic import Declaration
from assemblerr.deps import networkx as nx
from assemblerr.deps import sympy
from assemblerr.errors import (
    AssemblerrWarning,
    CyclicDependencyError,
    DuplicateNameError,
    ReferenceError,
    UnsupportedObservationTypeError,
    UnsupportedParameterTypeError,
)
from assemblerr.internals.expr.leaves import bare_symbol_names, indexed_nodes
from assemblerr.internals.expr.subs import replace_indexed, subs
from assemblerr.internals.immutable import frozenmapping
from assemblerr.model import Fragment

from ..target import Target
from .config import conf
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

logger = logging.getLogger(__name__)

AMOUNT = 'A'
CONCENTRATION = 'C'
STANDARD_DATA_ITEMS = ('ID', 'TIME', 'DV', 'AMT')
PARAMETER_TYPES = ('log-normal', 'normal', 'novar')
# Kinds of epsilons per residual error model, in order of EPS numbering
OBSERVATION_TYPES = {
    'additive': ('add',),
    'proportional': ('prop',),
    'combined': ('prop', 'add'),
}


class NonmemTarget(Target):
    name = 'nonmem'

    def create_model(self) -> NonmemModel:
        return NonmemModel()

    def convert_meta_tags(self, target_model: NonmemModel, model: Fragment) -> NonmemModel:
        title = model.meta_tags.get('title')
        data = model.meta_tags.get('data')
        return target_model.replace(
            title=conf.problem_title if title is None else title.value,
            data_file=conf.data_file if data is None else data.value,
            subroutine=conf.subroutine,
            tolerance=conf.tolerance,
            meta_tags=model.meta_tags.records,
        )

    def convert_parameters(self, target_model: NonmemModel, model: Fragment) -> NonmemModel:
        theta = sympy.IndexedBase('THETA')
        eta = sympy.IndexedBase('ETA')
        equations = []
        etas = {}
        for i, parameter in model.parameters.indexed():
            if parameter.type == 'novar':
                rhs = theta[i]
            elif parameter.type == 'log-normal':
                etas[parameter.name] = len(etas) + 1
                rhs = sympy.Mul(theta[i], sympy.exp(eta[etas[parameter.name]]), evaluate=False)
            elif parameter.type == 'normal':
                etas[parameter.name] = len(etas) + 1
                rhs = sympy.Add(theta[i], eta[etas[parameter.name]], evaluate=False)
            else:
                raise UnsupportedParameterTypeError(
                    f'Parameter {parameter.name!r} has unsupported type {parameter.type!r}: '
                    f'supported types are {list(PARAMETER_TYPES)}'
                )
            equation = Declaration(sympy.Symbol(parameter.name), rhs)
            equations.append(ParameterEquation(parameter.name, equation))

        thetas, omegas = _thetas_and_omegas(model, etas)
        return target_model.replace(
            parameter_equations=tuple(equations), thetas=thetas, omegas=omegas
        )

    def convert_compartments(self, target_model: NonmemModel, model: Fragment) -> NonmemModel:
        compartments = model.compartments
        for flow in model.flows:
            for endpoint in (flow.from_, flow.to):
                if endpoint is not None and compartments.get(endpoint) is None:
                    raise ReferenceError(
                        f'Flow {flow.definition} refers to the undeclared compartment {endpoint!r}'
                    )

        connected = {flow.from_ for flow in model.flows} | {flow.to for flow in model.flows}
        ode_compartments = [c for c in compartments if c.name in connected]
        for c in compartments:
            if c.name not in connected:
                logger.debug('Compartment %s has no flows and is excluded from $MODEL', c.name)

        compartment_map = {c.name: k for k, c in enumerate(ode_compartments, start=1)}
        volumes = {compartment_map[c.name]: c.volume.rhs for c in ode_compartments}
        target_model = target_model.replace(
            compartment_map=frozenmapping(compartment_map),
            compartment_volumes=frozenmapping(volumes),
        )

        dadt = sympy.IndexedBase('DADT')
        odes = []
        for k, c in enumerate(ode_compartments, start=1):
            inflows = [
                _flow_rate(flow, model, target_model) for flow in model.flows if flow.to == c.name
            ]
            outflows = [
                _flow_rate(flow, model, target_model)
                for flow in model.flows
                if flow.from_ == c.name
            ]
            rhs = sympy.Add(*inflows) - sympy.Add(*outflows)
            odes.append(Ode(k, c.name, Declaration(dadt[k], rhs)))
        return target_model.replace(odes=tuple(odes))

    def convert_algebraics(self, target_model: NonmemModel, model: Fragment) -> NonmemModel:
        algebraics = model.algebraics
        index = {record.name: i for i, record in algebraics.indexed()}

        graph = nx.DiGraph()
        graph.add_nodes_from(index)
        for record in algebraics:
            for name in record.definition.free_symbols():
                if name in index:
                    graph.add_edge(name, record.name)

        try:
            order = list(nx.lexicographical_topological_sort(graph, key=index.get))
        except nx.NetworkXUnfeasible:
            cycle = nx.find_cycle(graph)
            names = ' -> '.join([u for u, _ in cycle] + [cycle[-1][1]])
            raise CyclicDependencyError(f'Algebraics depend on each other in a cycle: {names}')

        pk_variables = []
        for name in order:
            record = algebraics.get(name)
            rhs = record.definition.rhs
            variables = _compartment_variables(rhs)
            if variables:
                raise ReferenceError(
                    f'Algebraic {name!r} uses {", ".join(variables)} but compartment amounts '
                    f'are not available in $PK'
                )
            pk_variables.append(PkVariable(name, Declaration(sympy.Symbol(name), rhs)))
        return target_model.replace(pk_variables=tuple(pk_variables))

    def convert_observations(self, target_model: NonmemModel, model: Fragment) -> NonmemModel:
        observations = model.observations
        multiple = len(observations) > 1
        eps = sympy.IndexedBase('EPS')
        epsilons = {}
        equations = []
        for n, record in observations.indexed():
            if record.type not in OBSERVATION_TYPES:
                raise UnsupportedObservationTypeError(
                    f'Observation type {record.type!r} is not supported: '
                    f'supported types are {list(OBSERVATION_TYPES)}'
                )
            name = observation_name(record, n)
            context = f'observation {name!r}'
            rhs = record.definition.rhs
            special = bare_symbol_names(rhs) & {AMOUNT, CONCENTRATION}
            if special:
                raise ReferenceError(
                    f'{context.capitalize()} uses {", ".join(sorted(special))} '
                    f'without a compartment index'
                )
            rhs = _resolve_compartment_references(rhs, model, target_model, context)

            if multiple:
                ipred = sympy.Symbol(f'IPRED_{name}')
                y = sympy.Symbol(f'Y_{name}')
            else:
                ipred = sympy.Symbol('IPRED')
                y = sympy.Symbol('Y')
            terms = [ipred]
            for kind in OBSERVATION_TYPES[record.type]:
                e = len(epsilons) + 1
                epsilons[(name, kind)] = e
                if kind == 'prop':
                    terms.append(sympy.Mul(ipred, eps[e], evaluate=False))
                else:
                    terms.append(eps[e])
            equations.append(
                ObservationEquation(
                    name,
                    Declaration(ipred, rhs),
                    Declaration(y, sympy.Add(*terms, evaluate=False)),
                    dvid=n if multiple else None,
                )
            )

        sigmas = _sigmas(model, epsilons)
        return target_model.replace(observation_equations=tuple(equations), sigmas=sigmas)

    def convert_data_items(self, target_model: NonmemModel, model: Fragment) -> NonmemModel:
        names = list(STANDARD_DATA_ITEMS)
        if len(model.observations) > 1:
            names.append('DVID')
        # NM-TRAN names are case insensitive
        known = {
            name.upper()
            for name in model.parameters.names + model.algebraics.names + (AMOUNT, CONCENTRATION)
        }

        compartment_map = target_model.compartment_map
        declarations = [c.volume for c in model.compartments if c.name in compartment_map]
        declarations += [flow.definition for flow in model.flows]
        declarations += [record.definition for record in model.algebraics]
        declarations += [record.definition for record in model.observations]

        used = {name.upper() for name in names} | known
        for declaration in declarations:
            for name in declaration.free_symbols():
                if name.upper() in used:
                    continue
                logger.debug('Symbol %s is read from the data', name)
                used.add(name.upper())
                names.append(name)

        data_items = tuple(DataItem(i, name) for i, name in enumerate(names, start=1))
        return target_model.replace(data_items=data_items)


def create_target() -> NonmemTarget:
    return NonmemTarget()


def observation_name(record, n: int) -> str:
    return f'obs{n}' if record.name is None else record.name


def _flow_rate(flow, model: Fragment, target_model: NonmemModel) -> sympy.Expr:
    rhs = flow.definition.rhs
    context = f'flow {flow.definition}'
    if flow.from_ is None:
        special = bare_symbol_names(rhs) & {AMOUNT, CONCENTRATION}
        if special:
            raise ReferenceError(
                f'{context.capitalize()} has no source compartment for '
                f'{", ".join(sorted(special))}'
            )
    else:
        k = target_model.compartment_map[flow.from_]
        amount = sympy.IndexedBase(AMOUNT)[k]
        rhs = subs(
            rhs,
            {
                AMOUNT: amount,
                CONCENTRATION: amount / target_model.compartment_volumes[k],
            },
        )
    return _resolve_compartment_references(rhs, model, target_model, context)


def _compartment_variables(expr: sympy.Expr) -> list[str]:
    """Amount and concentration variables used in an expression, indexed or not"""
    found = bare_symbol_names(expr) & {AMOUNT, CONCENTRATION}
    found |= {
        str(node)
        for node in indexed_nodes(expr)
        if node.base.label.name in (AMOUNT, CONCENTRATION)
    }
    return sorted(found)


def _resolve_compartment_references(
    expr: sympy.Expr, model: Fragment, target_model: NonmemModel, context: str
) -> sympy.Expr:
    """Replace A[...] and C[...] with the amount or concentration of an ODE compartment"""
    compartment_map = target_model.compartment_map

    def _resolve(indexed):
        base = indexed.base.label.name
        if base not in (AMOUNT, CONCENTRATION):
            return None
        if len(indexed.indices) != 1:
            raise ReferenceError(f'{indexed} in {context} needs exactly one compartment index')
        index = indexed.indices[0]
        if index.is_Integer:
            k = int(index)
            if not 1 <= k <= len(compartment_map):
                raise ReferenceError(
                    f'{indexed} in {context} refers to compartment number {k} but the model '
                    f'has {len(compartment_map)} compartments with flows'
                )
        else:
            name = index.name
            if name not in compartment_map:
                if model.compartments.get(name) is None:
                    raise ReferenceError(
                        f'{indexed} in {context} refers to the undeclared compartment {name!r}'
                    )
                raise ReferenceError(
                    f'{indexed} in {context} refers to compartment {name!r} which has no flows'
                )
            k = compartment_map[name]
        amount = sympy.IndexedBase(AMOUNT)[k]
        if base == AMOUNT:
            return amount
        return amount / target_model.compartment_volumes[k]

    return replace_indexed(expr, _resolve)


def _thetas_and_omegas(
    model: Fragment, etas: Mapping[str, int]
) -> tuple[tuple[Theta, ...], tuple[Omega, ...]]:
    thetas = {}
    omegas = {}
    for value in model.parameter_values:
        if value.type.startswith('ruv-'):
            continue
        if value.type not in ('typical', 'iiv'):
            raise UnsupportedParameterTypeError(
                f'Parameter value type {value.type!r} is not supported: '
                f"supported types are ['typical', 'iiv', 'ruv-add', 'ruv-prop']"
            )
        index = model.parameters.index(value.parameter1)
        if index is None:
            raise ReferenceError(
                f'Parameter value of type {value.type!r} refers to the undeclared '
                f'parameter {value.parameter1!r}'
            )

        if value.type == 'typical':
            if index in thetas:
                raise DuplicateNameError(
                    f'Parameter {value.parameter1!r} has more than one typical value'
                )
            thetas[index] = Theta(
                index,
                value.parameter1,
                value.value,
                lower=0.0 if value.lower is None else value.lower,
                upper=float('inf') if value.upper is None else value.upper,
            )
            continue

        if value.parameter2 is not None and value.parameter2 != value.parameter1:
            if model.parameters.index(value.parameter2) is None:
                raise ReferenceError(
                    f'Covariance refers to the undeclared parameter {value.parameter2!r}'
                )
            warnings.warn(
                f'Covariance between {value.parameter1!r} and {value.parameter2!r} '
                f'is not written to the model',
                AssemblerrWarning,
            )
            continue
        if value.parameter1 not in etas:
            raise ReferenceError(
                f'Parameter {value.parameter1!r} has no random effect for its iiv value'
            )
        j = etas[value.parameter1]
        if j in omegas:
            raise DuplicateNameError(f'Parameter {value.parameter1!r} has more than one iiv value')
        omegas[j] = Omega(j, value.parameter1, value.value)

    # $THETA and $OMEGA records are positional
    if thetas:
        missing = [p.name for i, p in model.parameters.indexed() if i not in thetas]
        if missing:
            raise ReferenceError(
                f'Parameters {missing} have no typical value while other parameters have one'
            )
    if omegas:
        missing = [name for name, j in etas.items() if j not in omegas]
        if missing:
            raise ReferenceError(
                f'Parameters {missing} have no iiv value while other parameters have one'
            )

    return (
        tuple(thetas[i] for i in sorted(thetas)),
        tuple(omegas[j] for j in sorted(omegas)),
    )


def _sigmas(model: Fragment, epsilons: Mapping[tuple[str, str], int]) -> tuple[Sigma, ...]:
    names = {name for name, _ in epsilons}
    sigmas = {}
    for value in model.parameter_values:
        if not value.type.startswith('ruv-'):
            continue
        kind = value.type[len('ruv-'):]
        if kind not in ('add', 'prop'):
            raise UnsupportedParameterTypeError(
                f"Residual error type {value.type!r} is not supported: "
                f"supported types are ['ruv-add', 'ruv-prop']"
            )
        if value.parameter1 not in names:
            raise ReferenceError(
                f'Parameter value of type {value.type!r} refers to the undeclared '
                f'observation {value.parameter1!r}'
            )
        e = epsilons.get((value.parameter1, kind))
        if e is None:
            raise ReferenceError(
                f'Observation {value.parameter1!r} has no {value.type!r} residual error'
            )
        if e in sigmas:
            raise DuplicateNameError(
                f'Observation {value.parameter1!r} has more than one {value.type!r} value'
            )
        sigmas[e] = Sigma(e, f'{value.type}-{value.parameter1}', value.value)

    if sigmas:
        missing = [f'ruv-{kind}-{name}' for (name, kind), e in epsilons.items() if e not in sigmas]
        if missing:
            raise ReferenceError(
                f'Residual errors {missing} have no value while other residual errors have one'
            )
    return tuple(sigmas[e] for e in sorted(sigmas))
