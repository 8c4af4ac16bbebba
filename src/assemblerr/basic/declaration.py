from __future__ import annotations

import numbers
from typing import Iterator, Optional, Union

from assemblerr.deps import sympy
from assemblerr.errors import InvalidTypeError, MissingIdentifierError
from assemblerr.internals.expr.leaves import free_symbol_names
from assemblerr.internals.expr.subs import subs
from assemblerr.internals.immutable import Immutable

from .parsing import parse
from .printing import expression_to_nmtran


class Declaration(Immutable):
    """A symbolic expression, optionally naming the quantity it defines

    Parameters
    ----------
    lhs : sympy.Symbol or None
        Identifier defined by the declaration. None for anonymous declarations.
    rhs : sympy.Expr
        Expression tree

    Examples
    --------
    >>> from assemblerr.basic import Declaration
    >>> d = Declaration.create('cl/v', lhs='k')
    >>> d
    k ~ cl/v
    >>> d.identifier()
    'k'
    >>> list(d.free_symbols())
    ['cl', 'v']
    """

    def __init__(self, lhs: Optional[sympy.Symbol], rhs: sympy.Expr):
        self._lhs = lhs
        self._rhs = rhs

    @classmethod
    def create(
        cls,
        rhs: Union[str, numbers.Number, sympy.Expr],
        lhs: Optional[Union[str, sympy.Symbol]] = None,
    ) -> Declaration:
        if isinstance(lhs, str):
            lhs = sympy.Symbol(lhs)
        elif lhs is not None and not isinstance(lhs, sympy.Symbol):
            raise InvalidTypeError(f'Left hand side must be a symbol or a string: got {type(lhs)}')
        return cls(lhs, _as_expression(rhs))

    @classmethod
    def parse(cls, code: str) -> Declaration:
        """Create a declaration from a formula such as ``"k ~ cl/v"``"""
        lhs, rhs = parse(code)
        return cls(lhs, rhs)

    @property
    def lhs(self) -> Optional[sympy.Symbol]:
        return self._lhs

    @property
    def rhs(self) -> sympy.Expr:
        return self._rhs

    def identifier(self) -> str:
        """Name of the quantity defined by the declaration"""
        if self._lhs is None:
            raise MissingIdentifierError(f'Declaration {self} is anonymous')
        return self._lhs.name

    def is_anonymous(self) -> bool:
        return self._lhs is None

    def free_symbols(self) -> Iterator[str]:
        """Names of symbols used in the right hand side

        Names are given in order of first appearance and only once. For an
        indexed variable like ``C["central"]`` only the base name ``C`` is
        given. Every call starts a new iteration.
        """
        return free_symbol_names(self._rhs)

    def substitute(self, symbol, replacement) -> Declaration:
        """Replace a symbol in the right hand side

        Bare occurrences of the symbol are replaced while indexed variables are
        left as they are. Pass a :class:`sympy.IndexedBase` or an indexed
        variable to target those instead.

        >>> from assemblerr.basic import Declaration
        >>> Declaration.parse('k ~ cl/v').substitute('v', 'vc')
        k ~ cl/vc
        """
        if isinstance(replacement, Declaration):
            replacement = replacement.rhs
        elif isinstance(replacement, str):
            replacement = Declaration.parse(replacement).rhs
        return self.subs({symbol: replacement})

    def subs(self, substitutions) -> Declaration:
        """Substitute several symbols at once"""
        return Declaration(self._lhs, subs(self._rhs, substitutions))

    def replace(self, **kwargs) -> Declaration:
        lhs = kwargs.get('lhs', self._lhs)
        rhs = kwargs.get('rhs', self._rhs)
        return Declaration.create(rhs, lhs=lhs)

    def render(self) -> str:
        """NM-TRAN code for the declaration"""
        rhs = expression_to_nmtran(self._rhs)
        if self._lhs is None:
            return rhs
        return f'{expression_to_nmtran(self._lhs)} = {rhs}'

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Declaration):
            return NotImplemented
        return self._lhs == other._lhs and self._rhs == other._rhs

    def __hash__(self):
        return hash((self._lhs, self._rhs))

    def __repr__(self):
        if self._lhs is None:
            return f'~{sympy.sstr(self._rhs)}'
        return f'{self._lhs} ~ {sympy.sstr(self._rhs)}'


def as_declaration(obj) -> Declaration:
    """Coerce a number, formula, sympy expression or declaration into a declaration"""
    if isinstance(obj, Declaration):
        return obj
    if isinstance(obj, str):
        return Declaration.parse(obj)
    if isinstance(obj, sympy.Eq):
        lhs, rhs = obj.args
        if not isinstance(lhs, sympy.Symbol):
            raise InvalidTypeError(f'Left hand side of {obj} must be a symbol')
        return Declaration(lhs, rhs)
    return Declaration(None, _as_expression(obj))


def _as_expression(obj) -> sympy.Expr:
    if isinstance(obj, bool):
        raise InvalidTypeError('Cannot use a boolean as a declaration')
    if isinstance(obj, numbers.Integral):
        return sympy.Integer(obj)
    if isinstance(obj, numbers.Real):
        return sympy.Float(obj)
    if isinstance(obj, str):
        lhs, rhs = parse(obj)
        if lhs is not None:
            raise InvalidTypeError(f'Expected an expression, got the declaration {obj!r}')
        return rhs
    if isinstance(obj, sympy.Expr):
        return obj
    raise InvalidTypeError(
        f'Cannot use object of type {type(obj).__name__} as a declaration: {obj!r}'
    )
