"""Printing of expression trees as NM-TRAN abbreviated code"""

from __future__ import annotations

import math

from assemblerr.deps import sympy, sympy_printing


def format_number(value) -> str:
    """Format a number for a control stream

    Infinities become ``INF``/``-INF``, everything else is printed with six
    significant digits.

    >>> format_number(0.1)
    '0.1'
    >>> format_number(float('inf'))
    'INF'
    >>> format_number(1234567.0)
    '1.23457E+06'
    """
    value = float(value)
    if math.isinf(value):
        return 'INF' if value > 0 else '-INF'
    return format(value, '.6G')


class NMTranPrinter(sympy_printing.str.StrPrinter):
    """Upper cases names and prints integer indices with parentheses

    The printer keeps the argument order of the tree (order='none') so that
    unevaluated sums and products print the way they were built.
    """

    printmethod = '_nmtran'

    def __init__(self, **kwargs):
        kwargs.setdefault('order', 'none')
        super().__init__(settings=kwargs)

    def _print_Symbol(self, expr):
        return expr.name.upper()

    def _print_IndexedBase(self, expr):
        return expr.label.name.upper()

    def _print_Indexed(self, expr):
        base = self._print(expr.base)
        indices = ','.join(self._print_index(i) for i in expr.indices)
        if all(i.is_Integer for i in expr.indices):
            return f'{base}({indices})'
        return f'{base}[{indices}]'

    def _print_index(self, index):
        if isinstance(index, sympy.Symbol):
            return index.name.upper()
        return self._print(index)

    def _print_Float(self, expr):
        return format_number(expr)

    def _print_Integer(self, expr):
        return str(expr)

    def _print_Rational(self, expr):
        return f'{expr.p}.0/{expr.q}.0'

    def _print_Function(self, expr):
        name = getattr(expr.func, '__name__', type(expr).__name__).upper()
        args = ','.join(self._print(arg) for arg in expr.args)
        return f'{name}({args})'

    _print_exp = _print_Function
    _print_log = _print_Function
    _print_Abs = _print_Function

    def _print_Exp1(self, expr):
        return 'EXP(1)'

    def _print_Pow(self, expr, rational=False):
        if expr.exp == sympy.Rational(1, 2):
            return f'SQRT({self._print(expr.base)})'
        if expr.exp == -sympy.Rational(1, 2):
            return f'1/SQRT({self._print(expr.base)})'
        return super()._print_Pow(expr, rational=rational)


def expression_to_nmtran(expr) -> str:
    return NMTranPrinter().doprint(expr)
