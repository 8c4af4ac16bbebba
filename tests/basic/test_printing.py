import pytest
import sympy

from assemblerr.basic import NMTranPrinter, format_number


@pytest.mark.parametrize(
    'value, expected',
    (
        (0.1, '0.1'),
        (5.0, '5'),
        (5, '5'),
        (0, '0'),
        (float('inf'), 'INF'),
        (float('-inf'), '-INF'),
        (1234567.0, '1.23457E+06'),
        (1e-7, '1E-07'),
    ),
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_unevaluated_order_is_kept():
    ipred, eps = sympy.Symbol('ipred'), sympy.IndexedBase('EPS')
    expr = sympy.Add(ipred, sympy.Mul(ipred, eps[1], evaluate=False), eps[2], evaluate=False)
    assert NMTranPrinter().doprint(expr) == 'IPRED + IPRED*EPS(1) + EPS(2)'


def test_print_function():
    x = sympy.Symbol('x')
    printer = NMTranPrinter()
    assert printer.doprint(sympy.exp(x)) == 'EXP(X)'
    assert printer.doprint(sympy.Function('hill')(x)) == 'HILL(X)'
    assert printer.doprint(1 / sympy.sqrt(x)) == '1/SQRT(X)'
    assert printer.doprint(sympy.Float(0.25)) == '0.25'


def test_print_indexed():
    printer = NMTranPrinter()
    theta, c = sympy.IndexedBase('THETA'), sympy.IndexedBase('C')
    assert printer.doprint(theta[1]) == 'THETA(1)'
    assert printer.doprint(c[sympy.Symbol('central')]) == 'C[CENTRAL]'
    assert printer.doprint(sympy.IndexedBase('dadt')[2]) == 'DADT(2)'
    assert printer.doprint(-sympy.Symbol('cl') * sympy.IndexedBase('A')[1]) in (
        '-CL*A(1)',
        '-A(1)*CL',
    )
