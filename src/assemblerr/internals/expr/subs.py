from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Optional

from assemblerr.deps import sympy

from .leaves import is_indexed
from .tree import transform


def subs(expr: sympy.Expr, mapping: Mapping[Any, Any]) -> sympy.Expr:
    """Simultaneously substitute symbols in an expression

    Indexed variables are kept as they are unless the indexed node itself or
    its :class:`sympy.IndexedBase` is a key of the mapping.
    """
    _mapping = xreplace_dict(mapping)
    if not _mapping:
        return expr

    def _replace(e):
        if e in _mapping:
            return _mapping[e]
        if isinstance(e, sympy.Indexed) and e.base in _mapping:
            return sympy.Indexed(_mapping[e.base], *e.indices)
        return None

    return transform(expr, _replace, is_indexed)


def replace_indexed(
    expr: sympy.Expr, fn: Callable[[sympy.Indexed], Optional[sympy.Expr]]
) -> sympy.Expr:
    """Replace indexed variables with the expression returned by fn"""

    def _replace(e):
        if isinstance(e, sympy.Indexed):
            return fn(e)
        return None

    return transform(expr, _replace, is_indexed)


def xreplace_dict(dictlike: Mapping[Any, Any]) -> dict[Any, Any]:
    return {_sympify_old(key): _sympify_new(value) for key, value in dictlike.items()}


def _sympify_old(old) -> sympy.Expr:
    # NOTE: This mimics sympy's input coercion in subs
    return sympy.Symbol(old) if isinstance(old, str) else sympy.sympify(old)


def _sympify_new(new) -> sympy.Expr:
    return sympy.Symbol(new) if isinstance(new, str) else sympy.sympify(new)
