from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from .tree import preorder

if TYPE_CHECKING:
    import sympy
else:
    from assemblerr.deps import sympy


def is_indexed(expr: sympy.Expr) -> bool:
    return isinstance(expr, (sympy.Indexed, sympy.IndexedBase))


def free_symbol_names(expr: sympy.Expr) -> Iterator[str]:
    """Distinct names of free symbols in pre-order

    An indexed variable contributes the name of its base but never its index.
    """
    seen = set()
    for node in preorder(expr, is_indexed):
        if isinstance(node, sympy.Indexed):
            name = node.base.label.name
        elif isinstance(node, sympy.IndexedBase):
            name = node.label.name
        elif isinstance(node, sympy.Symbol):
            name = node.name
        else:
            continue
        if name not in seen:
            seen.add(name)
            yield name


def indexed_nodes(expr: sympy.Expr) -> Iterator[sympy.Indexed]:
    for node in preorder(expr, is_indexed):
        if isinstance(node, sympy.Indexed):
            yield node


def bare_symbol_names(expr: sympy.Expr) -> set[str]:
    """Names of symbols that are not part of an indexed variable"""
    return {
        node.name
        for node in preorder(expr, is_indexed)
        if isinstance(node, sympy.Symbol)
    }
