from __future__ import annotations

from operator import is_
from typing import Callable, Iterator, List

from assemblerr.deps import sympy


def replace_root_children(expr: sympy.Expr, args: List[sympy.Expr]):
    # NOTE This creates a new tree by replacing the children of the root node.
    # If the children have not changed it returns the original tree which
    # allows certain downstream optimizations.
    return expr if all(map(is_, expr.args, args)) else expr.func(*args)


def preorder(expr: sympy.Expr, skip: Callable[[sympy.Expr], bool]) -> Iterator[sympy.Expr]:
    """Iterate over the nodes of a tree, parents before children

    Children of nodes for which ``skip`` is true are not visited.
    """
    stack = [expr]
    while stack:
        e = stack.pop()
        yield e
        if not skip(e):
            stack.extend(reversed(e.args))


def transform(
    expr: sympy.Expr,
    fn: Callable[[sympy.Expr], sympy.Expr | None],
    skip: Callable[[sympy.Expr], bool],
) -> sympy.Expr:
    """Rebuild a tree bottom-up

    ``fn`` is called on every visited node and returns a replacement or None
    to keep the node. A replaced node is not descended into. Nodes for which
    ``skip`` is true are only offered to ``fn`` as a whole.
    """
    new = fn(expr)
    if new is not None:
        return new
    if skip(expr) or not expr.args:
        return expr
    args = [transform(arg, fn, skip) for arg in expr.args]
    return replace_root_children(expr, args)
