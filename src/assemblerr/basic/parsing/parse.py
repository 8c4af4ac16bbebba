from functools import lru_cache

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError

from assemblerr.errors import DeclarationSyntaxError

from .grammar import grammar
from .interpreters import DeclarationTransformer


@lru_cache(maxsize=1)
def _parser():
    return Lark(
        grammar,
        start='start',
        parser='lalr',
        propagate_positions=False,
        maybe_placeholders=False,
        debug=False,
    )


def parse(code: str):
    """Parse a formula into a pair of lhs symbol (or None) and rhs expression"""
    try:
        tree = _parser().parse(code)
    except UnexpectedInput as e:
        raise DeclarationSyntaxError(
            f'Error in parsing {code!r}: unexpected input at line {e.line} col {e.column}'
        ) from e
    try:
        return DeclarationTransformer().transform(tree)
    except VisitError as e:
        raise DeclarationSyntaxError(f'Error in parsing {code!r}: {e.orig_exc}') from e
