from typing import TYPE_CHECKING

from assemblerr.internals.module.lazy import LazyImport

if TYPE_CHECKING:
    import networkx
    import sympy
else:
    networkx = LazyImport('networkx', globals(), 'networkx')
    sympy = LazyImport('sympy', globals(), 'sympy')

__all__ = (
    'networkx',
    'sympy',
)
