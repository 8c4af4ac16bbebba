from typing import TYPE_CHECKING

from assemblerr.internals.module.lazy import LazyImport

if TYPE_CHECKING:
    import sympy.printing.str as str
else:
    str = LazyImport('str', globals(), 'sympy.printing.str')
