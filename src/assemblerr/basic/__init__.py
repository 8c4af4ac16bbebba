from .declaration import Declaration, as_declaration
from .printing import NMTranPrinter, format_number

__all__ = ('Declaration', 'NMTranPrinter', 'as_declaration', 'format_number')
