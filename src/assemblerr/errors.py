"""Exceptions and warnings raised when building, converting or rendering models"""


class ModelError(Exception):
    """Exception for errors in model object"""

    pass


class InvalidNameError(ModelError, ValueError):
    """A name is not a string or not a valid variable name"""

    pass


class MissingIdentifierError(ModelError, ValueError):
    """An anonymous declaration was given where a named one is needed"""

    pass


class MissingEndpointError(ModelError, ValueError):
    """A flow has neither a source nor a destination compartment"""

    pass


class InvalidTypeError(ModelError, TypeError):
    """A value of the wrong kind was given for a field"""

    pass


class DuplicateNameError(ModelError, ValueError):
    """Two records of the same facet share a name"""

    pass


class ReferenceError(ModelError, LookupError):
    """A record refers to something that is not part of the model"""

    pass


class CyclicDependencyError(ModelError, ValueError):
    """Algebraics depend on each other in a cycle"""

    pass


class UnsupportedObservationTypeError(ModelError, ValueError):
    pass


class UnsupportedParameterTypeError(ModelError, ValueError):
    pass


class DeclarationSyntaxError(ModelError, ValueError):
    """Exception for syntax errors in formulas"""

    def __init__(self, msg='declaration syntax error'):
        super().__init__(msg)


class AssemblerrWarning(UserWarning):
    """Notice about a default that was used or a part of the model that is ignored"""

    pass
