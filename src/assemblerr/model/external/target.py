"""
=====================
Software target base
=====================

**Base classes of all targets.**

A target converts a general :class:`~assemblerr.model.Model` into a model
specific to one modeling software. Inherit from :class:`Target` and
:class:`SoftwareSpecificModel` to add support for a new software.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from assemblerr.errors import InvalidTypeError
from assemblerr.internals.immutable import Immutable
from assemblerr.model import Fragment


class SoftwareSpecificModel(Immutable, ABC):
    """A model ready to be rendered as code for one modeling software"""

    @abstractmethod
    def render(self) -> str:
        pass


class Target(ABC):
    """Conversion of general models into software specific models

    Every ``convert_*`` method takes the software specific model built so far
    and the general model and returns a new software specific model. They are
    called in the order meta tags, parameters, compartments, algebraics,
    observations and data items.
    """

    name: str

    def convert(self, model: Fragment) -> SoftwareSpecificModel:
        if not isinstance(model, Fragment):
            raise InvalidTypeError(f'Can only convert models: got {type(model).__name__}')
        target_model = self.create_model()
        steps = (
            self.convert_meta_tags,
            self.convert_parameters,
            self.convert_compartments,
            self.convert_algebraics,
            self.convert_observations,
            self.convert_data_items,
        )
        for step in steps:
            target_model = step(target_model, model)
        return target_model

    @abstractmethod
    def create_model(self) -> SoftwareSpecificModel:
        pass

    @abstractmethod
    def convert_meta_tags(self, target_model, model):
        pass

    @abstractmethod
    def convert_parameters(self, target_model, model):
        pass

    @abstractmethod
    def convert_compartments(self, target_model, model):
        pass

    @abstractmethod
    def convert_algebraics(self, target_model, model):
        pass

    @abstractmethod
    def convert_observations(self, target_model, model):
        pass

    def convert_data_items(self, target_model, model):
        return target_model
