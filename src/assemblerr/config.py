"""assemblerr configuration

Options are read from an INI file named ``assemblerr.conf`` where every
configurable part of assemblerr has its own section, e.g.
``[assemblerr.nonmem]`` for the NONMEM target. The file is looked up in the
directory given by the environment variable ``ASSEMBLERRCONFIGPATH``, then in
the user and site configuration directories. Setting
``ASSEMBLERRNOCONFIGFILE=1`` disables the file.
"""

from __future__ import annotations

import configparser
import os
import warnings
from abc import ABC
from pathlib import Path
from typing import Optional

import appdirs

from assemblerr.errors import AssemblerrWarning

appname = 'assemblerr'
configuration_filename = 'assemblerr.conf'


def config_file_enabled() -> bool:
    return not int(os.getenv('ASSEMBLERRNOCONFIGFILE', 0))


def config_path() -> Optional[Path]:
    """Path of the configuration file to use or None if there is none"""
    env_dir = os.getenv('ASSEMBLERRCONFIGPATH')
    if env_dir is not None:
        path = Path(env_dir) / configuration_filename
        if not path.is_file():
            raise ValueError(
                f'Environment variable ASSEMBLERRCONFIGPATH is set to {env_dir} but the '
                f'directory does not contain {configuration_filename}'
            )
        return path
    for directory in (appdirs.user_config_dir(appname), appdirs.site_config_dir(appname)):
        path = Path(directory) / configuration_filename
        if path.is_file():
            return path
    return None


def read_section(section: str) -> dict[str, str]:
    """Options of one section of the configuration file"""
    if not config_file_enabled():
        return {}
    path = config_path()
    if path is None:
        return {}
    parser = configparser.ConfigParser()
    parser.read(path)
    if not parser.has_section(section):
        return {}
    return dict(parser[section])


class ConfigItem:
    """A typed option with a default value

    Values set from strings, as read from the configuration file, are
    converted to the type of the default.
    """

    def __init__(self, default, description):
        self.default = default
        self.__doc__ = description
        self.cls = type(default)

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance, value):
        if self.cls is bool and isinstance(value, str):
            value = value.strip().lower() in ('1', 'true', 'yes', 'on')
        try:
            instance.__dict__[self.name] = self.cls(value)
        except ValueError as exc:
            raise TypeError(
                f'Configuration item {self.name} needs a value of type {self.cls.__name__}: '
                f'got {value!r}'
            ) from exc


class Configuration(ABC):
    """Options of one part of assemblerr, read from the section named by ``module``"""

    module: str

    def __init__(self):
        for key, value in read_section(self.module).items():
            if not isinstance(getattr(type(self), key, None), ConfigItem):
                warnings.warn(
                    f'Unknown option {key} in section [{self.module}] is ignored', AssemblerrWarning
                )
                continue
            setattr(self, key, value)


class ConfigurationContext:
    """Context to temporarily set configuration options"""

    def __init__(self, config, **kwargs):
        self.config = config
        self.options = kwargs

    def __enter__(self):
        self.old = {key: getattr(self.config, key) for key in self.options}
        for key, value in self.options.items():
            setattr(self.config, key, value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        for key, value in self.old.items():
            setattr(self.config, key, value)
