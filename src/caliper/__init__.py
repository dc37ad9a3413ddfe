import collections.abc
import configparser
import json
import logging
import os
import pathlib
import typing

from caliper.core import iotools


# read version from installed package
from importlib.metadata import version
__version__ = version("caliper")


logging.getLogger(__name__).addHandler(logging.NullHandler())


_DEFAULTS = {
    'reduction': {'max_recursions': '100'},
    'symbols': {'max_symbol_length': '16'},
    'logging': {'level': 'WARNING'},
}


class Environment(collections.abc.Mapping):
    """A collection of environmental settings."""

    def __init__(self, name: str) -> None:
        self.name = name
        """The name of the configuration section to select."""
        self._package = f"{__package__}.{self.name}"
        home = pathlib.Path('~').expanduser()
        paths = [
            pathlib.Path.cwd(), # The current working directory
            home, # The user's home directory
            home / '.config', # Linux standard (local)
            '/etc/caliper', # Linux standard (global)
            os.environ.get('CALIPER_INI'), # A known environment variable
            pathlib.Path(__file__).parent, # The package top
        ]
        config = configparser.ConfigParser()
        config.read_dict(_DEFAULTS)
        path = iotools.search(paths, 'caliper.ini')
        if path is not None:
            config.read(path)
        if not config.has_section(self.name):
            config.add_section(self.name)
        self._config = config[self.name]
        self.path = path

    def __len__(self) -> int:
        """The number of available parameter values."""
        return len(self._config)

    def __iter__(self):
        """Iterate over available parameter values."""
        yield from self._config

    def __getitem__(self, key: str):
        """Access parameter values by mapping key."""
        if key in self._config:
            return self._config[key]
        raise KeyError(
            f"{self._package} has no value for {key!r}"
        ) from None

    def getint(self, key: str) -> int:
        """Access a parameter value as an integer."""
        return int(self[key])

    def __str__(self) -> str:
        return json.dumps(
            dict(self._config),
            indent=4,
            sort_keys=True,
        )

    def __repr__(self) -> str:
        return f"{self._package}({self.path}):\n{self}"


def configure_logging(level: typing.Union[str, int]=None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Parameters
    ----------
    level : string or int, optional
        The logging level. The default value comes from the ``[logging]``
        section of ``caliper.ini``.

    Returns
    -------
    logging.Logger
        The package logger. Repeated calls update the level but do not add
        another handler.
    """
    if level is None:
        level = Environment('logging')['level']
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(__name__)
    logger.setLevel(level)
    if not any(
        isinstance(handler, logging.StreamHandler)
        for handler in logger.handlers
    ):
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
