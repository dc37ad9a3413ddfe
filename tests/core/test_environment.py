import logging

import pytest

import caliper
from caliper.core.system import MeasurementSystem


def test_environment_defaults():
    """Each section should provide its default values."""
    env = caliper.Environment('reduction')
    assert env.getint('max_recursions') == 100
    assert 'max_recursions' in env
    assert caliper.Environment('symbols').getint('max_symbol_length') == 16
    assert caliper.Environment('logging')['level'] == 'WARNING'


def test_environment_missing():
    """A missing value should raise a helpful error."""
    env = caliper.Environment('reduction')
    with pytest.raises(KeyError, match="caliper.reduction has no value"):
        env['nonsense']
    empty = caliper.Environment('undefined')
    assert len(empty) == 0
    assert list(empty) == []


def test_environment_file(tmp_path, monkeypatch):
    """Values from a configuration file should override the defaults."""
    path = tmp_path / 'caliper.ini'
    path.write_text("[reduction]\nmax_recursions = 7\n")
    monkeypatch.chdir(tmp_path)
    env = caliper.Environment('reduction')
    assert env.getint('max_recursions') == 7
    assert caliper.Environment('symbols').getint('max_symbol_length') == 16
    assert MeasurementSystem().max_recursions == 7


def test_configure_logging():
    """Repeated configuration should not duplicate handlers."""
    logger = caliper.configure_logging('debug')
    assert logger.level == logging.DEBUG
    count = len(logger.handlers)
    logger = caliper.configure_logging(logging.INFO)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == count
    logger.setLevel(logging.NOTSET)
