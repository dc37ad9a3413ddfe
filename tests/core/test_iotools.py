import pathlib

from caliper.core import iotools


def test_fullpath(tmp_path: pathlib.Path):
    """Paths should come back absolute and resolved."""
    assert iotools.fullpath(tmp_path / 'a' / '..') == tmp_path.resolve()
    assert iotools.fullpath('~') == pathlib.Path.home().resolve()


def test_search(tmp_path: pathlib.Path):
    """The first directory that contains the file should win."""
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    first.mkdir()
    second.mkdir()
    (second / 'caliper.ini').write_text('[reduction]\n')
    paths = [None, tmp_path / 'missing', first, second]
    found = iotools.search(paths, 'caliper.ini')
    assert found == (second / 'caliper.ini').resolve()
    (first / 'caliper.ini').write_text('[reduction]\n')
    found = iotools.search(paths, 'caliper.ini')
    assert found == (first / 'caliper.ini').resolve()
    assert iotools.search([first, second], 'other.ini') is None
