import os
import pathlib
import typing


PathLike = typing.Union[str, os.PathLike]


def fullpath(path: PathLike) -> pathlib.Path:
    """Expand the user wildcard in `path` and fully resolve it."""
    return pathlib.Path(path).expanduser().resolve()


def search(
    paths: typing.Iterable[typing.Optional[PathLike]],
    name: str,
) -> typing.Optional[pathlib.Path]:
    """Find the first directory in `paths` that contains a file `name`.

    Members of `paths` that are `None`, or that are not existing
    directories, do not take part in the search.

    Returns
    -------
    `pathlib.Path` or `None`
        The full path to the file, or `None` if no directory contains it.
    """
    candidates = (fullpath(p) / name for p in paths if p is not None)
    for candidate in candidates:
        if candidate.parent.is_dir() and candidate.is_file():
            return candidate
    return None
