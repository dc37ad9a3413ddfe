import collections.abc
import typing


class ReprStrMixin:
    """Build `__repr__` from `__str__`.

    Subclasses define `__str__`. The representation wraps it in the class
    name, qualified by the module's path within this package.
    """

    def __str__(self) -> str:
        return object.__repr__(self)

    def __repr__(self) -> str:
        module = self.__module__.replace('caliper.', '')
        return f"{module}.{self.__class__.__qualname__}({self})"


class TableError(Exception):
    """Base class for errors during table look-up."""


class TableKeyError(TableError, KeyError):
    """A requested key is not common to all entries."""

    def __init__(self, key: str) -> None:
        self.key = key

    def __str__(self) -> str:
        return f"Table has no common key {self.key!r}"


class TableLookupError(TableError):
    """No entry matches the requested key-value pairs."""

    def __init__(self, criteria: typing.Mapping[str, typing.Any]) -> None:
        self.criteria = dict(criteria)

    def __str__(self) -> str:
        joined = " and ".join(f"{k}={v}" for k, v in self.criteria.items())
        return f"Table has no entry with {joined}"


class AmbiguousRequestError(TableLookupError):
    """More than one entry matches the requested key-value pairs."""

    def __str__(self) -> str:
        joined = " and ".join(f"'{k}={v}'" for k, v in self.criteria.items())
        if len(self.criteria) == 1:
            return f"The search criterion {joined} is ambiguous"
        return f"The search criteria {joined} are ambiguous"


Entry = typing.Mapping[str, typing.Any]


class Table(collections.abc.Sequence):
    """An ordered collection of mappings with keyword look-up.

    Keys present in every entry are the columns of the table. Calling an
    instance with keyword arguments selects the entry that matches them::

        prefixes = Table(_prefixes)
        kilo = prefixes(name='kilo')
    """

    def __init__(self, entries: typing.Iterable[Entry]) -> None:
        self._entries = list(entries)
        if self._entries:
            keys = [set(entry) for entry in self._entries]
            self.keys = set.intersection(*keys)
        else:
            self.keys = set()

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __call__(self, strict: bool=False, **criteria) -> Entry:
        """Select the entry that matches the given key-value pairs.

        By default, the search applies criteria in the order given and stops
        as soon as one entry remains. A strict search applies every
        criterion before deciding.

        Raises
        ------
        `~iterables.TableKeyError`
            A requested key is not common to all entries.

        `~iterables.TableLookupError`
            No entry matches.

        `~iterables.AmbiguousRequestError`
            More than one entry matches all the criteria.
        """
        subset = self._entries
        for key, value in criteria.items():
            if key not in self.keys:
                raise TableKeyError(key)
            subset = [entry for entry in subset if entry[key] == value]
            if not strict and len(subset) == 1:
                return subset[0]
        if len(subset) == 1:
            return subset[0]
        if subset:
            raise AmbiguousRequestError(criteria)
        raise TableLookupError(criteria)
