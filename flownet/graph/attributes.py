"""Attribute bags shared between graph elements and their callers."""

from abc import abstractmethod
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from .errors import InvalidArgumentError


def _check_name(name: Any) -> str:
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f"Attribute name must be a string, got {type(name).__name__}", "name"
        )
    return name


class AttributeBag(MutableMapping[str, Any]):
    """A string-keyed attribute store.

    Subclasses provide the mapping protocol; the accessor methods below are
    shared so every bag reads the same way as the elements that own it.
    """

    @abstractmethod
    def __getitem__(self, name: str) -> Any: ...

    @abstractmethod
    def __setitem__(self, name: str, value: Any) -> None: ...

    @abstractmethod
    def __delitem__(self, name: str) -> None: ...

    @abstractmethod
    def __iter__(self) -> Iterator[str]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Get an attribute value, or `default` if it is not set."""
        return self.get(_check_name(name), default)

    def set_attribute(self, name: str, value: Any) -> None:
        """Insert or overwrite an attribute."""
        self[_check_name(name)] = value

    def get_attributes(self) -> dict[str, Any]:
        """Get a snapshot of all attributes."""
        return dict(self.items())

    def set_attributes(self, attributes: Mapping[str, Any]) -> None:
        """Insert or overwrite every attribute in `attributes`."""
        for name, value in attributes.items():
            self.set_attribute(name, value)


class AttributeBagReference(AttributeBag):
    """Attribute bag backed by an existing dict.

    The dict is shared, not copied: changes made through the bag are seen
    by the owner of the dict and the other way round.
    """

    def __init__(self, attributes: dict[str, Any]):
        self._attributes = attributes

    def __getitem__(self, name: str) -> Any:
        return self._attributes[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._attributes[_check_name(name)] = value

    def __delitem__(self, name: str) -> None:
        del self._attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"AttributeBagReference({self._attributes!r})"


class AttributeBagNamespaced(AttributeBag):
    """View on another bag that prefixes every key.

    Only keys starting with the prefix are visible, with the prefix
    stripped, so a tool can keep its attributes apart from everyone else's.
    """

    def __init__(self, bag: AttributeBag, prefix: str):
        self._bag = bag
        self._prefix = _check_name(prefix)

    @property
    def prefix(self) -> str:
        """Get the key prefix of this view."""
        return self._prefix

    def __getitem__(self, name: str) -> Any:
        return self._bag[self._prefix + _check_name(name)]

    def __setitem__(self, name: str, value: Any) -> None:
        self._bag[self._prefix + _check_name(name)] = value

    def __delitem__(self, name: str) -> None:
        del self._bag[self._prefix + _check_name(name)]

    def __iter__(self) -> Iterator[str]:
        offset = len(self._prefix)
        # Snapshot so callers can delete while iterating
        for name in list(self._bag):
            if name.startswith(self._prefix):
                yield name[offset:]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"AttributeBagNamespaced({self._prefix!r}, {self.get_attributes()!r})"
