"""Named, dynamically typed per-element property arrays and their container."""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic, TypeVar

_log = logging.getLogger(__name__)

T = TypeVar("T")


class PropertyArray(Generic[T]):
    """A named array of values that all share a default."""

    def __init__(self, name: str, default: T = None) -> None:
        self.name = name
        self.default = default
        self._data: list[T] = []
        self._capacity = 0

    @property
    def value_type(self) -> type:
        """The type of the default value."""
        return type(self.default)

    @property
    def capacity(self) -> int:
        """Number of elements reserved for."""
        return max(self._capacity, len(self._data))

    def _fresh(self) -> T:
        return copy.deepcopy(self.default)

    def reserve(self, n: int) -> None:
        """Reserve room for ``n`` elements."""
        if n < 0:
            raise ValueError("cannot reserve a negative number of elements")
        self._capacity = max(self._capacity, n)

    def resize(self, n: int) -> None:
        """Resize to ``n`` elements, filling new ones with the default."""
        if n < 0:
            raise ValueError("cannot resize to a negative number of elements")
        current = len(self._data)
        if n < current:
            del self._data[n:]
        else:
            self._data.extend(self._fresh() for _ in range(n - current))

    def free_memory(self) -> None:
        """Drop any reserved room beyond the current size."""
        self._capacity = len(self._data)

    def push_back(self) -> None:
        """Append one element holding the default."""
        self._data.append(self._fresh())

    def swap(self, i0: int, i1: int) -> None:
        """Exchange the elements at ``i0`` and ``i1``."""
        self._check(i0)
        self._check(i1)
        self._data[i0], self._data[i1] = self._data[i1], self._data[i0]

    def clone(self) -> "PropertyArray[T]":
        """Return a deep copy of this array."""
        other: PropertyArray[T] = PropertyArray(self.name, copy.deepcopy(self.default))
        other._data = copy.deepcopy(self._data)
        other._capacity = self._capacity
        return other

    def vector(self) -> list[T]:
        """The underlying list."""
        return self._data

    def _check(self, idx: int) -> None:
        if not 0 <= idx < len(self._data):
            raise IndexError(f"index {idx} out of range for property '{self.name}'")

    def __getitem__(self, idx: int) -> T:
        self._check(idx)
        return self._data[idx]

    def __setitem__(self, idx: int, value: T) -> None:
        self._check(idx)
        self._data[idx] = value

    def __len__(self) -> int:
        return len(self._data)


class Property(Generic[T]):
    """A handle to a property array; invalid when it refers to none."""

    def __init__(self, array: PropertyArray[T] | None = None) -> None:
        self._array = array

    @property
    def name(self) -> str:
        return self._valid_array().name

    def _valid_array(self) -> PropertyArray[T]:
        if self._array is None:
            raise ValueError("invalid property")
        return self._array

    def reset(self) -> None:
        """Detach the handle from its array."""
        self._array = None

    def __bool__(self) -> bool:
        return self._array is not None

    def __getitem__(self, idx: int) -> T:
        return self._valid_array()[idx]

    def __setitem__(self, idx: int, value: T) -> None:
        self._valid_array()[idx] = value

    def vector(self) -> list[T]:
        """The underlying list of the array."""
        return self._valid_array().vector()


class PropertyContainer:
    """A set of property arrays that are kept at the same size."""

    def __init__(self) -> None:
        self._arrays: list[PropertyArray[Any]] = []
        self._size = 0

    def _find(self, name: str) -> PropertyArray[Any] | None:
        return next((a for a in self._arrays if a.name == name), None)

    def size(self) -> int:
        """Current number of elements in each array."""
        return self._size

    def n_properties(self) -> int:
        """Number of property arrays."""
        return len(self._arrays)

    def properties(self) -> list[str]:
        """Names of all properties, in insertion order."""
        return [a.name for a in self._arrays]

    def add(self, name: str, default: Any = None) -> Property[Any]:
        """Add a property; returns an invalid property if the name is taken."""
        if self._find(name) is not None:
            _log.warning(
                'A property with name "%s" already exists. Returning invalid property.',
                name,
            )
            return Property()
        array: PropertyArray[Any] = PropertyArray(name, default)
        array.resize(self._size)
        self._arrays.append(array)
        return Property(array)

    def exists(self, name: str) -> bool:
        """Whether a property of this name exists."""
        return self._find(name) is not None

    def get(self, name: str) -> Property[Any]:
        """The property of this name, or an invalid property."""
        return Property(self._find(name))

    def get_or_add(self, name: str, default: Any = None) -> Property[Any]:
        """The property of this name, created first if needed."""
        prop = self.get(name)
        if not prop:
            prop = self.add(name, default)
        return prop

    def get_type(self, name: str) -> type | None:
        """Type of the named property's values, or None if it does not exist."""
        array = self._find(name)
        return array.value_type if array is not None else None

    def remove(self, prop: Property[Any]) -> None:
        """Delete the property and invalidate the handle."""
        for i, array in enumerate(self._arrays):
            if array is prop._array:
                del self._arrays[i]
                prop.reset()
                break

    def clear(self) -> None:
        """Delete all properties."""
        self._arrays.clear()
        self._size = 0

    def reserve(self, n: int) -> None:
        """Reserve room for ``n`` elements in all arrays."""
        for array in self._arrays:
            array.reserve(n)

    def resize(self, n: int) -> None:
        """Resize all arrays to ``n`` elements."""
        for array in self._arrays:
            array.resize(n)
        self._size = n

    def free_memory(self) -> None:
        """Drop reserved room in all arrays."""
        for array in self._arrays:
            array.free_memory()

    def push_back(self) -> None:
        """Append one default element to every array."""
        for array in self._arrays:
            array.push_back()
        self._size += 1

    def swap(self, i0: int, i1: int) -> None:
        """Exchange elements ``i0`` and ``i1`` in all arrays."""
        for array in self._arrays:
            array.swap(i0, i1)

    def copy(self) -> "PropertyContainer":
        """Return a deep copy of the container and all its arrays."""
        other = PropertyContainer()
        other._arrays = [a.clone() for a in self._arrays]
        other._size = self._size
        return other