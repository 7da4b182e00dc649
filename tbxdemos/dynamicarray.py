"""A growable array of elements and the demo that exercises it."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from .element import Element, format_element


class DynamicArray:
    """An array that grows as elements are appended.

    Indices are plain non-negative positions; an index with no element
    behind it raises IndexError.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"array index must be an integer, not {type(index).__name__}")
        if not 0 <= index < len(self._items):
            raise IndexError(f"no element at index {index}")
        return index

    def append(self, element: Any) -> None:
        """Store the element at the end of the array."""
        self._items.append(element)

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, element: Any) -> None:
        self._items[self._check_index(index)] = element

    def __delitem__(self, index: int) -> None:
        del self._items[self._check_index(index)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()


def _show(array: DynamicArray, out: TextIO) -> None:
    for index, element in enumerate(array):
        out.write(f"  [{index}] {format_element(element)}[OK]\n")


def run_demo(out: TextIO | None = None) -> None:
    """Walk a dynamic array through adds, changes, swaps and removals."""
    if out is None:
        out = sys.stdout
    element_a = Element(0x123, bytes([0, 1, 2, 3, 4, 5, 6, 7]))
    element_b = Element(0x456, bytes([0xFF, 0xEE, 0xDD, 0xCC]))
    element_c = Element(0x789, bytes([0xAA, 0x55]))

    out.write("Creating a new dynamic array..")
    array = DynamicArray()
    out.write("[OK]\n")

    out.write("Adding a few items to the array..\n")
    for element in (element_a, element_b, element_c):
        array.append(element)
    _show(array, out)

    out.write("Changing the item at index 1..\n")
    array[1] = Element(0xFFFF, bytes([0xFF, 0xFF]))
    _show(array, out)

    out.write("Swapping the first and the last items..\n")
    last = len(array) - 1
    array[0], array[last] = array[last], array[0]
    _show(array, out)

    out.write("Removing the first and the last items..\n")
    del array[0]
    del array[len(array) - 1]
    _show(array, out)

    out.write("Adding four more items to the array..\n")
    for value in range(1, 5):
        array.append(Element(value, bytes([value])))
    _show(array, out)

    out.write("Deleting the array..")
    array.clear()
    out.write("[OK]\n")


def main(argv: list[str] | None = None) -> int:
    """Run the dynamic array demo on standard output."""
    run_demo(sys.stdout)
    return 0