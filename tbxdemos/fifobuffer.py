"""A first-in-first-out buffer of elements and the demo that exercises it."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from typing import Any, TextIO

from .element import Element, format_element

_RULE = "-------------------------------------------------\n"


class BufferFullError(Exception):
    """Raised when storing into a fixed size buffer that is already full."""


class BufferEmptyError(Exception):
    """Raised when retrieving from a buffer that holds no elements."""


class FifoBuffer:
    """A first-in-first-out buffer.

    A ``max_size`` of zero lets the buffer grow as needed; any positive
    value caps the number of elements it holds at once.
    """

    def __init__(self, max_size: int = 0) -> None:
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            raise TypeError(f"max_size must be an integer, not {type(max_size).__name__}")
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        self._max_size = max_size
        self._items: deque[Any] = deque()

    @property
    def max_size(self) -> int:
        """The element limit, or zero for a buffer without one."""
        return self._max_size

    def store(self, element: Any) -> None:
        """Append the element at the back of the buffer."""
        if self._max_size > 0 and len(self._items) >= self._max_size:
            raise BufferFullError(f"buffer already holds {self._max_size} elements")
        self._items.append(element)

    def retrieve(self) -> Any:
        """Remove and return the oldest element."""
        try:
            return self._items.popleft()
        except IndexError:
            raise BufferEmptyError("buffer holds no elements") from None

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()


def _banner(title: str, out: TextIO) -> None:
    out.write("\n")
    out.write(_RULE)
    out.write(f"*       {title:<40}*\n")
    out.write(_RULE)


def _store_all(buffer: FifoBuffer, elements: Iterable[Element], out: TextIO) -> None:
    for element in elements:
        buffer.store(element)
        out.write(f"{format_element(element, '  ')}[OK]\n")


def _drain(buffer: FifoBuffer, out: TextIO) -> None:
    out.write("Retrieving all elements..\n")
    while len(buffer) > 0:
        element = buffer.retrieve()
        out.write(f"{format_element(element, '  ')}[OK]\n")


def run_demo(out: TextIO | None = None) -> None:
    """Fill and drain a fixed size buffer, then a buffer without a limit."""
    if out is None:
        out = sys.stdout
    element1 = Element(0x123, bytes([0, 1, 2, 3, 4, 5, 6, 7]))
    element2 = Element(0x456, bytes([0xFF, 0xEE, 0xDD, 0xCC]))
    element3 = Element(0x789, bytes([0xAA, 0x55]))
    element4 = Element(0xABC, bytes([0x11, 0x22, 0x33]))

    _banner("Fixed size FIFO buffer", out)
    out.write("Creating a new FIFO buffer of 3 elements..")
    buffer = FifoBuffer(3)
    out.write("[OK]\n")

    out.write("Adding 3 elements..\n")
    _store_all(buffer, (element1, element2, element3), out)

    out.write("Add a 4th element, which should fail..")
    try:
        buffer.store(element4)
    except BufferFullError:
        out.write("[OK]\n")
    else:
        raise AssertionError("a full fixed size buffer accepted another element")

    _drain(buffer, out)
    out.write("Deleting the FIFO buffer..")
    buffer.clear()
    out.write("[OK]\n")

    _banner("Variable size FIFO buffer", out)
    out.write("Creating a new FIFO buffer of variable size..")
    buffer = FifoBuffer(0)
    out.write("[OK]\n")

    out.write("Adding 3 elements..\n")
    _store_all(buffer, (element1, element2, element3), out)

    out.write("Add a 4th element, which should now work..\n")
    _store_all(buffer, (element4,), out)

    _drain(buffer, out)
    out.write("Deleting the FIFO buffer..")
    buffer.clear()
    out.write("[OK]\n")


def main(argv: list[str] | None = None) -> int:
    """Run the FIFO buffer demo on standard output."""
    run_demo(sys.stdout)
    return 0