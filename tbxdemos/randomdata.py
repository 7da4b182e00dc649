"""Fill buffers with random data and display them."""

from __future__ import annotations

import argparse
import random
import secrets
import sys
from collections.abc import Callable
from typing import TextIO

from .hexdump import format_data

BUFFER_SIZE = 32
_WORD_MASK = 0xFFFFFFFF


class RandomGenerator:
    """A 32-bit random number generator seeded on first use.

    The seed comes from ``seed_handler``, which is called once, the first
    time a number is requested. Without a handler a fresh random seed is
    taken from the operating system.
    """

    def __init__(self, seed_handler: Callable[[], int] | None = None) -> None:
        self._seed_handler = seed_handler
        self._rng: random.Random | None = None

    def next_number(self) -> int:
        """Return the next random 32-bit unsigned number."""
        if self._rng is None:
            if self._seed_handler is None:
                seed = secrets.randbits(32)
            else:
                seed = int(self._seed_handler()) & _WORD_MASK
            self._rng = random.Random(seed)
        return self._rng.getrandbits(32)


def fill_random(size: int = BUFFER_SIZE, generator: RandomGenerator | None = None) -> bytes:
    """Return ``size`` random bytes, drawn 32 bits at a time in little-endian order."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if generator is None:
        generator = RandomGenerator()
    words = -(-size // 4)
    buffer = b"".join(
        generator.next_number().to_bytes(4, "little") for _ in range(words)
    )
    return buffer[:size]


def run_demo(out: TextIO | None = None, seed: int | None = None) -> None:
    """Fill two buffers with random data and display them."""
    if out is None:
        out = sys.stdout
    handler = None if seed is None else (lambda: seed)
    generator = RandomGenerator(handler)

    fixed_buffer = fill_random(BUFFER_SIZE, generator)
    out.write("\nRandom data stored in the compile-time allocated buffer:\n")
    out.write(format_data(fixed_buffer, 16))

    sized_buffer = bytearray(BUFFER_SIZE)
    sized_buffer[:] = fill_random(len(sized_buffer), generator)
    out.write("\nRandom data stored in the run-time allocated buffer:\n")
    out.write(format_data(bytes(sized_buffer), 16))


def main(argv: list[str] | None = None) -> int:
    """Run the random data demo on standard output."""
    parser = argparse.ArgumentParser(description="Fill buffers with random data.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the generator")
    args = parser.parse_args(argv)
    run_demo(sys.stdout, args.seed)
    return 0