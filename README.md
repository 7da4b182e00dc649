# tbxdemos

A handful of small, self-contained demonstrations of everyday data handling.

## What is in the package

- `tbxdemos.element`
  - `Element(id, data=b"")`: a frozen dataclass holding a 16-bit identifier
    (0 to 0xFFFF) and up to eight data bytes. Values outside those limits raise
    `ValueError`.
  - `format_element(element, prefix="")`: renders an element as
    `"id: 0123h 00 01 ... "`, the identifier in four hex digits followed by each
    data byte in two.
- `tbxdemos.dynamicarray`
  - `DynamicArray`: a growable array with `append()`, indexing, item assignment,
    `del`, `len()`, iteration and `clear()`. Indices are non-negative positions;
    an index with no element behind it raises `IndexError`, a non-integer index
    raises `TypeError`.
- `tbxdemos.fifobuffer`
  - `FifoBuffer(max_size=0)`: a first-in-first-out buffer with `store()`,
    `retrieve()`, `len()`, `clear()` and a read-only `max_size`. A `max_size` of
    zero lets the buffer grow without limit; a positive value caps it.
  - `BufferFullError` is raised by `store()` on a full fixed size buffer,
    `BufferEmptyError` by `retrieve()` on an empty one.
- `tbxdemos.hexdump`
  - `format_data(data, bytes_per_line=16)`: renders bytes as two-digit hex
    values, each followed by a space, with a newline after every full line and
    after a final partial line. Empty data or a non-positive line width raise
    `ValueError`.
- `tbxdemos.randomdata`
  - `RandomGenerator(seed_handler=None)`: a 32-bit random number generator.
    `next_number()` returns the next value; the seed is asked of `seed_handler`
    once, on first use, or taken from the operating system when no handler is
    given.
  - `fill_random(size=32, generator=None)`: returns `size` random bytes, drawn
    32 bits at a time in little-endian order.
- `tbxdemos.securedata`
  - `crc16(data)`: CRC-16/CCITT-FALSE (polynomial 0x1021, initial value 0xFFFF).
  - `SecureVault(key=SECURE_KEY, size=256, ciphertext=None, crc=0)`: holds one
    data block encrypted with AES-256 in ECB mode, with the CRC16 of the plain
    data kept beside it. `store(data)` checksums and encrypts; `retrieve()`
    decrypts and checks the CRC16, raising `IntegrityError` on a mismatch. The
    `ciphertext` and `crc` properties give the stored content, and passing them
    to the constructor reopens a vault over it. The key must be 32 bytes and the
    size a positive multiple of 16.

Each of `dynamicarray`, `fifobuffer`, `randomdata` and `securedata` also has a
`run_demo(out=None)` function that walks through its container or data and
writes each step to `out` (standard output by default); `randomdata.run_demo`
takes a `seed` as well.

## Installation

```
pip install .
```

Python 3.10 or later is required.

## Running the demos

```
tbx-dynamicarray
tbx-fifobuffer
tbx-randomdata
tbx-randomdata --seed 1234
tbx-securedata
```

`tbx-randomdata` accepts `--seed` to make its output repeatable; without it a
fresh seed is used on every run.

## Using the library

```python
from tbxdemos.element import Element, format_element
from tbxdemos.fifobuffer import FifoBuffer, BufferFullError

fifo = FifoBuffer(3)
fifo.store(Element(0x123, bytes([0xAA, 0x55])))
oldest = fifo.retrieve()
print(format_element(oldest))   # id: 0123h AA 55
```

```python
from tbxdemos.dynamicarray import DynamicArray

array = DynamicArray()
array.append("first")
array.append("second")
array[0], array[1] = array[1], array[0]
del array[0]
```

```python
from tbxdemos.securedata import SecureVault

vault = SecureVault()
vault.store(bytes(range(256)))
assert vault.retrieve() == bytes(range(256))
```

## What it does not do

The vault keeps its block in memory only; it does not write to a file or any
other storage. Saving `ciphertext` and `crc` and handing them back to
`SecureVault` is left to the caller. The built-in key is a fixed demonstration
value and is not meant to protect real data.

## Running the tests

```
pip install .[test]
pytest
```