"""A vault that stores a data block encrypted and checksummed."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .hexdump import format_data

BLOCK_SIZE = 256
AES_BLOCK = 16

SECURE_KEY = bytes(
    [
        0x32, 0x72, 0x35, 0x75, 0x38, 0x78, 0x21, 0x41,
        0x25, 0x44, 0x2A, 0x47, 0x2D, 0x1A, 0x61, 0x50,
        0x64, 0x53, 0x67, 0x56, 0x6B, 0x59, 0x70, 0x33,
        0x73, 0x36, 0x76, 0x39, 0x79, 0x24, 0x42, 0x5E,
    ]
)


class IntegrityError(Exception):
    """Raised when retrieved data does not match its stored checksum."""


def crc16(data: bytes) -> int:
    """CRC-16/CCITT-FALSE: polynomial 0x1021, initial value 0xFFFF."""
    crc = 0xFFFF
    for byte in bytes(data):
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


class SecureVault:
    """Holds one data block encrypted with AES-256 in ECB mode.

    A CRC16 over the plain data is kept beside the ciphertext so that the
    data can be checked when it is retrieved. ``ciphertext`` and ``crc``
    may be given to open a vault over previously stored content.
    """

    def __init__(
        self,
        key: bytes = SECURE_KEY,
        size: int = BLOCK_SIZE,
        ciphertext: bytes | None = None,
        crc: int = 0,
    ) -> None:
        key = bytes(key)
        if len(key) != 32:
            raise ValueError(f"an AES-256 key holds 32 bytes, got {len(key)}")
        if size <= 0 or size % AES_BLOCK:
            raise ValueError(f"size must be a positive multiple of {AES_BLOCK}, got {size}")
        if ciphertext is None:
            ciphertext = bytes(size)
        ciphertext = bytes(ciphertext)
        if len(ciphertext) != size:
            raise ValueError(f"ciphertext must hold {size} bytes, got {len(ciphertext)}")
        self._cipher = Cipher(algorithms.AES(key), modes.ECB())
        self._size = size
        self._ciphertext = ciphertext
        self._crc = crc & 0xFFFF
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        """Number of data bytes in the block."""
        return self._size

    @property
    def ciphertext(self) -> bytes:
        """The encrypted block as it is stored."""
        with self._lock:
            return self._ciphertext

    @property
    def crc(self) -> int:
        """The CRC16 of the plain data, as stored."""
        with self._lock:
            return self._crc

    def store(self, data: bytes) -> None:
        """Checksum and encrypt the data, replacing what was stored."""
        data = bytes(data)
        if len(data) != self._size:
            raise ValueError(f"data must hold {self._size} bytes, got {len(data)}")
        encryptor = self._cipher.encryptor()
        ciphertext = encryptor.update(data) + encryptor.finalize()
        with self._lock:
            self._crc = crc16(data)
            self._ciphertext = ciphertext

    def retrieve(self) -> bytes:
        """Decrypt the stored block and return it after checking its CRC16."""
        with self._lock:
            ciphertext = self._ciphertext
            expected = self._crc
        decryptor = self._cipher.decryptor()
        data = decryptor.update(ciphertext) + decryptor.finalize()
        actual = crc16(data)
        if actual != expected:
            raise IntegrityError(
                f"stored data fails its checksum: {actual:04X}h instead of {expected:04X}h"
            )
        return data


def run_demo(out: TextIO | None = None) -> None:
    """Store a test block in a vault, read it back and verify it."""
    if out is None:
        out = sys.stdout
    test_data = bytes(range(BLOCK_SIZE))

    out.write("\nGenerating test data:\n")
    out.write(format_data(test_data, 32))
    out.write("[OK]\n")

    vault = SecureVault()
    out.write("\nStoring the data in a secure manner:\n")
    vault.store(test_data)
    out.write(format_data(vault.ciphertext, 32))
    out.write(f"CRC16 = {vault.crc:04X}h\n")
    out.write("[OK]\n")

    out.write("\nRetrieving the data:\n")
    retrieved = vault.retrieve()
    out.write(format_data(retrieved, 32))
    out.write("[OK]\n")

    out.write("\nVerifying that the data did not change:\n")
    out.write("[OK]\n" if retrieved == test_data else "[ERROR]\n")


def main(argv: list[str] | None = None) -> int:
    """Run the secure data demo on standard output."""
    run_demo(sys.stdout)
    return 0