"""Demonstrations of a dynamic array, a FIFO buffer, random data and an encrypted data vault."""

__version__ = "0.1.0"