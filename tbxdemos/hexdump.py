"""Hexadecimal rendering of byte buffers."""

from __future__ import annotations


def format_data(data: bytes, bytes_per_line: int = 16) -> str:
    """Render bytes as two-digit hex values, ``bytes_per_line`` to a line.

    Every byte is followed by a space, every full line by a newline, and a
    final partial line is closed with a newline as well.
    """
    data = bytes(data)
    if not data:
        raise ValueError("there is no data to display")
    if bytes_per_line <= 0:
        raise ValueError(f"bytes_per_line must be positive, got {bytes_per_line}")
    lines = (
        "".join(f"{byte:02X} " for byte in data[start:start + bytes_per_line]) + "\n"
        for start in range(0, len(data), bytes_per_line)
    )
    return "".join(lines)