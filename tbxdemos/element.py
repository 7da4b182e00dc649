"""Data element stored by the demo containers."""

from __future__ import annotations

from dataclasses import dataclass

DATA_LEN_MAX = 8
ID_MAX = 0xFFFF


@dataclass(frozen=True)
class Element:
    """An identifier with up to eight data bytes."""

    id: int
    data: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= self.id <= ID_MAX:
            raise ValueError(f"element id {self.id!r} is outside 0..{ID_MAX:#x}")
        data = bytes(self.data)
        if len(data) > DATA_LEN_MAX:
            raise ValueError(
                f"element data holds {len(data)} bytes, at most {DATA_LEN_MAX} allowed"
            )
        object.__setattr__(self, "data", data)


def format_element(element: Element, prefix: str = "") -> str:
    """Render an element as its hex identifier followed by its data bytes."""
    parts = [f"{prefix}id: {element.id:04X}h "]
    parts.extend(f"{byte:02X} " for byte in element.data)
    return "".join(parts)