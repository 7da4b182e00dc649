import io

import pytest

from tbxdemos.element import Element
from tbxdemos.fifobuffer import (
    BufferEmptyError,
    BufferFullError,
    FifoBuffer,
    main,
    run_demo,
)


def _elements():
    return [
        Element(0x123, bytes([0, 1, 2, 3, 4, 5, 6, 7])),
        Element(0x456, bytes([0xFF, 0xEE, 0xDD, 0xCC])),
        Element(0x789, bytes([0xAA, 0x55])),
        Element(0xABC, bytes([0x11, 0x22, 0x33])),
    ]


def test_retrieve_returns_elements_in_store_order():
    buffer = FifoBuffer()
    items = _elements()
    for item in items:
        buffer.store(item)
    assert [buffer.retrieve() for _ in range(len(items))] == items
    assert len(buffer) == 0


def test_fixed_size_buffer_rejects_extra_element():
    buffer = FifoBuffer(3)
    items = _elements()
    for item in items[:3]:
        buffer.store(item)
    with pytest.raises(BufferFullError):
        buffer.store(items[3])
    assert len(buffer) == 3
    assert buffer.retrieve() == items[0]


def test_fixed_size_buffer_accepts_again_after_retrieve():
    buffer = FifoBuffer(3)
    items = _elements()
    for item in items[:3]:
        buffer.store(item)
    buffer.retrieve()
    buffer.store(items[3])
    assert [buffer.retrieve() for _ in range(3)] == items[1:]


def test_variable_size_buffer_grows():
    buffer = FifoBuffer(0)
    for value in range(100):
        buffer.store(value)
    assert len(buffer) == 100
    assert buffer.retrieve() == 0
    assert buffer.max_size == 0


def test_retrieve_from_empty_buffer_raises():
    buffer = FifoBuffer(2)
    with pytest.raises(BufferEmptyError):
        buffer.retrieve()
    buffer.store("a")
    assert buffer.retrieve() == "a"
    with pytest.raises(BufferEmptyError):
        buffer.retrieve()


def test_clear_empties_buffer():
    buffer = FifoBuffer(3)
    for item in _elements()[:3]:
        buffer.store(item)
    buffer.clear()
    assert len(buffer) == 0
    with pytest.raises(BufferEmptyError):
        buffer.retrieve()


def test_negative_max_size_is_rejected():
    with pytest.raises(ValueError):
        FifoBuffer(-1)


def test_non_integer_max_size_is_rejected():
    with pytest.raises(TypeError):
        FifoBuffer("3")


def test_demo_output_lines():
    out = io.StringIO()
    run_demo(out)
    lines = out.getvalue().splitlines()
    assert "*       Fixed size FIFO buffer                  *" in lines
    assert "*       Variable size FIFO buffer               *" in lines
    assert "Add a 4th element, which should fail..[OK]" in lines
    assert "  id: 0123h 00 01 02 03 04 05 06 07 [OK]" in lines
    assert lines.count("Deleting the FIFO buffer..[OK]") == 2


def test_demo_retrieves_in_fifo_order():
    out = io.StringIO()
    run_demo(out)
    text = out.getvalue()
    second = text.split("Variable size FIFO buffer")[1]
    retrieved = second.split("Retrieving all elements..\n")[1].splitlines()[:4]
    assert [line.split()[1] for line in retrieved] == ["0123h", "0456h", "0789h", "0ABCh"]


def test_main_returns_zero(capsys):
    assert main() == 0
    assert "Retrieving all elements.." in capsys.readouterr().out