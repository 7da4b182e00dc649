import io

import pytest

from tbxdemos.dynamicarray import DynamicArray, main, run_demo
from tbxdemos.element import Element, format_element


@pytest.fixture
def filled():
    array = DynamicArray()
    for value in range(3):
        array.append(Element(value, bytes([value])))
    return array


def test_new_array_is_empty():
    array = DynamicArray()
    assert len(array) == 0
    assert list(array) == []


def test_append_and_get(filled):
    assert len(filled) == 3
    assert [e.id for e in filled] == [0, 1, 2]
    assert filled[1] == Element(1, b"\x01")


def test_set_replaces_element(filled):
    replacement = Element(0xFFFF, b"\xff\xff")
    filled[1] = replacement
    assert filled[1] == replacement
    assert len(filled) == 3


def test_delete_shifts_following(filled):
    del filled[0]
    assert [e.id for e in filled] == [1, 2]
    del filled[len(filled) - 1]
    assert [e.id for e in filled] == [1]


@pytest.mark.parametrize("index", [3, 10, -1])
def test_get_out_of_range(filled, index):
    with pytest.raises(IndexError):
        filled[index]
    assert len(filled) == 3
    assert [e.id for e in filled] == [0, 1, 2]


@pytest.mark.parametrize("index", [3, -1])
def test_set_out_of_range(filled, index):
    with pytest.raises(IndexError):
        filled[index] = Element(9)
    assert len(filled) == 3


def test_delete_out_of_range(filled):
    with pytest.raises(IndexError):
        del filled[3]
    assert len(filled) == 3


def test_non_integer_index(filled):
    with pytest.raises(TypeError):
        filled["0"]
    assert len(filled) == 3
    assert filled[0] == Element(0, b"\x00")


def test_clear(filled):
    filled.clear()
    assert len(filled) == 0
    with pytest.raises(IndexError):
        filled[0]


def test_iteration_snapshot_allows_mutation(filled):
    seen = []
    for element in filled:
        seen.append(element.id)
        filled.append(Element(element.id + 10))
    assert seen == [0, 1, 2]
    assert len(filled) == 6


def test_demo_output():
    out = io.StringIO()
    run_demo(out)
    text = out.getvalue()
    lines = text.splitlines()
    assert lines[0] == "Creating a new dynamic array..[OK]"
    assert lines[-1] == "Deleting the array..[OK]"

    changed = Element(0xFFFF, b"\xff\xff")
    removing = lines.index("Removing the first and the last items..")
    adding = lines.index("Adding four more items to the array..")
    assert lines[removing + 1 : adding] == [f"  [0] {format_element(changed)}[OK]"]

    final = lines[adding + 1 : -1]
    expected_tail = [
        f"  [{value}] {format_element(Element(value, bytes([value])))}[OK]"
        for value in range(1, 5)
    ]
    assert final == [f"  [0] {format_element(changed)}[OK]"] + expected_tail


def test_demo_swap_section():
    out = io.StringIO()
    run_demo(out)
    lines = out.getvalue().splitlines()
    swap = lines.index("Swapping the first and the last items..")
    first = Element(0x123, bytes(range(8)))
    last = Element(0x789, bytes([0xAA, 0x55]))
    assert lines[swap + 1] == f"  [0] {format_element(last)}[OK]"
    assert lines[swap + 3] == f"  [2] {format_element(first)}[OK]"


def test_main_writes_to_stdout(capsys):
    assert main() == 0
    captured = capsys.readouterr().out
    assert captured.startswith("Creating a new dynamic array..[OK]\n")
    assert captured.endswith("Deleting the array..[OK]\n")