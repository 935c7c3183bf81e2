import pytest

from doublehmac.coercion import to_bytes
from doublehmac.errors import InvalidInputType


def test_text_is_utf8():
    assert to_bytes("abc") == b"abc"
    assert to_bytes("\u00e9") == b"\xc3\xa9"
    assert to_bytes("") == b""


def test_no_unicode_normalization():
    composed = "\u00e9"
    decomposed = "e\u0301"
    assert to_bytes(composed) != to_bytes(decomposed)


def test_bytes_like():
    assert to_bytes(b"\x01\x02") == b"\x01\x02"
    assert to_bytes(bytearray(b"\x01\x02")) == b"\x01\x02"
    assert to_bytes(memoryview(b"\x01\x02")) == b"\x01\x02"
    assert type(to_bytes(bytearray(b"x"))) is bytes


@pytest.mark.parametrize("value", [1, 1.5, None, True, [1, 2, 3], {"a": 1}, object()])
def test_rejects_other_types(value):
    with pytest.raises(InvalidInputType) as excinfo:
        to_bytes(value)
    assert type(value).__name__ in str(excinfo.value)


def test_invalid_input_type_is_type_error():
    with pytest.raises(TypeError):
        to_bytes(42)
