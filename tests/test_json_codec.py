import pytest

from utils.json_codec import BodyDecodeError, decode_body, decode_object, encode_body


def test_decode_body_reads_any_json_document():
    assert decode_body(b'{"amount": 5}') == {"amount": 5}
    assert decode_body(b"[1, 2]") == [1, 2]
    assert decode_body("\"café\"".encode("utf-8")) == "café"


@pytest.mark.parametrize(
    "raw",
    [b"", b"{not json", b'{"amount": 5', b"\xff\xfe\x00", b'{"amount": NaN}', b"[Infinity]", b'{"amount": 1e999}'],
)
def test_decode_body_rejects_malformed_input(raw):
    with pytest.raises(BodyDecodeError):
        decode_body(raw)


def test_decode_object_returns_the_fields():
    assert decode_object(b'{"amount": "5", "date": "2024-01-01"}') == {"amount": "5", "date": "2024-01-01"}


@pytest.mark.parametrize("raw", [b"[]", b"[1, 2]", b"42", b'"text"', b"true"])
def test_decode_object_non_objects_have_no_fields(raw):
    assert decode_object(raw) == {}


def test_decode_object_rejects_null():
    with pytest.raises(BodyDecodeError):
        decode_object(b"null")


def test_decode_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode_object(b"nope")


def test_encode_body_is_compact_utf8():
    assert encode_body({"id": 4, "amount": "25.00"}) == b'{"id":4,"amount":"25.00"}'
    assert encode_body(["€"]) == "[\"€\"]".encode("utf-8")
