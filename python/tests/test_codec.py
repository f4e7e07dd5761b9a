import pytest
from scylla_marshal.codec import VARCHAR, hex_to_text, text_to_hex


def test_varchar_round_trip_through_hex():
    assert text_to_hex("street") == "737472656574"
    assert hex_to_text("737472656574") == "street"
    assert hex_to_text("0x737472656574") == "street"


def test_varchar_handles_non_ascii_and_null():
    assert hex_to_text(text_to_hex("zażółć")) == "zażółć"
    assert VARCHAR.deserialize(None) is None
    assert VARCHAR.serialize(None) == b""


@pytest.mark.parametrize("bad", ["7", "zz", "ff"])
def test_hex_to_text_rejects_bad_input(bad: str):
    # odd length, non hex, invalid utf-8
    with pytest.raises(ValueError):
        hex_to_text(bad)
