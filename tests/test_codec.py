from __future__ import annotations

import pytest

from hpoon.codec import LAST_MARKED_KEY, decode_line, encode_line
from hpoon.exceptions import CorruptLine, InvalidMarkName, LineDecodeError, MalformedLine


@pytest.mark.parametrize(
    "path",
    [
        "/tmp/foo",
        "/tmp/???",
        "/path/with/many/separators/",
        "/tmp/line\nbreak",
        "/home/usér/dökümanlar/日本語",
        "/tmp/raw-\udcff-byte",
        "",
    ],
)
def test_decode_returns_encoded_path_verbatim(path):
    assert decode_line(encode_line("myfile", path)) == ("myfile", path)


def test_encode_line_keeps_key_readable():
    line = encode_line("proj", "/tmp/foo")
    assert line == "proj/L3RtcC9mb28="
    assert "\n" not in encode_line("proj", "/a\nb")


def test_decode_line_accepts_separator_inside_base64_value():
    line = encode_line("q", "/tmp/???")
    assert line == "q/L3RtcC8/Pz8="
    assert decode_line(line) == ("q", "/tmp/???")


def test_encode_line_for_last_marked_key():
    assert encode_line(LAST_MARKED_KEY, "/tmp/foo").startswith("_/")


@pytest.mark.parametrize("key", ["a/b", "a\nb"])
def test_encode_line_rejects_keys_that_cannot_round_trip(key):
    with pytest.raises(InvalidMarkName):
        encode_line(key, "/tmp/foo")


@pytest.mark.parametrize("line", ["", "no-separator"])
def test_decode_line_rejects_line_without_separator(line):
    with pytest.raises(MalformedLine):
        decode_line(line)


@pytest.mark.parametrize("value", ["not base64!", "L3RtcC9mb28", "é", "many/parts"])
def test_decode_line_rejects_invalid_base64(value):
    with pytest.raises(LineDecodeError) as excinfo:
        decode_line(f"name/{value}")
    assert isinstance(excinfo.value, CorruptLine)
