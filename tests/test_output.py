import io
import sys

import pytest

from fractview.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_character():
    stream = io.StringIO()
    put_char("A", stream)
    assert stream.getvalue() == "A"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("AB", io.StringIO())


def test_put_str_writes_text_unchanged():
    stream = io.StringIO()
    put_str("Hello", stream)
    put_str(" world", stream)
    assert stream.getvalue() == "Hello world"


def test_put_endl_adds_newline():
    stream = io.StringIO()
    put_endl("Hello", stream)
    assert stream.getvalue() == "Hello\n"


def test_put_number_negative():
    stream = io.StringIO()
    put_number(-142, stream)
    assert stream.getvalue() == "-142"


@pytest.mark.parametrize("n", [0, 7, 42, -2147483648, 2147483647])
def test_put_number_round_trips(n):
    stream = io.StringIO()
    put_number(n, stream)
    assert int(stream.getvalue()) == n


def test_default_stream_is_stdout(monkeypatch):
    captured = io.StringIO()
    monkeypatch.setattr(sys, "stdout", captured)
    put_str("Hello")
    put_endl("")
    assert captured.getvalue() == "Hello\n"