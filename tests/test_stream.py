"""Unit tests for stty_serial._stream."""

import time
import tty

import pytest

from stty_serial import _stream


@pytest.fixture
def raw_pty(pty_serial):
    tty.setraw(pty_serial.simulated.fileno())
    return pty_serial


def test_open_adds_binary_mode(raw_pty):
    stream = _stream.open_device_stream(raw_pty.path, "r+", 0)
    try:
        assert isinstance(stream, _stream.ByteStream)
        assert stream._raw.mode == "rb+"
        assert not stream.closed
    finally:
        stream.close()
    assert stream.closed


def test_open_missing_device(tmp_path):
    with pytest.raises(FileNotFoundError):
        _stream.open_device_stream(str(tmp_path / "ttyS99"), "r+b", 0)


def test_read_nothing_available_returns_immediately(raw_pty):
    stream = _stream.open_device_stream(raw_pty.path, "r+b", 0)
    try:
        start = time.monotonic()
        assert stream.read(256) == b""
        assert time.monotonic() - start < 0.1
    finally:
        stream.close()


def test_read_waits_up_to_timeout(raw_pty):
    stream = _stream.open_device_stream(raw_pty.path, "r+b", 0.1)
    try:
        start = time.monotonic()
        assert stream.read(256) == b""
        elapsed = time.monotonic() - start
        assert 0.05 <= elapsed <= 0.5
    finally:
        stream.close()


def test_read_and_write(raw_pty):
    stream = _stream.open_device_stream(raw_pty.path, "r+b", 1)
    try:
        raw_pty.control.write(b"TO SERIAL")
        assert stream.read(256) == b"TO SERIAL"

        assert stream.write(b"FROM SERIAL") == 11
        assert raw_pty.control.read(256) == b"FROM SERIAL"
    finally:
        stream.close()


def test_read_zero_size(raw_pty):
    stream = _stream.open_device_stream(raw_pty.path, "r+b", 0)
    try:
        assert stream.read(0) == b""
    finally:
        stream.close()
