import contextlib
import io
import os
import pty
import pytest
import typing

import ok_logging_setup

from stty_serial import CommandResult

ok_logging_setup.install(
    {
        "OK_LOGGING_LEVEL": "stty_serial=DEBUG,WARNING",
        "OK_LOGGING_OUTPUT": "stdout",
    }
)


class PseudoTtySerial(typing.NamedTuple):
    path: str
    control: io.FileIO
    simulated: io.FileIO


@pytest.fixture
def pty_serial():
    with contextlib.ExitStack() as cleanup:
        ctrl_fd, sim_fd = pty.openpty()
        path = os.ttyname(sim_fd)
        ctrl = cleanup.enter_context(os.fdopen(ctrl_fd, "r+b", buffering=0))
        sim = cleanup.enter_context(os.fdopen(sim_fd, "r+b", buffering=0))
        yield PseudoTtySerial(path=path, control=ctrl, simulated=sim)


class FakeRunner:
    """Records commands; fails any command containing a 'fail_on' word"""

    def __init__(self):
        self.commands: list[str] = []
        self.fail_on: set[str] = set()

    def __call__(self, command: str) -> CommandResult:
        self.commands.append(command)
        if any(word in command.split() for word in self.fail_on):
            return CommandResult(command, 1, b"", b"stty: invalid argument")
        return CommandResult(command, 0)


@pytest.fixture
def fake_runner():
    return FakeRunner()


class FakeStream:
    """Byte stream that hands out scripted chunks, then nothing"""

    def __init__(self, chunks=(), write_limit=None):
        self.chunks = list(chunks)
        self.requests: list[int] = []
        self.written = bytearray()
        self.write_limit = write_limit
        self.close_error: OSError | None = None
        self.closed = False

    def read(self, size: int) -> bytes | None:
        self.requests.append(size)
        if not self.chunks:
            return None
        chunk = self.chunks.pop(0)
        assert len(chunk) <= size, "scripted chunk larger than request"
        return chunk

    def write(self, data: bytes) -> int | None:
        count = len(data) if self.write_limit is None else self.write_limit
        self.written.extend(data[:count])
        return count

    def close(self) -> None:
        self.closed = True
        if self.close_error:
            raise self.close_error


class FakeOpener:
    def __init__(self):
        self.stream = FakeStream()
        self.calls: list[tuple[str, str, float]] = []
        self.error: OSError | None = None

    def __call__(self, path: str, mode: str, timeout: float) -> FakeStream:
        self.calls.append((path, mode, timeout))
        if self.error:
            raise self.error
        return self.stream


@pytest.fixture
def fake_opener():
    return FakeOpener()
