import io
import logging
import os
import select
import typing

log = logging.getLogger("stty_serial.stream")


@typing.runtime_checkable
class ByteStream(typing.Protocol):
    """Duplex raw byte stream; read/write never block indefinitely"""

    def read(self, size: int) -> bytes | None: ...

    def write(self, data: bytes) -> int | None: ...

    def close(self) -> None: ...


OpenerType = typing.Callable[[str, str, float | int], ByteStream]


class DeviceStream:
    """A device file in non-blocking mode, with bounded readiness waits"""

    def __init__(self, raw: io.FileIO, timeout: float | int):
        self._raw = raw
        self._timeout = timeout
        os.set_blocking(raw.fileno(), False)

    def __repr__(self) -> str:
        return f"DeviceStream({self._raw.name!r}, timeout={self._timeout})"

    @property
    def closed(self) -> bool:
        return self._raw.closed

    def fileno(self) -> int:
        return self._raw.fileno()

    def read(self, size: int) -> bytes:
        if size <= 0 or not self._wait(readable=True):
            return b""
        return self._raw.read(size) or b""

    def write(self, data: bytes) -> int:
        view, written = memoryview(data), 0
        while written < len(view):
            if not self._wait(readable=False):
                break
            count = self._raw.write(view[written:])
            if not count:
                break
            written += count
        return written

    def close(self) -> None:
        self._raw.close()

    def _wait(self, *, readable: bool) -> bool:
        fd = self._raw.fileno()
        rlist, wlist = ([fd], []) if readable else ([], [fd])
        ready_r, ready_w, _ = select.select(rlist, wlist, [], self._timeout)
        return bool(ready_r or ready_w)


def open_device_stream(
    path: str, mode: str, timeout: float | int
) -> DeviceStream:
    """Opens 'path' unbuffered in binary mode as a non-blocking stream"""

    if "b" not in mode:
        mode += "b"
    raw = open(path, mode, buffering=0, opener=_open_tty)
    try:
        stream = DeviceStream(raw, timeout)
    except OSError:
        raw.close()
        raise

    log.debug("Opened %s (mode=%s timeout=%s)", path, mode, timeout)
    return stream


def _open_tty(path: str, flags: int) -> int:
    # never become the controlling tty, never wait for carrier detect
    return os.open(path, flags | os.O_NOCTTY | os.O_NONBLOCK)
