import contextlib
import logging
import re
import time
import typing

import pydantic

from stty_serial import _commands
from stty_serial import _configurator
from stty_serial import _exceptions
from stty_serial import _options
from stty_serial import _platform
from stty_serial import _stream
from stty_serial import _validator

log = logging.getLogger("stty_serial.session")
data_log = logging.getLogger(log.name + ".data")

SessionState = typing.Literal["new", "opened", "closed"]
Seconds = typing.Annotated[float | int, pydantic.Field(ge=0)]

CHUNK_SIZE = 256
DEFAULT_TIMEOUT = 0

_MODE_RE = re.compile(r"[raw]\+?b?")


class SerialPort(contextlib.AbstractContextManager):
    """
    One tty device: validated and configured at construction, then
    opened once, read and written, and closed for good.
    """

    def __init__(
        self,
        device: str,
        opts: _options.SerialOptions | int | None = None,
        *,
        host: _platform.HostPlatform | None = None,
        runner: _commands.CommandRunner = _commands.run_command,
        opener: _stream.OpenerType = _stream.open_device_stream,
    ):
        if isinstance(opts, int):
            opts = _options.SerialOptions(baud_rate=opts)

        if host is None:
            host = _platform.detect_host_platform()

        self._host = host
        self._device: str | None = _validator.validate_device(
            self._host, device, runner
        )
        self._runner = runner
        self._opener = opener
        self._timeout: int = DEFAULT_TIMEOUT
        self._state: SessionState = "new"
        self._stream: _stream.ByteStream | None = None

        log.debug("Using %s on %s", device, self._host.name)
        if opts is not None:
            self.configure(opts)

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SerialPort({self._device!r}, state={self._state!r})"

    @property
    def device(self) -> str | None:
        return self._device

    @property
    def host(self) -> _platform.HostPlatform:
        return self._host

    @property
    def timeout(self) -> int:
        return self._timeout

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state == "opened"

    def configure(self, opts: _options.SerialOptions) -> None:
        """Applies line settings; earlier settings stay if one fails"""

        if self._device is None:
            raise _exceptions.SerialNotOpened("Serial port was closed")

        if opts.timeout is not None:
            self._timeout = opts.timeout

        lines = _configurator.LineConfigurator(
            self._host, self._device, self._runner
        )
        lines.apply(opts)

    def open(self, mode: str = "r+b") -> None:
        if self._state == "opened":
            message = "Serial port already opened"
            raise _exceptions.SerialAlreadyOpened(message, self._device)

        if not _MODE_RE.fullmatch(mode):
            message = f"Invalid opening mode {mode!r} (use open() modes)"
            raise _exceptions.SerialOpenModeInvalid(message, self._device)

        if self._device is None:
            raise _exceptions.SerialOpenFailed("Serial port was closed")

        try:
            stream = self._opener(self._device, mode, self._timeout)
        except OSError as ex:
            message = "Serial port open error"
            raise _exceptions.SerialOpenFailed(message, self._device) from ex

        self._stream = stream
        self._state = "opened"
        log.debug("Opened %s (mode=%s)", self._device, mode)

    @pydantic.validate_call
    def write(
        self,
        data: bytes,
        wait_for_reply: Seconds = 0.1,
    ) -> int:
        stream = self._require_stream()
        try:
            written = (stream.write(data) or 0) if data else 0
        except OSError as ex:
            message = "Serial write error"
            raise _exceptions.SerialWriteFailed(message, self._device) from ex

        if data and not written:
            message = "Serial write error (nothing written)"
            raise _exceptions.SerialWriteFailed(message, self._device)
        if written < len(data):
            data_log.warning("Wrote %d/%db only", written, len(data))
        else:
            data_log.debug("Wrote %db", written)

        # microsecond resolution
        time.sleep(round(wait_for_reply * 1e6) / 1e6)
        return written

    @pydantic.validate_call
    def read(self, count: pydantic.NonNegativeInt = 0) -> bytes:
        """
        Reads what the device has ready, in chunks, until a chunk comes
        back short. With count=0 reads everything available, otherwise
        stops once 'count' bytes are in hand. A short chunk is taken to mean
        "no more data right now", which not every driver guarantees.
        """

        stream, content = self._require_stream(), bytearray()
        while True:
            want = CHUNK_SIZE
            if count:
                want = min(want, count - len(content))
            try:
                chunk = stream.read(want) or b""
            except OSError as ex:
                message, port = "Serial read error", self._device
                raise _exceptions.SerialReadFailed(message, port) from ex

            content.extend(chunk)
            data_log.debug("Read %d/%db buf=%db", len(chunk), want, len(content))
            if len(chunk) < want or (count and len(content) >= count):
                return bytes(content)

    def close(self) -> None:
        """Releases the stream (if open); the port can't be reopened after"""

        stream, device = self._stream, self._device
        self._stream = None
        self._device = None
        self._state = "closed"
        if stream is None:
            return

        try:
            stream.close()
        except OSError as ex:
            message = "Serial close error"
            raise _exceptions.SerialCloseFailed(message, device) from ex
        log.debug("Closed %s", device)

    def _require_stream(self) -> _stream.ByteStream:
        if self._state != "opened" or self._stream is None:
            message = "Serial port not opened"
            raise _exceptions.SerialNotOpened(message, self._device)
        return self._stream
