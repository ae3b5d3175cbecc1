import logging

from stty_serial import _commands
from stty_serial import _exceptions
from stty_serial import _options
from stty_serial import _platform

log = logging.getLogger("stty_serial.configurator")

VALID_BAUD_RATES = (
    110,
    150,
    300,
    600,
    1200,
    2400,
    4800,
    9600,
    19200,
    38400,
    57600,
    115200,
)

PARITY_ARGS = {
    _options.PARITY_NONE: ("-parenb",),
    _options.PARITY_ODD: ("parenb", "parodd"),
    _options.PARITY_EVEN: ("parenb", "-parodd"),
}

FLOW_CONTROL_ARGS = {
    _options.FLOW_NONE: ("clocal", "-crtscts", "-ixon", "-ixoff"),
    _options.FLOW_RTS_CTS: ("-clocal", "crtscts", "-ixon", "-ixoff"),
    _options.FLOW_XON_XOFF: ("-clocal", "-crtscts", "ixon", "ixoff"),
}

CHARACTER_LENGTH_MIN = 5
CHARACTER_LENGTH_MAX = 8


class LineConfigurator:
    """Applies line discipline settings to one device through stty"""

    def __init__(
        self,
        host: _platform.HostPlatform,
        device: str,
        runner: _commands.CommandRunner = _commands.run_command,
    ):
        self._host = host
        self._device = device
        self._runner = runner

    def __repr__(self) -> str:
        return f"LineConfigurator({self._device!r}, {self._host.name!r})"

    def apply(self, opts: _options.SerialOptions) -> None:
        """Applies each present field in turn; stops at the first failure"""

        if opts.baud_rate is not None:
            self.set_baud_rate(opts.baud_rate)
        if opts.parity is not None:
            self.set_parity(opts.parity)
        if opts.character_length is not None:
            self.set_character_length(opts.character_length)
        if opts.stop_bits is not None:
            self.set_stop_bits(opts.stop_bits)
        if opts.flow_mode is not None:
            self.set_flow_control(opts.flow_mode)

    def set_baud_rate(self, rate: int) -> None:
        if rate not in VALID_BAUD_RATES:
            message = f"Unsupported baud rate: {rate}"
            raise _exceptions.SerialBaudRateInvalid(message, self._device)

        self._stty(
            (str(rate),),
            _exceptions.SerialBaudRateInvalid,
            f"Can't set baud rate {rate}",
        )

    def set_parity(self, parity: str) -> None:
        if (args := PARITY_ARGS.get(parity)) is None:
            message = f"Unsupported parity: {parity!r}"
            raise _exceptions.SerialParityInvalid(message, self._device)

        self._stty(
            args,
            _exceptions.SerialParityInvalid,
            f"Can't set parity {parity!r}",
        )

    def set_character_length(self, length: int) -> None:
        clamped = max(CHARACTER_LENGTH_MIN, min(CHARACTER_LENGTH_MAX, length))
        if clamped != length:
            log.debug("Clamped character length %d -> %d", length, clamped)

        self._stty(
            ("cs", str(clamped)),
            _exceptions.SerialCharacterLengthInvalid,
            f"Can't set character length {clamped}",
        )

    def set_stop_bits(self, stop_bits: int) -> None:
        flag = "-cstopb" if stop_bits == 1 else "cstopb"
        self._stty(
            (self._host.stop_bits_prefix, flag),
            _exceptions.SerialStopBitsInvalid,
            f"Can't set stop bits {stop_bits}",
        )

    def set_flow_control(self, mode: str) -> None:
        if (args := FLOW_CONTROL_ARGS.get(mode)) is None:
            message = f"Unsupported flow control: {mode!r}"
            raise _exceptions.SerialFlowControlInvalid(message, self._device)

        self._stty(
            args,
            _exceptions.SerialFlowControlInvalid,
            f"Can't set flow control {mode!r}",
        )

    def _stty(
        self,
        args: tuple[str, ...],
        error_type: type[_exceptions.SerialConfigException],
        message: str,
    ) -> None:
        command = self._host.stty_command(self._device, *args)
        result = self._runner(command)
        if not result.ok:
            detail = result.error_text() or f"exit {result.returncode}"
            raise error_type(f"{message} ({detail})", self._device)

        log.debug("Set %s: %s", self._device, " ".join(a for a in args if a))
