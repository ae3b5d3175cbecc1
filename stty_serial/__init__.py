"""
Serial (tty) port library: line settings applied through the host stty
utility, raw non-blocking byte I/O on the device file.
"""

from beartype.claw import beartype_this_package as _beartype_me

# ruff: noqa: E402
_beartype_me()

from stty_serial._commands import CommandResult, CommandRunner, run_command

from stty_serial._configurator import (
    FLOW_CONTROL_ARGS,
    PARITY_ARGS,
    VALID_BAUD_RATES,
    LineConfigurator,
)

from stty_serial._exceptions import (
    SerialAlreadyOpened,
    SerialBaudRateInvalid,
    SerialCharacterLengthInvalid,
    SerialCloseFailed,
    SerialCommandException,
    SerialConfigException,
    SerialDeviceException,
    SerialDeviceNameInvalid,
    SerialException,
    SerialFlowControlInvalid,
    SerialIoException,
    SerialNotOpened,
    SerialOpenException,
    SerialOpenFailed,
    SerialOpenModeInvalid,
    SerialParityInvalid,
    SerialPlatformUnsupported,
    SerialPortInvalid,
    SerialReadFailed,
    SerialStopBitsInvalid,
    SerialWriteFailed,
)

from stty_serial._options import (
    FLOW_NONE,
    FLOW_RTS_CTS,
    FLOW_XON_XOFF,
    PARITY_EVEN,
    PARITY_NONE,
    PARITY_ODD,
    SerialOptions,
)

from stty_serial._platform import (
    LINUX,
    MACOS,
    HostPlatform,
    detect_host_platform,
)

from stty_serial._session import SerialPort, SessionState
from stty_serial._stream import ByteStream, DeviceStream, open_device_stream
from stty_serial._validator import validate_device

__all__ = [n for n in dir() if not n.startswith("_")]
