import logging

from stty_serial import _commands
from stty_serial import _exceptions
from stty_serial import _platform

log = logging.getLogger("stty_serial.validator")


def validate_device(
    host: _platform.HostPlatform,
    path: str,
    runner: _commands.CommandRunner = _commands.run_command,
) -> str:
    """Checks 'path' names a controllable tty on 'host', returns it"""

    if not host.matches_device(path):
        message = f"Device name doesn't match {host.name} pattern"
        raise _exceptions.SerialDeviceNameInvalid(message, path)

    result = runner(host.stty_command(path))
    if not result.ok:
        detail = result.error_text() or f"exit {result.returncode}"
        message = f"Not a valid serial port ({detail})"
        raise _exceptions.SerialPortInvalid(message, path)

    log.debug("Validated %s (%s)", path, host.name)
    return path
