import logging
import subprocess
import typing

import msgspec
import typeguard

from stty_serial import _exceptions

log = logging.getLogger("stty_serial.commands")


class CommandResult(msgspec.Struct, frozen=True):
    """Exit status and captured output of one finished command"""

    command: str
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error_text(self) -> str:
        return self.stderr.decode(errors="replace").strip()


CommandRunner = typing.Callable[[str], CommandResult]


@typeguard.typechecked
def run_command(command: str) -> CommandResult:
    """Runs 'command' in a shell, capturing stdout and stderr fully"""

    try:
        proc = subprocess.run(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as ex:
        message = f"Can't run command: {command}"
        raise _exceptions.SerialCommandException(message) from ex

    log.debug("$ %s -> %d", command, proc.returncode)
    return CommandResult(
        command=command,
        returncode=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
    )
