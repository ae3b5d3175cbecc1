import logging
import os
import platform
import re
import shlex

import msgspec

from stty_serial import _exceptions

log = logging.getLogger("stty_serial.platform")


class HostPlatform(msgspec.Struct, frozen=True):
    """Naming rules and stty dialect of one supported host OS"""

    name: str
    device_pattern: str
    stty_flag: str
    stop_bits_prefix: str = ""

    def matches_device(self, path: str) -> bool:
        return re.fullmatch(self.device_pattern, path) is not None

    def stty_command(self, device: str, *args: str) -> str:
        words = ["stty", self.stty_flag, shlex.quote(device), *args]
        return " ".join(w for w in words if w)


LINUX = HostPlatform(
    name="linux",
    device_pattern=r"/dev/ttyS\d+",
    stty_flag="-F",
)

MACOS = HostPlatform(
    name="macos",
    device_pattern=r"/dev/tty\..+",
    stty_flag="-f",
    stop_bits_prefix="cs",
)


def detect_host_platform(ident: str | None = None) -> HostPlatform:
    """Classifies the host from its identification string (uname sysname)"""

    if ident is None:
        if ov := os.getenv("STTY_SERIAL_HOST_OVERRIDE"):
            log.debug("$STTY_SERIAL_HOST_OVERRIDE: %r", ov)
            ident = ov
        else:
            ident = platform.system()

    if ident.startswith("Linux"):
        return LINUX
    elif ident.startswith("Darwin"):
        return MACOS
    else:
        message = f"Host OS is neither Linux nor macOS ({ident!r})"
        raise _exceptions.SerialPlatformUnsupported(message)
