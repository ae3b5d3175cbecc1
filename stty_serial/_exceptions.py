"""Exception hierarchy for stty_serial"""


class SerialException(OSError):
    def __init__(
        self,
        message: str,
        port: str | None = None,
    ):
        super().__init__(f"{port}: {message}" if port else message)
        self.port = port


class SerialPlatformUnsupported(SerialException):
    pass


class SerialCommandException(SerialException):
    pass


class SerialDeviceException(SerialException):
    pass


class SerialDeviceNameInvalid(SerialDeviceException):
    pass


class SerialPortInvalid(SerialDeviceException):
    pass


class SerialConfigException(SerialException):
    pass


class SerialBaudRateInvalid(SerialConfigException):
    pass


class SerialParityInvalid(SerialConfigException):
    pass


class SerialCharacterLengthInvalid(SerialConfigException):
    pass


class SerialStopBitsInvalid(SerialCharacterLengthInvalid):
    pass


class SerialFlowControlInvalid(SerialConfigException):
    pass


class SerialOpenException(SerialException):
    pass


class SerialAlreadyOpened(SerialOpenException):
    pass


class SerialOpenModeInvalid(SerialOpenException):
    pass


class SerialOpenFailed(SerialOpenException):
    pass


class SerialIoException(SerialException):
    pass


class SerialNotOpened(SerialIoException):
    pass


class SerialReadFailed(SerialIoException):
    pass


class SerialWriteFailed(SerialIoException):
    pass


class SerialCloseFailed(SerialIoException):
    pass
