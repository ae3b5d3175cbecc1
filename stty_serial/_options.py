import pydantic

PARITY_NONE = "none"
PARITY_ODD = "odd"
PARITY_EVEN = "even"

FLOW_NONE = "none"
FLOW_RTS_CTS = "rts/cts"
FLOW_XON_XOFF = "xon/xoff"


class SerialOptions(pydantic.BaseModel):
    """Line settings to apply; None leaves the OS setting alone"""

    model_config = pydantic.ConfigDict(frozen=True)

    timeout: int | None = pydantic.Field(default=None, ge=0)
    baud_rate: int | None = None
    parity: str | None = None
    character_length: int | None = None
    stop_bits: int | None = None
    flow_mode: str | None = None
