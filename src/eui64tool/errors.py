from __future__ import annotations


class Eui64ToolError(Exception):
    """Base class for errors reported per input token."""


class InvalidInputError(Eui64ToolError):
    def __init__(self, token: str) -> None:
        super().__init__(f"'{token}' is not a valid interface, MAC address, or IPv6 address")


class MissingMacAddressError(Eui64ToolError):
    def __init__(self, interface: str) -> None:
        super().__init__(f"Interface '{interface}' has no MAC address")


class ConversionError(Eui64ToolError):
    """Raised when address text cannot be converted (bad hex, bad IPv6 shape)."""


class InvalidEui64Error(ConversionError):
    """The candidate suffix is not a modified EUI-64 identifier."""


class MalformedEui64Error(InvalidEui64Error):
    pass


class MissingEui64MarkerError(InvalidEui64Error):
    pass
