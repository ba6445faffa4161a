"""Errors for the geolocate package."""


class ParseError(ValueError):
    """Caller input that cannot be turned into a lookup request.

    Attributes:
        error_code: machine error code reported alongside the message
    """

    error_code = "INVALID_INPUT"


class InvalidAddressError(ParseError):
    """The address text is not a valid IPv4 or IPv6 address."""

    error_code = "INVALID_IP_ADDRESS"

    def __init__(self, detail: str):
        super().__init__(f"Invalid IP address: {detail}")
        self.detail = detail


class UnknownRecordTypeError(ParseError):
    """The record type code is not one of the registered record types."""

    error_code = "UNKNOWN_RECORD_TYPE"

    def __init__(self, code):
        super().__init__(f"Unknown or invalid GeoIP record type: {code!r}")
        self.code = code


class RegistryMismatchError(RuntimeError):
    """A record type or record shape has no registered binding.

    This is a defect in the registry, never a result of caller input, and
    is not caught anywhere.
    """
