"""Validation of host-supplied addresses and record type selectors."""

import ipaddress
from typing import Union

from packages.geolocate.errors import InvalidAddressError, UnknownRecordTypeError
from packages.geolocate.registry import RecordType

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_address(text: str) -> IPAddress:
    """Parse IPv4 or IPv6 address text.

    Args:
        text: Address as supplied by the host

    Returns:
        The parsed address

    Raises:
        InvalidAddressError: text is not a valid address
    """
    if not isinstance(text, str):
        raise InvalidAddressError(f"expected a string, got {type(text).__name__}")
    try:
        return ipaddress.ip_address(text)
    except ValueError as e:
        raise InvalidAddressError(str(e)) from e


def parse_record_type(code: int) -> RecordType:
    """Map an integer code to its record type.

    Args:
        code: Record type code as supplied by the host

    Returns:
        The matching RecordType

    Raises:
        UnknownRecordTypeError: code is not an integer in the enumeration
    """
    # bool is an int subclass; True must not select record type 1
    if isinstance(code, bool) or not isinstance(code, int):
        raise UnknownRecordTypeError(code)
    try:
        return RecordType(code)
    except ValueError as e:
        raise UnknownRecordTypeError(code) from e
