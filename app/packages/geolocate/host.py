"""Host-facing surface of the geolocate package.

A host runtime creates one GeoIPModule per execution context and binds it
(or its ``exports()`` table) into that context's global namespace. Every
function returns a ``(payload, error_message)`` pair and never raises
across the boundary; hosts check the error slot.

Usage:
    from packages.geolocate.host import create_module

    maxminddb = create_module(context_id="worker-1")
    result, error = maxminddb.lookup("8.8.8.8", maxminddb.records["City"])
    name, error = maxminddb.country("8.8.8.8", "de")
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from infrastructure.clients.maxmind import DatabaseContext
from infrastructure.configuration import Settings
from infrastructure.logging import bind_context, get_module_logger
from infrastructure.operations import OperationResult, classify_input_error
from infrastructure.services import create_database_context
from infrastructure.version import VERSION
from packages.geolocate import service
from packages.geolocate.errors import ParseError
from packages.geolocate.parsing import parse_address, parse_record_type
from packages.geolocate.registry import RECORD_CODES
from packages.geolocate.serializer import GenericValue

logger = get_module_logger()

DEFAULT_LOCALE = "en"


def _as_pair(result: OperationResult) -> Tuple[Any, Optional[str]]:
    if result.is_success:
        return result.data, None
    return None, result.message


class GeoIPModule:
    """The functions and constants one execution context exposes to its host.

    Attributes:
        VERSION: Package version string
        records: Read-only mapping of record type name to integer code
    """

    VERSION: str = VERSION
    records: Mapping[str, int] = RECORD_CODES

    def __init__(self, context: DatabaseContext) -> None:
        self._context = context

    @property
    def context(self) -> DatabaseContext:
        return self._context

    def refresh(self) -> Tuple[bool, Optional[str]]:
        """Re-open the database for this execution context.

        Returns:
            (True, None) on success, (False, error message) on failure
        """
        with bind_context(context_id=self._context.context_id):
            result = self._context.refresh()
        if result.is_success:
            return True, None
        return False, result.message

    def lookup(
        self, ip: str, record_type: int
    ) -> Tuple[Optional[GenericValue], Optional[str]]:
        """Look up an address for a record type code.

        Args:
            ip: IPv4 or IPv6 address text
            record_type: Integer code from ``records``

        Returns:
            (value tree, None) on success, (None, error message) on failure
        """
        with bind_context(context_id=self._context.context_id):
            try:
                address = parse_address(ip)
                selected = parse_record_type(record_type)
            except ParseError as e:
                logger.info("lookup_rejected", error_code=e.error_code, error=str(e))
                return _as_pair(classify_input_error(e))

            return _as_pair(service.lookup(self._context, address, selected))

    def country(
        self, ip: str, locale: Optional[str] = DEFAULT_LOCALE
    ) -> Tuple[Optional[str], Optional[str]]:
        """Resolve the country name of an address.

        Args:
            ip: IPv4 or IPv6 address text
            locale: Requested locale; anything but a string means "en"

        Returns:
            (name or None, None) on success, (None, error message) on failure
        """
        if not isinstance(locale, str):
            locale = DEFAULT_LOCALE

        with bind_context(context_id=self._context.context_id):
            try:
                address = parse_address(ip)
            except ParseError as e:
                logger.info("country_rejected", error_code=e.error_code, error=str(e))
                return _as_pair(classify_input_error(e))

            return _as_pair(service.country_name(self._context, address, locale))

    def exports(self) -> Dict[str, Any]:
        """The table a host registers into its global namespace."""
        return {
            "VERSION": self.VERSION,
            "refresh": self.refresh,
            "country": self.country,
            "lookup": self.lookup,
            "records": self.records,
        }


def create_module(
    settings: Optional[Settings] = None, context_id: Optional[str] = None
) -> GeoIPModule:
    """Create the host surface for a new execution context.

    Args:
        settings: Optional settings override. Defaults to the cached settings.
        context_id: Optional identifier bound into log entries.

    Returns:
        GeoIPModule with its own, not yet opened, database state
    """
    context = create_database_context(settings=settings, context_id=context_id)
    return GeoIPModule(context)
