"""
Lookup dispatch for geolocation queries.

Given a parsed address and record type, fetches the raw record through the
execution context's database handle, validates it into the record type's
domain model and serializes it. Platform-agnostic: the host surface and any
other caller go through these functions.
"""

from pydantic import BaseModel, ValidationError

from infrastructure.clients.maxmind import DatabaseContext, DatabaseError, Failed
from infrastructure.clients.maxmind.client import DatabaseHandle
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_database_error
from packages.geolocate.parsing import IPAddress
from packages.geolocate.registry import RecordType, binding_for, serialize
from packages.geolocate.serializer import resolve_name

logger = get_module_logger()


def lookup_record(
    handle: DatabaseHandle, address: IPAddress, record_type: RecordType
) -> BaseModel:
    """Run the typed lookup for a record type.

    An address with no entry gives the record type's empty record.

    Raises:
        DatabaseError: the engine failed, or the stored record does not
            match the record type's shape
    """
    binding = binding_for(record_type)
    raw = handle.get(address)
    try:
        return binding.from_raw(raw)
    except ValidationError as e:
        raise DatabaseError(
            f"Malformed {record_type.name} record for {address}: {e}"
        ) from e


def lookup(
    context: DatabaseContext, address: IPAddress, record_type: RecordType
) -> OperationResult:
    """
    Look up an address and serialize the result.

    Args:
        context: The calling execution context's database state
        address: Parsed IP address
        record_type: Record type to look up

    Returns:
        OperationResult with the value tree as data, or the database error
    """
    log = logger.bind(
        ip_address=str(address), record_type=record_type.name, operation="lookup"
    )

    state = context.current()
    if isinstance(state, Failed):
        log.warning("lookup_failed", error_code=state.error.error_code)
        return classify_database_error(state.error)

    try:
        record = lookup_record(state.handle, address, record_type)
    except DatabaseError as e:
        log.error("lookup_failed", error_code=e.error_code, error=str(e))
        return classify_database_error(e)

    log.debug("lookup_success")
    return OperationResult.success(
        data=serialize(record),
        message="IP looked up successfully",
    )


def country_name(
    context: DatabaseContext, address: IPAddress, locale: str = "en"
) -> OperationResult:
    """
    Resolve the country name of an address for a locale.

    Uses the Country record and the locale fallback of resolve_name. An
    address with no country data succeeds with None as data.

    Args:
        context: The calling execution context's database state
        address: Parsed IP address
        locale: Requested locale code

    Returns:
        OperationResult with the name (or None) as data, or the database error
    """
    log = logger.bind(ip_address=str(address), locale=locale, operation="country")

    state = context.current()
    if isinstance(state, Failed):
        log.warning("country_lookup_failed", error_code=state.error.error_code)
        return classify_database_error(state.error)

    try:
        record = lookup_record(state.handle, address, RecordType.Country)
    except DatabaseError as e:
        log.error("country_lookup_failed", error_code=e.error_code, error=str(e))
        return classify_database_error(e)

    names = record.country.names if record.country else None
    name = resolve_name(names, locale)
    log.debug("country_lookup_success", found=name is not None)
    return OperationResult.success(data=name, message="Country resolved")
