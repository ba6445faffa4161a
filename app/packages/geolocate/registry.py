"""The closed set of record types and what each one is bound to.

Each RecordType is bound to the domain record model its lookup produces and
the function that serializes that model. Adding a record kind means adding
a RecordType member and its binding here; the dispatcher and the host
surface pick it up without changes.
"""

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Type

from pydantic import BaseModel

from packages.geolocate import records, serializer
from packages.geolocate.errors import RegistryMismatchError


class RecordType(IntEnum):
    """Record types, with the stable integer codes hosts select them by."""

    AnonymousIp = 0
    Asn = 1
    City = 2
    ConnectionType = 3
    Country = 4
    DensityIncome = 5
    Domain = 6
    Isp = 7


@dataclass(frozen=True)
class RecordBinding:
    """What a record type looks up and how its result is serialized.

    Attributes:
        model: pydantic model the raw engine record is validated into
        serialize: function turning that model into a value tree
    """

    model: Type[BaseModel]
    serialize: Callable[[Any], serializer.GenericValue]

    def from_raw(self, raw: Any) -> BaseModel:
        """Validate a raw engine record; a missing entry gives the empty record."""
        return self.model.model_validate(raw or {})


REGISTRY: Mapping[RecordType, RecordBinding] = MappingProxyType(
    {
        RecordType.AnonymousIp: RecordBinding(
            records.AnonymousIp, serializer.serialize_anonymous_ip
        ),
        RecordType.Asn: RecordBinding(records.Asn, serializer.serialize_asn),
        RecordType.City: RecordBinding(records.City, serializer.serialize_city),
        RecordType.ConnectionType: RecordBinding(
            records.ConnectionType, serializer.serialize_connection_type
        ),
        RecordType.Country: RecordBinding(
            records.Country, serializer.serialize_country
        ),
        RecordType.DensityIncome: RecordBinding(
            records.DensityIncome, serializer.serialize_density_income
        ),
        RecordType.Domain: RecordBinding(records.Domain, serializer.serialize_domain),
        RecordType.Isp: RecordBinding(records.Isp, serializer.serialize_isp),
    }
)

# Model to serializer, derived from the bindings
SERIALIZERS: Mapping[Type[BaseModel], Callable[[Any], serializer.GenericValue]] = (
    MappingProxyType(
        {binding.model: binding.serialize for binding in REGISTRY.values()}
    )
)

# Name to code table exposed to hosts
RECORD_CODES: Mapping[str, int] = MappingProxyType(
    {record_type.name: int(record_type) for record_type in RecordType}
)


def binding_for(record_type: RecordType) -> RecordBinding:
    """Return the binding for a record type.

    Raises:
        RegistryMismatchError: the record type has no binding
    """
    try:
        return REGISTRY[record_type]
    except KeyError:
        raise RegistryMismatchError(
            f"No binding registered for record type {record_type!r}"
        ) from None


def serialize(record: BaseModel) -> serializer.GenericValue:
    """Serialize a top-level domain record into a value tree.

    Args:
        record: One of the top-level models bound in REGISTRY

    Returns:
        The record as an ordered dict tree

    Raises:
        RegistryMismatchError: the record's type is not bound to a record type
    """
    serialize_record = SERIALIZERS.get(type(record))
    if serialize_record is None:
        raise RegistryMismatchError(
            f"No serializer registered for {type(record).__name__}"
        )
    return serialize_record(record)


def _check_registry() -> None:
    missing = [
        record_type.name for record_type in RecordType if record_type not in REGISTRY
    ]
    if missing:
        raise RegistryMismatchError(f"Record types without a binding: {missing}")


_check_registry()
