"""Geolocate package - IP lookups against a MaxMind DB for host runtimes."""

from packages.geolocate.host import GeoIPModule, create_module
from packages.geolocate.parsing import parse_address, parse_record_type
from packages.geolocate.registry import RECORD_CODES, REGISTRY, RecordType, serialize
from packages.geolocate.serializer import GenericValue, resolve_name
from packages.geolocate.service import country_name, lookup

__all__ = [
    "GeoIPModule",
    "create_module",
    "parse_address",
    "parse_record_type",
    "RecordType",
    "REGISTRY",
    "RECORD_CODES",
    "GenericValue",
    "serialize",
    "resolve_name",
    "lookup",
    "country_name",
]
