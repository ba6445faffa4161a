"""Conversion of domain records into generic value trees.

The value tree is what crosses the boundary to the host: ``None``, bools,
ints, floats, strings, lists and dicts. Every record shape has its own
function listing its fields in a fixed order, and dicts keep that order, so
hosts can rely on stable iteration. The functions compose: a City record is
serialized by calling the sub-record functions for each of its fields.

Rules:
    - absent optional fields and sub-records become ``None``
    - sequences become lists in source order, ``[]`` when absent or empty
    - localized name tables become dicts in source order, ``None`` when absent
"""

from functools import wraps
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from packages.geolocate import records

GenericValue = Union[
    None, bool, int, float, str, List["GenericValue"], Dict[str, "GenericValue"]
]

FALLBACK_LOCALES = ("en", "en-US")


def _nullable(func: Callable[[Any], GenericValue]) -> Callable[[Any], GenericValue]:
    @wraps(func)
    def wrapper(record):
        if record is None:
            return None
        return func(record)

    return wrapper


def serialize_names(names: Optional[Mapping[str, str]]) -> Optional[Dict[str, str]]:
    if names is None:
        return None
    return dict(names)


def resolve_name(names: Optional[Mapping[str, str]], locale: str) -> Optional[str]:
    """Pick the display name for a locale from a localized name table.

    Fallback order: the requested locale, then "en", then "en-US", then the
    first entry of the table. Returns None when the table is missing or
    empty.

    Args:
        names: Locale code to display name table
        locale: Requested locale code

    Returns:
        The resolved name, or None
    """
    if not names:
        return None
    for candidate in (locale, *FALLBACK_LOCALES):
        if candidate in names:
            return names[candidate]
    return next(iter(names.values()))


# Sub-records


@_nullable
def serialize_traits(traits: records.TraitsRecord) -> GenericValue:
    return {
        "is_anonymous_proxy": traits.is_anonymous_proxy,
        "is_satellite_provider": traits.is_satellite_provider,
    }


@_nullable
def serialize_subdivision(subdivision: records.SubdivisionRecord) -> GenericValue:
    return {
        "geoname_id": subdivision.geoname_id,
        "iso_code": subdivision.iso_code,
        "names": serialize_names(subdivision.names),
    }


def serialize_subdivisions(
    subdivisions: Optional[List[records.SubdivisionRecord]],
) -> GenericValue:
    return [serialize_subdivision(subdivision) for subdivision in subdivisions or ()]


@_nullable
def serialize_postal(postal: records.PostalRecord) -> GenericValue:
    return {"code": postal.code}


@_nullable
def serialize_represented_country(
    country: records.RepresentedCountryRecord,
) -> GenericValue:
    return {
        "names": serialize_names(country.names),
        "iso_code": country.iso_code,
        "geoname_id": country.geoname_id,
    }


@_nullable
def serialize_country_record(country: records.CountryRecord) -> GenericValue:
    return {
        "names": serialize_names(country.names),
        "is_in_european_union": country.is_in_european_union,
        "iso_code": country.iso_code,
        "geoname_id": country.geoname_id,
    }


@_nullable
def serialize_continent(continent: records.ContinentRecord) -> GenericValue:
    return {
        "code": continent.code,
        "geoname_id": continent.geoname_id,
        "names": serialize_names(continent.names),
    }


@_nullable
def serialize_city_record(city: records.CityRecord) -> GenericValue:
    return {
        "geoname_id": city.geoname_id,
        "names": serialize_names(city.names),
    }


@_nullable
def serialize_location(location: records.LocationRecord) -> GenericValue:
    return {
        "latitude": location.latitude,
        "longitude": location.longitude,
        "metro_code": location.metro_code,
        "time_zone": location.time_zone,
    }


# Top-level records


def serialize_country(record: records.Country) -> GenericValue:
    return {
        "country": serialize_country_record(record.country),
        "continent": serialize_continent(record.continent),
        "registered_country": serialize_country_record(record.registered_country),
        "represented_country": serialize_represented_country(
            record.represented_country
        ),
        "traits": serialize_traits(record.traits),
    }


def serialize_city(record: records.City) -> GenericValue:
    return {
        "city": serialize_city_record(record.city),
        "continent": serialize_continent(record.continent),
        "country": serialize_country_record(record.country),
        "location": serialize_location(record.location),
        "postal": serialize_postal(record.postal),
        "registered_country": serialize_country_record(record.registered_country),
        "represented_country": serialize_represented_country(
            record.represented_country
        ),
        "subdivisions": serialize_subdivisions(record.subdivisions),
        "traits": serialize_traits(record.traits),
    }


def serialize_anonymous_ip(record: records.AnonymousIp) -> GenericValue:
    return {
        "is_anonymous": record.is_anonymous,
        "is_anonymous_vpn": record.is_anonymous_vpn,
        "is_hosting_provider": record.is_hosting_provider,
        "is_public_proxy": record.is_public_proxy,
        "is_tor_exit_node": record.is_tor_exit_node,
    }


def serialize_asn(record: records.Asn) -> GenericValue:
    return {
        "autonomous_system_number": record.autonomous_system_number,
        "autonomous_system_organization": record.autonomous_system_organization,
    }


def serialize_connection_type(record: records.ConnectionType) -> GenericValue:
    return {"connection_type": record.connection_type}


def serialize_density_income(record: records.DensityIncome) -> GenericValue:
    return {
        "population_density": record.population_density,
        "average_income": record.average_income,
    }


def serialize_domain(record: records.Domain) -> GenericValue:
    return {"domain": record.domain}


def serialize_isp(record: records.Isp) -> GenericValue:
    return {
        "autonomous_system_number": record.autonomous_system_number,
        "autonomous_system_organization": record.autonomous_system_organization,
        "isp": record.isp,
        "organization": record.organization,
    }
