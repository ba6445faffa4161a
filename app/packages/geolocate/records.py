"""Typed domain records returned by the MaxMind DB lookups.

Each top-level model is validated from the raw dict the engine returns for
an address. Every field is optional because a database may carry no data
for a given address; an address with no entry validates from ``{}`` into a
record whose fields are all empty.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

LocalizedNames = Dict[str, str]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


# Sub-records


class CityRecord(_Record):
    geoname_id: Optional[int] = None
    names: Optional[LocalizedNames] = None


class ContinentRecord(_Record):
    code: Optional[str] = Field(None, description="Two letter continent code")
    geoname_id: Optional[int] = None
    names: Optional[LocalizedNames] = None


class CountryRecord(_Record):
    geoname_id: Optional[int] = None
    is_in_european_union: Optional[bool] = None
    iso_code: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 code")
    names: Optional[LocalizedNames] = None


class RepresentedCountryRecord(_Record):
    geoname_id: Optional[int] = None
    iso_code: Optional[str] = None
    names: Optional[LocalizedNames] = None


class LocationRecord(_Record):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    metro_code: Optional[int] = None
    time_zone: Optional[str] = Field(None, description="IANA time zone")


class PostalRecord(_Record):
    code: Optional[str] = None


class SubdivisionRecord(_Record):
    geoname_id: Optional[int] = None
    iso_code: Optional[str] = None
    names: Optional[LocalizedNames] = None


class TraitsRecord(_Record):
    is_anonymous_proxy: Optional[bool] = None
    is_satellite_provider: Optional[bool] = None


# Top-level records, one per record type


class AnonymousIp(_Record):
    is_anonymous: Optional[bool] = None
    is_anonymous_vpn: Optional[bool] = None
    is_hosting_provider: Optional[bool] = None
    is_public_proxy: Optional[bool] = None
    is_tor_exit_node: Optional[bool] = None


class Asn(_Record):
    autonomous_system_number: Optional[int] = None
    autonomous_system_organization: Optional[str] = None


class Country(_Record):
    continent: Optional[ContinentRecord] = None
    country: Optional[CountryRecord] = None
    registered_country: Optional[CountryRecord] = None
    represented_country: Optional[RepresentedCountryRecord] = None
    traits: Optional[TraitsRecord] = None


class City(_Record):
    city: Optional[CityRecord] = None
    continent: Optional[ContinentRecord] = None
    country: Optional[CountryRecord] = None
    location: Optional[LocationRecord] = None
    postal: Optional[PostalRecord] = None
    registered_country: Optional[CountryRecord] = None
    represented_country: Optional[RepresentedCountryRecord] = None
    subdivisions: List[SubdivisionRecord] = Field(default_factory=list)
    traits: Optional[TraitsRecord] = None


class ConnectionType(_Record):
    connection_type: Optional[str] = Field(
        None, description='e.g. "Cable/DSL", "Cellular", "Corporate"'
    )


class DensityIncome(_Record):
    average_income: Optional[int] = None
    population_density: Optional[int] = None


class Domain(_Record):
    domain: Optional[str] = None


class Isp(_Record):
    autonomous_system_number: Optional[int] = None
    autonomous_system_organization: Optional[str] = None
    isp: Optional[str] = None
    organization: Optional[str] = None
