"""Unit tests for the record type registry."""

import pytest

from packages.geolocate import records
from packages.geolocate.errors import RegistryMismatchError
from packages.geolocate.registry import (
    RECORD_CODES,
    REGISTRY,
    SERIALIZERS,
    RecordType,
    binding_for,
)


@pytest.mark.unit
class TestRecordType:
    def test_codes_are_contiguous_from_zero(self):
        assert sorted(int(t) for t in RecordType) == list(range(len(RecordType)))

    def test_record_codes_table(self):
        assert dict(RECORD_CODES) == {
            "AnonymousIp": 0,
            "Asn": 1,
            "City": 2,
            "ConnectionType": 3,
            "Country": 4,
            "DensityIncome": 5,
            "Domain": 6,
            "Isp": 7,
        }

    def test_record_codes_table_is_read_only(self):
        with pytest.raises(TypeError):
            RECORD_CODES["Extra"] = 8


@pytest.mark.unit
class TestRegistry:
    def test_every_record_type_is_bound(self):
        assert set(REGISTRY) == set(RecordType)

    def test_models_are_distinct(self):
        models = [binding.model for binding in REGISTRY.values()]
        assert len(set(models)) == len(models)

    def test_binding_models_match_names(self):
        for record_type, binding in REGISTRY.items():
            assert binding.model is getattr(records, record_type.name)

    def test_serializers_follow_bindings(self):
        assert len(SERIALIZERS) == len(RecordType)
        for binding in REGISTRY.values():
            assert SERIALIZERS[binding.model] is binding.serialize

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            REGISTRY[RecordType.Asn] = None

    def test_binding_for_missing_entry_is_fatal(self):
        with pytest.raises(RegistryMismatchError):
            binding_for(99)

    def test_from_raw_missing_entry_gives_empty_record(self):
        record = binding_for(RecordType.City).from_raw(None)

        assert isinstance(record, records.City)
        assert record.country is None
        assert record.subdivisions == []

    def test_from_raw_ignores_unknown_keys(self):
        record = binding_for(RecordType.Asn).from_raw(
            {"autonomous_system_number": 15169, "network": "8.8.8.0/24"}
        )

        assert record.autonomous_system_number == 15169
