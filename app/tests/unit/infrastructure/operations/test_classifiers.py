"""Unit tests for infrastructure.operations.classifiers."""

import pytest

from infrastructure.clients.maxmind.errors import (
    DatabaseCorruptError,
    DatabaseError,
    DatabaseNotInstalledError,
)
from infrastructure.operations import OperationStatus
from infrastructure.operations.classifiers import (
    classify_database_error,
    classify_input_error,
)
from packages.geolocate.errors import InvalidAddressError, UnknownRecordTypeError


@pytest.mark.unit
class TestClassifyDatabaseError:
    def test_not_installed_keeps_message_and_code(self):
        exc = DatabaseNotInstalledError("a.mmdb", "b.dat", "https://maxmind.com")

        result = classify_database_error(exc)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "DB_NOT_INSTALLED"
        assert result.message == str(exc)

    def test_corrupt_forwards_engine_message_verbatim(self):
        exc = DatabaseCorruptError("Error opening database file", path="a.mmdb")

        result = classify_database_error(exc)

        assert result.error_code == "DB_CORRUPT"
        assert result.message == "Error opening database file"

    def test_base_database_error(self):
        result = classify_database_error(DatabaseError("lookup failed"))

        assert result.error_code == "DATABASE_ERROR"
        assert result.message == "lookup failed"

    def test_foreign_exception_is_prefixed_with_type(self):
        result = classify_database_error(OSError("disk gone"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "DATABASE_ERROR"
        assert result.message == "OSError: disk gone"


@pytest.mark.unit
class TestClassifyInputError:
    def test_invalid_address(self):
        result = classify_input_error(InvalidAddressError("bad"))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_IP_ADDRESS"
        assert result.message == "Invalid IP address: bad"

    def test_unknown_record_type(self):
        result = classify_input_error(UnknownRecordTypeError(99))

        assert result.error_code == "UNKNOWN_RECORD_TYPE"

    def test_plain_value_error(self):
        result = classify_input_error(ValueError("nope"))

        assert result.error_code == "INVALID_INPUT"
        assert result.message == "nope"
