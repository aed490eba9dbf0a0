"""Unit tests for constraint error codes and the exception taxonomy."""

import pytest

from api_access.domain.exceptions import (
    ApiAccessConstraintException,
    ApiAccessException,
    ApiAccessField,
    ApiAccessNotFoundException,
    ConstraintErrorCode,
    DomainException,
    DuplicateValueError,
    ErrorKind,
    constraint_error_code,
    invalid_error_code,
    too_large_error_code,
    unique_error_code,
)


class TestConstraintErrorCode:

    def test_codes_are_distinct(self):
        values = [int(code) for code in ConstraintErrorCode]
        assert len(values) == len(set(values))

    def test_every_field_has_an_invalid_code(self):
        assert invalid_error_code(ApiAccessField.CLIENT_NAME) is ConstraintErrorCode.INVALID_CLIENT_NAME
        assert invalid_error_code(ApiAccessField.API_CLIENT_ID) is ConstraintErrorCode.INVALID_CLIENT_ID
        assert invalid_error_code(ApiAccessField.ENABLED) is ConstraintErrorCode.INVALID_ENABLED
        assert invalid_error_code(ApiAccessField.DESCRIPTION) is ConstraintErrorCode.INVALID_DESCRIPTION

    def test_too_large_codes(self):
        assert too_large_error_code(ApiAccessField.CLIENT_NAME) is ConstraintErrorCode.CLIENT_NAME_TOO_LARGE
        assert too_large_error_code(ApiAccessField.API_CLIENT_ID) is ConstraintErrorCode.CLIENT_ID_TOO_LARGE
        assert too_large_error_code(ApiAccessField.DESCRIPTION) is ConstraintErrorCode.DESCRIPTION_TOO_LARGE

    def test_unique_codes(self):
        assert unique_error_code(ApiAccessField.CLIENT_NAME) is ConstraintErrorCode.CLIENT_NAME_ALREADY_USED
        assert unique_error_code(ApiAccessField.API_CLIENT_ID) is ConstraintErrorCode.CLIENT_ID_ALREADY_USED

    def test_enabled_cannot_be_too_large(self):
        with pytest.raises(ValueError, match="cannot fail with kind"):
            constraint_error_code(ApiAccessField.ENABLED, ErrorKind.TOO_LARGE)

    def test_description_cannot_be_not_unique(self):
        with pytest.raises(ValueError, match="cannot fail with kind"):
            unique_error_code(ApiAccessField.DESCRIPTION)


class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(ApiAccessException, DomainException)
        assert issubclass(ApiAccessConstraintException, ApiAccessException)
        assert issubclass(ApiAccessNotFoundException, ApiAccessException)
        assert issubclass(DuplicateValueError, ApiAccessException)

    def test_constraint_exception_carries_code_and_field(self):
        exc = ApiAccessConstraintException.for_kind(
            ApiAccessField.DESCRIPTION, ErrorKind.TOO_LARGE
        )
        assert exc.code is ConstraintErrorCode.DESCRIPTION_TOO_LARGE
        assert exc.field is ApiAccessField.DESCRIPTION
        assert str(exc) == "description is too large"

    def test_constraint_exception_custom_message(self):
        exc = ApiAccessConstraintException(
            ConstraintErrorCode.INVALID_ENABLED, ApiAccessField.ENABLED, "nope"
        )
        assert str(exc) == "nope"

    def test_duplicate_value_error_message(self):
        exc = DuplicateValueError(ApiAccessField.API_CLIENT_ID, "shopA-1")
        assert str(exc) == "apiClientId 'shopA-1' is already used"
        assert exc.field is ApiAccessField.API_CLIENT_ID
