"""Domain-level exceptions and constraint error codes.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Constraint failures carry a stable integer code. Callers match on the code
(or on the ``(field, kind)`` pair it was built from), never on the message.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class ApiAccessField(Enum):
    """Closed set of editable API access fields, in reporting order."""

    CLIENT_NAME = "clientName"
    API_CLIENT_ID = "apiClientId"
    ENABLED = "enabled"
    DESCRIPTION = "description"


class ErrorKind(Enum):
    INVALID = "invalid"
    TOO_LARGE = "too_large"
    NOT_UNIQUE = "not_unique"


class ConstraintErrorCode(IntEnum):
    CLIENT_ID_ALREADY_USED = 1
    CLIENT_NAME_ALREADY_USED = 2
    INVALID_CLIENT_ID = 3
    INVALID_CLIENT_NAME = 4
    INVALID_ENABLED = 5
    INVALID_DESCRIPTION = 6
    CLIENT_ID_TOO_LARGE = 7
    CLIENT_NAME_TOO_LARGE = 8
    DESCRIPTION_TOO_LARGE = 9


_INVALID_CODES: dict[ApiAccessField, ConstraintErrorCode] = {
    ApiAccessField.CLIENT_NAME: ConstraintErrorCode.INVALID_CLIENT_NAME,
    ApiAccessField.API_CLIENT_ID: ConstraintErrorCode.INVALID_CLIENT_ID,
    ApiAccessField.ENABLED: ConstraintErrorCode.INVALID_ENABLED,
    ApiAccessField.DESCRIPTION: ConstraintErrorCode.INVALID_DESCRIPTION,
}

_TOO_LARGE_CODES: dict[ApiAccessField, ConstraintErrorCode] = {
    ApiAccessField.CLIENT_NAME: ConstraintErrorCode.CLIENT_NAME_TOO_LARGE,
    ApiAccessField.API_CLIENT_ID: ConstraintErrorCode.CLIENT_ID_TOO_LARGE,
    ApiAccessField.DESCRIPTION: ConstraintErrorCode.DESCRIPTION_TOO_LARGE,
}

_NOT_UNIQUE_CODES: dict[ApiAccessField, ConstraintErrorCode] = {
    ApiAccessField.CLIENT_NAME: ConstraintErrorCode.CLIENT_NAME_ALREADY_USED,
    ApiAccessField.API_CLIENT_ID: ConstraintErrorCode.CLIENT_ID_ALREADY_USED,
}

_KIND_TEXT: dict[ErrorKind, str] = {
    ErrorKind.INVALID: "invalid",
    ErrorKind.TOO_LARGE: "too large",
    ErrorKind.NOT_UNIQUE: "already used",
}

_CODES_BY_KIND: dict[ErrorKind, dict[ApiAccessField, ConstraintErrorCode]] = {
    ErrorKind.INVALID: _INVALID_CODES,
    ErrorKind.TOO_LARGE: _TOO_LARGE_CODES,
    ErrorKind.NOT_UNIQUE: _NOT_UNIQUE_CODES,
}


def constraint_error_code(
    field: ApiAccessField, kind: ErrorKind
) -> ConstraintErrorCode:
    """Return the stable code for a ``(field, kind)`` pair.

    Every field has an INVALID code. Only length-bounded fields have a
    TOO_LARGE code and only the two unique fields have a NOT_UNIQUE code;
    asking for any other pair is a programming error.
    """
    try:
        return _CODES_BY_KIND[kind][field]
    except KeyError:
        raise ValueError(
            f"Field '{field.value}' cannot fail with kind '{kind.value}'"
        ) from None


def invalid_error_code(field: ApiAccessField) -> ConstraintErrorCode:
    return constraint_error_code(field, ErrorKind.INVALID)


def too_large_error_code(field: ApiAccessField) -> ConstraintErrorCode:
    return constraint_error_code(field, ErrorKind.TOO_LARGE)


def unique_error_code(field: ApiAccessField) -> ConstraintErrorCode:
    return constraint_error_code(field, ErrorKind.NOT_UNIQUE)


class DomainException(Exception):
    """Base class for all domain errors."""


class ApiAccessException(DomainException):
    """Any failure while managing API accesses."""


class ApiAccessNotFoundException(ApiAccessException):
    """A requested API access does not exist."""


class ApiAccessConstraintException(ApiAccessException):
    """A field failed validation or a uniqueness rule.

    Recoverable: the caller may retry with corrected input.
    """

    def __init__(
        self,
        code: ConstraintErrorCode,
        field: ApiAccessField,
        message: str | None = None,
    ) -> None:
        self.code = code
        self.field = field
        super().__init__(message or f"{code.name} (code {int(code)}) on '{field.value}'")

    @classmethod
    def for_kind(
        cls, field: ApiAccessField, kind: ErrorKind, message: str | None = None
    ) -> ApiAccessConstraintException:
        return cls(
            constraint_error_code(field, kind),
            field,
            message or f"{field.value} is {_KIND_TEXT[kind]}",
        )


class DuplicateValueError(ApiAccessException):
    """The store already holds another API access with this unique value."""

    def __init__(self, field: ApiAccessField, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field.value} '{value}' is already used")
