"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from api_access.domain.exceptions import ApiAccessException


@dataclass(frozen=True)
class ApiAccessId:
    """Identifier of a persisted API access.

    Assigned by the repository on creation and never changed afterwards.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not pass as id 1
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ApiAccessException(
                f"Api access id must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ApiAccessException(
                f"Api access id must be positive, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(value: str | int) -> ApiAccessId:
        """Convenient factory that coerces CLI/storage input to an int."""
        if isinstance(value, bool):
            raise ApiAccessException(f"Invalid api access id: {value!r}")
        try:
            return ApiAccessId(int(value))
        except (TypeError, ValueError) as exc:
            raise ApiAccessException(f"Invalid api access id: {value!r}") from exc


@dataclass(frozen=True)
class FieldLimits:
    """Maximum lengths for the length-bounded fields.

    These are the storage limits, not the sizes test fixtures use to
    overflow them.
    """

    client_name: int = 255
    api_client_id: int = 255
    description: int = 21844

    def __post_init__(self) -> None:
        for name in ("client_name", "api_client_id", "description"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Max length for {name} must be positive")
