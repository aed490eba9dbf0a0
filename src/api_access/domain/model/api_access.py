"""ApiAccess aggregate.

An API access grants an external client (identified by its
``api_client_id``) access to the shop API. It has no lifecycle beyond
existing or not existing: ``enabled`` is plain data, not a state.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from api_access.domain.exceptions import ApiAccessField
from api_access.domain.model.value_objects import ApiAccessId


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET
"""Marker for a patch field that was not supplied.

Distinct from ``None`` and ``""``, which are supplied (and invalid or
empty) values.
"""


@dataclass
class ApiAccess:
    """Aggregate root for API client credentials.

    ``id`` is ``None`` until the repository assigns one on first save,
    the same way a new record gets its primary key.
    """

    id: ApiAccessId | None
    client_name: str
    api_client_id: str
    enabled: bool
    description: str

    def apply(self, patch: ApiAccessPatch) -> None:
        """Overwrite the fields present in *patch*; leave the rest alone.

        Callers validate the patch first. The id is never part of a patch.
        """
        for name, value in patch.provided().items():
            setattr(self, name, value)

    def value_of(self, field: ApiAccessField) -> Any:
        return getattr(self, _ATTRIBUTES[field])


@dataclass(frozen=True)
class ApiAccessPatch:
    """A partial set of field values.

    Each field is either ``UNSET`` (leave unchanged) or the raw value the
    caller supplied, which may still be invalid.
    """

    client_name: Any = UNSET
    api_client_id: Any = UNSET
    enabled: Any = UNSET
    description: Any = UNSET

    def provided(self) -> dict[str, Any]:
        """Return attribute name -> value for every supplied field."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_set(self, field: ApiAccessField) -> bool:
        return self.value_of(field) is not UNSET

    def value_of(self, field: ApiAccessField) -> Any:
        return getattr(self, _ATTRIBUTES[field])

    @property
    def is_empty(self) -> bool:
        return not self.provided()

    @staticmethod
    def full(
        client_name: Any, api_client_id: Any, enabled: Any, description: Any
    ) -> ApiAccessPatch:
        """A patch with every field supplied, as used on creation."""
        return ApiAccessPatch(
            client_name=client_name,
            api_client_id=api_client_id,
            enabled=enabled,
            description=description,
        )


_ATTRIBUTES: dict[ApiAccessField, str] = {
    ApiAccessField.CLIENT_NAME: "client_name",
    ApiAccessField.API_CLIENT_ID: "api_client_id",
    ApiAccessField.ENABLED: "enabled",
    ApiAccessField.DESCRIPTION: "description",
}
