"""Data Transfer Objects — plain containers that cross layer boundaries.

Commands and queries carry caller input into the application layer;
EditableApiAccess carries a read model back out without exposing the
domain entity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from api_access.domain.exceptions import ApiAccessException
from api_access.domain.model.api_access import UNSET, ApiAccess, ApiAccessPatch


@dataclass(frozen=True)
class AddApiAccessCommand:
    """Input: every field of a new API access.

    Values are taken as supplied; the validator decides whether they are
    acceptable (e.g. ``enabled=None`` is reported, not coerced).
    """

    client_name: Any
    api_client_id: Any
    enabled: Any
    description: Any

    def to_patch(self) -> ApiAccessPatch:
        return ApiAccessPatch.full(
            client_name=self.client_name,
            api_client_id=self.api_client_id,
            enabled=self.enabled,
            description=self.description,
        )


@dataclass(frozen=True)
class EditApiAccessCommand:
    """Input: the target ID plus any subset of fields to change.

    Fields left at ``UNSET`` are not touched by the edit.
    """

    api_access_id: int
    client_name: Any = UNSET
    api_client_id: Any = UNSET
    enabled: Any = UNSET
    description: Any = UNSET

    def to_patch(self) -> ApiAccessPatch:
        return ApiAccessPatch(
            client_name=self.client_name,
            api_client_id=self.api_client_id,
            enabled=self.enabled,
            description=self.description,
        )


@dataclass(frozen=True)
class GetApiAccessForEditing:
    """Query: fetch one API access shaped for an edit form."""

    api_access_id: int


@dataclass(frozen=True)
class EditableApiAccess:
    """Output: snapshot of an API access, built fresh for every query."""

    api_access_id: int
    client_name: str
    api_client_id: str
    enabled: bool
    description: str

    @staticmethod
    def from_entity(api_access: ApiAccess) -> EditableApiAccess:
        if api_access.id is None:
            raise ApiAccessException("Cannot project an api access that was never saved")
        return EditableApiAccess(
            api_access_id=api_access.id.value,
            client_name=api_access.client_name,
            api_client_id=api_access.api_client_id,
            enabled=api_access.enabled,
            description=api_access.description,
        )
