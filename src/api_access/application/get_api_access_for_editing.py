"""Application service: Get API Access For Editing use case (query)."""

from __future__ import annotations

from api_access.application.dto import EditableApiAccess, GetApiAccessForEditing
from api_access.domain.service.api_access_store import ApiAccessStore


class GetApiAccessForEditingHandler:

    def __init__(self, store: ApiAccessStore) -> None:
        self._store = store

    def handle(self, query: GetApiAccessForEditing) -> EditableApiAccess:
        api_access = self._store.get(self._store.resolve_id(query.api_access_id))
        return EditableApiAccess.from_entity(api_access)
