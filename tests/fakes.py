"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
Entities are copied in and out so callers cannot mutate stored state
behind the repository's back.
"""

from __future__ import annotations

from dataclasses import replace

from api_access.domain.model.api_access import ApiAccess
from api_access.domain.model.value_objects import ApiAccessId
from api_access.domain.repository.api_access_repository import ApiAccessRepository


class FakeApiAccessRepository(ApiAccessRepository):

    def __init__(self, api_accesses: list[ApiAccess] | None = None) -> None:
        self._store: dict[int, ApiAccess] = {}
        self._next_id = 1
        self.save_count = 0
        for a in api_accesses or []:
            self.save(a)
        self.save_count = 0

    def next_id(self) -> ApiAccessId:
        return ApiAccessId(self._next_id)

    def get_by_id(self, api_access_id: ApiAccessId) -> ApiAccess | None:
        stored = self._store.get(api_access_id.value)
        return replace(stored) if stored is not None else None

    def find_by_client_name(self, client_name: str) -> ApiAccess | None:
        for a in self._store.values():
            if a.client_name == client_name:
                return replace(a)
        return None

    def find_by_api_client_id(self, api_client_id: str) -> ApiAccess | None:
        for a in self._store.values():
            if a.api_client_id == api_client_id:
                return replace(a)
        return None

    def list_all(self) -> list[ApiAccess]:
        return [replace(self._store[k]) for k in sorted(self._store)]

    def save(self, api_access: ApiAccess) -> None:
        if api_access.id is None:
            api_access.id = ApiAccessId(self._next_id)
        self._next_id = max(self._next_id, api_access.id.value + 1)
        self._store[api_access.id.value] = replace(api_access)
        self.save_count += 1
