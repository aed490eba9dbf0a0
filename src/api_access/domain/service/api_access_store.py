"""Domain service: API access store.

Wraps an ApiAccessRepository and owns the store-wide uniqueness rules
for ``client_name`` and ``api_client_id``.

Every mutation is check-then-act: uniqueness is verified against the
current contents, then the entity is saved. Both steps run under a single
lock so two writers can never both pass the check for the same value.
Nothing is written when a check fails.
"""

from __future__ import annotations

import logging
import threading

from api_access.domain.exceptions import (
    ApiAccessException,
    ApiAccessField,
    ApiAccessNotFoundException,
    DuplicateValueError,
)
from api_access.domain.model.api_access import ApiAccess, ApiAccessPatch
from api_access.domain.model.value_objects import ApiAccessId
from api_access.domain.repository.api_access_repository import ApiAccessRepository

logger = logging.getLogger(__name__)


class ApiAccessStore:

    def __init__(self, repository: ApiAccessRepository) -> None:
        self._repository = repository
        self._lock = threading.RLock()

    def add(self, api_access: ApiAccess) -> ApiAccessId:
        """Persist a new API access and return its freshly assigned ID."""
        if api_access.id is not None:
            raise ApiAccessException(
                f"Api access #{api_access.id} is already persisted"
            )
        with self._lock:
            self._assert_unique(
                client_name=api_access.client_name,
                api_client_id=api_access.api_client_id,
                owner=None,
            )
            self._repository.save(api_access)
        if api_access.id is None:
            raise ApiAccessException("Repository did not assign an id to the new api access")
        return api_access.id

    @staticmethod
    def resolve_id(raw_id: str | int) -> ApiAccessId:
        """Turn a caller supplied id into an ApiAccessId.

        An id that can never have been issued (zero, negative, not an
        integer) cannot match an API access, so it is reported as not found.
        """
        try:
            return ApiAccessId.of(raw_id)
        except ApiAccessException as exc:
            raise ApiAccessNotFoundException(
                f"Api access with ID '{raw_id}' not found"
            ) from exc

    def get(self, api_access_id: ApiAccessId) -> ApiAccess:
        api_access = self._repository.get_by_id(api_access_id)
        if api_access is None:
            raise ApiAccessNotFoundException(
                f"Api access with ID '{api_access_id}' not found"
            )
        return api_access

    def update(self, api_access_id: ApiAccessId, patch: ApiAccessPatch) -> None:
        """Apply *patch* to an existing API access.

        Only supplied fields change. A unique value may be re-submitted
        unchanged; it only conflicts with other entities.
        """
        with self._lock:
            api_access = self.get(api_access_id)
            changes = patch.provided()
            self._assert_unique(
                client_name=changes.get("client_name"),
                api_client_id=changes.get("api_client_id"),
                owner=api_access_id,
            )
            api_access.apply(patch)
            self._repository.save(api_access)

    def list_all(self) -> list[ApiAccess]:
        return self._repository.list_all()

    def _assert_unique(
        self,
        client_name: str | None,
        api_client_id: str | None,
        owner: ApiAccessId | None,
    ) -> None:
        if client_name is not None:
            existing = self._repository.find_by_client_name(client_name)
            if existing is not None and existing.id != owner:
                logger.debug(
                    "client name %r already used by api access #%s",
                    client_name,
                    existing.id,
                )
                raise DuplicateValueError(ApiAccessField.CLIENT_NAME, client_name)

        if api_client_id is not None:
            existing = self._repository.find_by_api_client_id(api_client_id)
            if existing is not None and existing.id != owner:
                logger.debug(
                    "api client id %r already used by api access #%s",
                    api_client_id,
                    existing.id,
                )
                raise DuplicateValueError(ApiAccessField.API_CLIENT_ID, api_client_id)
