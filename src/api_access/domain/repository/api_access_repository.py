"""Abstract repository for the ApiAccess aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere. Uniqueness is not enforced here; see ApiAccessStore.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from api_access.domain.model.api_access import ApiAccess
from api_access.domain.model.value_objects import ApiAccessId


class ApiAccessRepository(ABC):

    @abstractmethod
    def next_id(self) -> ApiAccessId:
        """Generate the next unused API access ID."""

    @abstractmethod
    def get_by_id(self, api_access_id: ApiAccessId) -> ApiAccess | None:
        """Return an API access by its ID, or None if not found."""

    @abstractmethod
    def find_by_client_name(self, client_name: str) -> ApiAccess | None:
        """Return the API access with exactly this client name (case-sensitive)."""

    @abstractmethod
    def find_by_api_client_id(self, api_client_id: str) -> ApiAccess | None:
        """Return the API access with exactly this client id (case-sensitive)."""

    @abstractmethod
    def list_all(self) -> list[ApiAccess]:
        """Return every API access, ordered by ID."""

    @abstractmethod
    def save(self, api_access: ApiAccess) -> None:
        """Persist a new or updated API access, assigning an ID if it has none."""
