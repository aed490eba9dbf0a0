"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import threading
from pathlib import Path

from api_access.application.add_api_access import AddApiAccessHandler
from api_access.application.edit_api_access import EditApiAccessHandler
from api_access.application.get_api_access_for_editing import (
    GetApiAccessForEditingHandler,
)
from api_access.domain.model.value_objects import FieldLimits
from api_access.domain.service.api_access_store import ApiAccessStore
from api_access.domain.service.api_access_validator import ApiAccessValidator
from api_access.infrastructure.config import ApiAccessSettings
from api_access.infrastructure.persistence.json_api_access_repository import (
    JsonApiAccessRepository,
)


def field_limits(settings: ApiAccessSettings) -> FieldLimits:
    return FieldLimits(
        client_name=settings.client_name_max_length,
        api_client_id=settings.api_client_id_max_length,
        description=settings.description_max_length,
    )


# One store (and so one write lock) per data file, shared by every handler
_stores: dict[Path, ApiAccessStore] = {}
_stores_lock = threading.Lock()


def _data_file(settings: ApiAccessSettings) -> Path:
    return (settings.data_dir / "api_accesses.json").resolve()


def api_access_repository(settings: ApiAccessSettings) -> JsonApiAccessRepository:
    return JsonApiAccessRepository(_data_file(settings))


def api_access_store(settings: ApiAccessSettings) -> ApiAccessStore:
    path = _data_file(settings)
    with _stores_lock:
        store = _stores.get(path)
        if store is None:
            store = ApiAccessStore(JsonApiAccessRepository(path))
            _stores[path] = store
        return store


def add_api_access_handler(settings: ApiAccessSettings) -> AddApiAccessHandler:
    return AddApiAccessHandler(
        api_access_store(settings), ApiAccessValidator(field_limits(settings))
    )


def edit_api_access_handler(settings: ApiAccessSettings) -> EditApiAccessHandler:
    return EditApiAccessHandler(
        api_access_store(settings), ApiAccessValidator(field_limits(settings))
    )


def get_api_access_for_editing_handler(
    settings: ApiAccessSettings,
) -> GetApiAccessForEditingHandler:
    return GetApiAccessForEditingHandler(api_access_store(settings))
