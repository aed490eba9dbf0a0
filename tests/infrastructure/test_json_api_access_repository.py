"""Tests for the JSON-file-backed ApiAccessRepository."""

import json

import pytest

from api_access.domain.exceptions import ApiAccessException
from api_access.domain.model.api_access import ApiAccess, ApiAccessPatch
from api_access.domain.model.value_objects import ApiAccessId
from api_access.domain.service.api_access_store import ApiAccessStore
from api_access.infrastructure.persistence.json_api_access_repository import (
    JsonApiAccessRepository,
)


def _new(client_name: str = "Shop A", api_client_id: str = "shopA-1") -> ApiAccess:
    return ApiAccess(
        id=None,
        client_name=client_name,
        api_client_id=api_client_id,
        enabled=True,
        description="desc",
    )


class TestJsonApiAccessRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "api_accesses.json"
        repo = JsonApiAccessRepository(path)
        assert path.exists()
        assert repo.list_all() == []
        assert repo.next_id() == ApiAccessId(1)

    def test_save_assigns_id_and_persists(self, tmp_path):
        path = tmp_path / "api_accesses.json"
        repo = JsonApiAccessRepository(path)
        api_access = _new()
        repo.save(api_access)

        assert api_access.id == ApiAccessId(1)
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw == [{
            "id": 1,
            "client_name": "Shop A",
            "api_client_id": "shopA-1",
            "enabled": True,
            "description": "desc",
        }]

    def test_survives_reload(self, tmp_path):
        path = tmp_path / "api_accesses.json"
        JsonApiAccessRepository(path).save(_new())

        reloaded = JsonApiAccessRepository(path).get_by_id(ApiAccessId(1))
        assert reloaded == ApiAccess(ApiAccessId(1), "Shop A", "shopA-1", True, "desc")

    def test_upsert_replaces_existing(self, tmp_path):
        repo = JsonApiAccessRepository(tmp_path / "api_accesses.json")
        api_access = _new()
        repo.save(api_access)
        api_access.enabled = False
        repo.save(api_access)

        assert len(repo.list_all()) == 1
        assert repo.get_by_id(ApiAccessId(1)).enabled is False

    def test_find_is_exact_match(self, tmp_path):
        repo = JsonApiAccessRepository(tmp_path / "api_accesses.json")
        repo.save(_new())
        assert repo.find_by_client_name("Shop A") is not None
        assert repo.find_by_client_name("shop a") is None
        assert repo.find_by_api_client_id("shopA-1") is not None
        assert repo.find_by_api_client_id("SHOPA-1") is None

    def test_get_missing_returns_none(self, tmp_path):
        repo = JsonApiAccessRepository(tmp_path / "api_accesses.json")
        assert repo.get_by_id(ApiAccessId(3)) is None

    def test_store_partial_update_on_disk(self, tmp_path):
        path = tmp_path / "api_accesses.json"
        store = ApiAccessStore(JsonApiAccessRepository(path))
        api_access_id = store.add(_new())
        store.update(api_access_id, ApiAccessPatch(description="changed"))

        stored = JsonApiAccessRepository(path).get_by_id(api_access_id)
        assert stored.description == "changed"
        assert stored.client_name == "Shop A"
        assert stored.enabled is True

    def test_save_leaves_no_temp_files(self, tmp_path):
        repo = JsonApiAccessRepository(tmp_path / "api_accesses.json")
        repo.save(_new())
        repo.save(_new("Shop B", "shopB-1"))
        assert [p.name for p in tmp_path.iterdir()] == ["api_accesses.json"]

    def test_corrupt_file_raises_domain_error(self, tmp_path):
        path = tmp_path / "api_accesses.json"
        repo = JsonApiAccessRepository(path)
        path.write_text("", encoding="utf-8")
        with pytest.raises(ApiAccessException, match="not valid JSON"):
            repo.list_all()
