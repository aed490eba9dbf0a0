"""JSON-file-backed implementation of ApiAccessRepository."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from api_access.domain.exceptions import ApiAccessException
from api_access.domain.model.api_access import ApiAccess
from api_access.domain.model.value_objects import ApiAccessId
from api_access.domain.repository.api_access_repository import ApiAccessRepository


class JsonApiAccessRepository(ApiAccessRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ApiAccessRepository interface ----------------------------------------

    def next_id(self) -> ApiAccessId:
        records = self._load_raw()
        if not records:
            return ApiAccessId(1)
        return ApiAccessId(max(r["id"] for r in records) + 1)

    def get_by_id(self, api_access_id: ApiAccessId) -> ApiAccess | None:
        for raw in self._load_raw():
            if raw["id"] == api_access_id.value:
                return self._to_domain(raw)
        return None

    def find_by_client_name(self, client_name: str) -> ApiAccess | None:
        for raw in self._load_raw():
            if raw["client_name"] == client_name:
                return self._to_domain(raw)
        return None

    def find_by_api_client_id(self, api_client_id: str) -> ApiAccess | None:
        for raw in self._load_raw():
            if raw["api_client_id"] == api_client_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[ApiAccess]:
        records = sorted(self._load_raw(), key=lambda r: r["id"])
        return [self._to_domain(raw) for raw in records]

    def save(self, api_access: ApiAccess) -> None:
        records = self._load_raw()

        if api_access.id is None:
            api_access.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == api_access.id.value:
                records[i] = self._to_raw(api_access.id, api_access)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(api_access.id, api_access))

        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(api_access_id: ApiAccessId, api_access: ApiAccess) -> dict:
        return {
            "id": api_access_id.value,
            "client_name": api_access.client_name,
            "api_client_id": api_access.api_client_id,
            "enabled": api_access.enabled,
            "description": api_access.description,
        }

    @staticmethod
    def _to_domain(raw: dict) -> ApiAccess:
        return ApiAccess(
            id=ApiAccessId(raw["id"]),
            client_name=raw["client_name"],
            api_client_id=raw["api_client_id"],
            enabled=raw["enabled"],
            description=raw.get("description", ""),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ApiAccessException(
                f"Api access store {self._file_path} is not valid JSON"
            ) from exc

    def _persist_raw(self, records: list[dict]) -> None:
        # Write a sibling temp file and swap it in, so readers never see a
        # truncated file
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(json.dumps(records, indent=2, ensure_ascii=False) + "\n")
            tmp_path.replace(self._file_path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
