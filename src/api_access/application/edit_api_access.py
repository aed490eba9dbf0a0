"""Application service: Edit API Access use case."""

from __future__ import annotations

import logging

from api_access.application.dto import EditApiAccessCommand
from api_access.domain.exceptions import (
    ApiAccessConstraintException,
    DuplicateValueError,
    ErrorKind,
)
from api_access.domain.service.api_access_store import ApiAccessStore
from api_access.domain.service.api_access_validator import ApiAccessValidator

logger = logging.getLogger(__name__)


class EditApiAccessHandler:

    def __init__(self, store: ApiAccessStore, validator: ApiAccessValidator) -> None:
        self._store = store
        self._validator = validator

    def handle(self, command: EditApiAccessCommand) -> None:
        """Change the supplied fields of an existing API access.

        The target must exist (ApiAccessNotFoundException otherwise).
        Only supplied fields are validated and written; an edit with no
        fields is a no-op.
        """
        api_access_id = self._store.resolve_id(command.api_access_id)
        self._store.get(api_access_id)

        patch = command.to_patch()
        violation = self._validator.validate(patch).first()
        if violation is not None:
            logger.info(
                "rejected edit of api access #%s: %s is %s",
                api_access_id,
                violation.field.value,
                violation.kind.value,
            )
            raise ApiAccessConstraintException.for_kind(violation.field, violation.kind)

        if patch.is_empty:
            return

        try:
            self._store.update(api_access_id, patch)
        except DuplicateValueError as exc:
            logger.info("rejected edit of api access #%s: %s", api_access_id, exc)
            raise ApiAccessConstraintException.for_kind(
                exc.field, ErrorKind.NOT_UNIQUE, str(exc)
            ) from exc

        logger.info(
            "updated api access #%s (%s)",
            api_access_id,
            ", ".join(sorted(patch.provided())),
        )
