"""Application service: Add API Access use case."""

from __future__ import annotations

import logging

from api_access.application.dto import AddApiAccessCommand
from api_access.domain.exceptions import (
    ApiAccessConstraintException,
    DuplicateValueError,
    ErrorKind,
)
from api_access.domain.model.api_access import ApiAccess
from api_access.domain.model.value_objects import ApiAccessId
from api_access.domain.service.api_access_store import ApiAccessStore
from api_access.domain.service.api_access_validator import ApiAccessValidator

logger = logging.getLogger(__name__)


class AddApiAccessHandler:

    def __init__(self, store: ApiAccessStore, validator: ApiAccessValidator) -> None:
        self._store = store
        self._validator = validator

    def handle(self, command: AddApiAccessCommand) -> ApiAccessId:
        """Create a new API access and return its ID.

        Raises ApiAccessConstraintException for the first invalid field
        (clientName, apiClientId, enabled, description) or for a client
        name / client id already used by another API access.
        """
        result = self._validator.validate(command.to_patch())
        violation = result.first()
        if violation is not None:
            logger.info(
                "rejected api access creation: %s is %s",
                violation.field.value,
                violation.kind.value,
            )
            raise ApiAccessConstraintException.for_kind(violation.field, violation.kind)

        api_access = ApiAccess(
            id=None,
            client_name=command.client_name,
            api_client_id=command.api_client_id,
            enabled=command.enabled,
            description=command.description,
        )
        try:
            api_access_id = self._store.add(api_access)
        except DuplicateValueError as exc:
            logger.info("rejected api access creation: %s", exc)
            raise ApiAccessConstraintException.for_kind(
                exc.field, ErrorKind.NOT_UNIQUE, str(exc)
            ) from exc

        logger.info(
            "created api access #%s for client %r", api_access_id, api_access.api_client_id
        )
        return api_access_id
