"""Domain service: field validation for API accesses.

The validator never raises. It returns a ``ValidationResult`` listing at
most one violation per field, in the fixed field order, so callers can
decide whether to report the first one or all of them.

Rule precedence for a single field:
  1. missing / wrong type / empty where required  -> INVALID
  2. longer than the configured limit             -> TOO_LARGE
  3. contains non-printable characters            -> INVALID
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from api_access.domain.exceptions import ApiAccessField, ErrorKind
from api_access.domain.model.api_access import ApiAccessPatch
from api_access.domain.model.value_objects import FieldLimits


@dataclass(frozen=True)
class Violation:
    field: ApiAccessField
    kind: ErrorKind


@dataclass(frozen=True)
class ValidationResult:
    violations: tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def first(self) -> Violation | None:
        return self.violations[0] if self.violations else None

    def for_field(self, field: ApiAccessField) -> Violation | None:
        for violation in self.violations:
            if violation.field is field:
                return violation
        return None


class ApiAccessValidator:

    def __init__(self, limits: FieldLimits | None = None) -> None:
        self._limits = limits or FieldLimits()

    @property
    def limits(self) -> FieldLimits:
        return self._limits

    def validate(self, patch: ApiAccessPatch) -> ValidationResult:
        """Check every field present in *patch*; absent fields are skipped."""
        violations: list[Violation] = []
        for field in ApiAccessField:
            if not patch.is_set(field):
                continue
            kind = self._check(field, patch.value_of(field))
            if kind is not None:
                violations.append(Violation(field, kind))
        return ValidationResult(tuple(violations))

    def _check(self, field: ApiAccessField, value: Any) -> ErrorKind | None:
        if field is ApiAccessField.CLIENT_NAME:
            return self._check_identifier(value, self._limits.client_name)
        if field is ApiAccessField.API_CLIENT_ID:
            return self._check_identifier(value, self._limits.api_client_id)
        if field is ApiAccessField.ENABLED:
            return None if isinstance(value, bool) else ErrorKind.INVALID
        return self._check_description(value)

    @staticmethod
    def _check_identifier(value: Any, max_length: int) -> ErrorKind | None:
        if not isinstance(value, str) or not value.strip():
            return ErrorKind.INVALID
        if len(value) > max_length:
            return ErrorKind.TOO_LARGE
        if not value.isprintable():
            return ErrorKind.INVALID
        return None

    def _check_description(self, value: Any) -> ErrorKind | None:
        # Empty is allowed, None is not
        if not isinstance(value, str):
            return ErrorKind.INVALID
        if len(value) > self._limits.description:
            return ErrorKind.TOO_LARGE
        return None
