from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from timeguard.validators.base import (
    Presence,
    StringRequest,
    StringResponse,
    StringValidator,
    ValidationOutcome,
)
from timeguard.validators.diagnostics import invalid_attribute_value_match
from timeguard.validators.rfc3339 import DEFAULT_EXAMPLE, TimeFormatError, parse_time

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "value must be an RFC3339 time string"


class TimeValidator:
    """
    String validator for RFC3339 timestamps expressed in UTC.

    Rules:
    - Null / unknown value           -> VALID (not this validator's call)
    - Not RFC3339                    -> INVALID
    - RFC3339 but not canonical UTC  -> INVALID, same reason
    - Otherwise                      -> VALID

    Instances are immutable and safe to share.
    """

    def __init__(self, *, example: str = DEFAULT_EXAMPLE) -> None:
        self._example = example

    @property
    def name(self) -> str:
        return "time.rfc3339_utc"

    def description(self, ctx: Optional[Any] = None) -> str:
        return DEFAULT_DESCRIPTION

    def markdown_description(self, ctx: Optional[Any] = None) -> str:
        return self.description(ctx)

    def validate(self, candidate: str, presence: Presence) -> ValidationOutcome:
        if presence in (Presence.NULL, Presence.UNKNOWN):
            return ValidationOutcome.valid(self.name)

        try:
            parse_time(candidate, example=self._example)
        except TimeFormatError as exc:
            return ValidationOutcome.invalid(self.name, str(exc))

        return ValidationOutcome.valid(self.name)

    def validate_string(self, request: StringRequest, response: StringResponse) -> None:
        _check_string_attribute(self.validate, request, response)


class TimeValidationAttempt:
    """
    Caller-owned wrapper for one validation attempt.

    Remembers the most recent failure reason so a host that only calls
    description() afterwards still gets the specific message. Create one
    per attempt; do not share across concurrent attempts.
    """

    def __init__(self, validator: Optional[TimeValidator] = None) -> None:
        self._validator = validator or TimeValidator()
        self._message = ""

    @property
    def name(self) -> str:
        return self._validator.name

    def description(self, ctx: Optional[Any] = None) -> str:
        if self._message:
            return self._message
        return self._validator.description(ctx)

    def markdown_description(self, ctx: Optional[Any] = None) -> str:
        return self.description(ctx)

    def validate(self, candidate: str, presence: Presence) -> ValidationOutcome:
        outcome = self._validator.validate(candidate, presence)
        if not outcome.ok:
            self._message = outcome.reason
        return outcome

    def validate_string(self, request: StringRequest, response: StringResponse) -> None:
        _check_string_attribute(self.validate, request, response)


def _check_string_attribute(
    validate: Callable[[str, Presence], ValidationOutcome],
    request: StringRequest,
    response: StringResponse,
) -> None:
    """
    Host-framework glue shared by every time validator.

    Null / unknown values are skipped; a rejected value adds one diagnostic
    whose summary is the failure reason.
    """
    value = request.config_value
    if value.is_null() or value.is_unknown():
        return

    candidate = value.value_string()
    outcome = validate(candidate, Presence.KNOWN)
    if outcome.ok:
        return

    logger.debug("rejected time value for attribute %s", request.path)
    response.diagnostics.append(
        invalid_attribute_value_match(request.path, outcome.reason, candidate)
    )


def new_time_validator() -> StringValidator:
    """
    Return a validator ensuring a configured string attribute:

    - Matches the RFC3339 format.
    - Is already in canonical UTC form.

    Null (unconfigured) and unknown (known after apply) values are skipped.
    """
    return TimeValidator()
