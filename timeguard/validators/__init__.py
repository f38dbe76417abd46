"""
timeguard string validators.

Validators are read-only, side-effect-free checks a host schema framework
runs against configured attribute values.

They never raise on bad input; failures come back as outcomes or diagnostics.
"""
from __future__ import annotations

from timeguard.validators.base import (
    Presence,
    StringRequest,
    StringResponse,
    StringValidator,
    StringValue,
    ValidationOutcome,
    ValidatorStatus,
)
from timeguard.validators.diagnostics import (
    Diagnostic,
    Diagnostics,
    invalid_attribute_value_match,
)
from timeguard.validators.rfc3339 import (
    ParsedTimestamp,
    TimeFormatError,
    format_rfc3339,
    parse_time,
)
from timeguard.validators.timestamp import (
    TimeValidationAttempt,
    TimeValidator,
    new_time_validator,
)

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "ParsedTimestamp",
    "Presence",
    "StringRequest",
    "StringResponse",
    "StringValidator",
    "StringValue",
    "TimeFormatError",
    "TimeValidationAttempt",
    "TimeValidator",
    "ValidationOutcome",
    "ValidatorStatus",
    "format_rfc3339",
    "invalid_attribute_value_match",
    "new_time_validator",
    "parse_time",
]
