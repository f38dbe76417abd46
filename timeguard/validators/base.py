from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable

from timeguard.validators.diagnostics import Diagnostics


class Presence(str, Enum):
    """
    Whether a configured value is concretely present.

    - NULL:    not configured
    - UNKNOWN: configured but not resolvable yet (known after apply)
    - KNOWN:   concrete value available
    """
    NULL = "null"
    UNKNOWN = "unknown"
    KNOWN = "known"


class ValidatorStatus(str, Enum):
    """
    Canonical validator outcome states.
    """
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class StringValue:
    """
    A string attribute value as the host framework hands it over.
    """
    presence: Presence
    value: str = ""

    @classmethod
    def null(cls) -> "StringValue":
        return cls(presence=Presence.NULL)

    @classmethod
    def unknown(cls) -> "StringValue":
        return cls(presence=Presence.UNKNOWN)

    @classmethod
    def known(cls, value: str) -> "StringValue":
        return cls(presence=Presence.KNOWN, value=value)

    def is_null(self) -> bool:
        return self.presence is Presence.NULL

    def is_unknown(self) -> bool:
        return self.presence is Presence.UNKNOWN

    def value_string(self) -> str:
        # Null and unknown values have no string form.
        if self.presence is not Presence.KNOWN:
            return ""
        return self.value


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Output from a validator.

    Explainable and side-effect free. `reason` is empty when valid.
    """
    validator: str              # stable identifier, e.g. "time.rfc3339_utc"
    status: ValidatorStatus
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ValidatorStatus.VALID

    @classmethod
    def valid(cls, validator: str) -> "ValidationOutcome":
        return cls(validator=validator, status=ValidatorStatus.VALID)

    @classmethod
    def invalid(cls, validator: str, reason: str) -> "ValidationOutcome":
        return cls(validator=validator, status=ValidatorStatus.INVALID, reason=reason)


@dataclass(frozen=True)
class StringRequest:
    """
    Immutable request envelope for validating one string attribute.

    `path` is opaque to validators and only echoed back in diagnostics.
    """
    path: str
    config_value: StringValue


@dataclass
class StringResponse:
    """
    Mutable response envelope; validators append diagnostics to it.
    """
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@runtime_checkable
class StringValidator(Protocol):
    """
    Capability the host framework expects from a string attribute validator.
    """

    @property
    def name(self) -> str:
        """
        Stable, namespaced identifier.
        Example: "time.rfc3339_utc"
        """
        ...

    def description(self, ctx: Optional[Any] = None) -> str:
        """
        Plain-text explanation of what the validator enforces.
        """
        ...

    def markdown_description(self, ctx: Optional[Any] = None) -> str:
        ...

    def validate(self, candidate: str, presence: Presence) -> ValidationOutcome:
        """
        Decide whether a candidate value passes.
        Must not mutate state or perform I/O.
        """
        ...

    def validate_string(self, request: StringRequest, response: StringResponse) -> None:
        ...
