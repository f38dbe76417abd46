from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Literal

from pydantic import BaseModel


INVALID_ATTRIBUTE_VALUE_MATCH = "invalid_attribute_value_match"


class Diagnostic(BaseModel):
    """
    Non-fatal validation finding reported back to the host framework.

    The host decides whether an error diagnostic blocks further processing.
    """
    severity: Literal["error", "warning"] = "error"
    kind: str = INVALID_ATTRIBUTE_VALUE_MATCH
    path: str
    summary: str
    detail: str = ""
    invalid_value: str = ""


@dataclass
class Diagnostics:
    """
    Ordered collection of diagnostics for one validation pass.
    """
    items: List[Diagnostic] = field(default_factory=list)

    def append(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def errors(self) -> List[Diagnostic]:
        return [d for d in self.items if d.severity == "error"]

    def has_error(self) -> bool:
        return any(d.severity == "error" for d in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def to_list(self) -> List[Dict[str, Any]]:
        return [d.model_dump() for d in self.items]


def invalid_attribute_value_match(path: str, description: str, value: str) -> Diagnostic:
    """
    Diagnostic for a value that does not match the expected format.

    Example detail:
        Attribute expires_at should be an RFC3339 string in UTC, e.g., "...", got: 2024-01-01
    """
    return Diagnostic(
        severity="error",
        kind=INVALID_ATTRIBUTE_VALUE_MATCH,
        path=path,
        summary=description,
        detail=f"Attribute {path} {description}, got: {value}",
        invalid_value=value,
    )
