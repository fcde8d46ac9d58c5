"""Diagnostics channel returned to the host with every response."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Iterator, List, Optional

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single host-visible error or warning."""
    severity: str
    summary: str
    detail: str = ""
    attribute: Optional[str] = None  # root attribute name, when attributable

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Diagnostics:
    """Ordered collection of diagnostics for one request."""

    def __init__(self, items: Optional[Iterable[Diagnostic]] = None):
        self._items: List[Diagnostic] = list(items or [])

    def add_error(self, summary: str, detail: str = "") -> None:
        self._items.append(Diagnostic(SEVERITY_ERROR, summary, detail))

    def add_attribute_error(self, attribute: str, summary: str, detail: str = "") -> None:
        self._items.append(Diagnostic(SEVERITY_ERROR, summary, detail, attribute))

    def add_warning(self, summary: str, detail: str = "") -> None:
        self._items.append(Diagnostic(SEVERITY_WARNING, summary, detail))

    def extend(self, other: Iterable[Diagnostic]) -> None:
        self._items.extend(other)

    def has_error(self) -> bool:
        return any(d.severity == SEVERITY_ERROR for d in self._items)

    def errors(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity == SEVERITY_ERROR]

    def to_list(self) -> List[Dict[str, Any]]:
        return [d.to_dict() for d in self._items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Diagnostics({self._items!r})"
