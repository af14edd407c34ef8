"""
Resolution diagnostics

Best-effort translation never raises for missing mappings or malformed
payloads. Hosts that want to surface those cases pass an on_diagnostic
callback to the resolvers; DiagnosticCollector is a ready-made one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class DiagnosticKind(str, Enum):
    """Diagnostic kind"""

    MISSING_MAPPING = "missing_mapping"
    MALFORMED_PAYLOAD = "malformed_payload"


@dataclass
class Diagnostic:
    """Something the resolver skipped instead of failing"""

    kind: DiagnosticKind
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, "details": self.details}


DiagnosticSink = Callable[[Diagnostic], None]


class DiagnosticCollector:
    """Callable sink that keeps every diagnostic it receives"""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def by_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    def clear(self) -> None:
        self.diagnostics.clear()


def emit(
    sink: Optional[DiagnosticSink],
    kind: DiagnosticKind,
    message: str,
    **details: Any,
) -> None:
    """Send a diagnostic to sink when one is configured"""
    if sink is not None:
        sink(Diagnostic(kind=kind, message=message, details=details))
