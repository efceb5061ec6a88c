from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping

@dataclass(frozen=True)
class Principal:
    """Identity context handed back by a credential validator."""
    subject: str
    claims: Mapping[str, Any] = field(default_factory=dict)
