"""Domain entities describing the caller of a protected endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated caller resolved from a credential."""

    user_id: str
    role: str
    email: Optional[str] = None

    def has_role(self, role: str) -> bool:
        return self.role.upper() == role.upper()
