"""Domain port for role-based access checks on protected endpoints."""

from __future__ import annotations

from typing import Optional, Protocol

from src.domain.entities.auth import Principal


class IAccessControl(Protocol):
    """Resolves a credential into a principal holding a required role."""

    def require_role(self, token: Optional[str], role: str) -> Principal:
        """Return the principal behind ``token`` if it holds ``role``.

        Raises:
            UnauthorizedError: When the token is missing or invalid.
            ForbiddenError: When the principal does not hold ``role``.
        """
        ...
