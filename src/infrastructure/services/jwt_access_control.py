"""Infrastructure implementation of role checks backed by signed JWTs."""

from __future__ import annotations

from typing import Optional

import structlog
from jose import JWTError, jwt

from src.domain.entities.auth import Principal
from src.domain.entities.errors import ForbiddenError, UnauthorizedError
from src.domain.ports.access_control import IAccessControl

logger = structlog.get_logger(__name__)


class JWTAccessControl(IAccessControl):
    """Verify bearer tokens issued by the storefront and check the role claim."""

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm

    def require_role(self, token: Optional[str], role: str) -> Principal:
        if not token:
            raise UnauthorizedError("Authentication required")

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.info("auth.token.rejected", reason=str(exc))
            raise UnauthorizedError("Invalid token") from exc

        user_id = payload.get("userId") or payload.get("sub")
        if not user_id:
            raise UnauthorizedError("Invalid token")

        principal = Principal(
            user_id=str(user_id),
            role=str(payload.get("role", "")),
            email=payload.get("email"),
        )
        if not principal.has_role(role):
            logger.info(
                "auth.role.denied",
                user_id=principal.user_id,
                role=principal.role,
                required_role=role,
            )
            raise ForbiddenError(role)

        return principal
