"""Bearer token verification."""

import logging
from typing import Any
from uuid import UUID

import jwt

from pubgate.config import JwtConfig
from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.auth.model.value import UserId
from pubgate.domain.shared.error import AuthorizationError
from pubgate.domain.shared.service import Service

logger = logging.getLogger(__name__)


class TokenService(Service):
    """Verifies HS256 access tokens issued by the platform's auth service.

    The ``sub`` claim is the user id and ``roles`` lists platform role names.
    """

    _config: JwtConfig

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Decode and verify a token.

        Raises:
            jwt.InvalidTokenError: If token is invalid or expired
        """
        return jwt.decode(
            token,
            self._config.secret,
            algorithms=[self._config.algorithm],
            audience=self._config.audience,
            options={"require": ["sub", "exp"]},
        )

    def principal_from_token(self, token: str) -> Principal:
        try:
            payload = self.validate_access_token(token)
        except jwt.ExpiredSignatureError as e:
            raise AuthorizationError("Token has expired", code="token_expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthorizationError("Invalid token", code="invalid_token") from e

        sub = payload["sub"]
        try:
            user_id = UserId(UUID(sub if isinstance(sub, str) else ""))
        except ValueError as e:
            raise AuthorizationError("Invalid token subject", code="invalid_token") from e

        claimed = payload.get("roles")
        roles = frozenset(
            Role[name]
            for name in (claimed if isinstance(claimed, list) else [])
            if isinstance(name, str) and name in Role.__members__
        )
        logger.debug("Principal resolved: user_id=%s, roles=%s", user_id, roles)
        return Principal(user_id=user_id, roles=roles)
