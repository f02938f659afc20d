"""DI provider for auth domain."""

from dishka import from_context, provide
from starlette.requests import Request

from pubgate.config import Config
from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.service.token import TokenService
from pubgate.domain.shared.error import AuthError
from pubgate.util.di.base import Provider
from pubgate.util.di.scope import Scope


class AuthProvider(Provider):
    """Resolves the request's Principal from its bearer token."""

    request = from_context(provides=Request, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_token_service(self, config: Config) -> TokenService:
        return TokenService(_config=config.auth.jwt)

    @provide(scope=Scope.UOW)
    def get_principal(self, request: Request, token_service: TokenService) -> Principal:
        """Raises AuthError when the Authorization header is absent or invalid."""
        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            raise AuthError("Authorization header required", code="missing_token")

        return token_service.principal_from_token(auth_header[7:])
