"""Handler-level authorization.

Every CommandHandler and QueryHandler declares ``__auth__``; the gate is
checked against the handler's ``principal`` field before ``run`` executes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.shared.error import AuthorizationError, ConfigurationError

if TYPE_CHECKING:
    from pubgate.domain.auth.model.role import Role

logger = logging.getLogger("pubgate.authz")


class Gate(ABC):
    @abstractmethod
    def admit(self, principal: Principal | None, handler_name: str) -> None:
        """Raise AuthorizationError unless the principal may run the handler."""


@dataclass(frozen=True)
class Public(Gate):
    def admit(self, principal: Principal | None, handler_name: str) -> None:
        return None


@dataclass(frozen=True)
class AtLeast(Gate):
    role: Role

    def admit(self, principal: Principal | None, handler_name: str) -> None:
        if principal is None:
            raise AuthorizationError("Authentication required", code="missing_token")

        logger.debug(
            "%s requires %s; user %s has %s",
            handler_name,
            self.role.name,
            principal.user_id,
            sorted(r.name for r in principal.roles),
        )
        if not principal.has_role(self.role):
            raise AuthorizationError(
                f"{handler_name} requires the {self.role.name} role or higher",
                code="access_denied",
            )


_PUBLIC = Public()


def public() -> Public:
    return _PUBLIC


def at_least(role: Role) -> AtLeast:
    return AtLeast(role=role)


def enforce(handler: Any) -> None:
    """Check ``handler`` against its class's ``__auth__`` gate."""
    handler_name = type(handler).__name__
    gate = getattr(type(handler), "__auth__", None)
    if not isinstance(gate, Gate):
        raise ConfigurationError(f"Handler {handler_name} has no __auth__ declaration")

    principal = getattr(handler, "principal", None)
    gate.admit(principal if isinstance(principal, Principal) else None, handler_name)
