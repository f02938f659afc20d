from dataclasses import dataclass

from pubgate.domain.auth.model.role import Role
from pubgate.domain.auth.model.value import UserId


@dataclass(frozen=True)
class Principal:
    """The authenticated requester, resolved per request from the bearer token."""

    user_id: UserId
    roles: frozenset[Role]

    def has_role(self, role: Role) -> bool:
        """Roles are hierarchical: holding a higher role satisfies a lower one."""
        return any(r >= role for r in self.roles)
