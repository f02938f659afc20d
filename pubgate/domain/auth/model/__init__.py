from .principal import Principal
from .role import Role
from .value import UserId

__all__ = ["Principal", "Role", "UserId"]
