"""Custom Dishka scopes for PubGate."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, config, defaults)
    - UOW: One HTTP request; every repository in it shares a single session
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
