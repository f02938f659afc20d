"""Machinery shared by command and query handlers.

Handler subclasses become dataclasses (so dishka can build them from their
fields) and their ``run`` is wrapped to enforce the ``__auth__`` gate first.
"""

from abc import ABCMeta
from dataclasses import dataclass
from functools import wraps
from typing import Any, dataclass_transform

from pydantic import BaseModel

from pubgate.domain.shared.authorization.gate import enforce


class Result(BaseModel): ...


def _gated(run: Any) -> Any:
    @wraps(run)
    async def gated_run(self: Any, message: Any) -> Any:
        enforce(self)
        return await run(self, message)

    return gated_run


@dataclass_transform()
class GatedHandlerMeta(ABCMeta):
    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)
            if "run" in namespace:
                cls.run = _gated(namespace["run"])
        return cls
