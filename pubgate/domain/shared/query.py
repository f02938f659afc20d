from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from pubgate.domain.shared.handler import GatedHandlerMeta, Result

if TYPE_CHECKING:
    from pubgate.domain.shared.authorization.gate import Gate

__all__ = ["Query", "QueryHandler", "Result"]


class Query(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


class QueryHandler(Generic[Q, R], metaclass=GatedHandlerMeta):
    """Base class for read-only handlers."""

    __auth__: ClassVar[Gate]

    @abstractmethod
    async def run(self, query: Q) -> R: ...
