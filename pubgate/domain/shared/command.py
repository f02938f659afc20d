from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from pubgate.domain.shared.handler import GatedHandlerMeta, Result

if TYPE_CHECKING:
    from pubgate.domain.shared.authorization.gate import Gate

__all__ = ["Command", "CommandHandler", "Result"]


class Command(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


class CommandHandler(Generic[C, R], metaclass=GatedHandlerMeta):
    """Base class for state-changing handlers.

    Declare the gate and the principal field:
        class ApproveHandler(CommandHandler[Approve, Approved]):
            __auth__ = at_least(Role.REVIEWER)
            principal: Principal
    """

    __auth__: ClassVar[Gate]

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
