from uuid import UUID, uuid4

from pydantic import RootModel


class UserId(RootModel[UUID]):
    """Platform user id, taken from the token's ``sub`` claim."""

    @classmethod
    def generate(cls) -> "UserId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)
