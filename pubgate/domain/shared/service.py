from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform()
class Service:
    """Base for domain services.

    Subclasses are dataclasses whose fields are their collaborators, so the
    DI container can construct them directly.
    """

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        dataclass(cls)
