from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base for mutable aggregate roots. Assignments are re-validated."""

    model_config = ConfigDict(validate_assignment=True)
