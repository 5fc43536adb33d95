"""Base model for immutable value records carried by the test tree."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Frozen record; nodes share these by reference without copying."""

    model_config = ConfigDict(frozen=True)
