"""Base model for everything resolved from InnerTube responses."""

from pydantic import BaseModel, ConfigDict


class InnerTubeModel(BaseModel):
    """Immutable model; unknown keys are ignored.

    Fields may be populated by their Python name or by their wire alias.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
