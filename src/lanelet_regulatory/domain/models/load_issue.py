"""Load issue domain model."""

from pydantic import BaseModel, ConfigDict


class LoadIssue(BaseModel):
    """A non-fatal problem found while loading or validating a map."""

    model_config = ConfigDict(frozen=True)

    element_id: int | None = None
    reason: str
