"""Fields every command output carries."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Base for command outputs. Commands report problems here instead of raising."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Fatal problems, empty when the command succeeded")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems")
