from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MethodCall(BaseModel):
    """A single method invocation sent over a method channel."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    method: str = Field(..., description="Name of the requested method.")
    arguments: dict[str, Any] | None = Field(default=None, description="Optional method arguments.")
