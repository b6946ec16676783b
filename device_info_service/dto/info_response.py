from pydantic import BaseModel, Field


class InfoResponse(BaseModel):
    """Response payload for the /api/info endpoint."""

    service_app_name: str = Field(..., description="Service name.")
    service_version: str = Field(..., description="Service version string.")
    channels: list[str] = Field(default_factory=list, description="Registered method channel names.")
    config: str = Field(..., description="Reserved config field.")
